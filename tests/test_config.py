from pathlib import Path

import pytest

from readerprefs.common.enums import ReadingProgression, Theme
from readerprefs.config import ReaderDefaults
from readerprefs.controller import TEST_CONFIG_YAML

BAD_YAML = """
font_size: 12.0
"""

UNSORTED_STEPS_YAML = """
font_size_steps: [1.0, 0.5]
"""

UNSUPPORTED_PROGRESSION_YAML = """
reading_progression: ttb
supported_reading_progressions: [ltr, rtl]
"""


def test_defaults() -> None:
    cfg = ReaderDefaults()
    assert cfg.font_size == 1.0
    assert cfg.publisher_styles is True
    assert cfg.reading_progression is ReadingProgression.LTR


def test_valid_config(tmp_path: Path) -> None:
    cfg_file = tmp_path / "reader.yaml"
    cfg_file.write_text(TEST_CONFIG_YAML)
    cfg = ReaderDefaults.load(cfg_file)
    assert isinstance(cfg, ReaderDefaults)
    assert cfg.font_size == 1.2
    assert cfg.column_count == 2
    assert cfg.theme is Theme.SEPIA
    assert cfg.reading_progression is ReadingProgression.RTL


def test_empty_config_keeps_defaults(tmp_path: Path) -> None:
    cfg_file = tmp_path / "reader.yaml"
    cfg_file.write_text("")
    assert ReaderDefaults.load(cfg_file) == ReaderDefaults()


@pytest.mark.parametrize("content", [BAD_YAML, UNSORTED_STEPS_YAML, UNSUPPORTED_PROGRESSION_YAML])
def test_invalid_config(tmp_path: Path, content: str) -> None:
    cfg_file = tmp_path / "bad.yaml"
    cfg_file.write_text(content)
    with pytest.raises(RuntimeError):
        ReaderDefaults.load(cfg_file)


def test_load_from_env_var(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    cfg_file = tmp_path / "custom.yaml"
    cfg_file.write_text("theme: dark\n")
    monkeypatch.setenv("READERPREFS_CONFIG", str(cfg_file))
    assert ReaderDefaults.load().theme is Theme.DARK


def test_missing_env_var_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("READERPREFS_CONFIG", str(tmp_path / "missing.yaml"))
    with pytest.raises(FileNotFoundError):
        ReaderDefaults.load()


def test_load_from_default_paths(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("READERPREFS_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)
    (tmp_path / "reader.yaml").write_text("scroll: true\n")
    assert ReaderDefaults.load().scroll is True


def test_env_interpolation(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("READER_THEME", "sepia")
    cfg_file = tmp_path / "reader.yaml"
    cfg_file.write_text("theme: ${READER_THEME}\n")
    assert ReaderDefaults.load(cfg_file).theme is Theme.SEPIA


def test_find_config_path_prefers_env_var(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    cfg_file = tmp_path / "custom.yaml"
    cfg_file.write_text("")
    monkeypatch.chdir(tmp_path)
    (tmp_path / "reader.yaml").write_text("")
    monkeypatch.setenv("READERPREFS_CONFIG", str(cfg_file))
    assert ReaderDefaults.find_config_path() == cfg_file

    monkeypatch.delenv("READERPREFS_CONFIG")
    assert ReaderDefaults.find_config_path() == Path("reader.yaml")


def test_invalid_yaml_syntax(tmp_path: Path) -> None:
    cfg_file = tmp_path / "reader.yaml"
    cfg_file.write_text("theme: [dark\n")
    with pytest.raises(RuntimeError, match="Unable to read config YAML"):
        ReaderDefaults.load(cfg_file)
