"""Reader package - holds the reader settings and the Configurable protocol."""

from readerprefs.reader.protocols import Configurable, MockConfigurable
from readerprefs.reader.settings import ReaderSettings, ReaderSettingsFactory

__all__ = ["Configurable", "MockConfigurable", "ReaderSettings", "ReaderSettingsFactory"]
