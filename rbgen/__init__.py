"""
rbgen - Resource bundle generator for .properties translation files

Converts every .properties file in a directory into a JSON or JavaScript
resource bundle, merging each locale with the source bundle so missing
translations fall back to source-language strings.

Quick start:
    rbgen -s translations/ -o public/i18n/
    rbgen -s translations/ -o public/i18n/ -t js --js-variable I18N
    rbgen -s translations/ -o public/i18n/ --watch
"""

__version__ = "1.0.0"

from .config import ConfigurationError, GeneratorConfig
from .converter import BundleConverter, ConversionResult, MissingSourceFileError, RunSummary
from .merge import merge_messages
from .watcher import PropertiesWatcher, WatchEvent

__all__ = [
    "ConfigurationError",
    "GeneratorConfig",
    "BundleConverter",
    "ConversionResult",
    "MissingSourceFileError",
    "RunSummary",
    "merge_messages",
    "PropertiesWatcher",
    "WatchEvent",
]
