#!/usr/bin/env python3
"""
Format handlers for translation sources and output bundles.

Source formats:
- Properties: Java-style .properties files

Bundle formats:
- json: JSON object per locale
- js: JavaScript file assigning the bundle to a variable
"""

from .base import (
    BundleFormat,
    FormatRegistry,
    Messages,
    SourceHandler,
    UnsupportedFormatError,
)
from .properties import PropertiesHandler, PropertiesSyntaxError
from .json_bundle import JsonBundleFormat
from .js_bundle import DEFAULT_JS_VARIABLE, JsBundleFormat

# Register bundle formats
FormatRegistry.register(JsonBundleFormat)
FormatRegistry.register(JsBundleFormat)

__all__ = [
    'BundleFormat',
    'FormatRegistry',
    'Messages',
    'SourceHandler',
    'UnsupportedFormatError',
    'PropertiesHandler',
    'PropertiesSyntaxError',
    'JsonBundleFormat',
    'JsBundleFormat',
    'DEFAULT_JS_VARIABLE',
]
