#!/usr/bin/env python3
"""
JSON bundle format.

Writes the merged messages as a single compact JSON object, keeping key
order and nesting namespaces as nested objects.
"""

import json
from typing import Optional

from .base import BundleFormat, Messages


def dump_messages(messages: Messages) -> str:
    """Compact JSON text for a message mapping, non-ASCII kept as is."""
    return json.dumps(messages, ensure_ascii=False, separators=(',', ':'))


class JsonBundleFormat(BundleFormat):
    """
    Bundle format for JSON resource bundles.

    Output looks like:
    ```json
    {"greeting":"Bonjour","user":{"logout":"Se déconnecter"}}
    ```
    """

    @property
    def name(self) -> str:
        return "json"

    @property
    def file_extension(self) -> str:
        return "json"

    @property
    def description(self) -> str:
        return "JSON object, one file per locale"

    def render(self, messages: Messages, variable_name: Optional[str] = None) -> str:
        return dump_messages(messages)
