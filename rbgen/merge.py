#!/usr/bin/env python3
"""
Merge localized messages onto source messages.

Localized bundles are often incomplete. Merging them onto the source
messages guarantees every bundle contains all strings the application
needs, falling back to the source language where a translation is missing.
"""

from typing import Any, Mapping


def merge_messages(source: Mapping[str, Any], localized: Mapping[str, Any]) -> dict[str, Any]:
    """
    Deep-merge localized messages onto a copy of the source messages.

    - Keys present in both, with nested mappings on both sides: merged recursively
    - Keys present in both otherwise: localized value wins
    - Keys only in source: kept (in source order)
    - Keys only in localized: added (after the source keys)

    Neither argument is modified.

    Args:
        source: Source (fallback) messages
        localized: Localized messages

    Returns:
        New merged mapping
    """
    merged = {key: _copy(value) for key, value in source.items()}

    for key, value in localized.items():
        current = merged.get(key)
        if isinstance(current, Mapping) and isinstance(value, Mapping):
            merged[key] = merge_messages(current, value)
        else:
            merged[key] = _copy(value)

    return merged


def _copy(value: Any) -> Any:
    if isinstance(value, Mapping):
        return {k: _copy(v) for k, v in value.items()}
    return value
