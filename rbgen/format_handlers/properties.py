#!/usr/bin/env python3
"""
Java .properties format handler.

Handles parsing of .properties translation files into ordered message
mappings, optionally grouping dotted keys into nested namespaces.
"""

import re
from typing import Iterator

from .base import SourceHandler, Messages

WHITESPACE = ' \t\f'
SEPARATORS = '=:'
HEX_DIGITS = '0123456789abcdefABCDEF'
ESCAPES = {'t': '\t', 'n': '\n', 'r': '\r', 'f': '\f'}
NAMESPACE_DELIMITER = '.'

# Only these end a line; \f and other Unicode breaks are part of the text
LINE_BREAK = re.compile(r'\r\n|\r|\n')


class PropertiesSyntaxError(ValueError):
    """Raised on malformed .properties content."""

    def __init__(self, message: str, line: int):
        super().__init__(f"{message} (line {line})")
        self.line = line


class PropertiesHandler(SourceHandler):
    """
    Handler for .properties files.

    .properties format structure:
    ```
    # Comment
    ! Also a comment
    greeting = Hello
    user.logout: Log out
    multiline = first part \\
                second part
    unicode = caf\\u00e9
    ```

    With namespaces enabled, `user.logout` becomes {"user": {"logout": ...}}.
    """

    @property
    def name(self) -> str:
        return "properties"

    @property
    def file_extensions(self) -> list[str]:
        return ["properties"]

    def parse(self, content: str, use_namespaces: bool = False) -> Messages:
        """
        Parse .properties content into a message mapping.

        Args:
            content: Raw .properties file content
            use_namespaces: Split keys on '.' into nested mappings

        Returns:
            Ordered mapping of key -> string (or nested mapping)
        """
        messages: Messages = {}

        for line_num, line in self._logical_lines(content):
            key, value = self._split_key_value(line, line_num)

            if use_namespaces:
                self._set_namespaced(messages, key, value)
            else:
                messages[key] = value

        return messages

    def _logical_lines(self, content: str) -> Iterator[tuple[int, str]]:
        """Yield (line number, text) for each non-comment logical line."""
        lines = LINE_BREAK.split(content)
        i = 0

        while i < len(lines):
            line_num = i + 1
            line = lines[i].lstrip(WHITESPACE)
            i += 1

            if not line or line[0] in '#!':
                continue

            # Join continuation lines
            while self._continues(line) and i < len(lines):
                line = line[:-1] + lines[i].lstrip(WHITESPACE)
                i += 1

            # Dangling backslash on the last line
            if self._continues(line):
                line = line[:-1]

            yield line_num, line

    @staticmethod
    def _continues(line: str) -> bool:
        """A line continues when it ends in an odd number of backslashes."""
        trailing = len(line) - len(line.rstrip('\\'))
        return trailing % 2 == 1

    def _split_key_value(self, line: str, line_num: int) -> tuple[str, str]:
        """Split a logical line at the first unescaped separator."""
        n = len(line)
        i = 0
        while i < n:
            ch = line[i]
            if ch == '\\':
                i += 2
                continue
            if ch in SEPARATORS or ch in WHITESPACE:
                break
            i += 1
        i = min(i, n)

        key = line[:i]

        j = i
        while j < n and line[j] in WHITESPACE:
            j += 1
        if j < n and line[j] in SEPARATORS:
            j += 1
        while j < n and line[j] in WHITESPACE:
            j += 1

        return self._unescape(key, line_num), self._unescape(line[j:], line_num)

    def _unescape(self, text: str, line_num: int) -> str:
        """Resolve backslash escapes, including \\uXXXX."""
        if '\\' not in text:
            return text

        out = []
        i = 0
        n = len(text)
        while i < n:
            ch = text[i]
            if ch != '\\':
                out.append(ch)
                i += 1
                continue

            i += 1
            if i >= n:
                break

            esc = text[i]
            if esc == 'u':
                digits = text[i + 1:i + 5]
                if len(digits) != 4 or not all(c in HEX_DIGITS for c in digits):
                    raise PropertiesSyntaxError(
                        f"Malformed \\uxxxx escape: \\u{digits}", line_num
                    )
                out.append(chr(int(digits, 16)))
                i += 5
                continue

            out.append(ESCAPES.get(esc, esc))
            i += 1

        return ''.join(out)

    @staticmethod
    def _set_namespaced(messages: Messages, key: str, value: str) -> None:
        """
        Set value at a dotted key path, creating intermediate mappings.

        A flat value standing where a namespace is needed is replaced by
        the namespace (and vice versa): the later line wins.
        """
        parts = key.split(NAMESPACE_DELIMITER)
        node = messages
        for part in parts[:-1]:
            child = node.get(part)
            if not isinstance(child, dict):
                child = {}
                node[part] = child
            node = child
        node[parts[-1]] = value
