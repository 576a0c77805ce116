#!/usr/bin/env python3
"""
Base classes for format handlers.

SourceHandler is the abstract base class for translation file parsers
(the files found in the source directory). BundleFormat is the abstract
base class for output bundle serializers (the files written to the
output directory). FormatRegistry maps output type names to bundle formats.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional


# Ordered key -> string (or key -> nested mapping when namespaces are used)
Messages = dict[str, Any]


class UnsupportedFormatError(ValueError):
    """Raised when an output type has no registered bundle format."""


class SourceHandler(ABC):
    """
    Abstract base class for translation source file parsers.

    A source handler turns the raw text of one translation document into an
    ordered mapping of message keys to strings.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable format name."""
        pass

    @property
    @abstractmethod
    def file_extensions(self) -> list[str]:
        """List of file extensions this handler supports (without dot)."""
        pass

    @abstractmethod
    def parse(self, content: str, use_namespaces: bool = False) -> Messages:
        """
        Parse format-specific content into a message mapping.

        Args:
            content: Raw file content as string
            use_namespaces: Group dotted keys into nested mappings

        Returns:
            Ordered mapping of key -> string (or nested mapping)
        """
        pass

    def matches(self, filename: str) -> bool:
        """Whether a file name belongs to this format."""
        return any(filename.endswith('.' + ext) for ext in self.file_extensions)

    def strip_extension(self, filename: str) -> str:
        """
        Remove the recognized extension from a file name.

        Raises:
            ValueError: If the file name does not end in a recognized extension
        """
        for ext in self.file_extensions:
            suffix = '.' + ext
            if filename.endswith(suffix):
                return filename[:-len(suffix)]
        raise ValueError(f"Not a {self.name} file: {filename}")


class BundleFormat(ABC):
    """
    Abstract base class for output bundle formats.

    Each bundle format serializes a merged message mapping into the text
    written to disk for one locale.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Output type name, as given on the command line."""
        pass

    @property
    @abstractmethod
    def file_extension(self) -> str:
        """Extension of generated bundle files (without dot)."""
        pass

    @property
    def description(self) -> str:
        return ""

    @abstractmethod
    def render(self, messages: Messages, variable_name: Optional[str] = None) -> str:
        """
        Serialize a message mapping to bundle text.

        Args:
            messages: Merged message mapping
            variable_name: Variable to assign the bundle to (script formats only)

        Returns:
            Bundle file content
        """
        pass


class FormatRegistry:
    """Registry of available bundle formats."""

    _formats: dict[str, type[BundleFormat]] = {}

    @classmethod
    def register(cls, format_class: type[BundleFormat]) -> None:
        """Register a bundle format class."""
        # Create instance to get properties
        bundle_format = format_class()
        cls._formats[bundle_format.name] = format_class

    @classmethod
    def is_supported(cls, name: str) -> bool:
        return name in cls._formats

    @classmethod
    def get_format(cls, name: str) -> BundleFormat:
        """Get bundle format instance by output type name (exact match)."""
        if name not in cls._formats:
            available = ', '.join(cls._formats.keys())
            raise UnsupportedFormatError(
                f"Unsupported type: {name}. Must be one of: {available}"
            )
        return cls._formats[name]()

    @classmethod
    def list_formats(cls) -> list[dict[str, Any]]:
        """List all registered bundle formats with their extensions."""
        result = []
        for name, format_class in cls._formats.items():
            bundle_format = format_class()
            result.append({
                'name': bundle_format.name,
                'extension': bundle_format.file_extension,
                'description': bundle_format.description,
            })
        return result
