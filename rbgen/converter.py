#!/usr/bin/env python3
"""
Resource bundle conversion.

Reads the source bundle used for merges, then converts every .properties
file in the source directory into a bundle of the requested type. Each
localized file is merged onto the source strings so generated bundles
contain every string the application needs, even before translations
are available.
"""

import logging
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Optional

from .config import GeneratorConfig
from .format_handlers import (
    BundleFormat,
    FormatRegistry,
    Messages,
    PropertiesHandler,
    SourceHandler,
)
from .merge import merge_messages

logger = logging.getLogger(__name__)


class MissingSourceFileError(FileNotFoundError):
    """Raised when the source bundle does not exist."""

    def __init__(self, path: Path, directory: Path):
        super().__init__(f"No source file. Looking for: {path} in: {directory}")
        self.path = path
        self.directory = directory


@dataclass
class ConversionResult:
    """Outcome of converting a single file."""
    source: str
    output: str
    status: str = "converted"  # converted, failed
    error: Optional[str] = None


@dataclass
class RunSummary:
    """Outcome of converting a whole source directory."""
    results: list[ConversionResult] = field(default_factory=list)

    @property
    def converted(self) -> list[ConversionResult]:
        return [r for r in self.results if r.status == "converted"]

    @property
    def failed(self) -> list[ConversionResult]:
        return [r for r in self.results if r.status == "failed"]

    @property
    def ok(self) -> bool:
        return not self.failed

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON output."""
        return {
            "status": "ok" if self.ok else "error",
            "converted": [asdict(r) for r in self.converted],
            "failed": [asdict(r) for r in self.failed],
            "summary": f"{len(self.converted)} bundle(s) generated, {len(self.failed)} failed",
        }


class BundleConverter:
    """
    Converts a directory of translation files into resource bundles.

    Handles:
    - Reading the source bundle used as fallback
    - Finding translation files in the source directory
    - Merging each with the source strings
    - Writing bundles of the configured type
    """

    def __init__(
        self,
        config: GeneratorConfig,
        source_handler: Optional[SourceHandler] = None,
    ):
        """
        Initialize a converter.

        Args:
            config: Generator options
            source_handler: Parser for translation files (defaults to .properties)

        Raises:
            UnsupportedFormatError: If config.output_type is not registered
        """
        self.config = config
        self.source_handler = source_handler or PropertiesHandler()
        self.bundle_format: BundleFormat = FormatRegistry.get_format(config.output_type)

    def load_source_strings(self) -> Messages:
        """
        Read the source bundle.

        Raises:
            MissingSourceFileError: If the source bundle does not exist
        """
        path = self.config.source_bundle_path
        logger.debug("Read source bundle file: %s", path)

        if not path.is_file():
            raise MissingSourceFileError(path, self.config.source_directory)

        return self._read_messages(path)

    def list_source_files(self) -> list[Path]:
        """Translation files in the source directory, sorted by name."""
        directory = self.config.source_directory
        return sorted(
            entry for entry in directory.iterdir()
            if self.source_handler.matches(entry.name) and entry.is_file()
        )

    def output_path_for(self, filename: str) -> Path:
        """
        Output path of the generated bundle for a translation file.

        Args:
            filename: Name of the file to be converted (e.g. fr.properties)

        Returns:
            Path in the output directory with the bundle extension (e.g. fr.json)

        Raises:
            ValueError: If filename is not a recognized translation file
        """
        stem = self.source_handler.strip_extension(filename)
        return self.config.output_directory / f"{stem}.{self.bundle_format.file_extension}"

    def convert_file(self, source_strings: Messages, path: Path) -> ConversionResult:
        """
        Convert one translation file into a bundle.

        Failures are logged and reported in the result, not raised, so one
        bad file does not stop the others.
        """
        output_path = self.output_path_for(path.name)
        result = ConversionResult(source=str(path), output=str(output_path))

        try:
            localized_strings = self._read_messages(path)
            merged = merge_messages(source_strings, localized_strings)
            content = self.bundle_format.render(merged, variable_name=self.config.js_variable)
            output_path.write_text(content, encoding="utf-8")
        except (OSError, ValueError) as e:
            # ValueError covers UnicodeDecodeError and PropertiesSyntaxError
            logger.error("Failed to convert %s: %s", path, e)
            result.status = "failed"
            result.error = f"{type(e).__name__}: {e}"
            return result

        logger.debug("%s --> %s", path, output_path)
        return result

    def convert_all(self, source_strings: Messages) -> RunSummary:
        """Convert all translation files in the source directory."""
        logger.debug("Convert properties files")

        self.config.output_directory.mkdir(parents=True, exist_ok=True)

        summary = RunSummary()
        for path in self.list_source_files():
            summary.results.append(self.convert_file(source_strings, path))

        return summary

    def run(self) -> RunSummary:
        """
        Read the source bundle and convert the whole source directory.

        Raises:
            MissingSourceFileError: If the source bundle does not exist
        """
        source_strings = self.load_source_strings()
        return self.convert_all(source_strings)

    def _read_messages(self, path: Path) -> Messages:
        content = path.read_text(encoding="utf-8")
        return self.source_handler.parse(content, use_namespaces=self.config.use_namespaces)
