#!/usr/bin/env python3
"""
rbgen - Resource Bundle Generator

Converts a directory of .properties translation files into resource
bundles, one per locale. Every localized file is merged with the source
bundle so strings that are not translated yet fall back to the source
language.

Output types:
    json - JSON object per locale (fr.properties -> fr.json)
    js   - JavaScript assigning the bundle to a variable (fr.properties -> fr.js)

Examples:
    rbgen -s src/main/resources/ -o build/bundles/
    rbgen -s translations/ -o public/i18n/ -t js --js-variable I18N
    rbgen -s translations/ -o public/i18n/ -n --watch
"""

import argparse
import json
import logging
import sys
from typing import Optional

from .config import GeneratorConfig
from .converter import BundleConverter, MissingSourceFileError
from .format_handlers import FormatRegistry
from .watcher import PropertiesWatcher, WatchEvent

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(levelname)s: %(message)s"


def setup_logging(verbose: bool = False) -> None:
    """Send diagnostics to stderr; debug lines only with --verbose."""
    logging.basicConfig(format=LOG_FORMAT, stream=sys.stderr)
    logging.getLogger("rbgen").setLevel(logging.DEBUG if verbose else logging.INFO)


def cmd_list_formats() -> dict:
    """List supported output types."""
    formats = FormatRegistry.list_formats()
    return {
        "status": "ok",
        "formats": formats,
        "summary": f"{len(formats)} output types supported: {', '.join(f['name'] for f in formats)}",
    }


def cmd_generate(config: GeneratorConfig) -> dict:
    """Generate all resource bundles once."""
    converter = BundleConverter(config)
    summary = converter.run()
    return summary.to_dict()


def cmd_watch(config: GeneratorConfig) -> None:
    """Regenerate all resource bundles whenever a .properties file changes."""
    converter = BundleConverter(config)

    def on_change(event: WatchEvent) -> None:
        logger.info("%s changed, generate resource bundles", event.filename)
        try:
            summary = converter.run()
        except MissingSourceFileError as e:
            logger.error("%s", e)
            return
        except (OSError, ValueError) as e:
            logger.error("Failed to read source bundle %s: %s", config.source_bundle_path, e)
            return
        logger.info(summary.to_dict()["summary"])

    watcher = PropertiesWatcher(
        config.source_directory,
        on_change,
        poll_interval=config.poll_interval,
    )

    logger.info("Start watching: %s", config.source_directory)
    try:
        watcher.run()
    except KeyboardInterrupt:
        watcher.stop()
        logger.info("Stop watching: %s", config.source_directory)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rbgen",
        description="rbgen - Generate JSON/JS resource bundles from .properties files",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Convert ./*.properties into ./*.json, using en.properties as fallback
  rbgen

  # Generate JavaScript bundles into another directory
  rbgen -s translations/ -o public/i18n/ -t js --js-variable I18N

  # Nest dotted keys and rebuild on every change
  rbgen -s translations/ -o public/i18n/ -n --watch

Config file (YAML, flags on the command line take precedence):
  source-directory: translations/
  output-directory: public/i18n/
  output-type: js
  js-variable: I18N
        """,
    )

    # None defaults mark options as "not given" so config files can fill them
    parser.add_argument("--source-directory", "-s", help="Source directory (default: .)")
    parser.add_argument("--output-directory", "-o", help="Output directory (default: .)")
    parser.add_argument("--source-bundle", "-b", help="Source bundle file (default: en.properties)")
    parser.add_argument("--use-namespaces", "-n", action="store_true", default=None,
                        help="Use namespaces when parsing properties files")
    parser.add_argument("--output-type", "-t", help="Output type: json, js (default: json)")
    parser.add_argument("--watch", "-w", action="store_true", default=None,
                        help="Watch the source directory for changes and rebuild resource bundles")
    parser.add_argument("--js-variable", help="Variable name used to generate JavaScript files (default: MESSAGES)")
    parser.add_argument("--poll-interval", type=float, help="Watch polling interval in seconds (default: 0.5)")
    parser.add_argument("--config", "-c", help="YAML config file")
    parser.add_argument("--verbose", "-v", action="store_true", help="Show debug output")
    parser.add_argument("--list-formats", action="store_true", help="List supported output types")

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.verbose)

    try:
        if args.list_formats:
            print(json.dumps(cmd_list_formats(), indent=2))
            return 0

        config = GeneratorConfig.from_sources(
            cli_options={
                "source_directory": args.source_directory,
                "output_directory": args.output_directory,
                "source_bundle": args.source_bundle,
                "use_namespaces": args.use_namespaces,
                "output_type": args.output_type,
                "watch": args.watch,
                "js_variable": args.js_variable,
                "poll_interval": args.poll_interval,
            },
            config_file=args.config,
        )
        config.validate()

        logger.debug("Use namespaces: %s", config.use_namespaces)
        logger.debug("Output directory: %s", config.output_directory)

        if config.watch:
            cmd_watch(config)
            return 0

        result = cmd_generate(config)
        print(json.dumps(result, indent=2, ensure_ascii=False))
        return 0 if result["status"] == "ok" else 1

    except Exception as e:
        # ConfigurationError, MissingSourceFileError and anything unexpected
        print(json.dumps({
            "status": "error",
            "error": str(e),
            "error_type": type(e).__name__,
        }), file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
