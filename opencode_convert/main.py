"""
Command-line interface for generating an OpenCode config from a Claude Code tree.

Run from the project root with no arguments:

    opencode-convert
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import NoReturn

from opencode_convert.core.config import ConversionConfig
from opencode_convert.exceptions import ConversionError, ProjectRootError
from opencode_convert.plugins.opencode.orchestrator import OpenCodeOrchestrator

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_NOT_PROJECT_ROOT = 2


def configure_logging(debug: bool = False, verbose: bool = False) -> None:
    """Configure application logging.

    Args:
        debug: Enable debug-level logging if True.
        verbose: Enable info-level logging from the converters if True.
    """
    if debug:
        level = logging.DEBUG
        format_str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    elif verbose:
        level = logging.INFO
        format_str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    else:
        # Quiet mode: only the summary line and problems are shown
        level = logging.WARNING
        format_str = "%(levelname)s: %(message)s"

    logging.basicConfig(
        level=level,
        format=format_str,
        stream=sys.stdout,
        force=True,  # Override existing configuration
    )


def parse_arguments(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments. None of them are required."""
    parser = argparse.ArgumentParser(
        description=(
            "Regenerate the .opencode/ config directory from the Claude Code "
            "agents, commands, skills, rules and MCP servers of this repo"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Regenerate from the current directory
  opencode-convert

  # Regenerate another checkout, with converter logging
  opencode-convert --root ../everything-claude-code --verbose
        """,
    )
    parser.add_argument(
        "--root",
        type=Path,
        default=None,
        help="Project root holding package.json (default: current directory)",
    )
    parser.add_argument(
        "--debug", action="store_true", help="Enable debug logging for detailed output"
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose logging from the converters",
    )
    return parser.parse_args(argv)


def run_conversion(
    project_root: Path | None = None, debug: bool = False, verbose: bool = False
) -> NoReturn:
    """Execute the conversion and exit.

    Raises:
        SystemExit: Always; 0 on success, 2 when the project root is wrong,
            1 on any other failure.
    """
    configure_logging(debug, verbose)
    logger = logging.getLogger(__name__)

    config = ConversionConfig(project_root=project_root or Path.cwd())
    orchestrator = OpenCodeOrchestrator(config)

    try:
        summary = orchestrator.translate()
    except ProjectRootError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        sys.exit(EXIT_NOT_PROJECT_ROOT)
    except ConversionError as e:
        logger.error(f"Conversion error: {e}")
        if debug:
            logger.exception("Full traceback:")
        sys.exit(EXIT_FAILURE)
    except OSError as e:
        logger.error(f"File system error: {e}")
        sys.exit(EXIT_FAILURE)

    print(summary.format_line(config.output_dir_name))
    sys.exit(EXIT_OK)


def main(argv: list[str] | None = None) -> NoReturn:
    args = parse_arguments(argv)
    run_conversion(args.root, args.debug, args.verbose)


if __name__ == "__main__":
    main()
