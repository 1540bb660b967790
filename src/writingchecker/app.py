# ───────────────────────── src/writingchecker/app.py ─────────────────────────
"""
CLI entrypoint and main application logic.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

import ftfy
from rich.console import Console
from rich.text import Text

from . import __version__
from .checks import WritingChecker
from .config import Config, load_config
from .logging_utils import log_error, setup_logger
from .report import (
    print_header,
    print_matches,
    print_statistics,
    print_summary,
    print_usage,
)
from .speller import Corrector, FrequencyModel

logger = logging.getLogger(__name__)


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments.

    Args:
        argv: Argument list, defaults to sys.argv[1:]

    Returns:
        Parsed arguments namespace
    """
    parser = argparse.ArgumentParser(
        prog="writing-checker",
        description="Checks for weasel words, passive voice, duplicate words, "
        "and spelling errors.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s draft.md                      # Check one file
  %(prog)s ch1.txt ch2.txt --stats       # Show spell checker statistics
  %(prog)s notes.txt --training corpus.txt

Spell checking is trained from training.txt in the current directory.
        """,
    )

    parser.add_argument("files", nargs="*", help="Text files to check")

    parser.add_argument(
        "--config", type=str, help="Path to configuration file (JSON format)"
    )

    parser.add_argument(
        "--training", type=str, help="Training corpus (overrides the config)"
    )

    parser.add_argument(
        "--no-spell", action="store_true", help="Skip the spelling check"
    )

    parser.add_argument(
        "--stats", action="store_true", help="Print spell checker statistics"
    )

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Set logging level (default: from config, ERROR)",
    )

    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )

    return parser.parse_args(argv)


def read_text(path: str, config: Config) -> str:
    """Read a UTF-8 text file, repairing encoding damage if configured.

    Raises:
        OSError: If the file cannot be read
        UnicodeDecodeError: If the file is not valid UTF-8
    """
    content = Path(path).read_text(encoding="utf-8")
    if config.fix_encoding:
        content = ftfy.fix_text(content)
    return content


def train_corrector(
    config: Config, console: Console, err_console: Console
) -> Optional[Corrector]:
    """Train a corrector from the configured corpus.

    Returns:
        A ready Corrector, or None when the corpus is missing or unreadable
    """
    console.print(
        f"\nChecking for spell checker training file ('{config.training_file}')...",
        markup=False,
    )
    try:
        contents = read_text(config.training_file, config)
    except (OSError, UnicodeDecodeError) as e:
        logger.warning(f"Could not read training file {config.training_file}: {e}")
        err_console.print(
            f"Warning: '{config.training_file}' not found in the project root. "
            "Spell checking will be disabled.",
            style="yellow",
            markup=False,
        )
        return None

    console.print("Training data found. Training spell checker... ", end="")
    model = FrequencyModel()
    model.train(contents)
    console.print("Done.", style="green")
    return Corrector(model, cache_size=config.cache_size)


def analyze_file(
    checker: WritingChecker,
    filename: str,
    config: Config,
    console: Console,
    corrector: Optional[Corrector] = None,
) -> None:
    """Run every check on one file and print the results.

    Raises:
        OSError: If the file cannot be read
        UnicodeDecodeError: If the file is not valid UTF-8
    """
    content = read_text(filename, config)

    print_header(console, filename)

    print_matches(console, checker.check_weasel_words(content, filename), "Weasel Words")
    console.print()

    print_matches(console, checker.check_passive_voice(content, filename), "Passive Voice")
    console.print()

    print_matches(console, checker.check_duplicates(content, filename), "Duplicate Words")
    console.print()

    if corrector is not None:
        spelling_matches = checker.check_spelling(content, filename, corrector)
        print_matches(console, spelling_matches, "Spelling Suggestions")

    console.print()


def run(args: argparse.Namespace, console: Console, err_console: Console) -> int:
    """Check every file named in args.

    Returns:
        Exit code (0 once files were processed, 1 if none were given)
    """
    if not args.files:
        print_usage(console)
        return 1

    config = load_config(args.config)
    if args.training:
        config.training_file = args.training
    if args.log_level:
        config.log_level = args.log_level
    if args.no_spell:
        config.enable_spell_check = False

    setup_logger(config)
    logger.info(f"Writing checker starting on {len(args.files)} files")

    checker = WritingChecker.from_config(config)
    loaded_from = checker.load_custom_weasels(config.weasel_paths)
    if loaded_from:
        console.print(f"Loaded custom weasel words from: {loaded_from}", markup=False)

    corrector = None
    if config.enable_spell_check:
        corrector = train_corrector(config, console, err_console)

    files_processed = 0
    for filename in args.files:
        if not Path(filename).exists():
            err_console.print(
                Text.assemble(("Error:", "bold red"), f" File not found: {filename}")
            )
            continue
        try:
            analyze_file(checker, filename, config, console, corrector)
            files_processed += 1
        except (OSError, UnicodeDecodeError) as e:
            log_error(f"Error processing {filename}", e, config)
            err_console.print(
                Text.assemble(("Error processing", "red"), f" {filename}: {e}")
            )

    print_summary(console, files_processed)

    if args.stats and corrector is not None:
        print_statistics(console, corrector.get_statistics())

    logger.info(f"Writing checker finished, {files_processed} files processed")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main application entry point.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    console = Console(soft_wrap=True)
    err_console = Console(stderr=True, soft_wrap=True)

    try:
        args = parse_arguments(argv)
        return run(args, console, err_console)

    except KeyboardInterrupt:
        print("\nInterrupted by user", file=sys.stderr)
        return 1

    except Exception as e:
        print(f"Application error: {str(e)}", file=sys.stderr)
        log_error("Writing checker failed", e)
        return 1


if __name__ == "__main__":
    sys.exit(main())
