# ───────────────────────── src/writingchecker/report.py ─────────────────────────
"""
Colored console output for check results.
"""

from typing import Dict, List

from rich.console import Console
from rich.text import Text

from .checks import Match

SEPARATOR = "=" * 50


def print_usage(console: Console) -> None:
    console.print("Comprehensive Writing Checker", style="bold green")
    console.print(
        "Checks for weasel words, passive voice, duplicate words, "
        "and spelling errors.\n"
    )
    console.print("Usage:", style="bold")
    console.print("  writing-checker <file1> [file2] [file3] ...", markup=False)
    console.print("\nChecks performed:", style="bold")
    for name, description in [
        ("Weasel words", "Words that obscure precision"),
        ("Passive voice", "Overuse of passive voice"),
        ("Duplicate words", "Accidentally duplicated words"),
        ("Spelling", "Potential spelling errors"),
    ]:
        console.print(Text.assemble("  • ", (name, "yellow"), f" - {description}"))


def print_header(console: Console, filename: str) -> None:
    console.print(Text.assemble("\n", ("Analyzing:", "bold"), " ", (filename, "bold blue")))
    console.print(SEPARATOR)


def print_matches(console: Console, matches: List[Match], check_type: str) -> None:
    """Print one check's results.

    Prints a green "No issues found!" line when matches is empty, otherwise a
    yellow count followed by one line per match:
    ``  file:line matched - line text``.
    """
    if not matches:
        console.print(
            Text.assemble((check_type, "bold green"), ": ", ("No issues found!", "green"))
        )
        return

    console.print(
        Text.assemble((check_type, "bold yellow"), f": {len(matches)} issues found")
    )
    for m in matches:
        console.print(
            Text.assemble(
                "  ",
                (m.file, "blue"),
                ":",
                (str(m.line_num), "cyan"),
                " ",
                (m.matched_text, "bold red"),
                f" - {m.line.strip()}",
            )
        )


def print_statistics(console: Console, stats: Dict[str, float]) -> None:
    console.print("\nSpell checker statistics:", style="bold")
    console.print(f"  Words checked: {stats['words_processed']:,}")
    console.print(f"  Corrections suggested: {stats['corrections_made']:,}")
    console.print(f"  Correction rate: {stats['correction_rate']:.1%}")
    console.print(f"  Cache hit rate: {stats['cache_hit_rate']:.1%}")


def print_summary(console: Console, files_processed: int) -> None:
    console.print(SEPARATOR)
    console.print(
        Text.assemble(("Summary:", "bold green"), f" {files_processed} files processed")
    )
