# ───────────────────────── src/writingchecker/wordlists.py ─────────────────────────
"""Word lists and regex builders for the style checks.

The lists are plain configuration data: read-only after import and safe to
share. Custom weasel word lists loaded at runtime replace DEFAULT_WEASEL_WORDS
but never modify it.

Usage:
    >>> from writingchecker.wordlists import compile_weasel_pattern
    >>> pattern = compile_weasel_pattern(["very", "quite"])
    >>> [m.group() for m in pattern.finditer("quite very good")]
    ['quite', 'very']
"""

import re
from typing import Iterable, Tuple

# ============================================================================
# WEASEL WORDS
# ============================================================================

# Words and phrases that obscure precision
DEFAULT_WEASEL_WORDS: Tuple[str, ...] = (
    "many",
    "various",
    "very",
    "fairly",
    "several",
    "extremely",
    "exceedingly",
    "quite",
    "remarkably",
    "few",
    "surprisingly",
    "mostly",
    "largely",
    "huge",
    "tiny",
    "are a number",
    "is a number",
    "excellent",
    "interestingly",
    "significantly",
    "substantially",
    "clearly",
    "vast",
    "relatively",
    "completely",
)

# ============================================================================
# PASSIVE VOICE
# ============================================================================

# Forms of "to be" that introduce a passive construction
PASSIVE_AUXILIARIES: Tuple[str, ...] = (
    "am",
    "are",
    "were",
    "being",
    "is",
    "been",
    "was",
    "be",
)

# Past participles that do not end in "-ed"
IRREGULAR_PARTICIPLES: Tuple[str, ...] = tuple(
    """
    awoken been born beat become begun bent beset bet bid bidden bound bitten
    bled blown broken bred brought broadcast built burnt burst bought cast
    caught chosen clung come cost crept cut dealt dug dived done drawn dreamt
    driven drunk eaten fallen fed felt fought found fit fled flung flown
    forbidden forgotten foregone forgiven forsaken frozen gotten given gone
    ground grown hung heard hidden hit held hurt kept knelt knit known laid led
    leapt learnt left lent let lain lighted lost made meant met misspelt
    mistaken mown overcome overdone overtaken overthrown paid pled proven put
    quit read rid ridden rung risen run sawn said seen sought sold sent set
    sewn shaken shaven shorn shed shone shod shot shown shrunk shut sung sunk
    sat slept slain slid slung slit smitten sown spoken sped spent spilt spun
    spit split spread sprung stood stolen stuck stung stunk stridden struck
    strung striven sworn swept swollen swum swung taken taught torn told
    thought thrived thrown thrust trodden understood upheld upset woken worn
    woven wed wept wound won withheld withstood wrung written
    """.split()
)

# ============================================================================
# PATTERN BUILDERS
# ============================================================================

# Any run of word characters, used for duplicate detection
WORD_PATTERN = re.compile(r"\b\w+\b")

# Candidate words for spell checking; the corrector only knows ASCII letters
SPELL_WORD_PATTERN = re.compile(r"[a-zA-Z]+")


def compile_weasel_pattern(words: Iterable[str]) -> re.Pattern:
    """Build a case-sensitive whole-word pattern matching any of words.

    Entries are escaped, so a custom list may contain punctuation without
    breaking the expression.
    """
    alternatives = "|".join(re.escape(w) for w in words)
    return re.compile(rf"\b({alternatives})\b")


def compile_passive_pattern(
    irregulars: Iterable[str] = IRREGULAR_PARTICIPLES,
) -> re.Pattern:
    """Build the passive voice pattern.

    Matches a form of "to be", whitespace, then either a word ending in "ed"
    or one of the irregular past participles.
    """
    auxiliaries = "|".join(PASSIVE_AUXILIARIES)
    participles = "|".join(irregulars)
    return re.compile(rf"\b({auxiliaries})\s+(\w+ed|({participles}))\b")
