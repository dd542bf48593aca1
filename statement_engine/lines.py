"""Line normalization: raw statement text to clean, ordered lines."""

import re

from loguru import logger

# Lines that are statement furniture, never part of a transaction
NOISE_PATTERNS = [
    r"^Transaction Statement(?: for .*)?$",  # Statement title
    r"^[A-Za-z]{3,9} \d{1,2}, \d{4} ?- ?[A-Za-z]{3,9} \d{1,2}, \d{4}$",  # Date-range banner
    r"^Date ?Transaction ?Details ?Type ?Amount$",  # Wallet column header
    r"^Date ?Credit ?Balance ?Details ?Ref ?No\./ ?Cheque",  # Ledger column header
    r"^Page \d+ of \d+$",  # Pagination banner
    r"^This is a(?:n)? (?:system|automatically) generated statement",
    r"^Disclaimer\b",
    r"^For any queries\b",
]

_NOISE_PATTERNS_COMPILED = [re.compile(p, re.IGNORECASE) for p in NOISE_PATTERNS]

# NBSP, narrow NBSP, figure space, tabs and the other Unicode space separators
_SPACE_VARIANTS = re.compile(r"[\u00a0\u1680\u2000-\u200a\u202f\u205f\u3000\t\f\v]")
# BOM and zero-width space, removed outright
_INVISIBLE = re.compile(r"[\ufeff\u200b]")
_SPACE_RUN = re.compile(r" {2,}")
_LINE_BREAK = re.compile(r"\r\n|\r|\n")

LEDGER_HEADER_MARKER = "Date Credit BalanceDetails Ref No./Cheque"


def is_noise(line: str) -> bool:
    """Check if a line is a header, footer or banner.

    Args:
        line: Normalized line to check

    Returns:
        True if the line matches any noise pattern
    """
    return any(pattern.search(line) for pattern in _NOISE_PATTERNS_COMPILED)


def clean_line(line: str) -> str:
    """Collapse whitespace variants to single plain spaces and trim."""
    line = _INVISIBLE.sub("", line)
    line = _SPACE_VARIANTS.sub(" ", line)
    return _SPACE_RUN.sub(" ", line).strip()


def normalize_lines(text: str) -> list[str]:
    """Turn a text blob into trimmed, non-empty, noise-free lines.

    Order is preserved and no line is split or merged.

    Args:
        text: Extracted statement text

    Returns:
        List of cleaned lines (empty for empty or non-string input)
    """
    if not text or not isinstance(text, str):
        return []

    lines: list[str] = []
    dropped = 0
    for raw_line in _LINE_BREAK.split(text):
        line = clean_line(raw_line)
        if not line:
            continue
        if is_noise(line):
            logger.debug(f"Dropping noise line: {line[:60]}")
            dropped += 1
            continue
        lines.append(line)

    logger.debug(f"Normalized {len(lines)} lines ({dropped} noise lines dropped)")
    return lines


def strip_preamble(text: str, marker: str = LEDGER_HEADER_MARKER) -> str:
    """Drop everything up to and including the transaction table header.

    Account-holder details printed above a ledger table would otherwise be
    scanned for anchors. Text without the marker is returned unchanged.
    """
    if not text or not isinstance(text, str):
        return ""
    index = text.find(marker)
    if index == -1:
        return text
    logger.debug(f"Skipping {index + len(marker)} chars of preamble before table header")
    return text[index + len(marker):].strip()
