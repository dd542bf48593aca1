"""Block segmentation: partition normalized lines into per-transaction spans."""

import re

from loguru import logger

from statement_engine.models import Block, Dialect

# "May 19, 2025"
DATE_LINE = re.compile(r"^[A-Za-z]{3,9} \d{1,2}, \d{4}$")
# "06:20 pm", "6:20PM"
TIME_LINE = re.compile(r"^\d{1,2}:\d{2} ?(?:am|pm)$", re.IGNORECASE)
# "-1,200.50 - 12 Jun 2024": signed amount, optional separator, then the date
LEDGER_ANCHOR = re.compile(
    r"(?<![\d,.])(-?(?:\d{1,3}(?:,\d{3})+|\d+)(?:\.\d+)?)(?![\d.,])(?:-|\s)*(\d{1,2} [A-Za-z]{3} \d{4})"
)


def is_date_line(line: str) -> bool:
    return bool(DATE_LINE.match(line))


def is_time_line(line: str) -> bool:
    return bool(TIME_LINE.match(line))


def _make_block(
    dialect: Dialect,
    lines: list[str],
    start: int,
    end: int,
    date_text: str | None = None,
    time_text: str | None = None,
) -> Block:
    return Block(
        dialect=dialect,
        start=start,
        end=end,
        lines=lines[start:end + 1],
        date_text=date_text,
        time_text=time_text,
    )


def segment_wallet(lines: list[str]) -> list[Block]:
    """Split wallet-style lines into time-anchored blocks.

    A block starts at a time line and runs until the line before the next
    time or date line. Date lines set the date context for the blocks that
    follow; time lines seen before any date line are ignored.

    Args:
        lines: Normalized statement lines

    Returns:
        Blocks in discovery order
    """
    blocks: list[Block] = []
    current_date: str | None = None
    # (start index, time text, date text) of the block being accumulated
    open_block: tuple[int, str, str] | None = None

    def close(end: int) -> None:
        nonlocal open_block
        if open_block is not None:
            start, time_text, date_text = open_block
            blocks.append(
                _make_block(Dialect.WALLET, lines, start, end, date_text=date_text, time_text=time_text)
            )
            open_block = None

    for i, line in enumerate(lines):
        if is_date_line(line):
            close(i - 1)
            current_date = line
            continue

        if is_time_line(line):
            close(i - 1)
            if current_date is None:
                logger.debug(f"Line {i}: time line {line!r} before any date header, skipping")
                continue
            open_block = (i, line, current_date)
            continue

        if open_block is None:
            logger.debug(f"Line {i}: outside any block, skipping: {line[:60]}")

    close(len(lines) - 1)
    return blocks


def segment_ledger(lines: list[str]) -> list[Block]:
    """Split ledger-style lines into amount+date anchored blocks.

    Each anchoring line starts a block that runs until the line before the
    next anchor, or the end of input for the last block.

    Args:
        lines: Normalized statement lines

    Returns:
        Blocks in discovery order
    """
    starts = [i for i, line in enumerate(lines) if LEDGER_ANCHOR.search(line)]
    if starts and starts[0] > 0:
        logger.debug(f"Skipping {starts[0]} line(s) before the first ledger row")

    blocks: list[Block] = []
    for n, start in enumerate(starts):
        end = starts[n + 1] - 1 if n + 1 < len(starts) else len(lines) - 1
        blocks.append(_make_block(Dialect.LEDGER, lines, start, end))
    return blocks


def segment(lines: list[str], dialect: Dialect) -> list[Block]:
    """Segment lines with the rules of the given dialect."""
    if dialect == Dialect.LEDGER:
        blocks = segment_ledger(lines)
    else:
        blocks = segment_wallet(lines)
    logger.info(f"Segmented {len(blocks)} {dialect.value} block(s) from {len(lines)} lines")
    return blocks
