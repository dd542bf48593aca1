"""Field extraction for ledger-style (one row per transaction) blocks."""

import re

from loguru import logger

from statement_engine.models import Block, RawFields, TransactionType
from statement_engine.segmenter import LEDGER_ANCHOR

# Decimal tokens: "4,300.00", "12345.67", "-0.50"
DECIMAL_TOKEN = re.compile(r"(?<![\d.,])-?(?:\d{1,3}(?:,\d{3})+|\d+)\.\d+")
_TRAILING_SEPARATOR = re.compile(r"\s*-\s*$")
_WHITESPACE = re.compile(r"\s+")


def extract_ledger(block: Block) -> RawFields:
    """Locate the raw field values of one ledger row.

    The anchor gives the signed amount and the date. The last decimal token
    left over is the running balance, and the remaining text is the details.

    Args:
        block: Ledger block; wrapped physical lines are flattened

    Returns:
        Raw fields, with unmatched fields left as None
    """
    text = block.text
    fields = RawFields(raw=text)

    match = LEDGER_ANCHOR.search(text)
    if not match:
        logger.debug(f"Block {block.start}-{block.end}: no amount+date anchor in {text[:60]!r}")
        return fields

    signed_amount, date_text = match.groups()
    fields.amount_text = signed_amount.lstrip("-")
    fields.type_text = (
        TransactionType.CREDIT.value if signed_amount.startswith("-") else TransactionType.DEBIT.value
    )
    fields.date_text = date_text

    residual = text[:match.start()] + " " + text[match.end():]
    last = None
    for last in DECIMAL_TOKEN.finditer(residual):
        pass
    if last is not None:
        fields.balance_text = last.group(0)
        residual = residual[:last.start()] + residual[last.end():]

    details = _WHITESPACE.sub(" ", residual).strip()
    fields.details = _TRAILING_SEPARATOR.sub("", details).strip() or None
    return fields
