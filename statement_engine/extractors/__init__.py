"""Field extractors for the supported statement dialects."""

from statement_engine.extractors.base import LineMatcher, MatchResult
from statement_engine.extractors.ledger import extract_ledger
from statement_engine.extractors.wallet import WALLET_MATCHERS, extract_wallet
from statement_engine.models import Block, Dialect, RawFields


def extract(block: Block) -> RawFields:
    """Extract raw fields from a block with its dialect's rules."""
    if block.dialect == Dialect.LEDGER:
        return extract_ledger(block)
    return extract_wallet(block)


__all__ = [
    "LineMatcher",
    "MatchResult",
    "WALLET_MATCHERS",
    "extract",
    "extract_ledger",
    "extract_wallet",
]
