"""Statement dialect detection."""

from loguru import logger

from statement_engine.models import Dialect

WALLET_MARKERS = ("transaction id", "paid to", "received from", "payment to")


def detect_dialect(text: str) -> Dialect:
    """Pick the extraction rule set for a statement.

    Any wallet marker selects the wallet dialect. There is no positive test
    for the ledger dialect: callers must ask for it explicitly, and text
    without markers falls back to wallet.

    Args:
        text: Statement text (any case)

    Returns:
        Detected dialect
    """
    if not text or not isinstance(text, str):
        logger.warning("detect_dialect: invalid or empty text, defaulting to wallet")
        return Dialect.WALLET

    lower = text.lower()
    for marker in WALLET_MARKERS:
        if marker in lower:
            logger.info(f"Detected wallet dialect (marker: {marker!r})")
            return Dialect.WALLET

    logger.info("Dialect markers not found, defaulting to wallet")
    return Dialect.WALLET


def resolve_dialect(hint: Dialect | str | None) -> Dialect | None:
    """Convert a caller-supplied hint into a Dialect.

    Returns None when there is no usable hint, so detection runs instead.
    """
    if hint is None or isinstance(hint, Dialect):
        return hint
    try:
        return Dialect(str(hint).strip().lower())
    except ValueError:
        logger.warning(f"Ignoring unknown dialect hint: {hint!r}")
        return None
