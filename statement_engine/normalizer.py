"""Record normalization: raw field strings to canonical types."""

import re
from datetime import date, datetime
from decimal import Decimal, InvalidOperation

from loguru import logger

from statement_engine.models import Dialect, RawFields, TransactionRecord, TransactionType

WALLET_DATETIME_FORMATS = ["%b %d, %Y %I:%M %p", "%B %d, %Y %I:%M %p"]
WALLET_DATE_FORMATS = ["%b %d, %Y", "%B %d, %Y"]
LEDGER_DATE_FORMATS = ["%d %b %Y", "%d %B %Y"]

_CURRENCY = re.compile(r"₹|INR|Rs\.?|,|\s")
# "06:20pm" -> "06:20 pm"
_TIME_SUFFIX = re.compile(r"(\d)\s*([AaPp][Mm])$")


def _strptime(value: str, formats: list[str]) -> datetime | None:
    for fmt in formats:
        try:
            return datetime.strptime(value, fmt)
        except ValueError:
            continue
    return None


def parse_wallet_date(date_text: str | None, time_text: str | None) -> datetime | None:
    """Combine a wallet date header and time line into a datetime.

    Falls back to the date at start of day when the time cannot be parsed.
    """
    if not date_text:
        return None
    date_text = date_text.strip()
    if time_text:
        time_text = _TIME_SUFFIX.sub(r"\1 \2", time_text.strip())
        parsed = _strptime(f"{date_text} {time_text}", WALLET_DATETIME_FORMATS)
        if parsed:
            return parsed
        logger.debug(f"Could not parse time {time_text!r}, using start of day")
    parsed = _strptime(date_text, WALLET_DATE_FORMATS)
    if parsed is None:
        logger.warning(f"Could not parse date: {date_text}")
    return parsed


def parse_ledger_date(date_text: str | None) -> date | None:
    """Parse a "12 Jun 2024" ledger date; no time component."""
    if not date_text:
        return None
    parsed = _strptime(date_text.strip(), LEDGER_DATE_FORMATS)
    if parsed is None:
        logger.warning(f"Could not parse date: {date_text}")
        return None
    return parsed.date()


def parse_decimal(value: str | None) -> Decimal | None:
    """Parse a decimal string with currency markers and grouping commas.

    Returns:
        The value, or None when missing, unparseable or not finite
    """
    if not value:
        return None
    cleaned = _CURRENCY.sub("", value)
    try:
        number = Decimal(cleaned)
    except (InvalidOperation, ValueError):
        logger.debug(f"Could not parse number: {value!r}")
        return None
    if not number.is_finite():
        return None
    return number


def parse_amount(value: str | None) -> Decimal:
    """Amount magnitude, 0 when unparseable."""
    number = parse_decimal(value)
    if number is None:
        return Decimal(0)
    return abs(number)


def parse_type(value: str | None) -> TransactionType:
    """Upper-case a type token into TransactionType, UNKNOWN otherwise."""
    if not value:
        return TransactionType.UNKNOWN
    try:
        return TransactionType(value.strip().upper())
    except ValueError:
        logger.debug(f"Unrecognized transaction type: {value!r}")
        return TransactionType.UNKNOWN


def _text(value: str | None) -> str | None:
    if value is None:
        return None
    value = value.strip()
    return value or None


def normalize_record(fields: RawFields, dialect: Dialect) -> TransactionRecord:
    """Convert raw fields of one block into a TransactionRecord.

    Parse failures degrade the affected field (null date, zero amount,
    UNKNOWN type) instead of dropping the record.

    Args:
        fields: Raw values located by an extractor
        dialect: Dialect of the block, selects the date format

    Returns:
        Normalized transaction record
    """
    if dialect == Dialect.LEDGER:
        parsed_date: datetime | date | None = parse_ledger_date(fields.date_text)
    else:
        parsed_date = parse_wallet_date(fields.date_text, fields.time_text)

    return TransactionRecord(
        date=parsed_date,
        type=parse_type(fields.type_text),
        amount=parse_amount(fields.amount_text),
        details=_text(fields.details),
        transaction_id=_text(fields.transaction_id),
        utr=_text(fields.utr),
        account=_text(fields.account),
        balance=parse_decimal(fields.balance_text),
        raw=fields.raw,
    )
