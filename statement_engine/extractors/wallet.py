"""Field extraction for wallet-style (multi-line) transaction blocks."""

import re

from loguru import logger

from statement_engine.extractors.base import LineMatcher, MatchResult, run_matchers
from statement_engine.models import Block, RawFields, TransactionType
from statement_engine.segmenter import is_date_line, is_time_line

_AMOUNT = r"([\d,]+(?:\.\d+)?)"

# "DEBIT₹202Mobile recharge", "CREDIT INR 1,500.00 Refund"
TYPE_AMOUNT_DETAILS = re.compile(
    rf"^(DEBIT|CREDIT)(?!ED)\s*(?:₹|INR|Rs\.?)?\s*{_AMOUNT}?\s*(.*)$"
)
# "Debit INR", "CreditINR 500"
SPLIT_TYPE_AMOUNT = re.compile(rf"^(Debit|Credit)\s*INR\s*{_AMOUNT}?$", re.IGNORECASE)
NUMERIC_LINE = re.compile(rf"^{_AMOUNT}$")

DETAILS_PREFIXES = (
    "Paid to",
    "Payment to",
    "Paid",
    "Received from",
    "Payment Received",
    "Received",
    "Refund from",
    "Refund Received",
)

TRANSACTION_ID_LABELS = ("Transaction ID",)
UTR_LABELS = ("UTR No.", "UTR No", "UTR")
ACCOUNT_LABELS = ("Debited from", "Credited to", "Paid by")

CREDIT_DETAIL_PREFIXES = ("Received", "Payment Received", "Credited")
DEBIT_DETAIL_PREFIXES = ("Paid", "Payment to", "Paid to", "Debited")


def _label_pattern(labels: tuple[str, ...]) -> re.Pattern:
    # Longest label first so "UTR No." wins over "UTR No" and "UTR". A label
    # that starts a longer one must not run into a word ("UTRX-9"); the others
    # may have their value fused on ("Transaction IDT999").
    parts = []
    for label in sorted(labels, key=len, reverse=True):
        part = re.escape(label)
        if any(other.lower().startswith(label.lower()) and other != label for other in labels):
            part += r"(?![A-Za-z])"
        parts.append(part)
    return re.compile(rf"^(?:{'|'.join(parts)})\s*[:#]?\s*(.*)$", re.IGNORECASE)


_ALL_LABELS = _label_pattern(TRANSACTION_ID_LABELS + UTR_LABELS + ACCOUNT_LABELS)


def is_label_line(line: str) -> bool:
    return bool(_ALL_LABELS.match(line))


def looks_like_boundary(line: str) -> bool:
    """True if a line is itself a label, time or date line.

    Such a line must never be taken as the value of a preceding label.
    """
    return is_label_line(line) or is_time_line(line) or is_date_line(line)


class TypeAmountDetailsMatcher(LineMatcher):
    """Combined type, amount and details on one line."""

    name = "type_amount_details"

    def match(self, lines: list[str], index: int, consumed: set[int]) -> MatchResult | None:
        # "DEBIT INR" alone belongs to the split rule, which can read the next line
        if SPLIT_TYPE_AMOUNT.match(lines[index]):
            return None
        m = TYPE_AMOUNT_DETAILS.match(lines[index])
        if not m:
            return None
        type_text, amount_text, details = m.groups()
        return MatchResult(
            consumed=[index],
            fields={"type_text": type_text, "amount_text": amount_text or "", "details": details.strip()},
        )


class SplitTypeAmountMatcher(LineMatcher):
    """Split type line such as "Debit INR", with the amount inline or on the next line."""

    name = "split_type_amount"

    def match(self, lines: list[str], index: int, consumed: set[int]) -> MatchResult | None:
        m = SPLIT_TYPE_AMOUNT.match(lines[index])
        if not m:
            return None
        type_text, amount_text = m.groups()
        taken = [index]
        nxt = index + 1
        if not amount_text and nxt < len(lines) and nxt not in consumed and NUMERIC_LINE.match(lines[nxt]):
            amount_text = lines[nxt]
            taken.append(nxt)
        return MatchResult(consumed=taken, fields={"type_text": type_text, "amount_text": amount_text or ""})


class DetailsLeadMatcher(LineMatcher):
    """First "Paid to ..." / "Received from ..." style line, kept verbatim."""

    name = "details_lead"

    def match(self, lines: list[str], index: int, consumed: set[int]) -> MatchResult | None:
        line = lines[index]
        if is_label_line(line) or not line.startswith(DETAILS_PREFIXES):
            return None
        return MatchResult(consumed=[index], fields={"details": line})


class LabelValueMatcher(LineMatcher):
    """Labelled reference field, value inline or on the following line."""

    def __init__(self, field: str, labels: tuple[str, ...]):
        self.name = field
        self.field = field
        self.pattern = _label_pattern(labels)

    def match(self, lines: list[str], index: int, consumed: set[int]) -> MatchResult | None:
        m = self.pattern.match(lines[index])
        if not m:
            return None
        value = m.group(1).strip()
        taken = [index]
        nxt = index + 1
        if not value and nxt < len(lines) and nxt not in consumed:
            if looks_like_boundary(lines[nxt]):
                logger.debug(f"{self.field}: next line {lines[nxt]!r} looks like a boundary, leaving empty")
            else:
                value = lines[nxt]
                taken.append(nxt)
        return MatchResult(consumed=taken, fields={self.field: value})


WALLET_MATCHERS: list[LineMatcher] = [
    TypeAmountDetailsMatcher(),
    SplitTypeAmountMatcher(),
    DetailsLeadMatcher(),
    LabelValueMatcher("transaction_id", TRANSACTION_ID_LABELS),
    LabelValueMatcher("utr", UTR_LABELS),
    LabelValueMatcher("account", ACCOUNT_LABELS),
]


def infer_type(details: str | None) -> str | None:
    """Guess the direction from the details text, or None if it gives no hint."""
    if not details:
        return None
    if details.startswith(CREDIT_DETAIL_PREFIXES):
        return TransactionType.CREDIT.value
    if details.startswith(DEBIT_DETAIL_PREFIXES):
        return TransactionType.DEBIT.value
    return None


def extract_wallet(block: Block) -> RawFields:
    """Locate the raw field values of one wallet block.

    Args:
        block: Wallet block; its first line is the anchoring time line

    Returns:
        Raw fields, with unmatched fields left as None
    """
    raw_lines = [block.date_text] if block.date_text else []
    fields = RawFields(
        date_text=block.date_text,
        time_text=block.time_text,
        raw="\n".join(raw_lines + block.lines),
    )

    consumed = run_matchers(block.lines, WALLET_MATCHERS, fields)
    ignored = len(block.lines) - 1 - len(consumed)
    if ignored > 0:
        logger.debug(f"Block {block.start}-{block.end}: {ignored} line(s) matched no rule")

    if fields.type_text is None:
        fields.type_text = infer_type(fields.details)
        if fields.type_text:
            logger.debug(f"Block {block.start}-{block.end}: inferred {fields.type_text} from details")

    return fields
