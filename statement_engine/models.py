"""Pydantic data models for statement blocks and transaction records."""

import datetime as dt
from decimal import Decimal
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class TransactionType(str, Enum):
    """Direction of a transaction."""

    DEBIT = "DEBIT"
    CREDIT = "CREDIT"
    UNKNOWN = "UNKNOWN"


class Dialect(str, Enum):
    """Supported statement layouts."""

    WALLET = "wallet"
    LEDGER = "ledger"


class Block(BaseModel):
    """Contiguous span of normalized lines attributed to one transaction."""

    dialect: Dialect
    start: int = Field(ge=0, description="Index of the first line of the span")
    end: int = Field(ge=0, description="Index of the last line of the span (inclusive)")
    lines: list[str]
    date_text: str | None = Field(default=None, description="Governing date header (wallet)")
    time_text: str | None = Field(default=None, description="Anchoring time line (wallet)")

    @property
    def text(self) -> str:
        """The span flattened into one chunk."""
        return " ".join(self.lines)


class RawFields(BaseModel):
    """Field values located by an extractor, before type conversion."""

    date_text: str | None = None
    time_text: str | None = None
    type_text: str | None = None
    amount_text: str | None = None
    details: str | None = None
    transaction_id: str | None = None
    utr: str | None = None
    account: str | None = None
    balance_text: str | None = None
    raw: str = ""


class TransactionRecord(BaseModel):
    """Normalized transaction extracted from one block."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    date: dt.datetime | dt.date | None = None
    type: TransactionType = TransactionType.UNKNOWN
    amount: Decimal = Field(default=Decimal(0), ge=0, allow_inf_nan=False)
    details: str | None = None
    transaction_id: str | None = Field(default=None, alias="transactionId")
    utr: str | None = None
    account: str | None = None
    balance: Decimal | None = Field(default=None, allow_inf_nan=False)
    raw: str = Field(default="", description="Original line span, for debugging")

    def to_csv_row(self) -> dict[str, str]:
        """Convert to CSV row dict."""
        return {
            "Date": self.date.isoformat() if self.date else "",
            "Type": self.type.value,
            "Amount": str(self.amount),
            "Details": self.details or "",
            "TransactionID": self.transaction_id or "",
            "UTR": self.utr or "",
            "Account": self.account or "",
            "Balance": "" if self.balance is None else str(self.balance),
            "Raw": self.raw,
        }


CSV_FIELDNAMES = ["Date", "Type", "Amount", "Details", "TransactionID", "UTR", "Account", "Balance", "Raw"]
