"""Statement text sources: PDF via pdfplumber, plain text files as-is."""

from pathlib import Path

import pdfplumber
from loguru import logger

from statement_engine.errors import StatementSourceError


def read_pdf_text(pdf_path: Path) -> str:
    """Extract the text of every page, joined with newlines."""
    pages: list[str] = []
    with pdfplumber.open(pdf_path) as pdf:
        logger.info(f"PDF has {len(pdf.pages)} page(s)")
        for page in pdf.pages:
            pages.append(page.extract_text() or "")
    return "\n".join(pages)


def read_statement_text(path: Path) -> str:
    """Read the textual content of one statement document.

    Args:
        path: PDF or text file

    Returns:
        Extracted text

    Raises:
        StatementSourceError: If the file is missing or cannot be read
    """
    if not path.exists():
        raise StatementSourceError(path, "file not found")

    try:
        if path.suffix.lower() == ".pdf":
            text = read_pdf_text(path)
        else:
            text = path.read_text(encoding="utf-8-sig", errors="replace")
    except OSError as e:
        raise StatementSourceError(path, str(e)) from e
    except Exception as e:
        # pdfplumber surfaces malformed PDFs as pdfminer exceptions
        raise StatementSourceError(path, f"{type(e).__name__}: {e}") from e

    logger.info(f"Read {len(text)} chars from {path.name}")
    return text
