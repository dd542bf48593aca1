"""Exceptions raised around the parsing engine."""


class StatementEngineError(Exception):
    """Base error for statement-engine."""

    pass


class StatementSourceError(StatementEngineError):
    """Statement file missing or its text could not be read."""

    def __init__(self, path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot read statement '{path}': {reason}")
