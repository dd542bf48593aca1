"""Abstract base class for line matchers."""

from abc import ABC, abstractmethod

from pydantic import BaseModel, Field

from statement_engine.models import RawFields


class MatchResult(BaseModel):
    """Lines consumed and field values produced by one matcher hit."""

    consumed: list[int]
    fields: dict[str, str] = Field(default_factory=dict)


class LineMatcher(ABC):
    """One field-extraction rule tried against the lines of a block.

    Matchers are applied in a fixed priority order. Each one may consume one
    or two lines; consumed lines are invisible to later matchers.
    """

    name: str = "matcher"

    @abstractmethod
    def match(self, lines: list[str], index: int, consumed: set[int]) -> MatchResult | None:
        """Try the rule at lines[index].

        Args:
            lines: All lines of the block
            index: Line to test (never already consumed)
            consumed: Indices taken by earlier matchers, for lookahead checks

        Returns:
            MatchResult when the rule applies, otherwise None
        """
        pass


def run_matchers(lines: list[str], matchers: list[LineMatcher], fields: RawFields) -> set[int]:
    """Apply matchers in priority order, filling only fields still unset.

    Each matcher fires at most once per block, on the first unconsumed line
    it accepts.

    Returns:
        Indices of all consumed lines
    """
    consumed: set[int] = set()
    for matcher in matchers:
        for i in range(len(lines)):
            if i in consumed:
                continue
            result = matcher.match(lines, i, consumed)
            if result is None:
                continue
            consumed.update(result.consumed)
            for name, value in result.fields.items():
                if value and getattr(fields, name) is None:
                    setattr(fields, name, value)
            break
    return consumed
