"""Tagged results returned by prompt primitives and steps."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, Optional, TypeVar

T = TypeVar("T")


class Outcome(str, Enum):
    """What the user did with a prompt."""

    OK = "ok"
    GO_BACK = "go-back"
    CANCEL = "cancel"


@dataclass(frozen=True)
class PromptResult(Generic[T]):
    """
    Result of one prompt interaction.

    Exactly one of:
    - ``ok(value)``: the user accepted a value (may be None or empty)
    - ``go_back()``: the user asked to revisit the previous step
    - ``cancel()``: the user dismissed the prompt
    """

    outcome: Outcome
    value: Optional[T] = None

    @classmethod
    def ok(cls, value: Any = None) -> "PromptResult":
        return cls(Outcome.OK, value)

    @classmethod
    def go_back(cls) -> "PromptResult":
        return cls(Outcome.GO_BACK)

    @classmethod
    def cancel(cls) -> "PromptResult":
        return cls(Outcome.CANCEL)

    @property
    def is_ok(self) -> bool:
        return self.outcome is Outcome.OK

    @property
    def is_go_back(self) -> bool:
        return self.outcome is Outcome.GO_BACK

    @property
    def is_cancel(self) -> bool:
        return self.outcome is Outcome.CANCEL
