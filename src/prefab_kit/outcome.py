"""Success/failure outcomes for chaining fallible construction steps.

An outcome is either `Ok(value)` or `Err(message)`. `and_then` runs the
next step only while the chain is still `Ok`; the first `Err` is carried
through untouched to the end of the chain.

Typical usage:
    >>> outcome = ok(context).and_then(check_source).and_then(save)
    >>> print(format_outcome(outcome))
    [OK] Complete!
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import reduce
from typing import Any, Callable, Generic, Iterable, TypeVar, Union

V = TypeVar("V")
U = TypeVar("U")


class OutcomeError(Exception):
    """Raised when unwrapping a failed outcome."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


@dataclass(frozen=True)
class Ok(Generic[V]):
    """Successful outcome carrying a value."""

    value: V

    def and_then(self, f: Callable[[V], Outcome[U]]) -> Outcome[U]:
        return f(self.value)

    def unwrap(self) -> V:
        return self.value


@dataclass(frozen=True)
class Err:
    """Failed outcome carrying a human-readable message."""

    message: str

    def and_then(self, f: Callable[[Any], Outcome[U]]) -> Err:
        return self

    def unwrap(self):
        raise OutcomeError(self.message)


Outcome = Union[Ok[V], Err]

# A pipeline step: context in, outcome out
Step = Callable[[Any], "Outcome[Any]"]


def ok(value: V) -> Ok[V]:
    """Create a successful outcome."""
    return Ok(value)


def err(message: str) -> Err:
    """Create a failed outcome."""
    return Err(message)


def run_steps(initial: Outcome[Any], steps: Iterable[Step]) -> Outcome[Any]:
    """Chain every step onto `initial` with `and_then`.

    Steps after the first failure are never called.

    Args:
        initial: Starting outcome, usually `ok(context)`.
        steps: Step functions applied in order.

    Returns:
        The final outcome of the chain.
    """
    return reduce(lambda acc, step: acc.and_then(step), steps, initial)


def format_outcome(outcome: Outcome[Any], success_message: str = "Complete!") -> str:
    """Render an outcome as a notification line for the user.

    Args:
        outcome: Outcome to render.
        success_message: Text shown after the "[OK]" tag on success.

    Returns:
        "[OK] <success_message>" or "[Fail] <message>".
    """
    if isinstance(outcome, Err):
        return f"[Fail] {outcome.message}"
    return f"[OK] {success_message}"
