"""Ordered classification helpers shared by both engines."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, Sequence, Tuple, TypeVar


T = TypeVar("T")


@dataclass(frozen=True)
class Rule(Generic[T]):
    """A labelled predicate; rule chains are evaluated first-match-wins."""

    label: T
    predicate: Callable[..., bool]


def first_match(rules: Sequence[Rule[T]], *args: Any, default: T) -> T:
    """Return the label of the first rule whose predicate holds."""

    for rule in rules:
        if rule.predicate(*args):
            return rule.label
    return default


def step_at_least(value: float, steps: Sequence[Tuple[float, T]], default: T) -> T:
    """Map ``value`` through descending ``(minimum, result)`` steps (inclusive)."""

    for minimum, result in steps:
        if value >= minimum:
            return result
    return default


def step_above(value: float, steps: Sequence[Tuple[float, T]], default: T) -> T:
    """Like :func:`step_at_least` but with strict thresholds."""

    for minimum, result in steps:
        if value > minimum:
            return result
    return default


def clamp(value: float, low: float = 0.0, high: float = 100.0) -> float:
    return max(low, min(high, value))
