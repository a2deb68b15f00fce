"""
editcost.compose — Combine several cost functions into one.

Given N cost functions of the same shape (unary for insert/delete,
binary for replace), produce a single function of that shape which
evaluates all N on every call and reduces the results:

    MIN           smallest value
    MAX           largest value
    AVG           arithmetic mean
    WEIGHTED_AVG  Σ wᵢ·vᵢ / Σ wᵢ   (compose_weighted_* family)

    >>> cheap = lambda c: 0.5 if c.isspace() else 1.0
    >>> flat = lambda c: 2.0
    >>> compose_insert_cost(ComposeStrategy.MIN, cheap, flat)(" ")
    0.5

Rules shared by every composer:
    • zero functions  → EmptyComposition (never a silent default)
    • one function    → returned unchanged, whatever the strategy
    • N ≥ 2 functions → a new pure function closing over the inputs

The one-function shortcut also applies to weighted composition: the
single weight is validated and then ignored, so
``compose_weighted_insert_cost([(f, 5)])`` is ``f`` itself and returns
f's raw values, not 5× them.
"""

import logging
import math
from enum import Enum, auto
from typing import Callable, Iterable, NamedTuple, Union

from .costs import DeleteCost, InsertCost, ReplaceCost


logger = logging.getLogger(__name__)


class ComposeStrategy(Enum):
    """How a list of cost functions is reduced to one value."""
    MIN = auto()
    MAX = auto()
    AVG = auto()
    WEIGHTED_AVG = auto()   # only via the compose_weighted_* functions


class WeightedCost(NamedTuple):
    """A cost function paired with its non-negative weight."""
    func: Callable[..., float]
    weight: float


WeightedEntries = Iterable[Union[WeightedCost, tuple[Callable[..., float], float]]]


# ═══════════════════════════════════════════════════════════════════
#  ERRORS
# ═══════════════════════════════════════════════════════════════════

class CompositionError(ValueError):
    """Base class for recoverable composition errors."""


class EmptyComposition(CompositionError):
    """No cost functions were supplied to a composer."""

    def __init__(self, kind: str):
        self.kind = kind
        super().__init__(f"no {kind} cost function provided")


class InvalidWeight(CompositionError):
    """Weighted composition got a negative weight or a zero total."""

    def __init__(self, kind: str, weights: tuple[float, ...], reason: str):
        self.kind = kind
        self.weights = weights
        super().__init__(f"invalid weights for {kind} cost: {reason} (weights={list(weights)})")


# ═══════════════════════════════════════════════════════════════════
#  STRATEGY-BASED COMPOSITION
# ═══════════════════════════════════════════════════════════════════

def _mean(values: list[float]) -> float:
    return sum(values) / len(values)


_REDUCERS: dict[ComposeStrategy, Callable[[list[float]], float]] = {
    ComposeStrategy.MIN: min,
    ComposeStrategy.MAX: max,
    ComposeStrategy.AVG: _mean,
}


def _compose(kind: str, strategy: ComposeStrategy, funcs: tuple) -> Callable[..., float]:
    if not funcs:
        logger.debug("empty %s cost composition", kind)
        raise EmptyComposition(kind)
    if len(funcs) == 1:
        return funcs[0]

    reduce = _REDUCERS.get(strategy) if isinstance(strategy, ComposeStrategy) else None
    if reduce is None:
        # Closed enumeration: reaching this is a bug in the caller.
        raise AssertionError(f"unknown compose strategy for {kind} cost: {strategy!r}")

    logger.debug("composing %d %s cost functions with %s", len(funcs), kind, strategy.name)

    def composed(*chars: str) -> float:
        return reduce([f(*chars) for f in funcs])

    return composed


def compose_insert_cost(strategy: ComposeStrategy, *funcs: InsertCost) -> InsertCost:
    """Combine insert cost functions with MIN, MAX or AVG."""
    return _compose("insert", strategy, funcs)


def compose_delete_cost(strategy: ComposeStrategy, *funcs: DeleteCost) -> DeleteCost:
    """Combine delete cost functions with MIN, MAX or AVG."""
    return _compose("delete", strategy, funcs)


def compose_replace_cost(strategy: ComposeStrategy, *funcs: ReplaceCost) -> ReplaceCost:
    """Combine replace cost functions with MIN, MAX or AVG."""
    return _compose("replace", strategy, funcs)


# ═══════════════════════════════════════════════════════════════════
#  WEIGHTED COMPOSITION
# ═══════════════════════════════════════════════════════════════════

def _compose_weighted(kind: str, entries: WeightedEntries) -> Callable[..., float]:
    entries = tuple(WeightedCost(*entry) for entry in entries)
    if not entries:
        logger.debug("empty weighted %s cost composition", kind)
        raise EmptyComposition(kind)

    weights = tuple(float(e.weight) for e in entries)
    # `not w >= 0` also rejects NaN
    if any(not math.isfinite(w) or not w >= 0 for w in weights):
        logger.debug("rejecting %s cost weights %r", kind, weights)
        raise InvalidWeight(kind, weights, "weights must be finite and non-negative")
    total = sum(weights)
    if total == 0:
        logger.debug("rejecting %s cost weights %r", kind, weights)
        raise InvalidWeight(kind, weights, "total weight is zero")

    if len(entries) == 1:
        return entries[0].func

    funcs = tuple(e.func for e in entries)
    logger.debug("composing %d weighted %s cost functions (total weight %g)",
                 len(funcs), kind, total)

    def composed(*chars: str) -> float:
        return sum(w * f(*chars) for f, w in zip(funcs, weights)) / total

    return composed


def compose_weighted_insert_cost(entries: WeightedEntries) -> InsertCost:
    """Weighted average of insert cost functions; ``entries`` are (func, weight) pairs."""
    return _compose_weighted("insert", entries)


def compose_weighted_delete_cost(entries: WeightedEntries) -> DeleteCost:
    """Weighted average of delete cost functions; ``entries`` are (func, weight) pairs."""
    return _compose_weighted("delete", entries)


def compose_weighted_replace_cost(entries: WeightedEntries) -> ReplaceCost:
    """Weighted average of replace cost functions; ``entries`` are (func, weight) pairs."""
    return _compose_weighted("replace", entries)
