"""
editcost.costs — Cost functions for the edit-distance engine.

A cost function prices a single edit operation:

    InsertCost(c)     → cost of inserting character c
    DeleteCost(c)     → cost of deleting character c
    ReplaceCost(a, b) → cost of replacing character a with b

Characters are single Unicode code points (one-character ``str``).
Cost functions must be pure and deterministic; the engine may call
them any number of times, in any order, from any thread.

The defaults reproduce classic Levenshtein distance.  The factories
below cover the usual tuning needs: constant prices, case folding,
confusion tables (OCR, keyboard neighbours) and whitespace tolerance.
"""

from typing import Callable, Mapping


InsertCost = Callable[[str], float]
DeleteCost = Callable[[str], float]
ReplaceCost = Callable[[str, str], float]


# ═══════════════════════════════════════════════════════════════════
#  DEFAULTS (unit costs)
# ═══════════════════════════════════════════════════════════════════

def default_insert_cost(c: str) -> float:
    """Inserting any character costs 1."""
    return 1.0


def default_delete_cost(c: str) -> float:
    """Deleting any character costs 1."""
    return 1.0


def default_replace_cost(a: str, b: str) -> float:
    """Replacing a character costs 0 if it is unchanged, otherwise 1."""
    return 0.0 if a == b else 1.0


# ═══════════════════════════════════════════════════════════════════
#  FACTORIES
# ═══════════════════════════════════════════════════════════════════

def constant_cost(value: float) -> Callable[[str], float]:
    """Unary cost (insert or delete) that always returns ``value``."""
    value = float(value)

    def cost(c: str) -> float:
        return value

    return cost


def constant_replace_cost(value: float, match: float = 0.0) -> ReplaceCost:
    """
    Replace cost of ``value`` for different characters and ``match``
    for equal ones.

    ``constant_replace_cost(2, match=2)`` charges every substitution,
    even a character for itself.
    """
    value = float(value)
    match = float(match)

    def cost(a: str, b: str) -> float:
        return match if a == b else value

    return cost


def case_insensitive_replace_cost(case_cost: float = 0.0,
                                  mismatch: float = 1.0) -> ReplaceCost:
    """
    Replace cost that treats case changes as (nearly) free.

        equal characters            → 0
        equal after casefold()      → case_cost
        anything else               → mismatch
    """
    case_cost = float(case_cost)
    mismatch = float(mismatch)

    def cost(a: str, b: str) -> float:
        if a == b:
            return 0.0
        if a.casefold() == b.casefold():
            return case_cost
        return mismatch

    return cost


def confusion_replace_cost(table: Mapping[tuple[str, str], float],
                           default: float = 1.0,
                           symmetric: bool = True) -> ReplaceCost:
    """
    Replace cost looked up in a confusion table.

    ``table`` maps ``(a, b)`` pairs to the cost of substituting ``a``
    with ``b`` — e.g. ``{("0", "O"): 0.1, ("l", "1"): 0.2}`` for OCR
    output.  Equal characters cost 0, pairs missing from the table
    cost ``default``.  With ``symmetric=True`` a pair is also looked
    up reversed, so only one direction needs listing.

    The table is copied; later changes to the caller's mapping have
    no effect.
    """
    costs = {pair: float(v) for pair, v in table.items()}
    if symmetric:
        for (a, b), v in list(costs.items()):
            costs.setdefault((b, a), v)
    default = float(default)

    def cost(a: str, b: str) -> float:
        if a == b:
            return 0.0
        return costs.get((a, b), default)

    return cost


def whitespace_cost(space: float = 0.0, other: float = 1.0) -> Callable[[str], float]:
    """
    Unary cost that makes inserting or deleting whitespace cheap.

    Use for both insert and delete costs to get whitespace-tolerant
    matching: ``"foo bar"`` vs ``"foobar"`` then costs ``space``.
    """
    space = float(space)
    other = float(other)

    def cost(c: str) -> float:
        return space if c.isspace() else other

    return cost
