"""
editcost — Edit distance with pluggable costs
=============================================

Levenshtein distance where inserting, deleting or replacing a character
costs whatever you say it costs.

    distance("kitten", "sitting")                          → 3.0
    distance("abc", "", delete_cost=lambda c: 2)           → 6.0
    distance("안녕하세요", "안녕하세여")                    → 1.0

Cost functions are plain callables on single code points and can be
combined from several candidates:

    rep = compose_replace_cost(ComposeStrategy.MIN, ocr_costs, keyboard_costs)
    engine = Levenshtein(replace_cost=rep)
    engine.distance("he1lo", "hello")
"""

from editcost.core import (
    Levenshtein,
    distance,
    normalized_distance,
)
from editcost.compose import (
    ComposeStrategy,
    WeightedCost,
    CompositionError,
    EmptyComposition,
    InvalidWeight,
    compose_insert_cost,
    compose_delete_cost,
    compose_replace_cost,
    compose_weighted_insert_cost,
    compose_weighted_delete_cost,
    compose_weighted_replace_cost,
)
from editcost.costs import (
    InsertCost, DeleteCost, ReplaceCost,
    default_insert_cost, default_delete_cost, default_replace_cost,
    constant_cost, constant_replace_cost, case_insensitive_replace_cost,
    confusion_replace_cost, whitespace_cost,
)
from editcost.formats import to_sequence, sequence_to_string

__version__ = "0.1.0"
__all__ = [
    "Levenshtein", "distance", "normalized_distance",
    "ComposeStrategy", "WeightedCost",
    "CompositionError", "EmptyComposition", "InvalidWeight",
    "compose_insert_cost", "compose_delete_cost", "compose_replace_cost",
    "compose_weighted_insert_cost", "compose_weighted_delete_cost",
    "compose_weighted_replace_cost",
    "InsertCost", "DeleteCost", "ReplaceCost",
    "default_insert_cost", "default_delete_cost", "default_replace_cost",
    "constant_cost", "constant_replace_cost", "case_insensitive_replace_cost",
    "confusion_replace_cost", "whitespace_cost",
    "to_sequence", "sequence_to_string",
]
