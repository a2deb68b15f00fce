"""
editcost.core — Edit distance with pluggable costs
==================================================

§1  THE DISTANCE
────────────────

Classic Levenshtein distance counts single-character insertions,
deletions and substitutions.  Here every operation has a price
supplied by a cost function:

    ins(c)      cost of inserting c
    del(c)      cost of deleting c
    rep(a, b)   cost of replacing a with b

and the distance is the cheapest total price of any edit script
turning `a` into `b`:

    D[0][0] = 0
    D[i][0] = D[i-1][0] + del(aᵢ)
    D[0][j] = D[0][j-1] + ins(bⱼ)
    D[i][j] = min(
        D[i][j-1]   + ins(bⱼ),          # insert bⱼ
        D[i-1][j]   + del(aᵢ),          # delete aᵢ
        D[i-1][j-1] + rep(aᵢ, bⱼ),      # replace (or keep) aᵢ
    )

    distance(a, b) = D[m][n]

With ins = del = 1 and rep = (0 if equal else 1) this is exactly
Levenshtein distance.  No metric is assumed: costs may be asymmetric
and need not satisfy the triangle inequality, so distance(a, b) and
distance(b, a) can differ.


§2  TWO KERNELS, ONE RESULT
───────────────────────────

_row_distance
    The table is never materialised.  One working row of n+1 cells
    is updated in place; before row[j] is overwritten its old value
    (D[i-1][j]) is saved as the diagonal for column j+1.
    O(m·n) time, O(n) space, one cost call per candidate.

_wavefront_distance
    Every cell on an anti-diagonal (i + j = k) depends only on
    diagonals k-1 and k-2, so a whole diagonal is one numpy
    expression.  Costs are evaluated up front: ins once per
    character of b, del once per character of a, rep once per
    distinct (aᵢ, bⱼ) pair.  O(m·n) time, O(min(m, n)) space.

Both compute every cell as the min of the same three single float
additions on the same predecessor values, so they agree bit for bit.
The wavefront kernel only pays off when both inputs are long, and its
replace-cost table stays within O(m + n) only when the inputs use few
distinct characters; see _use_wavefront.


§3  CHARACTERS
──────────────

Inputs are converted to code points (editcost.formats.to_sequence)
before indexing.  Bytes are decoded as UTF-8, so "안녕" is two
characters, not six bytes.
"""

import dataclasses
import logging
from dataclasses import dataclass
from typing import Optional

import numpy as np

from .costs import (
    DeleteCost, InsertCost, ReplaceCost,
    default_delete_cost, default_insert_cost, default_replace_cost,
)
from .formats import Sequence, TextLike, to_sequence


logger = logging.getLogger(__name__)


# Kernel selection: the wavefront kernel is used only when the table has
# at least this many cells AND the shorter input has at least this many
# characters (short diagonals make numpy slower than plain Python).
# It also needs few distinct characters; see _use_wavefront.
WAVEFRONT_MIN_CELLS = 250_000
WAVEFRONT_MIN_WIDTH = 32


# ═══════════════════════════════════════════════════════════════════
#  ENGINE
# ═══════════════════════════════════════════════════════════════════

@dataclass(frozen=True, slots=True)
class Levenshtein:
    """
    An edit-distance engine with fixed insert/delete/replace costs.

    Unspecified costs default to classic Levenshtein (1, 1, 0-or-1).
    Engines are immutable and hold no state between calls, so one
    engine can be shared freely, including across threads.

        >>> Levenshtein().distance("kitten", "sitting")
        3.0
        >>> Levenshtein(delete_cost=lambda c: 2).distance("abc", "")
        6.0
    """
    insert_cost: InsertCost = default_insert_cost
    delete_cost: DeleteCost = default_delete_cost
    replace_cost: ReplaceCost = default_replace_cost

    def with_insert_cost(self, cost: InsertCost) -> "Levenshtein":
        """Copy of this engine with a different insert cost."""
        return dataclasses.replace(self, insert_cost=cost)

    def with_delete_cost(self, cost: DeleteCost) -> "Levenshtein":
        """Copy of this engine with a different delete cost."""
        return dataclasses.replace(self, delete_cost=cost)

    def with_replace_cost(self, cost: ReplaceCost) -> "Levenshtein":
        """Copy of this engine with a different replace cost."""
        return dataclasses.replace(self, replace_cost=cost)

    def distance(self, a: TextLike, b: TextLike) -> float:
        """
        Minimum total cost of transforming `a` into `b`.

        Total over all inputs: any two sequences, either or both
        empty, of any length and any Unicode content.
        """
        a = to_sequence(a)
        b = to_sequence(b)
        m, n = len(a), len(b)

        if m == 0:
            return float(sum(self.insert_cost(c) for c in b))
        if n == 0:
            return float(sum(self.delete_cost(c) for c in a))

        if _use_wavefront(a, b):
            logger.debug("wavefront kernel for %d x %d table", m, n)
            return _wavefront_distance(a, b, self.insert_cost,
                                       self.delete_cost, self.replace_cost)
        return _row_distance(a, b, self.insert_cost,
                             self.delete_cost, self.replace_cost)

    def normalized_distance(self, a: TextLike, b: TextLike) -> float:
        """
        Distance scaled to [0, 1].

        Divides by the cost of the trivial script "delete all of a,
        insert all of b", which bounds the distance from above when
        costs are non-negative.  Returns 0.0 when that bound is 0.
        """
        a = to_sequence(a)
        b = to_sequence(b)
        d = self.distance(a, b)
        if d == 0.0:
            return 0.0
        bound = (sum(self.delete_cost(c) for c in a)
                 + sum(self.insert_cost(c) for c in b))
        if bound <= 0.0:
            return 0.0
        return min(1.0, max(0.0, d / bound))


_DEFAULT_ENGINE = Levenshtein()


def _engine(insert_cost, delete_cost, replace_cost) -> Levenshtein:
    overrides = {
        name: cost
        for name, cost in (("insert_cost", insert_cost),
                           ("delete_cost", delete_cost),
                           ("replace_cost", replace_cost))
        if cost is not None
    }
    if not overrides:
        return _DEFAULT_ENGINE
    return dataclasses.replace(_DEFAULT_ENGINE, **overrides)


def distance(a: TextLike, b: TextLike, *,
             insert_cost: Optional[InsertCost] = None,
             delete_cost: Optional[DeleteCost] = None,
             replace_cost: Optional[ReplaceCost] = None) -> float:
    """
    Edit distance between `a` and `b`.

    Shorthand for ``Levenshtein(...).distance(a, b)``; costs left as
    None use the defaults.

        distance("kitten", "sitting")                        → 3.0
        distance("abc", "xyz", replace_cost=lambda a, b: 2)  → 6.0
    """
    return _engine(insert_cost, delete_cost, replace_cost).distance(a, b)


def normalized_distance(a: TextLike, b: TextLike, *,
                        insert_cost: Optional[InsertCost] = None,
                        delete_cost: Optional[DeleteCost] = None,
                        replace_cost: Optional[ReplaceCost] = None) -> float:
    """Normalized edit distance in [0, 1].  See Levenshtein.normalized_distance."""
    return _engine(insert_cost, delete_cost, replace_cost).normalized_distance(a, b)


# ═══════════════════════════════════════════════════════════════════
#  KERNELS
#  Both expect non-empty sequences; empty inputs are handled above.
# ═══════════════════════════════════════════════════════════════════

def _use_wavefront(a: Sequence, b: Sequence) -> bool:
    """
    Whether the wavefront kernel may run on these inputs.

    The wavefront kernel keeps a replace-cost table of one entry per
    distinct (aᵢ, bⱼ) pair.  That table must stay within O(m + n) so
    working memory never grows with the number of cells; inputs with
    large alphabets (e.g. CJK text) go to the row kernel instead.
    """
    m, n = len(a), len(b)
    if m * n < WAVEFRONT_MIN_CELLS or min(m, n) < WAVEFRONT_MIN_WIDTH:
        return False
    return len(set(a)) * len(set(b)) <= m + n


def _row_distance(a: Sequence, b: Sequence,
                  insert_cost: InsertCost,
                  delete_cost: DeleteCost,
                  replace_cost: ReplaceCost) -> float:
    """Single-row dynamic program."""
    m, n = len(a), len(b)

    # row[j] = D[0][j]: build b[:j] from nothing
    row = [0.0] * (n + 1)
    for j in range(1, n + 1):
        row[j] = row[j - 1] + insert_cost(b[j - 1])

    for i in range(1, m + 1):
        ca = a[i - 1]
        diagonal = row[0]           # D[i-1][0]
        row[0] += delete_cost(ca)   # D[i][0]

        for j in range(1, n + 1):
            cb = b[j - 1]
            above = row[j]          # D[i-1][j], about to be overwritten

            insert = row[j - 1] + insert_cost(cb)
            delete = above + delete_cost(ca)
            replace = diagonal + replace_cost(ca, cb)
            row[j] = min(insert, delete, replace)

            diagonal = above

    return float(row[n])


def _wavefront_distance(a: Sequence, b: Sequence,
                        insert_cost: InsertCost,
                        delete_cost: DeleteCost,
                        replace_cost: ReplaceCost) -> float:
    """Anti-diagonal dynamic program over numpy arrays."""
    m, n = len(a), len(b)

    ins = [insert_cost(c) for c in b]
    dels = [delete_cost(c) for c in a]

    # Edges accumulate left to right, exactly as in _row_distance.
    top = [0.0] * (n + 1)
    for j in range(1, n + 1):
        top[j] = top[j - 1] + ins[j - 1]
    left = [0.0] * (m + 1)
    for i in range(1, m + 1):
        left[i] = left[i - 1] + dels[i - 1]

    # Replace costs for each distinct character pair
    a_alpha = {c: k for k, c in enumerate(dict.fromkeys(a))}
    b_alpha = {c: k for k, c in enumerate(dict.fromkeys(b))}
    rep = np.array([[replace_cost(x, y) for y in b_alpha] for x in a_alpha],
                   dtype=np.float64)
    a_idx = np.fromiter((a_alpha[c] for c in a), dtype=np.intp, count=m)

    # Along a diagonal i grows while j shrinks, so b-side arrays are
    # reversed: cell (i, k-i) reads index n-k+i.
    b_idx_rev = np.fromiter((b_alpha[c] for c in reversed(b)), dtype=np.intp, count=n)
    ins_rev = np.array(ins[::-1], dtype=np.float64)
    dels = np.array(dels, dtype=np.float64)

    # Diagonal k stores cells i = lo..hi with lo = max(0, k-n), hi = min(m, k).
    prev2, lo2 = np.empty(0), 0            # diagonal k-2
    prev1, lo1 = np.array([0.0]), 0        # diagonal k-1 (starts as D[0][0])

    for k in range(1, m + n + 1):
        lo, hi = max(0, k - n), min(m, k)
        cur = np.empty(hi - lo + 1)

        if lo == 0:
            cur[0] = top[k]
        if hi == k:
            cur[-1] = left[k]

        s, e = max(1, k - n), min(m, k - 1)     # rows with i ≥ 1 and j ≥ 1
        if s <= e:
            jb = slice(n - k + s, n - k + e + 1)
            insert = prev1[s - lo1:e - lo1 + 1] + ins_rev[jb]
            delete = prev1[s - 1 - lo1:e - lo1] + dels[s - 1:e]
            replace = prev2[s - 1 - lo2:e - lo2] + rep[a_idx[s - 1:e], b_idx_rev[jb]]
            np.minimum(np.minimum(insert, delete), replace, out=cur[s - lo:e - lo + 1])

        prev2, lo2 = prev1, lo1
        prev1, lo1 = cur, lo

    return float(prev1[0])
