"""
Benchmark: editcost vs. the textbook Levenshtein and across kernels.

Runs:
    §1  Classic pairs: engine result vs. a plain unit-cost Levenshtein
    §2  Custom and composed costs on realistic inputs
    §3  Kernel scaling: row vs. wavefront timings and agreement

Usage:
    python benchmark.py
"""

import sys
import os
import time

sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from editcost import (
    ComposeStrategy, Levenshtein,
    case_insensitive_replace_cost, compose_replace_cost,
    confusion_replace_cost, distance, whitespace_cost,
)
from editcost.core import _row_distance, _wavefront_distance
from editcost.costs import (
    default_delete_cost, default_insert_cost, default_replace_cost,
)
from editcost.formats import to_sequence


STRING_PAIRS = [
    ("kitten", "sitting"),
    ("saturday", "sunday"),
    ("intention", "execution"),
    ("pneumonoultramicroscopicsilicovolcanoconiosis",
     "pseudopseudohypoparathyroidism"),
    ("abcdefghijklmnopqrstuvwxyz", "zyxwvutsrqponmlkjihgfedcba"),
    ("안녕하세요😊", "안녕하세요😢"),
]


def _levenshtein(s: str, t: str) -> int:
    """Unit-cost Levenshtein with two rows, for comparison."""
    m, n = len(s), len(t)
    prev = list(range(n + 1))
    curr = [0] * (n + 1)
    for i in range(1, m + 1):
        curr[0] = i
        for j in range(1, n + 1):
            cost = 0 if s[i - 1] == t[j - 1] else 1
            curr[j] = min(prev[j] + 1, curr[j - 1] + 1, prev[j - 1] + cost)
        prev, curr = curr, prev
    return prev[n]


# ═══════════════════════════════════════════════════════════════════
#  BENCHMARKS
# ═══════════════════════════════════════════════════════════════════

def benchmark_classic_pairs():
    print("=" * 70)
    print("  §1  CLASSIC PAIRS (default costs)")
    print("=" * 70)
    print()

    all_pass = True
    for s1, s2 in STRING_PAIRS:
        expected = _levenshtein(s1, s2)

        t0 = time.perf_counter()
        d = distance(s1, s2)
        dt = time.perf_counter() - t0

        match = "✓" if d == expected else "✗"
        if d != expected:
            all_pass = False
        print(f"  {match} d(\"{s1[:30]}\", \"{s2[:30]}\") = {d:.0f}  "
              f"(Levenshtein = {expected})  [{dt*1000:.2f}ms]")

    print()
    print("  RESULT: " + ("all pairs match." if all_pass else "MISMATCH!"))
    print()


def benchmark_custom_costs():
    print("=" * 70)
    print("  §2  CUSTOM AND COMPOSED COSTS")
    print("=" * 70)
    print()

    ocr = confusion_replace_cost({("0", "O"): 0.1, ("1", "l"): 0.2, ("5", "S"): 0.3})
    case = case_insensitive_replace_cost(case_cost=0.05)
    rep = compose_replace_cost(ComposeStrategy.MIN, ocr, case)
    ws = whitespace_cost(space=0.1)

    engines = [
        ("default", Levenshtein()),
        ("ocr+case (MIN)", Levenshtein(replace_cost=rep)),
        ("ocr+case, cheap whitespace",
         Levenshtein(insert_cost=ws, delete_cost=ws, replace_cost=rep)),
    ]
    pairs = [
        ("HELL0 W0RLD", "hello world"),
        ("1nvoice no. 5123", "Invoice No.S123"),
        ("the quick brown fox", "thequickbrownfox"),
    ]

    for a, b in pairs:
        print(f"  {a!r} → {b!r}")
        for name, engine in engines:
            t0 = time.perf_counter()
            d = engine.distance(a, b)
            dt = time.perf_counter() - t0
            print(f"      {name:<28} {d:7.2f}  [{dt*1000:.2f}ms]")
        print()


def benchmark_kernels():
    print("=" * 70)
    print("  §3  KERNEL SCALING (row vs. wavefront)")
    print("=" * 70)
    print()
    print(f"  {'size':>6}  {'row':>10}  {'wavefront':>10}  {'agree':>5}")

    args = (default_insert_cost, default_delete_cost, default_replace_cost)
    for size in [50, 100, 200, 400, 800]:
        a = to_sequence("ab" * (size // 2))
        b = to_sequence("ba" * (size // 2 - 1) + "cc")

        t0 = time.perf_counter()
        d_row = _row_distance(a, b, *args)
        t_row = time.perf_counter() - t0

        t0 = time.perf_counter()
        d_wave = _wavefront_distance(a, b, *args)
        t_wave = time.perf_counter() - t0

        ok = "✓" if d_row == d_wave else "✗"
        print(f"  {size:>6}  {t_row*1000:>8.1f}ms  {t_wave*1000:>8.1f}ms  {ok:>5}")

    t0 = time.perf_counter()
    d = distance("a" * 10000, "a" * 9999 + "b")
    dt = time.perf_counter() - t0
    print()
    print(f"  10000 x 10000 near-identical: d = {d:.0f}  [{dt:.2f}s]")
    print()


def main():
    benchmark_classic_pairs()
    benchmark_custom_costs()
    benchmark_kernels()


if __name__ == "__main__":
    main()
