"""
Test suite for the ready-made cost functions and input conversion.

    §1  Default costs
    §2  Cost factories
    §3  Formats (text → code points)
"""

import sys
import os

import pytest

# Add parent to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from editcost.core import Levenshtein, distance
from editcost.costs import (
    default_insert_cost, default_delete_cost, default_replace_cost,
    constant_cost, constant_replace_cost, case_insensitive_replace_cost,
    confusion_replace_cost, whitespace_cost,
)
from editcost.formats import to_sequence, sequence_to_string


# ═══════════════════════════════════════════════════════════════════
#  §1  DEFAULT COSTS
# ═══════════════════════════════════════════════════════════════════

class TestDefaults:

    def test_unit_insert_delete(self):
        for c in "a😊안 ":
            assert default_insert_cost(c) == 1.0
            assert default_delete_cost(c) == 1.0

    def test_replace(self):
        assert default_replace_cost("a", "a") == 0.0
        assert default_replace_cost("a", "b") == 1.0
        assert default_replace_cost("a", "A") == 1.0


# ═══════════════════════════════════════════════════════════════════
#  §2  COST FACTORIES
# ═══════════════════════════════════════════════════════════════════

class TestFactories:

    def test_constant_cost(self):
        cost = constant_cost(2)
        assert cost("a") == 2.0
        assert Levenshtein(delete_cost=cost).distance("abc", "") == 6

    def test_constant_replace_cost(self):
        rep = constant_replace_cost(2)
        assert rep("a", "a") == 0.0
        assert rep("a", "b") == 2.0

    def test_constant_replace_cost_charging_matches(self):
        rep = constant_replace_cost(2, match=2)
        assert Levenshtein(replace_cost=rep).distance("abc", "xyz") == 6
        assert Levenshtein(replace_cost=rep).distance("ab", "ab") == 4

    def test_case_insensitive(self):
        rep = case_insensitive_replace_cost()
        assert rep("a", "A") == 0.0
        assert rep("a", "b") == 1.0
        assert distance("Hello", "hELLO", replace_cost=rep) == 0.0

    def test_case_cost(self):
        rep = case_insensitive_replace_cost(case_cost=0.25, mismatch=2)
        assert rep("a", "a") == 0.0
        assert rep("ß", "S") == 2.0
        assert distance("Abc", "abC", replace_cost=rep) == 0.5

    def test_confusion_table(self):
        rep = confusion_replace_cost({("0", "O"): 0.1, ("l", "1"): 0.2})
        assert rep("0", "O") == 0.1
        assert rep("O", "0") == 0.1
        assert rep("1", "l") == 0.2
        assert rep("x", "x") == 0.0
        assert rep("x", "y") == 1.0
        assert distance("he1l0", "hellO", replace_cost=rep) == pytest.approx(0.3)

    def test_confusion_table_directed(self):
        rep = confusion_replace_cost({("0", "O"): 0.1}, default=3, symmetric=False)
        assert rep("0", "O") == 0.1
        assert rep("O", "0") == 3.0

    def test_confusion_table_explicit_reverse_wins(self):
        rep = confusion_replace_cost({("a", "b"): 0.5, ("b", "a"): 0.7})
        assert rep("a", "b") == 0.5
        assert rep("b", "a") == 0.7

    def test_confusion_table_is_copied(self):
        table = {("a", "b"): 0.5}
        rep = confusion_replace_cost(table)
        table[("a", "b")] = 9
        assert rep("a", "b") == 0.5

    def test_whitespace_cost(self):
        ws = whitespace_cost()
        assert ws(" ") == 0.0
        assert ws("\t") == 0.0
        assert ws("x") == 1.0
        lev = Levenshtein(insert_cost=ws, delete_cost=ws)
        assert lev.distance("foo bar", "foobar") == 0.0
        assert lev.distance("foobar", "foo  bar") == 0.0
        assert lev.distance("foo", "fob") == 1.0


# ═══════════════════════════════════════════════════════════════════
#  §3  FORMATS
# ═══════════════════════════════════════════════════════════════════

class TestFormats:

    def test_str(self):
        assert to_sequence("héllo") == ("h", "é", "l", "l", "o")
        assert to_sequence("") == ()

    def test_bytes_decoded_as_utf8(self):
        assert to_sequence("안녕".encode("utf-8")) == ("안", "녕")
        assert to_sequence(bytearray("é😊".encode("utf-8"))) == ("é", "😊")

    def test_invalid_utf8(self):
        with pytest.raises(UnicodeDecodeError):
            to_sequence(b"\xff\xfe")

    def test_iterable(self):
        assert to_sequence(["a", "b"]) == ("a", "b")
        assert to_sequence(iter("xy")) == ("x", "y")

    def test_non_str_element(self):
        with pytest.raises(TypeError):
            to_sequence([1, 2])

    def test_multi_char_element(self):
        with pytest.raises(ValueError):
            to_sequence(["ab"])

    def test_round_trip(self):
        for s in ["", "kitten", "안녕하세요😊"]:
            assert sequence_to_string(to_sequence(s)) == s
