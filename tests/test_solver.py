import os
import sys
import itertools

sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))

import pytest

import utils
from solver import alien_order, infer_order, order_valid, run_solver, OrderStatus, OrderResult
from letters import InvalidWordError

SAMPLE = ["wrt", "wrf", "er", "ett", "rftt"]


def test_alien_order_sample():
    assert alien_order(SAMPLE) == "wertf"
    assert order_valid(alien_order(SAMPLE), SAMPLE)


def test_alien_order_two_words():
    assert alien_order(["z", "x"]) == "zx"


def test_alien_order_cycle():
    assert alien_order(["z", "x", "z"]) == ""


def test_alien_order_three_letter_cycle():
    # a<b, b<c, c<a
    assert alien_order(["ab", "bc", "ca", "ab"]) == ""


def test_alien_order_insufficient_input():
    assert alien_order(["abc"]) == ""
    assert alien_order([]) == ""


def test_alien_order_no_edges():
    assert alien_order(["ab", "ab"]) in ("ab", "ba")


def test_alien_order_prefix_pairs():
    assert sorted(alien_order(["ab", "abc"])) == ["a", "b", "c"]
    # longer word first: still no edge, letters are all present
    assert sorted(alien_order(["abc", "ab"])) == ["a", "b", "c"]


def test_alien_order_case_insensitive():
    mixed = ["WRT", "wRf", "Er", "eTT", "RFTT"]
    assert alien_order(mixed) == alien_order([w.lower() for w in mixed])


def test_alien_order_rejects_non_letters():
    with pytest.raises(InvalidWordError):
        alien_order(["ab", "a-c"])
    with pytest.raises(InvalidWordError):
        alien_order(["\u212aa", "ab"])


def test_infer_order_statuses():
    ok = infer_order(SAMPLE)
    assert ok.status is OrderStatus.OK
    assert ok
    assert ok.order == "wertf"

    empty = infer_order(["abc"])
    assert empty.status is OrderStatus.EMPTY
    assert not empty
    assert empty.order == ""

    cyc = infer_order(["z", "x", "z"])
    assert cyc.status is OrderStatus.CYCLE
    assert not cyc
    assert cyc.order == ""
    assert sorted(cyc.remaining) == ["x", "z"]
    assert cyc.cycle[0] == cyc.cycle[-1]


def test_infer_order_discovery_tie_break():
    assert infer_order(["ab", "ab"], tie_break="discovery").order == "ab"
    assert infer_order(["ba", "ba"], tie_break="discovery").order == "ba"
    assert infer_order(["ba", "ba"]).order == "ab"


def test_order_result_equality():
    assert infer_order(["z", "x"]) == OrderResult(OrderStatus.OK, order="zx")
    assert "CYCLE" in repr(infer_order(["z", "x", "z"]))


def test_order_result_equality_includes_cycle():
    same = OrderResult(OrderStatus.CYCLE, remaining=["a", "b", "c"], cycle=["a", "b", "a"])
    other = OrderResult(OrderStatus.CYCLE, remaining=["a", "b", "c"], cycle=["b", "c", "b"])
    assert same != other
    assert same == OrderResult(OrderStatus.CYCLE, remaining=["a", "b", "c"], cycle=["a", "b", "a"])
    assert infer_order(["z", "x", "z"]) == infer_order(["z", "x", "z"])


@pytest.mark.parametrize("words", [
    SAMPLE,
    ["baa", "abcd", "abca", "cab", "cad"],
    ["caa", "aaa", "aab"],
    ["x", "y", "yz", "zx"],
    ["hello", "leetcode"],
    ["word", "world", "row"],
])
def test_result_satisfies_every_pair(words):
    order = alien_order(words)
    assert order
    assert len(order) == len({ch for w in words for ch in w})
    assert order_valid(order, words)


def test_order_valid_rejects_bad_orders():
    assert not order_valid("ewrtf", SAMPLE)   # e before w
    assert not order_valid("wert", SAMPLE)    # missing f
    assert not order_valid("wertff", SAMPLE)  # repeated f
    assert order_valid("WERTF", SAMPLE)


def test_only_valid_permutations_accepted():
    words = ["baa", "abcd", "abca", "cab", "cad"]
    valid = ["".join(p) for p in itertools.permutations("abcd") if order_valid("".join(p), words)]
    assert valid == ["bdac"]
    assert alien_order(words) == "bdac"


def test_run_solver_prints_order(capsys):
    assert run_solver(SAMPLE) == 0
    out = capsys.readouterr().out
    assert out.splitlines()[-1] == "wertf"


def test_run_solver_cycle(capsys):
    assert run_solver(["z", "x", "z"]) == 1
    out = capsys.readouterr().out
    assert "No valid order" in out
    assert "cycle" in out


def test_run_solver_not_enough_words(capsys):
    assert run_solver(["abc"]) == 1
    assert "at least two words" in capsys.readouterr().out


def test_run_solver_invalid_word(capsys):
    with pytest.raises(SystemExit) as exc:
        run_solver(["ab", "a1"])
    assert exc.value.code == 2
    assert "not an ASCII letter" in capsys.readouterr().out


def test_run_solver_verbose(monkeypatch, capsys):
    monkeypatch.setattr(utils, "VERBOSE", False)
    assert run_solver(["--verbose", "--tie-break", "discovery", "z", "x"]) == 0
    out = capsys.readouterr().out
    assert "in_degree constructed" in out
    assert "letters:" in out
    # the flag only applies to that run
    assert utils.VERBOSE is False
    capsys.readouterr()
    infer_order(["z", "x"])
    assert capsys.readouterr().out == ""
