import argparse
import time
from enum import Enum
from colorama import Fore

import utils
from utils import log_with_time, vlog, format_letters, TIE_BREAKS, DEFAULT_TIE_BREAK
from letters import normalize_words, InvalidWordError
from graph import PrecedenceGraph, first_difference
from linearize import linearize, find_cycle


class OrderStatus(Enum):
    OK = "ok"
    EMPTY = "empty"    # fewer than two words, nothing to compare
    CYCLE = "cycle"    # contradictory constraints


class OrderResult:
    """Outcome of one inference: the order on success, else why it failed."""

    __slots__ = ("status", "order", "remaining", "cycle")

    def __init__(self, status, order="", remaining=(), cycle=()):
        self.status = status
        self.order = order
        self.remaining = list(remaining)
        self.cycle = list(cycle)

    def __bool__(self):
        return self.status is OrderStatus.OK

    def __eq__(self, other):
        if not isinstance(other, OrderResult):
            return NotImplemented
        return (self.status, self.order, self.remaining, self.cycle) == (
            other.status, other.order, other.remaining, other.cycle
        )

    def __repr__(self):
        return f"OrderResult(status={self.status.name}, order={self.order!r}, remaining={self.remaining!r}, cycle={self.cycle!r})"


def infer_order(words, tie_break=DEFAULT_TIE_BREAK):
    """Infer the alphabet order implied by a sorted word list.

    Words are case-normalized; characters outside a-z raise
    ``InvalidWordError``. Fewer than two words gives ``OrderStatus.EMPTY``.
    Contradictory constraints, or a linearization that did not emit every
    collected letter, give ``OrderStatus.CYCLE``.
    """
    t0 = time.time()
    words = normalize_words(words)
    if len(words) < 2:
        vlog(f"Need at least two words to compare, got {len(words)}")
        return OrderResult(OrderStatus.EMPTY)

    graph = PrecedenceGraph.from_words(words)
    order, remaining = linearize(graph.in_degree, graph.adjacency, tie_break=tie_break)

    if remaining or len(order) != len(graph):
        cycle = find_cycle(graph.in_degree, graph.adjacency, remaining)
        vlog(f"Contradictory constraints among {format_letters(remaining)}", t0)
        return OrderResult(OrderStatus.CYCLE, remaining=remaining, cycle=cycle)

    vlog(f"Order found for {len(graph)} letters", t0)
    return OrderResult(OrderStatus.OK, order="".join(order))


def alien_order(words):
    """Return one letter order consistent with ``words``, or "" if there is none."""
    return infer_order(words).order


def order_valid(order, words):
    """
    Return True if ``order`` contains each letter of ``words`` exactly once
    and puts the first differing letters of every adjacent pair in sequence.
    """
    words = normalize_words(words)
    order = order.lower()
    letters = {ch for w in words for ch in w}
    if len(order) != len(set(order)) or set(order) != letters:
        return False
    position = {ch: i for i, ch in enumerate(order)}
    for word, next_word in zip(words, words[1:]):
        diff = first_difference(word, next_word)
        if diff is not None and position[diff[0]] > position[diff[1]]:
            return False
    return True


def run_solver(argv=None):
    parser = argparse.ArgumentParser(description="Alien alphabet order solver")
    parser.add_argument("words", nargs="*", help="Words sorted under the unknown alphabet")
    parser.add_argument(
        "--tie-break",
        choices=TIE_BREAKS,
        default=DEFAULT_TIE_BREAK,
        help="Order for letters freed in the same round: alphabetical or first-seen (default: alpha)",
    )
    parser.add_argument("--verbose", action="store_true", help="Log graph construction and each removal round")
    args = parser.parse_args(argv)

    # logging settings last for this run only
    saved = utils.start_time, utils.VERBOSE
    utils.start_time = time.time()
    utils.VERBOSE = args.verbose
    try:
        return _report(parser, args)
    finally:
        utils.start_time, utils.VERBOSE = saved


def _report(parser, args):
    try:
        result = infer_order(args.words, tie_break=args.tie_break)
    except InvalidWordError as e:
        log_with_time(str(e), color=Fore.RED)
        parser.exit(2)

    if result.status is OrderStatus.EMPTY:
        log_with_time("Need at least two words to infer an order.", color=Fore.YELLOW)
        return 1
    if result.status is OrderStatus.CYCLE:
        msg = f"No valid order: contradictory constraints among {format_letters(result.remaining)}"
        if result.cycle:
            msg += f" (cycle: {' < '.join(result.cycle)})"
        log_with_time(msg, color=Fore.RED)
        return 1

    log_with_time(f"✅ Order: {result.order}", color=Fore.GREEN)
    print(result.order)
    return 0
