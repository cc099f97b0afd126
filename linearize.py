from typing import Dict, Iterable, List, Tuple

from utils import TIE_BREAKS, DEFAULT_TIE_BREAK, vlog, format_letters


def _zero_degree(in_degree, tie_break):
    free = [ch for ch, deg in in_degree.items() if deg == 0]
    if tie_break == 'alpha':
        free.sort()
    return free


def linearize(
    in_degree: Dict[str, int],
    adjacency: Dict[str, List[str]],
    tie_break: str = DEFAULT_TIE_BREAK,
) -> Tuple[List[str], Dict[str, int]]:
    """Kahn's algorithm over a precedence graph.

    Every round takes all letters whose in-degree is 0 as a batch, emits
    them (ordered by ``tie_break``), and decrements each successor once per
    recorded edge. Letters freed during a round wait for the next one.

    ``in_degree`` is copied, not consumed. Returns ``(order, remaining)``,
    where ``remaining`` maps each unemitted letter to its residual in-degree;
    it is non-empty only when a cycle stopped the walk.
    """
    if tie_break not in TIE_BREAKS:
        raise ValueError(f"Unknown tie-break {tie_break!r}; expected one of {', '.join(TIE_BREAKS)}")

    pending = dict(in_degree)
    order = []
    while pending:
        batch = _zero_degree(pending, tie_break)
        if not batch:
            # leftover letters all wait on each other
            vlog(f"cycle: no free letter among {format_letters(pending)}")
            return order, pending
        for ch in batch:
            order.append(ch)
            del pending[ch]
            for nxt in adjacency.get(ch, ()):
                pending[nxt] -= 1
        vlog(f"in_degree: {pending}")
        vlog(f"letters: {format_letters(order)}")
    return order, {}


def find_cycle(
    in_degree: Dict[str, int],
    adjacency: Dict[str, List[str]],
    remaining: Iterable[str],
) -> List[str]:
    """
    Return one concrete cycle among ``remaining`` letters, closed on its
    first letter (e.g. ``['x', 'z', 'x']``), or [] if there is none.

    Every letter left over by ``linearize`` has a predecessor that was also
    left over, so walking predecessors backwards must revisit a letter.
    """
    left = set(remaining)
    if not left:
        return []
    preds = {}
    for src, dsts in adjacency.items():
        if src not in left:
            continue
        for dst in dsts:
            if dst in left:
                preds.setdefault(dst, src)

    start = next(ch for ch in in_degree if ch in left)
    seen = {}
    path = []
    ch = start
    while ch not in seen:
        if ch not in preds:
            return []
        seen[ch] = len(path)
        path.append(ch)
        ch = preds[ch]
    # path walks predecessors, so reverse it to read in "comes-before" order
    cycle = path[seen[ch]:][::-1]
    return cycle + [cycle[0]]
