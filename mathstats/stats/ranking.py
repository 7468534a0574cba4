"""Tie-averaged ranking used by the rank correlation engine."""

from __future__ import annotations

from typing import Dict, List, Sequence, Tuple


def rank_descending(scores: Sequence[float]) -> Tuple[float, ...]:
    """Rank ``scores`` so the highest value gets rank 1.

    The scores are walked in descending order. When ``k`` original positions
    share the current value and the rank cursor stands at ``r``, each of them
    receives the average of ranks ``r .. r + k - 1``, i.e. ``r + (k - 1) / 2``,
    and the cursor moves on by ``k``. Two scores tied for second place both get
    ``2.5`` and the next score gets ``4``.

    Args:
        scores: Scores in their original order.

    Returns:
        tuple[float, ...]: Rank for each score, aligned with ``scores``.
    """
    values = [float(s) for s in scores]

    positions: Dict[float, List[int]] = {}
    for index, value in enumerate(values):
        positions.setdefault(value, []).append(index)

    ranks = [0.0] * len(values)
    cursor = 1
    for value in sorted(positions, reverse=True):
        tied = positions[value]
        k = len(tied)
        average_rank = cursor + (k - 1) / 2.0
        for index in tied:
            ranks[index] = average_rank
        cursor += k
    return tuple(ranks)
