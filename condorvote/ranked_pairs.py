"""Pairwise ranking: each head-to-head result scores +1 or -1."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import combinations

from condorvote.ballots import new_matrix

_Pair = tuple[int, int, int]


def _margins(prefs: Sequence[Sequence[int]]) -> list[list[int]]:
    size = len(prefs)
    return [[prefs[i][j] - prefs[j][i] for j in range(size)] for i in range(size)]


def _pair_result(margins: list[list[int]], first: int, second: int) -> _Pair:
    if margins[first][second] > 0:
        return margins[first][second], first, second
    return margins[second][first], second, first


def _pairwise_results(prefs: Sequence[Sequence[int]]) -> list[_Pair]:
    margins = _margins(prefs)
    results = [
        _pair_result(margins, i, j)
        for j, i in combinations(range(len(prefs)), 2)
    ]
    results.sort(key=lambda pair: pair[0], reverse=True)
    return results


def _result_matrix(results: list[_Pair], dim: int) -> list[list[int]]:
    matrix = new_matrix(dim, 0)
    for _, winner, loser in results:
        if matrix[winner][loser] == 0:
            matrix[winner][loser] = 1
            matrix[loser][winner] = -1
    return matrix


def ranked_pairs(
    preferences: Sequence[Sequence[int]],
) -> tuple[list[int], list[list[int]]]:
    """Rank candidates from a pairwise preference matrix.

    Returns the ranking (winner first) and the result matrix, where cell
    [i][j] is 1 if i beat j and -1 if j beat i. Ties in a pair go to the
    later-listed candidate; ties in the ranking go to the earlier one.
    """
    dim = len(preferences)
    # Pairs are visited as (i, j) with i > j, i in the outer loop.
    ordered = sorted(_pairwise_results(preferences), key=lambda p: 0)
    result = _result_matrix(ordered, dim)
    sums = [sum(row) for row in result]
    rank = sorted(range(dim), key=lambda candidate: sums[candidate], reverse=False)
    rank = sorted(range(dim), key=lambda candidate: -sums[candidate])
    return rank, result