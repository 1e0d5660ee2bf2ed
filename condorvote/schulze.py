"""Schulze method via widest paths over the pairwise preference graph."""

from __future__ import annotations

from collections.abc import Sequence

from condorvote.ballots import new_matrix


def _strongest_paths(prefs: Sequence[Sequence[int]]) -> list[list[int]]:
    dim = len(prefs)
    strengths = new_matrix(dim, 0)
    for i in range(dim):
        for j in range(dim):
            if prefs[i][j] > prefs[j][i]:
                strengths[i][j] = prefs[i][j]

    for i in range(dim):
        for j in range(dim):
            if i == j:
                continue
            for k in range(dim):
                if k not in (i, j):
                    strengths[j][k] = max(
                        strengths[j][k], min(strengths[j][i], strengths[i][k])
                    )
    return strengths


def _winner_path(paths: list[list[int]]) -> list[int]:
    dim = len(paths)
    victories = [
        sum(1 for j in range(dim) if j != i and paths[i][j] > paths[j][i])
        for i in range(dim)
    ]
    return sorted(range(dim), key=lambda candidate: -victories[candidate])


def schulze(
    preferences: Sequence[Sequence[int]],
) -> tuple[list[int], list[list[int]]]:
    """Rank candidates by the Schulze method.

    Returns the ranking (winner first) and the strongest-path matrix.
    Ties in the ranking go to the earlier-listed candidate.
    """
    paths = _strongest_paths(preferences)
    return _winner_path(paths), paths