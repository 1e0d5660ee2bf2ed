"""Loading ballots, candidate lists and pairwise preference matrices."""

from __future__ import annotations

import copy
import re
from collections.abc import Sequence
from pathlib import Path
from typing import TypeVar

T = TypeVar("T")

_NUMBER = re.compile(r"\+?[0-9]+")


class BallotError(ValueError):
    """Raised when ballot or matrix data is malformed."""


def new_matrix(dim: int, filler: T) -> list[list[T]]:
    """Return a ``dim`` x ``dim`` matrix whose cells are copies of ``filler``."""
    return [[copy.copy(filler) for _ in range(dim)] for _ in range(dim)]


def _parse_value(text: str) -> int:
    value = text.strip()
    if not _NUMBER.fullmatch(value):
        raise BallotError(f"Valor problemático encontrado em cédula: {text}")
    return int(value)


def _read_rows(path: str | Path) -> list[list[int]]:
    contents = Path(path).read_text(encoding="utf-8")
    return [
        [_parse_value(field) for field in line.split(",")]
        for line in contents.split("\n")
        if line
    ]


def load_ballots(path: str | Path) -> list[list[int]]:
    """Read ballots: one per line, candidate indices separated by commas."""
    return _read_rows(path)


def load_matrix(path: str | Path) -> list[list[int]]:
    """Read a square preference matrix written as comma separated rows."""
    matrix = _read_rows(path)
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise BallotError(
            "Matriz de preferências em estado invalido: "
            "há linhas com tamanhos diferentes."
        )
    return matrix


def load_candidates(path: str | Path) -> list[str]:
    """Read candidate names, one per line."""
    return Path(path).read_text(encoding="utf-8").split("\n")


def preference_matrix(
    ballots: Sequence[Sequence[int]], candidate_count: int
) -> list[list[int]]:
    """Count, for each pair (i, j), the ballots preferring candidate i to j.

    A candidate is preferred to every candidate not ranked above it on the
    ballot, including candidates the ballot leaves out.
    """
    matrix = new_matrix(candidate_count, 0)
    for ballot in ballots:
        for position, candidate in enumerate(ballot):
            if not 0 <= candidate < candidate_count:
                raise BallotError(
                    f"Candidata inexistente em cédula: {candidate}"
                )
            ranked_above = set(ballot[:position])
            for beaten in range(candidate_count):
                if beaten not in ranked_above and beaten != candidate:
                    matrix[candidate][beaten] += 1
    return matrix