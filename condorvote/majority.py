"""Simple plurality count of first choices."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from dataclasses import dataclass

from condorvote.ballots import BallotError


@dataclass(frozen=True)
class Tally:
    """Number of first-choice votes received by one candidate."""

    id: int
    vote_count: int


def majority(ballots: Sequence[Sequence[int]]) -> list[Tally]:
    """Count first choices, most votes first.

    Ties are broken in favour of the candidate with the lower index.
    """
    counts: Counter[int] = Counter()
    for ballot in ballots:
        if not ballot:
            raise BallotError("Cédula vazia.")
        counts[ballot[0]] += 1
    ordered = sorted(sorted(counts.items()), key=lambda item: item[1], reverse=True)
    return [Tally(id=candidate, vote_count=count) for candidate, count in ordered]