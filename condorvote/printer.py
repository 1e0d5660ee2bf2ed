"""Plain-text rendering of preference matrices, rankings and duel results."""

from __future__ import annotations

from collections.abc import Sequence

_DIAGONAL = "°"


def _center(text: str, width: int, fill: str = " ") -> str:
    """Center ``text`` in ``width`` columns; odd padding goes to the right."""
    padding = max(0, width - len(text))
    left = padding // 2
    return fill * left + text + fill * (padding - left)


def _cell_width(matrix: Sequence[Sequence[object]]) -> int:
    return max(
        (len(str(value)) for row in matrix for value in row),
        default=1,
    ) if any(matrix) else 1


def _bounds(size: int, digits: int) -> str:
    dashes = "-" * (digits + 1)
    return "  " + "".join(f"{dashes} " for _ in range(size))


def format_matrix(matrix: Sequence[Sequence[object]]) -> str:
    """Render a square matrix as a framed table; the diagonal shows ``°``."""
    digits = max(1, _cell_width(matrix))
    bounds = _bounds(len(matrix), digits)
    lines = [bounds]
    for i, row in enumerate(matrix):
        cells = "".join(
            _center(_DIAGONAL if i == j else str(value), digits + 1) + " "
            for j, value in enumerate(row)
        )
        lines.append(f"| {cells}|")
    lines.append(bounds)
    return "\n".join(lines) + "\n"


def show_matrix(matrix: Sequence[Sequence[object]]) -> None:
    """Print a matrix as rendered by :func:`format_matrix`."""
    print(format_matrix(matrix), end="")


def format_raw_results(
    prefs: Sequence[Sequence[int]], candidates: Sequence[str]
) -> str:
    """Describe every head-to-head duel won or tied, then the matrix."""
    lines = []
    for idx, row in enumerate(prefs):
        name = candidates[idx]
        for adv, _ in enumerate(row):
            if adv == idx:
                continue
            ours, theirs = prefs[idx][adv], prefs[adv][idx]
            if ours > theirs:
                outcome = name
            elif ours == theirs:
                outcome = "Empate"
            else:
                continue
            lines.append(
                f"\t{name}({ours}) x {candidates[adv]}({theirs}) => {outcome}\n"
            )
    lines.append("\nMatriz de Preferências:\n")
    lines.append(format_matrix(prefs))
    return "".join(lines)


def show_raw_results(
    prefs: Sequence[Sequence[int]], candidates: Sequence[str]
) -> None:
    """Print the duels and preference matrix."""
    print(format_raw_results(prefs, candidates), end="")


def format_rank(path: Sequence[int], candidates: Sequence[str]) -> str:
    """Render a ranking as ``A -> B -> C``."""
    names = " -> ".join(candidates[idx] for idx in path)
    return f"Rank:\n{names}\n\n"


def show_rank(path: Sequence[int], candidates: Sequence[str]) -> None:
    """Print a ranking as rendered by :func:`format_rank`."""
    print(format_rank(path, candidates), end="")


def format_pairwise_results(
    winner_path: Sequence[int], candidates: Sequence[str]
) -> str:
    """List the duel implied by a ranking for every pair of candidates."""
    lines = ["\nPreferência Geral:\n"]
    for position, winner in enumerate(winner_path):
        for loser in winner_path[position + 1:]:
            lines.append(
                f"\t{candidates[winner]} x {candidates[loser]} => "
                f"{candidates[winner]}\n"
            )
    lines.append("\n\n")
    return "".join(lines)


def print_pairwise_results(
    winner_path: Sequence[int], candidates: Sequence[str]
) -> None:
    """Print the duels implied by a ranking."""
    print(format_pairwise_results(winner_path, candidates), end="")