"""Command line front end: count an election and report every method."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from enum import Enum
from pathlib import Path

from condorvote.ballots import (
    BallotError,
    load_ballots,
    load_candidates,
    load_matrix,
    preference_matrix,
)
from condorvote.majority import majority
from condorvote.printer import format_matrix, format_rank, format_raw_results
from condorvote.ranked_pairs import ranked_pairs
from condorvote.schulze import schulze

WIDTH = 80
DEFAULT_ELECTION = "elections/suspect_c/"


class CondorcetMethod(Enum):
    """Condorcet methods with their report title and graph caption."""

    RANKED_PAIRS = ("Tideman/Pares Ranqueados", "Matriz de Resultado")
    SCHULZE = ("Método de Schulze", "Grafo de Preferências")

    @property
    def title(self) -> str:
        return self.value[0]

    @property
    def graph_title(self) -> str:
        return self.value[1]


def _banner(title: str = "") -> str:
    padding = max(0, WIDTH - len(title))
    left = padding // 2
    return "-" * left + title + "-" * (padding - left)


def _debug_quote(text: str) -> str:
    escaped = (
        text.replace("\\", "\\\\")
        .replace('"', '\\"')
        .replace("\n", "\\n")
        .replace("\r", "\\r")
        .replace("\t", "\\t")
    )
    return f'"{escaped}"'


def report_condorcet(
    options: Sequence[str],
    result: Sequence[int],
    graph: Sequence[Sequence[object]],
    method: CondorcetMethod,
) -> None:
    """Print the graph, ranking and winner found by a Condorcet method."""
    if not result:
        raise BallotError("Nenhuma candidata para ranquear.")
    print("\n\n")
    print(_banner(f" {method.title} "))
    print(method.graph_title)
    print(format_matrix(graph), end="")
    print()
    print(format_rank(result, options), end="")
    print(f"\nPessoa vencedora por {method.title}: {options[result[0]]}")
    print(_banner())


def _report_raw(prefs: list[list[int]], candidates: list[str]) -> None:
    print()
    print(_banner(" Resultado Não-Processado: "))
    print(format_raw_results(prefs, candidates), end="")
    print(_banner())


def _report_methods(prefs: list[list[int]], candidates: list[str]) -> None:
    rp_rank, rp_matrix = ranked_pairs(prefs)
    report_condorcet(candidates, rp_rank, rp_matrix, CondorcetMethod.RANKED_PAIRS)
    s_rank, s_paths = schulze(prefs)
    report_condorcet(candidates, s_rank, s_paths, CondorcetMethod.SCHULZE)


def by_ballots(base_path: str | Path) -> None:
    """Report an election given as a candidate list and a ballot file."""
    base = Path(base_path)
    candidates = load_candidates(base / "candidatas.txt")
    ballots = load_ballots(base / "urna.txt")
    prefs = preference_matrix(ballots, len(candidates))

    _report_raw(prefs, candidates)

    print("\n\n")
    print(_banner(" Maioria Simples "))
    results = majority(ballots)
    if not results:
        raise BallotError("Nenhuma cédula encontrada.")
    print("Votos por candidata:")
    for tally in results:
        print(f"\t{candidates[tally.id]}: {tally.vote_count} votos.")
    winner = _debug_quote(candidates[results[0].id])
    print(f"\nPessoa vencedora por Maioria Simples: {winner}")
    print(_banner())

    _report_methods(prefs, candidates)


def by_matrix(base_path: str | Path) -> None:
    """Report an election given as a candidate list and a preference matrix."""
    base = Path(base_path)
    candidates = load_candidates(base / "candidatas.txt")
    prefs = load_matrix(base / "urna.matrix")
    if len(prefs) > len(candidates):
        raise BallotError("Há mais linhas na matriz do que candidatas.")

    _report_raw(prefs, candidates)
    _report_methods(prefs, candidates)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the election report; return the process exit status."""
    parser = argparse.ArgumentParser(
        prog="condorvote",
        description="Apura uma eleição por maioria simples e métodos Condorcet.",
    )
    parser.add_argument(
        "base_path",
        nargs="?",
        default=DEFAULT_ELECTION,
        help="diretório com candidatas.txt e urna.txt (ou urna.matrix)",
    )
    parser.add_argument(
        "--matrix",
        action="store_true",
        help="ler a matriz de preferências de urna.matrix",
    )
    args = parser.parse_args(argv)
    try:
        if args.matrix:
            by_matrix(args.base_path)
        else:
            by_ballots(args.base_path)
    except (OSError, BallotError, IndexError) as exc:
        print(f"Erro: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())