from condorvote.printer import (
    format_matrix,
    format_pairwise_results,
    format_rank,
    format_raw_results,
    print_pairwise_results,
    show_matrix,
    show_rank,
    show_raw_results,
)

NAMES = ["Ana", "Bia", "Cris"]


def test_format_matrix_small_table():
    text = format_matrix([[0, 3], [1, 0]])
    assert text == "  -- -- \n| °  3  |\n| 1  °  |\n  -- -- \n"


def test_format_matrix_lines_share_width():
    matrix = [[0, 12, -1], [3, 0, 100], [7, 8, 0]]
    lines = format_matrix(matrix).rstrip("\n").split("\n")
    assert len(lines) == 5
    assert lines[0] == lines[-1]
    assert len({len(line) for line in lines[1:-1]}) == 1
    assert all(line.startswith("| ") and line.endswith("|") for line in lines[1:-1])


def test_format_matrix_diagonal_hidden():
    text = format_matrix([[99, 1], [2, 99]])
    assert "99" not in text
    assert text.count("°") == 2


def test_show_matrix_prints_format(capsys):
    matrix = [[0, 4], [2, 0]]
    show_matrix(matrix)
    assert capsys.readouterr().out == format_matrix(matrix)


def test_raw_results_win_is_listed_once():
    text = format_raw_results([[0, 2], [1, 0]], ["A", "B"])
    assert "\tA(2) x B(1) => A\n" in text
    assert "B(1) x A(2)" not in text
    assert "Matriz de Preferências:" in text


def test_raw_results_tie_listed_both_ways():
    text = format_raw_results([[0, 1], [1, 0]], ["A", "B"])
    assert text.count("Empate") == 2


def test_show_raw_results_prints_format(capsys):
    prefs = [[0, 2, 1], [1, 0, 2], [2, 1, 0]]
    show_raw_results(prefs, NAMES)
    assert capsys.readouterr().out == format_raw_results(prefs, NAMES)


def test_format_rank_orders_names():
    text = format_rank([2, 0, 1], NAMES)
    assert text.startswith("Rank:\n")
    assert "Cris -> Ana -> Bia" in text


def test_show_rank_prints_format(capsys):
    show_rank([1, 0], NAMES)
    assert capsys.readouterr().out == format_rank([1, 0], NAMES)


def test_pairwise_results_covers_every_pair():
    text = format_pairwise_results([1, 2, 0], NAMES)
    duels = [line for line in text.split("\n") if line.startswith("\t")]
    assert len(duels) == 3
    assert "\tBia x Cris => Bia" in duels
    assert "\tCris x Ana => Cris" in duels


def test_print_pairwise_results_prints_format(capsys):
    print_pairwise_results([0, 1], NAMES)
    assert capsys.readouterr().out == format_pairwise_results([0, 1], NAMES)