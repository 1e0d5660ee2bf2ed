from condorvote.ballots import preference_matrix
from condorvote.schulze import schulze

# Worked example from the Schulze method description (A=0 .. E=4).
WIKI_GROUPS = [
    (5, [0, 2, 1, 4, 3]),
    (5, [0, 3, 4, 2, 1]),
    (8, [1, 4, 3, 0, 2]),
    (3, [2, 0, 1, 4, 3]),
    (7, [2, 0, 4, 1, 3]),
    (2, [2, 1, 0, 3, 4]),
    (7, [3, 2, 4, 1, 0]),
    (8, [4, 1, 0, 3, 2]),
]


def wiki_prefs():
    ballots = [list(order) for count, order in WIKI_GROUPS for _ in range(count)]
    return preference_matrix(ballots, 5)


def test_worked_example_ranking():
    rank, _ = schulze(wiki_prefs())
    assert rank == [4, 0, 2, 1, 3]


def test_worked_example_strongest_paths():
    _, paths = schulze(wiki_prefs())
    assert [row[:i] + row[i + 1:] for i, row in enumerate(paths)] == [
        [28, 28, 30, 24],
        [25, 28, 33, 24],
        [25, 29, 29, 24],
        [25, 28, 28, 24],
        [25, 28, 28, 31],
    ]


def test_paths_at_least_direct_wins():
    prefs = wiki_prefs()
    _, paths = schulze(prefs)
    for i in range(5):
        assert paths[i][i] == 0
        for j in range(5):
            if prefs[i][j] > prefs[j][i]:
                assert paths[i][j] >= prefs[i][j]


def test_condorcet_winner_ranks_first():
    ballots = [[1, 0, 2]] * 4 + [[0, 1, 2]] * 3 + [[2, 1, 0]] * 2
    rank, _ = schulze(preference_matrix(ballots, 3))
    assert rank[0] == 1
    assert sorted(rank) == [0, 1, 2]


def test_full_tie_keeps_list_order():
    rank, paths = schulze([[0, 0, 0], [0, 0, 0], [0, 0, 0]])
    assert rank == [0, 1, 2]
    assert all(value == 0 for row in paths for value in row)


def test_empty_election():
    assert schulze([]) == ([], [])