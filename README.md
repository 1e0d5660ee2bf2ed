# condorvote

condorvote counts ranked ballots three ways so that you can compare the outcomes:

- **Simple majority** (`condorvote.majority.majority`) counts only the first choice on each ballot.
- **Ranked Pairs** (`condorvote.ranked_pairs.ranked_pairs`) settles every head-to-head pair from the preference matrix. It handles the pairs in order of victory margin, largest first. Each result is entered as `1` for the winner and `-1` for the loser. Candidates are then ranked by the sum of their row.
- **Schulze method** (`condorvote.schulze.schulze`) computes the strongest paths between candidates over the preference graph. Candidates are ranked by how many others they beat on strongest-path strength.

Ties in every ranking go to the candidate with the lower index, that is, the one listed earlier. This also applies to a head-to-head pair with a margin of zero in Ranked Pairs.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Election files

An election lives in a directory that holds these files:

- `candidatas.txt`: one candidate name per line. Line order gives each candidate's index, starting at 0. Every line counts as a candidate, so a trailing newline adds a candidate with an empty name.
- `urna.txt`: one ballot per line, written as comma-separated candidate indices from most to least preferred, for example `2, 0, 1`. Blank lines are skipped.
- `urna.matrix`: an alternative to `urna.txt`. It holds a square preference matrix with comma-separated rows. The cell in row `i`, column `j` counts the voters who prefer candidate `i` to candidate `j`.

A candidate left off a ballot counts as ranked below every candidate the ballot names.

## Command line

```
condorvote [base_path] [--matrix]
```

- `base_path` is the election directory. It defaults to `elections/suspect_c/`.
- Without `--matrix`, the command reads `candidatas.txt` and `urna.txt`. It prints the raw head-to-head results, the preference matrix, the simple-majority count, and the Ranked Pairs and Schulze reports. Each report shows its matrix, its ranking and its winner.
- With `--matrix`, the command reads `urna.matrix` instead of the ballots and leaves out the simple-majority count.

The output is in Portuguese. The command exits with status 0 when the count succeeds. If a file is missing, a value is malformed or an index is out of range, it prints `Erro: ...` to standard error and exits with status 1.

The same entry point is available as `condorvote.cli.main(argv=None)`. The functions `by_ballots(base_path)`, `by_matrix(base_path)` and `report_condorcet(options, result, graph, method)` in `condorvote.cli` print the same reports from Python. `CondorcetMethod` names the two Condorcet methods, and each carries its report titles.

## Library use

```python
from condorvote.ballots import preference_matrix
from condorvote.majority import majority
from condorvote.ranked_pairs import ranked_pairs
from condorvote.schulze import schulze
from condorvote.printer import show_matrix, show_rank

candidates = ["Ana", "Bia", "Carla"]
ballots = [
    [0, 1, 2],
    [1, 2, 0],
    [2, 0, 1],
    [0, 2, 1],
]

prefs = preference_matrix(ballots, len(candidates))
show_matrix(prefs)

for tally in majority(ballots):  # Tally(id, vote_count), most votes first
    print(candidates[tally.id], tally.vote_count)

rank, result_matrix = ranked_pairs(prefs)
show_rank(rank, candidates)

rank, strongest_paths = schulze(prefs)
show_rank(rank, candidates)
```

### `condorvote.ballots`

This module reads election files and builds preference matrices:

- `load_ballots(path)` reads a ballot file.
- `load_matrix(path)` reads a preference matrix and checks that it is square.
- `load_candidates(path)` reads the candidate list.
- `preference_matrix(ballots, candidate_count)` builds the pairwise matrix from ballots.
- `new_matrix(dim, filler)` makes a square matrix filled with copies of `filler`.

`BallotError`, a subclass of `ValueError`, is raised in these cases:

- a value is not a non-negative integer;
- a matrix has rows of the wrong length;
- a ballot names a candidate index outside the candidate list;
- a ballot is empty (raised by `majority`).

### `condorvote.printer`

These functions print text, and each has a `format_*` twin that returns the text instead:

- `show_matrix` prints a framed table with `°` on the diagonal.
- `show_raw_results` prints every duel won or tied, followed by the matrix.
- `show_rank` prints a ranking as `A -> B -> C`.
- `print_pairwise_results` prints the duel implied by a ranking for every pair of candidates.

The twins are `format_matrix`, `format_raw_results`, `format_rank` and `format_pairwise_results`.

## What it does not do

condorvote only counts ballots that already exist as files or Python lists. It does not collect votes, store elections, or check who voted.