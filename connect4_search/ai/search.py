"""
search.py - Depth-bounded exhaustive move search for Connect Four

Every legal move is followed to the given depth and each position is
classified from the point of view of the player about to move:

    IMMEDIATE_WIN   some move wins on the spot
    FORCED_WIN      some move leaves the opponent in a FORCED_LOSS
    FORCED_LOSS     every move lets the opponent win (immediately or forced)
    UNDETERMINED    anything else, including every position at the horizon

There is no pruning and no positional heuristic; the depth budget is the only
thing bounding the work. At the root the sibling branches can be evaluated in
worker processes. Everything below the root runs sequentially.
"""

from concurrent.futures import ProcessPoolExecutor
from enum import Enum, auto
from itertools import repeat
from typing import Callable, List, NamedTuple, Optional, Sequence

from connect4_search.debug import debug
from connect4_search.game.board import Board
from connect4_search.utils import COLS, SEARCH_MAX_WORKERS


class Evaluation(Enum):
    """Classification of a position for the player to move."""
    IMMEDIATE_WIN = auto()
    FORCED_WIN = auto()
    FORCED_LOSS = auto()
    UNDETERMINED = auto()

    def is_win(self) -> bool:
        return self in (Evaluation.IMMEDIATE_WIN, Evaluation.FORCED_WIN)


class SearchResult(NamedTuple):
    """Columns that are equally good, and the evaluation they share."""
    moves: List[int]
    evaluation: Evaluation


ChildEvaluator = Callable[[Sequence[Board], int], List[Evaluation]]


def find_next_move(board: Board, depth: int, allow_parallel: bool = False,
                   max_workers: Optional[int] = None) -> SearchResult:
    """
    Recommend moves for the player to move on ``board``.

    Args:
        board: Position to search from
        depth: Number of further plies to look at after each candidate move;
            0 only looks for a move that wins immediately
        allow_parallel: Evaluate the candidate moves in worker processes
        max_workers: Worker process count (defaults to SEARCH_MAX_WORKERS)

    Returns:
        SearchResult with the recommended columns in ascending order. The
        list is empty when no legal move is left (a draw).

    Raises:
        ValueError: If depth is negative
    """
    if depth < 0:
        raise ValueError(f"Search depth must be >= 0, got {depth}")

    if allow_parallel:
        workers = max_workers if max_workers is not None else SEARCH_MAX_WORKERS

        def evaluate(boards: Sequence[Board], child_depth: int) -> List[Evaluation]:
            return _evaluate_parallel(boards, child_depth, workers)
    else:
        evaluate = _evaluate_sequential

    debug.debug(f"Searching {board!r} to depth {depth} (parallel={allow_parallel})", "search")
    with debug.timer("find_next_move", "search"):
        result = _search(board, depth, evaluate)
    debug.debug(f"Result: {result.evaluation.name} {result.moves}", "search")
    return result


def _search(board: Board, depth: int, evaluate: ChildEvaluator) -> SearchResult:
    columns: List[int] = []
    children: List[Board] = []

    for column in range(COLS):
        outcome = board.try_move(column)
        if outcome.victory:
            # Only the first winning column is reported
            return SearchResult([column], Evaluation.IMMEDIATE_WIN)
        if outcome.continues:
            columns.append(column)
            children.append(outcome.board)

    if not columns:
        return SearchResult([], Evaluation.UNDETERMINED)

    if depth == 0:
        evaluations = [Evaluation.UNDETERMINED] * len(children)
    else:
        evaluations = evaluate(children, depth - 1)

    return classify(columns, evaluations)


def classify(columns: Sequence[int], evaluations: Sequence[Evaluation]) -> SearchResult:
    """
    Combine the evaluations of the positions reached by ``columns`` (each
    from the opponent's point of view) into a result for the player to move.
    """
    if all(evaluation.is_win() for evaluation in evaluations):
        return SearchResult(list(columns), Evaluation.FORCED_LOSS)

    forcing = [column for column, evaluation in zip(columns, evaluations)
               if evaluation == Evaluation.FORCED_LOSS]
    if forcing:
        return SearchResult(forcing, Evaluation.FORCED_WIN)

    safe = [column for column, evaluation in zip(columns, evaluations)
            if not evaluation.is_win()]
    return SearchResult(safe, Evaluation.UNDETERMINED)


def evaluate_branch(board: Board, depth: int) -> Evaluation:
    """Sequentially evaluate ``board`` to ``depth``. Runs inside worker processes."""
    return _search(board, depth, _evaluate_sequential).evaluation


def _evaluate_sequential(boards: Sequence[Board], depth: int) -> List[Evaluation]:
    return [evaluate_branch(board, depth) for board in boards]


def _evaluate_parallel(boards: Sequence[Board], depth: int,
                       max_workers: Optional[int]) -> List[Evaluation]:
    if len(boards) < 2:
        return _evaluate_sequential(boards, depth)

    debug.debug(f"Fanning out {len(boards)} branches to depth {depth}", "search")
    with ProcessPoolExecutor(max_workers=max_workers) as executor:
        # map keeps submission order, so results stay aligned with columns
        return list(executor.map(evaluate_branch, boards, repeat(depth)))
