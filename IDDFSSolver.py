"""
Iterative Deepening Solver

Brute-force baseline: for depth = 1, 2, ... max_depth, run a depth-limited
DFS over the 12 quarter turns and return the first sequence that reaches the
solved state. No heuristic, no pattern databases, so the cost grows as ~12^d
(~11^d with inverse pruning). It finds a shortest solution when it finds one,
but it is only practical for scrambles of a handful of moves.
"""

import time

from MoveTables import INVERSE_MOVE, MOVES

# Quarter-turn metric bound for any reachable state
MAX_DEPTH = 26


class NullSolver:
    """Solver that doesn't do anything."""

    def find_solution(self, cube):
        return []


class IDDFSSolver:
    def __init__(self, max_depth=MAX_DEPTH, prune=True, time_limit=None, verbose=False):
        """
        Args:
            max_depth: longest move sequence to consider
            prune: skip a move that undoes the previous one (R after R', ...)
            time_limit: optional wall-clock limit in seconds
            verbose: print one progress line per depth
        """
        if max_depth < 0:
            raise ValueError(f"max_depth must be >= 0, got {max_depth}")
        if time_limit is not None and time_limit <= 0:
            raise ValueError(f"time_limit must be positive, got {time_limit}")

        self.MOVES = MOVES
        self.max_depth = max_depth
        self.prune = prune
        self.time_limit = time_limit
        self.verbose = verbose

        self.path = []  # moves leading to the current node
        self.nodes = 0
        self.depth_reached = 0
        self.timed_out = False
        self._deadline = None

    def find_solution(self, cube):
        """
        Return a list of moves solving `cube`, or [] if there is none within
        max_depth (or the time limit ran out). `cube` is not modified.
        """
        self.path = []
        self.nodes = 0
        self.depth_reached = 0
        self.timed_out = False

        if cube.is_solved():
            return []

        self._deadline = None if self.time_limit is None else time.time() + self.time_limit

        for depth in range(1, self.max_depth + 1):
            self.depth_reached = depth
            visited_before = self.nodes
            solution = self._search(cube, depth, last_move=None)

            if self.verbose:
                print(f"  Depth {depth}: {self.nodes - visited_before:,} nodes (total visited: {self.nodes:,})")

            if solution is not None:
                return solution
            if self.timed_out:
                if self.verbose:
                    print(f"  Time limit of {self.time_limit}s reached at depth {depth}")
                return []

        return []

    def _search(self, cube, remaining, last_move):
        """
        Depth-limited DFS below `cube`.

        Returns:
          - list (solution path) if found
          - None otherwise
        """
        for m in self.MOVES:
            # don't immediately undo the previous move
            if self.prune and last_move is not None and INVERSE_MOVE[last_move] == m:
                continue

            if self._deadline is not None and time.time() > self._deadline:
                self.timed_out = True
                return None

            new_cube = cube.clone()
            new_cube.apply_move(m)
            self.nodes += 1

            self.path.append(m)
            if new_cube.is_solved():
                result = self.path.copy()
            elif remaining > 1:
                result = self._search(new_cube, remaining - 1, last_move=m)
            else:
                result = None
            self.path.pop()

            if result is not None or self.timed_out:
                return result

        return None


def solve(cube, max_depth=MAX_DEPTH):
    """Moves that solve `cube` within `max_depth` turns, or [] if none were found."""
    return IDDFSSolver(max_depth=max_depth).find_solution(cube)
