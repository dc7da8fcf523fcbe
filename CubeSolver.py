import json

import Facelet_to_Cube
from IDDFSSolver import IDDFSSolver, MAX_DEPTH
from MoveNotation import format_moves

INPUT_FILE = "cube_in.json"
OUTPUT_FILE = "cube_out.txt"


class CubeSolver:
    """Solve a cube given as six faces of stickers."""

    def __init__(self, max_depth=MAX_DEPTH, time_limit=None, prune=True, verbose=False):
        self.solver = IDDFSSolver(max_depth=max_depth, prune=prune,
                                  time_limit=time_limit, verbose=verbose)

    def solve(self, input_obj):
        """
        Args:
            input_obj: {'up': ..., 'down': ..., 'front': ..., 'back': ..., 'left': ..., 'right': ...}
                       each face as 9 stickers or a 3x3 grid

        Returns:
            list of Move (empty when already solved or nothing found within the bound)
        """
        formatted_obj = Facelet_to_Cube.format_facelets(input_obj)
        cube = Facelet_to_Cube.facelet_to_cube(formatted_obj)
        return self.solver.find_solution(cube)

    def solve_file(self, in_path=INPUT_FILE, out_path=OUTPUT_FILE):
        """
        Read {"cube": {...faces...}} from `in_path`, write the solution as
        space-separated notation to `out_path`, and return that string.
        """
        with open(in_path, 'r') as file:
            input_obj = json.load(file)
        if not isinstance(input_obj, dict) or "cube" not in input_obj:
            raise ValueError(f"{in_path} has no 'cube' entry")

        solution = format_moves(self.solve(input_obj["cube"]))

        with open(out_path, 'w') as file:
            file.write(solution)
        return solution
