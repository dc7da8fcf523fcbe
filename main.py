"""
Rubik's Cube Solver - Command Line

Builds a cube from a facelet JSON file, a move sequence and/or a random
scramble, then searches for a solution with the iterative deepening solver.

Usage:
    python main.py [--input cube.json] [--moves "R U R' U'"] [--scramble N]
                   [--seed S] [--max-depth D] [--time-limit SECONDS]
                   [--no-prune] [--image net.png] [--output solution.txt]
                   [--verbose]

Exit status:
    0   solved (or already solved)
    1   bad input
    2   no solution within the depth bound / time limit
"""

import argparse
import json
import sys
import time

import CubeDisplay
import Facelet_to_Cube
from Cube import FACE_NAMES, Cube
from IDDFSSolver import IDDFSSolver, MAX_DEPTH
from MoveNotation import format_moves, parse_moves
from Scramble import scramble

FACE_DISPLAY_NAMES = ['Up', 'Down', 'Front', 'Back', 'Left', 'Right']


def banner(title):
    print("\n" + "=" * 50)
    print(f"  {title}")
    print("=" * 50)


def load_cube(path):
    """Read {"cube": {...faces...}} (or the bare faces dict) from a JSON file."""
    with open(path, 'r') as f:
        input_obj = json.load(f)
    if not isinstance(input_obj, dict):
        raise ValueError(f"{path} must hold a JSON object, got {type(input_obj).__name__}")
    return Facelet_to_Cube.facelet_to_cube(input_obj.get("cube", input_obj))


def build_cube(args):
    cube = load_cube(args.input) if args.input else Cube()

    if args.moves:
        moves = parse_moves(args.moves)
        cube.apply_moves(moves)
        print(f"Applied moves: {format_moves(moves)}")

    if args.scramble:
        moves = scramble(cube, args.scramble, seed=args.seed)
        print(f"Scramble ({args.scramble} moves): {format_moves(moves)}")

    return cube


def print_configuration(cube):
    print("\nCube Configuration:")
    facelets = cube.to_facelets()
    for face_key, face_display in zip(FACE_NAMES, FACE_DISPLAY_NAMES):
        print(f"  {face_display:8s}: {facelets[face_key]}")


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Rubik's Cube Solver (iterative deepening search)",
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument('--input', help='JSON file with the six faces ({"cube": {"up": [...], ...}})')
    parser.add_argument('--moves', help="Moves to apply first, e.g. \"R U R' U'\"")
    parser.add_argument('--scramble', type=int, default=0, metavar='N',
                        help='Apply N random moves')
    parser.add_argument('--seed', type=int, help='Random seed for --scramble')
    parser.add_argument('--max-depth', type=int, default=MAX_DEPTH,
                        help=f'Longest solution to search for (default: {MAX_DEPTH})')
    parser.add_argument('--time-limit', type=float, metavar='SECONDS',
                        help='Give up after this many seconds')
    parser.add_argument('--no-prune', action='store_true',
                        help='Also try moves that undo the previous move')
    parser.add_argument('--image', help='Save the scrambled cube as a net image (png/jpg)')
    parser.add_argument('--output', help='Write the solution to this file')
    parser.add_argument('--verbose', action='store_true', help='Print search progress per depth')
    return parser.parse_args(argv)


def main(argv=None):
    """Main entry point for the application."""
    args = parse_args(argv)

    print("=" * 50)
    print("  RUBIK'S CUBE SOLVER")
    print("  Coordinate model + iterative deepening search")
    print("=" * 50)

    try:
        cube = build_cube(args)
        solver = IDDFSSolver(max_depth=args.max_depth, prune=not args.no_prune,
                             time_limit=args.time_limit, verbose=args.verbose)
    except (OSError, ValueError) as e:
        print(f"\nError: {e}")
        return 1

    print_configuration(cube)

    if args.image:
        try:
            CubeDisplay.save_net(cube, args.image)
            print(f"\nSaved cube net to {args.image}")
        except (OSError, ValueError) as e:
            print(f"\nError: {e}")
            return 1

    if cube.is_solved():
        print("\nCube is already solved.")
        return 0

    banner("SOLVING CUBE")
    print(f"\nRunning solver (max depth {args.max_depth})...")
    start_time = time.time()
    solution = solver.find_solution(cube)
    solve_time = time.time() - start_time

    if not solution:
        reason = "time limit reached" if solver.timed_out else f"no solution within {args.max_depth} moves"
        print(f"\nNo solution found ({reason}).")
        print(f"Nodes visited: {solver.nodes:,}")
        print(f"Search time: {solve_time:.3f}s")
        return 2

    # Replay against the input before trusting it
    check = cube.clone().apply_moves(solution)
    if not check.is_solved():
        print("\nError: solver returned a sequence that does not solve the cube.")
        return 1

    banner("SOLUTION FOUND!")
    solution_str = format_moves(solution)
    print(f"\nMoves: {solution_str}")
    print(f"Total moves: {len(solution)}")
    print(f"Nodes visited: {solver.nodes:,}")
    print(f"Solve time: {solve_time:.3f}s")

    if args.output:
        try:
            with open(args.output, 'w') as f:
                f.write(solution_str)
        except OSError as e:
            print(f"\nError: {e}")
            return 1
        print(f"\nWrote solution to {args.output}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
