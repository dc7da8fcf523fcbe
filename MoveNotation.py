"""
Move Notation

Turns human notation such as "R2U'F" or "R U R' U'" into the 12 atomic
operators, and back.

    F R U B L D      clockwise quarter turn of that face
    ' ` or ′    (after a letter) counter-clockwise instead
    2                (after a turn) do that turn twice
    whitespace       separates turns, otherwise ignored
"""

from MoveTables import Move

FACE_LETTERS = "FRUBLD"
PRIME_MARKS = ("'", "`", "′")


class MoveNotationError(ValueError):
    """Raised for a character that is not valid move notation at its position."""

    def __init__(self, message, char=None, index=None):
        super().__init__(message)
        self.char = char
        self.index = index


def parse_moves(text):
    """
    Parse a notation string into a list of Move.

    Raises:
        MoveNotationError: on an unknown character, or a modifier that does
                           not follow a turn
    """
    moves = []
    previous = None  # 'turn', 'prime', 'double' or None after whitespace/start

    for index, ch in enumerate(text):
        if ch.isspace():
            previous = None
        elif ch in FACE_LETTERS:
            moves.append(Move[ch])
            previous = 'turn'
        elif ch in PRIME_MARKS:
            if previous != 'turn':
                raise MoveNotationError(
                    f"Invalid character combination at {index}: {text[max(index - 1, 0):index + 1]!r}",
                    ch, index)
            moves[-1] = moves[-1].inverse
            previous = 'prime'
        elif ch == '2':
            if previous not in ('turn', 'prime'):
                raise MoveNotationError(
                    f"Invalid character combination at {index}: {text[max(index - 1, 0):index + 1]!r}",
                    ch, index)
            moves.append(moves[-1])
            previous = 'double'
        else:
            raise MoveNotationError(f"Unrecognized move {ch!r} at {index}", ch, index)

    return moves


def format_moves(moves):
    """Space-separated notation, e.g. "R U R' U'"."""
    return " ".join(Move.parse(m).notation for m in moves)


def invert_moves(moves):
    """The sequence that undoes `moves`: element-wise inverses in reverse order."""
    return [Move.parse(m).inverse for m in reversed(list(moves))]
