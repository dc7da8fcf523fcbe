"""
Cube Net Rendering

Draws the six faces of a Cube as an unfolded net image with OpenCV:

         U
      L  F  R  B
         D

Images are BGR numpy arrays (OpenCV's native format).
"""

import cv2
import numpy as np

from Cube import Cube
from Cubies import Face

# Standard sticker colors (BGR format for OpenCV): U=Yellow, D=White,
# F=Blue, B=Green, L=Orange, R=Red
FACE_COLORS_BGR = {
    Face.U: (0, 255, 255),
    Face.D: (255, 255, 255),
    Face.F: (255, 0, 0),
    Face.B: (0, 255, 0),
    Face.L: (0, 165, 255),
    Face.R: (0, 0, 255),
}

# (column, row) of each face in the 4x3 net, in face-sized units
NET_LAYOUT = {
    Face.U: (1, 0),
    Face.L: (0, 1),
    Face.F: (1, 1),
    Face.R: (2, 1),
    Face.B: (3, 1),
    Face.D: (1, 2),
}

BACKGROUND = 50  # dark gray


def render_net(cube, cell_size=40, border=2):
    """
    Render `cube` as an unfolded net.

    Args:
        cube: Cube to draw
        cell_size: Size of each sticker in pixels, border included
        border: Black border thickness around each sticker

    Returns:
        np.ndarray of shape (9 * cell_size, 12 * cell_size, 3), dtype uint8
    """
    if not isinstance(cube, Cube):
        raise TypeError("cube must be a Cube")
    if cell_size < 2 * border + 1:
        raise ValueError(f"cell_size {cell_size} is too small for border {border}")

    face_size = 3 * cell_size
    image = np.full((3 * face_size, 4 * face_size, 3), BACKGROUND, dtype=np.uint8)

    for face, (col, row) in NET_LAYOUT.items():
        stickers = cube.get_face(face)
        for idx, sticker in enumerate(stickers):
            x = col * face_size + (idx % 3) * cell_size
            y = row * face_size + (idx // 3) * cell_size

            # Draw filled sticker
            cv2.rectangle(
                image,
                (x, y),
                (x + cell_size - 1, y + cell_size - 1),
                FACE_COLORS_BGR[sticker],
                -1  # Filled
            )

            # Draw border
            cv2.rectangle(
                image,
                (x, y),
                (x + cell_size - 1, y + cell_size - 1),
                (0, 0, 0),
                border
            )

    return image


def save_net(cube, path, cell_size=40):
    """Write the net image of `cube` to `path` (format taken from the extension)."""
    image = render_net(cube, cell_size)
    if not cv2.imwrite(path, image):
        raise OSError(f"Could not write image: {path}")
    return path
