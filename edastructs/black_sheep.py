"""Counting white sheep in a picture drawn with '.' background and 'X' outlines."""

from __future__ import annotations

from typing import Sequence

_STEPS = ((-1, 0), (1, 0), (0, -1), (0, 1))


def count_white_sheep(image: Sequence[str]) -> int:
    """Number of '.' regions, 4-connected, less the one region of background.

    A picture with no '.' at all gives -1, as there is not even a background.
    """
    if not image:
        raise ValueError("the image has no rows")
    cols = len(image[0])
    if any(len(row) != cols for row in image):
        raise ValueError("all rows of the image must have the same width")
    rows = len(image)
    seen = [[False] * cols for _ in range(rows)]
    regions = 0
    for i, row in enumerate(image):
        for j, cell in enumerate(row):
            if cell != "." or seen[i][j]:
                continue
            regions += 1
            seen[i][j] = True
            stack = [(i, j)]
            while stack:
                r, c = stack.pop()
                for dr, dc in _STEPS:
                    nr, nc = r + dr, c + dc
                    if (0 <= nr < rows and 0 <= nc < cols and not seen[nr][nc]
                            and image[nr][nc] == "."):
                        seen[nr][nc] = True
                        stack.append((nr, nc))
    return regions - 1