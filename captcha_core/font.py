"""Built-in 5x7 dot-matrix glyphs for the 36 solution characters.

Each glyph is seven rows of five cells; ``#`` marks a lit cell. The tuple
index is the class index, so ``GLYPHS[10]`` is the letter ``A``.
"""

from __future__ import annotations

from typing import List, Tuple

GLYPH_COLS = 5
GLYPH_ROWS = 7

Glyph = Tuple[str, str, str, str, str, str, str]

GLYPHS: Tuple[Glyph, ...] = (
    # 0
    (".###.", "#...#", "#..##", "#.#.#", "##..#", "#...#", ".###."),
    # 1
    ("..#..", ".##..", "..#..", "..#..", "..#..", "..#..", ".###."),
    # 2
    (".###.", "#...#", "....#", "...#.", "..#..", ".#...", "#####"),
    # 3
    ("#####", "...#.", "..#..", "...#.", "....#", "#...#", ".###."),
    # 4
    ("...#.", "..##.", ".#.#.", "#..#.", "#####", "...#.", "...#."),
    # 5
    ("#####", "#....", "####.", "....#", "....#", "#...#", ".###."),
    # 6
    ("..##.", ".#...", "#....", "####.", "#...#", "#...#", ".###."),
    # 7
    ("#####", "....#", "...#.", "..#..", ".#...", ".#...", ".#..."),
    # 8
    (".###.", "#...#", "#...#", ".###.", "#...#", "#...#", ".###."),
    # 9
    (".###.", "#...#", "#...#", ".####", "....#", "...#.", ".##.."),
    # A
    (".###.", "#...#", "#...#", "#####", "#...#", "#...#", "#...#"),
    # B
    ("####.", "#...#", "#...#", "####.", "#...#", "#...#", "####."),
    # C
    (".###.", "#...#", "#....", "#....", "#....", "#...#", ".###."),
    # D
    ("###..", "#..#.", "#...#", "#...#", "#...#", "#..#.", "###.."),
    # E
    ("#####", "#....", "#....", "####.", "#....", "#....", "#####"),
    # F
    ("#####", "#....", "#....", "####.", "#....", "#....", "#...."),
    # G
    (".###.", "#...#", "#....", "#.###", "#...#", "#...#", ".####"),
    # H
    ("#...#", "#...#", "#...#", "#####", "#...#", "#...#", "#...#"),
    # I
    (".###.", "..#..", "..#..", "..#..", "..#..", "..#..", ".###."),
    # J
    ("..###", "...#.", "...#.", "...#.", "...#.", "#..#.", ".##.."),
    # K
    ("#...#", "#..#.", "#.#..", "##...", "#.#..", "#..#.", "#...#"),
    # L
    ("#....", "#....", "#....", "#....", "#....", "#....", "#####"),
    # M
    ("#...#", "##.##", "#.#.#", "#.#.#", "#...#", "#...#", "#...#"),
    # N
    ("#...#", "#...#", "##..#", "#.#.#", "#..##", "#...#", "#...#"),
    # O
    (".###.", "#...#", "#...#", "#...#", "#...#", "#...#", ".###."),
    # P
    ("####.", "#...#", "#...#", "####.", "#....", "#....", "#...."),
    # Q
    (".###.", "#...#", "#...#", "#...#", "#.#.#", "#..#.", ".##.#"),
    # R
    ("####.", "#...#", "#...#", "####.", "#.#..", "#..#.", "#...#"),
    # S
    (".####", "#....", "#....", ".###.", "....#", "....#", "####."),
    # T
    ("#####", "..#..", "..#..", "..#..", "..#..", "..#..", "..#.."),
    # U
    ("#...#", "#...#", "#...#", "#...#", "#...#", "#...#", ".###."),
    # V
    ("#...#", "#...#", "#...#", "#...#", "#...#", ".#.#.", "..#.."),
    # W
    ("#...#", "#...#", "#...#", "#.#.#", "#.#.#", "#.#.#", ".#.#."),
    # X
    ("#...#", "#...#", ".#.#.", "..#..", ".#.#.", "#...#", "#...#"),
    # Y
    ("#...#", "#...#", ".#.#.", "..#..", "..#..", "..#..", "..#.."),
    # Z
    ("#####", "....#", "...#.", "..#..", ".#...", "#....", "#####"),
)


def lit_cells(index: int) -> List[Tuple[int, int]]:
    """Return ``(col, row)`` pairs of the lit cells of glyph ``index``."""
    return [
        (col, row)
        for row, line in enumerate(GLYPHS[index])
        for col, cell in enumerate(line)
        if cell == "#"
    ]
