"""PNG rendering of captcha solutions.

The renderer draws the solution on a blotchy colour background, places each
glyph along a sine-shaped baseline with its own rotation, scale and jitter,
crosses the text with noise curves and speckles, and finally bends the whole
canvas with a vertical wave. Every call seeds a fresh generator, so two
renders of the same solution never produce the same pixels.
"""

from __future__ import annotations

import io
import math
import random
import secrets
from typing import BinaryIO, Optional, Sequence, Tuple

from PIL import Image, ImageDraw

from .alphabet import ALPHABET_SIZE, InvalidSolutionError
from .font import GLYPH_COLS, GLYPH_ROWS, lit_cells

Color = Tuple[int, int, int]

MAX_ROTATION = 25.0
MIN_SCALE = 0.85
MAX_SCALE = 1.15
BACKGROUND_CELL = 8
SPECKLE_DENSITY = 0.008
WAVE_STRIP = 6


def _validate(solution: Sequence[int], width: int, height: int) -> None:
    if len(solution) == 0:
        raise InvalidSolutionError("Cannot render an empty solution")
    for index in solution:
        if not 0 <= index < ALPHABET_SIZE:
            raise InvalidSolutionError(f"Class index out of range: {index}")
    if width < 1 or height < 1:
        raise ValueError("Image dimensions must be positive")


def _light_color(rng: random.Random) -> Color:
    return (rng.randint(200, 255), rng.randint(200, 255), rng.randint(200, 255))


def _dark_color(rng: random.Random) -> Color:
    return (rng.randint(0, 110), rng.randint(0, 110), rng.randint(0, 110))


def _background(rng: random.Random, width: int, height: int) -> Image.Image:
    cols = width // BACKGROUND_CELL + 2
    rows = height // BACKGROUND_CELL + 2
    coarse = Image.new("RGB", (cols, rows))
    coarse.putdata([_light_color(rng) for _ in range(cols * rows)])
    return coarse.resize((width, height), Image.Resampling.BICUBIC)


def _glyph(rng: random.Random, index: int, cell: float) -> Image.Image:
    cell *= rng.uniform(MIN_SCALE, MAX_SCALE)
    radius = max(cell * 0.6, 0.5)
    pad = int(math.ceil(radius)) + 1
    size = (
        int(GLYPH_COLS * cell) + 2 * pad,
        int(GLYPH_ROWS * cell) + 2 * pad,
    )
    glyph = Image.new("RGBA", size, (0, 0, 0, 0))
    draw = ImageDraw.Draw(glyph)
    fill = _dark_color(rng) + (255,)
    for col, row in lit_cells(index):
        cx = pad + (col + 0.5) * cell
        cy = pad + (row + 0.5) * cell
        draw.ellipse((cx - radius, cy - radius, cx + radius, cy + radius), fill=fill)
    angle = rng.uniform(-MAX_ROTATION, MAX_ROTATION)
    return glyph.rotate(angle, resample=Image.Resampling.BICUBIC, expand=True)


def _draw_text(
    rng: random.Random, canvas: Image.Image, solution: Sequence[int]
) -> float:
    width, height = canvas.size
    count = len(solution)
    margin = width * 0.05
    step = (width - 2 * margin) / count
    cell = max(min(step / (GLYPH_COLS + 1.5), height * 0.55 / GLYPH_ROWS), 1.0)

    amplitude = height * rng.uniform(0.06, 0.12)
    period = width * rng.uniform(0.6, 1.2)
    phase = rng.uniform(0, 2 * math.pi)
    for position, index in enumerate(solution):
        glyph = _glyph(rng, index, cell)
        x = margin + (position + 0.5) * step + rng.uniform(-0.12, 0.12) * step
        y = (
            height / 2
            + amplitude * math.sin(2 * math.pi * x / period + phase)
            + rng.uniform(-0.05, 0.05) * height
        )
        left = int(x - glyph.width / 2)
        top = int(y - glyph.height / 2)
        canvas.paste(glyph, (left, top), glyph)
    return cell


def _draw_noise(rng: random.Random, canvas: Image.Image, cell: float) -> None:
    width, height = canvas.size
    draw = ImageDraw.Draw(canvas)
    stroke = max(1, int(cell * 0.35))
    for _ in range(rng.randint(2, 3)):
        center = rng.uniform(0.25, 0.75) * height
        amplitude = rng.uniform(0.1, 0.3) * height
        period = rng.uniform(0.4, 1.0) * width
        phase = rng.uniform(0, 2 * math.pi)
        points = [
            (x, center + amplitude * math.sin(2 * math.pi * x / period + phase))
            for x in range(0, width + 1, 2)
        ]
        if len(points) > 1:
            draw.line(points, fill=_dark_color(rng), width=stroke)
    for _ in range(int(width * height * SPECKLE_DENSITY)):
        x = rng.randrange(width)
        y = rng.randrange(height)
        draw.point((x, y), fill=_dark_color(rng))


def _wave(rng: random.Random, canvas: Image.Image, fill: Color) -> Image.Image:
    width, height = canvas.size
    amplitude = height * rng.uniform(0.02, 0.05)
    period = width * rng.uniform(0.3, 0.6)
    phase = rng.uniform(0, 2 * math.pi)

    def offset(x: int) -> float:
        return amplitude * math.sin(2 * math.pi * x / period + phase)

    mesh = []
    for x0 in range(0, width, WAVE_STRIP):
        x1 = min(x0 + WAVE_STRIP, width)
        d0, d1 = offset(x0), offset(x1)
        quad = (x0, d0, x0, height + d0, x1, height + d1, x1, d1)
        mesh.append(((x0, 0, x1, height), quad))
    return canvas.transform(
        canvas.size,
        Image.Transform.MESH,
        mesh,
        resample=Image.Resampling.BICUBIC,
        fillcolor=fill,
    )


def render_image(
    solution: Sequence[int],
    width: int,
    height: int,
    rng: Optional[random.Random] = None,
) -> Image.Image:
    """Render ``solution`` into an RGB image of ``width`` x ``height`` pixels.

    Raises :class:`InvalidSolutionError` for an empty solution or an index
    outside ``[0, 36)``, and ``ValueError`` for non-positive dimensions.
    """
    _validate(solution, width, height)
    rng = rng or random.Random(secrets.randbits(64))
    canvas = _background(rng, width, height)
    cell = _draw_text(rng, canvas, solution)
    _draw_noise(rng, canvas, cell)
    return _wave(rng, canvas, _light_color(rng))


class CaptchaImage:
    """A rendered captcha ready to be encoded as PNG."""

    def __init__(
        self,
        solution: Sequence[int],
        width: int,
        height: int,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.image = render_image(solution, width, height, rng=rng)

    @property
    def size(self) -> Tuple[int, int]:
        return self.image.size

    def encode(self) -> bytes:
        buffer = io.BytesIO()
        self.image.save(buffer, format="PNG")
        return buffer.getvalue()

    def write_to(self, stream: BinaryIO) -> int:
        data = self.encode()
        stream.write(data)
        return len(data)
