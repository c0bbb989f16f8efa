from __future__ import annotations

import io
import random

import pytest
from PIL import Image

from captcha_core.alphabet import InvalidSolutionError
from captcha_core.image import CaptchaImage, render_image

PNG_MAGIC = b"\x89PNG\r\n\x1a\n"


def decode_png(data: bytes) -> Image.Image:
    image = Image.open(io.BytesIO(data))
    image.load()
    return image


@pytest.mark.parametrize("size", [(240, 80), (160, 60), (400, 100), (50, 20)])
def test_encoded_image_has_requested_size(size):
    data = CaptchaImage([1, 2, 3, 4, 5, 6], *size).encode()
    assert data.startswith(PNG_MAGIC)
    image = decode_png(data)
    assert image.format == "PNG"
    assert image.size == size


def test_two_renders_of_same_solution_differ():
    solution = [10, 11, 12, 13, 14, 15]
    first = CaptchaImage(solution, 240, 80).encode()
    second = CaptchaImage(solution, 240, 80).encode()
    assert first != second
    assert decode_png(first).size == decode_png(second).size == (240, 80)


def test_injected_generator_makes_render_reproducible():
    solution = [3, 1, 4, 1, 5, 9]
    first = render_image(solution, 120, 40, rng=random.Random(7))
    second = render_image(solution, 120, 40, rng=random.Random(7))
    assert first.tobytes() == second.tobytes()


def test_background_is_not_flat():
    image = render_image([0], 120, 40)
    colors = image.getcolors(maxcolors=120 * 40)
    assert colors is not None
    assert len(colors) > 50


def test_glyphs_are_darker_than_background():
    image = render_image([8, 8, 8, 8], 200, 70).convert("L")
    darkest, lightest = image.getextrema()
    assert darkest < 120
    assert lightest > 180


def test_write_to_reports_bytes_written():
    buffer = io.BytesIO()
    image = CaptchaImage([35] * 8, 240, 80)
    written = image.write_to(buffer)
    assert written == len(buffer.getvalue())
    assert image.size == (240, 80)


def test_long_solution_still_fits():
    data = CaptchaImage(list(range(36)), 240, 80).encode()
    assert decode_png(data).size == (240, 80)


def test_empty_solution_is_rejected():
    with pytest.raises(InvalidSolutionError):
        render_image([], 240, 80)


@pytest.mark.parametrize("solution", [[36], [1, 2, -1], [255]])
def test_out_of_range_index_is_rejected(solution):
    with pytest.raises(InvalidSolutionError):
        render_image(solution, 240, 80)


@pytest.mark.parametrize("size", [(0, 80), (240, 0), (-5, 10)])
def test_non_positive_dimensions_are_rejected(size):
    with pytest.raises(ValueError):
        render_image([1], *size)
