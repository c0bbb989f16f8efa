from __future__ import annotations

import pytest

from captcha_core.generators import ID_ALPHABET, ID_LENGTH, random_id, random_solution


def test_random_id_shape():
    ids = {random_id() for _ in range(200)}
    assert len(ids) == 200
    for value in ids:
        assert len(value) == ID_LENGTH
        assert set(value) <= set(ID_ALPHABET)


@pytest.mark.parametrize("length", [1, 4, 6, 20])
def test_random_solution_length_and_range(length):
    solution = random_solution(length)
    assert len(solution) == length
    assert all(0 <= value < 36 for value in solution)


def test_random_solution_covers_letters():
    values = set()
    for _ in range(50):
        values.update(random_solution(10))
    assert any(value >= 10 for value in values)


def test_random_solution_rejects_non_positive_length():
    with pytest.raises(ValueError):
        random_solution(0)
