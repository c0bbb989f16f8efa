from __future__ import annotations

from PIL import Image

from captcha_core.__main__ import main
from captcha_core.alphabet import encode


def test_capgen_writes_png_and_prints_solution(tmp_path, capsys):
    target = tmp_path / "captcha.png"
    assert main([str(target), "--len", "4", "--width", "200", "--height", "70"]) == 0

    printed = capsys.readouterr().out.strip()
    assert len(printed) == 4
    assert all(0 <= value < 36 for value in encode(printed))
    with Image.open(target) as image:
        assert image.size == (200, 70)


def test_capgen_reports_unwritable_target(tmp_path):
    target = tmp_path / "missing" / "captcha.png"
    assert main([str(target)]) == 1


def test_capgen_rejects_zero_length(tmp_path):
    assert main([str(tmp_path / "captcha.png"), "--len", "0"]) == 1
