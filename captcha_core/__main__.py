"""Command-line entry point that writes a sample captcha image."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from .alphabet import decode
from .config import CaptchaSettings
from .generators import random_solution
from .image import CaptchaImage

LOGGER = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    settings = CaptchaSettings()
    parser = argparse.ArgumentParser(prog="capgen", description="Generate a captcha image")
    parser.add_argument("filename", help="Path of the PNG file to write")
    parser.add_argument("--len", dest="length", type=int, default=settings.default_length, help="Length of the solution")
    parser.add_argument("--width", type=int, default=settings.image_width, help="Image width")
    parser.add_argument("--height", type=int, default=settings.image_height, help="Image height")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    try:
        solution = random_solution(args.length)
        image = CaptchaImage(solution, args.width, args.height)
        with open(args.filename, "wb") as handle:
            written = image.write_to(handle)
    except (OSError, ValueError) as exc:
        LOGGER.error("capgen: %s", exc)
        return 1
    LOGGER.info("Wrote %d bytes to %s", written, args.filename)
    print(decode(solution))
    return 0


if __name__ == "__main__":
    sys.exit(main())
