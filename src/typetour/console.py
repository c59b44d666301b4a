"""Console plumbing: the package logger and the coloured title line."""

from __future__ import annotations

import logging
import os
import sys
from contextlib import contextmanager
from typing import Iterator, Literal, Optional, TextIO

from colored import fg, style

TITLE = "=== Primitive vs Non-Primitive Deep Dive ==="
LOGGER_NAME = "typetour"
TITLE_COLOR = "cyan"

ColorMode = Literal["auto", "always", "never"]


def setup_logging(verbose: bool = False) -> logging.Logger:
    """Configure the package logger to write to stderr only.

    Stdout carries the tour itself, so diagnostics must never land there.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.handlers.clear()
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)s:%(name)s:%(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
    return logger


def use_color(mode: ColorMode, stream: Optional[TextIO] = None) -> bool:
    if mode == "always":
        return True
    if mode == "never":
        return False
    stream = stream if stream is not None else sys.stdout
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


@contextmanager
def forced_color() -> Iterator[None]:
    """Make colored emit escape codes even when stdout is not a terminal.

    colored decides per call from FORCE_COLOR and NO_COLOR, with NO_COLOR
    taking precedence, so both are set for the duration and then restored.
    """
    saved = {key: os.environ.get(key) for key in ("FORCE_COLOR", "NO_COLOR")}
    os.environ["FORCE_COLOR"] = "1"
    os.environ.pop("NO_COLOR", None)
    try:
        yield
    finally:
        for key, value in saved.items():
            if value is None:
                os.environ.pop(key, None)
            else:
                os.environ[key] = value


def banner(text: str = TITLE, color: bool = False) -> str:
    if not color:
        return text
    with forced_color():
        return f"{fg(TITLE_COLOR)}{text}{style('RESET')}"
