"""Ordered registry of the tour's topic modules.

Each topic module exposes numbered ``demo_*`` functions and a ``run_all``.
:func:`run_all` here executes every topic in a stable order, so the printed
lines always come out in the same sequence.

To add a topic:
1. Create ``<topic>.py`` with numbered ``demo_*`` functions and a ``run_all``.
2. Append its name to ``TOPICS``.
"""

from __future__ import annotations

import logging
from importlib import import_module
from typing import Callable

logger = logging.getLogger(__name__)

TOPICS = [
    "integers",
    "floats",
    "characters",
    "wrappers",
    "references",
    "promotion",
    "pitfalls",
]

MODULES: list[tuple[str, Callable[[], None]]] = []


def register(module_name: str) -> None:
    module = import_module(f"{__name__}.{module_name}")
    MODULES.append((module_name, module.run_all))


for name in TOPICS:
    register(name)


def run_all() -> None:
    for name, runner in MODULES:
        logger.debug("running %s", name)
        runner()
