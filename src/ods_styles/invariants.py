from __future__ import annotations
from typing import Iterable

from .errors import HiddenInvariantViolation


def check_hidden(style, expected: bool, where: str) -> None:
    if bool(style.hidden) is not expected:
        raise HiddenInvariantViolation(style.name, expected, where)


def check_all_hidden(styles: Iterable, expected: bool, where: str) -> None:
    for style in styles:
        check_hidden(style, expected, where)
