from __future__ import annotations
from typing import Optional

from ..errors import InvalidStyleError


def require_name(name: object, what: str = "style") -> None:
    if not isinstance(name, str) or not name.strip():
        raise InvalidStyleError(f"{what} name must be a non-empty string, got {name!r}")


def require_non_negative(value: object, field: str, owner: str) -> None:
    if not isinstance(value, int) or isinstance(value, bool) or value < 0:
        raise InvalidStyleError(f"{owner}: {field} must be a non-negative integer, got {value!r}")


def require_color(value: Optional[str], field: str, owner: str) -> None:
    if value is None:
        return
    if not (isinstance(value, str) and len(value) == 7 and value.startswith("#")):
        raise InvalidStyleError(f"{owner}: {field} must look like #RRGGBB, got {value!r}")
    try:
        int(value[1:], 16)
    except ValueError:
        raise InvalidStyleError(f"{owner}: {field} must look like #RRGGBB, got {value!r}") from None
