from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

COMPOSITE_SEPARATOR = "@@"


@dataclass(frozen=True)
class TemplateKey:
    kind: str                 # "number", "percentage", "cash"
    decimals: int
    code: str                 # canonical template code, e.g. "CASH2"


def composite_name(base_name: str, data_style_name: str) -> str:
    """Name of the hidden cell style mixing `base_name` with a data style."""
    return f"{base_name}{COMPOSITE_SEPARATOR}{data_style_name}"


def _decimals(u: str, offset: int) -> int:
    digits = ""
    for ch in u[offset:]:
        if not ch.isdigit():
            break
        digits += ch
    return int(digits) if digits else 0


def parse_template_code(code: str) -> Optional[TemplateKey]:
    """
    Parse template codes like:
      - Num2
      - Pct1
      - Cash2
    Returns None for unknown or non-numeric codes (e.g., Text).
    """
    if not code:
        return None
    u = code.strip().upper()

    if u == "TEXT":
        return None
    if u.startswith("NUM"):
        return TemplateKey(kind="number", decimals=_decimals(u, 3), code=u)
    if u.startswith("PCT"):
        return TemplateKey(kind="percentage", decimals=_decimals(u, 3), code=u)
    if u.startswith("CASH"):
        return TemplateKey(kind="cash", decimals=_decimals(u, 4), code=u)
    return None


def data_style_name(key: TemplateKey, negative: bool = False) -> str:
    """
    Data style name per convention:
      NUM2  -> NUM2_DS
      CASH2 -> CASH2_POS_DS / CASH2_NEG_DS
    """
    if key.kind == "cash":
        return f"{key.code}_{'NEG' if negative else 'POS'}_DS"
    return f"{key.code}_DS"

