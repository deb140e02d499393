from __future__ import annotations
from dataclasses import dataclass
from typing import List

from ..errors import InvalidStyleError
from ..styles import DataStyle, data_style
from .naming import TemplateKey, data_style_name, parse_template_code


@dataclass(frozen=True)
class TemplateColumn:
    title: str
    key: TemplateKey
    data_style: DataStyle
    negative: bool = False


def data_style_for_key(key: TemplateKey, negative: bool = False) -> DataStyle:
    name = data_style_name(key, negative)
    if key.kind == "percentage":
        return data_style(name, kind="percentage", decimals=key.decimals)
    if key.kind == "cash" and negative:
        # (1,234.57): parentheses instead of the sign
        return data_style(name, decimals=key.decimals, grouping=True,
                          prefix="(", suffix=")", display_factor=-1)
    return data_style(name, decimals=key.decimals, grouping=True)


def columns_for_template_code(template_code: str) -> List[TemplateColumn]:
    """
    Columns for a TemplateCode (e.g., 'Num2', 'Pct1', 'Cash2').
    Cash expands to a pair: 'Cash2+' and 'Cash2-'.
    """
    key = parse_template_code(template_code)
    if key is None:
        raise InvalidStyleError(f"not a numeric template code: {template_code!r}")
    code = template_code.strip()
    if key.kind == "cash":
        return [
            TemplateColumn(f"{code}+", key, data_style_for_key(key, negative=False)),
            TemplateColumn(f"{code}-", key, data_style_for_key(key, negative=True), negative=True),
        ]
    return [TemplateColumn(code, key, data_style_for_key(key))]
