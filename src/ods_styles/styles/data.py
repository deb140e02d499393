from __future__ import annotations
from dataclasses import dataclass, field
from typing import Optional

from lxml import etree as ET

from ..errors import InvalidStyleError
from ..rendering.xml_utils import NUMBER_NS, STYLE_NS, XMLContext
from ._validate import require_color, require_name, require_non_negative

KINDS = ("number", "percentage")
NEGATIVE_SUFFIX = "-neg"


@dataclass(frozen=True)
class NumberFormat:
    decimal_places: int = 2
    min_integer_digits: int = 1
    grouping: bool = False
    display_factor: Optional[int] = None   # -1 renders negatives without their sign
    prefix: str = ""
    suffix: str = ""
    negative_color: Optional[str] = None

    def __post_init__(self) -> None:
        require_non_negative(self.decimal_places, "decimal_places", "NumberFormat")
        require_non_negative(self.min_integer_digits, "min_integer_digits", "NumberFormat")
        require_color(self.negative_color, "negative_color", "NumberFormat")


def append_number_tag(fmt: NumberFormat, ctx: XMLContext, parent: ET._Element) -> ET._Element:
    num = ctx.sub(
        parent, NUMBER_NS, "number",
        number_decimal_places=str(fmt.decimal_places),
        number_min_decimal_places=str(fmt.decimal_places),
        number_min_integer_digits=str(fmt.min_integer_digits),
        number_grouping="true" if fmt.grouping else None,
        number_display_factor=str(fmt.display_factor) if fmt.display_factor is not None else None,
    )
    return num


def append_format(fmt: NumberFormat, ctx: XMLContext, parent: ET._Element, percent: bool = False) -> None:
    if fmt.prefix:
        ctx.sub(parent, NUMBER_NS, "text", fmt.prefix)
    append_number_tag(fmt, ctx, parent)
    if percent:
        ctx.sub(parent, NUMBER_NS, "text", "%")
    if fmt.suffix:
        ctx.sub(parent, NUMBER_NS, "text", fmt.suffix)


@dataclass(frozen=True)
class DataStyle:
    """A number:*-style. Data styles always live in automatic sections."""
    name: str
    kind: str = "number"
    number: NumberFormat = field(default_factory=NumberFormat)
    hidden: bool = True

    def __post_init__(self) -> None:
        require_name(self.name, "data style")
        if self.kind not in KINDS:
            raise InvalidStyleError(f"data style {self.name!r}: unknown kind {self.kind!r}")

    @property
    def negative_style_name(self) -> Optional[str]:
        if self.number.negative_color is None:
            return None
        return f"{self.name}{NEGATIVE_SUFFIX}"

    def _open(self, ctx: XMLContext, sink: ET._Element, name: str) -> ET._Element:
        el = ctx.sub(sink, NUMBER_NS, f"{self.kind}-style", style_name=name)
        el.set(ctx.attr("number_language"), ctx.language)
        el.set(ctx.attr("number_country"), ctx.country)
        return el

    def append_xml(self, ctx: XMLContext, sink: ET._Element) -> ET._Element:
        """
        Append the number:*-style. With a negative colour, a companion
        `<name>-neg` style is written first and selected by a style:map
        for values below zero.
        """
        percent = self.kind == "percentage"
        neg_name = self.negative_style_name
        if neg_name is not None:
            neg = self._open(ctx, sink, neg_name)
            ctx.sub(neg, STYLE_NS, "text-properties", fo_color=self.number.negative_color)
            if self.number.display_factor is None:
                # a mapped style does not print the minus sign itself
                ctx.sub(neg, NUMBER_NS, "text", "-")
            append_format(self.number, ctx, neg, percent=percent)

        el = self._open(ctx, sink, self.name)
        append_format(self.number, ctx, el, percent=percent)
        if neg_name is not None:
            ctx.sub(el, STYLE_NS, "map",
                    style_condition="value()<0",
                    style_apply_style_name=neg_name)
        return el


def data_style(name: str, kind: str = "number", decimals: int = 2, grouping: bool = False,
               prefix: str = "", suffix: str = "", display_factor: Optional[int] = None,
               negative_color: Optional[str] = None, hidden: bool = True) -> DataStyle:
    fmt = NumberFormat(
        decimal_places=decimals,
        grouping=grouping,
        display_factor=display_factor,
        prefix=prefix,
        suffix=suffix,
        negative_color=negative_color,
    )
    return DataStyle(name=name, kind=kind, number=fmt, hidden=hidden)
