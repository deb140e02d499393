from __future__ import annotations
from typing import Iterable, NamedTuple, Optional, Tuple, Union

from lxml import etree as ET

from .errors import DuplicateNameError, InvalidStyleError
from .invariants import check_all_hidden, check_hidden
from .mapping.merge_cache import MergeCache
from .mapping.multi_registry import Dest, MultiRegistry
from .mapping.registry import KeyedRegistry, Mode
from .rendering.xml_utils import XMLContext
from .styles import DataStyle, MasterPageStyle, PageLayoutStyle, PageStyle, TableCellStyle
from .utils.logger import get_logger

log = get_logger(__name__)

ModeArg = Optional[Union[Mode, str]]


class HasFooterHeader(NamedTuple):
    has_header: bool
    has_footer: bool


class StylesContainer:
    """
    Collects every style of a document, sorted by the section it will be
    written to.

    Each add_* method has two forms. Without `mode` it is a plain CREATE
    that raises on a conflicting name (re-adding an equal style is a no-op).
    With `mode` it returns whether the registry changed. Hidden/visible
    requirements are checked in both forms.
    """
    def __init__(self) -> None:
        self._object_styles: MultiRegistry[Dest, object] = MultiRegistry(Dest)
        self._data_styles: KeyedRegistry[DataStyle] = KeyedRegistry("data styles")
        self._master_page_styles: KeyedRegistry[MasterPageStyle] = KeyedRegistry("master page styles")
        self._page_layout_styles: KeyedRegistry[PageLayoutStyle] = KeyedRegistry("page layout styles")
        self._merge_cache = MergeCache(self._data_styles, self._object_styles)

    # -- registration -------------------------------------------------------

    @staticmethod
    def _precheck(registry: KeyedRegistry, style, mode: ModeArg) -> bool:
        """Raise what the add would raise; False when a mode-aware add would be refused."""
        if mode is None:
            registry.check(style.name, style)
            return True
        return registry.accepts(style.name, mode)

    @staticmethod
    def _put(registry: KeyedRegistry, style, mode: ModeArg) -> bool:
        if mode is None:
            return registry.register(style.name, style)
        return registry.add(style.name, style, mode)

    def _add_object_style(self, style, dest: Dest, hidden: bool, mode: ModeArg) -> bool:
        check_hidden(style, hidden, dest.value)
        return self._put(self._object_styles.registry(dest), style, mode)

    def add_data_style(self, style: DataStyle, mode: ModeArg = None) -> bool:
        check_hidden(style, True, self._data_styles.label)
        return self._put(self._data_styles, style, mode)

    def add_page_layout_style(self, style: PageLayoutStyle, mode: ModeArg = None) -> bool:
        check_hidden(style, True, self._page_layout_styles.label)
        return self._put(self._page_layout_styles, style, mode)

    def _precheck_master_page(self, style: MasterPageStyle, mode: ModeArg) -> bool:
        embedded = style.embedded_styles()
        where = Dest.STYLES_AUTOMATIC_STYLES.value
        check_all_hidden(embedded, True, where)
        by_name = {}
        for text_style in embedded:
            if by_name.setdefault(text_style.name, text_style) != text_style:
                raise DuplicateNameError(text_style.name, where)
        automatic = self._object_styles.registry(Dest.STYLES_AUTOMATIC_STYLES)
        for text_style in embedded:
            self._precheck(automatic, text_style, mode)
        return self._precheck(self._master_page_styles, style, mode)

    def add_master_page_style(self, style: MasterPageStyle, mode: ModeArg = None) -> bool:
        """Add a master page, then the text styles its header and footer use."""
        self._precheck_master_page(style, mode)
        if not self._put(self._master_page_styles, style, mode):
            return False
        automatic = self._object_styles.registry(Dest.STYLES_AUTOMATIC_STYLES)
        for text_style in style.embedded_styles():
            self._put(automatic, text_style, mode)
        return True

    def add_page_style(self, style: PageStyle, mode: ModeArg = None) -> bool:
        """Add the master page and its page layout, both or neither."""
        layout = style.page_layout_style
        check_hidden(layout, True, self._page_layout_styles.label)
        layout_ok = self._precheck(self._page_layout_styles, layout, mode)
        master_ok = self._precheck_master_page(style.master_page_style, mode)
        if not (layout_ok and master_ok):
            log.debug("page style %r refused (%s)", style.name, Mode.coerce(mode).value)
            return False
        self.add_master_page_style(style.master_page_style, mode)
        self.add_page_layout_style(layout, mode)
        return True

    def add_style_to_content_automatic_styles(self, style, mode: ModeArg = None) -> bool:
        return self._add_object_style(style, Dest.CONTENT_AUTOMATIC_STYLES, True, mode)

    def add_style_to_styles_automatic_styles(self, style, mode: ModeArg = None) -> bool:
        return self._add_object_style(style, Dest.STYLES_AUTOMATIC_STYLES, True, mode)

    def add_style_to_styles_common_styles(self, style, mode: ModeArg = None) -> bool:
        return self._add_object_style(style, Dest.STYLES_COMMON_STYLES, False, mode)

    def add_new_data_style_from_cell_style(self, style: TableCellStyle) -> None:
        """Register a hidden cell style that already carries its data style."""
        data = style.data_style
        if data is None:
            raise InvalidStyleError(f"cell style {style.name!r} has no data style")
        check_hidden(style, True, Dest.CONTENT_AUTOMATIC_STYLES.value)
        check_hidden(data, True, self._data_styles.label)
        self._object_styles.check(style.name, Dest.CONTENT_AUTOMATIC_STYLES, style)
        self._data_styles.check(data.name, data)

        self._object_styles.register(style.name, Dest.CONTENT_AUTOMATIC_STYLES, style)
        self._data_styles.register(data.name, data)

    def add_child_cell_style(self, style: TableCellStyle, data: DataStyle) -> TableCellStyle:
        """Return the anonymous style mixing `style` with `data`, creating it once."""
        return self._merge_cache.merge(style, data)

    # -- state --------------------------------------------------------------

    def _registries(self) -> Tuple[KeyedRegistry, ...]:
        return (self._data_styles, self._master_page_styles, self._page_layout_styles)

    def debug(self, enabled: bool = True) -> None:
        self._object_styles.debug(enabled)
        for reg in self._registries():
            reg.debug(enabled)

    def freeze(self) -> None:
        """No add is allowed afterwards."""
        self._object_styles.freeze()
        for reg in self._registries():
            reg.freeze()
        log.debug("styles container frozen")

    @property
    def frozen(self) -> bool:
        return self._object_styles.frozen and all(r.frozen for r in self._registries())

    def styles(self, dest: Dest) -> Tuple[object, ...]:
        return self._object_styles.values(dest)

    def data_styles(self) -> Tuple[DataStyle, ...]:
        return self._data_styles.values()

    def master_page_styles(self) -> Tuple[MasterPageStyle, ...]:
        return self._master_page_styles.values()

    def page_layout_styles(self) -> Tuple[PageLayoutStyle, ...]:
        return self._page_layout_styles.values()

    def has_footer_header(self) -> HasFooterHeader:
        has_header = False
        has_footer = False
        for ps in self._master_page_styles.values():
            if has_header and has_footer:
                break
            if not has_header and ps.header is not None:
                has_header = True
            if not has_footer and ps.footer is not None:
                has_footer = True
        return HasFooterHeader(has_header, has_footer)

    # -- writing ------------------------------------------------------------

    @staticmethod
    def _write(styles: Iterable, ctx: XMLContext, sink: ET._Element) -> None:
        for style in styles:
            style.append_xml(ctx, sink)

    def _write_checked(self, styles: Tuple, hidden: bool, where: str,
                       ctx: XMLContext, sink: ET._Element) -> None:
        check_all_hidden(styles, hidden, where)
        self._write(styles, ctx, sink)

    def write_data_styles(self, ctx: XMLContext, sink: ET._Element) -> None:
        self._write_checked(self._data_styles.values(), True, self._data_styles.label, ctx, sink)

    def write_content_automatic_styles(self, ctx: XMLContext, sink: ET._Element) -> None:
        dest = Dest.CONTENT_AUTOMATIC_STYLES
        self._write_checked(self.styles(dest), True, dest.value, ctx, sink)

    def write_styles_automatic_styles(self, ctx: XMLContext, sink: ET._Element) -> None:
        dest = Dest.STYLES_AUTOMATIC_STYLES
        self._write_checked(self.styles(dest), True, dest.value, ctx, sink)

    def write_styles_common_styles(self, ctx: XMLContext, sink: ET._Element) -> None:
        dest = Dest.STYLES_COMMON_STYLES
        self._write_checked(self.styles(dest), False, dest.value, ctx, sink)

    def write_master_page_styles_to_automatic_styles(self, ctx: XMLContext, sink: ET._Element) -> None:
        """Page layouts go to styles.xml/office:automatic-styles."""
        self._write_checked(self._page_layout_styles.values(), True,
                            self._page_layout_styles.label, ctx, sink)

    def write_master_page_styles_to_master_styles(self, ctx: XMLContext, sink: ET._Element) -> None:
        self._write(self._master_page_styles.values(), ctx, sink)
