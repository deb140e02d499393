from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Optional

from ..errors import FrozenRegistryError, MergeCollisionError
from ..invariants import check_hidden
from ..semantic.naming import composite_name
from ..styles import DataStyle, TableCellStyle, child_cell_style
from ..utils.logger import get_logger
from .multi_registry import Dest, MultiRegistry
from .registry import KeyedRegistry, Mode

log = get_logger(__name__)


@dataclass(frozen=True)
class MergeKey:
    """Identity of a (cell style, data style) pair. Compared by style names."""
    style_name: str
    data_style_name: str

    @classmethod
    def of(cls, style: TableCellStyle, data: DataStyle) -> "MergeKey":
        return cls(style.name, data.name)


class MergeCache:
    """
    Builds and remembers the anonymous cell styles mixing a cell style with
    a data style. A pair is registered once; later requests for an equal pair
    return the same instance and touch no registry.
    """
    def __init__(self, data_styles: KeyedRegistry[DataStyle],
                 object_styles: MultiRegistry[Dest, object]) -> None:
        self._data_styles = data_styles
        self._object_styles = object_styles
        self._by_key: Dict[MergeKey, TableCellStyle] = {}

    def __len__(self) -> int:
        return len(self._by_key)

    def __contains__(self, key: object) -> bool:
        return key in self._by_key

    def get(self, style: TableCellStyle, data: DataStyle) -> Optional[TableCellStyle]:
        return self._by_key.get(MergeKey.of(style, data))

    def merge(self, style: TableCellStyle, data: DataStyle) -> TableCellStyle:
        automatic = self._object_styles.registry(Dest.CONTENT_AUTOMATIC_STYLES)
        if automatic.frozen:
            raise FrozenRegistryError(composite_name(style.name, data.name), automatic.label)

        key = MergeKey.of(style, data)
        cached = self._by_key.get(key)
        if cached is not None:
            log.debug("merge cache hit for %s", key)
            return cached

        composite = child_cell_style(style, data)
        self._validate(style, data, composite)

        self._data_styles.register(data.name, data)
        if not style.has_parent:
            self._object_styles.register(style.name, Dest.STYLES_COMMON_STYLES, style)
        self._object_styles.add(composite.name, Dest.CONTENT_AUTOMATIC_STYLES, composite, Mode.CREATE)
        self._by_key[key] = composite
        log.debug("registered anonymous style %r", composite.name)
        return composite

    def _validate(self, style: TableCellStyle, data: DataStyle, composite: TableCellStyle) -> None:
        # nothing is registered until every step is known to succeed
        check_hidden(data, True, "data styles")
        self._data_styles.check(data.name, data)
        if not style.has_parent:
            check_hidden(style, False, Dest.STYLES_COMMON_STYLES.value)
            self._object_styles.check(style.name, Dest.STYLES_COMMON_STYLES, style)
        if composite.name in self._object_styles.registry(Dest.CONTENT_AUTOMATIC_STYLES):
            raise MergeCollisionError(composite.name)
