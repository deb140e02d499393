from __future__ import annotations
from enum import Enum
from typing import Dict, Generic, Optional, Tuple, Type, TypeVar, Union

from .registry import KeyedRegistry, Mode

V = TypeVar("V")
D = TypeVar("D", bound=Enum)


class Dest(Enum):
    CONTENT_AUTOMATIC_STYLES = "content.xml/office:automatic-styles"
    STYLES_AUTOMATIC_STYLES = "styles.xml/office:automatic-styles"
    STYLES_COMMON_STYLES = "styles.xml/office:styles"


class MultiRegistry(Generic[D, V]):
    """
    One KeyedRegistry per member of a destination enum. Names are unique
    within a destination only: the same name may live once in each of them.
    """
    def __init__(self, dest_type: Type[D]) -> None:
        self._by_dest: Dict[D, KeyedRegistry[V]] = {
            dest: KeyedRegistry(dest.value if isinstance(dest.value, str) else dest.name)
            for dest in dest_type
        }

    def registry(self, dest: D) -> KeyedRegistry[V]:
        try:
            return self._by_dest[dest]
        except KeyError:
            raise KeyError(f"unknown destination: {dest!r}") from None

    def add(self, name: str, dest: D, value: V, mode: Union[Mode, str] = Mode.CREATE) -> bool:
        return self.registry(dest).add(name, value, mode)

    def register(self, name: str, dest: D, value: V, mode: Union[Mode, str] = Mode.CREATE) -> bool:
        return self.registry(dest).register(name, value, mode)

    def check(self, name: str, dest: D, value: V, mode: Union[Mode, str] = Mode.CREATE) -> None:
        self.registry(dest).check(name, value, mode)

    def get(self, name: str, dest: D) -> Optional[V]:
        return self.registry(dest).get(name)

    def values(self, dest: D) -> Tuple[V, ...]:
        return self.registry(dest).values()

    @property
    def frozen(self) -> bool:
        return all(r.frozen for r in self._by_dest.values())

    def freeze(self) -> None:
        for reg in self._by_dest.values():
            reg.freeze()

    def debug(self, enabled: bool = True) -> None:
        for reg in self._by_dest.values():
            reg.debug(enabled)
