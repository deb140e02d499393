from __future__ import annotations
from enum import Enum
from types import MappingProxyType
from typing import Dict, Generic, Iterator, Mapping, Optional, Tuple, TypeVar, Union

from ..errors import (
    DuplicateNameError,
    FrozenRegistryError,
    InvalidModeError,
    MissingNameError,
    StyleRegistryError,
)
from ..utils.logger import get_logger

log = get_logger(__name__)

V = TypeVar("V")


class Mode(str, Enum):
    CREATE = "create"
    UPDATE = "update"
    CREATE_OR_UPDATE = "create_or_update"

    @classmethod
    def coerce(cls, mode: Union["Mode", str]) -> "Mode":
        if isinstance(mode, Mode):
            return mode
        if isinstance(mode, str):
            u = mode.strip().lower().replace("-", "_")
            for m in cls:
                if m.value == u or m.name.lower() == u:
                    return m
        raise InvalidModeError(f"unknown registration mode: {mode!r}")


class KeyedRegistry(Generic[V]):
    """
    Ordered name -> value store used for every style section.

    Entries keep their first-insertion position, an UPDATE replaces the value
    in place. Once frozen, every mutation raises FrozenRegistryError.
    """
    def __init__(self, label: str = "registry") -> None:
        self.label = label
        self._values: Dict[str, V] = {}
        self._frozen = False
        self._debug = False

    def __len__(self) -> int:
        return len(self._values)

    def __contains__(self, name: object) -> bool:
        return name in self._values

    def __iter__(self) -> Iterator[V]:
        return iter(self.values())

    def __repr__(self) -> str:
        return f"KeyedRegistry({self.label!r}, {list(self._values)!r}, frozen={self._frozen})"

    @property
    def frozen(self) -> bool:
        return self._frozen

    def get(self, name: str) -> Optional[V]:
        return self._values.get(name)

    def require(self, name: str) -> V:
        try:
            return self._values[name]
        except KeyError:
            raise MissingNameError(name, self.label) from None

    def values(self) -> Tuple[V, ...]:
        return tuple(self._values.values())

    def names(self) -> Tuple[str, ...]:
        return tuple(self._values)

    def as_dict(self) -> Mapping[str, V]:
        return MappingProxyType(self._values)

    def freeze(self) -> None:
        self._frozen = True

    def debug(self, enabled: bool = True) -> None:
        self._debug = enabled

    def _rejection(self, name: str, mode: Mode) -> Optional[StyleRegistryError]:
        if self._frozen:
            return FrozenRegistryError(name, self.label)
        if mode is Mode.CREATE and name in self._values:
            return DuplicateNameError(name, self.label)
        if mode is Mode.UPDATE and name not in self._values:
            return MissingNameError(name, self.label)
        return None

    def _report(self, err: StyleRegistryError, name: str, value: V) -> None:
        if self._debug:
            log.warning("%s (stored=%r, incoming=%r)", err, self._values.get(name), value)

    def add(self, name: str, value: V, mode: Union[Mode, str] = Mode.CREATE) -> bool:
        """
        Mode-aware insertion. Returns False when CREATE meets an existing name
        or UPDATE a missing one; the registry is left untouched in that case.
        """
        mode = Mode.coerce(mode)
        err = self._rejection(name, mode)
        if isinstance(err, FrozenRegistryError):
            self._report(err, name, value)
            raise err
        if err is not None:
            self._report(err, name, value)
            return False
        self._values[name] = value
        log.debug("%s: %s %r", self.label, mode.value, name)
        return True

    def check(self, name: str, value: V, mode: Union[Mode, str] = Mode.CREATE) -> None:
        """Raise the error `register` would raise, without mutating anything."""
        mode = Mode.coerce(mode)
        err = self._rejection(name, mode)
        if isinstance(err, DuplicateNameError) and self._same(name, value):
            return
        if err is not None:
            raise err

    def accepts(self, name: str, mode: Union[Mode, str] = Mode.CREATE) -> bool:
        """Whether `add(name, ..., mode)` would change the registry. Raises when frozen."""
        err = self._rejection(name, Mode.coerce(mode))
        if isinstance(err, FrozenRegistryError):
            raise err
        return err is None

    def register(self, name: str, value: V, mode: Union[Mode, str] = Mode.CREATE) -> bool:
        """
        Strict insertion for callers that do not branch on the result.
        Re-registering an equal value under CREATE is a no-op returning False;
        every other refusal raises.
        """
        mode = Mode.coerce(mode)
        self.check(name, value, mode)
        if mode is Mode.CREATE and name in self._values:
            return False
        return self.add(name, value, mode)

    def _same(self, name: str, value: V) -> bool:
        stored = self._values[name]
        return stored is value or stored == value
