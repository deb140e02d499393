from __future__ import annotations


class StyleRegistryError(Exception):
    """Base class for every usage error raised while collecting styles."""


class DuplicateNameError(StyleRegistryError):
    def __init__(self, name: str, where: str = "registry") -> None:
        super().__init__(f"style {name!r} is already registered in {where}")
        self.name = name
        self.where = where


class MissingNameError(StyleRegistryError):
    def __init__(self, name: str, where: str = "registry") -> None:
        super().__init__(f"style {name!r} is not registered in {where}")
        self.name = name
        self.where = where


class FrozenRegistryError(StyleRegistryError):
    def __init__(self, name: str, where: str = "registry") -> None:
        super().__init__(f"cannot add {name!r}: {where} is frozen")
        self.name = name
        self.where = where


class HiddenInvariantViolation(StyleRegistryError):
    def __init__(self, name: str, expected_hidden: bool, where: str) -> None:
        state = "hidden" if expected_hidden else "visible"
        super().__init__(f"style {name!r} must be {state} to go in {where}")
        self.name = name
        self.expected_hidden = expected_hidden
        self.where = where


class MergeCollisionError(StyleRegistryError):
    def __init__(self, name: str) -> None:
        super().__init__(
            f"composite style {name!r} already exists for another (style, data style) pair"
        )
        self.name = name


class InvalidStyleError(StyleRegistryError, ValueError):
    """A style value failed validation in its factory."""


class InvalidModeError(StyleRegistryError, ValueError):
    pass
