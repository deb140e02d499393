from .container import HasFooterHeader, StylesContainer
from .engine import render_parts, restyle_ods, write_ods
from .errors import (
    DuplicateNameError,
    FrozenRegistryError,
    HiddenInvariantViolation,
    InvalidModeError,
    InvalidStyleError,
    MergeCollisionError,
    MissingNameError,
    StyleRegistryError,
)
from .mapping.merge_cache import MergeCache, MergeKey
from .mapping.multi_registry import Dest, MultiRegistry
from .mapping.registry import KeyedRegistry, Mode
from .rendering.xml_utils import XMLContext

__all__ = [
    "Dest",
    "DuplicateNameError",
    "FrozenRegistryError",
    "HasFooterHeader",
    "HiddenInvariantViolation",
    "InvalidModeError",
    "InvalidStyleError",
    "KeyedRegistry",
    "MergeCache",
    "MergeCollisionError",
    "MergeKey",
    "MissingNameError",
    "Mode",
    "MultiRegistry",
    "StyleRegistryError",
    "StylesContainer",
    "XMLContext",
    "render_parts",
    "restyle_ods",
    "write_ods",
]
