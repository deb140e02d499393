from __future__ import annotations
from typing import Dict, Optional

from .config import DEFAULT_LOCALE, Locale
from .container import StylesContainer
from .mapping.multi_registry import Dest
from .rendering.documents import BodyWriter, build_content_xml, build_meta_xml, build_styles_xml
from .rendering.ods_repack import repack_with_replacements, write_package
from .rendering.xml_utils import XMLContext
from .utils.logger import get_logger

log = get_logger(__name__)


def _freeze(container: StylesContainer) -> None:
    if not container.frozen:
        container.freeze()


def render_parts(container: StylesContainer, ctx: XMLContext,
                 body: Optional[BodyWriter] = None) -> Dict[str, bytes]:
    """Freeze the container and serialize every XML part of the package."""
    _freeze(container)
    return {
        "content.xml": build_content_xml(container, ctx, body),
        "styles.xml": build_styles_xml(container, ctx),
        "meta.xml": build_meta_xml(ctx),
    }


def write_ods(container: StylesContainer, locale: Locale = DEFAULT_LOCALE,
              body: Optional[BodyWriter] = None) -> bytes:
    ctx = XMLContext(locale=locale)
    data = write_package(render_parts(container, ctx, body))
    log.info(
        "wrote ODS package (%d bytes): %d data styles, %d automatic styles, %d common styles",
        len(data),
        len(container.data_styles()),
        len(container.styles(Dest.CONTENT_AUTOMATIC_STYLES)),
        len(container.styles(Dest.STYLES_COMMON_STYLES)),
    )
    return data


def restyle_ods(ods_bytes: bytes, container: StylesContainer, locale: Locale = DEFAULT_LOCALE) -> bytes:
    """Swap styles.xml and meta.xml of an existing package for the container's."""
    ctx = XMLContext(locale=locale)
    _freeze(container)
    return repack_with_replacements(
        ods_bytes,
        replacements={
            "styles.xml": build_styles_xml(container, ctx),
            "meta.xml": build_meta_xml(ctx),
        },
    )
