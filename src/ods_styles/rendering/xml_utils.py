from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Optional

from lxml import etree as ET

from ..config import DEFAULT_LOCALE, Locale

OFFICE_NS   = "urn:oasis:names:tc:opendocument:xmlns:office:1.0"
STYLE_NS    = "urn:oasis:names:tc:opendocument:xmlns:style:1.0"
NUMBER_NS   = "urn:oasis:names:tc:opendocument:xmlns:datastyle:1.0"
TABLE_NS    = "urn:oasis:names:tc:opendocument:xmlns:table:1.0"
TEXT_NS     = "urn:oasis:names:tc:opendocument:xmlns:text:1.0"
FO_NS       = "urn:oasis:names:tc:opendocument:xmlns:xsl-fo-compatible:1.0"
META_NS     = "urn:oasis:names:tc:opendocument:xmlns:meta:1.0"
DC_NS       = "http://purl.org/dc/elements/1.1/"
MANIFEST_NS = "urn:oasis:names:tc:opendocument:xmlns:manifest:1.0"

NSMAP: Dict[str, str] = {
    "office": OFFICE_NS,
    "style": STYLE_NS,
    "number": NUMBER_NS,
    "table": TABLE_NS,
    "text": TEXT_NS,
    "fo": FO_NS,
    "meta": META_NS,
    "dc": DC_NS,
}

ODF_VERSION = "1.2"


def q(ns: str, local: str) -> ET.QName:
    return ET.QName(ns, local)


@dataclass(frozen=True)
class XMLContext:
    """
    Per-document serialization context: created once when a package is
    assembled and passed to every style's append_xml.
    """
    locale: Locale = DEFAULT_LOCALE
    office_version: str = ODF_VERSION

    @property
    def language(self) -> str:
        return self.locale[0]

    @property
    def country(self) -> str:
        return self.locale[1]

    def sub(self, parent: ET._Element, ns: str, local: str, text: Optional[str] = None,
            **attrs: Optional[str]) -> ET._Element:
        """Append a child element; keyword attributes use `prefix_local` names."""
        el = ET.SubElement(parent, q(ns, local))
        for key, val in attrs.items():
            if val is None:
                continue
            el.set(self.attr(key), val)
        if text is not None:
            el.text = text
        return el

    @staticmethod
    def attr(key: str) -> ET.QName:
        # "style_data_style_name" -> style:data-style-name
        prefix, _, local = key.partition("_")
        return q(NSMAP[prefix], local.replace("_", "-"))

    @staticmethod
    def root(ns: str, local: str) -> ET._Element:
        return ET.Element(q(ns, local), nsmap=NSMAP)
