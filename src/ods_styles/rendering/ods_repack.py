import io
import zipfile
from typing import Dict, Mapping

from lxml import etree as ET

from .xml_utils import MANIFEST_NS, q

ODS_MIMETYPE = "application/vnd.oasis.opendocument.spreadsheet"


def build_manifest(parts: Mapping[str, bytes], version: str = "1.2") -> bytes:
    root = ET.Element(q(MANIFEST_NS, "manifest"), nsmap={"manifest": MANIFEST_NS})
    root.set(q(MANIFEST_NS, "version"), version)
    entry = ET.SubElement(root, q(MANIFEST_NS, "file-entry"))
    entry.set(q(MANIFEST_NS, "full-path"), "/")
    entry.set(q(MANIFEST_NS, "version"), version)
    entry.set(q(MANIFEST_NS, "media-type"), ODS_MIMETYPE)
    for name in parts:
        entry = ET.SubElement(root, q(MANIFEST_NS, "file-entry"))
        entry.set(q(MANIFEST_NS, "full-path"), name)
        entry.set(q(MANIFEST_NS, "media-type"), "text/xml")
    return ET.tostring(root, xml_declaration=True, encoding="UTF-8")


def write_package(parts: Mapping[str, bytes]) -> bytes:
    """Zip `parts` into an ODS package; mimetype goes first, uncompressed."""
    out_mem = io.BytesIO()
    with zipfile.ZipFile(out_mem, "w", compression=zipfile.ZIP_DEFLATED) as zout:
        zout.writestr(zipfile.ZipInfo("mimetype"), ODS_MIMETYPE, compress_type=zipfile.ZIP_STORED)
        for name, data in parts.items():
            zout.writestr(name, data)
        zout.writestr("META-INF/manifest.xml", build_manifest(parts))
    return out_mem.getvalue()


def repack_with_replacements(ods_bytes: bytes, replacements: Dict[str, bytes]) -> bytes:
    """Copy a package, swapping the given parts; entries keep their order and zip settings."""
    in_mem = io.BytesIO(ods_bytes)
    out_mem = io.BytesIO()

    with zipfile.ZipFile(in_mem, "r") as zin, zipfile.ZipFile(out_mem, "w", compression=zipfile.ZIP_DEFLATED) as zout:
        existing = {i.filename for i in zin.infolist()}
        for item in zin.infolist():
            name = item.filename
            zout.writestr(item, replacements[name] if name in replacements else zin.read(name))
        for name, data in replacements.items():
            if name not in existing:
                zout.writestr(name, data)

    return out_mem.getvalue()
