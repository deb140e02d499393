from __future__ import annotations
import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

Locale = Tuple[str, str]

DEFAULT_LOCALE: Locale = ("en", "GB")
DEFAULT_TEMPLATES: Tuple[str, ...] = ("Num0", "Num2", "Pct1", "Cash2")


def parse_locale(value: Optional[str]) -> Locale:
    """Parse 'en-GB' / 'en_GB' into ("en", "GB"); empty input gives the default."""
    if not value:
        return DEFAULT_LOCALE
    lang, _, country = value.strip().replace("_", "-").partition("-")
    if not lang:
        return DEFAULT_LOCALE
    return (lang.lower(), (country or DEFAULT_LOCALE[1]).upper())


def parse_templates(value: Any) -> Tuple[str, ...]:
    if not value:
        return DEFAULT_TEMPLATES
    if isinstance(value, str):
        value = value.split(",")
    return tuple(str(v).strip() for v in value if v and str(v).strip())


@dataclass(frozen=True)
class ExportSettings:
    filename: str = "FormatTemplates.ods"
    locale: Locale = DEFAULT_LOCALE
    templates: Tuple[str, ...] = field(default=DEFAULT_TEMPLATES)
    debug: bool = False

    @classmethod
    def from_payload(cls, payload: Dict[str, Any], filename: Optional[str] = None,
                     debug: bool = False) -> "ExportSettings":
        params = payload.get("Params") or payload.get("params") or {}
        return cls(
            filename=filename or params.get("filename") or cls.filename,
            locale=parse_locale(params.get("locale")),
            templates=parse_templates(params.get("templates")),
            debug=debug or str(params.get("debug", "")).lower() == "true",
        )


def load_payload(path: Path) -> Dict[str, Any]:
    # Payloads written by the web host may carry a BOM
    text = Path(path).read_text(encoding="utf-8-sig")
    return json.loads(text.lstrip("\ufeff"))
