import argparse
import base64
import json
import sys
from dataclasses import replace
from pathlib import Path

from .config import ExportSettings, load_payload, parse_locale, parse_templates
from .errors import StyleRegistryError
from .exporters.format_templates import export_format_templates
from .utils.logger import get_logger, set_verbose

log = get_logger("ods_styles")


def build_settings(args: argparse.Namespace) -> ExportSettings:
    if args.payload:
        settings = ExportSettings.from_payload(load_payload(Path(args.payload)), args.filename, args.debug)
    elif args.stdin:
        settings = ExportSettings.from_payload(json.loads(sys.stdin.read()), args.filename, args.debug)
    else:
        settings = ExportSettings(filename=args.filename or ExportSettings.filename, debug=args.debug)
    if args.templates:
        settings = replace(settings, templates=parse_templates(args.templates))
    if args.locale:
        settings = replace(settings, locale=parse_locale(args.locale))
    return settings


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="ods_styles",
                                     description="Write a format-template spreadsheet as filename|base64")
    parser.add_argument("--filename")
    parser.add_argument("--templates", help="comma separated codes, e.g. Num2,Pct1,Cash2")
    parser.add_argument("--locale", help="e.g. en-GB")
    parser.add_argument("--payload", help="JSON payload file with a Params object")
    parser.add_argument("--stdin", action="store_true", help="read the JSON payload from stdin")
    parser.add_argument("--debug", action="store_true")
    args = parser.parse_args(argv)

    set_verbose(args.debug)
    settings = build_settings(args)
    try:
        filename, content = export_format_templates(settings)
    except StyleRegistryError as exc:
        log.error("style registration failed: %s", exc)
        print(f"error: {exc}", file=sys.stderr)
        return 1
    print(f"{filename}|{base64.b64encode(content).decode('ascii')}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
