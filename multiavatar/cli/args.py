import argparse
import logging
import sys
from typing import Dict, List, Optional

from ..avatar.assemble import generate
from ..avatar.catalog import get_catalog
from ..avatar.options import options_from_defaults
from ..core import load_config
from ..utils.query import MissingParameterError, options_from_query

log = logging.getLogger(__name__)

# argparse dest -> request parameter name
PARAM_NAMES = {
    "theme": "theme",
    "gender": "gender",
    "part_theme": "partTheme",
    "allowed_themes": "allowedThemes",
    "part_version": "partVersion",
    "allowed_versions": "allowedVersions",
    "env": "env",
    "clo": "clo",
    "mouth": "mouth",
    "head": "head",
    "eyes": "eyes",
    "top": "top",
    "without_part": "withoutPart",
}


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="multiavatar",
        description="Write a deterministic SVG avatar for NAME to stdout.",
    )
    ap.add_argument("name", help="Any text; the same text always gives the same avatar")
    ap.add_argument("--config", default=None, help="Path to settings YAML (default conf/avatar.yaml)")
    ap.add_argument("--transparent", action="store_true", help="Leave out the background")
    ap.add_argument("--theme", default=None, help="Global theme letter A, B or C")
    ap.add_argument("--gender", default=None, help="Style preset: female, male or unisex")
    ap.add_argument("--part-theme", default=None, help="Per-part theme, e.g. eyes:C,top:A")
    ap.add_argument("--allowed-themes", default=None, help="Allowed themes, e.g. top:A|C")
    ap.add_argument("--part-version", default=None, help="Per-part version, e.g. eyes:11,top:07")
    ap.add_argument("--allowed-versions", default=None, help="Allowed versions, e.g. eyes:03|11")
    for part, what in (
        ("env", "background color"),
        ("clo", "clothes colors, |-separated"),
        ("mouth", "mouth colors, |-separated"),
        ("head", "skin color"),
        ("eyes", "eye colors, |-separated"),
        ("top", "hair colors, |-separated"),
    ):
        ap.add_argument(f"--{part}", default=None, help=f"Override {what}")
    ap.add_argument("--without-part", default=None, help="Parts to leave out, e.g. top|eyes")
    ap.add_argument(
        "--verify",
        action="store_true",
        help="Render twice and fail unless both documents are byte-identical",
    )
    return ap


def params_from_args(args: argparse.Namespace) -> Dict[str, str]:
    params = {"name": args.name}
    if args.transparent:
        params["transparent"] = "true"
    for dest, key in PARAM_NAMES.items():
        value = getattr(args, dest, None)
        if value:
            params[key] = value
    return params


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    cfg = load_config(args.config)

    params = params_from_args(args)
    name = params["name"].strip()
    if not name:
        print(MissingParameterError("missing required 'name' parameter"), file=sys.stderr)
        return 2

    opts = options_from_defaults(cfg.defaults) + options_from_query(params)
    catalog = get_catalog(cfg.catalog.path)

    svg = generate(name, *opts, catalog=catalog)
    if args.verify:
        again = generate(name, *opts, catalog=catalog)
        if again != svg:
            log.error(f"Non-deterministic output for {name!r}")
            return 1
        log.info(f"Verified deterministic output for {name!r} ({len(svg)} bytes)")

    sys.stdout.write(svg + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
