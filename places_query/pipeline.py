# places_query/pipeline.py
import argparse
import json
import logging
from dataclasses import fields
from typing import Any, Dict, List, Optional

from .config import load_settings
from .exporters import export_photo, export_response_csv
from .http_client import HttpClient
from .options import (
    FindPlaceOptions,
    NearbySearchOptions,
    PlaceAutocompleteOptions,
    PlaceDetailsOptions,
    PlacePhotoOptions,
    QueryAutocompleteOptions,
    TextSearchOptions,
)
from .places import PlaceQueryBuilder

logger = logging.getLogger(__name__)

# CLI name -> (builder method, required positional names, options class)
OPERATIONS = {
    "find-place": ("find_place", ["input", "input_type"], FindPlaceOptions),
    "nearby-search": ("nearby_search", ["location"], NearbySearchOptions),
    "text-search": ("text_search", ["query"], TextSearchOptions),
    "place-details": ("place_details", ["place_id"], PlaceDetailsOptions),
    "place-photos": ("place_photos", ["photo_reference"], PlacePhotoOptions),
    "place-autocomplete": ("place_autocomplete", ["input"], PlaceAutocompleteOptions),
    "query-autocomplete": ("query_autocomplete", ["input"], QueryAutocompleteOptions),
}


def parse_option(raw: str) -> Dict[str, Any]:
    if "=" not in raw:
        raise argparse.ArgumentTypeError(f"expected key=value, got {raw!r}")
    key, value = raw.split("=", 1)
    lowered = value.strip().lower()
    if lowered in ("true", "false"):
        return {key.strip(): lowered == "true"}
    return {key.strip(): value}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="places-query",
        description="Query the Google Places web service from the command line.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    sub = parser.add_subparsers(dest="operation", required=True)
    for name, (_, required, _) in OPERATIONS.items():
        p = sub.add_parser(name)
        for arg in required:
            p.add_argument(arg)
        p.add_argument(
            "--opt", action="append", default=[], type=parse_option,
            metavar="KEY=VALUE", help="optional argument, e.g. --opt language=en",
        )
        p.add_argument("--out", help="write CSV rows (or the photo bytes) to this path")
    return parser


def run(argv: Optional[List[str]] = None, builder: Optional[PlaceQueryBuilder] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    method_name, required, options_cls = OPERATIONS[args.operation]
    overrides: Dict[str, Any] = {}
    for opt in args.opt:
        overrides.update(opt)

    known = [f.name for f in fields(options_cls)]
    unknown = sorted(set(overrides) - set(known))
    if unknown:
        parser.error(
            f"unknown option(s) for {args.operation}: {', '.join(unknown)} "
            f"(choose from {', '.join(known)})"
        )

    if builder is None:
        builder = PlaceQueryBuilder(HttpClient(load_settings()))

    method = getattr(builder, method_name)
    response = method(*[getattr(args, name) for name in required], **overrides)

    if isinstance(response, bytes):
        if not args.out:
            logger.error("%s returns binary content; pass --out", args.operation)
            return 2
        export_photo(response, args.out)
        print(f"Wrote {len(response)} bytes to {args.out}")
        return 0

    if args.out:
        rows = export_response_csv(response, args.out)
        print(f"Wrote {rows} rows to {args.out}")
    else:
        print(json.dumps(response, indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    raise SystemExit(run())
