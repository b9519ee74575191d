#!/usr/bin/env python3
from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import replace

from medialist.config import ProviderConfig, ProviderConfigurationError
from medialist.integrations.http import ProviderTransportError
from medialist.metadata.resolver import MetadataNotFoundError, MetadataResolver
from medialist.models.lookup import MediaType
from medialist.utils.env import load_env

EXIT_OK = 0
EXIT_NOT_FOUND = 1
EXIT_FAILURE = 2


def _parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="lookup_media.py",
        description="Resolve cover art and release year for a title from its catalog provider.",
    )
    parser.add_argument(
        "--type",
        dest="media_type",
        required=True,
        choices=[t.value for t in MediaType],
        help="Media type; selects the provider.",
    )
    parser.add_argument("title", help="Title to search for.")
    parser.add_argument("--creator", default=None, help="Author or artist (used by book lookups).")
    parser.add_argument("--timeout", type=float, default=None, help="Override the HTTP timeout in seconds.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log outbound requests.")
    return parser.parse_args(argv)


def main(argv: list[str], *, resolver: MetadataResolver | None = None) -> int:
    load_env()
    args = _parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        if resolver is None:
            config = ProviderConfig.from_env()
            if args.timeout is not None:
                config = replace(config, timeout_seconds=args.timeout)
            resolver = MetadataResolver.from_config(config)
        result = resolver.resolve(args.media_type, args.title, args.creator)
    except MetadataNotFoundError as exc:
        print(exc.message, file=sys.stderr)
        return EXIT_NOT_FOUND
    except (ProviderTransportError, ProviderConfigurationError) as exc:
        print(f"Lookup failed: {exc}", file=sys.stderr)
        return EXIT_FAILURE

    print(json.dumps({"image_url": result.image_url, "year": result.year}))
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
