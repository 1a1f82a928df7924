#!/usr/bin/env python3
"""
Dump a catalog resource (single object or paginated listing) as JSON lines
"""
import argparse
import itertools
import json
import logging
import sys
from pathlib import Path
from typing import Optional

from torg_catalog.client import CatalogClient
from torg_catalog.errors import CatalogError
from torg_catalog.integrations.normalizer import export
from torg_catalog.utils.config_loader import config_from_env, load_client_config


def setup_logging(verbose: bool = False, log_file: Optional[Path] = None):
    """Setup logging configuration"""
    level = logging.DEBUG if verbose else logging.INFO

    handlers = [logging.StreamHandler(sys.stderr)]
    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=handlers
    )


def parse_params(pairs):
    params = {}
    for pair in pairs:
        key, sep, value = pair.partition('=')
        if not sep:
            raise ValueError(f"Expected key=value, got {pair!r}")
        params[key] = value
    return params


def main():
    """Main entry point"""
    parser = argparse.ArgumentParser(
        description='Dump catalog API resources as normalized JSON lines',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # First 50 models of a category in Moscow
  python scripts/dump_listing.py category/91/models --param geo_id=213 --limit 50

  # A single offer
  python scripts/dump_listing.py offer/123456 --single

  # Use a config file instead of TORG_* environment variables
  python scripts/dump_listing.py regions --config config/catalog_client.yml
        """
    )
    parser.add_argument('resource', help='Resource path, e.g. category/91/models')
    parser.add_argument('--param', action='append', default=[], help='Query parameter as key=value (repeatable)')
    parser.add_argument('--single', action='store_true', help='Resource is a single object, not a listing')
    parser.add_argument('--limit', type=int, default=None, help='Stop after this many items')
    parser.add_argument('--config', type=Path, default=None, help='Path to client config YAML file')
    parser.add_argument('--verbose', '-v', action='store_true', help='Enable verbose logging')
    parser.add_argument('--log-file', type=Path, default=None, help='Also write logs to this file')

    args = parser.parse_args()
    setup_logging(args.verbose, args.log_file)
    logger = logging.getLogger(__name__)

    config = load_client_config(args.config) if args.config else config_from_env()
    try:
        params = parse_params(args.param)
    except ValueError as e:
        parser.error(str(e))

    try:
        with CatalogClient(config) as client:
            if args.single:
                print(json.dumps(export(client.get(args.resource, params)), ensure_ascii=False))
                return 0
            items = client.listing(args.resource, params)
            if args.limit is not None:
                items = itertools.islice(items, args.limit)
            count = 0
            for item in items:
                print(json.dumps(export(item), ensure_ascii=False))
                count += 1
            logger.info("Dumped %s item(s) from %s", count, args.resource)
    except CatalogError as e:
        logger.error("Failed to dump %s: %s", args.resource, e)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
