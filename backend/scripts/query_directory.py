#!/usr/bin/env python3
"""Fetch directory data from a running API and print it as JSON.

Run from the backend/ directory:

    python3 scripts/query_directory.py --base-url http://localhost:8000 [--category NAME]
    python3 scripts/query_directory.py --base-url http://localhost:8000 --field club --value Soccer

Without a filter, both datasets are printed. The API key defaults to
API_SECRET_KEY from the environment (or .env).
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import os
import sys
from typing import Any

_project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

from people_api.core.config import Settings  # noqa: E402
from people_api.core.errors import UnknownFieldError  # noqa: E402
from people_api.services.directory_client import DirectoryClient  # noqa: E402
from people_api.services.filters import filter_category, filter_employee  # noqa: E402

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Query employees and master data from the people directory API",
    )
    parser.add_argument(
        "--base-url",
        default="http://localhost:8000",
        help="API base URL (default: http://localhost:8000)",
    )
    parser.add_argument(
        "--api-key",
        default=None,
        help="Secret key sent as x-secret-key (default: API_SECRET_KEY)",
    )
    group = parser.add_mutually_exclusive_group()
    group.add_argument(
        "--category",
        help="Print a single master data list, e.g. country or club",
    )
    group.add_argument(
        "--field",
        help="Employee field to filter on, e.g. gender or projects (requires --value)",
    )
    parser.add_argument(
        "--value",
        help="Exact value the --field must equal (or contain, for projects/club)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose (DEBUG) logging",
    )
    args = parser.parse_args(argv)
    if args.field and args.value is None:
        parser.error("--field requires --value")
    return args


async def query(args: argparse.Namespace, client: DirectoryClient | None = None) -> Any:
    """Return the data selected by ``args``, or ``None`` if it could not be fetched."""
    api_key = args.api_key if args.api_key is not None else Settings().API_SECRET_KEY
    client = client or DirectoryClient(args.base_url)

    result = await client.fetch_apis(api_key)
    if result is None:
        return None
    employees, master_data = result

    if args.category:
        return [entry.model_dump() for entry in filter_category(args.category, master_data)]
    if args.field:
        return filter_employee(args.field, args.value, employees)
    return {"employees": employees, "master_data": master_data.model_dump()}


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(message)s")

    try:
        data = asyncio.run(query(args))
    except UnknownFieldError as err:
        logger.error("%s", err)
        return 1

    if data is None:
        logger.error("No data returned from %s", args.base_url)
        return 1

    print(json.dumps(data, indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
