"""Main CLI entry point."""

import argparse
import json
import logging
from pathlib import Path
from typing import Any, Callable, Optional

from lever_data.constants import EXPANDABLE_OPPORTUNITY_FIELDS


def main(argv: Optional[list[str]] = None) -> None:
    """Parse args and dispatch to subcommands."""
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Read client settings from YAML (default: LEVER_* environment variables)",
    )
    common.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Write JSON to file (default: stdout)",
    )
    common.add_argument(
        "--expand",
        action="append",
        default=[],
        metavar="FIELD",
        help="Embed a related record instead of its ID (repeatable, e.g. --expand stage)",
    )
    common.add_argument(
        "--limit",
        type=int,
        default=None,
        help="Page size for list commands",
    )
    common.add_argument(
        "--all",
        action="store_true",
        help="Follow pagination and return every record",
    )
    common.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log HTTP requests",
    )

    parser = argparse.ArgumentParser(prog="lever-data", description="Query the Lever Data API")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # opportunities / users: list or get
    for name, help_text, epilog in (
        (
            "opportunities",
            "List or fetch opportunities",
            "expandable fields: " + ", ".join(EXPANDABLE_OPPORTUNITY_FIELDS),
        ),
        ("users", "List or fetch users", None),
    ):
        sub = subparsers.add_parser(name, parents=[common], help=help_text, epilog=epilog)
        sub.add_argument("action", choices=["list", "get"], help="List records or get one by ID")
        sub.add_argument("id", nargs="?", default=None, help="Record ID (for get)")

    # list-only resources
    subparsers.add_parser("stages", parents=[common], help="List pipeline stages")
    subparsers.add_parser("tags", parents=[common], help="List tags with usage counts")
    subparsers.add_parser("sources", parents=[common], help="List sources with usage counts")
    subparsers.add_parser("archive-reasons", parents=[common], help="List archive reasons")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    from lever_data.errors import LeverError

    try:
        records = _run(args)
    except LeverError as e:
        raise SystemExit(f"lever-data: {e}")

    output = json.dumps(records, indent=2, default=str)
    if args.output:
        args.output.write_text(output, encoding="utf-8")
        print(f"Wrote {len(records)} records to {args.output}")
    else:
        print(output)


def _run(args: argparse.Namespace) -> list[dict[str, Any]]:
    """Run the selected command and return its records as JSON-ready dicts."""
    from lever_data.client import LeverClient
    from lever_data.config import ClientConfig

    config = ClientConfig.from_yaml(args.config) if args.config else ClientConfig.from_env()
    with LeverClient(config) as lever:
        if args.command == "opportunities":
            return _run_opportunities(lever, args)
        if args.command == "users":
            return _run_users(lever, args)
        if args.command == "stages":
            from lever_data.endpoints.stages import ListStagesRequest

            return _list(lever.stages.list, ListStagesRequest(), args)
        if args.command == "tags":
            from lever_data.endpoints.tags import ListTagsRequest

            return _list(lever.tags.list, ListTagsRequest(), args)
        if args.command == "sources":
            from lever_data.endpoints.tags import ListSourcesRequest

            return _list(lever.sources.list, ListSourcesRequest(), args)
        if args.command == "archive-reasons":
            from lever_data.endpoints.archive_reasons import ListArchiveReasonsRequest

            return _list(lever.archive_reasons.list, ListArchiveReasonsRequest(), args)
    raise SystemExit(f"Unknown command: {args.command}")


def _run_opportunities(lever: Any, args: argparse.Namespace) -> list[dict[str, Any]]:
    """Run opportunities command."""
    from lever_data.endpoints.base import Expansion
    from lever_data.endpoints.opportunities import GetOpportunityRequest, ListOpportunitiesRequest

    expansion = Expansion(expand=args.expand)
    if args.action == "get":
        if not args.id:
            raise SystemExit("opportunities get requires an opportunity ID")
        resp = lever.opportunities.get(GetOpportunityRequest(args.id, expansion=expansion))
        return [resp.data.to_wire()]
    return _list(lever.opportunities.list, ListOpportunitiesRequest(expansion=expansion), args)


def _run_users(lever: Any, args: argparse.Namespace) -> list[dict[str, Any]]:
    """Run users command."""
    from lever_data.endpoints.base import Expansion
    from lever_data.endpoints.users import GetUserRequest, ListUsersRequest

    expansion = Expansion(expand=args.expand)
    if args.action == "get":
        if not args.id:
            raise SystemExit("users get requires a user ID")
        resp = lever.users.get(GetUserRequest(args.id, expansion=expansion))
        return [resp.data.to_wire()]
    return _list(lever.users.list, ListUsersRequest(expansion=expansion), args)


def _list(fetch: Callable, request: Any, args: argparse.Namespace) -> list[dict[str, Any]]:
    """One page, or every page with --all."""
    from lever_data.endpoints.base import Pagination
    from lever_data.pagination import iter_items

    request.page = Pagination(limit=args.limit)
    if args.all:
        items = list(iter_items(fetch, request))
    else:
        items = fetch(request).data
    return [item.to_wire() for item in items]


if __name__ == "__main__":
    main()
