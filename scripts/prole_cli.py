#!/usr/bin/env python3
"""Command-line access to the Prole Adventures data layer.

Configuration comes from the environment (see ``ProleConfig.from_env``):
- PROLE_SUPABASE_URL (fallback: VITE_SUPABASE_URL)
- PROLE_SUPABASE_ANON_KEY (fallback: VITE_SUPABASE_ANON_KEY)

Subcommands:
  missions     print the mission board as the public sees it
  stats        print mission counts and bounty totals
  contribute   add to a mission's bounty
  subscribe    sign an address up for the newsletter
  sitemap      write sitemap.xml to stdout or a file
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path

_repo = Path(__file__).resolve().parent.parent
_src = _repo / "src"
if _src.is_dir():
    sys.path.insert(0, str(_src))

from pyprole import ProleClient, ProleConfig, ProleError, generate_sitemap, mission_stats  # noqa: E402
from pyprole.service import filter_by_status  # noqa: E402


async def _missions(args: argparse.Namespace) -> int:
    async with ProleClient(ProleConfig.from_env()) as client:
        board = await client.load_adventures()
    if board.banner:
        print(f"[{board.outcome}] {board.banner}", file=sys.stderr)
    rows = filter_by_status(board.projections, args.status)
    if args.json:
        print(json.dumps([row.model_dump(mode="json") for row in rows], indent=2))
        return 0
    for row in rows:
        print(
            f"{row.id:>10}  {row.status:<9} {row.display_title:<28} "
            f"({row.display_latitude:.4f}, {row.display_longitude:.4f})  "
            f"{row.bounty_current:.2f}/{row.bounty_target:.2f}"
        )
    return 0


async def _stats(_args: argparse.Namespace) -> int:
    async with ProleClient(ProleConfig.from_env()) as client:
        board = await client.load_adventures()
    print(json.dumps(mission_stats(board.projections).model_dump(), indent=2))
    return 0


async def _contribute(args: argparse.Namespace) -> int:
    async with ProleClient(ProleConfig.from_env()) as client:
        await client.load_adventures()
        try:
            updated = await client.contribute(args.adventure_id, args.amount)
        except ProleError as exc:
            print(f"Contribution failed: {exc}", file=sys.stderr)
            return 1
    print(f"{updated.codename}: {updated.bounty_current:.2f}/{updated.bounty_target:.2f}")
    return 0


async def _subscribe(args: argparse.Namespace) -> int:
    async with ProleClient(ProleConfig.from_env()) as client:
        result = await client.subscribe_newsletter(args.email)
    print(f"{result.outcome}: {result.message}")
    return 0 if result.ok else 1


async def _sitemap(args: argparse.Namespace) -> int:
    config = ProleConfig.from_env()
    document = generate_sitemap(base_url=config.site_url)
    if args.output:
        Path(args.output).write_text(document, encoding="utf-8")
    else:
        sys.stdout.write(document)
    return 0


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=__doc__, formatter_class=argparse.RawDescriptionHelpFormatter)
    parser.add_argument("-v", "--verbose", action="store_true", help="enable DEBUG logging")
    sub = parser.add_subparsers(dest="command", required=True)

    missions = sub.add_parser("missions", help="print the mission board")
    missions.add_argument("--status", default="all", help="scouting, greenlit, active, complete or all")
    missions.add_argument("--json", action="store_true", help="emit JSON")
    missions.set_defaults(handler=_missions)

    stats = sub.add_parser("stats", help="print mission statistics")
    stats.set_defaults(handler=_stats)

    contribute = sub.add_parser("contribute", help="add to a mission bounty")
    contribute.add_argument("adventure_id")
    contribute.add_argument("amount", type=float)
    contribute.set_defaults(handler=_contribute)

    subscribe = sub.add_parser("subscribe", help="newsletter signup")
    subscribe.add_argument("email")
    subscribe.set_defaults(handler=_subscribe)

    sitemap = sub.add_parser("sitemap", help="generate sitemap.xml")
    sitemap.add_argument("-o", "--output", help="write to this file instead of stdout")
    sitemap.set_defaults(handler=_sitemap)
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    return asyncio.run(args.handler(args))


if __name__ == "__main__":
    raise SystemExit(main())
