#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio
import logging
import os

from b24.client import Bitrix, Method


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Fetch every entry of a listable method")
    p.add_argument("method", nargs="?", default=Method.DEAL_LIST.value)
    p.add_argument("--webhook", default=os.environ.get("B24_WEBHOOK_URL"))
    p.add_argument("--start", type=int, default=0)
    p.add_argument("--select", nargs="*", default=["ID", "TITLE"])
    p.add_argument("--verbose", action="store_true")
    return p.parse_args()


async def main() -> None:
    args = parse_args()
    if not args.webhook:
        raise SystemExit("Pass --webhook or set B24_WEBHOOK_URL")
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    async with Bitrix(args.webhook) as b24:
        payload = await b24.list(args.method, {"select": args.select, "start": args.start})

    print("=" * 65)
    print(f"Method     : {args.method}")
    print(f"Total      : {payload.total}")
    print(f"Fetched    : {len(payload.result)}")
    if payload.error.strip():
        print(f"Errors     : {payload.error.strip()}")
    print("=" * 65)
    for entry in payload.result[:20]:
        print(entry)
    if len(payload.result) > 20:
        print(f"... {len(payload.result) - 20} more")


if __name__ == "__main__":
    asyncio.run(main())
