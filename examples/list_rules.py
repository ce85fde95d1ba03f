#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio
import os

from itwin.validation import PropertyValidationClient, take


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="List Property Validation rules of a project")
    p.add_argument("project_id")
    p.add_argument("limit", nargs="?", type=int, default=20)
    p.add_argument("--page-size", type=int, default=10)
    p.add_argument("--by-page", action="store_true", help="Print page boundaries")
    return p.parse_args()


async def main() -> None:
    args = parse_args()
    token = os.environ["ITWIN_ACCESS_TOKEN"]

    async with PropertyValidationClient() as client:
        rules = client.rules.get_representation_list(
            project_id=args.project_id, top=args.page_size, access_token=token
        )
        print("=" * 72)
        if args.by_page:
            pages = await take(rules.by_page(), max(args.limit // args.page_size, 1))
            for index, page in enumerate(pages):
                print(f"Page {index}: {len(page)} rules")
                for rule in page:
                    print(f"  {rule.id:38} | {rule.display_name}")
        else:
            for rule in await take(rules, args.limit):
                print(f"{rule.id:38} | {rule.severity or '-':8} | {rule.display_name}")
        print("=" * 72)


if __name__ == "__main__":
    asyncio.run(main())
