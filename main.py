import argparse
import asyncio
import json
import logging
import sys

import pandas as pd

import config
from dex_clients.errors import TagFetchError
from tags.honeyswap import return_tags
from tags.transform import Tag

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(levelname)s - %(message)s",
)

TAG_COLUMNS = [
    "Contract Address",
    "Public Name Tag",
    "Project Name",
    "UI/Website Link",
    "Public Note",
]


def render_tags(tags: list[Tag], fmt: str) -> str:
    """Serialize tags as a JSON list or a CSV table."""
    rows = [tag.to_dict() for tag in tags]
    if fmt == "csv":
        return pd.DataFrame(rows, columns=TAG_COLUMNS).to_csv(index=False)
    return json.dumps(rows, indent=2, ensure_ascii=False) + "\n"


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Export Honeyswap pool address tags")
    parser.add_argument("--chain-id", default=config.SUPPORTED_CHAIN_ID, help="Chain id to tag")
    parser.add_argument(
        "--api-key",
        default=config.THEGRAPH_API_KEY,
        help="The Graph gateway API key (defaults to THEGRAPH_API_KEY)",
    )
    parser.add_argument("--format", choices=["json", "csv"], default="json")
    parser.add_argument("--output", help="Write to this file instead of stdout")
    return parser.parse_args(argv)


async def run(args: argparse.Namespace) -> int:
    if not args.api_key:
        logging.error("Missing The Graph API key (--api-key or THEGRAPH_API_KEY)")
        return 1
    try:
        tags = await return_tags(args.chain_id, args.api_key)
    except TagFetchError as exc:
        logging.error("Tag export failed: %s", exc)
        return 1

    output = render_tags(tags, args.format)
    if args.output:
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(output)
        logging.info("Wrote %d tags to %s", len(tags), args.output)
    else:
        sys.stdout.write(output)
    return 0


def main(argv: list[str] | None = None) -> int:
    return asyncio.run(run(parse_args(argv)))


if __name__ == "__main__":
    sys.exit(main())
