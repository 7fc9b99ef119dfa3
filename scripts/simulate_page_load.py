#!/usr/bin/env python
"""Simulate hosting-page requests for local testing.

This script calls a running storefront the way the static pages do on
load and on filter changes, and prints the returned views.

Usage:
    # Home page (featured products)
    python scripts/simulate_page_load.py --mode featured

    # Collection page, then a filter change
    python scripts/simulate_page_load.py --mode grid --group wanita --family floral

    # Detail page for a product id
    python scripts/simulate_page_load.py --mode detail --id 9
"""

import argparse
import asyncio
import json
import sys

import httpx


async def load_page(
    base_url: str,
    mode: str,
    product_id: str | None = None,
    group: str = "all",
    family: str = "all",
) -> tuple[int, dict]:
    """Request the initial view for a page.

    Args:
        base_url: Storefront base URL (e.g., http://localhost:8080)
        mode: View mode (grid, detail, featured)
        product_id: Product id for detail pages
        group: Initial target group selector
        family: Initial scent family selector

    Returns:
        HTTP status code and response JSON
    """
    params: dict[str, str] = {}
    if product_id is not None:
        params["id"] = product_id
    if mode == "grid":
        params["group"] = group
        params["family"] = family

    async with httpx.AsyncClient(base_url=base_url, timeout=10.0) as client:
        response = await client.get(f"/pages/{mode}", params=params)
        return response.status_code, response.json()


def summarize(mode: str, page: dict) -> list[str]:
    """Short human-readable summary of a page view."""
    lines: list[str] = []

    if page.get("not_found"):
        lines.append(f"NOT FOUND: {page['not_found']['title']}")
        return lines

    grid = page.get("grid")
    if grid:
        lines.append(f"{mode} grid: {grid['count_label']} products ({grid['state']})")
        for card in grid["cards"]:
            badge = f" [{card['badge']}]" if card["badge"] else ""
            lines.append(f"  #{card['product_id']} {card['name']}{badge} - {card['price_label']}")
        if grid["empty_message"]:
            lines.append(f"  {grid['empty_message']}")

    detail = page.get("detail")
    if detail:
        lines.append(detail["title"])
        lines.append(f"  gallery items: {len(detail['gallery']['items'])}")
        for spec in detail["specs"]:
            lines.append(f"  {spec['label']}: {spec['value']}")
        lines.append(f"  contact: {detail['contact']['url']}")
        related = page.get("related") or {}
        lines.append(f"  related: {related.get('count_label', '0')}")

    return lines


async def main() -> int:
    parser = argparse.ArgumentParser(description="Simulate storefront page loads")
    parser.add_argument("--url", default="http://localhost:8080", help="Storefront base URL")
    parser.add_argument(
        "--mode",
        choices=["grid", "detail", "featured"],
        default="featured",
        help="View mode of the simulated page",
    )
    parser.add_argument("--id", dest="product_id", help="Product id for detail mode")
    parser.add_argument("--group", default="all", help="Target group selector")
    parser.add_argument("--family", default="all", help="Scent family selector")
    parser.add_argument("--json", action="store_true", help="Print raw JSON")
    args = parser.parse_args()

    try:
        status_code, page = await load_page(
            args.url,
            args.mode,
            product_id=args.product_id,
            group=args.group,
            family=args.family,
        )
    except httpx.HTTPError as e:
        print(f"Request failed: {e}", file=sys.stderr)
        return 1

    print(f"HTTP {status_code}")
    if args.json:
        print(json.dumps(page, indent=2, ensure_ascii=False))
    else:
        print("\n".join(summarize(args.mode, page)))

    return 0 if status_code < 500 else 1


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
