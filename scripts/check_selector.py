#!/usr/bin/env python3
"""Resolve a selector against a live page and report what it matches.

Examples:
    python scripts/check_selector.py https://the-internet.herokuapp.com/tables \\
        '{"base": "#table1", "sub_selector": {"base": "tr", "has_text": "Conway"}}'
    python scripts/check_selector.py https://example.com h1 --state visible --timeout-ms 2000
"""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from dataclasses import replace
from pathlib import Path

# Ensure project root is importable
sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from webscope import EngineConfig, SelectorResolver, StateKind, WebScopeError
from webscope.browser import BrowserManager
from webscope.logger import configure_logging
from webscope.providers import PlaywrightScope


def parse_selector(raw: str) -> object:
    """JSON objects are chains; anything else is a bare query string."""
    if raw.lstrip().startswith("{"):
        return json.loads(raw)
    return raw


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("url", help="Page to open")
    parser.add_argument("selector", help="Query string or JSON chain")
    parser.add_argument(
        "--state",
        choices=[s.value for s in StateKind],
        help="State to wait for before reporting",
    )
    parser.add_argument("--expected", help="Expected text/value for has-text/has-value")
    parser.add_argument("--timeout-ms", type=int, help="Wait limit in milliseconds")
    parser.add_argument("--headed", action="store_true", help="Show the browser")
    return parser


async def check(args: argparse.Namespace, config: EngineConfig) -> int:
    resolver = SelectorResolver(config)
    options = {"state": args.state, "timeout_ms": args.timeout_ms}
    async with BrowserManager(config) as browser:
        page = await browser.get_page()
        await page.goto(args.url)
        scope = PlaywrightScope(page)
        try:
            handle = await resolver.resolve(
                scope, parse_selector(args.selector), options, expected=args.expected
            )
        except WebScopeError as exc:
            print(f"FAILED: {exc}")
            return 1
        nodes = await handle.nodes()
        print(f"Selector: {handle.describe()}")
        print(f"Matches:  {len(nodes)}")
        for i, node in enumerate(nodes[:10]):
            text = (await scope.text_of(node)).strip().replace("\n", " ")
            print(f"  [{i}] {text[:80]}")
    return 0


def main() -> None:
    args = build_parser().parse_args()
    config = EngineConfig.from_env()
    if args.headed:
        config = replace(config, headless=False)
    configure_logging(config.log_level, config.log_format)
    sys.exit(asyncio.run(check(args, config)))


if __name__ == "__main__":
    main()
