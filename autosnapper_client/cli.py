#!/usr/bin/env python3
import argparse
import asyncio
import base64
import logging
import sys
from pathlib import Path
from typing import List, Optional

from autosnapper_client.api import ScreenshotApi
from autosnapper_client.client import ScreenshotClient, format_history, validate
from autosnapper_client.config import get_backend_url


def _make_client(args: argparse.Namespace) -> ScreenshotClient:
    return ScreenshotClient(api=ScreenshotApi(base_url=args.server))


def cmd_validate(args: argparse.Namespace) -> int:
    if validate(args.url):
        print(f"{args.url} is a valid URL")
        return 0
    print("Please enter a valid URL", file=sys.stderr)
    return 1


async def _capture(args: argparse.Namespace) -> int:
    client = _make_client(args)
    client.set_url(args.url)
    if not client.can_submit:
        print("Please enter a valid URL", file=sys.stderr)
        return 1

    result = await client.capture()
    if result is None:
        print(client.error_message, file=sys.stderr)
        return 1

    out = Path(args.output)
    out.write_bytes(client.screenshot_bytes())
    source = "cache" if result.cached else "a fresh capture"
    print(f"Saved screenshot of {args.url} to {out} (served from {source})")

    if not args.no_history:
        if client.history_refresh_pending:
            await client.wait_for_history_refresh()
        else:
            await client.load_history()
        print(format_history(client.history))
    return 0


def cmd_capture(args: argparse.Namespace) -> int:
    return asyncio.run(_capture(args))


async def _history(args: argparse.Namespace) -> int:
    client = _make_client(args)
    entries = await client.load_history()
    print(format_history(entries))
    if args.save_dir and entries:
        target = Path(args.save_dir)
        target.mkdir(parents=True, exist_ok=True)
        for i, entry in enumerate(entries, 1):
            path = target / f"history_{i:03d}.png"
            try:
                path.write_bytes(base64.b64decode(entry.image_data, validate=True))
            except ValueError:
                print(f"Skipping {entry.url}: image data is not valid base64", file=sys.stderr)
                continue
            print(f"Saved {entry.url} to {path}")
    return 0


def cmd_history(args: argparse.Namespace) -> int:
    return asyncio.run(_history(args))


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="autosnapper", description="autosnapper - capture web page screenshots")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = p.add_subparsers(dest="sub")

    p_val = sub.add_parser("validate", help="Check that a URL can be captured")
    p_val.add_argument("url", help="URL to check")
    p_val.set_defaults(func=cmd_validate)

    p_cap = sub.add_parser("capture", help="Capture a screenshot of a URL")
    p_cap.add_argument("url", help="http(s) URL to capture")
    p_cap.add_argument("-o", "--output", default="screenshot.png", help="Output PNG path")
    p_cap.add_argument("--server", default=get_backend_url(), help="AutoSnapper API host")
    p_cap.add_argument("--no-history", action="store_true", help="Do not print history afterwards")
    p_cap.set_defaults(func=cmd_capture)

    p_hist = sub.add_parser("history", help="List previous captures")
    p_hist.add_argument("--server", default=get_backend_url(), help="AutoSnapper API host")
    p_hist.add_argument("--save-dir", help="Write each history image into this directory")
    p_hist.set_defaults(func=cmd_history)
    return p


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    if not getattr(args, "func", None):
        parser.print_help()
        return 1
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
