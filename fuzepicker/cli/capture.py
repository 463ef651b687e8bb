import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from playwright.async_api import Error as PlaywrightError
from playwright.async_api import async_playwright

from fuzepicker.api.config import CAPTURE_TIMEOUT_MS, get_log_level
from fuzepicker.api.models.element import CaptureResponse, ElementCapture
from fuzepicker.picker.capture import auto_tags, capture_element
from fuzepicker.picker.html_tree import parse_document
from fuzepicker.picker.live import CaptureError, capture_from_page

logger = logging.getLogger("fuzepicker.capture")


def _read_html(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text(encoding="utf-8")


def capture_from_html(html: str, locator: str) -> Optional[ElementCapture]:
    document = parse_document(html)
    node = document.find(locator)
    if node is None:
        return None
    return capture_element(node)


async def capture_from_url(url: str, locator: str, headless: bool = True) -> ElementCapture:
    async with async_playwright() as playwright:
        try:
            browser = await playwright.chromium.launch(headless=headless)
        except PlaywrightError as e:
            raise CaptureError(f"Could not launch browser: {e}") from e

        try:
            context = await browser.new_context(viewport={"width": 1280, "height": 720})
            page = await context.new_page()
            await page.goto(url, wait_until="domcontentloaded")
        except PlaywrightError as e:
            await browser.close()
            raise CaptureError(f"Could not load {url}: {e}") from e

        try:
            return await capture_from_page(page, locator, timeout=CAPTURE_TIMEOUT_MS)
        finally:
            await browser.close()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fuzepicker-capture",
        description="Capture an element's metadata, XPath and CSS selector.",
    )
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("file", nargs="?", help="HTML file to read, or - for stdin")
    source.add_argument("--url", help="Load the page in a browser and capture from the live DOM")
    parser.add_argument("--locator", required=True, help="CSS selector or XPath of the element")
    parser.add_argument("--page-url", help="Page URL recorded with the capture")
    parser.add_argument("--indent", type=int, default=2)
    parser.add_argument("--headed", action="store_true", help="Show the browser when using --url")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=get_log_level(), format="%(asctime)s - %(levelname)s - %(message)s")

    if args.url:
        try:
            element = asyncio.run(capture_from_url(args.url, args.locator, headless=not args.headed))
        except (CaptureError, PlaywrightError) as e:
            logger.error(f"Capture from {args.url} failed: {e}")
            return 1
        page_url = args.page_url or args.url
    else:
        try:
            html = _read_html(args.file)
        except OSError as e:
            logger.error(f"Could not read {args.file}: {e}")
            return 1
        element = capture_from_html(html, args.locator)
        if element is None:
            logger.error(f"Element not found for locator: {args.locator}")
            return 1
        page_url = args.page_url

    response = CaptureResponse(page_url=page_url, element=element, tags=auto_tags(element))
    print(json.dumps(response.model_dump(), indent=args.indent))
    return 0


if __name__ == "__main__":
    sys.exit(main())
