import logging
from typing import Optional

from fastapi import HTTPException, status

from fuzepicker.api.config import MAX_HTML_BYTES
from fuzepicker.api.models.element import CaptureResponse, SelectorResponse
from fuzepicker.picker.capture import auto_tags, capture_element
from fuzepicker.picker.html_tree import HtmlDocument, SoupNode, parse_document

logger = logging.getLogger(__name__)


def validate_html(html: str) -> None:
    if not html or not html.strip():
        logger.warning("Rejected request with empty HTML")
        raise HTTPException(
            status_code=422,
            detail="HTML document must not be empty",
        )

    size = len(html.encode("utf-8"))
    if size > MAX_HTML_BYTES:
        logger.warning(f"Rejected HTML document of {size} bytes (limit {MAX_HTML_BYTES})")
        raise HTTPException(
            status_code=413,
            detail=f"HTML document exceeds {MAX_HTML_BYTES} bytes",
        )


def get_node_or_404(document: HtmlDocument, locator: str) -> SoupNode:
    node = document.find(locator)
    if node is None:
        logger.warning(f"Element not found for locator: {locator}")
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Element not found",
        )
    return node


def load_node(html: str, locator: str) -> tuple[HtmlDocument, SoupNode]:
    validate_html(html)
    document = parse_document(html)
    return document, get_node_or_404(document, locator)


def build_selector_response(html: str, locator: str) -> SelectorResponse:
    document, node = load_node(html, locator)
    check = document.verify(node)

    logger.info(f"Selectors for '{locator}': xpath={check.xpath} css={check.css_selector}")
    return SelectorResponse(
        xpath=check.xpath,
        css_selector=check.css_selector,
        tag=node.tag_name.lower(),
        xpath_matches=check.xpath_matches,
        css_matches=check.css_matches,
        xpath_unique=check.xpath_unique,
        css_unique=check.css_unique,
    )


def build_capture_response(html: str, locator: str, page_url: Optional[str] = None) -> CaptureResponse:
    _, node = load_node(html, locator)
    element = capture_element(node)

    logger.info(f"Captured <{element.tag}> for '{locator}' on {page_url or 'unknown page'}")
    return CaptureResponse(
        page_url=page_url,
        element=element,
        tags=auto_tags(element),
    )
