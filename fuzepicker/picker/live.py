import logging
from typing import Any, Dict, List, Optional

from playwright.async_api import Error as PlaywrightError
from playwright.async_api import Page

from fuzepicker.api.models.element import BoundingBox, ElementCapture
from fuzepicker.picker.capture import CAPTURED_STYLES
from fuzepicker.picker.node import DocumentNode, ElementNode
from fuzepicker.picker.synthesizer import compute_css_selector, compute_xpath

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_MS = 3000

SNAPSHOT_SCRIPT = """
(el, stylesToCapture) => {
    const computed = window.getComputedStyle(el);
    const styles = {};
    stylesToCapture.forEach(prop => {
        styles[prop] = computed.getPropertyValue(
            prop.replace(/[A-Z]/g, c => '-' + c.toLowerCase())
        );
    });

    const attributes = {};
    Array.from(el.attributes).forEach(attr => {
        attributes[attr.name] = attr.value;
    });

    const rect = el.getBoundingClientRect();

    const ancestors = [];
    let current = el;
    while (current && current.nodeType === Node.ELEMENT_NODE) {
        const parent = current.parentNode;
        const siblings = parent && parent.children ? Array.from(parent.children) : [current];
        ancestors.push({
            tag: current.tagName,
            id: current.id || null,
            classes: Array.from(current.classList),
            siblings: siblings.map(s => s.tagName),
            index: siblings.indexOf(current),
            attached: !!parent,
        });
        current = current.parentElement;
    }

    return {
        element: {
            id: el.id || null,
            tag: el.tagName.toLowerCase(),
            classes: Array.from(el.classList),
            text: (el.innerText || '').trim(),
            html: el.outerHTML,
            styles,
            attributes,
            boundingBox: {
                x: rect.x,
                y: rect.y,
                width: rect.width,
                height: rect.height,
                top: rect.top,
                left: rect.left,
                bottom: rect.bottom,
                right: rect.right,
            },
        },
        ancestors,
    };
}
"""


class CaptureError(Exception):

    pass


def tree_from_snapshot(ancestors: List[Dict[str, Any]]) -> Optional[ElementNode]:
    """Rebuild the target element from an ancestor snapshot.

    *ancestors* is ordered target first. Each level carries its own tag, id and
    classes plus the tag names of all element siblings (itself included at
    ``index``). Siblings become bare placeholder elements: the synthesizer only
    reads their tag names. Returns the node standing in for the target.
    """
    if not ancestors:
        return None

    container = None
    target: Optional[ElementNode] = None
    for level in reversed(ancestors):
        node = ElementNode(
            level.get("tag") or "",
            element_id=level.get("id") or None,
            classes=level.get("classes") or [],
        )
        siblings = level.get("siblings") or [node.tag_name]
        index = level.get("index", 0)
        if not 0 <= index < len(siblings):
            siblings, index = [node.tag_name], 0

        if container is None and level.get("attached", True):
            container = DocumentNode()

        if container is not None:
            for position, sibling_tag in enumerate(siblings):
                container.append(node if position == index else ElementNode(sibling_tag))
        container = node
        target = node

    return target


async def capture_from_page(
    page: Page,
    locator: str,
    timeout: int = DEFAULT_TIMEOUT_MS,
) -> ElementCapture:
    try:
        element_locator = page.locator(locator).first
        await element_locator.wait_for(state="attached", timeout=timeout)
        snapshot = await element_locator.evaluate(SNAPSHOT_SCRIPT, CAPTURED_STYLES)
    except PlaywrightError as e:
        logger.debug(f"DEBUG: (capture_from_page) Playwright error for '{locator}': {e}")
        raise CaptureError(f"Could not capture element for locator {locator!r}: {e}") from e

    if not isinstance(snapshot, dict) or "element" not in snapshot:
        raise CaptureError(f"Unexpected snapshot for locator {locator!r}")

    node = tree_from_snapshot(snapshot.get("ancestors") or [])
    if node is None:
        raise CaptureError(f"Empty ancestor snapshot for locator {locator!r}")

    element = snapshot["element"]
    box = element.get("boundingBox")
    capture = ElementCapture(
        id=element.get("id"),
        tag=element.get("tag") or node.tag_name.lower(),
        classes=element.get("classes") or [],
        text=" ".join((element.get("text") or "").split()),
        html=element.get("html") or "",
        styles={name: str(element.get("styles", {}).get(name, "")) for name in CAPTURED_STYLES},
        attributes={k: str(v) for k, v in (element.get("attributes") or {}).items()},
        bounding_box=BoundingBox(**box) if box else None,
        xpath=compute_xpath(node),
        selector=compute_css_selector(node),
    )
    logger.info(f"Captured <{capture.tag}> from page as '{capture.selector}'")
    return capture
