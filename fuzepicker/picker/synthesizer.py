import logging
from typing import List, Optional

from fuzepicker.picker.node import Node, SelectorResult

logger = logging.getLogger(__name__)

BODY_TAG = "body"


def _has_id(node: Node) -> bool:
    return bool(node.element_id)


def _same_tag_siblings(node: Node) -> tuple[int, bool]:
    preceding_count = 0
    for sibling in node.previous_siblings():
        if sibling.is_element and sibling.tag_name == node.tag_name:
            preceding_count += 1

    has_following = any(
        sibling.is_element and sibling.tag_name == node.tag_name
        for sibling in node.next_siblings()
    )
    return preceding_count, has_following


def _xpath_segment(node: Node) -> str:
    tag = node.tag_name.lower()
    preceding_count, has_following = _same_tag_siblings(node)
    if preceding_count or has_following:
        return f"{tag}[{preceding_count + 1}]"
    return tag


def compute_xpath(node: Node) -> Optional[str]:
    """Absolute XPath for *node*, or an id lookup when the node has an id.

    Returns None when *node* itself is not an element (e.g. a document root).
    """
    if _has_id(node):
        return f'//*[@id="{node.element_id}"]'

    segments: List[str] = []
    current: Optional[Node] = node
    while current is not None and current.is_element:
        segments.insert(0, _xpath_segment(current))
        current = current.parent

    if not segments:
        logger.debug(f"DEBUG: (compute_xpath) Not an element: {node!r}")
        return None

    xpath = "/" + "/".join(segments)
    logger.debug(f"DEBUG: (compute_xpath) {xpath}")
    return xpath


def compute_css_selector(node: Node) -> str:
    # At most one parent level; uniqueness is not guaranteed.
    if _has_id(node):
        return f"#{node.element_id}"

    selector = node.tag_name.lower()
    classes = [cls for cls in node.class_list if cls]
    if classes:
        selector += "." + ".".join(classes)

    parent = node.parent
    if parent is not None and parent.is_element and parent.tag_name.lower() != BODY_TAG:
        parent_prefix = f"#{parent.element_id}" if _has_id(parent) else parent.tag_name.lower()
        selector = f"{parent_prefix} > {selector}"

    logger.debug(f"DEBUG: (compute_css_selector) {selector}")
    return selector


def synthesize(node: Node) -> SelectorResult:
    return SelectorResult(xpath=compute_xpath(node), css_selector=compute_css_selector(node))
