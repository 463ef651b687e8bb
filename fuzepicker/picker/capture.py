import logging
import re
from typing import Dict, Iterable, List, Optional

from fuzepicker.api.models.element import ElementCapture
from fuzepicker.picker.html_tree import SoupNode
from fuzepicker.picker.synthesizer import compute_css_selector, compute_xpath

logger = logging.getLogger(__name__)

CAPTURED_STYLES: List[str] = [
    "color",
    "backgroundColor",
    "fontSize",
    "fontFamily",
    "fontWeight",
    "padding",
    "margin",
    "border",
    "borderRadius",
    "display",
    "position",
    "width",
    "height",
    "flexDirection",
    "justifyContent",
    "alignItems",
]


def css_property_name(name: str) -> str:
    return re.sub(r"([A-Z])", lambda m: "-" + m.group(1).lower(), name)


def parse_inline_style(style: Optional[str]) -> Dict[str, str]:
    declarations: Dict[str, str] = {}
    if not style:
        return declarations
    for declaration in style.split(";"):
        if ":" not in declaration:
            continue
        prop, value = declaration.split(":", 1)
        prop = prop.strip().lower()
        value = re.sub(r"\s*!important\s*$", "", value.strip(), flags=re.IGNORECASE)
        if prop:
            declarations[prop] = value
    return declarations


def captured_styles(style: Optional[str]) -> Dict[str, str]:
    """Pick the captured properties out of an inline style attribute.

    Without a layout engine only inline declarations are known; every other
    captured property maps to "" as getPropertyValue() does for unset values.
    """
    declarations = parse_inline_style(style)
    return {name: declarations.get(css_property_name(name), "") for name in CAPTURED_STYLES}


def _attributes(node: SoupNode) -> Dict[str, str]:
    attributes: Dict[str, str] = {}
    for name, value in node.tag.attrs.items():
        if isinstance(value, list):
            value = " ".join(value)
        attributes[name] = "" if value is None else str(value)
    return attributes


def _text(node: SoupNode) -> str:
    return " ".join(node.tag.get_text(" ").split())


def capture_element(node: SoupNode) -> ElementCapture:
    attributes = _attributes(node)
    capture = ElementCapture(
        id=node.element_id,
        tag=node.tag_name.lower(),
        classes=node.class_list,
        text=_text(node),
        html=str(node.tag),
        styles=captured_styles(attributes.get("style")),
        attributes=attributes,
        bounding_box=None,
        xpath=compute_xpath(node),
        selector=compute_css_selector(node),
    )
    logger.debug(f"DEBUG: (capture_element) Captured <{capture.tag}> as '{capture.selector}'")
    return capture


def _unique(values: Iterable[str]) -> List[str]:
    seen: List[str] = []
    for value in values:
        value = value.strip().lower()
        if value and value not in seen:
            seen.append(value)
    return seen


def auto_tags(capture: ElementCapture, tags: Optional[Iterable[str]] = None) -> List[str]:
    derived = [capture.tag, *capture.classes]
    role = capture.attributes.get("role")
    if role:
        derived.append(f"role-{role}")
    return _unique([*(tags or []), *derived])
