from fuzepicker.picker.node import DocumentNode, ElementNode, Node, SelectorResult
from fuzepicker.picker.synthesizer import compute_css_selector, compute_xpath, synthesize

__all__ = [
    "DocumentNode",
    "ElementNode",
    "Node",
    "SelectorResult",
    "compute_css_selector",
    "compute_xpath",
    "synthesize",
]
