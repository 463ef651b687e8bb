from fuzepicker.api.services.selector_service import (
    build_capture_response,
    build_selector_response,
    get_node_or_404,
    validate_html,
)

__all__ = [
    "build_capture_response",
    "build_selector_response",
    "get_node_or_404",
    "validate_html",
]
