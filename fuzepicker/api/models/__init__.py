from fuzepicker.api.models.element import (
    BoundingBox,
    CaptureRequest,
    CaptureResponse,
    ElementCapture,
    SelectorRequest,
    SelectorResponse,
)

__all__ = [
    "BoundingBox",
    "CaptureRequest",
    "CaptureResponse",
    "ElementCapture",
    "SelectorRequest",
    "SelectorResponse",
]
