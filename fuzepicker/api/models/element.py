from typing import Dict, List, Optional

from sqlmodel import Field, SQLModel


class BoundingBox(SQLModel):
    x: float = 0
    y: float = 0
    width: float = 0
    height: float = 0
    top: float = 0
    left: float = 0
    bottom: float = 0
    right: float = 0


class ElementCapture(SQLModel):
    id: Optional[str] = Field(default=None)
    tag: str
    classes: List[str] = Field(default_factory=list)
    text: str = Field(default="")
    html: str
    styles: Dict[str, str] = Field(default_factory=dict)
    attributes: Dict[str, str] = Field(default_factory=dict)
    bounding_box: Optional[BoundingBox] = Field(default=None)
    xpath: Optional[str] = Field(default=None)
    selector: str


class SelectorRequest(SQLModel):
    html: str
    locator: str = Field(min_length=1, max_length=2000)


class SelectorResponse(SQLModel):
    xpath: Optional[str]
    css_selector: str
    tag: str
    xpath_matches: int
    css_matches: int
    xpath_unique: bool
    css_unique: bool


class CaptureRequest(SelectorRequest):
    page_url: Optional[str] = Field(default=None, max_length=2048)


class CaptureResponse(SQLModel):
    page_url: Optional[str] = None
    element: ElementCapture
    tags: List[str] = Field(default_factory=list)
