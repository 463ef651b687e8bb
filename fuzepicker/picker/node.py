from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Protocol


class Node(Protocol):
    """Read-only view of a document tree node used by the selector synthesizer.

    Anything exposing these members can be passed to the synthesizer: the
    in-memory tree below, a parsed HTML document, or a snapshot of a live page.
    """

    @property
    def is_element(self) -> bool: ...

    @property
    def tag_name(self) -> str: ...

    @property
    def element_id(self) -> Optional[str]: ...

    @property
    def class_list(self) -> List[str]: ...

    @property
    def parent(self) -> Optional["Node"]: ...

    def previous_siblings(self) -> Iterable["Node"]: ...

    def next_siblings(self) -> Iterable["Node"]: ...


@dataclass(frozen=True)
class SelectorResult:
    xpath: Optional[str]
    css_selector: str


class _TreeNode:
    def __init__(self) -> None:
        self._parent: Optional["_TreeNode"] = None
        self.children: List["ElementNode"] = []

    @property
    def parent(self) -> Optional["_TreeNode"]:
        return self._parent

    def append(self, child: "ElementNode") -> "ElementNode":
        if child._parent is not None:
            child._parent.children.remove(child)
        child._parent = self
        self.children.append(child)
        return child

    def remove(self, child: "ElementNode") -> None:
        self.children.remove(child)
        child._parent = None

    def previous_siblings(self) -> Iterator["ElementNode"]:
        if self._parent is None:
            return iter(())
        siblings = self._parent.children
        index = siblings.index(self)
        return reversed(siblings[:index])

    def next_siblings(self) -> Iterator["ElementNode"]:
        if self._parent is None:
            return iter(())
        siblings = self._parent.children
        index = siblings.index(self)
        return iter(siblings[index + 1:])


class DocumentNode(_TreeNode):
    """Root of an in-memory tree. It is not an element, so upward walks stop here."""

    is_element = False
    tag_name = "#document"
    element_id = None

    @property
    def class_list(self) -> List[str]:
        return []


class ElementNode(_TreeNode):
    is_element = True

    def __init__(
        self,
        tag_name: str,
        element_id: Optional[str] = None,
        classes: Optional[Iterable[str]] = None,
        children: Optional[Iterable["ElementNode"]] = None,
    ) -> None:
        super().__init__()
        self.tag_name = tag_name
        self.element_id = element_id
        self.classes: List[str] = list(classes or [])
        for child in children or []:
            self.append(child)

    @property
    def class_list(self) -> List[str]:
        return list(self.classes)

    def __repr__(self) -> str:
        return f"ElementNode({self.tag_name!r}, id={self.element_id!r}, classes={self.classes!r})"
