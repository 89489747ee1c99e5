#!/usr/bin/env python3
"""
Bookmark tree nodes.

Every node wraps an XML element; the element tree is the only state.
Node objects are rebuilt from the markup each time a directory lists
its children.
"""

import logging
import uuid
import xml.etree.ElementTree as ET
from dataclasses import dataclass
from typing import Iterator, List, Optional, Protocol, Tuple

from .errors import InvalidNodeIdError, NodeAlreadyAttachedError, UnrecognizedNodeTypeError


DIRECTORY = "directory"
BOOKMARK = "bookmark"


def xml_safe_uuid() -> str:
    """Generate a random identifier that is a valid XML tag name."""
    # Tags may not start with a digit
    return f"id-{uuid.uuid4()}"


def validate_node_id(node_id: str) -> str:
    """Return node_id if it is usable as an element tag, else raise InvalidNodeIdError."""
    try:
        tag = ET.fromstring(f"<{node_id}/>").tag
    except ET.ParseError:
        raise InvalidNodeIdError(node_id) from None
    if tag != node_id:
        raise InvalidNodeIdError(node_id)
    return node_id


class ElementAttribute:
    """Descriptor storing a node property as an attribute of its element."""

    def __init__(self, name: Optional[str] = None):
        self.name = name

    def __set_name__(self, owner, name: str):
        if self.name is None:
            self.name = name

    def __get__(self, node, owner=None):
        if node is None:
            return self
        return node.element.get(self.name, "")

    def __set__(self, node, value: str):
        node.element.set(self.name, value)


@dataclass
class Presentation:
    """How a node is shown in a tree view."""
    presentable_text: str = ""
    location_string: str = ""
    icon: Optional[str] = None


class TreeNode(Protocol):
    """Anything that can sit in the bookmark tree."""

    @property
    def id(self) -> str: ...

    @property
    def display_name(self) -> str: ...

    def children(self) -> List["TreeNode"]: ...


class Persistable(Protocol):
    """Anything whose state round-trips through an XML element."""

    def get_state(self) -> ET.Element: ...

    def load_state(self, state: ET.Element) -> None: ...


class BookmarkNode:
    """Base class for nodes backed by an XML element."""

    display_name = ElementAttribute("displayName")

    def __init__(self, element: ET.Element, parent: Optional["BookmarkDirectory"] = None):
        self.element = element
        self.parent = parent
        element.set("type", self.type())

    @property
    def id(self) -> str:
        return self.element.tag

    def type(self) -> str:
        raise NotImplementedError

    def is_always_leaf(self) -> bool:
        raise NotImplementedError

    def children(self) -> List["BookmarkNode"]:
        raise NotImplementedError

    def get_name(self) -> str:
        return self.display_name

    def update(self, presentation: Presentation):
        presentation.presentable_text = self.display_name

    def tree_path(self) -> Tuple["BookmarkNode", ...]:
        """Return the nodes from the root down to this node."""
        path = [self]
        current = self
        while current.parent is not None:
            current = current.parent
            path.append(current)
        path.reverse()
        return tuple(path)

    def __eq__(self, other):
        if not isinstance(other, BookmarkNode):
            return NotImplemented
        return self.element is other.element

    def __hash__(self):
        return id(self.element)

    def __lt__(self, other: "BookmarkNode") -> bool:
        return self.id < other.id

    def __le__(self, other: "BookmarkNode") -> bool:
        return self.id <= other.id

    def __gt__(self, other: "BookmarkNode") -> bool:
        return self.id > other.id

    def __ge__(self, other: "BookmarkNode") -> bool:
        return self.id >= other.id

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self.id!r}, display_name={self.display_name!r})"


class BookmarkDirectory(BookmarkNode):
    """A directory node; its children come from its child elements."""

    @classmethod
    def create(cls, name: str, node_id: str) -> "BookmarkDirectory":
        directory = cls(ET.Element(validate_node_id(node_id)))
        directory.display_name = name
        return directory

    def type(self) -> str:
        return DIRECTORY

    def is_always_leaf(self) -> bool:
        return False

    def children(self) -> List[BookmarkNode]:
        return [node_from_element(child, parent=self) for child in self.element]

    def walk(self, depth: int = 1) -> Iterator[Tuple[int, BookmarkNode]]:
        """Yield (depth, node) for every node below this one, in pre-order."""
        for child in self.children():
            yield depth, child
            if isinstance(child, BookmarkDirectory):
                yield from child.walk(depth + 1)

    def update(self, presentation: Presentation):
        super().update(presentation)
        presentation.icon = "folder"

    def add_node(self, node: BookmarkNode):
        if node.parent is not None or any(child is node.element for child in self.element):
            raise NodeAlreadyAttachedError(f"'{node.id}' is already in a directory")
        self.element.append(node.element)
        node.parent = self

    def remove_node(self, node: BookmarkNode):
        """Remove the first child element tagged with the node's id."""
        child = next((c for c in self.element if c.tag == node.id), None)
        if child is None:
            logging.warning(f"No child '{node.id}' under '{self.id}' to remove")
            return
        self.element.remove(child)
        if child is node.element:
            node.parent = None


class Bookmark(BookmarkNode):
    """A leaf node pointing at a URL."""

    url = ElementAttribute()

    @classmethod
    def create(cls, name: str, url: str) -> "Bookmark":
        bookmark = cls(ET.Element(xml_safe_uuid()))
        bookmark.display_name = name
        bookmark.url = url
        return bookmark

    def type(self) -> str:
        return BOOKMARK

    def is_always_leaf(self) -> bool:
        return True

    def children(self) -> List[BookmarkNode]:
        return []

    def update(self, presentation: Presentation):
        super().update(presentation)
        presentation.location_string = self.url
        presentation.icon = "web"


NODE_TYPES = {
    DIRECTORY: BookmarkDirectory,
    BOOKMARK: Bookmark,
}


def node_from_element(element: ET.Element, parent: Optional[BookmarkDirectory] = None) -> BookmarkNode:
    """Build the node object matching the element's ``type`` attribute."""
    node_type = element.get("type")
    node_class = NODE_TYPES.get(node_type)
    if node_class is None:
        raise UnrecognizedNodeTypeError(str(node_type))
    return node_class(element, parent=parent)
