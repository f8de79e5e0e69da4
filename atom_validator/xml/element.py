"""
Element Interface
=================

The rule checks only need three read-only lookups on an element: children
by name, attribute values by name, and all child elements. `AtomElement`
describes that capability set; `LxmlElement` provides it over an lxml tree
and `Node` provides it over plain Python values.
"""

from dataclasses import dataclass
from typing import Any, List, Optional, Protocol, Tuple, runtime_checkable

from lxml import etree

from atom_validator.xml.utils import is_element, local_name, namespace_uri


@runtime_checkable
class AtomElement(Protocol):
    """Read-only view of an element as consumed by the rule checks."""

    @property
    def name(self) -> str:
        ...

    def children_by_name(self, name: str) -> List["AtomElement"]:
        """Direct children with the given local name, in document order."""
        ...

    def attribute_values(self, name: str) -> List[str]:
        """Every value carried by attribute `name`, in order of occurrence."""
        ...

    def direct_children(self) -> List["AtomElement"]:
        """All direct child elements, in document order."""
        ...


class LxmlElement:
    """
    Adapter exposing an lxml element through the AtomElement interface.

    Children are matched on local name. Comments and processing
    instructions are never reported as children.

    Example:
        root = etree.fromstring(xml_bytes)
        entry = LxmlElement(root, namespace=ATOM_NAMESPACE)
        tree = validate_entry(entry)
    """

    def __init__(self, element: Any, namespace: Optional[str] = None):
        """
        Args:
            element: lxml element to wrap
            namespace: If given, name lookups only match children in this
                namespace or in no namespace at all
        """
        self._element = element
        self._namespace = namespace

    @property
    def element(self) -> Any:
        """The wrapped lxml element."""
        return self._element

    @property
    def name(self) -> str:
        return local_name(self._element)

    def _in_namespace(self, child: "LxmlElement") -> bool:
        if self._namespace is None:
            return True
        return namespace_uri(child.element) in (None, self._namespace)

    def direct_children(self) -> List["LxmlElement"]:
        # Foreign-namespace children (e.g. an xhtml div) are always included.
        return [
            LxmlElement(child, self._namespace)
            for child in self._element
            if is_element(child)
        ]

    def children_by_name(self, name: str) -> List["LxmlElement"]:
        return [
            child for child in self.direct_children()
            if child.name == name and self._in_namespace(child)
        ]

    def attribute_values(self, name: str) -> List[str]:
        # An XML parser cannot deliver a repeated attribute, so at most one.
        value = self._element.get(name)
        return [] if value is None else [value]

    def __repr__(self) -> str:
        return f"LxmlElement({self.name!r})"


@dataclass(frozen=True)
class Node:
    """
    In-memory element built from plain values.

    Attributes are an ordered sequence of (name, value) pairs rather than
    a mapping, so an attribute name may occur more than once.

    Example:
        entry = Node("entry", children=(
            Node("id"), Node("title"), Node("updated"),
            Node("link", attributes=(("rel", "alternate"),)),
        ))
    """
    name: str
    attributes: Tuple[Tuple[str, str], ...] = ()
    children: Tuple["Node", ...] = ()

    def __post_init__(self):
        # Accept lists for convenience but store tuples.
        object.__setattr__(self, "attributes", tuple(tuple(a) for a in self.attributes))
        object.__setattr__(self, "children", tuple(self.children))

    def children_by_name(self, name: str) -> List["Node"]:
        return [child for child in self.children if child.name == name]

    def attribute_values(self, name: str) -> List[str]:
        return [value for key, value in self.attributes if key == name]

    def direct_children(self) -> List["Node"]:
        return list(self.children)


def wrap(element: Any, namespace: Optional[str] = None) -> AtomElement:
    """
    Return an AtomElement view of `element`.

    lxml elements are wrapped in LxmlElement, and an existing LxmlElement
    is rewrapped so that `namespace` applies. Other objects satisfying the
    interface are returned unchanged.

    Raises:
        TypeError: If the object is neither
    """
    if isinstance(element, LxmlElement):
        return LxmlElement(element.element, namespace)
    if isinstance(element, AtomElement):
        return element
    if isinstance(element, etree._Element):
        return LxmlElement(element, namespace)
    raise TypeError(f"Unsupported element type: {type(element).__name__}")
