"""
XML Utility Functions
=====================

Namespace helpers shared by the element adapters. These work with lxml
elements and keep namespace handling in one place.
"""

from typing import Any, Optional, Tuple

ATOM_NAMESPACE = "http://www.w3.org/2005/Atom"


def local_name(element: Any) -> str:
    """
    Extract local name from element tag, stripping any namespace prefix.

    Args:
        element: XML element

    Returns:
        Local tag name without namespace, or "" for comments and
        processing instructions

    Example:
        >>> elem = etree.Element("{http://www.w3.org/2005/Atom}entry")
        >>> local_name(elem)
        'entry'
    """
    tag = element.tag
    if not isinstance(tag, str):
        return ""
    return split_tag(tag)[1]


def namespace_uri(element: Any) -> Optional[str]:
    """Return the namespace URI of an element, or None if it has none."""
    tag = element.tag
    if not isinstance(tag, str):
        return None
    return split_tag(tag)[0]


def split_tag(tag: str) -> Tuple[Optional[str], str]:
    """Split a Clark-notation tag ("{ns}name") into (namespace, name)."""
    if tag.startswith("{"):
        ns, name = tag[1:].split("}", 1)
        return ns, name
    return None, tag


def is_element(node: Any) -> bool:
    """True for real elements, False for comments, PIs and entities."""
    return isinstance(node.tag, str)
