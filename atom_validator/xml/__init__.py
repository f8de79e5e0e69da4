"""
XML Element Access
==================

The read-only element interface consumed by the checks, with adapters for
lxml trees and in-memory nodes.
"""

from atom_validator.xml.element import (
    AtomElement,
    LxmlElement,
    Node,
    wrap,
)

from atom_validator.xml.utils import (
    ATOM_NAMESPACE,
    local_name,
    namespace_uri,
)

__all__ = [
    "AtomElement",
    "LxmlElement",
    "Node",
    "wrap",
    "ATOM_NAMESPACE",
    "local_name",
    "namespace_uri",
]
