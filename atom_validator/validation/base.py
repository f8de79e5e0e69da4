"""
Result Tree
===========

Generic result structure used by every rule check. A check never raises to
report a problem; it returns a tree of findings instead:

- Leaf: an ordered tuple of payload values (empty means "nothing to report")
- Branch: payload values local to the node plus ordered child trees

Trees nest to mirror the element being checked and can always be reduced
to a flat list with `flatten`.
"""

from dataclasses import dataclass
from typing import Generic, Iterable, List, Tuple, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Finding:
    """
    One outcome of a rule evaluation.

    Attributes:
        is_demand: True for a specification violation, False for advice
        message: Human-readable description
    """
    is_demand: bool
    message: str

    @property
    def severity(self) -> str:
        return "demand" if self.is_demand else "advice"


@dataclass(frozen=True)
class Leaf(Generic[T]):
    """Terminal node holding zero or more findings."""
    findings: Tuple[T, ...] = ()


@dataclass(frozen=True)
class Branch(Generic[T]):
    """Node with local findings and nested child results."""
    findings: Tuple[T, ...] = ()
    children: Tuple["ResultTree[T]", ...] = ()


ResultTree = Union[Leaf[T], Branch[T]]

ValidatorResult = Union[Leaf[Finding], Branch[Finding]]


def advice(message: str) -> ValidatorResult:
    """Leaf carrying a single non-binding recommendation."""
    return Leaf((Finding(False, message),))


def demand(message: str) -> ValidatorResult:
    """Leaf carrying a single specification violation."""
    return Leaf((Finding(True, message),))


def valid() -> ValidatorResult:
    """Leaf with nothing to report."""
    return Leaf()


def make_tree(findings: Iterable[T], children: Iterable["ResultTree[T]"]) -> Branch[T]:
    """
    Combine local findings with nested results.

    Args:
        findings: Findings attached to this node itself
        children: Sub-results, kept in the given order

    Returns:
        Branch node
    """
    return Branch(tuple(findings), tuple(children))


def flatten(tree: "ResultTree[T]") -> List[T]:
    """
    Collect every payload value of a tree in pre-order.

    Local findings come before those of the children, and children are
    visited in order.
    """
    collected: List[T] = list(tree.findings)
    if isinstance(tree, Branch):
        for child in tree.children:
            collected.extend(flatten(child))
    return collected


def has_demands(tree: ValidatorResult) -> bool:
    """Return True if any finding in the tree is a demand."""
    return any(finding.is_demand for finding in flatten(tree))
