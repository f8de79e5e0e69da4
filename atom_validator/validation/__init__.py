"""
Validation Framework
====================

Rule checks for Atom entries and the result structures they produce.

Components:
- base: Finding and the result tree (Leaf, Branch) with its combinators
- entry: One check per Atom construct, combined by validate_entry
- report: Flat report view over a result tree
- validator: AtomEntryValidator, the configured entry point
"""

from atom_validator.validation.base import (
    Branch,
    Finding,
    Leaf,
    ResultTree,
    ValidatorResult,
    advice,
    demand,
    flatten,
    has_demands,
    make_tree,
    valid,
)

from atom_validator.validation.entry import (
    check_author,
    check_cat,
    check_cats,
    check_content,
    check_content_link,
    check_contents,
    check_contributor,
    check_email,
    check_entry_author,
    check_id,
    check_label,
    check_links,
    check_name,
    check_person,
    check_published,
    check_rights,
    check_scheme,
    check_source,
    check_summary,
    check_term,
    check_title,
    check_updated,
    check_uri,
    validate_entry,
)

from atom_validator.validation.report import ValidationReport

from atom_validator.validation.validator import AtomEntryValidator

__all__ = [
    # Result tree
    "Branch",
    "Finding",
    "Leaf",
    "ResultTree",
    "ValidatorResult",
    "advice",
    "demand",
    "flatten",
    "has_demands",
    "make_tree",
    "valid",
    # Checks
    "validate_entry",
    "check_author",
    "check_cat",
    "check_cats",
    "check_content",
    "check_content_link",
    "check_contents",
    "check_contributor",
    "check_email",
    "check_entry_author",
    "check_id",
    "check_label",
    "check_links",
    "check_name",
    "check_person",
    "check_published",
    "check_rights",
    "check_scheme",
    "check_source",
    "check_summary",
    "check_term",
    "check_title",
    "check_updated",
    "check_uri",
    # Report and facade
    "ValidationReport",
    "AtomEntryValidator",
]
