"""
Atom Entry Checks
=================

Structural rules for an Atom `entry` element (RFC 4287, section 4.1.2).

Every check takes an element satisfying `AtomElement` and returns a result
tree. Checks never raise for invalid input; problems are reported as
demand findings and recommendations as advice findings. `validate_entry`
runs every entry-level check and combines them into one tree.
"""

from collections import Counter
from typing import List, Optional
import logging

from atom_validator.validation.base import (
    ValidatorResult,
    advice,
    demand,
    flatten,
    make_tree,
    valid,
)
from atom_validator.xml.element import AtomElement

logger = logging.getLogger(__name__)


# =============================================================================
# Shared cardinality helpers
# =============================================================================

def _exactly_one(count: int, missing: str, too_many: str) -> ValidatorResult:
    if count == 0:
        return demand(missing)
    if count == 1:
        return valid()
    return demand(f"{too_many}, found: {count}")


def _at_most_one(count: int, too_many: str) -> ValidatorResult:
    if count <= 1:
        return valid()
    return demand(f"{too_many}, found: {count}")


def _required_field(element: AtomElement, name: str, parent: str = "entry") -> ValidatorResult:
    return _exactly_one(
        len(element.children_by_name(name)),
        f"required field '{name}' missing from '{parent}' element",
        f"only one '{name}' field expected in '{parent}' element",
    )


def _optional_field(element: AtomElement, name: str) -> ValidatorResult:
    return _at_most_one(
        len(element.children_by_name(name)),
        f"expected at most one '{name}' field in 'entry' element",
    )


def _optional_attribute(element: AtomElement, name: str) -> ValidatorResult:
    return _at_most_one(
        len(element.attribute_values(name)),
        f"Expected at most one '{name}' attribute",
    )


def _first_attribute(element: AtomElement, name: str) -> Optional[str]:
    values = element.attribute_values(name)
    return values[0] if values else None


def _is_alternate_link(link: AtomElement) -> bool:
    return _first_attribute(link, "rel") == "alternate"


# =============================================================================
# Entry
# =============================================================================

def validate_entry(entry: AtomElement) -> ValidatorResult:
    """
    Validate an Atom entry element.

    All checks run independently, so one call reports every defect.

    Args:
        entry: The `entry` element

    Returns:
        Branch with one child per entry-level rule
    """
    tree = make_tree([], [
        check_entry_author(entry),
        check_cats(entry),
        check_contents(entry),
        check_contributor(entry),
        check_id(entry),
        check_content_link(entry),
        check_links(entry),
        check_published(entry),
        check_rights(entry),
        check_source(entry),
        check_summary(entry),
        check_title(entry),
        check_updated(entry),
    ])

    findings = flatten(tree)
    demands = sum(1 for f in findings if f.is_demand)
    logger.debug(f"Validated entry: {demands} demand(s), {len(findings) - demands} advice")
    return tree


def check_entry_author(entry: AtomElement) -> ValidatorResult:
    """
    An entry needs at least one `author`.

    Without a direct author, an `author` nested inside the entry's
    `summary` is accepted in its place and validated instead.
    """
    authors = entry.children_by_name("author")
    if authors:
        return make_tree([], [check_author(a) for a in authors])

    summaries = entry.children_by_name("summary")
    if not summaries:
        return demand("Required 'author' element missing (no 'summary' either)")

    nested = summaries[0].children_by_name("author")
    if nested:
        return check_author(nested[0])
    return demand("Required 'author' element missing")


def check_cats(entry: AtomElement) -> ValidatorResult:
    return make_tree([], [check_cat(c) for c in entry.children_by_name("category")])


def check_contents(entry: AtomElement) -> ValidatorResult:
    """
    At most one `content` element.

    Each content element is still validated when there are too many.
    """
    contents = entry.children_by_name("content")
    if not contents:
        return valid()
    if len(contents) == 1:
        return make_tree([], [check_content(contents[0])])

    too_many = demand(
        f"at most one 'content' element expected inside 'entry', found: {len(contents)}"
    )
    return make_tree(flatten(too_many), [check_content(c) for c in contents])


def check_contributor(entry: AtomElement) -> ValidatorResult:
    """No rules are enforced for `contributor` yet; always valid."""
    return valid()


def check_content_link(entry: AtomElement) -> ValidatorResult:
    """An entry without `content` must have a link with rel="alternate"."""
    if entry.children_by_name("content"):
        return valid()

    if any(_is_alternate_link(link) for link in entry.children_by_name("link")):
        return valid()
    return demand(
        "An 'entry' element with no 'content' element must have at least one 'link-rel' element"
    )


def check_links(entry: AtomElement) -> ValidatorResult:
    """
    Alternate links must not repeat the same (type, hreflang) pair.

    Links missing either attribute take no part in the comparison.
    """
    pairs = []
    for link in entry.children_by_name("link"):
        if not _is_alternate_link(link):
            continue
        link_type = _first_attribute(link, "type")
        hreflang = _first_attribute(link, "hreflang")
        if link_type is not None and hreflang is not None:
            pairs.append((link_type, hreflang))

    if any(count > 1 for count in Counter(pairs).values()):
        return demand(
            "An 'entry' element cannot have duplicate 'link-rel-alternate-type-hreflang' elements"
        )
    return valid()


def check_id(entry: AtomElement) -> ValidatorResult:
    return _required_field(entry, "id")


def check_published(entry: AtomElement) -> ValidatorResult:
    return _optional_field(entry, "published")


def check_rights(entry: AtomElement) -> ValidatorResult:
    return _optional_field(entry, "rights")


def check_source(entry: AtomElement) -> ValidatorResult:
    return _optional_field(entry, "source")


def check_summary(entry: AtomElement) -> ValidatorResult:
    return _optional_field(entry, "summary")


def check_title(entry: AtomElement) -> ValidatorResult:
    return _required_field(entry, "title")


def check_updated(entry: AtomElement) -> ValidatorResult:
    return _required_field(entry, "updated")


# =============================================================================
# Category
# =============================================================================

def check_cat(category: AtomElement) -> ValidatorResult:
    return make_tree([], [
        check_term(category),
        check_scheme(category),
        check_label(category),
    ])


def check_term(category: AtomElement) -> ValidatorResult:
    return _required_field(category, "term", parent="category")


def check_scheme(category: AtomElement) -> ValidatorResult:
    return _optional_attribute(category, "scheme")


def check_label(category: AtomElement) -> ValidatorResult:
    return _optional_attribute(category, "label")


# =============================================================================
# Content
# =============================================================================

def check_content(content: AtomElement) -> ValidatorResult:
    """
    Validate a `content` element.

    The `type` and `src` attribute findings are kept on this node; the
    child-element rule for the resolved type is the only child. The type
    value itself is not checked as a MIME type.
    """
    types = content.attribute_values("type")
    if not types:
        content_type, type_result = "text", valid()
    elif len(types) == 1:
        content_type, type_result = types[0], valid()
    else:
        content_type = types[0]
        type_result = demand(f"Expected at most one 'type' attribute, found: {len(types)}")

    sources = content.attribute_values("src")
    if not sources:
        src_result = valid()
    elif len(sources) == 1:
        if types:
            src_result = valid()
        else:
            src_result = advice("It is advisable to provide a 'type' along with a 'src' attribute")
    else:
        src_result = demand(f"Expected at most one 'src' attribute, found: {len(sources)}")

    local = flatten(make_tree([], [type_result, src_result]))
    return make_tree(local, [_check_content_body(content, content_type)])


def _check_content_body(content: AtomElement, content_type: str) -> ValidatorResult:
    children = content.direct_children()

    if content_type in ("text", "html"):
        if children:
            return demand(
                f"content with type '{content_type}' cannot have child elements, text only."
            )
        return valid()

    if content_type == "xhtml":
        # TODO: require the single child to be an xhtml 'div'.
        if len(children) > 1:
            return demand("content with type 'xhtml' should only contain one 'div' child.")
        return valid()

    return valid()


# =============================================================================
# Person constructs (author, contributor)
# =============================================================================

def check_author(author: AtomElement) -> ValidatorResult:
    return check_person(author)


def check_person(person: AtomElement) -> ValidatorResult:
    """Name findings stay on this node; email and uri are children."""
    return make_tree(flatten(check_name(person)), [check_email(person), check_uri(person)])


def check_name(person: AtomElement) -> ValidatorResult:
    return _exactly_one(
        len(person.children_by_name("name")),
        "required field 'name' missing from 'author' element",
        "only one 'name' expected in 'author' element",
    )


def check_email(person: AtomElement) -> ValidatorResult:
    return _at_most_one(
        len(person.children_by_name("email")),
        "at most one 'email' expected in 'author' element",
    )


def check_uri(person: AtomElement) -> ValidatorResult:
    """
    At most one `uri` per person.

    Known defect: this counts `email` children, not `uri` children, so it
    reports the same count as `check_email` under a 'uri' message. The
    behaviour is kept as-is until the rule set is corrected.
    """
    return _at_most_one(
        len(person.children_by_name("email")),
        "at most one 'uri' expected in 'author' element",
    )


__all__: List[str] = [
    "validate_entry",
    "check_entry_author",
    "check_cats",
    "check_contents",
    "check_contributor",
    "check_content_link",
    "check_links",
    "check_id",
    "check_published",
    "check_rights",
    "check_source",
    "check_summary",
    "check_title",
    "check_updated",
    "check_cat",
    "check_term",
    "check_scheme",
    "check_label",
    "check_content",
    "check_author",
    "check_person",
    "check_name",
    "check_email",
    "check_uri",
]
