"""
Shared fixtures and element builders for the entry validator tests.
"""

import pytest

from atom_validator.xml.element import Node


def el(name, *children, **attributes):
    """Build a Node with keyword attributes and positional children."""
    return Node(name, attributes=tuple(attributes.items()), children=children)


def repeated(name, count, **attributes):
    """`count` identical children named `name`."""
    return [el(name, **attributes) for _ in range(count)]


def alternate_link(**attributes):
    return el("link", rel="alternate", **attributes)


def person(*children):
    return el("author", *children)


def valid_entry_children():
    """Children of an entry that passes every check."""
    return [
        person(el("name")),
        el("id"),
        el("title"),
        el("updated"),
        alternate_link(href="http://example.org/1"),
    ]


def entry_with(*children, drop=()):
    """A valid entry minus the children named in `drop`, plus `children`."""
    kept = [c for c in valid_entry_children() if c.name not in drop]
    return Node("entry", children=kept + list(children))


@pytest.fixture
def valid_entry():
    """Entry that produces no findings."""
    return Node("entry", children=valid_entry_children())


@pytest.fixture
def atom_entry_xml():
    """Well-formed, valid Atom entry document."""
    return """<?xml version="1.0" encoding="utf-8"?>
<entry xmlns="http://www.w3.org/2005/Atom">
  <title>Atom-Powered Robots Run Amok</title>
  <link rel="alternate" type="text/html" hreflang="en" href="http://example.org/2003/12/13/atom03"/>
  <id>urn:uuid:1225c695-cfb8-4ebb-aaaa-80da344efa6a</id>
  <updated>2003-12-13T18:30:02Z</updated>
  <author>
    <name>John Doe</name>
    <email>johndoe@example.com</email>
  </author>
  <!-- comments are not children -->
  <summary>Some text.</summary>
</entry>
"""
