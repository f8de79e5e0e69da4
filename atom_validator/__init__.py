"""
Atom Entry Validator
====================

Structural validation of Atom feed `entry` elements (RFC 4287, section
4.1.2): required children, cardinality limits, attribute constraints and
cross-element rules such as "an entry without content needs an alternate
link".

Architecture
------------

    atom_validator/
    ├── validation/    - Result tree, rule checks, report, validator
    ├── xml/           - Element interface and lxml adapter
    └── config/        - Configuration management

Usage
-----

    from atom_validator import AtomEntryValidator

    validator = AtomEntryValidator()
    tree = validator.validate_string(entry_xml)
    report = validator.report(tree)
    for finding in report.findings:
        print(finding.severity, finding.message)

The checks can also be used directly on any object implementing the
element interface:

    from atom_validator import Node, validate_entry, flatten

    entry = Node("entry", children=[Node("id"), Node("title")])
    findings = flatten(validate_entry(entry))
"""

__version__ = "1.0.0"

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

from atom_validator.validation.entry import validate_entry

from atom_validator.validation.report import ValidationReport

from atom_validator.validation.validator import AtomEntryValidator

from atom_validator.xml.element import (
    AtomElement,
    LxmlElement,
    Node,
    wrap,
)

from atom_validator.config.settings import (
    ValidatorConfig,
    load_config,
    save_config,
)

__all__ = [
    # Version
    "__version__",
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
    # Validation
    "validate_entry",
    "ValidationReport",
    "AtomEntryValidator",
    # Elements
    "AtomElement",
    "LxmlElement",
    "Node",
    "wrap",
    # Config
    "ValidatorConfig",
    "load_config",
    "save_config",
]
