"""
Validator and Report Tests

Run with: pytest tests/test_validator.py -v
"""

import logging

import pytest
from lxml import etree

from atom_validator.config.settings import ValidatorConfig
from atom_validator.validation.base import advice, demand, make_tree, valid
from atom_validator.validation.report import ValidationReport
from atom_validator.validation.validator import AtomEntryValidator
from atom_validator.xml.element import LxmlElement, Node

from conftest import el


@pytest.fixture
def validator():
    return AtomEntryValidator()


class TestValidateString:
    """Tests for AtomEntryValidator.validate_string."""

    def test_valid_entry(self, validator, atom_entry_xml):
        """A valid document yields a passing report."""
        report = validator.report(validator.validate_string(atom_entry_xml))
        assert report.is_valid
        assert report.findings == []

    def test_accepts_bytes(self, validator):
        """Bytes input is parsed as-is."""
        tree = validator.validate_string(b"<entry/>")
        assert validator.report(tree).demand_count == 5

    def test_non_entry_root(self, validator):
        """Only entry documents are accepted."""
        with pytest.raises(ValueError, match="Expected an 'entry' element"):
            validator.validate_string("<feed/>")

    def test_malformed_xml_propagates(self, validator, caplog):
        """Syntax errors are logged and re-raised."""
        with caplog.at_level(logging.ERROR, logger="atom_validator"):
            with pytest.raises(etree.XMLSyntaxError):
                validator.validate_string("<entry>")
        assert "Failed to parse entry XML" in caplog.text

    def test_strict_namespace_ignores_foreign_children(self):
        """With namespace_strict, foreign-namespace ids are not counted."""
        xml = (
            '<entry xmlns="http://www.w3.org/2005/Atom" xmlns:x="urn:other">'
            '<id/><x:id/></entry>'
        )
        lenient = AtomEntryValidator().validate_string(xml)
        strict = AtomEntryValidator(ValidatorConfig(namespace_strict=True)).validate_string(xml)

        assert "only one 'id' field expected in 'entry' element, found: 2" in (
            AtomEntryValidator().report(lenient).messages()
        )
        assert not any("'id'" in m for m in AtomEntryValidator().report(strict).messages())


class TestValidateElement:
    """Tests for AtomEntryValidator.validate_element."""

    def test_node_input(self, validator, valid_entry):
        """In-memory nodes are validated directly."""
        assert validator.report(validator.validate_element(valid_entry)).is_valid

    def test_unsupported_input(self, validator):
        """Unsupported objects raise TypeError."""
        with pytest.raises(TypeError):
            validator.validate_element("<entry/>")

    def test_lowercase_log_level_accepted(self):
        """A lowercase level in a directly built config does not break the validator."""
        config = ValidatorConfig(log_level="debug")
        validator = AtomEntryValidator(config)
        assert validator.config.log_level == "DEBUG"

    def test_constructor_leaves_logger_alone(self):
        """Creating a validator does not change the package logger level."""
        package_logger = logging.getLogger("atom_validator")
        before = package_logger.level
        AtomEntryValidator(ValidatorConfig(log_level="ERROR"))
        assert package_logger.level == before

    def test_strict_namespace_applies_to_wrapped_element(self):
        """An LxmlElement wrapped without a namespace is looked up strictly."""
        root = etree.fromstring(
            b'<entry xmlns="http://www.w3.org/2005/Atom" xmlns:x="urn:other">'
            b'<id/><x:id/></entry>'
        )
        strict = AtomEntryValidator(ValidatorConfig(namespace_strict=True))
        messages = strict.report(strict.validate_element(LxmlElement(root))).messages()
        assert not any("'id'" in m for m in messages)


class TestValidationReport:
    """Tests for ValidationReport."""

    def test_counts(self):
        """Demands and advice are counted separately, in order."""
        tree = make_tree([], [demand("d1"), advice("a1"), make_tree([], [demand("d2")])])
        report = ValidationReport.from_tree(tree)
        assert report.demand_count == 2
        assert report.advice_count == 1
        assert report.messages() == ["d1", "a1", "d2"]
        assert not report.is_valid

    def test_advice_only_is_valid(self):
        """Advice alone does not fail a report by default."""
        assert ValidationReport.from_tree(advice("a")).is_valid

    def test_advice_is_failure(self):
        """Advice fails the report when configured to."""
        assert not ValidationReport.from_tree(advice("a"), advice_is_failure=True).is_valid
        assert ValidationReport.from_tree(valid(), advice_is_failure=True).is_valid

    def test_validator_honors_advice_setting(self):
        """The validator's report uses the configured advice policy."""
        strict = AtomEntryValidator(ValidatorConfig(advice_is_failure=True))
        entry = Node("entry", children=[
            el("author", el("name")), el("id"), el("title"), el("updated"),
            el("content", src="http://example.org/a"),
        ])
        report = strict.report(strict.validate_element(entry))
        assert report.demand_count == 0
        assert report.advice_count == 1
        assert not report.is_valid

    def test_summary(self):
        """Summary states outcome and counts."""
        report = ValidationReport.from_tree(make_tree([], [demand("d"), advice("a")]))
        assert report.summary() == "Entry validation FAILED - 1 demand(s), 1 advice"

    def test_to_dict(self):
        """Dictionary form lists findings with severity."""
        report = ValidationReport.from_tree(make_tree([], [advice("a")]))
        assert report.to_dict() == {
            'is_valid': True,
            'demand_count': 0,
            'advice_count': 1,
            'findings': [{'severity': 'advice', 'message': 'a'}],
        }
