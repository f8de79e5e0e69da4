"""
Entry Validator
===============

Configured entry point that accepts lxml elements or raw XML and runs the
entry checks on them.
"""

from typing import Any, Optional, Union
import logging

from lxml import etree

from atom_validator.config.settings import ValidatorConfig
from atom_validator.validation.base import ValidatorResult
from atom_validator.validation.entry import validate_entry
from atom_validator.validation.report import ValidationReport
from atom_validator.xml.element import wrap
from atom_validator.xml.utils import local_name

logger = logging.getLogger(__name__)


class AtomEntryValidator:
    """
    Validator for Atom `entry` elements.

    Example:
        validator = AtomEntryValidator()
        tree = validator.validate_string(entry_xml)
        report = validator.report(tree)
        if not report.is_valid:
            print(report.summary())
    """

    def __init__(self, config: Optional[ValidatorConfig] = None):
        self._config = config or ValidatorConfig()

    @property
    def config(self) -> ValidatorConfig:
        return self._config

    def _namespace(self) -> Optional[str]:
        return self._config.atom_namespace if self._config.namespace_strict else None

    def validate_element(self, element: Any) -> ValidatorResult:
        """
        Validate an entry given as an lxml element or an AtomElement.

        lxml elements, including ones already wrapped in LxmlElement, are
        looked up with the configured namespace setting.

        Raises:
            TypeError: If the element type is not supported
        """
        entry = wrap(element, self._namespace())
        logger.info(f"Validating '{entry.name}' element")
        return validate_entry(entry)

    def validate_string(self, xml_string: Union[str, bytes]) -> ValidatorResult:
        """
        Parse an XML document whose root is an `entry` and validate it.

        Raises:
            etree.XMLSyntaxError: If the document is not well-formed
            ValueError: If the root element is not `entry`
        """
        if isinstance(xml_string, str):
            xml_string = xml_string.encode('utf-8')

        parser = etree.XMLParser(resolve_entities=False)
        try:
            root = etree.fromstring(xml_string, parser)
        except etree.XMLSyntaxError as e:
            logger.error(f"Failed to parse entry XML: {e}")
            raise

        if local_name(root) != "entry":
            raise ValueError(f"Expected an 'entry' element, got '{local_name(root)}'")

        return self.validate_element(root)

    def report(self, tree: ValidatorResult) -> ValidationReport:
        """Flatten a result tree into a report honoring the configuration."""
        return ValidationReport.from_tree(tree, advice_is_failure=self._config.advice_is_failure)
