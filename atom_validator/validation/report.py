"""
Validation Report
=================

Flat view over a result tree for callers that only want counts and an
ordered list of findings.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List

from atom_validator.validation.base import Finding, ValidatorResult, flatten


@dataclass
class ValidationReport:
    """
    Flattened validation outcome.

    Attributes:
        findings: Every finding in pre-order
        advice_is_failure: Whether advice also makes the report invalid
    """
    findings: List[Finding] = field(default_factory=list)
    advice_is_failure: bool = False

    @classmethod
    def from_tree(cls, tree: ValidatorResult, advice_is_failure: bool = False) -> "ValidationReport":
        return cls(findings=flatten(tree), advice_is_failure=advice_is_failure)

    @property
    def demands(self) -> List[Finding]:
        return [f for f in self.findings if f.is_demand]

    @property
    def advices(self) -> List[Finding]:
        return [f for f in self.findings if not f.is_demand]

    @property
    def demand_count(self) -> int:
        return len(self.demands)

    @property
    def advice_count(self) -> int:
        return len(self.advices)

    @property
    def is_valid(self) -> bool:
        if self.advice_is_failure:
            return not self.findings
        return self.demand_count == 0

    def messages(self) -> List[str]:
        return [f.message for f in self.findings]

    def summary(self) -> str:
        """One-line text summary of the outcome."""
        status = "PASSED" if self.is_valid else "FAILED"
        return (
            f"Entry validation {status} - "
            f"{self.demand_count} demand(s), {self.advice_count} advice"
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            'is_valid': self.is_valid,
            'demand_count': self.demand_count,
            'advice_count': self.advice_count,
            'findings': [
                {'severity': f.severity, 'message': f.message}
                for f in self.findings
            ],
        }
