# dataquality/validation/base.py

from abc import ABC, abstractmethod
from typing import Any, Dict, Iterable, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, computed_field

from dataquality.schemas.record import ConcessionRecord


class ValidationOutcome(BaseModel):
    """Result of one rule, or of the whole orchestration, for one record"""
    model_config = ConfigDict(frozen=True)

    errors: Tuple[str, ...] = Field(default=(), description="Ordered rule violation messages")
    validator_name: Optional[str] = Field(None, description="Rule or service that produced it")

    @computed_field
    @property
    def is_valid(self) -> bool:
        """True iff there are no errors"""
        return len(self.errors) == 0

    @property
    def error_count(self) -> int:
        return len(self.errors)

    @classmethod
    def success(cls, name: Optional[str] = None) -> "ValidationOutcome":
        return cls(errors=(), validator_name=name)

    @classmethod
    def failure(cls, errors: Iterable[str], name: Optional[str] = None) -> "ValidationOutcome":
        return cls(errors=tuple(errors), validator_name=name)

    def summary(self) -> str:
        """Get a human-readable summary"""
        name = self.validator_name or "Validation"
        if self.is_valid:
            return f"✅ {name}: passed"
        return f"❌ {name}: {self.error_count} error(s)"

    def to_dict(self) -> Dict[str, Any]:
        """External shape: {"valid": bool, "errors": [str, ...]}"""
        return {"valid": self.is_valid, "errors": list(self.errors)}


class ValidationExecutionError(Exception):
    """
    Abnormal failure inside a rule (e.g. an unreachable lookup service).

    Not a business-rule violation: those are reported inside a
    ValidationOutcome and never raised.
    """

    def __init__(self, validator_name: str, message: str):
        super().__init__(f"{validator_name}: {message}")
        self.validator_name = validator_name


class BaseValidator(ABC):
    """
    Abstract base class for all business rules.

    A rule judges one aspect of a ConcessionRecord and reports violations
    as data in a ValidationOutcome. Instances are shared between concurrent
    calls, so they must only hold fixed configuration.
    """

    def __init__(self, name: Optional[str] = None):
        """
        Initialize validator with optional custom name.

        Args:
            name: Custom validator name (defaults to class name)
        """
        self.name = name or self.__class__.__name__

    @abstractmethod
    async def validate(self, record: ConcessionRecord) -> ValidationOutcome:
        """
        Validate the given record.

        Args:
            record: Record to check (read-only, may be shared with other rules)

        Returns:
            ValidationOutcome; empty errors means the rule passed

        Raises:
            Exception: only for execution errors, never for rule violations
        """
        pass

    def _outcome(self, errors: List[str]) -> ValidationOutcome:
        """Helper method to create validation outcomes"""
        return ValidationOutcome(errors=tuple(errors), validator_name=self.name)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r})"
