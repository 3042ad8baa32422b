"""
Data quality checks for concession records.
"""
from dataquality.schemas.record import ConcessionRecord
from dataquality.validation import (
    BaseValidator,
    DataValidationService,
    ValidationExecutionError,
    ValidationOutcome,
)

__version__ = "0.1.0"

__all__ = [
    "ConcessionRecord",
    "BaseValidator",
    "DataValidationService",
    "ValidationExecutionError",
    "ValidationOutcome",
]
