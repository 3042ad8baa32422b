# dataquality/validation/__init__.py

"""
Record validation framework

Business rules implement BaseValidator; DataValidationService runs an
ordered collection of them concurrently and merges their outcomes.
"""

from .base import BaseValidator, ValidationExecutionError, ValidationOutcome
from .rules import CveFormatValidator, SentimentScoreValidator
from .service import DataValidationService

__all__ = [
    "BaseValidator",
    "ValidationOutcome",
    "ValidationExecutionError",
    "DataValidationService",
    "CveFormatValidator",
    "SentimentScoreValidator",
]
