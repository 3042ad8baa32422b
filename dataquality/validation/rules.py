# dataquality/validation/rules.py

import re
from typing import List, Optional

from dataquality.schemas.record import ConcessionRecord

from .base import BaseValidator, ValidationOutcome


DEFAULT_MIN_SENTIMENT_SCORE = -2.0
DEFAULT_MAX_SENTIMENT_SCORE = 2.0


class CveFormatValidator(BaseValidator):
    """
    Checks the CVE number of a record.

    Rules, in order (stops at the first violation):
    1. Integrity: present and not blank
    2. Format: exactly five decimal digits
    """

    CVE_PATTERN = re.compile(r"[0-9]{5}")

    def __init__(self, name: Optional[str] = None):
        super().__init__(name)

    async def validate(self, record: ConcessionRecord) -> ValidationOutcome:
        errors: List[str] = []
        cve = record.cve_number

        if cve is None or not cve.strip():
            errors.append("CVE Number cannot be empty or null.")
        elif not self.CVE_PATTERN.fullmatch(cve):
            errors.append(
                f"CVE Number '{cve}' is not in the required 5-digit format (e.g., 12345)."
            )

        return self._outcome(errors)


class SentimentScoreValidator(BaseValidator):
    """Checks that the sentiment score lies within a closed interval."""

    def __init__(
        self,
        min_score: float = DEFAULT_MIN_SENTIMENT_SCORE,
        max_score: float = DEFAULT_MAX_SENTIMENT_SCORE,
        name: Optional[str] = None
    ):
        """
        Initialize sentiment score validator.

        Args:
            min_score: Lowest accepted score (inclusive)
            max_score: Highest accepted score (inclusive)
            name: Validator name

        Raises:
            ValueError: If min_score is greater than max_score
        """
        super().__init__(name)
        if min_score > max_score:
            raise ValueError(
                f"min_score ({min_score}) must not be greater than max_score ({max_score})"
            )
        self.min_score = min_score
        self.max_score = max_score

    async def validate(self, record: ConcessionRecord) -> ValidationOutcome:
        errors: List[str] = []
        score = record.sentiment_score

        # NaN is out of range
        if not (self.min_score <= score <= self.max_score):
            errors.append(
                f"Sentiment Score ({score}) is outside the required range of "
                f"{self.min_score} to {self.max_score}."
            )

        return self._outcome(errors)
