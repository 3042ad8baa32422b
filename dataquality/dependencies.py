"""
Composition root

Builds the rule collection and the validation service from settings, and
configures logging for the process.
"""
import logging
from functools import lru_cache
from typing import List, Optional

from dataquality.config import Settings, get_settings
from dataquality.utils.logger import setup_logging
from dataquality.validation import (
    BaseValidator,
    CveFormatValidator,
    DataValidationService,
    SentimentScoreValidator,
)


logger = logging.getLogger(__name__)


def configure_logging(settings: Optional[Settings] = None) -> None:
    """
    Set up logging from settings (environment, log_dir, app_name).

    Call once at process start, before the first validation.
    """
    if settings is None:
        settings = get_settings()

    setup_logging(
        environment=settings.environment,
        log_dir=settings.log_dir,
        app_name=settings.app_name
    )


def create_default_validators(settings: Optional[Settings] = None) -> List[BaseValidator]:
    """
    Default rule collection, in reporting order.

    Args:
        settings: Settings to read rule configuration from (None uses get_settings())

    Returns:
        List[BaseValidator]: CVE format rule, then sentiment score rule
    """
    if settings is None:
        settings = get_settings()

    return [
        CveFormatValidator(),
        SentimentScoreValidator(
            min_score=settings.sentiment_min_score,
            max_score=settings.sentiment_max_score
        ),
    ]


@lru_cache()
def get_validation_service() -> DataValidationService:
    """
    DataValidationService singleton with the default rules

    Returns:
        DataValidationService
    """
    service = DataValidationService(create_default_validators())
    logger.info(f"Validation service created: {service!r}")
    return service
