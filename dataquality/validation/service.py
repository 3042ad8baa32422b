# dataquality/validation/service.py

import asyncio
import logging
from typing import Iterable, List, Tuple

from dataquality.schemas.record import ConcessionRecord

from .base import BaseValidator, ValidationOutcome


logger = logging.getLogger(__name__)


class DataValidationService:
    """
    Runs every configured rule concurrently against one record and merges
    the outcomes.

    Features:
    - Concurrent fan-out (one asyncio task per rule, started in rule order)
    - Single joined wait over all rules
    - Errors merged in rule order, independent of completion order
    - Any rule execution error aborts the whole call (no partial outcome)
    """

    def __init__(
        self,
        validators: Iterable[BaseValidator],
        name: str = "DataValidationService"
    ):
        """
        Initialize validation service.

        Args:
            validators: Rules to run, in the order their errors are reported
            name: Service name for logging and merged outcomes

        Raises:
            TypeError: If an item is not a BaseValidator
        """
        validators = tuple(validators)
        for validator in validators:
            if not isinstance(validator, BaseValidator):
                raise TypeError(
                    f"Expected BaseValidator, got {type(validator).__name__}"
                )
        self._validators: Tuple[BaseValidator, ...] = validators
        self.name = name

    @property
    def validators(self) -> Tuple[BaseValidator, ...]:
        return self._validators

    async def validate_record(self, record: ConcessionRecord) -> ValidationOutcome:
        """
        Run all rules against the record and consolidate their outcomes.

        Args:
            record: Record to validate

        Returns:
            Merged ValidationOutcome

        Raises:
            Exception: The first execution error raised by any rule. Rules
                still running at that point are cancelled.
        """
        logger.debug(
            f"{self.name}: running {len(self._validators)} rule(s) "
            f"for concession={record.concession_name!r}"
        )

        tasks = [
            asyncio.create_task(validator.validate(record), name=validator.name)
            for validator in self._validators
        ]

        try:
            outcomes: List[ValidationOutcome] = await asyncio.gather(*tasks)
        except Exception as exc:
            pending = [task for task in tasks if not task.done()]
            for task in pending:
                task.cancel()
            if pending:
                await asyncio.gather(*pending, return_exceptions=True)

            logger.error(
                f"{self.name}: rule {self._failed_rule_name(tasks, exc)} raised, "
                f"validation aborted for concession={record.concession_name!r}",
                exc_info=True
            )
            raise

        errors: List[str] = []
        for outcome in outcomes:
            if not outcome.is_valid:
                logger.debug(f"{self.name}: {outcome.summary()}")
                errors.extend(outcome.errors)

        result = ValidationOutcome(errors=tuple(errors), validator_name=self.name)

        if result.is_valid:
            logger.info(f"{self.name}: concession={record.concession_name!r} passed")
        else:
            logger.warning(
                f"{self.name}: concession={record.concession_name!r} failed "
                f"with {result.error_count} error(s)"
            )

        return result

    def validate_record_sync(self, record: ConcessionRecord) -> ValidationOutcome:
        """
        Blocking variant of validate_record for callers without an event loop.

        Raises:
            RuntimeError: If called from a running event loop
        """
        try:
            asyncio.get_running_loop()
        except RuntimeError:
            return asyncio.run(self.validate_record(record))

        # checked before the coroutine exists so nothing is left un-awaited
        raise RuntimeError(
            f"{self.name}: validate_record_sync() called from a running event loop; "
            "await validate_record() instead"
        )

    def _failed_rule_name(self, tasks: List["asyncio.Task"], exc: BaseException) -> str:
        for validator, task in zip(self._validators, tasks):
            if task.done() and not task.cancelled() and task.exception() is exc:
                return validator.name
        return "<unknown>"

    def __repr__(self) -> str:
        names = ", ".join(v.name for v in self._validators)
        return f"{self.__class__.__name__}(name={self.name!r}, validators=[{names}])"
