"""Validation of director detail update filings.

No update rules are enforced yet: every update filing is accepted. The
validator keeps the same construction and call shape as its siblings so
rules can be added without touching callers.
"""

from __future__ import annotations

from ..config import ValidationConfig
from ..domain.errors import ValidationResult
from ..domain.filing import FilingSubmission, Transaction
from ..observability import get_logger
from ..protocols import CompanyDataGateway

logger = get_logger("officer_filing_validation.application.update")


class UpdateValidator:
    """Always-valid validator for update filings."""

    def __init__(self, *, gateway: CompanyDataGateway, config: ValidationConfig) -> None:
        self._gateway = gateway
        self._config = config

    def validate(
        self, submission: FilingSubmission, *, transaction: Transaction, token: str
    ) -> ValidationResult:
        _ = (submission, token)
        logger.info("Update validation for transaction %s accepts all filings", transaction.id)
        return ValidationResult().seal()
