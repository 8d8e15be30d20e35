"""Tests for update filing validation."""

import pytest

from officer_filing_validation.application.update import UpdateValidator
from officer_filing_validation.config import ValidationConfig
from officer_filing_validation.domain.errors import ValidationError
from officer_filing_validation.domain.filing import FilingSubmission, Transaction
from officer_filing_validation.exceptions import ValidationResultSealedError
from tests.fakes import FakeCompanyDataGateway


def test_update_accepts_any_submission_without_lookups(
    fake_gateway: FakeCompanyDataGateway,
    validation_config: ValidationConfig,
    transaction: Transaction,
) -> None:
    validator = UpdateValidator(gateway=fake_gateway, config=validation_config)

    result = validator.validate(
        FilingSubmission(first_name="§§§", nationality1="Martian"),
        transaction=transaction,
        token="token-1",
    )

    assert not result.has_errors()
    assert fake_gateway.calls == []
    with pytest.raises(ValidationResultSealedError):
        result.add(ValidationError.validation("late"))
