"""
Invoice form validation tests.

Covers field-level messages, coercion of the amount and conversion to
minor units.
"""

from __future__ import annotations

from decimal import Decimal

import pytest

from invoice_actions.components.invoices import (
    AMOUNT_MESSAGE,
    CUSTOMER_MESSAGE,
    STATUS_MESSAGE,
    ValidationFailure,
    ValidationSuccess,
    to_minor_units,
    validate_invoice_form,
)


def _form(**overrides: object) -> dict[str, object]:
    form: dict[str, object] = {"customerId": "c1", "amount": "49.99", "status": "pending"}
    form.update(overrides)
    return form


class TestValidForms:
    def test_narrows_fields(self) -> None:
        result = validate_invoice_form(_form())

        assert isinstance(result, ValidationSuccess)
        assert result.success is True
        assert result.data.customer_id == "c1"
        assert result.data.amount == Decimal("49.99")
        assert result.data.amount_in_cents == 4999
        assert result.data.status == "pending"

    def test_paid_status_accepted(self) -> None:
        result = validate_invoice_form(_form(status="paid"))
        assert isinstance(result, ValidationSuccess)
        assert result.data.status == "paid"

    def test_numeric_amount_accepted(self) -> None:
        result = validate_invoice_form(_form(amount=10))
        assert isinstance(result, ValidationSuccess)
        assert result.data.amount_in_cents == 1000

    def test_extra_fields_ignored(self) -> None:
        result = validate_invoice_form(_form(id="forged", date="1999-01-01"))
        assert isinstance(result, ValidationSuccess)

    def test_customer_id_whitespace_stripped(self) -> None:
        result = validate_invoice_form(_form(customerId="  c1  "))
        assert isinstance(result, ValidationSuccess)
        assert result.data.customer_id == "c1"


class TestInvalidForms:
    def test_empty_customer(self) -> None:
        result = validate_invoice_form(_form(customerId=""))

        assert isinstance(result, ValidationFailure)
        assert result.success is False
        assert result.errors == {"customerId": [CUSTOMER_MESSAGE]}

    def test_missing_customer(self) -> None:
        form = _form()
        del form["customerId"]
        result = validate_invoice_form(form)

        assert isinstance(result, ValidationFailure)
        assert result.errors == {"customerId": [CUSTOMER_MESSAGE]}

    @pytest.mark.parametrize(
        "amount", ["0", "-5", "", "abc", None, "0.00", "1e20", "1e30", "92233720368547758.08"]
    )
    def test_bad_amount(self, amount: object) -> None:
        result = validate_invoice_form(_form(amount=amount))

        assert isinstance(result, ValidationFailure)
        assert result.errors == {"amount": [AMOUNT_MESSAGE]}

    def test_amount_rounding_to_zero_cents_rejected(self) -> None:
        result = validate_invoice_form(_form(amount="0.001"))

        assert isinstance(result, ValidationFailure)
        assert result.errors == {"amount": [AMOUNT_MESSAGE]}

    def test_largest_storable_amount_accepted(self) -> None:
        result = validate_invoice_form(_form(amount="92233720368547758.07"))

        assert isinstance(result, ValidationSuccess)
        assert result.data.amount_in_cents == 2**63 - 1

    @pytest.mark.parametrize("status", ["", "overdue", "PAID", None])
    def test_bad_status(self, status: object) -> None:
        result = validate_invoice_form(_form(status=status))

        assert isinstance(result, ValidationFailure)
        assert result.errors == {"status": [STATUS_MESSAGE]}

    def test_all_fields_reported_together(self) -> None:
        result = validate_invoice_form({})

        assert isinstance(result, ValidationFailure)
        assert list(result.errors) == ["customerId", "amount", "status"]
        assert result.errors["customerId"] == [CUSTOMER_MESSAGE]
        assert result.errors["amount"] == [AMOUNT_MESSAGE]
        assert result.errors["status"] == [STATUS_MESSAGE]


class TestMinorUnits:
    @pytest.mark.parametrize(
        ("amount", "expected"),
        [
            ("49.99", 4999),
            ("0.01", 1),
            ("10", 1000),
            ("1234.5", 123450),
            ("0.015", 2),
        ],
    )
    def test_conversion(self, amount: str, expected: int) -> None:
        assert to_minor_units(Decimal(amount)) == expected

    def test_custom_factor(self) -> None:
        assert to_minor_units(Decimal("1.5"), factor=1000) == 1500
