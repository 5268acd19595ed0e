"""Add-payment form: quick amounts, validation and submission.

Amounts are never capped at the invoice's due amount. Anything paid beyond it
is banked upstream as the customer's advance and applied to the next invoice.
"""
import logging
import math
import re
from typing import List, Optional

from dairy_admin.core.config import settings
from dairy_admin.core.errors import NetworkError, ServerError, ValidationFailed, message_from_body
from dairy_admin.schemas.invoice import (
    Invoice,
    PaymentCreate,
    PaymentFormInput,
    PaymentFormView,
    PaymentMethod,
    PaymentResult,
    QuickAmount,
)
from dairy_admin.services.formatters import format_currency

logger = logging.getLogger(__name__)

QUICK_AMOUNT_PRESETS = [
    ("25%", 0.25),
    ("50%", 0.50),
    ("75%", 0.75),
    ("Full", 1.00),
]

TRANSACTION_ID_HINT = (
    "Optional. Leave blank to auto-generate an id in the format {year}_{customerNo}_{sequence}."
)
SUCCESS_MESSAGE = "Payment added successfully!"
FAILURE_MESSAGE = "Failed to add payment"
INVALID_AMOUNT_MESSAGE = "Please enter a valid payment amount"

_NUMBER_PREFIX = re.compile(r"^\s*[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?")


def parse_amount(raw) -> Optional[float]:
    """Read the leading number of a typed amount, like a browser number input does."""
    if isinstance(raw, (int, float)):
        return float(raw)
    match = _NUMBER_PREFIX.match("" if raw is None else str(raw))
    if not match:
        return None
    return float(match.group(0))


def calculate_quick_amount(due_amount: float, fraction: float) -> str:
    return f"{round(due_amount * fraction, 2):.2f}"


def quick_amounts(due_amount: float) -> List[QuickAmount]:
    return [
        QuickAmount(label=label, amount=calculate_quick_amount(due_amount, fraction))
        for label, fraction in QUICK_AMOUNT_PRESETS
    ]


def is_form_valid(amount) -> bool:
    value = parse_amount(amount)
    return value is not None and math.isfinite(value) and value > 0


class PaymentForm:
    def __init__(self, invoice: Invoice, values: Optional[PaymentFormInput] = None):
        self.invoice = invoice
        self.values = values.model_copy() if values else PaymentFormInput()
        if self.values.paymentMethod == "cash":
            self.values.transactionId = ""

    @property
    def due_amount(self) -> float:
        return self.invoice.dueAmount

    @property
    def show_transaction_id(self) -> bool:
        return self.values.paymentMethod == "online"

    def apply_quick_amount(self, label: str) -> str:
        for preset_label, fraction in QUICK_AMOUNT_PRESETS:
            if preset_label == label:
                self.values.amount = calculate_quick_amount(self.due_amount, fraction)
                return self.values.amount
        raise ValueError(f"Unknown quick amount: {label}")

    def set_method(self, method: PaymentMethod) -> None:
        self.values.paymentMethod = method
        if method == "cash":
            self.values.transactionId = ""

    def is_valid(self) -> bool:
        return is_form_valid(self.values.amount)

    def payment_percentage(self) -> str:
        amount = parse_amount(self.values.amount)
        if not self.values.amount or amount is None or not self.due_amount:
            return "0"
        return f"{amount / self.due_amount * 100:.1f}"

    def advance_amount(self) -> float:
        """Portion of the entered amount that will be kept as advance."""
        amount = parse_amount(self.values.amount) or 0.0
        return round(max(0.0, amount - self.due_amount), 2)

    def build_payload(self) -> PaymentCreate:
        if not self.is_valid():
            raise ValidationFailed(INVALID_AMOUNT_MESSAGE, field="amount")

        payload = PaymentCreate(
            amount=parse_amount(self.values.amount),
            paymentMethod=self.values.paymentMethod,
            notes=self.values.notes or None,
        )
        # Blank online transaction ids are generated upstream
        if self.values.paymentMethod == "online" and self.values.transactionId:
            payload.transactionId = self.values.transactionId
        return payload

    def view(self) -> PaymentFormView:
        advance = self.advance_amount()
        return PaymentFormView(
            invoice=self.invoice,
            quickAmounts=quick_amounts(self.due_amount),
            transactionIdHint=TRANSACTION_ID_HINT,
            defaults=self.values,
            showTransactionId=self.show_transaction_id,
            paymentPercentage=self.payment_percentage(),
            advanceAmount=advance,
            totalAmountDisplay=format_currency(self.invoice.totalAmount),
            amountPaidDisplay=format_currency(self.invoice.amountPaid),
            dueAmountDisplay=format_currency(self.due_amount),
            advanceAmountDisplay=format_currency(advance),
        )

    async def submit(self, invoice_service) -> PaymentResult:
        try:
            payload = self.build_payload()
        except ValidationFailed as e:
            return PaymentResult(success=False, message=e.message)

        try:
            updated = await invoice_service.add_payment(self.invoice.id, payload)
        except ServerError as e:
            logger.error(f"Payment for invoice {self.invoice.id} rejected: {e.message}")
            return PaymentResult(success=False, message=message_from_body(e.data, FAILURE_MESSAGE))
        except NetworkError as e:
            logger.error(f"Payment for invoice {self.invoice.id} not sent: {e.message}")
            return PaymentResult(success=False, message=e.message)

        logger.info(f"Recorded {payload.paymentMethod} payment of {payload.amount} on invoice {self.invoice.id}")
        return PaymentResult(
            success=True,
            message=SUCCESS_MESSAGE,
            redirectTo=f"/invoices/view/{self.invoice.id}",
            redirectDelaySeconds=settings.PAYMENT_REDIRECT_DELAY_SECONDS,
            invoice=updated,
        )
