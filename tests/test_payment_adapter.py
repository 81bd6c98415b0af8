import pytest
from structlog.testing import capture_logs

from pattern_demos.payments.adapter import PaymentSystemAdapter
from pattern_demos.payments.systems import LegacyPaymentSystem


class RecordingPaymentSystem:
    def __init__(self):
        self.calls = []

    def process_payment(self, amount, currency):
        self.calls.append((amount, currency))


def test_adapter_forwards_amount_with_default_currency():
    target = RecordingPaymentSystem()
    adapter = PaymentSystemAdapter(target, "USD")

    adapter.process_payment(100)

    assert target.calls == [(100, "USD")]
    assert adapter.default_currency == "USD"


def test_target_errors_propagate():
    class Declining:
        def process_payment(self, amount, currency):
            raise RuntimeError("card declined")

    adapter = PaymentSystemAdapter(Declining(), "EUR")

    with pytest.raises(RuntimeError, match="card declined"):
        adapter.process_payment(5)


def test_perform_uses_currency_system():
    with capture_logs() as logs:
        adapter = PaymentSystemAdapter.perform(1000, "RUB")

    assert adapter.default_currency == "RUB"
    assert {
        "event": "payment_processed",
        "system": "currency",
        "amount": 1000,
        "currency": "RUB",
        "log_level": "info",
    } in logs


def test_adapter_and_legacy_system_share_call_shape():
    # Callers written for the old interface accept either one
    def checkout(system, amount):
        system.process_payment(amount)

    target = RecordingPaymentSystem()
    with capture_logs() as logs:
        checkout(LegacyPaymentSystem(), 10)
        checkout(PaymentSystemAdapter(target, "GBP"), 20)

    assert logs[0]["system"] == "legacy"
    assert target.calls == [(20, "GBP")]
