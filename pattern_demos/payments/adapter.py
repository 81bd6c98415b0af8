from pattern_demos.payments.systems import CurrencyPaymentSystem, NewPaymentSystem


class PaymentSystemAdapter:
    """
    Lets callers written against OldPaymentSystem drive a NewPaymentSystem.

    The amount is passed through untouched; the currency is fixed when the
    adapter is built. Errors raised by the wrapped system propagate as-is.
    """

    def __init__(self, new_system: NewPaymentSystem, default_currency: str):
        self._new_system = new_system
        self._default_currency = default_currency

    @property
    def default_currency(self) -> str:
        return self._default_currency

    def process_payment(self, amount: float) -> None:
        self._new_system.process_payment(amount, self._default_currency)

    @classmethod
    def perform(cls, amount: float, currency: str) -> "PaymentSystemAdapter":
        """Process one payment through a fresh CurrencyPaymentSystem."""
        adapter = cls(CurrencyPaymentSystem(), currency)
        adapter.process_payment(amount)
        return adapter
