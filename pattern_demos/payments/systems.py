from typing import Protocol

from pattern_demos.core.logging import get_logger

logger = get_logger()


class OldPaymentSystem(Protocol):
    def process_payment(self, amount: float) -> None: ...


class NewPaymentSystem(Protocol):
    def process_payment(self, amount: float, currency: str) -> None: ...


class LegacyPaymentSystem:
    """Amount-only processor; currency is implied by the deployment."""

    def process_payment(self, amount: float) -> None:
        logger.info("payment_processed", system="legacy", amount=amount)


class CurrencyPaymentSystem:
    def process_payment(self, amount: float, currency: str) -> None:
        logger.info("payment_processed", system="currency", amount=amount, currency=currency)
