from pydantic_settings import BaseSettings
from pydantic import Field
from functools import lru_cache


class Settings(BaseSettings):
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    service_name: str = Field("pattern-demos", alias="SERVICE_NAME")

    # ── Payment adapter demo ──────────────────────────────────────────────────

    # Currency the adapter attaches to amount-only payments
    default_currency: str = Field("USD", alias="DEFAULT_CURRENCY")
    demo_payment_amount: float = Field(1000.0, alias="DEMO_PAYMENT_AMOUNT")

    # ── Event broker ──────────────────────────────────────────────────────────

    demo_event_payload: str = Field("Hello, World!", alias="DEMO_EVENT_PAYLOAD")

    # When true, a failing handler is logged and the remaining handlers
    # still run. When false, the first failure aborts dispatch.
    broker_isolate_failures: bool = Field(True, alias="BROKER_ISOLATE_FAILURES")

    class Config:
        env_file = ".env"
        case_sensitive = True


@lru_cache
def get_settings() -> Settings:
    return Settings()
