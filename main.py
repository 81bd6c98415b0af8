from pattern_demos.core.logging import setup_logging, get_logger
from pattern_demos.core.config import get_settings
from pattern_demos.core.event_broker import get_event_broker
from pattern_demos.core.singleton import SingletonObject
from pattern_demos.events.handlers import Publisher, Subscriber
from pattern_demos.payments.adapter import PaymentSystemAdapter
from pattern_demos.text.string_helper import get_character_frequency, is_palindrome

SAMPLE_WORDS = ("kayak", "Kayak", "hello", "")


def demo_singleton(logger):
    first = SingletonObject.holder().object_id
    second = SingletonObject.holder().object_id
    logger.info(
        "singleton_handles",
        first_address=first.address,
        second_address=second.address,
        same_address=first.address == second.address,
    )
    SingletonObject.holder().free()
    return first, second


def demo_events(logger):
    settings = get_settings()
    broker = get_event_broker()
    subscriber = Subscriber(broker)
    publisher = Publisher(broker)
    try:
        publisher.publish_event(settings.demo_event_payload)
    finally:
        subscriber.detach()
    logger.info("event_demo_completed", payload=settings.demo_event_payload)


def demo_payments(logger):
    settings = get_settings()
    adapter = PaymentSystemAdapter.perform(
        settings.demo_payment_amount, settings.default_currency
    )
    logger.info(
        "payment_demo_completed",
        amount=settings.demo_payment_amount,
        currency=adapter.default_currency,
    )


def demo_strings(logger):
    for word in SAMPLE_WORDS:
        logger.info(
            "string_checked",
            word=word,
            palindrome=is_palindrome(word),
            frequency=dict(get_character_frequency(word)),
        )


def main():
    setup_logging()
    logger = get_logger()
    settings = get_settings()

    logger.info("starting_demo", service=settings.service_name)

    try:
        demo_singleton(logger)
        demo_events(logger)
        demo_payments(logger)
        demo_strings(logger)
    except Exception as e:
        logger.error("demo_failed", error=str(e))
        raise

    logger.info("demo_completed")


if __name__ == "__main__":
    main()
