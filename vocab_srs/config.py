import logging
from datetime import UTC, datetime
from typing import Literal

from pydantic_settings import BaseSettings


def utcnow() -> datetime:
    """Return the current UTC time as a naive datetime.

    Every timestamp in the package is naive UTC, so this is the one place
    the wall clock is read. Callers that need determinism pass ``now``
    explicitly instead.
    """
    return datetime.now(UTC).replace(tzinfo=None)


class Settings(BaseSettings):
    app_name: str = "Vocab SRS"
    debug: bool = False
    log_level: str = "INFO"
    speak_lang: Literal["en", "fr"] = "fr"
    learn_lang: Literal["en", "fr"] = "en"

    model_config = {"env_prefix": "VOCAB_SRS_", "env_file": ".env"}


settings = Settings()


def configure_logging(level: int | str | None = None) -> None:
    """Configure root logging for an application embedding the scheduler."""
    if level is None:
        level = logging.DEBUG if settings.debug else settings.log_level.upper()
    logging.basicConfig(level=level)
