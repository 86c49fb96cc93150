import logging

import structlog

_configured = False


def configure_logging(level: int = logging.INFO):
    global _configured
    logging.basicConfig(level=level, format="%(message)s")
    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.JSONRenderer(),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
    )
    # uvicorn access logs are noisy in test output
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    _configured = True


def get_logger(name: str | None = None):
    if not _configured:
        configure_logging()
    return structlog.get_logger(name)
