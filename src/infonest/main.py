# configure logging early so library messages use the structured format
from .logging_config import get_logger

logger = get_logger(__name__)

from .config import settings  # noqa: E402
from .wiring import create_app  # noqa: E402

app = create_app(settings)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("infonest.main:app", host=settings.server_host, port=settings.server_port)
