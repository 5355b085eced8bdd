"""Run the gateway with uvicorn: ``python -m astrovogue``."""

import uvicorn

from astrovogue.config.settings import settings
from astrovogue.core.logging import get_logger, setup_logging

logger = get_logger(__name__)


def main() -> None:
    setup_logging(settings.log_level)
    logger.info(f"Starting AstroVogue gateway on http://{settings.host}:{settings.port}")
    uvicorn.run(
        "astrovogue.api.app:app",
        host=settings.host,
        port=settings.port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
