import logging
import sys

import uvicorn
from dotenv import load_dotenv

from complaint_assistant.core.errors import ConfigError
from complaint_assistant.core.log import configure_logging
from complaint_assistant.core.settings import load_settings
from complaint_assistant.main import create_app


def main() -> int:
    """Validate configuration, then serve. Exits with 1 before binding if the key is missing."""
    load_dotenv()  # Load environment variables from .env file
    configure_logging()

    try:
        settings = load_settings()
    except ConfigError as e:
        logging.getLogger("complaint_assistant").error("Error: %s", e)
        return 1

    configure_logging(settings.log_level)
    app = create_app(settings)

    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
