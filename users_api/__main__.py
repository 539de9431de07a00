"""Run the service with uvicorn: python -m users_api."""

import uvicorn

from users_api.config import get_settings


def main() -> None:
    settings = get_settings()
    # log_config=None: uvicorn loggers propagate to the root handler set up in lifespan
    uvicorn.run(
        "users_api.main:app",
        host=settings.host,
        port=settings.port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
