"""Run the API with uvicorn: ``python -m cinema_api``."""

import uvicorn

from cinema_api.config import settings


def main() -> None:
    uvicorn.run(
        "cinema_api.main:app",
        host=settings.api_host,
        port=settings.api_port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
