"""Start the service: python -m src"""

import uvicorn

from config.settings import settings


def main() -> None:
    uvicorn.run("src.main:app", host="0.0.0.0", port=settings.PORT, log_level=settings.LOG_LEVEL.lower())


if __name__ == "__main__":
    main()
