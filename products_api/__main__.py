"""Run the API with uvicorn on the configured host and port."""

import uvicorn

from products_api.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "products_api.main:app",
        host=settings.host,
        port=settings.port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
