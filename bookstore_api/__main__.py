"""
`python -m bookstore_api` runs the API under uvicorn.
"""

import uvicorn

from bookstore_api.core import config
from bookstore_api.core.logs import setup_logging


def main() -> None:
    setup_logging(config.log_level(), config.log_format())
    uvicorn.run(
        "bookstore_api.main:app",
        host=config.app_host(),
        port=config.app_port(),
        log_config=None,
    )


if __name__ == "__main__":
    main()
