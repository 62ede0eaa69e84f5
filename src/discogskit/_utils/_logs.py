import logging
import sys
from typing import Optional

logger: logging.Logger = logging.getLogger("discogskit")
_handler: Optional[logging.StreamHandler] = None  # type: ignore[type-arg]


def setup_logging(debug: bool = False) -> None:
    global _handler

    if _handler is None:
        _handler = logging.StreamHandler(sys.stderr)
        _handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )
        logger.addHandler(_handler)

    logger.setLevel(logging.DEBUG if debug else logging.INFO)


def mask_headers(headers: dict[str, str]) -> dict[str, str]:
    """Return a copy of ``headers`` that is safe to log."""
    return {
        key: ("***" if key.lower() == "authorization" else value)
        for key, value in headers.items()
    }
