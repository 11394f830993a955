import logging
import sys

from .constants import PACKAGE_NAME

logger = logging.getLogger(PACKAGE_NAME)


def setup_logging(debug: bool = False) -> None:
    """Attach a stderr handler to the package logger.

    Calling it again only updates the level. httpx is kept at WARNING so its
    own request lines do not duplicate ours.
    """
    if not any(getattr(h, "_fluenthttp", False) for h in logger.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )
        handler._fluenthttp = True  # type: ignore[attr-defined]
        logger.addHandler(handler)

    logger.setLevel(logging.DEBUG if debug else logging.INFO)
    logging.getLogger("httpx").setLevel(logging.WARNING)
