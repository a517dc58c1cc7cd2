import logging
import sys


def configure_logging(level: int = logging.INFO) -> None:
    # httpx logs every outbound request at INFO.
    logging.getLogger("httpx").setLevel(logging.WARNING)

    root_logger = logging.getLogger()
    if root_logger.handlers:
        return

    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )


def preview(text: str, limit: int = 50) -> str:
    if len(text) <= limit:
        return text
    return f"{text[:limit]}..."
