import logging
from typing import Any, Dict, Optional


_LOGGER = logging.getLogger("motiondirector")


def log(level: int, request_id: Optional[str], message: str, **dimensions: Any) -> None:
    dims: Dict[str, Any] = {"requestId": request_id} if request_id else {}
    dims.update(dimensions)
    try:
        _LOGGER.log(level, message, extra={"custom_dimensions": dims})
    except Exception:
        # Fallback if extra/custom_dimensions not supported in the environment
        _LOGGER.log(level, f"{message} | {dims}")


def info(request_id: Optional[str], message: str, **dimensions: Any) -> None:
    log(logging.INFO, request_id, message, **dimensions)


def warning(request_id: Optional[str], message: str, **dimensions: Any) -> None:
    log(logging.WARNING, request_id, message, **dimensions)


def error(request_id: Optional[str], message: str, **dimensions: Any) -> None:
    log(logging.ERROR, request_id, message, **dimensions)


def configure_logging(level: str = "INFO", azure_level: str = "") -> None:
    if azure_level:
        lvl = getattr(logging, azure_level, logging.INFO)
        logging.getLogger("azure").setLevel(lvl)
    logging.getLogger("httpx").setLevel(logging.WARNING)
    _LOGGER.setLevel(getattr(logging, level, logging.INFO))
