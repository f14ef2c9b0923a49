import logging
from typing import Optional


def setup_logging(level: str = "INFO", fmt: Optional[str] = None) -> None:
    """Configure root logging for processes embedding the validator."""
    kwargs = {"level": getattr(logging, level.upper(), logging.INFO)}
    if fmt:
        kwargs["format"] = fmt
    logging.basicConfig(**kwargs)
