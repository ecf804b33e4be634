from __future__ import annotations
import logging, sys

def setup_logging(level: int = logging.WARNING) -> None:
    # stderr : stdout est réservé à la ligne de confirmation
    fmt = "[%(levelname)s] %(name)s | %(message)s"
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(fmt))
    logging.basicConfig(level=level, handlers=[handler])
