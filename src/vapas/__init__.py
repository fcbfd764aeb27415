"""vapas: Cydia/Sileo package repository index server."""

import logging

from rich.console import Console
from rich.logging import RichHandler

from . import db  # noqa: F401 # ensure DB stuff is initialized

logging.basicConfig(
    level=logging.INFO,
    format="%(message)s",
    datefmt="[%X]",
    handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True)],
)
logging.getLogger("httpx").setLevel(logging.WARNING)
logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
