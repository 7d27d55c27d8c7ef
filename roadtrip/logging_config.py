from __future__ import annotations

import logging
from rich.logging import RichHandler

from . import LOG_LEVEL


def configure(level: str | None = None) -> None:
    logging.basicConfig(
        level=(level or LOG_LEVEL).upper(),
        format="%(name)s │ %(message)s",
        handlers=[RichHandler(rich_tracebacks=True, show_time=False, show_path=False)],
        force=True,
    )
