from __future__ import annotations

import json
import logging
from dataclasses import asdict, is_dataclass
from datetime import date, datetime
from enum import Enum
from pathlib import Path
from typing import Any
from rich.console import Console

console = Console()
logger = logging.getLogger("profit_challenge.events")

def _to_jsonable(x: Any) -> Any:
    if is_dataclass(x):
        return asdict(x)
    if isinstance(x, Enum):
        return x.value
    if isinstance(x, (datetime, date)):
        return x.isoformat()
    if isinstance(x, Path):
        return str(x)
    return x

def log_event(event: str, payload: dict[str, Any]) -> None:
    """Print a user-facing event (bold title + JSON payload) and mirror it to the event logger."""
    body = {k: _to_jsonable(v) for k, v in payload.items()}
    logger.info("%s %s", event, body)
    console.print(f"[bold]{event}[/bold]")
    console.print_json(json.dumps(body, default=str))
