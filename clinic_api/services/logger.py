import json
import logging
from datetime import datetime

from clinic_api.core.config import settings

logger = logging.getLogger("clinic_api.events")


def log_event(event: str, data: dict):
    """
    Logs structured debug info if enabled.
    """
    if not settings.DEBUG_EVENTS:
        return

    entry = {
        "timestamp": datetime.now().isoformat(),
        "event": event,
        "data": data
    }
    logger.info("[EVENT] %s: %s", event, json.dumps(entry, indent=2, default=str))
