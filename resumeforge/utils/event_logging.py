"""
Customization event logging utilities (Tier 2 logging).

Appends one JSON object per line to the customization events log so that
saves, loads and failures can be audited per resume after the fact.

For detailed within-context logging (Tier 1), use resumeforge.utils.logger instead.

Usage:
    from resumeforge.utils.event_logging import log_customization_event

    log_customization_event(
        event_type="config_saved",
        resume_id=42,
        source="controller",
        template_id="modern-1",
    )
"""

import json
import os
from pathlib import Path
from typing import Optional, Union

from dotenv import load_dotenv

from resumeforge.utils.timestamp import now_exact

load_dotenv()
LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))
CUSTOMIZATION_EVENTS_FILE = Path(
    os.getenv("CUSTOMIZATION_EVENTS_FILE", str(LOGS_PATH / "customization_events.log"))
)

ResumeId = Union[int, str]


def log_customization_event(
    event_type: str, resume_id: Optional[ResumeId], source: str, **extra_fields
) -> None:
    """
    Log an event to the customization event log (JSON Lines).

    Args:
        event_type: Type of event (e.g., "config_saved", "config_save_failed", "config_loaded")
        resume_id: Resume identifier (None for events not tied to a resume)
        source: Event source (e.g., "controller", "cli")
        **extra_fields: Additional event-specific fields
    """
    CUSTOMIZATION_EVENTS_FILE.parent.mkdir(parents=True, exist_ok=True)

    event = {
        "timestamp": now_exact(),
        "event_type": event_type,
        "resume_id": resume_id,
        "source": source,
        **extra_fields,
    }

    with open(CUSTOMIZATION_EVENTS_FILE, "a", encoding="utf-8") as f:
        f.write(json.dumps(event) + "\n")


def get_recent_events(
    n: int = 10, resume_id: Optional[ResumeId] = None, event_type: Optional[str] = None
) -> list[dict]:
    """
    Get the last n events from the customization log, optionally filtered.

    Args:
        n: Number of recent events to return (default: 10)
        resume_id: Filter to only events for this resume (compared as strings)
        event_type: Filter to only events of this type

    Returns:
        List of event dicts (most recent last)
    """
    if not CUSTOMIZATION_EVENTS_FILE.exists():
        return []

    events = []
    with open(CUSTOMIZATION_EVENTS_FILE, "r", encoding="utf-8") as f:
        for line in f:
            try:
                events.append(json.loads(line.strip()))
            except json.JSONDecodeError:
                # Skip malformed lines
                continue

    if resume_id is not None:
        events = [e for e in events if str(e.get("resume_id")) == str(resume_id)]

    if event_type:
        events = [e for e in events if e.get("event_type") == event_type]

    return events[-n:]
