import pytest

from resumeforge.utils import event_logging


@pytest.fixture(autouse=True)
def events_file(tmp_path, monkeypatch):
    """Send customization events to a per-test file."""
    path = tmp_path / "logs" / "customization_events.log"
    monkeypatch.setattr(event_logging, "CUSTOMIZATION_EVENTS_FILE", path)
    return path
