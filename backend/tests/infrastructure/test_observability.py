"""JSONFormatter - structured log lines with registry extras."""

import json
import logging

from donorbase.infrastructure.observability import JSONFormatter, setup_logging


def _record(**extra):
    record = logging.LogRecord(
        "donorbase.test", logging.INFO, __file__, 1, "Donor created", None, None,
    )
    record.__dict__.update(extra)
    return record


def test_formats_base_fields():
    log = json.loads(JSONFormatter().format(_record()))
    assert log["level"] == "INFO"
    assert log["logger"] == "donorbase.test"
    assert log["message"] == "Donor created"
    assert "entity" not in log


def test_surfaces_entity_and_record_id():
    log = json.loads(JSONFormatter().format(_record(entity="Donor", record_id="d-1")))
    assert log["entity"] == "Donor"
    assert log["record_id"] == "d-1"


def test_timestamp_is_event_time():
    record = _record()
    record.created = 0.0
    log = json.loads(JSONFormatter().format(record))
    assert log["timestamp"] == "1970-01-01T00:00:00+00:00"


def test_setup_logging_replaces_its_own_handler():
    root = logging.getLogger()
    level = root.level
    try:
        setup_logging("DEBUG", "json")
        handler = setup_logging("WARNING", "text")
        installed = [h for h in root.handlers if h.get_name() == handler.get_name()]
        assert installed == [handler]
        assert root.level == logging.WARNING
        assert not isinstance(handler.formatter, JSONFormatter)
    finally:
        for h in [h for h in root.handlers if h.get_name() == "donorbase"]:
            root.removeHandler(h)
        root.setLevel(level)
