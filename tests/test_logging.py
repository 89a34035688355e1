import json
import logging

from fourline_grading.logging import LogEvent, create_logger


def _entries(caplog, name):
    return [json.loads(r.getMessage()) for r in caplog.records if r.name == name]


def test_records_are_json_with_event_and_component(caplog):
    logger = create_logger("test-json")
    with caplog.at_level(logging.INFO, logger="fourline_grading.test-json"):
        logger.info(LogEvent.CONFIG_LOADED, "Loaded grading config", {"path": "grading.yaml"})

    (entry,) = _entries(caplog, "fourline_grading.test-json")
    assert entry["event"] == "config.loaded"
    assert entry["component"] == "test-json"
    assert entry["level"] == "INFO"
    assert entry["metadata"] == {"path": "grading.yaml"}


def test_bind_merges_context_into_metadata(caplog):
    logger = create_logger("test-bind").bind(mode="quiz")
    with caplog.at_level(logging.INFO, logger="fourline_grading.test-bind"):
        logger.info(LogEvent.GRADE_PASSED, "Letter accepted", {"letter": "A"})
        logger.bind(mode="practice").info(LogEvent.GRADE_PASSED, "Letter accepted")

    first, second = _entries(caplog, "fourline_grading.test-bind")
    assert first["metadata"] == {"mode": "quiz", "letter": "A"}
    assert second["metadata"] == {"mode": "practice"}


def test_disabled_level_emits_nothing(caplog):
    logger = create_logger("test-quiet", level=logging.WARNING)
    with caplog.at_level(logging.WARNING, logger="fourline_grading.test-quiet"):
        logger.debug(LogEvent.SHAPE_SCORED, "MSE = 0.1")
        logger.info(LogEvent.GRADE_PASSED, "Letter accepted")
    assert _entries(caplog, "fourline_grading.test-quiet") == []


def test_error_records_exception(caplog):
    logger = create_logger("test-error")
    with caplog.at_level(logging.ERROR, logger="fourline_grading.test-error"):
        logger.error(LogEvent.CONFIG_INVALID, "Invalid grading config", exc_info=ValueError("bad"))

    (entry,) = _entries(caplog, "fourline_grading.test-error")
    assert entry["event"] == "error.config_invalid"
    assert entry["exception"] == {"type": "ValueError", "message": "bad"}
