"""Tests for structured logging."""

import json
import logging

from worldview.logging_config import JSONFormatter, agent_logger, setup_logging


class _Capture(logging.Handler):
    def __init__(self):
        super().__init__()
        self.records: list[logging.LogRecord] = []

    def emit(self, record: logging.LogRecord) -> None:
        self.records.append(record)


class TestJSONFormatter:
    """Tests for JSONFormatter."""

    def test_formats_record_with_context(self):
        logger = logging.getLogger("test.json")
        logger.setLevel(logging.DEBUG)
        handler = _Capture()
        logger.addHandler(handler)
        try:
            agent_logger(logger, "news_sentiment", "Oslo,Norway").info("[%s] Completed", "NEWS")
        finally:
            logger.removeHandler(handler)

        data = json.loads(JSONFormatter().format(handler.records[0]))

        assert data["message"] == "[NEWS] Completed"
        assert data["level"] == "INFO"
        assert data["context"] == {"agent": "news_sentiment", "place": "Oslo,Norway"}

    def test_record_without_context(self):
        record = logging.LogRecord("x", logging.WARNING, __file__, 1, "plain", None, None)
        data = json.loads(JSONFormatter().format(record))
        assert "context" not in data


class TestSetupLogging:
    """Tests for setup_logging()."""

    def test_writes_json_file(self, tmp_path):
        root = logging.getLogger()
        saved_handlers, saved_level = root.handlers[:], root.level
        log_file = tmp_path / "logs" / "worldview.log"
        try:
            setup_logging(log_level="debug", log_file=str(log_file))
            logging.getLogger("worldview.test").info("hello")
            for handler in root.handlers:
                handler.flush()

            line = log_file.read_text(encoding="utf-8").strip().splitlines()[-1]
            assert json.loads(line)["message"] == "hello"
            assert logging.getLogger("httpx").level == logging.WARNING
        finally:
            for handler in root.handlers[:]:
                root.removeHandler(handler)
                handler.close()
            for handler in saved_handlers:
                root.addHandler(handler)
            root.setLevel(saved_level)
