import json
import logging

from movie_catalog.core.config import Settings
from movie_catalog.core.logging import (
    LogContext,
    censor_sensitive_data,
    parse_size,
    request_id_var,
    setup_logging,
)


def test_parse_size():
    assert parse_size("100MB") == 100 * 1024 ** 2
    assert parse_size("2kb") == 2048
    assert parse_size("512") == 512


def test_censor_sensitive_data():
    event = censor_sensitive_data(None, "info", {
        "event": "connecting",
        "database_url": "postgresql://u:p@db/catalog",
        "nested": {"password": "hunter2", "host": "db"},
    })

    assert event["database_url"] == "***CENSORED***"
    assert event["nested"] == {"password": "***CENSORED***", "host": "db"}
    assert event["event"] == "connecting"


def test_log_context_sets_and_resets_request_id():
    with LogContext("req-1"):
        assert request_id_var.get() == "req-1"

    assert request_id_var.get() is None


def test_file_logs_are_json(tmp_path):
    log_file = tmp_path / "logs" / "catalog.log"
    settings = Settings(LOG_FILE=str(log_file), LOG_ROTATION="size", LOG_FORMAT="json")
    setup_logging(settings)

    try:
        with LogContext("req-42"):
            logging.getLogger("movie_catalog.test").warning("Filme já cadastrado")
        for handler in logging.getLogger().handlers:
            handler.flush()

        entry = json.loads(log_file.read_text(encoding="utf-8").strip().splitlines()[-1])
        assert entry["level"] == "WARNING"
        assert entry["message"] == "Filme já cadastrado"
        assert entry["request_id"] == "req-42"
    finally:
        for handler in logging.getLogger().handlers:
            handler.close()
        logging.getLogger().handlers.clear()
