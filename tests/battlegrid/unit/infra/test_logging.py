import json
import logging

from battlegrid.game.infra.logging import (
    JsonFormatter,
    LoggingConfig,
    build_logging_config,
    configure_logging,
    setup_logging,
)


def test_json_formatter_includes_fields_and_message() -> None:
    logger = logging.getLogger("test.json.formatter")
    record = logger.makeRecord(
        name=logger.name,
        level=logging.INFO,
        fn=__file__,
        lno=1,
        msg="hello %s",
        args=("world",),
        exc_info=None,
        extra={"custom": 1},
    )
    payload = json.loads(JsonFormatter().format(record))
    assert payload["msg"] == "hello world"
    assert payload["level"] == "INFO"
    assert payload["fields"] == {"custom": 1}


def test_build_logging_config_reads_env(monkeypatch, tmp_path) -> None:
    monkeypatch.setenv("BATTLEGRID_LOG_DIR", str(tmp_path / "logs"))
    monkeypatch.setenv("BATTLEGRID_LOG_LEVEL", "debug")
    monkeypatch.setenv("LOG_FORMAT", "JSON")

    config = build_logging_config()

    assert config.level_name == "DEBUG"
    assert config.console_format == "json"
    assert config.file_path is not None
    assert config.file_path.startswith(str(tmp_path / "logs"))
    assert config.file_path.endswith(".jsonl")


def test_configure_logging_console_only_sets_level() -> None:
    configure_logging(LoggingConfig(level_name="WARNING", console_format="text"))
    root = logging.getLogger()
    assert root.level == logging.WARNING
    assert len(root.handlers) == 1


def test_setup_logging_writes_json_lines(monkeypatch, tmp_path) -> None:
    monkeypatch.setenv("BATTLEGRID_LOG_DIR", str(tmp_path / "logs"))
    monkeypatch.delenv("BATTLEGRID_LOG_LEVEL", raising=False)
    monkeypatch.setenv("LOG_LEVEL", "INFO")
    monkeypatch.setenv("LOG_FORMAT", "text")
    setup_logging()

    logging.getLogger("test.logging.file").info("hello")
    # Reconfiguring stops the queue listener, flushing pending records.
    configure_logging(LoggingConfig(level_name="WARNING"))

    files = list((tmp_path / "logs").glob("battlegrid_run_*.jsonl"))
    assert files
    lines = [json.loads(line) for line in files[0].read_text(encoding="utf-8").splitlines()]
    assert any(line["msg"] == "hello" for line in lines)
    assert any(line.get("event") == "logging_configured" for line in lines)


def test_json_formatter_names_the_game_event() -> None:
    logger = logging.getLogger("test.json.event")
    event_record = logger.makeRecord(
        logger.name, logging.WARNING, __file__, 1, "attack_rejected row=%d col=%d", (3, 4), None
    )
    bare_record = logger.makeRecord(logger.name, logging.INFO, __file__, 1, "level=%s", ("INFO",), None)

    event_payload = json.loads(JsonFormatter().format(event_record))
    bare_payload = json.loads(JsonFormatter().format(bare_record))

    assert event_payload["event"] == "attack_rejected"
    assert event_payload["msg"] == "attack_rejected row=3 col=4"
    assert "event" not in bare_payload
