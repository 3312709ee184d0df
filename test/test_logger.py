import logging

from src.utils.pontos_logger import BASE_NAME, ColorFormatter, configure_logger, get_logger


def _record(msg, *args, level=logging.INFO):
    return logging.LogRecord("pontos.test", level, __file__, 1, msg, args, None)


def test_color_formatter_wraps_level_and_message():
    record = _record("%s was empty!", "sog", level=logging.WARNING)

    out = ColorFormatter(use_color=True).format(record)

    assert "\x1b[33m" in out
    assert "sog was empty!" in out
    # the record is left as it was for other handlers
    assert record.msg == "%s was empty!"
    assert record.args == ("sog",)
    assert record.levelname == "WARNING"


def test_plain_formatter_has_no_escapes():
    out = ColorFormatter(use_color=False).format(_record("plain"))
    assert "\x1b[" not in out
    assert "INFO" in out


def test_children_share_the_base_logger():
    assert get_logger("pipeline").name == f"{BASE_NAME}.pipeline"
    assert get_logger().name == BASE_NAME


def test_file_handler_and_reconfiguration(tmp_path):
    path = tmp_path / "logs" / "pontos.log"
    name = "pontos-logger-test"

    logger = configure_logger(name, level="debug", use_color=False, filename=str(path))
    logger.debug("written to file")
    for h in logger.handlers:
        h.flush()

    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 2
    assert "written to file" in path.read_text(encoding="utf-8")

    logger = configure_logger(name, level="WARNING", use_color=False, filename="")
    assert len(logger.handlers) == 1
    assert logger.propagate is False
