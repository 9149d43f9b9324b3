"""configure_split_stream_logging のユニットテスト。"""

import logging
from collections.abc import Iterator

import pytest

from oaslint.utils.logging_utils import configure_split_stream_logging


@pytest.fixture(autouse=True)
def restore_root_logger() -> Iterator[None]:
    """テストごとにルートロガーの設定を元に戻す。"""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


class TestConfigureSplitStreamLogging:
    def test_info_to_stdout_warning_to_stderr(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_split_stream_logging()
        logger = logging.getLogger("oaslint.test")

        logger.debug("hidden")
        logger.info("validating")
        logger.warning("ruleset missing")

        captured = capsys.readouterr()
        assert captured.out == "[INFO] validating\n"
        assert captured.err == "[WARNING] ruleset missing\n"

    def test_debug_level_reaches_stdout(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_split_stream_logging(level=logging.DEBUG)

        logging.getLogger("oaslint.test").debug("Executing: linter lint")

        assert capsys.readouterr().out == "[DEBUG] Executing: linter lint\n"

    def test_each_record_goes_to_one_stream(self, capsys: pytest.CaptureFixture[str]) -> None:
        """INFO と WARNING の境界で重複も欠落もなく振り分ける。"""
        configure_split_stream_logging(level=logging.DEBUG)
        logger = logging.getLogger("oaslint.test")

        for lvl in (logging.DEBUG, logging.INFO, logging.WARNING, logging.ERROR, logging.CRITICAL):
            logger.log(lvl, "message")

        captured = capsys.readouterr()
        assert captured.out.splitlines() == ["[DEBUG] message", "[INFO] message"]
        assert captured.err.splitlines() == ["[WARNING] message", "[ERROR] message", "[CRITICAL] message"]

    def test_reconfiguring_replaces_handlers(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_split_stream_logging()
        configure_split_stream_logging()

        logging.getLogger("oaslint.test").info("once")

        assert capsys.readouterr().out == "[INFO] once\n"
