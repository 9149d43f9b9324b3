"""CLI向けのロギング設定。"""

import logging
import sys

# この重大度以上を stderr に出す
STDERR_LEVEL = logging.WARNING


class _BelowLevelFilter(logging.Filter):
    def __init__(self, level: int) -> None:
        super().__init__()
        self._level = level

    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno < self._level


def configure_split_stream_logging(
    *,
    level: int = logging.INFO,
    formatter: logging.Formatter | None = None,
) -> None:
    """ルートロガーを設定する。

    DEBUG/INFO は stdout、WARNING 以上は stderr に出力する。
    ビルドログで stdout を抑制しても警告・エラーが見えるようにするため。
    """
    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(level)

    if formatter is None:
        formatter = logging.Formatter("[%(levelname)s] %(message)s")

    stdout_handler = logging.StreamHandler(stream=sys.stdout)
    stdout_handler.addFilter(_BelowLevelFilter(STDERR_LEVEL))

    stderr_handler = logging.StreamHandler(stream=sys.stderr)
    stderr_handler.setLevel(STDERR_LEVEL)

    for handler in (stdout_handler, stderr_handler):
        handler.setFormatter(formatter)
        root.addHandler(handler)
