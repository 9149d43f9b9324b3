"""リンターをサブプロセスとして実行するサービス。"""

import asyncio
import logging
import os
import shlex
import signal

from oaslint.models.errors import ExecutionFailedError, ExecutionTimeoutError
from oaslint.models.validation import ProcessOutput

logger = logging.getLogger(__name__)

# リンター1回あたりの実行タイムアウト（秒）
DEFAULT_TIMEOUT = 60

# 強制終了後にプロセスの回収を待つ上限（秒）
_KILL_WAIT_TIMEOUT = 5

_IS_WINDOWS = os.name == "nt"


class ProcessRunner:
    """stdout/stderrを結合してサブプロセスを実行する。"""

    def __init__(self, timeout: float = DEFAULT_TIMEOUT) -> None:
        self._timeout = timeout

    @property
    def timeout(self) -> float:
        return self._timeout

    @staticmethod
    async def _kill(proc: asyncio.subprocess.Process) -> None:
        """プロセスを子プロセスごと強制終了する。

        POSIXではプロセスグループ全体にSIGKILLを送る。リンターが起動した
        孫プロセスが出力パイプを保持したままでも待ち続けないよう、回収の待機は
        _KILL_WAIT_TIMEOUT で打ち切る。
        """
        try:
            if _IS_WINDOWS:
                proc.kill()
            else:
                os.killpg(proc.pid, signal.SIGKILL)
        except ProcessLookupError:
            pass
        try:
            await asyncio.wait_for(proc.wait(), timeout=_KILL_WAIT_TIMEOUT)
        except TimeoutError:
            logger.warning("Linter process %d did not exit after kill", proc.pid)

    async def run(self, command: list[str]) -> ProcessOutput:
        """コマンドを実行し、終了コードと結合出力を返す。

        Args:
            command: 実行するコマンドと引数のリスト。

        Returns:
            終了コードと出力。

        Raises:
            ExecutionTimeoutError: タイムアウトした場合（プロセスは子プロセスごと強制終了される）。
            ExecutionFailedError: プロセスの起動または入出力に失敗した場合。
        """
        logger.debug("Executing: %s", shlex.join(command))
        try:
            proc = await asyncio.create_subprocess_exec(
                *command,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.STDOUT,
                # 子プロセスをまとめて終了できるよう新しいプロセスグループで起動する
                start_new_session=not _IS_WINDOWS,
            )
        except OSError as e:
            raise ExecutionFailedError(f"Failed to execute linter: {e}", command) from e

        try:
            stdout_bytes, _ = await asyncio.wait_for(proc.communicate(), timeout=self._timeout)
        except TimeoutError as e:
            await self._kill(proc)
            raise ExecutionTimeoutError(command, self._timeout) from e
        except OSError as e:
            await self._kill(proc)
            raise ExecutionFailedError(f"Failed to execute linter: {e}", command) from e

        return ProcessOutput(
            exit_code=proc.returncode or 0,
            output=stdout_bytes.decode("utf-8", errors="replace"),
        )
