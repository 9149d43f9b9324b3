"""oaslintのカスタム例外クラス。"""

from pathlib import Path


class OaslintError(Exception):
    """oaslintの基底例外クラス。"""


class ResourceNotFoundError(OaslintError):
    """プラットフォームに対応する同梱リンターが見つからない場合の例外。"""

    def __init__(self, resource_path: Path) -> None:
        super().__init__(
            f"Could not find linter executable: {resource_path}"
            " (supply the binary there or set OASLINT_RESOURCES_DIR)"
        )
        self.resource_path = resource_path


class ExtractionFailedError(OaslintError):
    """リンター実行ファイルの展開に失敗した場合の例外。"""

    def __init__(self, message: str, path: Path) -> None:
        super().__init__(f"{message}: {path}")
        self.path = path


class ExecutionTimeoutError(OaslintError):
    """リンターの実行がタイムアウトした場合の例外。"""

    def __init__(self, command: list[str], timeout: float) -> None:
        super().__init__(f"Linter execution timed out after {timeout:g} seconds")
        self.command = command
        self.timeout = timeout


class ExecutionFailedError(OaslintError):
    """リンタープロセスの起動・入出力に失敗した場合の例外。"""

    def __init__(self, message: str, command: list[str]) -> None:
        super().__init__(message)
        self.command = command


class OutputWriteError(OaslintError):
    """出力ファイルへの書き込みに失敗した場合の例外。"""

    def __init__(self, output_file: Path) -> None:
        super().__init__(f"Failed to write linter output to: {output_file}")
        self.output_file = output_file


class ViolationsFoundError(OaslintError):
    """違反が検出され、ビルドを失敗させる場合の例外。"""

    def __init__(self, violation_count: int) -> None:
        super().__init__(
            f"Validation failed with {violation_count} violations. See output above for details."
        )
        self.violation_count = violation_count
