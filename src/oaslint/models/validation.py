"""バリデーション実行関連のデータモデル。"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field

PlatformVariant = Literal[
    "windows",
    "macos-x64",
    "macos-arm64",
    "linux-x64",
    "linux-arm64",
    "alpine-x64",
    "alpine-arm64",
]


class ValidationRequest(BaseModel):
    """1回のバリデーション実行の入力。"""

    input_dir: Path | None = None
    files: list[str] = Field(default_factory=list)
    ruleset: str | None = None
    format: str | None = None
    output_file: Path | None = None
    verbose: bool = False
    target_dir: Path


class LinterInvocation(BaseModel):
    """1ファイル分のリンター呼び出し。"""

    executable: Path
    target: Path
    args: list[str]

    @property
    def command(self) -> list[str]:
        return [str(self.executable), *self.args]


class ProcessOutput(BaseModel):
    """サブプロセスの終了コードと結合出力。"""

    exit_code: int
    output: str


class FileValidationResult(BaseModel):
    """ファイル単位のバリデーション結果。"""

    file: Path
    exit_code: int
    violation_count: int = Field(ge=0)
    output: str


class ValidationResult(BaseModel):
    """全ファイルを集計したバリデーション結果。"""

    violation_count: int = Field(default=0, ge=0)
    output: str = ""
    files: list[FileValidationResult] = Field(default_factory=list)

    @property
    def has_violations(self) -> bool:
        return self.violation_count > 0
