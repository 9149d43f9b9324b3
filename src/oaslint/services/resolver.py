"""同梱リンター実行ファイルの解決・展開を行うサービス。"""

import logging
import os
import platform
import shutil
import stat
from pathlib import Path

from oaslint.models.errors import ExtractionFailedError, ResourceNotFoundError
from oaslint.models.validation import PlatformVariant

logger = logging.getLogger(__name__)

# 展開先ディレクトリ名（target_dir配下）
SCRATCH_DIR_NAME = "oaslint"

# Alpine Linux の判定に使うファイル
_ALPINE_RELEASE_FILE = Path("/etc/alpine-release")

_EXECUTE_BITS = stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH
_READ_BITS = stat.S_IRUSR | stat.S_IRGRP | stat.S_IROTH


def detect_platform(system: str, machine: str, libc: str = "") -> PlatformVariant:
    """OS名・CPUアーキテクチャからプラットフォームバリアントを決定する。

    Args:
        system: OS名（platform.system() の値など）。
        machine: CPUアーキテクチャ（platform.machine() の値など）。
        libc: Cライブラリ名。"musl" の場合はAlpineとみなす。

    Returns:
        プラットフォームバリアント。判定できない場合は "linux-x64"。
    """
    system = system.lower()
    machine = machine.lower()
    arm = "aarch64" in machine or "arm" in machine

    # "darwin" は "win" を含むため先に判定する
    if "darwin" in system or "mac" in system:
        return "macos-arm64" if arm else "macos-x64"
    if "win" in system:
        return "windows"
    if "linux" in system or "nix" in system or "nux" in system:
        if libc.lower() == "musl":
            return "alpine-arm64" if arm else "alpine-x64"
        return "linux-arm64" if arm else "linux-x64"
    return "linux-x64"


def host_platform() -> PlatformVariant:
    """実行中ホストのプラットフォームバリアントを返す。"""
    libc = "musl" if _ALPINE_RELEASE_FILE.exists() else platform.libc_ver()[0]
    return detect_platform(platform.system(), platform.machine(), libc)


def executable_name(variant: PlatformVariant) -> str:
    """バリアントに対応する実行ファイル名を返す。"""
    return "linter.exe" if variant == "windows" else "linter"


class ExecutableResolver:
    """同梱リソースからプラットフォームに合ったリンターを展開する。"""

    def __init__(self, resources_dir: Path, variant: PlatformVariant | None = None) -> None:
        self._resources_dir = resources_dir
        self._variant: PlatformVariant = variant if variant is not None else host_platform()
        self._executable_name = executable_name(self._variant)

    @property
    def variant(self) -> PlatformVariant:
        return self._variant

    @property
    def is_windows(self) -> bool:
        return self._variant == "windows"

    @property
    def resource_path(self) -> Path:
        """同梱リソースのパス（<resources_dir>/linter/<variant>/<binary>）。"""
        return self._resources_dir / "linter" / self._variant / self._executable_name

    def extract(self, target_dir: Path) -> Path:
        """リンターを target_dir 配下に展開し、実行可能にする。

        既存の展開結果は上書きする。展開したファイルは削除しない。

        Args:
            target_dir: 展開先のルートディレクトリ。

        Returns:
            展開した実行ファイルの絶対パス。

        Raises:
            ResourceNotFoundError: バリアントに対応するリソースが存在しない場合。
            ExtractionFailedError: ディレクトリ作成・コピー・権限設定に失敗した場合。
        """
        source = self.resource_path
        if not source.is_file():
            raise ResourceNotFoundError(source)
        logger.info("Linter platform: %s (%s)", self._variant, self._executable_name)

        scratch_dir = (target_dir / SCRATCH_DIR_NAME).resolve()
        try:
            scratch_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise ExtractionFailedError("Failed to create linter directory", scratch_dir) from e

        executable = scratch_dir / self._executable_name
        try:
            shutil.copyfile(source, executable)
        except OSError as e:
            raise ExtractionFailedError("Failed to extract linter executable", executable) from e

        if not self.is_windows:
            try:
                mode = executable.stat().st_mode
                executable.chmod(mode | _EXECUTE_BITS | _READ_BITS)
            except OSError as e:
                raise ExtractionFailedError("Failed to make linter executable runnable", executable) from e
            if not os.access(executable, os.X_OK):
                raise ExtractionFailedError("Failed to make linter executable runnable", executable)
            logger.debug("Made executable: %s", executable)

        logger.debug("Extracted linter executable to: %s", executable)
        return executable
