"""テスト共通フィクスチャ。"""

from collections.abc import Callable
from pathlib import Path

import pytest

from oaslint.config import RunnerConfig
from oaslint.services.resolver import ExecutableResolver
from oaslint.services.runner import ProcessRunner
from oaslint.services.validation import ValidationService

# 最後の引数（対象ファイル）に "bad" を含む場合に違反を報告するリンターの代役
FAKE_LINTER_SCRIPT = """#!/bin/sh
for last; do :; done
echo "args: $*"
case "$last" in
  *bad*)
    echo "$last"
    echo "  3:10  error    oas3-schema   Property 'paths' is required."
    echo "  5:1   warning  info-contact  Info object must have contact object."
    echo ""
    echo "2 problems (1 error, 1 warning, 0 infos, 0 hints)"
    exit 1
    ;;
  *)
    echo "No results with a severity of 'error' found!"
    exit 0
    ;;
esac
"""


@pytest.fixture
def resources_dir(tmp_path: Path) -> Path:
    """テスト用の同梱リソースディレクトリ（空）。"""
    path = tmp_path / "resources"
    path.mkdir()
    return path


@pytest.fixture
def install_linter(resources_dir: Path) -> Callable[..., Path]:
    """resources_dirにリンターの代役スクリプトを配置する関数を返す。"""

    def _install(script: str = FAKE_LINTER_SCRIPT, variant: str = "linux-x64") -> Path:
        name = "linter.exe" if variant == "windows" else "linter"
        path = resources_dir / "linter" / variant / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(script, encoding="utf-8")
        return path

    return _install


@pytest.fixture
def target_dir(tmp_path: Path) -> Path:
    """リンターの展開先ディレクトリ。"""
    return tmp_path / "target"


@pytest.fixture
def openapi_dir(tmp_path: Path) -> Path:
    """OpenAPIファイルを置く入力ディレクトリ。"""
    path = tmp_path / "openapi"
    path.mkdir()
    return path


@pytest.fixture
def resolver(resources_dir: Path) -> ExecutableResolver:
    """linux-x64固定のExecutableResolver。"""
    return ExecutableResolver(resources_dir=resources_dir, variant="linux-x64")


@pytest.fixture
def validation_service(resolver: ExecutableResolver) -> ValidationService:
    """テスト用ValidationService。"""
    return ValidationService(resolver=resolver, runner=ProcessRunner(timeout=10))


@pytest.fixture
def runner_config(resources_dir: Path, target_dir: Path, openapi_dir: Path) -> RunnerConfig:
    """テスト用RunnerConfig。"""
    return RunnerConfig(
        input_dir=openapi_dir,
        ruleset=None,
        resources_dir=resources_dir,
        platform="linux-x64",
        target_dir=target_dir,
        timeout=10,
    )
