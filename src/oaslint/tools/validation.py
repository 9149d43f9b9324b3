"""バリデーション層のMCPツール定義。"""

from pathlib import Path
from typing import Any

from fastmcp import FastMCP

from oaslint.config import RunnerConfig
from oaslint.models.errors import OaslintError
from oaslint.models.validation import ValidationRequest
from oaslint.services.resolver import ExecutableResolver
from oaslint.services.validation import ValidationService


def register_validation_tools(
    mcp: FastMCP,
    validation_service: ValidationService,
    resolver: ExecutableResolver,
    config: RunnerConfig,
) -> None:
    """バリデーション関連のMCPツールを登録する。"""

    @mcp.tool()
    async def validate_openapi(
        files: list[str] | None = None,
        input_dir: str | None = None,
        ruleset: str | None = None,
        format: str | None = None,
        verbose: bool = False,
    ) -> dict[str, Any]:
        """OpenAPIドキュメントを同梱リンターで検証する。

        filesを指定した場合はそのファイルのみ、省略した場合はinput_dir配下の
        .yaml/.yml/.json ファイルを再帰的に検証します。
        違反件数と、ファイルごとのリンター出力を返します。

        Args:
            files: 検証するファイルのリスト。相対パスはinput_dir基準。
            input_dir: 検証対象ディレクトリ。省略時はサーバー設定値。
            ruleset: ルールセットのパスまたはURL。省略時はサーバー設定値。
            format: リンターの出力形式（text, json, junit 等）。
            verbose: リンターに --verbose を渡す。
        """
        request = ValidationRequest(
            input_dir=Path(input_dir) if input_dir else config.input_dir,
            files=files or [],
            ruleset=ruleset if ruleset is not None else config.ruleset,
            format=format if format is not None else config.format,
            verbose=verbose,
            target_dir=config.target_dir,
        )
        try:
            result = await validation_service.validate(request)
            return {**result.model_dump(mode="json"), "has_violations": result.has_violations}
        except OaslintError as e:
            return {"error": type(e).__name__, "message": str(e)}

    @mcp.tool()
    async def detect_linter_platform() -> dict[str, Any]:
        """サーバーホストのプラットフォームと同梱リンターの有無を返す。"""
        return {
            "variant": resolver.variant,
            "resource_path": str(resolver.resource_path),
            "available": resolver.resource_path.is_file(),
        }
