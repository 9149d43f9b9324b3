"""FastMCPベースのMCPサーバーエントリポイント。"""

from fastmcp import FastMCP
from starlette.requests import Request
from starlette.responses import JSONResponse

from oaslint.config import RunnerConfig
from oaslint.services.resolver import ExecutableResolver
from oaslint.services.runner import ProcessRunner
from oaslint.services.validation import ValidationService
from oaslint.tools.validation import register_validation_tools


def create_server(config: RunnerConfig | None = None) -> FastMCP:
    """oaslint MCPサーバーを作成し、ツールを登録する。

    Args:
        config: 実行設定。Noneの場合はデフォルト設定を使用。

    Returns:
        設定済みのFastMCPインスタンス。
    """
    if config is None:
        config = RunnerConfig()

    mcp = FastMCP("oaslint")

    resolver = ExecutableResolver(resources_dir=config.resources_dir, variant=config.platform)
    validation_service = ValidationService(resolver=resolver, runner=ProcessRunner(timeout=config.timeout))

    register_validation_tools(mcp, validation_service, resolver, config)

    @mcp.custom_route("/health", methods=["GET"])
    async def health_check(request: Request) -> JSONResponse:
        # リンター未配置時も 200 のまま degraded を返す
        available = resolver.resource_path.is_file()
        return JSONResponse(
            {
                "status": "ok" if available else "degraded",
                "variant": resolver.variant,
                "linter_available": available,
            }
        )

    return mcp
