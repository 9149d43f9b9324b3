"""oaslintのコマンドラインインターフェース。"""

import argparse
import asyncio
import logging
import sys
from typing import Any

from oaslint.config import RunnerConfig
from oaslint.models.errors import OaslintError, ViolationsFoundError
from oaslint.services.build_step import BuildStep
from oaslint.services.resolver import ExecutableResolver
from oaslint.services.runner import ProcessRunner
from oaslint.services.validation import ValidationService
from oaslint.utils.logging_utils import configure_split_stream_logging

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_VIOLATIONS = 1
EXIT_EXECUTION_ERROR = 2


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="oaslint",
        description="Validate OpenAPI documents with the bundled linter",
    )
    sub = parser.add_subparsers(dest="command")

    validate = sub.add_parser("validate", help="Validate OpenAPI files (default)")
    _add_validate_arguments(validate)

    serve = sub.add_parser("serve", help="Run the MCP server")
    serve.add_argument("--host", default=None)
    serve.add_argument("--port", type=int, default=None)

    return parser


def _add_validate_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--input-dir", dest="input_dir", default=None, help="Directory scanned for OpenAPI files")
    parser.add_argument(
        "--file",
        dest="files",
        action="append",
        default=None,
        help="OpenAPI file to validate (repeatable, overrides directory scan)",
    )
    parser.add_argument("--ruleset", default=None, help="Ruleset file path or URL")
    parser.add_argument("--format", default=None, help="Linter output format (text, json, junit, ...)")
    parser.add_argument("--output-file", dest="output_file", default=None, help="Write linter output to this file")
    parser.add_argument("--target-dir", dest="target_dir", default=None, help="Directory the linter is extracted into")
    parser.add_argument("--verbose", action="store_true", default=None)
    parser.add_argument("--skip", action="store_true", default=None)
    parser.add_argument(
        "--no-fail-on-violations",
        dest="fail_on_violations",
        action="store_false",
        default=None,
        help="Only warn when violations are found",
    )


def _config_from_args(args: argparse.Namespace, keys: tuple[str, ...]) -> RunnerConfig:
    """未指定の引数を除き、環境変数・YAML設定に重ねてRunnerConfigを作る。"""
    overrides: dict[str, Any] = {}
    for key in keys:
        value = getattr(args, key, None)
        if value is not None:
            overrides[key] = value
    return RunnerConfig(**overrides)


async def run_validate(config: RunnerConfig) -> int:
    """バリデーションを実行し、終了ステータスを返す。"""
    resolver = ExecutableResolver(resources_dir=config.resources_dir, variant=config.platform)
    service = ValidationService(resolver=resolver, runner=ProcessRunner(timeout=config.timeout))
    step = BuildStep(service, config)
    try:
        await step.execute()
    except ViolationsFoundError as e:
        logger.error("%s", e)
        return EXIT_VIOLATIONS
    except OaslintError as e:
        logger.error("Failed to execute OpenAPI validation: %s", e)
        return EXIT_EXECUTION_ERROR
    return EXIT_OK


def serve(config: RunnerConfig) -> None:
    """MCPサーバーを起動する。"""
    import uvicorn
    from starlette.middleware import Middleware

    from oaslint.middleware import TokenAuthMiddleware
    from oaslint.server import create_server

    mcp = create_server(config)
    app = mcp.http_app(
        transport="streamable-http",
        middleware=[Middleware(TokenAuthMiddleware, url_token=config.url_token)],
    )
    uvicorn.run(app, host=config.host, port=config.port)


def main(argv: list[str] | None = None) -> int:
    """CLIのエントリポイント。"""
    parser = _build_parser()
    known_commands = ("validate", "serve", "-h", "--help")
    if argv is None:
        argv = sys.argv[1:]
    if not argv or argv[0] not in known_commands:
        argv = ["validate", *argv]
    args = parser.parse_args(argv)

    if args.command == "serve":
        configure_split_stream_logging()
        serve(_config_from_args(args, ("host", "port")))
        return EXIT_OK

    config = _config_from_args(
        args,
        (
            "input_dir",
            "files",
            "ruleset",
            "format",
            "output_file",
            "target_dir",
            "verbose",
            "skip",
            "fail_on_violations",
        ),
    )
    configure_split_stream_logging(level=logging.DEBUG if config.verbose else logging.INFO)
    return asyncio.run(run_validate(config))
