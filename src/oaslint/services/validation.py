"""OpenAPIドキュメントのバリデーションを実行するサービス。"""

import logging
from pathlib import Path

from oaslint.models.errors import OutputWriteError
from oaslint.models.validation import FileValidationResult, ValidationRequest, ValidationResult
from oaslint.services.invocation import build_invocation
from oaslint.services.resolver import ExecutableResolver
from oaslint.services.runner import ProcessRunner
from oaslint.services.selector import select_files
from oaslint.services.violations import count_violations

logger = logging.getLogger(__name__)


class ValidationService:
    """同梱リンターを使ってOpenAPIファイルを1件ずつ検証する。"""

    def __init__(self, resolver: ExecutableResolver, runner: ProcessRunner) -> None:
        self._resolver = resolver
        self._runner = runner

    async def validate(self, request: ValidationRequest) -> ValidationResult:
        """対象ファイルを順に検証し、結果を集計する。

        リンターは実行ごとに1回だけ展開する。いずれかのファイルで
        致命的エラーが発生した場合は以降のファイルを処理せずに送出する。

        Args:
            request: バリデーション要求。

        Returns:
            全ファイルの違反件数と出力を集計した結果。

        Raises:
            ResourceNotFoundError: 同梱リンターが見つからない場合。
            ExtractionFailedError: リンターの展開に失敗した場合。
            ExecutionTimeoutError: リンターの実行がタイムアウトした場合。
            ExecutionFailedError: リンターの起動に失敗した場合。
            OutputWriteError: 出力ファイルに書き込めなかった場合。
        """
        executable = self._resolver.extract(request.target_dir)

        files = select_files(request.input_dir, request.files)
        if not files:
            logger.warning("No OpenAPI files found to validate")
            return ValidationResult()

        logger.info("Validating %d OpenAPI file(s)", len(files))

        total_violations = 0
        outputs: list[str] = []
        file_results: list[FileValidationResult] = []

        for file in files:
            logger.info("Validating: %s", file)
            invocation = build_invocation(
                executable,
                file,
                ruleset=request.ruleset,
                output_format=request.format,
                verbose=request.verbose,
            )
            proc = await self._runner.run(invocation.command)

            if proc.output.strip():
                logger.info("Linter output:\n%s", proc.output)

            violations = count_violations(proc.output, proc.exit_code, request.format)
            total_violations += violations
            outputs.append(proc.output + "\n")
            file_results.append(
                FileValidationResult(
                    file=file,
                    exit_code=proc.exit_code,
                    violation_count=violations,
                    output=proc.output,
                )
            )

        result = ValidationResult(
            violation_count=total_violations,
            output="".join(outputs),
            files=file_results,
        )

        if request.output_file is not None:
            self._write_output(result.output, request.output_file)

        return result

    @staticmethod
    def _write_output(output: str, output_file: Path) -> None:
        """集計した出力をファイルに書き込む（既存内容は上書き）。"""
        try:
            output_file.parent.mkdir(parents=True, exist_ok=True)
            output_file.write_text(output, encoding="utf-8")
        except OSError as e:
            raise OutputWriteError(output_file) from e
        logger.info("Linter output written to: %s", output_file.resolve())
