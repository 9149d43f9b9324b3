"""ビルド工程としてのバリデーション実行。"""

import logging

from oaslint.config import RunnerConfig
from oaslint.models.errors import ViolationsFoundError
from oaslint.models.validation import ValidationResult
from oaslint.services.validation import ValidationService

logger = logging.getLogger(__name__)


class BuildStep:
    """設定に従ってバリデーションを実行し、ビルドの成否を判定する。"""

    def __init__(self, service: ValidationService, config: RunnerConfig) -> None:
        self._service = service
        self._config = config

    async def execute(self) -> ValidationResult | None:
        """バリデーションを実行する。

        Returns:
            バリデーション結果。skip指定時はNone。

        Raises:
            ViolationsFoundError: 違反があり、fail_on_violationsが有効な場合。
            OaslintError: リンターの展開・実行に失敗した場合。
        """
        if self._config.skip:
            logger.info("OpenAPI validation is skipped.")
            return None

        logger.info("Starting OpenAPI validation...")
        result = await self._service.validate(self._config.to_request())

        if result.has_violations and self._config.fail_on_violations:
            raise ViolationsFoundError(result.violation_count)

        if result.has_violations:
            logger.warning("OpenAPI validation completed with %d violations.", result.violation_count)
        else:
            logger.info("OpenAPI validation completed successfully with no violations.")
        return result
