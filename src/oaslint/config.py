"""oaslintの設定管理。"""

from pathlib import Path

from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, YamlConfigSettingsSource

from oaslint.models.validation import PlatformVariant, ValidationRequest

_PACKAGE_ROOT = Path(__file__).parent


class RunnerConfig(BaseSettings):
    """バリデーション実行設定。

    優先順位は 初期化引数 > 環境変数(OASLINT_*) > カレントディレクトリの oaslint.yaml。
    """

    model_config = {"env_prefix": "OASLINT_", "yaml_file": "oaslint.yaml"}

    input_dir: Path = Path("src/main/resources/openapi")
    files: list[str] = []
    ruleset: str | None = ".spectral.yaml"
    format: str = "text"
    output_file: Path | None = None
    verbose: bool = False
    skip: bool = False
    fail_on_violations: bool = True

    # リンター展開先（ビルドの作業ディレクトリ）
    target_dir: Path = Path("target")
    resources_dir: Path = _PACKAGE_ROOT / "resources"
    # 未指定時はホストから判定
    platform: PlatformVariant | None = None
    timeout: float = 60

    # MCPサーバー
    host: str = "0.0.0.0"
    port: int = 8000
    url_token: str = ""

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (init_settings, env_settings, YamlConfigSettingsSource(settings_cls))

    def to_request(self) -> ValidationRequest:
        """設定値からValidationRequestを組み立てる。"""
        return ValidationRequest(
            input_dir=self.input_dir,
            files=list(self.files),
            ruleset=self.ruleset,
            format=self.format,
            output_file=self.output_file,
            verbose=self.verbose,
            target_dir=self.target_dir,
        )
