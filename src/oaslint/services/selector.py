"""バリデーション対象ファイルの選定。"""

import logging
from pathlib import Path

logger = logging.getLogger(__name__)

# OpenAPIドキュメントとみなす拡張子（小文字で比較）
OPENAPI_EXTENSIONS = (".yaml", ".yml", ".json")


def is_openapi_file(path: Path) -> bool:
    """拡張子からOpenAPIドキュメントらしいファイルか判定する。"""
    return path.name.lower().endswith(OPENAPI_EXTENSIONS)


def _scan_directory(directory: Path, result: list[Path]) -> None:
    """ディレクトリを深さ優先で走査し、OpenAPIファイルを収集する。"""
    for entry in directory.iterdir():
        if entry.is_dir():
            _scan_directory(entry, result)
        elif entry.is_file() and is_openapi_file(entry):
            result.append(entry.resolve())


def select_files(input_dir: Path | None, files: list[str] | None = None) -> list[Path]:
    """バリデーション対象ファイルを決定する。

    明示的なファイル指定がある場合はそれを優先し、存在しないファイルは
    警告を出してスキップする。指定がない場合は input_dir を再帰的に走査する。

    Args:
        input_dir: 走査対象ディレクトリ。相対パス指定の基準にもなる。
        files: 明示的なファイル名・パスのリスト。

    Returns:
        対象ファイルの絶対パスのリスト。該当なしの場合は空リスト。
    """
    selected: list[Path] = []

    if files:
        base = input_dir if input_dir is not None else Path.cwd()
        for name in files:
            path = Path(name)
            if not path.is_absolute():
                path = base / path
            if path.is_file():
                selected.append(path.resolve())
            else:
                logger.warning("Specified file not found: %s", path)
    elif input_dir is not None and input_dir.is_dir():
        _scan_directory(input_dir, selected)

    return selected
