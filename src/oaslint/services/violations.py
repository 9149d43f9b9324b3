"""リンター出力からの違反件数の推定。"""

import json
import re

# 行:列 形式の位置情報（例: "12:5"）
_LOCATION_RE = re.compile(r"\d+:\d+")

_SEVERITY_WORDS = ("error", "warning", "info")


def _count_heuristic(output: str) -> int:
    """テキスト出力から違反らしい行を数える。"""
    count = 0
    for line in output.split("\n"):
        line = line.strip()
        if any(word in line for word in _SEVERITY_WORDS) and _LOCATION_RE.search(line):
            count += 1
    return count


def _count_json(output: str) -> int | None:
    """JSON形式の出力から違反件数を数える。配列として解釈できなければ None。"""
    try:
        data = json.loads(output)
    except ValueError:
        return None
    if not isinstance(data, list):
        return None
    return len(data)


def count_violations(output: str, exit_code: int, output_format: str | None = None) -> int:
    """リンターの出力と終了コードから違反件数を推定する。

    終了コード0は常に違反0件とみなす。JSON形式の場合は結果配列の件数を使い、
    それ以外は 重大度の語と行:列 を含む行を数える。非0終了で1件も
    数えられない場合は1件とする。

    Args:
        output: リンターの結合出力。
        exit_code: リンターの終了コード。
        output_format: リンターに指定した出力形式。

    Returns:
        違反件数（0以上）。
    """
    if exit_code == 0:
        return 0

    count: int | None = None
    if output_format is not None and output_format.strip().lower() == "json":
        count = _count_json(output)
    if count is None:
        count = _count_heuristic(output)

    return count if count > 0 else 1
