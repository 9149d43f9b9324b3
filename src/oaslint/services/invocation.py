"""リンターのコマンドライン組み立て。"""

import logging
from pathlib import Path

from oaslint.models.validation import LinterInvocation

logger = logging.getLogger(__name__)

_URL_PREFIXES = ("http://", "https://")


def resolve_ruleset(ruleset: str | None) -> str | None:
    """--ruleset に渡す値を決定する。

    URLはそのまま、存在するローカルファイルは絶対パスに変換する。
    どちらでもない場合は None を返し、リンターの既定ルールセットに任せる。
    """
    if ruleset is None:
        logger.info("No ruleset specified, using linter default rules")
        return None

    logger.info("Using ruleset: %s", ruleset)
    if ruleset.startswith(_URL_PREFIXES):
        logger.debug("Using custom ruleset URL: %s", ruleset)
        return ruleset

    path = Path(ruleset)
    if path.is_file():
        absolute = str(path.resolve())
        logger.debug("Using custom ruleset file: %s", absolute)
        return absolute

    logger.warning("Specified ruleset file does not exist: %s, using linter default rules", ruleset)
    return None


def build_invocation(
    executable: Path,
    target: Path,
    ruleset: str | None = None,
    output_format: str | None = None,
    verbose: bool = False,
) -> LinterInvocation:
    """1ファイル分のリンター呼び出しを組み立てる。

    引数の順序は `lint [--ruleset X] [--format F] [--verbose] <file>` で固定。
    """
    args = ["lint"]

    resolved_ruleset = resolve_ruleset(ruleset)
    if resolved_ruleset is not None:
        args.extend(["--ruleset", resolved_ruleset])

    if output_format is not None and output_format.strip():
        args.extend(["--format", output_format])

    if verbose:
        args.append("--verbose")

    args.append(str(target.resolve()))
    return LinterInvocation(executable=executable, target=target, args=args)
