"""MCPエンドポイントのトークン認証。"""

import hmac

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import JSONResponse, Response
from starlette.types import ASGIApp

# CIランナーのプロキシがAuthorizationを書き換える環境向けの専用ヘッダー
TOKEN_HEADER = "x-oaslint-token"

# 監視用に認証なしで公開するパス
PUBLIC_PATHS = frozenset({"/health"})


def request_token(request: Request) -> str:
    """リクエストからトークンを取り出す。

    X-Oaslint-Token ヘッダー、Bearer トークン、token クエリパラメータの順に参照する。
    """
    token = request.headers.get(TOKEN_HEADER)
    if token:
        return token.strip()
    scheme, _, credentials = request.headers.get("authorization", "").partition(" ")
    if scheme.lower() == "bearer" and credentials:
        return credentials.strip()
    return request.query_params.get("token", "")


class TokenAuthMiddleware(BaseHTTPMiddleware):
    """OASLINT_URL_TOKEN を設定した場合に公開パス以外でトークンを要求する。"""

    def __init__(self, app: ASGIApp, url_token: str = "") -> None:
        super().__init__(app)
        self.url_token = url_token

    def _authorized(self, request: Request) -> bool:
        return hmac.compare_digest(request_token(request).encode(), self.url_token.encode())

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        if self.url_token and request.url.path not in PUBLIC_PATHS and not self._authorized(request):
            return JSONResponse(
                {"error": "Unauthorized", "message": "Invalid or missing oaslint token"},
                status_code=401,
                headers={"WWW-Authenticate": 'Bearer realm="oaslint"'},
            )
        return await call_next(request)
