"""LINE reply API 클라이언트 (CHANNEL_ACCESS_TOKEN이 있을 때만 사용)"""
import logging

import httpx

from ..config.config import LINE_REPLY_ENDPOINT, LINE_REPLY_TIMEOUT
from ..core.errors import ProviderError
from ..helpers.response_formatter import reply_request

logger = logging.getLogger(__name__)


class LineReplyClient:
    def __init__(self, channel_access_token: str, client: httpx.AsyncClient = None):
        self.channel_access_token = channel_access_token
        self.client = client or httpx.AsyncClient(timeout=LINE_REPLY_TIMEOUT)

    async def reply(self, reply_token: str, message: dict) -> None:
        try:
            resp = await self.client.post(
                LINE_REPLY_ENDPOINT,
                json=reply_request(reply_token, message),
                headers={"Authorization": f"Bearer {self.channel_access_token}"},
            )
        except httpx.HTTPError as e:
            raise ProviderError("line", f"reply 요청 실패: {e}") from e

        if resp.status_code != 200:
            raise ProviderError("line", f"reply 응답 {resp.status_code}: {resp.text[:200]}")

        logger.info("[LineReply] 응답 전송 완료")

    async def aclose(self) -> None:
        await self.client.aclose()
