"""대화 요약 서비스 (순수 LLM 호출만)

버퍼 접근 로직 없음 - 파이프라인이 drain해서 이어 붙인 텍스트를 받아 LLM 호출만 수행
"""
from langchain_core.messages import SystemMessage, HumanMessage
from langsmith import traceable
import logging

from ..core.errors import ProviderError
from ..prompt.summary_prompt import DAILY_DIGEST_SYSTEM_PROMPT, DAILY_DIGEST_USER_PROMPT

logger = logging.getLogger(__name__)


class LLMSummarizer:
    """langchain 채팅 모델 기반 Summarizer

    Args:
        llm: `ainvoke(messages)`를 지원하는 langchain 채팅 모델
        provider: 로그 / 에러 메시지용 이름
    """

    def __init__(self, llm, provider: str = "openai"):
        self.llm = llm
        self.provider = provider

    @traceable(name="summarize_daily_conversation")
    async def summarize(self, text: str) -> str:
        try:
            response = await self.llm.ainvoke([
                SystemMessage(content=DAILY_DIGEST_SYSTEM_PROMPT),
                HumanMessage(content=DAILY_DIGEST_USER_PROMPT.format(conversation=text))
            ])
        except Exception as e:
            logger.error(f"[Summarizer] LLM 호출 실패: {e}")
            raise ProviderError(self.provider, f"LLM 호출 실패: {e}") from e

        content = getattr(response, "content", None)
        if not isinstance(content, str) or not content.strip():
            logger.error(f"[Summarizer] 비정상 응답: {content!r}")
            raise ProviderError(self.provider, "빈 응답 또는 비정상 응답 포맷")

        summary = content.strip()
        logger.info(f"[Summarizer] 요약 생성 완료 (입력 {len(text)}자 → 출력 {len(summary)}자)")
        return summary
