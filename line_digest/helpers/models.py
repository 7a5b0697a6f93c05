from langchain_openai import ChatOpenAI
from langchain_google_vertexai import ChatVertexAI
from ..config.config import (
    SUMMARY_TEMPERATURE,
    SUMMARY_MAX_TOKENS,
    SUMMARY_TIMEOUT,
)


# OpenAI 요약 모델 설정 (api_key는 Settings에서 주입)
OPENAI_SUMMARY_CONFIG = {
    "temperature": SUMMARY_TEMPERATURE,
    "max_tokens": SUMMARY_MAX_TOKENS,
    "timeout": SUMMARY_TIMEOUT,
}

# Vertex AI 요약 모델 설정 (credentials는 환경변수에서 자동 로드)
VERTEX_SUMMARY_CONFIG = {
    "temperature": SUMMARY_TEMPERATURE,
    "max_output_tokens": SUMMARY_MAX_TOKENS,
    # Vertex AI는 timeout 대신 request_timeout 사용 (선택적)
}


# =============================================================================
# LLM 인스턴스 캐싱 (싱글톤 패턴)
# =============================================================================

_cached_summary_llm = None


def get_summary_llm(settings):
    """요약용 LLM 인스턴스 반환 (캐시됨)

    Args:
        settings: Settings (summary_provider, summary_model_name, openai_api_key)
    """
    global _cached_summary_llm
    if _cached_summary_llm is None:
        if settings.summary_provider == "vertexai":
            _cached_summary_llm = ChatVertexAI(
                model_name=settings.summary_model_name,
                **VERTEX_SUMMARY_CONFIG,
            )
        else:
            _cached_summary_llm = ChatOpenAI(
                model=settings.summary_model_name,
                api_key=settings.openai_api_key,
                **OPENAI_SUMMARY_CONFIG,
            )
    return _cached_summary_llm
