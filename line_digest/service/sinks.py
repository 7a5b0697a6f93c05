"""요약 저장소 (Sink) 어댑터

- GoogleDocsSink: 문서 맨 앞(index 1)에 날짜 + 요약 삽입
- SupabaseSink: 테이블에 (timestamp, summary) 행 추가

두 SDK 모두 동기 클라이언트이므로 asyncio.to_thread로 실행합니다.
"""
import asyncio
import json
import logging

from ..config.config import GOOGLE_DOCS_SCOPES
from ..core.errors import ConfigError, ProviderError
from ..core.schemas import SummaryRecord

logger = logging.getLogger(__name__)


# =============================================================================
# Google Docs
# =============================================================================

class GoogleDocsSink:
    """Google Docs 문서에 요약을 기록

    Args:
        service: googleapiclient `docs` v1 리소스
        document_id: 대상 문서 ID
    """

    display_name = "Google Docs"

    def __init__(self, service, document_id: str):
        self.service = service
        self.document_id = document_id
        # httplib2 기반 클라이언트는 thread-safe하지 않으므로 요청을 하나씩 실행
        self._request_lock = asyncio.Lock()

    @classmethod
    def from_settings(cls, settings) -> "GoogleDocsSink":
        from google.oauth2 import service_account
        from googleapiclient.discovery import build

        try:
            info = json.loads(settings.google_service_account_json)
            credentials = service_account.Credentials.from_service_account_info(
                info, scopes=GOOGLE_DOCS_SCOPES
            )
        except ValueError as e:
            raise ConfigError(f"GOOGLE_SERVICE_ACCOUNT_JSON 형식 오류: {e}") from e

        service = build("docs", "v1", credentials=credentials, cache_discovery=False)
        return cls(service, settings.google_doc_id)

    @staticmethod
    def format_content(record: SummaryRecord) -> str:
        return f"日期: {record.day}\n\n{record.summary}\n\n"

    def _batch_update(self, content: str) -> dict:
        return self.service.documents().batchUpdate(
            documentId=self.document_id,
            body={
                "requests": [
                    {
                        "insertText": {
                            "location": {"index": 1},
                            "text": content,
                        }
                    }
                ]
            },
        ).execute()

    async def write(self, record: SummaryRecord) -> None:
        content = self.format_content(record)
        try:
            async with self._request_lock:
                response = await asyncio.to_thread(self._batch_update, content)
        except Exception as e:
            logger.error(f"[GoogleDocsSink] 문서 기록 실패: {e}")
            raise ProviderError("google_docs", f"batchUpdate 실패: {e}") from e

        if not isinstance(response, dict) or response.get("documentId") != self.document_id:
            logger.error(f"[GoogleDocsSink] 비정상 응답: {response!r}")
            raise ProviderError("google_docs", "batchUpdate 응답 포맷 오류")

        logger.info(f"[GoogleDocsSink] 문서 기록 완료: {record.day}")


# =============================================================================
# Supabase (tabular)
# =============================================================================

class SupabaseSink:
    """Supabase 테이블에 요약 행을 추가

    Args:
        client: supabase Client
        table: 대상 테이블명 (컬럼: timestamp, summary)
    """

    display_name = "Supabase"

    def __init__(self, client, table: str):
        self.client = client
        self.table = table

    @classmethod
    def from_settings(cls, settings) -> "SupabaseSink":
        from supabase import create_client

        client = create_client(settings.supabase_url, settings.supabase_anon_key)
        logger.info("[SupabaseSink] Supabase 클라이언트 초기화 성공")
        return cls(client, settings.supabase_table)

    def _insert(self, record: SummaryRecord):
        return self.client.table(self.table).insert({
            "timestamp": record.timestamp,
            "summary": record.summary,
        }).execute()

    async def write(self, record: SummaryRecord) -> None:
        try:
            response = await asyncio.to_thread(self._insert, record)
        except Exception as e:
            logger.error(f"[SupabaseSink] 요약 저장 실패: {e}")
            raise ProviderError("supabase", f"insert 실패: {e}") from e

        if not getattr(response, "data", None):
            logger.error(f"[SupabaseSink] 빈 응답: {response!r}")
            raise ProviderError("supabase", "insert 응답에 데이터 없음")

        logger.info(f"[SupabaseSink] 요약 저장 완료: {record.day}")


def build_sink(settings):
    """SINK_TYPE에 맞는 Sink 생성"""
    if settings.sink_type == "supabase":
        return SupabaseSink.from_settings(settings)
    return GoogleDocsSink.from_settings(settings)
