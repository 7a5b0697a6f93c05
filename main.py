from fastapi import FastAPI, Request
from fastapi.responses import Response
from datetime import datetime
from typing import Optional
from zoneinfo import ZoneInfo
import asyncio
import logging
from dotenv import load_dotenv

from line_digest.config import Settings, load_settings
from line_digest.core import DailyBuffer, EventClassifier, EventPipeline, ProviderError
from line_digest.core.schemas import WebhookBody
from line_digest.helpers.models import get_summary_llm
from line_digest.service import LLMSummarizer, LineReplyClient, build_sink

# 환경 변수 로드
load_dotenv()

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


def build_pipeline(settings) -> EventPipeline:
    """설정으로부터 버퍼와 collaborator를 생성해 파이프라인 조립"""
    tz = ZoneInfo(settings.timezone)
    buffer = DailyBuffer(
        day=datetime.now(tz).date(),
        max_entries=settings.buffer_max_entries,
    )
    summarizer = LLMSummarizer(get_summary_llm(settings), provider=settings.summary_provider)
    sink = build_sink(settings)
    return EventPipeline(
        buffer=buffer,
        classifier=EventClassifier(settings.trigger_phrase),
        summarizer=summarizer,
        sink=sink,
        tz=tz,
    )


def create_app(
    pipeline: Optional[EventPipeline] = None,
    reply_client: Optional[LineReplyClient] = None,
    settings: Optional[Settings] = None,
) -> FastAPI:
    """FastAPI 앱 생성

    pipeline이 주어지지 않으면 startup 시점에 settings(없으면 환경 변수)로 조립합니다.
    """
    app = FastAPI(title="LINE daily digest bot")
    app.state.settings = settings
    app.state.pipeline = pipeline
    app.state.reply_client = reply_client

    @app.on_event("startup")
    async def startup_event():
        if app.state.pipeline is None:
            if app.state.settings is None:
                app.state.settings = load_settings()
            app.state.pipeline = build_pipeline(app.state.settings)
            if app.state.settings.channel_access_token:
                app.state.reply_client = LineReplyClient(app.state.settings.channel_access_token)
        if app.state.settings is not None:
            logging.getLogger().setLevel(app.state.settings.log_level.upper())
        logger.info(
            f"✅ 파이프라인 초기화 완료 (buffer day={app.state.pipeline.buffer.current_day().isoformat()})"
        )

    @app.on_event("shutdown")
    async def shutdown_event():
        if app.state.pipeline is not None:
            app.state.pipeline.buffer.close()
        if app.state.reply_client is not None:
            await app.state.reply_client.aclose()

    async def dispatch_event(event: dict):
        """이벤트 하나를 파이프라인에 넘기고, 가능하면 LINE으로 응답 전송"""
        result = await app.state.pipeline.handle(event)

        reply_token = event.get("replyToken") if isinstance(event, dict) else None
        if result is not None and app.state.reply_client is not None and reply_token:
            try:
                await app.state.reply_client.reply(reply_token, result)
            except ProviderError as e:
                logger.warning(f"[Webhook] 응답 전송 실패: {e}")

        return result

    @app.get("/api/status")
    async def get_status():
        """서버 상태 확인"""
        buffer = app.state.pipeline.buffer
        return {
            "status": "running",
            "day": buffer.current_day().isoformat(),
            "entries": len(buffer),
        }

    @app.post("/webhook")
    async def webhook(request: Request):
        """LINE webhook 엔드포인트 (서명 검증은 upstream에서 처리)"""
        try:
            body = WebhookBody.model_validate(await request.json())
            results = await asyncio.gather(*(dispatch_event(event) for event in body.events))
        except Exception as e:
            logger.exception(f"[Webhook] 이벤트 처리 중 예기치 못한 오류: {e}")
            return Response(status_code=500)

        return list(results)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    settings = load_settings()
    uvicorn.run(create_app(settings=settings), host="0.0.0.0", port=settings.port)
