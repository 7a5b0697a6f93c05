"""외부 collaborator 어댑터 (요약, 저장, 응답 전송)"""
from .summarizer import LLMSummarizer
from .sinks import GoogleDocsSink, SupabaseSink, build_sink
from .line_reply import LineReplyClient

__all__ = [
    "LLMSummarizer",
    "GoogleDocsSink",
    "SupabaseSink",
    "build_sink",
    "LineReplyClient",
]
