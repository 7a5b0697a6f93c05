# 요약 모델 설정 (OpenAI 기본, Vertex AI 선택)
SUMMARY_PROVIDER = "openai"
SUMMARY_MODEL_NAME = "gpt-4"
# SUMMARY_MODEL_NAME = "gemini-2.5-flash-lite"  # Vertex AI
SUMMARY_TEMPERATURE = 0.0
SUMMARY_MAX_TOKENS = 150
SUMMARY_TIMEOUT = 30.0

# Sink 설정
SINK_TYPE = "google_docs"
GOOGLE_DOCS_SCOPES = ["https://www.googleapis.com/auth/documents"]
SUPABASE_TABLE = "daily_summaries"

# LINE Messaging API
LINE_REPLY_ENDPOINT = "https://api.line.me/v2/bot/message/reply"
LINE_REPLY_TIMEOUT = 10.0

# 서버
DEFAULT_PORT = 3000
