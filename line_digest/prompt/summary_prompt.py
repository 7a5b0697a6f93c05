# =============================================================================
# Daily Digest (당일 대화 정리)
# =============================================================================

DAILY_DIGEST_SYSTEM_PROMPT = "你是專業的資料整理助手，負責簡化和摘要用戶提供的資料。"

DAILY_DIGEST_USER_PROMPT = """整理以下對話內容：

{conversation}"""
