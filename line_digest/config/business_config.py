"""애플리케이션 전역 상수 정의

이 파일에 정의된 상수를 변경하면 전체 시스템에 반영됩니다.
"""

# =============================================================================
# 트리거 관련 상수
# =============================================================================

TRIGGER_PHRASE = "整理"
"""당일 버퍼를 요약으로 flush하는 트리거 문구
- 정확히 일치할 때만 트리거 (trim, 대소문자 변환 없음)
- TRIGGER_PHRASE 환경 변수로 변경 가능
"""

# =============================================================================
# 일일 버퍼 관련 상수
# =============================================================================

DIGEST_TIMEZONE = "UTC"
"""이벤트 timestamp에서 날짜 키를 계산할 때 쓰는 시간대"""

BUFFER_MAX_ENTRIES = 0
"""하루에 보관하는 최대 엔트리 수 (0 = 무제한)
- 한도를 넘으면 가장 오래된 엔트리부터 삭제
"""

# =============================================================================
# 응답 문구
# =============================================================================

REPLY_NOTHING_TO_SUMMARIZE = "今天沒有可整理的對話內容。"
REPLY_COMPLETED = "已完成當天資料整理並保存至 {destination}。"
REPLY_SUMMARIZATION_FAILED = (
    "資料整理失敗：摘要服務暫時無法使用。"
    "本次已取出的 {count} 則對話內容已遺失，無法復原。"
)
REPLY_SINK_WRITE_FAILED = (
    "資料整理失敗：摘要已產生但無法保存至文件。"
    "本次已取出的 {count} 則對話內容已遺失，無法復原。"
)
