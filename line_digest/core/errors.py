"""도메인 에러 타입

Collaborator 어댑터는 ProviderError를 던지고, 파이프라인이 이를
SummarizationFailed / SinkWriteFailed로 바꾼 뒤 응답 텍스트로 변환합니다.
그 밖에 핸들러 밖으로 나가는 예외는 예기치 못한 오류로 취급합니다.
"""


class DigestError(Exception):
    """예상 가능한 (도메인) 실패의 기본 클래스"""


class ConfigError(DigestError):
    """startup 시점의 설정 누락 / 설정 오류"""


class ProviderError(DigestError):
    """외부 provider가 에러 또는 비정상 응답을 반환"""

    def __init__(self, provider: str, message: str):
        super().__init__(f"[{provider}] {message}")
        self.provider = provider


class CollaboratorFailed(DigestError):
    """버퍼 drain 이후 collaborator 호출 실패

    Attributes:
        lost_entries: 이번 트리거에서 drain되어 유실된 엔트리 수
        cause: 원인이 된 ProviderError
    """

    def __init__(self, lost_entries: int, cause: ProviderError):
        super().__init__(f"{type(self).__name__}: {cause} (lost_entries={lost_entries})")
        self.lost_entries = lost_entries
        self.cause = cause


class SummarizationFailed(CollaboratorFailed):
    pass


class SinkWriteFailed(CollaboratorFailed):
    pass
