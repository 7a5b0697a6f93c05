from typing import Dict, Any


def text_message(text: str) -> Dict[str, Any]:
    """LINE 텍스트 메시지 오브젝트"""
    return {
        "type": "text",
        "text": text
    }


def reply_request(reply_token: str, message: Dict[str, Any]) -> Dict[str, Any]:
    """LINE reply API 요청 바디"""
    return {
        "replyToken": reply_token,
        "messages": [message]
    }
