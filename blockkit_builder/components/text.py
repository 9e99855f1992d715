from blockkit_builder.components.types import MrkdwnText, PlainText


def plain_text_element(value: str) -> PlainText:
    """
    플레인 텍스트 요소를 생성합니다.

    # Example
    {"type": "plain_text", "text": "글 제출하기", "emoji": True}
    """
    return {
        "type": "plain_text",
        "text": value,
        "emoji": True,
    }


def markdown_element(value: str) -> MrkdwnText:
    """
    마크다운 텍스트 요소를 생성합니다.

    # Example
    {"type": "mrkdwn", "text": "*굵은 글씨*"}
    """
    return {
        "type": "mrkdwn",
        "text": value,
    }
