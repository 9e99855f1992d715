from blockkit_builder.components.text import plain_text_element
from blockkit_builder.components.types import (
    ActionsBlock,
    Attachment,
    Block,
    Button,
    DividerBlock,
    HeaderBlock,
)
from blockkit_builder.constants import HEADER_TEXT_MAX_LENGTH
from blockkit_builder.exception import ValidationError
from blockkit_builder.logging import log_event


def actions(buttons: list[Button]) -> ActionsBlock:
    """버튼들을 한 줄로 담은 액션 블록을 생성합니다."""
    return {
        "type": "actions",
        "elements": buttons,
    }


def text_length(text: str) -> int:
    """UTF-16 코드 유닛 기준으로 글자 수를 셉니다."""
    return len(text.encode("utf-16-le")) // 2


def header_block(label: str) -> HeaderBlock:
    """
    헤더 블록을 생성합니다.

    label 이 150자를 넘으면 ValidationError 가 발생합니다.
    이모지처럼 BMP 밖의 문자는 2자로 셉니다.
    """
    length = text_length(label)
    if length > HEADER_TEXT_MAX_LENGTH:
        log_event(
            actor=None,
            event="header_block",
            type="validation_error",
            description="헤더 글자 수 초과",
            body={"length": length, "max_length": HEADER_TEXT_MAX_LENGTH},
        )
        raise ValidationError(
            f"must be less than {HEADER_TEXT_MAX_LENGTH + 1} characters"
        )
    return {
        "type": "header",
        "text": plain_text_element(label),
    }


def divider() -> DividerBlock:
    """구분선 블록을 생성합니다."""
    return {"type": "divider"}


def blocks() -> list[Block]:
    """블록을 담을 빈 리스트를 생성합니다."""
    return []


def attachments() -> list[Attachment]:
    """첨부를 담을 빈 리스트를 생성합니다."""
    return []
