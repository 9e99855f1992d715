from blockkit_builder.components.elements import overflow
from blockkit_builder.components.options import (
    SectionBlockOptions,
    SectionWithOverflowOptions,
)
from blockkit_builder.components.text import markdown_element
from blockkit_builder.components.types import SectionBlock


def section_block(options: SectionBlockOptions) -> SectionBlock:
    """
    마크다운 텍스트 섹션 블록을 생성합니다.

    block_id, accessory 는 값이 있을 때만 포함합니다.

    accessory:
    - UrlButton
    - ValueButton
    - ActionButton
    - Overflow

    # Example
    {
        "type": "section",
        "text": {"type": "mrkdwn", "text": "This is a section block with a button."},
        "block_id": "section_block",
        "accessory": { <-- This is the accessory block
            "type": "button",
            "text": {"type": "plain_text", "text": "Click Me", "emoji": True},
            "value": "click_me_123",
            "action_id": "button-action",
        },
    }
    """
    section: SectionBlock = {
        "type": "section",
        "text": markdown_element(options.text),
    }
    if options.block_id:
        section["block_id"] = options.block_id
    if options.accessory:
        section["accessory"] = options.accessory  # type: ignore
    return section


def section_with_overflow(options: SectionWithOverflowOptions) -> SectionBlock:
    """오버플로우 메뉴가 달린 섹션 블록을 생성합니다."""
    return section_block(
        SectionBlockOptions(
            text=options.label,
            block_id=options.block_id,
            accessory=overflow(options.options, options.action_id),  # type: ignore
        )
    )
