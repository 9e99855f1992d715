from typing import Any

from blockkit_builder.components.options import (
    ActionButtonOptions,
    CheckboxesOptions,
    PlainTextInputElementOptions,
    StaticSelectOptions,
    UrlButtonOptions,
    ValueButtonOptions,
)
from blockkit_builder.components.text import plain_text_element
from blockkit_builder.components.types import (
    ActionButton,
    Checkboxes,
    MultiUsersSelect,
    Option,
    Overflow,
    PlainTextInput,
    StaticSelect,
    UrlButton,
    ValueButton,
)


def option(text: str, value: str) -> Option:
    """선택지를 생성합니다."""
    return {
        "text": plain_text_element(text),
        "value": value,
    }


def options(values: list[str]) -> list[Option]:
    """표시 텍스트와 값이 같은 선택지 목록을 생성합니다."""
    return [option(value, value) for value in values]


def url_button(options: UrlButtonOptions) -> UrlButton:
    """
    링크 버튼을 생성합니다. value 는 포함하지 않습니다.

    # Example
    {
        "type": "button",
        "text": {"type": "plain_text", "text": "글 보러가기", "emoji": True},
        "url": "https://example.com",
        "action_id": "open_link",
    }
    """
    return {
        "type": "button",
        "text": plain_text_element(options.label),
        "url": options.url,
        "action_id": options.action_id,
    }


def value_button(options: ValueButtonOptions) -> ValueButton:
    """값 버튼을 생성합니다. url, action_id 는 포함하지 않습니다."""
    return {
        "type": "button",
        "text": plain_text_element(options.label),
        "value": options.value,
    }


def action_button(options: ActionButtonOptions) -> ActionButton:
    """값과 action_id 를 가진 액션 버튼을 생성합니다."""
    return {
        "type": "button",
        "text": plain_text_element(options.label),
        "value": options.value,
        "action_id": options.action_id,
    }


def checkboxes(options: CheckboxesOptions) -> Checkboxes:
    """
    체크박스 그룹을 생성합니다.

    initial_options 는 비어있지 않을 때만 포함합니다.
    """
    element: Checkboxes = {
        "type": "checkboxes",
        "options": options.options,  # type: ignore
        "action_id": options.action_id,
    }

    # 빈 배열을 initial_options 로 보내면 슬랙이 거부합니다.
    if options.initial_options:
        element["initial_options"] = options.initial_options  # type: ignore

    return element


def static_select(options: StaticSelectOptions) -> StaticSelect:
    """
    단일 선택 드롭다운을 생성합니다.

    # Example
    {
        "type": "static_select",
        "placeholder": {"type": "plain_text", "text": "카테고리 선택", "emoji": True},
        "options": [
            {
                "text": {"type": "plain_text", "text": "기술 & 언어", "emoji": True},
                "value": "기술 & 언어",
            },
        ],
        "action_id": "category_select",
    }
    """
    element: StaticSelect = {
        "type": "static_select",
        "placeholder": plain_text_element(options.placeholder),
        "options": options.options,  # type: ignore
        "action_id": options.action_id,
    }
    if options.initial_option is not None:
        element["initial_option"] = options.initial_option  # type: ignore
    return element


def overflow(options: list[Option] | list[dict[str, Any]], action_id: str) -> Overflow:
    """오버플로우 메뉴를 생성합니다."""
    return {
        "type": "overflow",
        "options": options,  # type: ignore
        "action_id": action_id,
    }


def plain_text_input_element(options: PlainTextInputElementOptions) -> PlainTextInput:
    """
    텍스트 입력창을 생성합니다.

    initial_value 는 값이 있을 때만 포함합니다.
    """
    element: PlainTextInput = {
        "type": "plain_text_input",
        "multiline": options.is_multiline,
        "action_id": options.action_id,
    }
    if options.initial_value is not None:
        element["initial_value"] = options.initial_value
    return element


def multi_users_select(
    *,
    placeholder: str,
    action_id: str,
    initial_users: list[str] | None = None,
) -> MultiUsersSelect:
    """여러 멤버를 고르는 선택 요소를 생성합니다."""
    element: MultiUsersSelect = {
        "type": "multi_users_select",
        "placeholder": plain_text_element(placeholder),
        "action_id": action_id,
    }
    if initial_users is not None:
        element["initial_users"] = initial_users
    return element
