from typing import Any, Literal

from typing_extensions import NotRequired, TypedDict


class PlainText(TypedDict):
    type: Literal["plain_text"]
    text: str
    emoji: bool


class MrkdwnText(TypedDict):
    type: Literal["mrkdwn"]
    text: str


class Option(TypedDict):
    text: PlainText
    value: str


class UrlButton(TypedDict):
    type: Literal["button"]
    text: PlainText
    url: str
    action_id: str


class ValueButton(TypedDict):
    type: Literal["button"]
    text: PlainText
    value: str


class ActionButton(TypedDict):
    type: Literal["button"]
    text: PlainText
    value: str
    action_id: str


Button = UrlButton | ValueButton | ActionButton


class Checkboxes(TypedDict):
    type: Literal["checkboxes"]
    options: list[Option]
    action_id: str
    initial_options: NotRequired[list[Option]]


class StaticSelect(TypedDict):
    type: Literal["static_select"]
    placeholder: PlainText
    options: list[Option]
    action_id: str
    initial_option: NotRequired[Option]


class Overflow(TypedDict):
    type: Literal["overflow"]
    options: list[Option]
    action_id: str


class PlainTextInput(TypedDict):
    type: Literal["plain_text_input"]
    multiline: bool
    action_id: str
    initial_value: NotRequired[str]


class MultiUsersSelect(TypedDict):
    type: Literal["multi_users_select"]
    placeholder: PlainText
    action_id: str
    initial_users: NotRequired[list[str]]


InputElement = Checkboxes | StaticSelect | PlainTextInput | MultiUsersSelect


class InputBlock(TypedDict):
    type: Literal["input"]
    block_id: NotRequired[str]
    element: InputElement | dict[str, Any]
    label: PlainText
    optional: NotRequired[bool]
    dispatch_action: NotRequired[bool]


class SectionBlock(TypedDict):
    type: Literal["section"]
    text: MrkdwnText
    block_id: NotRequired[str]
    accessory: NotRequired[Button | Overflow]


class ActionsBlock(TypedDict):
    type: Literal["actions"]
    elements: list[Button]


class HeaderBlock(TypedDict):
    type: Literal["header"]
    text: PlainText


class DividerBlock(TypedDict):
    type: Literal["divider"]


Block = InputBlock | SectionBlock | ActionsBlock | HeaderBlock | DividerBlock


class Attachment(TypedDict, total=False):
    color: str
    fallback: str
    text: str
    blocks: list[Block]
