from typing import Any

from typing_extensions import NotRequired, TypedDict


class SelectedOptionType(TypedDict):
    text: NotRequired[dict[str, Any]]
    value: str


class PlainTextInputValue(TypedDict):
    type: NotRequired[str]  # plain_text_input
    value: str | None


class MultiUsersSelectValue(TypedDict):
    type: NotRequired[str]  # multi_users_select
    selected_users: list[str]


class CheckboxesValue(TypedDict):
    type: NotRequired[str]  # checkboxes
    selected_options: list[SelectedOptionType]


class StaticSelectValue(TypedDict):
    type: NotRequired[str]  # static_select
    selected_option: SelectedOptionType | None


ActionValueType = (
    PlainTextInputValue | MultiUsersSelectValue | CheckboxesValue | StaticSelectValue
)

# block_id -> action_id -> 요소별 제출 값
StateValuesType = dict[str, dict[str, ActionValueType]]


class ViewStateType(TypedDict):
    values: StateValuesType


class ViewOutputType(TypedDict):
    id: NotRequired[str]
    callback_id: NotRequired[str]
    private_metadata: NotRequired[str]
    state: ViewStateType


class ViewActionBodyType(TypedDict):
    type: NotRequired[str]  # view_submission
    trigger_id: NotRequired[str]
    view: ViewOutputType
