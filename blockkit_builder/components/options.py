from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class BuilderOptions(BaseModel):
    """빌더 옵션의 공통 설정입니다. 생성 이후 값을 바꿀 수 없습니다."""

    model_config = ConfigDict(frozen=True)


class InputBlockOptions(BuilderOptions):
    label: str
    element: dict[str, Any] = Field(..., description="입력 블록이 감쌀 단일 요소")
    optional: bool
    block_id: str | None = None


class CheckboxesInputBlockOptions(BuilderOptions):
    label: str
    checkboxes: dict[str, Any]
    optional: bool
    block_id: str | None = None


class CheckboxesOptions(BuilderOptions):
    options: list[dict[str, Any]]
    action_id: str
    initial_options: list[dict[str, Any]] = []  # 비어있으면 블록에서 제외됩니다.


class SectionBlockOptions(BuilderOptions):
    text: str
    block_id: str | None = None
    accessory: dict[str, Any] | None = Field(
        default=None, description="버튼 또는 오버플로우 요소"
    )


class UrlButtonOptions(BuilderOptions):
    label: str
    url: str
    action_id: str


class ValueButtonOptions(BuilderOptions):
    label: str
    value: str


class ActionButtonOptions(BuilderOptions):
    label: str
    value: str
    action_id: str


class PlainTextInputElementOptions(BuilderOptions):
    action_id: str
    is_multiline: bool
    initial_value: str | None = None


class StaticSelectOptions(BuilderOptions):
    placeholder: str
    action_id: str
    options: list[dict[str, Any]]
    initial_option: dict[str, Any] | None = None


class StaticSelectInputBlockOptions(BuilderOptions):
    placeholder: str
    action_id: str
    label: str
    options: list[dict[str, Any]]
    dispatch_action: bool
    block_id: str | None = None
    initial_option: dict[str, Any] | None = None


class PlainTextInputBlockOptions(BuilderOptions):
    action_id: str
    is_multiline: bool
    label: str
    is_optional: bool
    initial_value: str | None = None
    block_id: str | None = None


class SectionWithOverflowOptions(BuilderOptions):
    label: str
    block_id: str
    options: list[dict[str, Any]]
    action_id: str


class MultiUserSelectInputBlockOptions(BuilderOptions):
    label: str
    placeholder_label: str
    action_id: str
    optional: bool
    initial_users: list[str] | None = None
    block_id: str | None = None
