from blockkit_builder.components.elements import (
    multi_users_select,
    plain_text_input_element,
    static_select,
)
from blockkit_builder.components.options import (
    CheckboxesInputBlockOptions,
    InputBlockOptions,
    MultiUserSelectInputBlockOptions,
    PlainTextInputBlockOptions,
    PlainTextInputElementOptions,
    StaticSelectInputBlockOptions,
    StaticSelectOptions,
)
from blockkit_builder.components.text import plain_text_element
from blockkit_builder.components.types import InputBlock


def input_block(options: InputBlockOptions) -> InputBlock:
    """
    요소 하나를 감싸는 입력 블록을 생성합니다.

    # Example
    {
        "type": "input",
        "block_id": "content_url",
        "optional": False,
        "element": {
            "type": "plain_text_input",
            "multiline": False,
            "action_id": "url_text_input-action",
        },
        "label": {"type": "plain_text", "text": "글 링크", "emoji": True},
    }
    """
    block: InputBlock = {"type": "input"}  # type: ignore
    if options.block_id is not None:
        block["block_id"] = options.block_id
    block["optional"] = options.optional
    block["element"] = options.element
    block["label"] = plain_text_element(options.label)
    return block


def checkboxes_input_block(options: CheckboxesInputBlockOptions) -> InputBlock:
    """체크박스 그룹을 담은 입력 블록을 생성합니다."""
    return input_block(
        InputBlockOptions(
            block_id=options.block_id,
            element=options.checkboxes,
            optional=options.optional,
            label=options.label,
        )
    )


def static_select_input_block(options: StaticSelectInputBlockOptions) -> InputBlock:
    """
    드롭다운을 담은 입력 블록을 생성합니다.

    dispatch_action 이 True 이면 값을 고르는 즉시 block_actions 이벤트가 발생합니다.
    """
    block: InputBlock = {"type": "input"}  # type: ignore
    if options.block_id is not None:
        block["block_id"] = options.block_id
    block["dispatch_action"] = options.dispatch_action
    block["element"] = static_select(
        StaticSelectOptions(
            placeholder=options.placeholder,
            options=options.options,
            action_id=options.action_id,
            initial_option=options.initial_option,
        )
    )
    block["label"] = plain_text_element(options.label)
    return block


def plain_text_input_block(options: PlainTextInputBlockOptions) -> InputBlock:
    """텍스트 입력창을 담은 입력 블록을 생성합니다."""
    block: InputBlock = {"type": "input"}  # type: ignore
    if options.block_id is not None:
        block["block_id"] = options.block_id
    block["element"] = plain_text_input_element(
        PlainTextInputElementOptions(
            action_id=options.action_id,
            is_multiline=options.is_multiline,
            initial_value=options.initial_value,
        )
    )
    block["label"] = plain_text_element(options.label)
    block["optional"] = options.is_optional
    return block


def multi_user_select_input_block(
    options: MultiUserSelectInputBlockOptions,
) -> InputBlock:
    """여러 멤버를 고르는 선택 요소를 담은 입력 블록을 생성합니다."""
    block: InputBlock = {
        "type": "input",
        "element": multi_users_select(
            placeholder=options.placeholder_label,
            action_id=options.action_id,
            initial_users=options.initial_users,
        ),
        "label": plain_text_element(options.label),
    }
    if options.block_id is not None:
        block["block_id"] = options.block_id
    block["optional"] = options.optional
    return block
