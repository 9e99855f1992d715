from blockkit_builder.components.blocks import (
    actions,
    attachments,
    blocks,
    checkboxes_input_block,
    divider,
    header_block,
    input_block,
    multi_user_select_input_block,
    plain_text_input_block,
    section_block,
    section_with_overflow,
    static_select_input_block,
)
from blockkit_builder.components.elements import (
    action_button,
    checkboxes,
    multi_users_select,
    option,
    options,
    overflow,
    plain_text_input_element,
    static_select,
    url_button,
    value_button,
)
from blockkit_builder.components.options import (
    ActionButtonOptions,
    CheckboxesInputBlockOptions,
    CheckboxesOptions,
    InputBlockOptions,
    MultiUserSelectInputBlockOptions,
    PlainTextInputBlockOptions,
    PlainTextInputElementOptions,
    SectionBlockOptions,
    SectionWithOverflowOptions,
    StaticSelectInputBlockOptions,
    StaticSelectOptions,
    UrlButtonOptions,
    ValueButtonOptions,
)
from blockkit_builder.components.text import markdown_element, plain_text_element
from blockkit_builder.exception import ValidationError
from blockkit_builder.state import (
    contains_block_action_value,
    get_checkboxes_values,
    get_checkboxes_values_map,
    get_multi_user_select_value,
    get_static_select_value,
    get_text_input_value,
)
