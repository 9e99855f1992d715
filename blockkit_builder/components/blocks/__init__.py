from blockkit_builder.components.blocks.input import (
    checkboxes_input_block,
    input_block,
    multi_user_select_input_block,
    plain_text_input_block,
    static_select_input_block,
)
from blockkit_builder.components.blocks.layout import (
    actions,
    attachments,
    blocks,
    divider,
    header_block,
)
from blockkit_builder.components.blocks.section import (
    section_block,
    section_with_overflow,
)
