import pytest

from blockkit_builder.components.elements import option
from blockkit_builder.components.types import Option
from blockkit_builder.types import ViewActionBodyType, ViewOutputType


@pytest.fixture
def option_a() -> Option:
    return option("기술 & 언어", "tech")


@pytest.fixture
def option_b() -> Option:
    return option("일상 & 생각", "daily")


@pytest.fixture
def view() -> ViewOutputType:
    return {
        "id": "V0123456789",
        "callback_id": "submit_view",
        "state": {
            "values": {
                "description": {
                    "text_input": {"type": "plain_text_input", "value": "하고 싶은 말"}
                },
                "empty_description": {
                    "text_input": {"type": "plain_text_input", "value": None}
                },
                "members": {
                    "members_select": {
                        "type": "multi_users_select",
                        "selected_users": ["U01", "U02"],
                    }
                },
                "category": {
                    "category_select": {
                        "type": "static_select",
                        "selected_option": {
                            "text": {"type": "plain_text", "text": "기술 & 언어"},
                            "value": "tech",
                        },
                    },
                    "unselected": {"type": "static_select", "selected_option": None},
                },
                "curation": {
                    "curation_check": {
                        "type": "checkboxes",
                        "selected_options": [{"value": "x"}, {"value": "y"}],
                    },
                    "nothing_checked": {"type": "checkboxes", "selected_options": []},
                },
            }
        },
    }


@pytest.fixture
def body(view: ViewOutputType) -> ViewActionBodyType:
    return {
        "type": "view_submission",
        "trigger_id": "trigger",
        "view": view,
    }
