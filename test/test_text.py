from blockkit_builder.components.text import markdown_element, plain_text_element


def test_plain_text_element() -> None:
    assert plain_text_element("안녕하세요") == {
        "type": "plain_text",
        "text": "안녕하세요",
        "emoji": True,
    }


def test_markdown_element_has_no_emoji_flag() -> None:
    element = markdown_element("*굵게*")

    assert element == {"type": "mrkdwn", "text": "*굵게*"}
    assert "emoji" not in element


def test_empty_text_is_passed_through() -> None:
    assert plain_text_element("")["text"] == ""
