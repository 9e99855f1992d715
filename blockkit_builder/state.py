from blockkit_builder.logging import logger
from blockkit_builder.types import ViewActionBodyType, ViewOutputType


def contains_block_action_value(
    view: ViewOutputType | None, block_id: str, action_id: str
) -> bool:
    """뷰 상태에 block_id, action_id 에 해당하는 값이 있는지 확인합니다."""
    if not view:
        return False

    state = view.get("state")
    if state is None or state.get("values") is None:
        return False

    block = state["values"].get(block_id)
    if block is None:
        return False
    return block.get(action_id) is not None


def get_text_input_value(
    view: ViewOutputType, block_id: str, action_id: str
) -> str | None:
    """텍스트 입력값을 반환합니다. 값이 없으면 None 을 반환합니다."""
    if not contains_block_action_value(view, block_id, action_id):
        logger.debug(f"No text input value: {block_id=} {action_id=}")
        return None
    return view["state"]["values"][block_id][action_id].get("value")  # type: ignore


def get_multi_user_select_value(
    view: ViewOutputType, block_id: str, action_id: str
) -> list[str] | None:
    """선택된 멤버 아이디 목록을 반환합니다. 값이 없으면 빈 리스트를 반환합니다."""
    if not contains_block_action_value(view, block_id, action_id):
        logger.debug(f"No multi user select value: {block_id=} {action_id=}")
        return []
    return view["state"]["values"][block_id][action_id].get("selected_users")  # type: ignore


def get_checkboxes_values(
    body: ViewActionBodyType, block_id: str, action_id: str
) -> list[str]:
    """
    선택된 체크박스 값 목록을 반환합니다.

    block_id, action_id 가 없으면 KeyError 가 발생합니다.
    """
    action = body["view"]["state"]["values"][block_id][action_id]
    selected_options = action.get("selected_options") or []  # type: ignore
    return [option["value"] for option in selected_options]


def get_checkboxes_values_map(
    view: ViewOutputType, block_id: str, action_id: str
) -> dict[str, bool]:
    """
    선택된 체크박스 값을 키로 하는 딕셔너리를 반환합니다.

    block_id, action_id 가 없으면 KeyError 가 발생합니다.
    """
    action = view["state"]["values"][block_id][action_id]
    selected_options = action.get("selected_options") or []  # type: ignore
    return {option["value"]: True for option in selected_options}


def get_static_select_value(
    view: ViewOutputType, block_id: str, action_id: str
) -> str:
    """드롭다운에서 선택된 값을 반환합니다. 값이 없으면 빈 문자열을 반환합니다."""
    values = view["state"]["values"]
    action = (values.get(block_id) or {}).get(action_id)
    if not action or not action.get("selected_option"):
        logger.debug(f"No static select value: {block_id=} {action_id=}")
        return ""
    return action["selected_option"]["value"]  # type: ignore
