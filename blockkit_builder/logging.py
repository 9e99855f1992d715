import datetime
import orjson

from typing import Any, Mapping

from loguru import logger

from blockkit_builder.config import Settings, settings


def filter(record):
    message = record["message"].replace('"', "'")
    record["extra"]["quoted_message"] = f'"{message}"'
    return True


def configure_logging(config: Settings) -> int | None:
    """
    라이브러리 로그 출력을 설정합니다.

    LOG_FILE 이 없으면 blockkit_builder 로그를 끄고,
    있으면 LOG_LEVEL 이상의 로그를 파일에 남깁니다.
    """
    if not config.LOG_FILE:
        logger.disable("blockkit_builder")
        return None

    logger.enable("blockkit_builder")
    return logger.add(
        config.LOG_FILE,
        level=config.LOG_LEVEL,
        format="{time},{level},{extra[quoted_message]}",
        filter=filter,
    )


configure_logging(settings)


def log_event(
    actor: str | None,
    event: str,
    type: str,
    description: str = "",
    body: Mapping[str, Any] = {},
) -> None:
    try:
        data = dict(
            actor=actor,
            event=event,
            type=type,
            description=description,
            timestamp=datetime.datetime.now().isoformat(timespec="seconds"),
            body=body,
        )
        logger.info(orjson.dumps(data).decode("utf-8"))
    except Exception as e:
        logger.debug(f"Failed to log event: {str(e)}")
