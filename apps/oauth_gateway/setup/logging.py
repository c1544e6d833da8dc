"""Logging configuration.

text: 사람이 읽는 한 줄 포맷 (로컬)
json: ECS 호환 JSON (클러스터 로그 수집)
"""

from __future__ import annotations

import logging
import sys

import ecs_logging

NOISY_LOGGERS = ("sqlalchemy.engine", "sqlalchemy.pool", "httpx", "httpcore")


def setup_logging(level: str = "INFO", fmt: str = "text") -> None:
    """애플리케이션 로깅을 설정합니다."""
    log_level = getattr(logging, level.upper(), logging.INFO)

    if fmt == "json":
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(ecs_logging.StdlibFormatter())

        root_logger = logging.getLogger()
        root_logger.setLevel(log_level)
        root_logger.handlers.clear()
        root_logger.addHandler(handler)
    else:
        logging.basicConfig(
            level=log_level,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            handlers=[logging.StreamHandler(sys.stdout)],
        )

    # 외부 라이브러리 로그 레벨 조정 (httpx는 요청 URL에 토큰 쿼리를 남길 수 있음)
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
