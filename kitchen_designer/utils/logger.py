"""로깅 설정

레벨과 로그 디렉토리는 settings(LOG_LEVEL, LOG_DIR)에서 가져온다.
"""
import logging
import sys
from pathlib import Path
from typing import Optional, Union

from ..config import settings

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'
LOG_FILENAME = "app.log"


def setup_logger(
    name: str,
    level: Optional[str] = None,
    log_dir: Optional[Union[str, Path]] = None,
) -> logging.Logger:
    """stdout + {log_dir}/app.log 핸들러를 가진 로거 설정"""
    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, (level or settings.log_level).upper(), logging.INFO))

    # 같은 이름으로 다시 호출되면 레벨만 갱신
    if logger.handlers:
        return logger

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    log_path = Path(log_dir) if log_dir is not None else settings.log_path
    log_path.mkdir(parents=True, exist_ok=True)

    file_handler = logging.FileHandler(log_path / LOG_FILENAME, encoding="utf-8")
    file_handler.setFormatter(formatter)
    logger.addHandler(file_handler)

    return logger


# 전역 로거 인스턴스
logger = setup_logger("kitchen_designer")
