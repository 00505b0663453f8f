"""
오류 처리 및 로깅 유틸리티

콘솔 로그는 컬러로 표시하고, 파일 핸들러는 필요한 경우에만 붙입니다.
"""

import functools
import logging
import sys
import time
import traceback
from pathlib import Path
from typing import Callable, Optional, TypeVar

# ANSI 컬러 코드
COLORS = {
    'DEBUG': '\033[94m',  # 파란색
    'INFO': '\033[92m',   # 녹색
    'WARNING': '\033[93m', # 노란색
    'ERROR': '\033[91m',  # 빨간색
    'CRITICAL': '\033[41m\033[97m', # 배경 빨간색, 글자 흰색
    'RESET': '\033[0m'    # 리셋
}

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


class ColoredFormatter(logging.Formatter):
    """컬러 로그 포매터"""

    def format(self, record):
        levelname = record.levelname
        message = super().format(record)

        if levelname in COLORS and sys.stderr.isatty():
            return f"{COLORS[levelname]}{message}{COLORS['RESET']}"
        return message


def get_logger(name: str) -> logging.Logger:
    """모듈별 로거 생성"""
    return logging.getLogger(name)


def setup_logger(
    name: str,
    log_file: Optional[str] = None,
    level: int = logging.DEBUG
) -> logging.Logger:
    """로거 설정

    Args:
        name: 로거 이름
        log_file: 로그 파일 경로 (없으면 콘솔만 사용)
        level: 로거 레벨

    Returns:
        설정된 로거
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    # 이미 설정된 로거는 핸들러를 중복으로 붙이지 않음
    if logger.handlers:
        return logger

    # 콘솔 핸들러 (WARNING 이상만 표시)
    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.WARNING)
    console_handler.setFormatter(ColoredFormatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(console_handler)

    # 파일 핸들러 (모든 로그 기록)
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(
            LOG_FORMAT + ' - [%(filename)s:%(lineno)d]',
            datefmt=DATE_FORMAT
        ))
        logger.addHandler(file_handler)

    return logger


def log_performance(func: Callable) -> Callable:
    """함수 실행 시간을 로깅하는 데코레이터"""
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        logger = get_logger(func.__module__)
        logger.debug(f"Starting {func.__name__}")

        start_time = time.perf_counter()
        try:
            result = func(*args, **kwargs)
        except Exception as e:
            execution_time = time.perf_counter() - start_time
            logger.error(
                f"함수 {func.__name__} 실행 실패: "
                f"시간={execution_time:.3f}초, "
                f"오류={str(e)}"
            )
            raise

        execution_time = time.perf_counter() - start_time
        logger.debug(f"Finished {func.__name__} in {execution_time:.4f} seconds")
        return result
    return wrapper


T = TypeVar('T')


def safe_execute(default_return: Optional[T] = None) -> Callable:
    """
    안전한 실행 데코레이터

    예외가 발생하면 스택 트레이스를 로깅하고 기본값을 반환합니다.

    Args:
        default_return: 오류 발생 시 반환할 기본값
    """
    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        def wrapper(*args, **kwargs) -> Optional[T]:
            try:
                return func(*args, **kwargs)
            except Exception as e:
                logger = get_logger(func.__module__)
                logger.error(
                    f"함수 {func.__name__} 실행 중 오류 발생:\n"
                    f"오류: {str(e)}\n"
                    f"스택 트레이스:\n{traceback.format_exc()}"
                )
                return default_return
        return wrapper
    return decorator
