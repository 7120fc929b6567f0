import functools
import logging
import time
from typing import Callable

logger = logging.getLogger(__name__)


def log_func_time(func: Callable):
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        timer = Timer()
        res = func(*args, **kwargs)
        logger.debug("%s took %.2f ms", func.__qualname__, timer.elapsed_ms())
        return res

    return wrapper


class Timer:
    def __init__(self):
        self.reset()

    def reset(self):
        self._time = time.monotonic_ns()

    def elapsed_ms(self) -> float:
        elapsed = time.monotonic_ns() - self._time
        return elapsed / 1e6

    def elapsed_sec(self) -> float:
        elapsed = time.monotonic_ns() - self._time
        return elapsed / 1e9
