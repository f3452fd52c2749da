# gradebook/prompts.py
"""Слой ввода: запрашивает данные у пользователя, пока они не пройдут проверку."""
import logging
import re
from typing import Callable, Optional

from . import config
from .errors import InputExhaustedError

logger = logging.getLogger(__name__)

# Только ASCII-цифры: "1_0" и не-латинские цифры не принимаются
_INT_RE = re.compile(r"[+-]?\d+", re.ASCII)


class Prompter:
    """Обертка над input/print.

    Функции ввода и вывода передаются в конструктор, поэтому в тестах
    ввод можно подменить заранее заготовленной последовательностью.
    """
    def __init__(
        self,
        input_func: Optional[Callable[[str], str]] = None,
        output_func: Callable[[str], None] = print,
        max_attempts: Optional[int] = config.MAX_PROMPT_ATTEMPTS,
    ):
        self._input = input_func if input_func is not None else input
        self._output = output_func
        self._max_attempts = max_attempts

    def _read(self, label: str) -> str:
        try:
            return self._input(label)
        except EOFError:
            raise InputExhaustedError("Ввод закончился (EOF).")

    def prompt_line(self, label: str) -> str:
        """Возвращает строку как есть: без обрезки пробелов и без проверки."""
        return self._read(label)

    def prompt_int(self, label: str, min_value: int = config.INT_MIN,
                   max_value: int = config.INT_MAX) -> int:
        """Спрашивает целое число в диапазоне [min_value, max_value], пока не получит его."""
        if min_value == config.INT_MIN and max_value == config.INT_MAX:
            error_msg = config.MSG_INVALID_INPUT
        else:
            error_msg = config.MSG_INVALID_RANGE.format(min=min_value, max=max_value)

        attempts = 0
        while True:
            raw = self._read(label)
            text = raw.strip()
            value = int(text) if _INT_RE.fullmatch(text) else None

            if value is not None and min_value <= value <= max_value:
                return value

            logger.debug("Отклонен ввод %r для %r", raw, label)
            self._output(error_msg)
            attempts += 1
            if self._max_attempts is not None and attempts >= self._max_attempts:
                raise InputExhaustedError(
                    f"Превышено число попыток ввода ({self._max_attempts})."
                )
