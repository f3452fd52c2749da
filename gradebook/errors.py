# gradebook/errors.py
"""Модуль для определения пользовательских исключений приложения."""

class GradebookError(Exception):
    """Базовый класс для всех исключений в этом приложении."""
    pass

class DataValidationError(GradebookError):
    """Исключение, связанное с некорректными данными записи (например, ID <= 0)."""
    pass

class InputExhaustedError(GradebookError):
    """Ввод закончился (EOF) или исчерпан лимит попыток ввода."""
    pass
