# gradebook/models.py
"""Модуль, определяющий основные модели данных, такие как Student."""
from typing import Iterable, List, Optional

from . import config
from .errors import DataValidationError

class Student:
    """Представляет студента с его ID, именем и оценками.

    ID и имя задаются только при создании. Оценки можно добавлять или очищать.
    """
    def __init__(self, student_id: int, name: str, grades: Iterable[int] = ()):
        # bool является подклассом int, но ID из True нам не нужен
        if not isinstance(student_id, int) or isinstance(student_id, bool) or student_id <= 0:
            raise DataValidationError("ID студента должен быть положительным целым числом.")

        self._id = student_id
        self._name = name
        self._grades: List[int] = []
        # Оценки вне диапазона молча отбрасываются, как и в add_grade
        self.add_grades(grades)

    @property
    def id(self) -> int:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def grades(self) -> List[int]:
        """Копия списка оценок в порядке добавления."""
        return list(self._grades)

    @property
    def has_grades(self) -> bool:
        return bool(self._grades)

    def add_grade(self, grade: int) -> bool:
        """Добавляет оценку, если она в диапазоне 0-100. Иначе запись не меняется."""
        if isinstance(grade, bool) or not isinstance(grade, int):
            return False
        if grade < config.GRADE_MIN or grade > config.GRADE_MAX:
            return False
        self._grades.append(grade)
        return True

    def add_grades(self, grades: Iterable[int]) -> int:
        """Добавляет несколько оценок. Возвращает число реально добавленных."""
        return sum(1 for grade in grades if self.add_grade(grade))

    def clear_grades(self) -> None:
        self._grades.clear()

    @property
    def average(self) -> Optional[float]:
        """Средний балл или None, если оценок нет."""
        if not self._grades:
            return None
        return sum(self._grades) / len(self._grades)

    def __repr__(self) -> str:
        """Возвращает строковое представление объекта для отладки."""
        return f"Student(id={self.id}, name='{self.name}', grades={self._grades})"

    def __str__(self) -> str:
        """Карточка студента для списка: ID, имя, оценки, средний балл и разделитель."""
        lines = [f"ID: {self.id:>5} | Name: {self.name:<20}"]
        if self.has_grades:
            lines.append("Grades: " + " ".join(map(str, self._grades)))
            lines.append(f"Average: {self.average:.2f}")
        else:
            lines.append("Grades: None")
        lines.append("-" * config.SEPARATOR_WIDTH)
        return "\n".join(lines)
