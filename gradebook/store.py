# gradebook/store.py
"""Хранилище записей: добавление, поиск, удаление и сортировка студентов в памяти."""
import logging
from typing import Iterable, Iterator, List, Optional

from .models import Student

logger = logging.getLogger(__name__)


class StudentListing:
    """Ленивое представление записей хранилища для вывода.

    Каждый новый обход начинается сначала и видит текущий порядок хранилища.
    Пустой список ложен (bool), это и есть результат "нет студентов".
    """
    def __init__(self, students: List[Student]):
        self._students = students

    def __iter__(self) -> Iterator[Student]:
        return iter(self._students)

    def __len__(self) -> int:
        return len(self._students)

    @property
    def is_empty(self) -> bool:
        return not self._students


class RecordStore:
    """Упорядоченный набор студентов. Все изменения и поиск идут через него.

    Найденные объекты Student являются живыми ссылками: изменения оценок видны в хранилище.
    Ссылка считается действительной до следующего изменения хранилища.
    """
    def __init__(self, students: Iterable[Student] = ()):
        self._students: List[Student] = list(students)

    def add(self, student: Student) -> None:
        """Добавляет студента в конец. Уникальность ID проверяет вызывающий код."""
        self._students.append(student)
        logger.debug("Добавлен студент id=%s", student.id)

    def remove_by_id(self, student_id: int) -> bool:
        """Удаляет все записи с этим ID. Возвращает True, если что-то удалено."""
        before = len(self._students)
        self._students[:] = [s for s in self._students if s.id != student_id]
        removed = len(self._students) != before
        if removed:
            logger.debug("Удален студент id=%s", student_id)
        return removed

    def find_by_id(self, student_id: int) -> Optional[Student]:
        return next((s for s in self._students if s.id == student_id), None)

    def find_by_name(self, name: str) -> Optional[Student]:
        """Первый студент с точно таким именем (с учетом регистра)."""
        return next((s for s in self._students if s.name == name), None)

    def id_exists(self, student_id: int) -> bool:
        return student_id in self.ids()

    def sort_by_id(self) -> None:
        """Стабильная сортировка по возрастанию ID, на месте."""
        self._students.sort(key=lambda s: s.id)

    def list_all(self) -> StudentListing:
        return StudentListing(self._students)

    def ids(self) -> List[int]:
        return [s.id for s in self._students]

    def __len__(self) -> int:
        return len(self._students)

    def __iter__(self) -> Iterator[Student]:
        return iter(self._students)
