# tests/conftest.py
import pytest
from typing import Callable, List
from gradebook.models import Student
from gradebook.store import RecordStore

@pytest.fixture
def sample_students() -> List[Student]:
    """Фикстура, предоставляющая тестовый набор студентов."""
    return [
        Student(1, "Ann Smith", [78, 85, 90]),
        Student(3, "Peter Brown", [92, 88, 95]),
        Student(2, "Anna Green", [65, 70]),
    ]

@pytest.fixture
def store(sample_students) -> RecordStore:
    return RecordStore(sample_students)

@pytest.fixture
def scripted_input(monkeypatch) -> Callable[[List[str]], None]:
    """Подменяет builtins.input заданной последовательностью ответов.

    Когда ответы заканчиваются, бросается EOFError, как при конце stdin.
    """
    def _install(answers: List[str]) -> None:
        sequence = iter(answers)

        def mock_input(prompt=""):
            try:
                return next(sequence)
            except StopIteration:
                raise EOFError

        monkeypatch.setattr('builtins.input', mock_input)

    return _install
