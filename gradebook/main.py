# gradebook/main.py
"""Главный модуль, реализующий консольный интерфейс (CLI) для управления оценками."""
import sys
import logging
from enum import Enum
from typing import Callable, Optional

from . import config
from .errors import InputExhaustedError
from .models import Student
from .prompts import Prompter
from .store import RecordStore

logger = logging.getLogger(__name__)


class MenuState(Enum):
    MAIN_MENU = "main_menu"
    SEARCH_MENU = "search_menu"
    MANAGE_STUDENT = "manage_student"
    TERMINATED = "terminated"


class MenuController:
    """Конечный автомат меню: главное меню, поиск, управление студентом, выход.

    Хранилище принадлежит контроллеру; его можно передать извне (например, в тестах).
    """
    def __init__(
        self,
        store: Optional[RecordStore] = None,
        prompter: Optional[Prompter] = None,
        output_func: Callable[[str], None] = print,
    ):
        self.store = store if store is not None else RecordStore()
        self.prompter = prompter if prompter is not None else Prompter(output_func=output_func)
        self._print = output_func
        self.state = MenuState.MAIN_MENU
        self._current: Optional[Student] = None

    def run(self) -> None:
        """Основной цикл: выполняет шаги, пока не дойдет до TERMINATED."""
        while self.state is not MenuState.TERMINATED:
            try:
                self.step()
            except InputExhaustedError as e:
                # Конец ввода трактуем как выбор "Exit"
                logger.info("Завершение по концу ввода: %s", e)
                self._terminate()

    def step(self) -> None:
        handlers = {
            MenuState.MAIN_MENU: self.main_menu,
            MenuState.SEARCH_MENU: self.search_menu,
            MenuState.MANAGE_STUDENT: self.manage_student,
        }
        handlers[self.state]()

    # --- СОСТОЯНИЯ ---

    def main_menu(self) -> None:
        self._print(config.MAIN_MENU_TEXT)
        choice = self.prompter.prompt_int("Choose an option: ", 1, 5)

        if choice == 1:
            self.add_student()
        elif choice == 2:
            self.state = MenuState.SEARCH_MENU
        elif choice == 3:
            self.store.sort_by_id()
            self.show_all()
        elif choice == 4:
            self.remove_student()
        elif choice == 5:
            self._terminate()

    def search_menu(self) -> None:
        self._print(config.SEARCH_MENU_TEXT)
        option = self.prompter.prompt_int("Choose: ", 1, 3)

        if option == 3:
            self.state = MenuState.MAIN_MENU
            return

        if option == 1:
            student_id = self.prompter.prompt_int("Enter ID: ")
            found = self.store.find_by_id(student_id)
        else:
            name = self.prompter.prompt_line("Enter name: ")
            found = self.store.find_by_name(name)

        if found is None:
            self._print(config.MSG_NOT_FOUND)
            self.state = MenuState.MAIN_MENU
        else:
            self._current = found
            self.state = MenuState.MANAGE_STUDENT

    def manage_student(self) -> None:
        """Один проход меню управления выбранным студентом."""
        student = self._current
        if student is None:
            self._print(config.MSG_NOT_FOUND)
            self.state = MenuState.MAIN_MENU
            return

        self._print(f"\nManaging: {student.name}")
        self._print(f"\n{student}")
        self._print(config.MANAGE_MENU_TEXT)
        option = self.prompter.prompt_int("Select option: ", 1, 3)

        if option == 1:
            count = self.prompter.prompt_int("How many grades? ", 1, config.MAX_GRADES_PER_ENTRY)
            for _ in range(count):
                grade = self.prompter.prompt_int(
                    f"Enter grade ({config.GRADE_MIN}-{config.GRADE_MAX}): ",
                    config.GRADE_MIN, config.GRADE_MAX,
                )
                student.add_grade(grade)
            self._print(config.MSG_GRADES_ADDED)
        elif option == 2:
            student.clear_grades()
            self._print(config.MSG_GRADES_CLEARED)
        elif option == 3:
            self._current = None
            self.state = MenuState.MAIN_MENU

    # --- ОПЕРАЦИИ ---

    def add_student(self) -> Student:
        name = self.prompter.prompt_line("Enter student name: ")

        student_id = self.prompter.prompt_int("Enter student ID (positive number): ", 1)
        while self.store.id_exists(student_id):
            self._print(config.MSG_ID_EXISTS)
            student_id = self.prompter.prompt_int("Enter student ID (positive number): ", 1)

        student = Student(student_id, name)
        self.store.add(student)
        self._print(config.MSG_STUDENT_ADDED)
        return student

    def remove_student(self) -> bool:
        student_id = self.prompter.prompt_int("Enter ID to remove: ")
        removed = self.store.remove_by_id(student_id)
        self._print(config.MSG_STUDENT_REMOVED if removed else config.MSG_NOT_FOUND)
        return removed

    def show_all(self) -> None:
        """Выводит всех студентов в текущем порядке хранилища."""
        listing = self.store.list_all()
        if listing.is_empty:
            self._print(config.MSG_NO_STUDENTS)
            return

        self._print(config.LIST_HEADER)
        for s in listing:
            self._print(f"\n{s}")

    def _terminate(self) -> None:
        self._print(config.MSG_GOODBYE)
        self._current = None
        self.state = MenuState.TERMINATED


def main_cli(store: Optional[RecordStore] = None) -> RecordStore:
    """Запускает меню и возвращает хранилище после выхода."""
    controller = MenuController(store)
    controller.run()
    return controller.store


def main() -> None:
    logging.basicConfig(level=config.LOG_LEVEL, format=config.LOG_FORMAT)
    try:
        main_cli()
    except KeyboardInterrupt:
        print(config.MSG_INTERRUPTED)
    except Exception:
        logger.exception("Критическая ошибка")
        sys.exit(1)
    sys.exit(0)


if __name__ == '__main__':
    main()
