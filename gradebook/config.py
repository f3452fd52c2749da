# gradebook/config.py
"""Константы приложения: границы ввода, тексты сообщений и настройки логирования."""
import logging

# --- ГРАНИЦЫ ВВОДА ---
# Диапазон по умолчанию для prompt_int (32-битное целое)
INT_MIN = -2**31
INT_MAX = 2**31 - 1

GRADE_MIN = 0
GRADE_MAX = 100
MAX_GRADES_PER_ENTRY = 10

# None = спрашивать бесконечно
MAX_PROMPT_ATTEMPTS = None

# --- ВЫВОД ---
SEPARATOR_WIDTH = 40

MAIN_MENU_TEXT = (
    "\n====== GRADE MANAGEMENT SYSTEM ======\n"
    "1. Add Student\n"
    "2. Manage Student\n"
    "3. View All Students\n"
    "4. Remove Student\n"
    "5. Exit"
)
SEARCH_MENU_TEXT = "\nSearch By:\n1. ID\n2. Name\n3. Back"
MANAGE_MENU_TEXT = "1. Add Grades\n2. Clear Grades\n3. Back"
LIST_HEADER = "\n========== STUDENT LIST =========="

MSG_INVALID_INPUT = "Invalid input! Please try again."
MSG_INVALID_RANGE = "Invalid input. Please enter a value between {min} and {max}."
MSG_ID_EXISTS = "This ID already exists. Try another one."
MSG_STUDENT_ADDED = "Student added successfully!"
MSG_STUDENT_REMOVED = "Student removed!"
MSG_NOT_FOUND = "Student not found!"
MSG_NO_STUDENTS = "\nNo students found.\n"
MSG_GRADES_ADDED = "Grades added!"
MSG_GRADES_CLEARED = "Grades cleared!"
MSG_GOODBYE = "Goodbye!"
MSG_INTERRUPTED = "\nProgram stopped."

# --- ЛОГИРОВАНИЕ ---
LOG_LEVEL = logging.WARNING
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
