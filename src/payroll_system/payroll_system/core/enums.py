from __future__ import annotations

from enum import Enum, IntEnum


class EmployeeType(str, Enum):
    """Payment category of an employee."""

    FULL_TIME = "FULL_TIME"
    PART_TIME = "PART_TIME"
    CONTRACTUAL = "CONTRACTUAL"


class MenuChoice(IntEnum):
    """Numbered options of the main menu."""

    FULL_TIME = 1
    PART_TIME = 2
    CONTRACTUAL = 3
    REPORT = 4
    EXIT = 5
