from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Role label attached to people in the organization hierarchy."""

    HOD = "HOD"
    FACULTY = "Faculty"


class AttendanceStatus(str, Enum):
    """Status of one day inside a person's attendance window."""

    PRESENT = "Present"
    ABSENT = "Absent"
    ON_LEAVE = "On Leave"


class ScanState(str, Enum):
    """States of the roster tokenizer."""

    EXPECT_IDENTIFIER = "EXPECT_IDENTIFIER"
    SCANNING_NAME = "SCANNING_NAME"
    DEPT_FOUND = "DEPT_FOUND"


class ExportKind(str, Enum):
    DETAILED = "detailed"
    CUMULATIVE = "cumulative"
    DURATION = "duration"
    PEOPLE = "people"
