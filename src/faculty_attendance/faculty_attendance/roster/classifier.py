from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Iterable, TypeVar

from ..core.constants import ADMIN_CODE

DEPT_LABELS: dict[str, str] = {
    "AEIE": "Applied Electronics & Instrumentation Engineering",
    "BSH": "Basic Science & Humanities",
    "CE": "Civil Engineering",
    "CSE": "Computer Science & Engineering",
    "ECE": "Electronics & Communication Engineering",
    "EE": "Electrical Engineering",
    "IT": "Information Technology",
    "MBA": "Business Administration",
    "MCA": "Computer Applications",
    "ME": "Mechanical Engineering",
    ADMIN_CODE: "Administration",
}

ADMIN_VARIANTS = frozenset({"ADMIN", "PRINCIPAL", "ASST.", "REGISTRATAR", "ASST. REGISTRATAR"})

T = TypeVar("T")


def normalize_code(token: str) -> str:
    """Upper-case a department token and fold administrative variants."""
    code = " ".join(str(token or "").split()).upper()
    return ADMIN_CODE if code in ADMIN_VARIANTS else code


def department_label(code: str) -> str:
    return DEPT_LABELS.get(code, code)


@dataclass(frozen=True)
class DepartmentGroup(Generic[T]):
    """Rows of one department: the first is the HOD, the rest are faculty."""

    code: str
    head: T
    members: list[T]

    @property
    def id(self) -> str:
        return self.code.lower()

    @property
    def label(self) -> str:
        return department_label(self.code)


class DepartmentClassifier:
    """Group rows by department, pick heads, drop administration."""

    def __init__(self, *, excluded: Iterable[str] = (ADMIN_CODE,)):
        self._excluded = frozenset(excluded)

    def group(self, rows: Iterable[T], *, key) -> list[DepartmentGroup[T]]:
        """Group `rows` by `normalize_code(key(row))`.

        Document order is kept inside a group; groups come back sorted by code.
        """
        buckets: dict[str, list[T]] = {}
        for row in rows:
            code = normalize_code(key(row))
            if not code or code in self._excluded:
                continue
            buckets.setdefault(code, []).append(row)

        groups = [DepartmentGroup(code=code, head=items[0], members=items[1:]) for code, items in buckets.items() if items]
        groups.sort(key=lambda g: g.code)
        return groups
