from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

from ..common.text_utils import normalize_name
from ..core.constants import ALL_DEPARTMENTS, UNKNOWN_DEPARTMENT
from .model import PunchRow


@dataclass(frozen=True)
class DepartmentPeople:
    """Read-model: who shows up in the punches of one department.

    `hod` is the alphabetically first name, a display heuristic only; it is not
    reconciled with the head picked from the roster.
    """

    department: str
    hod: str
    count: int
    names: list[str]

    def to_dict(self) -> dict:
        return {"department": self.department, "hod": self.hod, "count": self.count, "names": list(self.names)}


class PunchIndex:
    """Name- and department-indexed view over punch rows."""

    def __init__(self, rows: Iterable[PunchRow] = ()):
        self._rows = list(rows)
        self._by_name: dict[str, list[PunchRow]] = {}
        for row in self._rows:
            self._by_name.setdefault(normalize_name(row.name), []).append(row)

    def __len__(self) -> int:
        return len(self._rows)

    @property
    def rows(self) -> list[PunchRow]:
        return list(self._rows)

    @property
    def by_name(self) -> dict[str, list[PunchRow]]:
        return {k: list(v) for k, v in self._by_name.items()}

    def rows_for(self, name: str) -> list[PunchRow]:
        return list(self._by_name.get(normalize_name(name), []))

    def departments(self) -> list[str]:
        """Department filter options, `All` first."""
        found = sorted({r.department for r in self._rows if r.department})
        return [ALL_DEPARTMENTS, *found]

    def filter(
        self,
        *,
        department: Optional[str] = None,
        search: Optional[str] = None,
        date_from: Optional[str] = None,
        date_to: Optional[str] = None,
    ) -> list[PunchRow]:
        """Department equality, name/id substring and an ISO date window.

        Rows without any date are never excluded by the date window.
        """
        needle = (search or "").lower()
        out = []
        for r in self._rows:
            if department and department != ALL_DEPARTMENTS and r.department != department:
                continue
            if needle and needle not in r.name.lower() and needle not in r.employee_id.lower():
                continue
            day = r.day
            if date_from and day and day < date_from:
                continue
            if date_to and day and day > date_to:
                continue
            out.append(r)
        return out

    def department_people(self, rows: Optional[Iterable[PunchRow]] = None) -> list[DepartmentPeople]:
        source = self._rows if rows is None else rows
        people: dict[str, set[str]] = {}
        for r in source:
            names = people.setdefault(r.department or UNKNOWN_DEPARTMENT, set())
            if r.name:
                names.add(r.name)

        out = []
        for department in sorted(people):
            names = sorted(people[department])
            out.append(DepartmentPeople(department=department, hod=names[0] if names else "", count=len(names), names=names))
        return out
