"""Example: use the service layer directly (no Flask).

Controllers are a thin layer; parsing and derivation live in the services.
"""

from src.faculty_attendance.faculty_attendance.leave.service import LeaveCreditService
from src.faculty_attendance.faculty_attendance.organization.service import OrganizationService

ROSTER = "TIG001 Asha Rao CSE TINT 2025-08 18  TIG002 Ravi Kumar CSE TINT 2025-08 17"

ROWS = [
    {"Employee Name": "Ravi Kumar", "In Date": "2024-01-02", "In Time": "9:05",
     "Out Date": "2024-01-02", "Out Time": "17:40", "Present": 7, "Absent": 2, "Leave": 1},
]


def main():
    org = OrganizationService().build(ROSTER, ROWS)
    for dept in org.departments:
        hod = dept.hods[0]
        print(dept.code, "HOD:", hod.name, "faculty:", [f.name for f in hod.faculties])
    print(LeaveCreditService().duration(org.punches.rows))


if __name__ == "__main__":
    main()
