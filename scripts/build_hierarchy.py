from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from src.faculty_attendance.faculty_attendance.ingest.source import WorkbookRowSource, file_loader
from src.faculty_attendance.faculty_attendance.organization.dashboard import read_roster
from src.faculty_attendance.faculty_attendance.organization.service import OrganizationService


def main() -> None:
    parser = argparse.ArgumentParser(description="Print the department hierarchy as JSON.")
    parser.add_argument("roster", help="roster text file")
    parser.add_argument("--workbook", help="attendance workbook (.xlsx or .csv)")
    args = parser.parse_args()

    rows = WorkbookRowSource(file_loader(args.workbook)).rows() if args.workbook else []
    org = OrganizationService().build(read_roster(args.roster), rows)
    print(json.dumps(org.to_dict(), indent=2, default=str))


if __name__ == "__main__":
    main()
