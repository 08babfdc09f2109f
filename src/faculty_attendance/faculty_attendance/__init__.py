"""Faculty Attendance package.

This package is organized by feature modules (roster, punches, attendance,
leave, ...) with a thin Flask controller layer on top of pure ingestion and
derivation services.
"""
