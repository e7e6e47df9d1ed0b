"""Pharmacy payroll package.

Organized by feature modules (attendance, employees, payroll, ...) with a thin
Flask controller layer over service/repository layers. The shift classifier
and the payroll calculator are pure functions with no I/O.
"""
