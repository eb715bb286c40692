"""HR Attendance package.

Organized by feature modules (employees, timelogs, leaves, attendance,
overtime, ...) around a pure computation engine, with a thin Flask controller
layer and repository/service layers at the boundary.
"""
