"""Employee Attendance package.

Organized by feature modules (users, attendance) with a thin Flask controller
layer on top of service/repository layers.
"""
