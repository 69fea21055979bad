"""HR Portal package.

Attendance tracking and approval workflows organized by feature modules
(attendance, requests, dashboard, ...) with a thin Flask controller layer on
top of service/repository layers backed by a key-value record store.
"""
