"""Meeting Attendance package.

Organized by feature modules (members, events, attendance, stats) with a
thin Flask controller layer over service/repository layers.
"""
