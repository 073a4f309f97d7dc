"""HR workflow backend.

Organized by feature modules (users, teams, tasks, leaves, reports, reviews,
attendance, todos), each with a thin Flask controller over a service and a
repository interface with a MySQL implementation.
"""
