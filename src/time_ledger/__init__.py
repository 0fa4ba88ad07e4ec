"""Time Ledger package.

Reconciles work-log records against known employees and projects and keeps a
per-employee, per-day hour ledger in sync with the remote record store.
Organized by feature modules (projects, employees, timelogs, identity, ledger,
gateway) with a thin Flask controller layer on top.
"""
