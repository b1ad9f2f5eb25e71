"""Pointage engine package.

Feature modules (attendance, justifications, payroll, ...) follow the same
layering: thin Flask controllers, services holding the business rules, and
repository protocols with MySQL implementations.
"""
