"""
queries/ - SQL Builders
=======================
Pure functions that turn structured options into ``(sql, params)`` pairs.
They perform no I/O; the results are handed to a StatementExecutor.
"""
