"""
repositories/ - Data Access Layer
==================================
Each repository encapsulates all SQL queries for a specific domain entity.
Repositories run their statements through an injected StatementExecutor and
let StorageError propagate, so callers can tell "no rows" from a failure.
"""
