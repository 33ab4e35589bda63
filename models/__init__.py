"""
models/ - Domain Models
=======================
Plain dataclasses passed between the repositories and their callers.
"""
