"""
utils/ - Shared helpers
=======================
Logging setup and currency unit conversion.
"""
