"""
db/ - Database Layer
====================
Handles PostgreSQL connection pools, statement execution and schema
initialization. This layer is the lowest in the architecture and has no
dependencies on other layers.
"""
