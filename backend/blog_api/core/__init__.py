"""Core Layer - domain types, errors, guards and pure record mutation.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - Nothing here performs IO
"""
