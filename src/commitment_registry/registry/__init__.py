"""
Registry subsystem.

Components:
- models.py: record types, ErrorKind, OpResult
- messages.py: numeric bounds and message strings
- validation.py: pure field predicates
- store.py: SQLite-backed objective / priority / deadline tables
- counter.py: block counter providers
- service.py: operation façade that enforces the cross-table rules
"""
