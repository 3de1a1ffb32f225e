"""
Storage subsystem.

Components:
- kv_store.py: key-value backends (SQLite, JSON file, in-memory)
- repository.py: group collection <-> one JSON string under one key
"""
