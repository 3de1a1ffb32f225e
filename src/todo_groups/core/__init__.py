"""
Core (no I/O).

Components:
- models.py: records (Task, Group), TaskFilter, id generation, record codec
- groups.py: pure mutations + active/completed classification
- view_state.py: filter and inline-edit state
- ports.py: storage / listener / screen protocols
- state.py: AppState wiring container
"""
