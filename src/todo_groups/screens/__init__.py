"""
Screens.

Components:
- active.py: mutable active-groups screen (owns the session state, persists on change)
- archive.py: read-only completed-groups screen, refreshed on focus
- navigation.py: tab navigator emitting the focus signal
"""
