"""
Task subsystem.

Components:
- task_models.py: data structures (Task, EditMode, Snapshot, Locale)
- ordering.py: render order and row colours
- edit_mode.py: which single task is being edited
- synchronizer.py: mutation -> gateway -> re-fetch -> publish pipeline
- errors.py: exception hierarchy
"""
