"""
Task subsystem.

Components:
- task_models.py: data structures (Task, TaskFilter)
- task_store.py: in-memory TaskListStore (ordered tasks + active filter)
- task_api.py: small read-side helpers used by the presentation layer
"""
