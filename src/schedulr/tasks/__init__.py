"""
Task subsystem.

Components:
- task_models.py: data structures (Task, TaskStatus, DerivedStatistics) and errors
- task_store.py: in-memory storage + CRUD helpers
- task_stats.py: derived statistics computed on demand
- task_api.py: small helpers used by the presentation layer (sample data, display)
"""
