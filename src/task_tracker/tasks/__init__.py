"""
Task subsystem.

Components:
- task_models.py: data structures (Task, TaskDraft, Priority, TaskQuery, TaskStats)
- task_schema.py: versioned JSON document codec
- task_store.py: key-value persistence adapter (load/save/clear)
- task_repository.py: owner of the in-memory collection, all mutations
- task_validation.py: form rules for drafts
- task_stats.py / task_query.py: pure projections for the view
- task_api.py: small high-level helpers used by the UI layer
"""
