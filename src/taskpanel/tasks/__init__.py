"""
Task subsystem.

Components:
- task_models.py: document types (ActiveTask, CompletedTask, StoredData) and shape parsing
- task_ops.py: pure operations over a document (add/toggle/edit/delete/restore/prune/progress)
- task_store.py: JSON file storage with legacy-schema migration
- preferences.py: checklist mode / auto delete / retention / language preferences
- task_api.py: typed actions and the load-mutate-prune-save cycle
"""
