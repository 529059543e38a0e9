"""
Task subsystem.

Components:
- task_models.py: data structures (Task, Priority, TaskFilter, TaskStats)
- validators.py: text / id checks shared by the store and the CLI
- task_storage.py: JSON-file persistence of the whole collection
- task_store.py: in-memory task list with write-through saves
- errors.py: ValidationError / StorageError / TaskStoreInitError
"""
