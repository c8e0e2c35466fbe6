"""
Task subsystem.

Components:
- task_models.py: Task + wire records (TaskRequest, TaskResponse, TaskListResponse)
- seed_store.py: in-process seed store used by the legacy lookup path
"""
