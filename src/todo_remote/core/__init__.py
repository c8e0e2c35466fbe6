"""
Core building blocks.

Components:
- result.py: Result[T] (Loading / Success / Error)
- errors.py: error taxonomy (NetworkError, DecodeError, NotFoundError)
- observable.py: observable value holder + derived views
- ports.py: Protocols (TasksBackend, TasksDataSource)
- state.py: AppState composition object
"""
