# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.
"""

ENV_VARS = {
    # App / logging
    "TODO_APP_NAME": "App display name (default: todo-remote).",
    "TODO_LOG_LEVEL": "Console logging level (default: INFO). The log file always gets DEBUG.",
    "TODO_DATA_DIR": "Local data directory, holds todo.log (default: .local/todo).",
    # Backend
    "TODO_SERVER_URL": "Tasks backend base URL (default: https://ktor-jib-57lqbht3qa-de.a.run.app).",
    "TODO_SERVICE_LATENCY_MS": "Simulated latency of the legacy single-task lookup (default: 2000).",
    # HTTP client
    "TODO_HTTP_CONNECT_TIMEOUT_SECONDS": "Connect timeout (default: 5).",
    "TODO_HTTP_READ_TIMEOUT_SECONDS": "Read timeout (default: 25).",
    "TODO_HTTP_LOG_BODIES": "Log request/response bodies at DEBUG (true/false, default: true).",
}
