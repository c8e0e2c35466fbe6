"""
Remote backend access.

Components:
- http_client.py: shared httpx.AsyncClient factory (base URL, timeouts, wire logging)
- tasks_api.py: typed REST calls, httpx errors mapped to NetworkError/DecodeError
- remote_data_source.py: RemoteTaskStore (observable reads, remote mutations)
"""
