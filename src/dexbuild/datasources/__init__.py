"""External data source integrations.

Each subdirectory is one data source with a consistent structure:

    datasources/{name}/
    ├── __init__.py       # Public API re-exports
    ├── client.py         # API URLs and the HTTP/validation layer
    ├── models.py         # Pydantic models for API responses
    └── {feature}.py      # Fetch + normalize functions (one per concept)

Fetch functions raise ``dexbuild.exceptions.FetchError`` on any upstream
failure; retry and pacing policy belongs to the flows, not to the source.
"""
