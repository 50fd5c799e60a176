# group_portal\adapters\__init__.py
"""
Infrastructure Adapters.

Concrete implementations of the Ports defined in `group_portal.core.ports`:
- `api`: The Primary Adapter (Driving) - FastAPI web server.
- `persistence`: Secondary Adapter (Driven) - SQLAlchemy storage.
- `access`: Secondary Adapter (Driven) - role based permission checks.

Dependencies point INWARD. These modules depend on `group_portal.core`,
but `group_portal.core` never imports from here.
"""
