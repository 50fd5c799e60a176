# tests\__init__.py
"""
Test Suite for Group Portal.

Organization:
- `core`: Domain models and Use Cases with mocked Ports.
- `adapters`: SQL persistence, access policy, HTML serializer and the HTTP API
  (in-memory SQLite, no external infrastructure).
"""
