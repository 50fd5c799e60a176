# group_portal\core\domain\__init__.py
"""
Domain Entities and Value Objects.

The "ubiquitous language" of the group pages: Group, Viewer, Membership,
and the typed render tree (Container, Text, Link) the page builders return.
"""
