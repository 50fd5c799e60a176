# group_portal\__init__.py
"""
Group Portal - group pages and subscription management.

This package renders Group content pages together with the viewer's
subscription widget, and exposes the subscribe / leave actions the widget
links to. It follows Hexagonal Architecture (Ports & Adapters).
"""

__version__ = "1.0.0"
