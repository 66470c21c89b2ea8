"""TUI (Terminal User Interface) module for cv_nav.

Provides stack-based navigation over the résumé's content tree.
"""
from .dispatcher import InputDispatcher
from .navigator import NavigationStack
from .render import ViewRenderer

__all__ = ["InputDispatcher", "NavigationStack", "ViewRenderer"]
