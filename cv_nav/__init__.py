"""cv_nav: a résumé browsed as nested terminal menus."""

__version__ = "0.1.0"
