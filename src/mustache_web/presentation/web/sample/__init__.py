"""
Sample pages
"""

from .home_page import HomePage, load_items

__all__ = ["HomePage", "load_items"]
