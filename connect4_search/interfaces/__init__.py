"""
connect4_search.interfaces - User interfaces for Connect Four

This package contains the command-line game driver.
"""

# Don't import anything here to avoid circular imports
__all__ = []
