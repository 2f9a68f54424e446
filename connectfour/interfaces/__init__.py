"""
connectfour.interfaces - User interfaces for Connect Four

Callers that translate user input into GameBoard operations.
"""

# Don't import anything here to avoid circular imports
__all__ = []
