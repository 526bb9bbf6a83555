"""
connectfour.interfaces - User interfaces for Connect Four

Front ends that drive a GameSession and draw it from its events.
"""

# Don't import anything here to avoid circular imports
__all__ = []
