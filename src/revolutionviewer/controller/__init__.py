"""
The CONTROLLER layer owns the live scene state and the user operations
that rebuild it.
"""
