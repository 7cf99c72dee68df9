"""
Startup entry points for AuthScreen.
"""
