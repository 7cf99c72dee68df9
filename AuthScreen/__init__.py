"""
AuthScreen - email/password login and registration screen backed by an
external identity provider.

Provider callbacks are marshalled onto the UI thread by a main-thread
dispatcher drained once per UI tick.
"""

__version__ = "1.0.0"
