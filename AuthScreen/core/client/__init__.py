"""
Client module for AuthScreen.
Provides the auth flow, its data models and the Tk GUI.

GUI imports stay in the ``gui`` subpackage so the auth flow can be used
without a display.
"""
