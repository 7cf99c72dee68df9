"""
Core of the AuthScreen application: logging, the main-thread dispatcher and the client.
"""
