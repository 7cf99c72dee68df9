"""
Test package for AuthScreen.
"""
