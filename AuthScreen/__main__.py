"""
Allows ``python -m AuthScreen``.
"""

from AuthScreen.start.client import main

if __name__ == '__main__':
    main()
