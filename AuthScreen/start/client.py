"""
Client startup module for AuthScreen.
Parses command line options and launches the Tk login screen.
"""

import argparse
from typing import List, Optional

from AuthScreen.config import Config
from AuthScreen.core.logging import auto_configure, get_logger

__all__ = ['client', 'parse', 'main']

logger = get_logger(__name__)


def parse(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog='AuthScreen', description='AuthScreen login client')
    parser.add_argument('--api-key', default=Config.IDENTITY_API_KEY,
                        help='Identity provider API key (default: $AUTHSCREEN_API_KEY)')
    parser.add_argument('--base-url', default=Config.IDENTITY_BASE_URL,
                        help='Identity provider REST root')
    parser.add_argument('--locale', default=Config.LOCALE, choices=['ko', 'en'],
                        help=f'Message language (default: {Config.LOCALE})')
    parser.add_argument('--message-time', type=float, default=Config.MESSAGE_DISPLAY_TIME,
                        help='Seconds a status message stays visible (default: %(default)s)')
    parser.add_argument('--log-env', default=None,
                        choices=['development', 'production', 'testing'],
                        help='Logging preset (default: $AUTHSCREEN_ENV or development)')
    return parser.parse_args(argv)


def client(api_key: str = Config.IDENTITY_API_KEY, base_url: str = Config.IDENTITY_BASE_URL,
           locale: str = Config.LOCALE, message_time: float = Config.MESSAGE_DISPLAY_TIME):
    """
    Start the login screen.

    Args:
        api_key: Identity provider API key
        base_url: Identity provider REST root
        locale: Message catalog ("ko" or "en")
        message_time: Status message lifetime and transition delay in seconds
    """
    # Tk and theme packages load only when a window is actually opened
    from AuthScreen.api.client import IdentityToolkitClient
    from AuthScreen.core.client.gui import GUIClient

    if not api_key:
        logger.warning("No identity provider API key configured; sign-in will be unavailable")

    provider = IdentityToolkitClient(api_key, base_url, Config.API_TIMEOUT_SECONDS)
    gui = GUIClient(provider, message_display_time=message_time, locale=locale)
    try:
        gui.run()
    except KeyboardInterrupt:
        logger.info("Client stopped by user")


def main(argv: Optional[List[str]] = None):
    args = parse(argv)
    auto_configure(args.log_env)
    client(api_key=args.api_key, base_url=args.base_url,
           locale=args.locale, message_time=args.message_time)
