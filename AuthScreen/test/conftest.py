"""
Test configuration and fixtures for AuthScreen tests.

Provides:
- A controllable monotonic clock
- A mocked identity provider
- A running AsyncService and a dispatcher drained by the test thread
- Helpers to pump the dispatcher the way the Tk loop does
"""

import time
from typing import Callable, Generator
from unittest.mock import AsyncMock, MagicMock

import pytest

from AuthScreen.api.client import IdentityProvider
from AuthScreen.core.client.auth import AuthFlowController
from AuthScreen.core.client.models import Session
from AuthScreen.core.client.services import AsyncService
from AuthScreen.core.dispatch import MainThreadDispatcher
from AuthScreen.core.logging import configure_logging, create_testing_config

MESSAGE_TIME = 2.0


def pytest_configure(config):
    configure_logging(create_testing_config())


class FakeClock:
    """Monotonic clock advanced by hand."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


def pump(dispatcher: MainThreadDispatcher, controller: AuthFlowController,
         until: Callable[[], bool], timeout: float = 2.0) -> bool:
    """Drain and tick, as the UI loop does, until ``until()`` holds."""
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        dispatcher.drain()
        controller.tick()
        if until():
            return True
        time.sleep(0.005)
    return False


def wait_for_pending(dispatcher: MainThreadDispatcher, timeout: float = 2.0) -> bool:
    """Wait, without draining, until something is queued on the dispatcher."""
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if dispatcher.pending():
            return True
        time.sleep(0.005)
    return False


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def session() -> Session:
    return Session(user_id="uid-1", email="a@b.com", id_token="id-token", refresh_token="refresh")


@pytest.fixture
def provider(session) -> MagicMock:
    mock = MagicMock(spec=IdentityProvider)
    mock.initialize = AsyncMock(return_value=None)
    mock.create_account = AsyncMock(return_value=session)
    mock.authenticate = AsyncMock(return_value=session)
    mock.close = AsyncMock(return_value=None)
    mock.sign_out = MagicMock()
    return mock


@pytest.fixture
def dispatcher() -> MainThreadDispatcher:
    return MainThreadDispatcher()


@pytest.fixture
def async_service() -> Generator[AsyncService, None, None]:
    service = AsyncService(name="test-auth-io")
    service.start()
    yield service
    service.stop()


@pytest.fixture
def navigate() -> MagicMock:
    return MagicMock()


@pytest.fixture
def reset_screen() -> MagicMock:
    return MagicMock()


@pytest.fixture
def controller(provider, dispatcher, async_service, navigate, reset_screen, clock) -> AuthFlowController:
    return AuthFlowController(
        provider,
        dispatcher,
        async_service,
        navigate_to_main=navigate,
        reset_screen=reset_screen,
        message_display_time=MESSAGE_TIME,
        clock=clock,
    )


@pytest.fixture
def ready_controller(controller, dispatcher) -> AuthFlowController:
    controller.start()
    assert pump(dispatcher, controller, lambda: controller.ready)
    return controller
