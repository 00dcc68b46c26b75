"""
Pytest configuration and shared fixtures for Artie interface library tests.

Marking and attaching interfaces changes the classes involved, so every fixture
builds its classes from scratch.
"""
import pytest
from artie_interface import interface


@pytest.fixture
def remote_interface():
    """A marked interface with an `__interface_name__`, declaring `on` and `off`."""
    @interface
    class RemoteInterfaceV1:
        @staticmethod
        def __interface_name__() -> str:
            return "remote-interface-v1"

        def on(self):
            raise NotImplementedError("Remote devices must implement the `on` method.")

        def off(self):
            raise NotImplementedError("Remote devices must implement the `off` method.")

    return RemoteInterfaceV1


@pytest.fixture
def servo_interface():
    """A plain (not yet marked) mixin declaring the servo methods."""
    class ServoInterfaceV1:
        @staticmethod
        def __interface_name__() -> str:
            return "servo-interface-v1"

        def servo_list(self) -> list[str]:
            raise NotImplementedError("servo_list method must be implemented by the service.")

        def servo_set_position(self, servo_id: str, position: float) -> None:
            raise NotImplementedError("servo_set_position method must be implemented by the service.")

        def servo_get_position(self, servo_id: str) -> float:
            raise NotImplementedError("servo_get_position method must be implemented by the service.")

    return ServoInterfaceV1


@pytest.fixture
def ab_interface():
    """A marked interface declaring `b` before `a`."""
    @interface
    class ABInterface:
        def b(self):
            pass

        def a(self):
            pass

    return ABInterface


@pytest.fixture
def colliding_interfaces():
    """Two marked interfaces that both declare `m`, each returning its own name."""
    @interface
    class First:
        def m(self):
            return "first"

    @interface
    class Second:
        def m(self):
            return "second"

    return First, Second
