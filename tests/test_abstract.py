"""
Unit tests for marking classes as interfaces.
"""
import pytest
from artie_interface import InterfaceUsageError
from artie_interface import declared_methods
from artie_interface import interface
from artie_interface import interface_name
from artie_interface import is_interface


class TestMarking:
    """Tests for interface() and is_interface()."""

    def test_mark_plain_class(self, servo_interface):
        """Test that marking a plain class makes it an interface."""
        assert not is_interface(servo_interface)
        assert interface(servo_interface) is servo_interface
        assert is_interface(servo_interface)

    def test_mark_is_idempotent(self, ab_interface):
        """Test that marking an interface twice is a no-op."""
        before = declared_methods(ab_interface)
        marked = interface(interface(ab_interface))
        assert marked is ab_interface
        assert is_interface(marked)
        assert declared_methods(marked) == before == frozenset({"a", "b"})

    def test_mark_empty_class(self):
        """Test that a class with no methods can be an interface."""
        class Empty:
            pass

        interface(Empty)
        assert is_interface(Empty)
        assert declared_methods(Empty) == frozenset()

    def test_subclass_is_not_interface(self, remote_interface):
        """Test that inheriting from an interface does not make a class an interface."""
        class Device(remote_interface):
            pass

        assert is_interface(remote_interface)
        assert not is_interface(Device)

    def test_non_interfaces(self, remote_interface):
        """Test that instances and other objects are never interfaces."""
        assert not is_interface(remote_interface())
        assert not is_interface(None)
        assert not is_interface("RemoteInterfaceV1")
        assert not is_interface(object)

    @pytest.mark.parametrize("bad", [None, 42, "Remote", lambda: None])
    def test_mark_non_class_fails(self, bad):
        """Test that marking something other than a class fails immediately."""
        with pytest.raises(InterfaceUsageError):
            interface(bad)

    def test_usage_error_is_type_error(self):
        """Test that usage errors can be caught as TypeError."""
        with pytest.raises(TypeError):
            interface(object())


class TestDeclaredMethods:
    """Tests for declared_methods()."""

    def test_public_methods_only(self, remote_interface):
        """Test that dunder names like __interface_name__ are not declared methods."""
        assert declared_methods(remote_interface) == frozenset({"on", "off"})

    def test_private_and_data_excluded(self):
        """Test that private methods and plain class attributes are not declared methods."""
        @interface
        class Sensor:
            VERSION = 1

            def _helper(self):
                pass

            def read(self):
                pass

        assert declared_methods(Sensor) == frozenset({"read"})

    def test_descriptor_kinds(self):
        """Test that static methods, class methods, and properties are declared methods."""
        @interface
        class Kinds:
            @staticmethod
            def s():
                pass

            @classmethod
            def c(cls):
                pass

            @property
            def p(self):
                return None

        assert declared_methods(Kinds) == frozenset({"s", "c", "p"})

    def test_inherited_methods_not_declared(self, remote_interface):
        """Test that an extending interface only declares its own methods."""
        @interface
        class DimmableRemote(remote_interface):
            def dim(self, level: int):
                pass

        assert declared_methods(DimmableRemote) == frozenset({"dim"})


class TestInterfaceName:
    """Tests for interface_name()."""

    def test_static_interface_name(self, remote_interface):
        """Test that __interface_name__ is used when present."""
        assert interface_name(remote_interface) == "remote-interface-v1"

    def test_classmethod_interface_name(self):
        """Test that a classmethod __interface_name__ is also used."""
        @interface
        class Display:
            @classmethod
            def __interface_name__(cls) -> str:
                return "display-interface-v1"

        assert interface_name(Display) == "display-interface-v1"

    def test_fallback_to_class_name(self, ab_interface):
        """Test that the class name is used when there is no __interface_name__."""
        assert interface_name(ab_interface) == "ABInterface"

    def test_inherited_interface_name_not_used(self, remote_interface):
        """Test that an extending interface is not named by its parent's __interface_name__."""
        @interface
        class DimmableRemote(remote_interface):
            pass

        assert interface_name(DimmableRemote) == "DimmableRemote"
