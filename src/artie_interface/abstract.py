"""
This module contains the interface marker.

An interface is an ordinary class whose public methods are the method
signatures that a conforming class promises to implement. The bodies of
those methods are stand-ins (typically `raise NotImplementedError(...)` or
just a docstring) and are never considered an implementation.

Example:

    @interface
    class RemoteInterfaceV1:
        @staticmethod
        def __interface_name__() -> str:
            return "remote-interface-v1"

        def on(self):
            # Turn the device on.
            raise NotImplementedError("Remote devices must implement the `on` method.")
"""
from . import constants
from . import errors
from . import log
import inspect

def interface(cls: type) -> type:
    """
    Mark `cls` as an interface and return it.

    The mark lives in the class's own `__dict__`, so classes that inherit from
    an interface (including the classes that implement it) are not themselves
    interfaces unless they are marked too. Marking an interface a second time
    does nothing.

    Can be used as a class decorator.
    """
    if not inspect.isclass(cls):
        raise errors.InterfaceUsageError(f"Only classes can be marked as interfaces, not {cls!r}.")

    if not is_interface(cls):
        setattr(cls, constants.INTERFACE_FLAG, True)
        log.debug(f"Marked {cls.__qualname__} as an interface declaring {sorted(declared_methods(cls))}.")

    return cls

def is_interface(entity) -> bool:
    """Return whether `entity` is a class that has been marked as an interface."""
    return inspect.isclass(entity) and vars(entity).get(constants.INTERFACE_FLAG) is True

def _is_method_declaration(value) -> bool:
    return inspect.isfunction(value) or isinstance(value, (staticmethod, classmethod, property))

def declared_methods(iface: type) -> frozenset[str]:
    """
    Return the names of the methods that `iface` itself declares.

    Only public names defined directly in the class body count. Dunder and
    private names (like `__interface_name__`) are not part of the contract,
    and methods inherited from a parent interface are declared by that parent.
    """
    return frozenset(name for name, value in vars(iface).items() if not name.startswith("_") and _is_method_declaration(value))

def interface_name(iface: type) -> str:
    """
    Return the human-readable name of an interface.

    Interfaces that define a static `__interface_name__()` (e.g., "servo-interface-v1")
    are named by it. Anything else is named by its class name.
    """
    name_fn = vars(iface).get("__interface_name__")
    if isinstance(name_fn, (staticmethod, classmethod)):
        return getattr(iface, "__interface_name__")()
    return iface.__name__
