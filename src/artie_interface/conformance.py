"""
This module contains the code for declaring that a class implements one or
more interfaces and for asking which interface methods it still lacks.

Example:

    @implements(RemoteInterfaceV1, StatusLEDInterfaceV1)
    class Device:
        def on(self):
            self.power = True

    unimplemented_methods(Device())
    # {StatusLEDInterfaceV1: ['led_get', 'led_list', 'led_set']}
"""
from . import abstract
from . import errors
from . import log
import inspect
import typing

def _flatten(interfaces) -> list:
    flat = []
    for item in interfaces:
        if isinstance(item, (list, tuple)):
            flat.extend(_flatten(item))
        else:
            flat.append(item)
    return flat

def _update_class_cell(value, old_cls: type, new_cls: type):
    """
    Point the implicit `__class__` cell of a method (used by zero-argument `super()`)
    at the rebuilt class.
    """
    if isinstance(value, (staticmethod, classmethod)):
        functions = [value.__func__]
    elif isinstance(value, property):
        functions = [value.fget, value.fset, value.fdel]
    else:
        functions = [value]

    for fn in functions:
        fn = inspect.unwrap(fn) if fn is not None else None
        if not inspect.isfunction(fn) or "__class__" not in fn.__code__.co_freevars:
            continue
        cell = fn.__closure__[fn.__code__.co_freevars.index("__class__")]
        if cell.cell_contents is old_cls:
            cell.cell_contents = new_cls

def _rebuild(cls: type, bases: tuple) -> type:
    """Re-create `cls` with the same body but different bases."""
    namespace = dict(vars(cls))
    namespace.pop("__dict__", None)
    namespace.pop("__weakref__", None)
    namespace["__qualname__"] = cls.__qualname__

    # Slot descriptors are re-created from __slots__ by the new class
    slots = namespace.get("__slots__", ())
    for slot in ([slots] if isinstance(slots, str) else slots):
        namespace.pop(slot, None)

    try:
        new_cls = type(cls)(cls.__name__, bases, namespace)
    except TypeError as e:
        raise errors.InterfaceUsageError(f"Cannot attach interfaces {[b.__name__ for b in bases]} to {cls.__qualname__}: {e}") from e

    for value in namespace.values():
        _update_class_cell(value, cls, new_cls)

    return new_cls

def declare_conformance(cls: type, *interfaces) -> type:
    """
    Attach each of `interfaces` to `cls` and return the resulting class.

    Each interface may be a marked interface, a plain class (which is marked as an
    interface first), or a list/tuple of those. The interfaces are inserted at the
    front of the class's bases in the given order, so if two of them declare the same
    method, the first one listed wins, and interfaces attached by a later call win
    over interfaces attached by an earlier one. The class's own methods always win.

    Interfaces that the class already has are skipped, as are interfaces that are a base
    of another interface in the same call (they are attached through it). If there is
    nothing new to attach, `cls` is returned unchanged. Otherwise the class is rebuilt
    with its new bases, so always use the returned class.
    """
    if not inspect.isclass(cls):
        raise errors.InterfaceUsageError(f"Interfaces can only be attached to classes, not {cls!r}.")

    to_attach = []
    for iface in _flatten(interfaces):
        abstract.interface(iface)
        if iface in cls.__mro__ or iface in to_attach:
            log.debug(f"{cls.__qualname__} already implements {iface.__qualname__}; skipping.")
            continue
        to_attach.append(iface)

    # A base interface comes along with any interface derived from it
    redundant = [iface for iface in to_attach if any(other is not iface and issubclass(other, iface) for other in to_attach)]
    for iface in redundant:
        log.debug(f"{iface.__qualname__} is a base of another interface attached to {cls.__qualname__}; skipping.")
        to_attach.remove(iface)

    if not to_attach:
        return cls

    new_cls = _rebuild(cls, tuple(to_attach) + cls.__bases__)
    log.debug(f"{cls.__qualname__} now implements {[iface.__qualname__ for iface in to_attach]}.")
    return new_cls

def implements(*interfaces) -> typing.Callable[[type], type]:
    """
    Class decorator form of `declare_conformance()`.

    Example:

        @implements(DriverInterfaceV1, ServoInterfaceV1)
        class EyebrowsDriver:
            ...
    """
    # Usage errors should surface at the decorator line, not when it is applied
    flat = _flatten(interfaces)
    for iface in flat:
        abstract.interface(iface)

    def decorator(cls: type) -> type:
        return declare_conformance(cls, *flat)
    return decorator

implement = implements

def _target_class(target) -> type:
    return target if inspect.isclass(target) else type(target)

def attached_interfaces(target) -> list[type]:
    """
    Return the interfaces implemented by `target` (a class or an instance), in method resolution order.

    The target class itself is never included, even if it is an interface.
    """
    return [klass for klass in inspect.getmro(_target_class(target))[1:] if abstract.is_interface(klass)]

def _is_data_descriptor(value) -> bool:
    return hasattr(type(value), "__set__") or hasattr(type(value), "__delete__")

def _resolve(target, name: str) -> tuple[typing.Any, typing.Any]:
    """
    Return `(owner, value)` for the attribute that normal lookup of `name` on `target` would find,
    or `(None, None)` if there is none. The owner is the instance itself for instance attributes,
    otherwise the class in the MRO that defines the attribute.
    """
    owner, value = None, None
    for klass in inspect.getmro(_target_class(target)):
        if name in vars(klass):
            owner, value = klass, vars(klass)[name]
            break

    if inspect.isclass(target) or (owner is not None and _is_data_descriptor(value)):
        return owner, value

    instance_dict = getattr(target, "__dict__", None)
    if instance_dict is not None and name in instance_dict:
        return target, instance_dict[name]
    return owner, value

def has_catch_all(target) -> bool:
    """
    Return whether `target` handles lookups of otherwise undefined names (i.e., defines `__getattr__`).

    Overriding `__getattribute__` does not count. It intercepts every lookup, including
    the ones that already succeed, so it says nothing about names that would otherwise
    be missing.
    """
    return any("__getattr__" in vars(klass) for klass in inspect.getmro(_target_class(target)))

def _responds(target, owner, value, declaration) -> bool:
    """
    Return whether `value`, found on `owner` by looking up a declared name on `target`,
    can stand in for `declaration` (the interface's own binding of that name).

    A declared property only needs a value other than `None`. Anything else was declared
    as a method, so the value must be something that can be called once it is looked up.
    """
    if value is None:
        return False
    if isinstance(declaration, property):
        return True
    if callable(value) or isinstance(value, (staticmethod, classmethod)):
        return True
    if owner is target or inspect.isclass(target) or not hasattr(type(value), "__get__"):
        return False

    try:
        return callable(value.__get__(target, type(target)))
    except AttributeError:
        return False

def unimplemented_methods_for(target, iface: type) -> list[str]:
    """
    Return the sorted names of the methods declared by `iface` that `target` does not implement.

    A method is implemented if looking it up on `target` finds something callable (or,
    for a declared property, anything other than `None`) that does not come from `iface`
    itself (any other class in the MRO counts), or if `target` has a catch-all `__getattr__`,
    which is taken to handle every name.
    """
    if not inspect.isclass(iface):
        raise errors.InterfaceUsageError(f"Expected an interface class, not {iface!r}.")

    catch_all = has_catch_all(target)
    missing = []
    for name in abstract.declared_methods(iface):
        owner, value = _resolve(target, name)
        if owner is not None and owner is not iface and _responds(target, owner, value, vars(iface)[name]):
            continue
        if catch_all:
            continue
        missing.append(name)
    return sorted(missing)

def unimplemented_methods(target) -> dict[type, list[str]]:
    """
    Return each partially implemented interface of `target` mapped to the sorted
    names of its methods that `target` does not implement.

    Fully implemented interfaces are left out, so an empty dict means `target`
    implements everything it claims to.
    """
    result = {}
    for iface in attached_interfaces(target):
        missing = unimplemented_methods_for(target, iface)
        if missing:
            result[iface] = missing
    return result

def check_conformance(target):
    """
    Raise `InterfaceNotImplementedError` if `target` is missing any of its interface methods.
    """
    missing = unimplemented_methods(target)
    if missing:
        err = errors.InterfaceNotImplementedError(target, missing)
        log.warning(str(err))
        raise err
