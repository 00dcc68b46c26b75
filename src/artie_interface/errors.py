"""
Exceptions raised by the interface library.
"""

class InterfaceError(Exception):
    """Base exception for the interface library"""
    pass


class InterfaceUsageError(InterfaceError, TypeError):
    """
    Raised when something that cannot be an interface is passed where one is expected,
    for example an instance or a function given to `interface()` or `implements()`.
    """
    pass


class InterfaceNotImplementedError(InterfaceError, NotImplementedError):
    """
    Raised by `check_conformance()` when an object still has unimplemented interface methods.

    The `unimplemented` attribute holds the same mapping that `unimplemented_methods()`
    returned for the object: each partially implemented interface mapped to its
    sorted list of missing method names.
    """
    def __init__(self, target, unimplemented: dict[type, list[str]]):
        self.target = target
        self.unimplemented = unimplemented
        name = target.__name__ if isinstance(target, type) else type(target).__name__
        details = "; ".join(f"{iface.__name__}: {', '.join(methods)}" for iface, methods in unimplemented.items())
        super().__init__(f"{name} does not implement all of its interfaces ({details})")
