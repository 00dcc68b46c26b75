"""
Artie Interface Library

Lets a class declare the interfaces (collections of method signatures) that it
implements and lets any code ask, at runtime, which of those methods are still
unimplemented.
"""
from .abstract import declared_methods
from .abstract import interface
from .abstract import interface_name
from .abstract import is_interface
from .conformance import attached_interfaces
from .conformance import check_conformance
from .conformance import declare_conformance
from .conformance import has_catch_all
from .conformance import implement
from .conformance import implements
from .conformance import unimplemented_methods
from .conformance import unimplemented_methods_for
from .errors import InterfaceError
from .errors import InterfaceNotImplementedError
from .errors import InterfaceUsageError
from .mixin import ConformanceMixin

__version__ = "0.1.0"
