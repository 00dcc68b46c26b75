"""
This module contains the `ConformanceMixin`, which gives a class's instances
methods for asking about their own interfaces.
"""
from . import abstract
from . import conformance

class ConformanceMixin:
    """
    `ConformanceMixin` can be included in the bases of any class that implements
    interfaces so that its instances can report on themselves.
    """
    def interfaces(self) -> list[type]:
        """Return the interfaces this object's class implements."""
        return conformance.attached_interfaces(self)

    def unimplemented_methods(self) -> dict[type, list[str]]:
        """
        Return each partially implemented interface mapped to the sorted list
        of its methods that this object does not implement.
        """
        return conformance.unimplemented_methods(self)

    def unimplemented_methods_for(self, iface: type) -> list[str]:
        """Return the sorted list of methods from `iface` that this object does not implement."""
        return conformance.unimplemented_methods_for(self, iface)

    def check_conformance(self):
        """Raise `InterfaceNotImplementedError` if any interface method is unimplemented."""
        conformance.check_conformance(self)

    def get_fully_qualified_name(self, name: str) -> str:
        """
        Get the fully-qualified name of this object, including all of the interfaces
        that it implements. This returns a string of the form:
        "<name>:<interface1>:<interface2>:..." with the interfaces in method resolution order.
        """
        return ":".join([name] + [abstract.interface_name(iface) for iface in self.interfaces()])
