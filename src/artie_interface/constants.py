import enum

class InterfaceEnvVariables(enum.StrEnum):
    """
    Various env-mapped configuration keys for the interface library.

    These come from the environment of whatever process imports the library,
    either the Kubernetes deployment (for services) or the shell (for tests and tools).
    """
    LOG_LEVEL = "ARTIE_INTERFACE_LOG_LEVEL"

DEFAULT_LOG_LEVEL = "WARNING"
"""The log level used when `ARTIE_INTERFACE_LOG_LEVEL` is unset or not a known level name."""

INTERFACE_FLAG = "__artie_interface__"
"""The attribute set in an interface class's own `__dict__` to mark it as an interface."""
