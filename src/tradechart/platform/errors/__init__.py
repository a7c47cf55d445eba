from .configuration_error import ConfigurationError

__all__ = [
    "ConfigurationError",
]
