from .builder import ConfigBuilder
from .descriptor import ClientDescriptor
from .environment import ENDPOINT_PRODUCTION, EnvironmentHost
from .errors import ConfigurationError, MalformedSerializedFormError, VerifySdkError
from .version import get_version

__all__ = [
    "ClientDescriptor",
    "ConfigBuilder",
    "ConfigurationError",
    "ENDPOINT_PRODUCTION",
    "EnvironmentHost",
    "MalformedSerializedFormError",
    "VerifySdkError",
    "get_version",
]
