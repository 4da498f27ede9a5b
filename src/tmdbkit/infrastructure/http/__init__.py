from .auth_transport import PARAM_API_KEY, ApiKeyTransport
from .bundle import ClientBundle
from .codec import JsonCodec
from .debug_transport import DebugLoggingTransport, redact_url

__all__ = [
    "PARAM_API_KEY",
    "ApiKeyTransport",
    "ClientBundle",
    "DebugLoggingTransport",
    "JsonCodec",
    "redact_url",
]
