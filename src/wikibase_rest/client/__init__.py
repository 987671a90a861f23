from .client import Client
from .transport import HttpResponse, HttpTransport, RequestsTransport

__all__ = ["Client", "HttpResponse", "HttpTransport", "RequestsTransport"]
