# dataprovider/exceptions.py

class DataProviderError(Exception):
    """Base exception for data provider operations"""
    pass

class UrlError(DataProviderError):
    """Raised when a base URL or a composed request URL is malformed"""
    pass

class TransportError(DataProviderError):
    """Raised when the backend cannot be reached"""
    pass

class RequestStatusError(DataProviderError):
    """Raised when the backend answers with a non-2xx status"""

    def __init__(self, status_code: int, message: str):
        super().__init__(message)
        self.status_code = status_code
        self.message = message

class ParseError(DataProviderError):
    """Raised when a response body cannot be decoded into the expected shape"""
    pass

class UnknownError(DataProviderError):
    """Raised on precondition or invariant violations"""
    pass

class ConfigError(DataProviderError):
    """Raised when the client configuration cannot be loaded"""
    pass

class ClientNotFoundError(DataProviderError):
    """Raised when no provider is registered under a client name"""
    pass
