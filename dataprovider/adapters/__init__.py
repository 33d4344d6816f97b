# dataprovider/adapters/__init__.py
from .rest_adapter import RESTDataProvider

__all__ = ["RESTDataProvider"]
