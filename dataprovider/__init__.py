# dataprovider/__init__.py
from .provider import DataProvider
from .registry import ProviderRegistry
from .config import load_config, ClientConfig, ResourceConfig, FieldConfig
from .models import (
    Identifier, Record, Resource,
    PaginationPayload, SortPayload, SortOrder, PageInfo,
    GetListParams, GetListResult,
    GetOneParams, GetOneResult,
    GetManyParams, GetManyResult,
    GetManyReferenceParams, GetManyReferenceResult,
    CreateParams, CreateResult,
    UpdateParams, UpdateResult,
    UpdateManyParams, UpdateManyResult,
    DeleteParams, DeleteResult,
    DeleteManyParams, DeleteManyResult,
)
from .exceptions import (
    DataProviderError, UrlError, TransportError, RequestStatusError,
    ParseError, UnknownError, ConfigError, ClientNotFoundError,
)

__version__ = "0.1.0"
__all__ = [
    "DataProvider", "ProviderRegistry",
    "load_config", "ClientConfig", "ResourceConfig", "FieldConfig",
    "Identifier", "Record", "Resource",
    "PaginationPayload", "SortPayload", "SortOrder", "PageInfo",
    "GetListParams", "GetListResult", "GetOneParams", "GetOneResult",
    "GetManyParams", "GetManyResult", "GetManyReferenceParams", "GetManyReferenceResult",
    "CreateParams", "CreateResult", "UpdateParams", "UpdateResult",
    "UpdateManyParams", "UpdateManyResult", "DeleteParams", "DeleteResult",
    "DeleteManyParams", "DeleteManyResult",
    "DataProviderError", "UrlError", "TransportError", "RequestStatusError",
    "ParseError", "UnknownError", "ConfigError", "ClientNotFoundError",
]
