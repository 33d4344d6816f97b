# dataprovider/provider.py
from abc import ABC, abstractmethod

from .models import (
    Resource,
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

class DataProvider(ABC):
    """
    Uniform data-access contract every backend implements.

    Each operation takes a Resource plus its parameter dataclass and returns
    the matching result dataclass, or raises a DataProviderError subclass.
    Operations share no mutable state, so callers may await several of them
    concurrently.
    """

    @abstractmethod
    async def get_list(self, resource: Resource, params: GetListParams) -> GetListResult:
        """List records of a resource"""

    @abstractmethod
    async def get_one(self, resource: Resource, params: GetOneParams) -> GetOneResult:
        """Fetch a single record by id"""

    @abstractmethod
    async def get_many(self, resource: Resource, params: GetManyParams) -> GetManyResult:
        """Fetch the records matching any of the given ids; missing ids are omitted"""

    @abstractmethod
    async def get_many_reference(self, resource: Resource,
                                 params: GetManyReferenceParams) -> GetManyReferenceResult:
        """List records of params.target related to the record params.id"""

    @abstractmethod
    async def create(self, resource: Resource, params: CreateParams) -> CreateResult:
        """Create a record and return it with its backend-assigned id"""

    @abstractmethod
    async def update(self, resource: Resource, params: UpdateParams) -> UpdateResult:
        pass

    @abstractmethod
    async def update_many(self, resource: Resource, params: UpdateManyParams) -> UpdateManyResult:
        """Update several records; returns only the ids that were updated"""

    @abstractmethod
    async def delete(self, resource: Resource, params: DeleteParams) -> DeleteResult:
        """Delete a record and return it, falling back to params.previous_data"""

    @abstractmethod
    async def delete_many(self, resource: Resource, params: DeleteManyParams) -> DeleteManyResult:
        """Delete several records; returns only the ids that were deleted"""
