# dataprovider/adapters/rest_adapter.py
import asyncio
import logging
from typing import Any, Dict, List, Optional, Tuple
from urllib.parse import quote, urlencode, urlsplit

import requests

from ..exceptions import (
    DataProviderError,
    ParseError,
    RequestStatusError,
    TransportError,
    UnknownError,
    UrlError,
)
from ..models import (
    FilterPayload, Identifier, PaginationPayload, Record, Resource, SortPayload,
    normalize_resource_name,
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
from ..provider import DataProvider

logger = logging.getLogger(__name__)

class RESTDataProvider(DataProvider):
    """
    Data provider for a plain REST backend:
    GET /{resource}, GET/PUT/DELETE /{resource}/{id}, POST /{resource}

    Blocking requests calls run in a worker thread, so each operation is
    awaitable and only suspends while a request is in flight.
    """

    def __init__(self, base_url: str, config: Dict = None, session: requests.Session = None):
        self.base_url = self._validate_base_url(base_url)
        self.config = {
            "timeout": 30,
            "id_field": "id",
            "max_concurrency": 5,
            # Pagination/sort/filter are only sent when explicitly enabled
            "render_query": False,
            "page_param": "_page",
            "per_page_param": "_limit",
            "sort_param": "_sort",
            "order_param": "_order",
            **(config or {})
        }
        if self.config["max_concurrency"] < 1:
            raise UnknownError("max_concurrency must be at least 1")

        self.session = session or requests.Session()
        self.session.headers.update({
            "Content-Type": "application/json",
            "Accept": "application/json"
        })

    @staticmethod
    def _validate_base_url(base_url: str) -> str:
        base_url = base_url.strip()
        try:
            parts = urlsplit(base_url)
        except ValueError as e:
            raise UrlError(f"failed to parse {base_url}: {e}") from e
        if parts.scheme not in ("http", "https") or not parts.netloc:
            raise UrlError(f"failed to parse {base_url}: expected an http(s) URL with a host")
        if parts.query or parts.fragment:
            raise UrlError(f"failed to parse {base_url}: base URL must not carry a query or fragment")
        return base_url.rstrip("/")

    def close(self):
        self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    # URL composition

    def _url(self, resource: Resource, *segments, query: List[Tuple[str, str]] = None) -> str:
        if not resource.name:
            raise UrlError("Resource name must not be empty")
        parts = [self.base_url, resource.name]
        for segment in segments:
            if isinstance(segment, Identifier):
                # Ids are a single segment; "/" and other reserved characters are escaped
                segment = quote(str(segment), safe="")
            if not segment:
                raise UrlError(f"Empty path segment for resource {resource.name}")
            parts.append(segment)
        url = "/".join(parts)
        if query:
            url = f"{url}?{urlencode(query)}"
        return url

    def _list_query(self, pagination: Optional[PaginationPayload], sort: Optional[SortPayload],
                    filter: Optional[FilterPayload]) -> List[Tuple[str, str]]:
        if not self.config["render_query"]:
            return []

        query = []
        if pagination is not None:
            query.append((self.config["page_param"], str(pagination.page)))
            query.append((self.config["per_page_param"], str(pagination.per_page)))
        if sort is not None:
            query.append((self.config["sort_param"], sort.field))
            query.append((self.config["order_param"], sort.order.value))
        for key, value in (filter or {}).items():
            values = value if isinstance(value, (list, tuple)) else [value]
            query.extend((key, self._query_value(v)) for v in values)
        return query

    @staticmethod
    def _query_value(value: Any) -> str:
        if isinstance(value, bool):
            return "true" if value else "false"
        return str(value)

    # Transport

    async def _request(self, method: str, url: str, json: Any = None) -> requests.Response:
        logger.debug("%s %s", method, url)
        try:
            return await asyncio.to_thread(
                self.session.request, method, url, json=json, timeout=self.config["timeout"]
            )
        except (requests.exceptions.InvalidURL,
                requests.exceptions.MissingSchema,
                requests.exceptions.InvalidSchema) as e:
            raise UrlError(f"failed to parse {url}: {e}") from e
        except requests.RequestException as e:
            raise TransportError(f"failed to make the request {method} {url}: {e}") from e

    @staticmethod
    def _check_status(response: requests.Response):
        if not 200 <= response.status_code < 300:
            raise RequestStatusError(
                response.status_code,
                f"Received non-2xx response: {response.status_code} {response.reason or ''}".rstrip()
            )

    @staticmethod
    def _decode(response: requests.Response) -> Any:
        try:
            return response.json()
        except ValueError as e:
            raise ParseError(f"Invalid JSON body: {e}") from e

    def _decode_record(self, response: requests.Response) -> Record:
        return Record.from_json(self._decode(response), self.config["id_field"])

    def _decode_records(self, response: requests.Response) -> List[Record]:
        data = self._decode(response)
        if not isinstance(data, list):
            raise ParseError(f"Expected a JSON array of records, got {type(data).__name__}")
        return [Record.from_json(item, self.config["id_field"]) for item in data]

    async def _fetch(self, method: str, url: str, json: Any = None) -> requests.Response:
        response = await self._request(method, url, json=json)
        self._check_status(response)
        return response

    # Operations

    async def get_list(self, resource: Resource, params: GetListParams) -> GetListResult:
        query = self._list_query(params.pagination, params.sort, params.filter)
        response = await self._fetch("GET", self._url(resource, query=query))
        records = self._decode_records(response)
        # No count channel: total is the number of records in this response
        return GetListResult(data=records, total=len(records))

    async def get_one(self, resource: Resource, params: GetOneParams) -> GetOneResult:
        response = await self._fetch("GET", self._url(resource, params.id))
        return GetOneResult(data=self._decode_record(response))

    async def get_many(self, resource: Resource, params: GetManyParams) -> GetManyResult:
        if not params.ids:
            raise UnknownError("get_many requires at least one id")
        query = [("id", str(identifier)) for identifier in params.ids]
        response = await self._fetch("GET", self._url(resource, query=query))
        return GetManyResult(data=self._decode_records(response))

    async def get_many_reference(self, resource: Resource,
                                 params: GetManyReferenceParams) -> GetManyReferenceResult:
        target = normalize_resource_name(params.target)
        query = self._list_query(params.pagination, params.sort, params.filter)
        response = await self._fetch("GET", self._url(resource, params.id, target, query=query))
        records = self._decode_records(response)
        return GetManyReferenceResult(data=records, total=len(records))

    async def create(self, resource: Resource, params: CreateParams) -> CreateResult:
        response = await self._fetch("POST", self._url(resource), json=params.data)
        return CreateResult(data=self._decode_record(response))

    async def update(self, resource: Resource, params: UpdateParams) -> UpdateResult:
        response = await self._fetch("PUT", self._url(resource, params.id), json=params.data)
        return UpdateResult(data=self._decode_record(response))

    async def update_many(self, resource: Resource, params: UpdateManyParams) -> UpdateManyResult:
        updated = await self._batch("PUT", resource, params.ids, json=params.data)
        return UpdateManyResult(data=updated)

    async def delete(self, resource: Resource, params: DeleteParams) -> DeleteResult:
        response = await self._fetch("DELETE", self._url(resource, params.id))
        record = self._deleted_record(response) or params.previous_data
        if record is None:
            raise UnknownError(
                f"Deleted {resource.name}/{params.id} but the response carries no record "
                f"and no previous_data was supplied"
            )
        return DeleteResult(data=record)

    async def delete_many(self, resource: Resource, params: DeleteManyParams) -> DeleteManyResult:
        deleted = await self._batch("DELETE", resource, params.ids)
        return DeleteManyResult(data=deleted)

    def _deleted_record(self, response: requests.Response) -> Optional[Record]:
        """Record echoed back by a DELETE, if the backend sends one"""
        if not response.content.strip():
            return None
        data = self._decode(response)
        if isinstance(data, dict) and self.config["id_field"] in data:
            return Record.from_json(data, self.config["id_field"])
        return None

    async def _batch(self, method: str, resource: Resource, ids: List[Identifier],
                     json: Any = None) -> List[Identifier]:
        """
        Issue one request per id and collect the ids that succeeded.
        A non-2xx status only drops that id; URL and transport errors abort.
        """
        if not ids:
            raise UnknownError(f"Batch {method} requires at least one id")

        # Compose every URL up front so a bad one aborts before any request is sent
        targets = [(identifier, self._url(resource, identifier)) for identifier in ids]
        semaphore = asyncio.Semaphore(self.config["max_concurrency"])
        aborted = asyncio.Event()

        async def run(identifier: Identifier, url: str) -> Optional[Identifier]:
            async with semaphore:
                # A sibling failed while this one was queued: send nothing
                if aborted.is_set():
                    return None
                try:
                    response = await self._request(method, url, json=json)
                except DataProviderError:
                    aborted.set()
                    raise
            try:
                self._check_status(response)
            except RequestStatusError as e:
                logger.warning("%s %s/%s skipped: %s", method, resource.name, identifier, e.message)
                return None
            return identifier

        tasks = [asyncio.create_task(run(identifier, url)) for identifier, url in targets]
        done, pending = await asyncio.wait(tasks, return_when=asyncio.FIRST_EXCEPTION)
        failed = [task for task in done if task.exception() is not None]
        if failed:
            for task in pending:
                task.cancel()
            await asyncio.gather(*pending, return_exceptions=True)
            logger.warning("%s %s aborted after %d of %d request(s)",
                           method, resource.name, len(done), len(tasks))
            raise failed[0].exception()

        results = [task.result() for task in tasks]
        return [identifier for identifier in results if identifier is not None]
