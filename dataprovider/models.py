# dataprovider/models.py
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Union

from .exceptions import ParseError, UnknownError

# Open mappings carried through the contract unexamined
FilterPayload = Dict[str, Any]
Meta = Dict[str, Any]


@dataclass(frozen=True)
class Identifier:
    """
    Names a single record. Either a text token or a non-negative integer;
    the variant is fixed by the value's type and never coerced.
    """
    value: Union[str, int]

    def __post_init__(self):
        if isinstance(self.value, bool) or not isinstance(self.value, (str, int)):
            raise UnknownError(f"Identifier must be str or int, got {type(self.value).__name__}")
        if isinstance(self.value, int) and self.value < 0:
            raise UnknownError(f"Identifier must be non-negative, got {self.value}")

    @classmethod
    def text(cls, value: str) -> "Identifier":
        if not isinstance(value, str):
            raise UnknownError(f"Text identifier requires str, got {type(value).__name__}")
        return cls(value)

    @classmethod
    def number(cls, value: int) -> "Identifier":
        if isinstance(value, bool) or not isinstance(value, int):
            raise UnknownError(f"Numeric identifier requires int, got {type(value).__name__}")
        return cls(value)

    @classmethod
    def from_json(cls, value: Any) -> "Identifier":
        """Decode an identifier from a JSON value (string or integer)"""
        try:
            return cls(value)
        except UnknownError as e:
            raise ParseError(f"Unsupported identifier value {value!r}: {e}") from e

    @property
    def is_text(self) -> bool:
        return isinstance(self.value, str)

    @property
    def is_number(self) -> bool:
        return not self.is_text

    def as_text(self) -> str:
        if not self.is_text:
            raise UnknownError(f"Identifier {self.value} is numeric, not text")
        return self.value

    def as_number(self) -> int:
        if not self.is_number:
            raise UnknownError(f"Identifier {self.value!r} is text, not numeric")
        return self.value

    def __str__(self) -> str:
        return str(self.value)


@dataclass
class Record:
    """A backend entity: its identifier plus the raw field mapping (id included)"""
    id: Identifier
    fields: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_json(cls, obj: Any, id_field: str = "id") -> "Record":
        if not isinstance(obj, dict):
            raise ParseError(f"Expected a JSON object for a record, got {type(obj).__name__}")
        if id_field not in obj:
            raise ParseError(f"Record is missing its '{id_field}' field: {obj}")
        return cls(id=Identifier.from_json(obj[id_field]), fields=dict(obj))

    def to_json(self) -> Dict[str, Any]:
        return dict(self.fields)


@dataclass(frozen=True)
class Resource:
    """A backend collection, e.g. 'posts'. The name is normalized on construction."""
    name: str

    def __post_init__(self):
        object.__setattr__(self, "name", normalize_resource_name(self.name))

    def __str__(self) -> str:
        return self.name


def normalize_resource_name(name: str) -> str:
    """Strip surrounding whitespace and one leading/trailing slash; inner slashes stay"""
    name = name.strip()
    if name.startswith("/"):
        name = name[1:]
    if name.endswith("/"):
        name = name[:-1]
    return name


@dataclass
class PaginationPayload:
    page: int  # 1-based
    per_page: int


class SortOrder(Enum):
    ASC = "asc"
    DESC = "desc"


@dataclass
class SortPayload:
    field: str
    order: SortOrder = SortOrder.ASC


@dataclass
class PageInfo:
    has_next_page: bool
    has_previous_page: bool


# Operation parameters and results

@dataclass
class GetListParams:
    pagination: Optional[PaginationPayload] = None
    sort: Optional[SortPayload] = None
    filter: Optional[FilterPayload] = None
    meta: Optional[Meta] = None


@dataclass
class GetListResult:
    data: List[Record]
    total: Optional[int] = None
    page_info: Optional[PageInfo] = None
    meta: Optional[Meta] = None


@dataclass
class GetOneParams:
    id: Identifier
    meta: Optional[Meta] = None


@dataclass
class GetOneResult:
    data: Record


@dataclass
class GetManyParams:
    ids: List[Identifier]
    meta: Optional[Meta] = None


@dataclass
class GetManyResult:
    data: List[Record]


@dataclass
class GetManyReferenceParams:
    target: str
    id: Identifier
    pagination: PaginationPayload
    sort: SortPayload
    filter: FilterPayload = field(default_factory=dict)
    meta: Optional[Meta] = None


@dataclass
class GetManyReferenceResult:
    data: List[Record]
    total: Optional[int] = None
    page_info: Optional[PageInfo] = None
    meta: Optional[Meta] = None


@dataclass
class CreateParams:
    data: Dict[str, Any]
    meta: Optional[Meta] = None


@dataclass
class CreateResult:
    data: Record


@dataclass
class UpdateParams:
    id: Identifier
    data: Dict[str, Any]
    previous_data: Record
    meta: Optional[Meta] = None


@dataclass
class UpdateResult:
    data: Record


@dataclass
class UpdateManyParams:
    ids: List[Identifier]
    data: Dict[str, Any]
    meta: Optional[Meta] = None


@dataclass
class UpdateManyResult:
    data: List[Identifier]


@dataclass
class DeleteParams:
    id: Identifier
    previous_data: Optional[Record] = None
    meta: Optional[Meta] = None


@dataclass
class DeleteResult:
    data: Record


@dataclass
class DeleteManyParams:
    ids: List[Identifier]
    meta: Optional[Meta] = None


@dataclass
class DeleteManyResult:
    data: List[Identifier]
