"""
Data models for the Rebrickable LEGO catalog.

Field names follow the snake_case names used on the wire. All models are
immutable and ignore keys the service adds later.
"""

from typing import Dict, Generic, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field


class CatalogModel(BaseModel):
    """Base class for immutable catalog records."""
    model_config = ConfigDict(frozen=True, extra="ignore")


class LegoSet(CatalogModel):
    """A LEGO set, e.g. 8880-1."""
    set_num: str = Field(description="Set number, e.g. '8880-1'")
    name: str
    year: int = Field(description="Release year")
    theme_id: int
    num_parts: int
    set_img_url: Optional[str] = None
    set_url: Optional[str] = None
    last_modified_dt: str


class LegoPart(CatalogModel):
    """A LEGO part, e.g. 3001."""
    part_num: str
    name: str
    part_cat_id: int = Field(description="Part category ID")
    part_url: Optional[str] = None
    part_img_url: Optional[str] = None
    external_ids: Optional[Dict[str, List[str]]] = Field(
        default=None,
        description="External catalog name to list of IDs in that catalog"
    )
    print_of: Optional[str] = Field(
        default=None,
        description="Part number this part is a printed variant of"
    )


class LegoTheme(CatalogModel):
    """A theme; parent_id links sub-themes to their parent."""
    id: int
    name: str
    parent_id: Optional[int] = None


class LegoColor(CatalogModel):
    """A LEGO color."""
    id: int
    name: str
    rgb: str
    is_trans: bool


T = TypeVar("T")


class PagedResponse(CatalogModel, Generic[T]):
    """One page of a list endpoint.

    ``next`` and ``previous`` are the service's URLs for the adjacent pages,
    or None at either end.
    """
    count: int
    next: Optional[str] = None
    previous: Optional[str] = None
    results: List[T]

    @property
    def has_next(self) -> bool:
        return self.next is not None

    @property
    def has_previous(self) -> bool:
        return self.previous is not None


class ApiErrorBody(CatalogModel):
    """Error payload returned with non-success statuses."""
    detail: Optional[str] = None
    code: Optional[str] = None
