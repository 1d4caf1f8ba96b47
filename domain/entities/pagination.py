"""
Paramètres de liste et métadonnées de pagination
"""

import math
from dataclasses import dataclass, field
from typing import Generic, List, Optional, TypeVar

T = TypeVar("T")

DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 100
# Plus grand numéro de page accepté (entier non signé 32 bits)
MAX_PAGE = 2**32 - 1

SORTABLE_FIELDS = ("name", "created_at", "updated_at", "rating")
DEFAULT_SORT_FIELD = "created_at"


@dataclass
class ListQueryParams:
    """Filtres, tri et pagination demandés pour la liste des projets"""
    search: Optional[str] = None
    technology: Optional[str] = None
    user_id: Optional[str] = None
    min_rating: Optional[float] = None
    max_rating: Optional[float] = None
    language: Optional[str] = None
    sort: Optional[str] = None
    order: Optional[str] = None
    page: Optional[int] = None
    page_size: Optional[int] = None

    def effective_page(self) -> int:
        return min(MAX_PAGE, max(1, self.page if self.page is not None else 1))

    def effective_page_size(self) -> int:
        size = self.page_size if self.page_size is not None else DEFAULT_PAGE_SIZE
        return min(MAX_PAGE_SIZE, max(1, size))

    def offset(self) -> int:
        return (self.effective_page() - 1) * self.effective_page_size()

    def sort_field(self) -> str:
        return self.sort if self.sort in SORTABLE_FIELDS else DEFAULT_SORT_FIELD

    def sort_descending(self) -> bool:
        return self.order != "asc"


@dataclass
class PaginationMetadata:
    page: int
    page_size: int
    total_items: int
    total_pages: int

    @classmethod
    def build(cls, page: int, page_size: int, total_items: int) -> "PaginationMetadata":
        total_pages = max(1, math.ceil(total_items / page_size))
        return cls(page=page, page_size=page_size, total_items=total_items, total_pages=total_pages)


@dataclass
class Page(Generic[T]):
    """Une page de résultats accompagnée de ses métadonnées"""
    data: List[T] = field(default_factory=list)
    pagination: Optional[PaginationMetadata] = None
