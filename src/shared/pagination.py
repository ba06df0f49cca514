"""Page-based slicing over Protean query sets."""

from dataclasses import dataclass, field

DEFAULT_PAGE_SIZE = 20
MAX_PAGE_SIZE = 100


@dataclass
class Page:
    items: list = field(default_factory=list)
    total: int = 0
    page: int = 0
    size: int = DEFAULT_PAGE_SIZE

    @property
    def total_pages(self) -> int:
        return (self.total + self.size - 1) // self.size if self.size > 0 else 0

    @property
    def has_next(self) -> bool:
        return self.page + 1 < self.total_pages


def _bounds(page, size):
    return max(int(page), 0), min(max(int(size), 1), MAX_PAGE_SIZE)


def paginate(queryset, page=0, size=DEFAULT_PAGE_SIZE, order_by=None) -> Page:
    """Fetch one zero-based page of ``queryset`` along with the total match count."""
    page, size = _bounds(page, size)
    if order_by:
        queryset = queryset.order_by(order_by)
    result = queryset.offset(page * size).limit(size).all()
    return Page(items=list(result.items), total=result.total, page=page, size=size)

