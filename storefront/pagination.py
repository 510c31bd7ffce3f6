"""
Page values shared by the list operations of every app.

Repositories return a Page rather than a Django Paginator page so callers
never touch lazy querysets outside the unit of work that produced them.
"""

from dataclasses import dataclass, field

from django.conf import settings
from django.core.paginator import EmptyPage, Paginator
from rest_framework.exceptions import ValidationError


def _parse_sort(values, sortable):
    """Turns ?sort=field[,asc|desc] values into order_by() expressions."""
    ordering = []
    for value in values:
        name, _, direction = value.partition(",")
        name = name.strip()
        direction = direction.strip().lower() or "asc"
        if name not in sortable:
            raise ValidationError(
                {"error": f"cannot sort by '{name}'; allowed: {', '.join(sortable)}."}
            )
        if direction not in ("asc", "desc"):
            raise ValidationError({"error": "sort direction must be 'asc' or 'desc'."})
        ordering.append(f"-{name}" if direction == "desc" else name)
    return tuple(ordering)


@dataclass(frozen=True)
class PageRequest:
    number: int = 1
    size: int = 10
    sort: tuple = ()

    @classmethod
    def from_query_params(cls, params, sortable=()):
        """Builds a request from ?page=&size=&sort=, rejecting malformed values.

        sort may repeat; only field names listed in sortable are accepted.
        """
        values = params.getlist("sort") if hasattr(params, "getlist") else params.get("sort", [])
        if isinstance(values, str):
            values = [values]
        sort = _parse_sort([v for v in values if v], sortable)

        try:
            number = int(params.get("page", 1))
            size = int(params.get("size", settings.STOREFRONT_PAGE_SIZE))
        except (TypeError, ValueError):
            raise ValidationError({"error": "page and size must be integers."})

        if number < 1:
            raise ValidationError({"error": "page must be a positive integer."})
        if not 1 <= size <= settings.STOREFRONT_MAX_PAGE_SIZE:
            raise ValidationError(
                {"error": f"size must be between 1 and {settings.STOREFRONT_MAX_PAGE_SIZE}."}
            )
        return cls(number=number, size=size, sort=sort)


@dataclass(frozen=True)
class Page:
    number: int
    size: int
    total_count: int
    total_pages: int
    items: list = field(default_factory=list)

    def to_dict(self, serialize):
        return {
            "content": [serialize(item) for item in self.items],
            "page": self.number,
            "size": self.size,
            "total_elements": self.total_count,
            "total_pages": self.total_pages,
        }


def paginate(queryset, page_request):
    """Evaluates one page of an ordered queryset.

    A page number past the end yields an empty page that still carries the
    real totals. A requested sort replaces the model ordering; id is always
    the final tie-breaker so pages stay stable.
    """
    if page_request.sort:
        queryset = queryset.order_by(*page_request.sort, "id")
    paginator = Paginator(queryset, page_request.size)
    try:
        items = list(paginator.page(page_request.number).object_list)
    except EmptyPage:
        items = []
    return Page(
        number=page_request.number,
        size=page_request.size,
        total_count=paginator.count,
        total_pages=paginator.num_pages if paginator.count else 0,
        items=items,
    )
