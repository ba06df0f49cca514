"""Order listings by owner, email and status."""

from commerce.domain import commerce
from commerce.order.order import Order
from shared.pagination import DEFAULT_PAGE_SIZE, paginate

# Placement time; ties keep insertion order.
_ORDERING = "ordered_at"


@commerce.repository(part_of=Order)
class OrderRepository:
    def _page(self, page, size, **filters):
        queryset = self._dao.query.filter(**filters) if filters else self._dao.query
        return paginate(queryset, page, size, order_by=_ORDERING)

    def list_all(self, page=0, size=DEFAULT_PAGE_SIZE):
        return self._page(page, size)

    def by_user(self, user_id, page=0, size=DEFAULT_PAGE_SIZE):
        return self._page(page, size, user_id=str(user_id))

    def by_status(self, status, page=0, size=DEFAULT_PAGE_SIZE):
        return self._page(page, size, status=status)

    def by_user_and_status(self, user_id, status, page=0, size=DEFAULT_PAGE_SIZE):
        return self._page(page, size, user_id=str(user_id), status=status)

    def by_email(self, email, page=0, size=DEFAULT_PAGE_SIZE):
        return self._page(page, size, user_email=email)

    def by_email_and_status(self, email, status, page=0, size=DEFAULT_PAGE_SIZE):
        return self._page(page, size, user_email=email, status=status)
