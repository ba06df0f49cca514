"""Ride listings by customer, driver, email and status."""

from rides.domain import rides
from rides.ride.ride import Ride
from shared.pagination import DEFAULT_PAGE_SIZE, paginate


@rides.repository(part_of=Ride)
class RideRepository:
    def _page(self, page, size, **filters):
        queryset = self._dao.query.filter(**filters) if filters else self._dao.query
        return paginate(queryset, page, size, order_by="requested_at")

    def list_all(self, page=0, size=DEFAULT_PAGE_SIZE):
        return self._page(page, size)

    def by_customer(self, customer_id, page=0, size=DEFAULT_PAGE_SIZE):
        return self._page(page, size, customer_id=str(customer_id))

    def by_status(self, status, page=0, size=DEFAULT_PAGE_SIZE):
        return self._page(page, size, status=status)

    def by_customer_and_status(self, customer_id, status, page=0, size=DEFAULT_PAGE_SIZE):
        return self._page(page, size, customer_id=str(customer_id), status=status)

    def by_customer_email(self, email, page=0, size=DEFAULT_PAGE_SIZE):
        return self._page(page, size, customer_email=email)

    def by_customer_email_and_status(self, email, status, page=0, size=DEFAULT_PAGE_SIZE):
        return self._page(page, size, customer_email=email, status=status)

    def by_driver(self, driver_id, page=0, size=DEFAULT_PAGE_SIZE):
        return self._page(page, size, driver_id=str(driver_id))

    def by_driver_and_status(self, driver_id, status, page=0, size=DEFAULT_PAGE_SIZE):
        return self._page(page, size, driver_id=str(driver_id), status=status)
