"""Read-side queries over the product catalog."""

from protean.utils.query import Q

from commerce.domain import commerce
from commerce.product.product import Product
from shared.pagination import DEFAULT_PAGE_SIZE, paginate


@commerce.repository(part_of=Product)
class ProductRepository:
    """Catalog lookups. Writes go through the base repository's ``add``."""

    def list_all(self, page=0, size=DEFAULT_PAGE_SIZE):
        return paginate(self._dao.query, page, size, order_by="name")

    def search(self, text, page=0, size=DEFAULT_PAGE_SIZE):
        """Products whose name or category contains ``text``, ignoring case."""
        needle = (text or "").strip()
        query = self._dao.query.filter(Q(name__icontains=needle) | Q(category__icontains=needle))
        return paginate(query, page, size, order_by="name")
