from typing import Iterable, List, Optional
import threading
import structlog
from app.models.product import Product

logger = structlog.get_logger()

SEED_PRODUCTS = (
    ("apple", 54),
    ("pear", 12),
)


class DuplicateProductError(ValueError):
    def __init__(self, name: str):
        super().__init__(f"Product already exists: {name}")
        self.name = name


class ProductStore:
    """In-memory, insertion-ordered collection of products unique by name.

    Every operation holds ``self._lock`` for its whole scan, and products
    handed out are copies so callers cannot mutate stored records.
    """

    def __init__(self, products: Optional[Iterable[Product]] = None):
        self._products: List[Product] = []
        self._lock = threading.Lock()
        for product in products or ():
            self.insert(product)

    @classmethod
    def seeded(cls) -> "ProductStore":
        return cls(Product(name=name, quantity=quantity) for name, quantity in SEED_PRODUCTS)

    def _index_of(self, name: str) -> Optional[int]:
        for index, product in enumerate(self._products):
            if product.name == name:
                return index
        return None

    def list_all(self) -> List[Product]:
        with self._lock:
            return [product.model_copy() for product in self._products]

    def count(self) -> int:
        with self._lock:
            return len(self._products)

    def find_by_name(self, name: str) -> Optional[Product]:
        with self._lock:
            index = self._index_of(name)
            if index is None:
                return None
            return self._products[index].model_copy()

    def insert(self, product: Product) -> Product:
        with self._lock:
            if self._index_of(product.name) is not None:
                raise DuplicateProductError(product.name)
            stored = product.model_copy()
            self._products.append(stored)
            logger.debug("Inserted product", name=stored.name, quantity=stored.quantity)
            return stored.model_copy()

    def replace_quantity(self, name: str, quantity: int) -> Optional[Product]:
        with self._lock:
            index = self._index_of(name)
            if index is None:
                return None
            stored = self._products[index]
            stored.quantity = quantity
            logger.debug("Replaced product quantity", name=name, quantity=quantity)
            return stored.model_copy()

    def remove_by_name(self, name: str) -> Optional[Product]:
        with self._lock:
            index = self._index_of(name)
            if index is None:
                return None
            removed = self._products.pop(index)
            logger.debug("Removed product", name=name)
            return removed
