"""
Catalog Service
Cache-coherent facade over the catalog store.

Every mutation goes store -> cache invalidation -> audit. Searches go through
the search cache; point lookups and full listings read the store directly.
"""

import logging
from typing import List, Optional

from ..exceptions import CatalogValidationError, NotFoundError
from ..models import Product, SearchCriteria
from ..repositories import ProductRepository
from .audit_service import AuditService
from .instrumentation import log_execution_time
from .search_cache import SearchCache

logger = logging.getLogger(__name__)

LOG_PRODUCT_ADDED = "PRODUCT_ADDED"
LOG_PRODUCT_UPDATED = "PRODUCT_UPDATED"
LOG_PRODUCT_REMOVED = "PRODUCT_REMOVED"
LOG_CACHE_MISS = "CACHE_MISS"
LOG_CACHE_INVALIDATED = "CACHE_INVALIDATED"


def _describe(criteria: SearchCriteria) -> str:
    parts = [
        f"{name}={value}"
        for name, value in criteria.model_dump().items()
        if value is not None
    ]
    return ", ".join(parts) if parts else "no filters"


class CatalogService:
    """
    Product catalog operations.

    Any write invalidates the whole search cache rather than patching cached
    views. Store failures propagate before the cache or the audit trail is
    touched.
    """

    def __init__(
        self,
        product_repository: ProductRepository,
        audit_service: AuditService,
        cache: Optional[SearchCache] = None,
    ):
        self._products = product_repository
        self._audit = audit_service
        self._cache = cache if cache is not None else SearchCache()

        logger.info("Catalog service initialized")

    @property
    def cache(self) -> SearchCache:
        return self._cache

    @property
    def cache_size(self) -> int:
        return len(self._cache)

    @log_execution_time
    def add(self, product: Product) -> Product:
        """
        Store a new product.

        Returns:
            The saved product carrying its newly assigned id

        Raises:
            CatalogValidationError: If the product already has an id
        """
        if product.id is not None:
            raise CatalogValidationError(
                "New products must not have an id", details={"id": product.id}
            )

        saved = self._products.save(product)
        self._invalidate_cache()
        self._audit.log_action(f"{LOG_PRODUCT_ADDED}: id={saved.id}, name={saved.name}")
        return saved

    @log_execution_time
    def update(self, product: Product) -> Product:
        """
        Overwrite an existing product by id.

        The store checks existence as part of the write, so a product removed
        concurrently is never brought back.

        Raises:
            CatalogValidationError: If the product has no id
            NotFoundError: If no stored product has this id
        """
        if product.id is None:
            raise CatalogValidationError("Product id is required for update")

        updated = self._products.save(product)
        self._invalidate_cache()
        self._audit.log_action(f"{LOG_PRODUCT_UPDATED}: id={updated.id}, name={updated.name}")
        return updated

    @log_execution_time
    def remove(self, product_id: int) -> None:
        self._products.delete_by_id(product_id)
        self._invalidate_cache()
        self._audit.log_action(f"{LOG_PRODUCT_REMOVED}: id={product_id}")

    def get_by_id(self, product_id: int) -> Optional[Product]:
        return self._products.find_by_id(product_id)

    def get_by_id_or_raise(self, product_id: int) -> Product:
        """
        Raises:
            NotFoundError: If no product has this id
        """
        product = self._products.find_by_id(product_id)
        if product is None:
            raise NotFoundError("Product", product_id)
        return product

    @log_execution_time
    def get_all(self) -> List[Product]:
        return self._products.find_all()

    @log_execution_time
    def search(self, criteria: SearchCriteria) -> List[Product]:
        """
        Filtered search through the cache.

        A miss is audited once per computation, so racing callers for the
        same criteria produce a single ``CACHE_MISS`` entry.
        """

        def load() -> List[Product]:
            self._audit.log_action(f"{LOG_CACHE_MISS}: {_describe(criteria)}")
            return self._products.search(criteria)

        return self._cache.get_or_compute(criteria, load)

    def _invalidate_cache(self) -> None:
        dropped = self._cache.invalidate_all()
        if dropped:
            self._audit.log_action(f"{LOG_CACHE_INVALIDATED}: {dropped} entries")
