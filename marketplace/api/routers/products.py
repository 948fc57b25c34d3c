"""
Product catalog routes.

Reads are open to everyone; writes require an administrator.
"""

import logging

from fastapi import APIRouter, Depends, Path, Response, status

from ...models import SearchCriteria, User
from ...services import CatalogService
from ..dependencies import (
    get_catalog_service,
    get_request_id,
    get_search_criteria,
    require_admin,
)
from ..schemas import ProductListResponse, ProductPayload, ProductResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1", tags=["products"])


@router.get("/products", response_model=ProductListResponse)
def list_products(
    criteria: SearchCriteria = Depends(get_search_criteria),
    catalog: CatalogService = Depends(get_catalog_service),
    request_id: str = Depends(get_request_id),
) -> ProductListResponse:
    """
    List products.

    With any filter (category, brand, min_price, max_price) the request is a
    cached search; without filters every product is returned.
    Results are ordered by name, then id.
    """
    if criteria.is_empty:
        products = catalog.get_all()
    else:
        products = catalog.search(criteria)

    logger.info(
        f"Returned {len(products)} products",
        extra={"request_id": request_id, "filtered": not criteria.is_empty},
    )

    return ProductListResponse(
        products=[ProductResponse.from_product(p) for p in products],
        total=len(products),
    )


@router.get("/products/{product_id}", response_model=ProductResponse)
def get_product(
    product_id: int = Path(..., gt=0),
    catalog: CatalogService = Depends(get_catalog_service),
) -> ProductResponse:
    return ProductResponse.from_product(catalog.get_by_id_or_raise(product_id))


@router.post(
    "/products",
    response_model=ProductResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_product(
    payload: ProductPayload,
    admin: User = Depends(require_admin),
    catalog: CatalogService = Depends(get_catalog_service),
) -> ProductResponse:
    """Add a product; the store assigns its id."""
    product = catalog.add(payload.to_product())
    logger.info(f"Product {product.id} created by '{admin.username}'")
    return ProductResponse.from_product(product)


@router.put("/products/{product_id}", response_model=ProductResponse)
def update_product(
    payload: ProductPayload,
    product_id: int = Path(..., gt=0),
    admin: User = Depends(require_admin),
    catalog: CatalogService = Depends(get_catalog_service),
) -> ProductResponse:
    """Replace every field of an existing product (404 when it does not exist)."""
    product = catalog.update(payload.to_product(product_id))
    logger.info(f"Product {product_id} updated by '{admin.username}'")
    return ProductResponse.from_product(product)


@router.delete(
    "/products/{product_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
def delete_product(
    product_id: int = Path(..., gt=0),
    admin: User = Depends(require_admin),
    catalog: CatalogService = Depends(get_catalog_service),
) -> Response:
    catalog.get_by_id_or_raise(product_id)
    catalog.remove(product_id)
    logger.info(f"Product {product_id} deleted by '{admin.username}'")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
