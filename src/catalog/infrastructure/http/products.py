"""Product API router with CRUD operations.

Each route builds the matching use-case handler around the injected
store and maps the handler's outcome to a status code.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Response

from catalog.application.add_product import AddProductHandler
from catalog.application.list_products import ListProductsHandler
from catalog.application.remove_product import RemoveProductHandler
from catalog.application.results import NotFound, ValidationFailed
from catalog.application.show_product import ShowProductHandler
from catalog.application.update_product import UpdateProductHandler
from catalog.domain.repository.product_repository import ProductRepository
from catalog.infrastructure.http.deps import get_product_repo
from catalog.infrastructure.http.problems import validation_problem
from catalog.infrastructure.http.schemas import ProductCreateIn, ProductOut, ProductUpdateIn

router = APIRouter(prefix="/products", tags=["Products"])


@router.get("", response_model=list[ProductOut])
def list_products(
    product_repo: ProductRepository = Depends(get_product_repo),
) -> list[ProductOut]:
    """List all products."""
    result = ListProductsHandler(product_repo).handle()
    return [ProductOut.from_view(view) for view in result.value]


@router.get("/{product_id}", response_model=ProductOut, responses={404: {}})
def get_product(
    product_id: int,
    product_repo: ProductRepository = Depends(get_product_repo),
):
    """Get a product by ID."""
    result = ShowProductHandler(product_repo).handle(product_id)
    if isinstance(result, NotFound):
        return Response(status_code=404)
    return ProductOut.from_view(result.value)


@router.post("", response_model=ProductOut, status_code=201, responses={400: {}})
def create_product(
    payload: ProductCreateIn,
    response: Response,
    product_repo: ProductRepository = Depends(get_product_repo),
):
    """Create a new product. All fields are validated."""
    result = AddProductHandler(product_repo).handle(payload.to_request())
    if isinstance(result, ValidationFailed):
        return validation_problem(result.errors)

    response.headers["Location"] = f"/products/{result.value.id}"
    return ProductOut.from_view(result.value)


@router.put("/{product_id}", response_model=ProductOut, responses={400: {}, 404: {}})
def update_product(
    product_id: int,
    payload: ProductUpdateIn,
    product_repo: ProductRepository = Depends(get_product_repo),
):
    """Update a product. Only the fields that are sent are changed."""
    result = UpdateProductHandler(product_repo).handle(product_id, payload.to_request())
    if isinstance(result, ValidationFailed):
        return validation_problem(result.errors)
    if isinstance(result, NotFound):
        return Response(status_code=404)
    return ProductOut.from_view(result.value)


@router.delete("/{product_id}", status_code=204, responses={404: {}})
def delete_product(
    product_id: int,
    product_repo: ProductRepository = Depends(get_product_repo),
) -> Response:
    """Delete a product."""
    result = RemoveProductHandler(product_repo).handle(product_id)
    if isinstance(result, NotFound):
        return Response(status_code=404)
    return Response(status_code=204)
