"""Product routes."""

from fastapi import APIRouter, Depends, Query, Request, Response, status

from wms.application.product_service import ProductService
from wms.domain.model.pagination import DEFAULT_PAGE_SIZE, MAX_PAGE_NUMBER
from wms.infrastructure.api.dependencies import get_product_service
from wms.infrastructure.api.schemas import (
    ErrorOut,
    PageOut,
    ProductCreateIn,
    ProductOut,
    ProductUpdateIn,
)

router = APIRouter(prefix="/products", tags=["products"])


@router.get("", response_model=PageOut[ProductOut])
def list_products(
    page: int = Query(1, le=MAX_PAGE_NUMBER),
    page_size: int = Query(DEFAULT_PAGE_SIZE, alias="pageSize"),
    service: ProductService = Depends(get_product_service),
):
    return PageOut[ProductOut].model_validate(service.list(page, page_size))


@router.get(
    "/by-category/{category_id}",
    response_model=PageOut[ProductOut],
    responses={404: {"model": ErrorOut}},
)
def list_products_by_category(
    category_id: int,
    page: int = Query(1, le=MAX_PAGE_NUMBER),
    page_size: int = Query(DEFAULT_PAGE_SIZE, alias="pageSize"),
    service: ProductService = Depends(get_product_service),
):
    return PageOut[ProductOut].model_validate(
        service.list_by_category(category_id, page, page_size)
    )


@router.get(
    "/{product_id}",
    response_model=ProductOut,
    responses={404: {"model": ErrorOut}},
)
def get_product(product_id: int, service: ProductService = Depends(get_product_service)):
    return ProductOut.model_validate(service.get(product_id))


@router.post(
    "",
    response_model=ProductOut,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorOut}, 404: {"model": ErrorOut}, 409: {"model": ErrorOut}},
)
def create_product(
    body: ProductCreateIn,
    request: Request,
    response: Response,
    service: ProductService = Depends(get_product_service),
):
    created = service.create(body.to_command())
    response.headers["Location"] = str(request.url_for("get_product", product_id=created.id))
    return ProductOut.model_validate(created)


@router.put(
    "/{product_id}",
    response_model=ProductOut,
    responses={400: {"model": ErrorOut}, 404: {"model": ErrorOut}, 409: {"model": ErrorOut}},
)
def update_product(
    product_id: int,
    body: ProductUpdateIn,
    service: ProductService = Depends(get_product_service),
):
    """Partial update: only the fields present in the body change."""
    return ProductOut.model_validate(service.update(product_id, body.to_command()))


@router.delete(
    "/{product_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={404: {"model": ErrorOut}},
)
def delete_product(product_id: int, service: ProductService = Depends(get_product_service)):
    service.delete(product_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
