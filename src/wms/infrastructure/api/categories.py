"""Category routes."""

from fastapi import APIRouter, Depends, Query, Request, Response, status

from wms.application.category_service import CategoryService
from wms.domain.model.pagination import DEFAULT_PAGE_SIZE, MAX_PAGE_NUMBER
from wms.infrastructure.api.dependencies import get_category_service
from wms.infrastructure.api.schemas import CategoryIn, CategoryOut, ErrorOut, PageOut

router = APIRouter(prefix="/categories", tags=["categories"])


@router.get("", response_model=PageOut[CategoryOut])
def list_categories(
    page: int = Query(1, le=MAX_PAGE_NUMBER),
    page_size: int = Query(DEFAULT_PAGE_SIZE, alias="pageSize"),
    service: CategoryService = Depends(get_category_service),
):
    """Paginated categories ordered by id. Out-of-range paging is clamped."""
    return PageOut[CategoryOut].model_validate(service.list(page, page_size))


@router.get(
    "/{category_id}",
    response_model=CategoryOut,
    responses={404: {"model": ErrorOut}},
)
def get_category(category_id: int, service: CategoryService = Depends(get_category_service)):
    return CategoryOut.model_validate(service.get(category_id))


@router.post(
    "",
    response_model=CategoryOut,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorOut}, 409: {"model": ErrorOut}},
)
def create_category(
    body: CategoryIn,
    request: Request,
    response: Response,
    service: CategoryService = Depends(get_category_service),
):
    created = service.create(body.name)
    response.headers["Location"] = str(request.url_for("get_category", category_id=created.id))
    return CategoryOut.model_validate(created)


@router.put(
    "/{category_id}",
    response_model=CategoryOut,
    responses={400: {"model": ErrorOut}, 404: {"model": ErrorOut}, 409: {"model": ErrorOut}},
)
def update_category(
    category_id: int,
    body: CategoryIn,
    service: CategoryService = Depends(get_category_service),
):
    return CategoryOut.model_validate(service.update(category_id, body.name))


@router.delete(
    "/{category_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={400: {"model": ErrorOut}, 404: {"model": ErrorOut}},
)
def delete_category(category_id: int, service: CategoryService = Depends(get_category_service)):
    """Delete an empty category. Categories that still hold products are kept."""
    service.delete(category_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
