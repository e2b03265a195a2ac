"""Product listing route."""

from fastapi import APIRouter, Depends

from mockapi.fixtures import PAGE, PAGE_LIMIT, PRODUCTS
from mockapi.models import ErrorMessage, ProductPage
from mockapi.security import require_bearer_token

router = APIRouter()


@router.get(
    "",
    response_model=ProductPage,
    responses={401: {"model": ErrorMessage}},
)
async def list_products(authorization: str = Depends(require_bearer_token)):
    """Return the fixed product list in a pagination envelope."""
    return ProductPage(
        data=list(PRODUCTS),
        total=len(PRODUCTS),
        page=PAGE,
        limit=PAGE_LIMIT,
    )
