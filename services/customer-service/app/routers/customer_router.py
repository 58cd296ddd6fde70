"""
Customer CRUD endpoints.

Maps repository results onto HTTP:
- malformed identifier or pagination input: 400
- missing customer: 404
- storage failure: 500
"""

from typing import List, NoReturn

import structlog
from fastapi import APIRouter, Depends, HTTPException, Query, status

from ..config import settings
from ..dependencies import get_customer_repository
from ..domain.exceptions import (
    CustomerServiceException,
    InvalidIdentifierException,
    StorageException,
    ValidationException,
)
from ..models import CreatedResponse, Customer, CustomerInput, ErrorResponse
from ..repositories import ICustomerRepository

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/customer", tags=["Customer"])

ERROR_RESPONSES = {
    400: {"description": "Invalid input", "model": ErrorResponse},
    500: {"description": "Storage failure", "model": ErrorResponse},
}
NOT_FOUND_RESPONSE = {404: {"description": "Customer not found", "model": ErrorResponse}}


def _raise_http_error(exc: CustomerServiceException) -> NoReturn:
    """Translate a domain exception into an HTTPException."""
    if isinstance(exc, (InvalidIdentifierException, ValidationException)):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=exc.message)
    if isinstance(exc, StorageException):
        logger.error("Storage failure", error=exc.message, **exc.details)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Database operation failed",
        )
    logger.error("Unexpected customer service error", error=exc.message)
    raise HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="An unexpected error occurred",
    )


def _not_found(customer_id: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"Customer not found: {customer_id}",
    )


@router.get("", response_model=List[Customer], responses=ERROR_RESPONSES)
async def list_customers(
    limit: int = Query(
        default=settings.DEFAULT_PAGE_LIMIT, ge=1, le=settings.MAX_PAGE_LIMIT
    ),
    page: int = Query(default=1, ge=1),
    repo: ICustomerRepository = Depends(get_customer_repository),
):
    """List customers page by page."""
    try:
        return await repo.list_customers(limit=limit, page=page)
    except CustomerServiceException as e:
        _raise_http_error(e)


@router.get(
    "/{customer_id}",
    response_model=Customer,
    responses={**ERROR_RESPONSES, **NOT_FOUND_RESPONSE},
)
async def get_customer(
    customer_id: str,
    repo: ICustomerRepository = Depends(get_customer_repository),
):
    """Get a single customer."""
    try:
        customer = await repo.get_by_id(customer_id)
    except CustomerServiceException as e:
        _raise_http_error(e)

    if customer is None:
        raise _not_found(customer_id)
    return customer


@router.post(
    "",
    response_model=CreatedResponse,
    status_code=status.HTTP_201_CREATED,
    responses=ERROR_RESPONSES,
)
async def create_customer(
    data: CustomerInput,
    repo: ICustomerRepository = Depends(get_customer_repository),
):
    """Create a customer and return its identifier."""
    try:
        customer_id = await repo.create(data)
    except CustomerServiceException as e:
        _raise_http_error(e)

    return CreatedResponse(id=customer_id)


@router.patch(
    "/{customer_id}",
    response_model=Customer,
    responses={**ERROR_RESPONSES, **NOT_FOUND_RESPONSE},
)
async def update_customer(
    customer_id: str,
    data: CustomerInput,
    repo: ICustomerRepository = Depends(get_customer_repository),
):
    """Rename a customer."""
    try:
        customer = await repo.update_by_id(customer_id, data)
    except CustomerServiceException as e:
        _raise_http_error(e)

    if customer is None:
        raise _not_found(customer_id)
    return customer


@router.delete(
    "/{customer_id}",
    response_model=Customer,
    responses={**ERROR_RESPONSES, **NOT_FOUND_RESPONSE},
)
async def delete_customer(
    customer_id: str,
    repo: ICustomerRepository = Depends(get_customer_repository),
):
    """Delete a customer and return the removed record."""
    try:
        customer = await repo.delete_by_id(customer_id)
    except CustomerServiceException as e:
        _raise_http_error(e)

    if customer is None:
        raise _not_found(customer_id)
    return customer
