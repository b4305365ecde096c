import logging

from fastapi import APIRouter, Depends, status

from core.config import Settings
from core.dependencies import get_contact_store, get_settings
from core.errors import error_response
from schemas.contact import (
    ContactMessageCreate,
    ContactSuccessResponse,
    ErrorResponse,
    ValidationErrorResponse,
)
from services.contact_store import ContactStore, ContactStoreError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["contact"])

@router.post(
    "/contact",
    response_model=ContactSuccessResponse,
    responses={
        400: {"model": ValidationErrorResponse},
        500: {"model": ErrorResponse},
    },
)
def submit_contact_message(
    data: ContactMessageCreate,
    store: ContactStore = Depends(get_contact_store),
    settings: Settings = Depends(get_settings),
):
    try:
        message = store.create(data)
    except ContactStoreError:
        logger.exception("Failed to store contact message")
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, settings.INTERNAL_ERROR_MESSAGE)

    logger.info(f"Stored contact message {message.id}")
    return ContactSuccessResponse(message=settings.CONTACT_SUCCESS_MESSAGE, id=message.id)
