"""
Contact form endpoint.
Validates the submission, stores it in MongoDB and emails a notification
to the service's own mailbox.
"""

from fastapi import APIRouter, Body, Depends, status
from fastapi.responses import JSONResponse
from typing import Optional
import logging

from app.db.mongo import get_store
from app.models.contact import ContactErrorResponse, ContactForm, ContactResponse
from app.services.contact import ContactService, ContactValidationError
from app.services.mailer import get_mailer

# Set up router
router = APIRouter()
logger = logging.getLogger(__name__)

SUCCESS_MESSAGE = "✅ Form submitted successfully!"
FAILURE_MESSAGE = "❌ Error submitting form"


def get_contact_service(store=Depends(get_store), mailer=Depends(get_mailer)) -> ContactService:
    return ContactService(store, mailer)


@router.post(
    "/contact",
    response_model=ContactResponse,
    responses={400: {"model": ContactErrorResponse}, 500: {"model": ContactErrorResponse}},
)
async def submit_contact(
    form: Optional[ContactForm] = Body(None),
    service: ContactService = Depends(get_contact_service),
):
    """
    Submit a contact form.

    Returns:
        200 with a confirmation, 400 if name, email or message is missing,
        500 if storing the record or sending the email failed
    """
    form = form or ContactForm()
    logger.info(f"📩 Incoming Contact Request: {form.model_dump()}")

    try:
        await service.submit(form)
    except ContactValidationError as e:
        logger.warning("⚠️ Missing required fields")
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"success": False, "message": str(e)},
        )
    except Exception as e:
        logger.exception(f"❌ Error in /contact route: {str(e)}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"success": False, "message": FAILURE_MESSAGE, "error": str(e)},
        )

    return ContactResponse(success=True, message=SUCCESS_MESSAGE)
