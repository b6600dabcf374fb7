"""Account notification router.

Endpoints:
    POST /api/v1/confirmation-emails     - (Re)send the email confirmation link
    POST /api/v1/password-reset-tokens   - Send a password reset link

Both publish an account event and wait for its subscribers. Failures raised
by the subscribers become RFC 7807 responses in the global exception
handlers (404 unknown email, 400 unconfirmed email, 502 mail not sent).
"""

from fastapi import APIRouter, Depends, Request, status

from bookstore.application.dispatcher import Dispatcher
from bookstore.core.container import get_dispatcher
from bookstore.domain.events.account_events import PasswordResetRequested, UserCreated
from bookstore.presentation.api.v1.errors import ProblemDetails
from bookstore.schemas.account_schemas import (
    AcceptedResponse,
    ConfirmationEmailRequest,
    PasswordResetTokenRequest,
)

router = APIRouter(tags=["Account Notifications"])


def _base_url(request: Request) -> str:
    return f"{request.url.scheme}://{request.url.netloc}"


@router.post(
    "/confirmation-emails",
    status_code=status.HTTP_202_ACCEPTED,
    response_model=AcceptedResponse,
    responses={
        502: {"description": "Mail not sent", "model": ProblemDetails},
    },
    summary="Send confirmation email",
)
async def send_confirmation_email(
    request: Request,
    data: ConfirmationEmailRequest,
    dispatcher: Dispatcher = Depends(get_dispatcher),
) -> AcceptedResponse:
    """Send the email confirmation link for a user.

    POST /api/v1/confirmation-emails → 202 Accepted

    Unknown usernames are accepted silently.
    """
    await dispatcher.publish(
        UserCreated(username=data.username, base_url=_base_url(request))
    )
    return AcceptedResponse(
        message="If the account exists, a confirmation email has been sent."
    )


@router.post(
    "/password-reset-tokens",
    status_code=status.HTTP_202_ACCEPTED,
    response_model=AcceptedResponse,
    responses={
        400: {"description": "Email is not confirmed", "model": ProblemDetails},
        404: {"description": "User not found", "model": ProblemDetails},
        502: {"description": "Mail not sent", "model": ProblemDetails},
    },
    summary="Request password reset",
)
async def request_password_reset(
    request: Request,
    data: PasswordResetTokenRequest,
    dispatcher: Dispatcher = Depends(get_dispatcher),
) -> AcceptedResponse:
    """Send a password reset link.

    POST /api/v1/password-reset-tokens → 202 Accepted
    """
    await dispatcher.publish(
        PasswordResetRequested(email=data.email, base_url=_base_url(request))
    )
    return AcceptedResponse(message="Password reset email has been sent.")
