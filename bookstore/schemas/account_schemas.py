"""Account notification request schemas."""

from pydantic import BaseModel, EmailStr, Field


class ConfirmationEmailRequest(BaseModel):
    """Request schema for (re)sending the email confirmation link."""

    username: str = Field(..., min_length=1, description="Account username")


class PasswordResetTokenRequest(BaseModel):
    """Request schema for a password reset link.

    Attributes:
        email: Confirmed email address of the account.
    """

    email: EmailStr = Field(..., description="Account email address")


class AcceptedResponse(BaseModel):
    """Acknowledgement for asynchronous-style requests."""

    message: str
