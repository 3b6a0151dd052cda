"""Request and response models for the signup endpoint.

The signup controller reads the raw JSON body itself so that it can report
missing fields in a fixed order; :class:`SignupRequest` only documents the
expected body in the OpenAPI schema.
"""

from pydantic import BaseModel, ConfigDict, Field

from src.domain.models import AccountModel


class SignupRequest(BaseModel):
    """Registration request body."""

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "name": "valid_name",
                    "email": "valid_email@mail.com",
                    "password": "valid_password",
                    "passwordConfirmation": "valid_password",
                }
            ]
        }
    )

    name: str = Field(..., description="Display name of the account owner")
    email: str = Field(..., description="E-mail address, unique per account")
    password: str = Field(..., description="Plaintext password")
    password_confirmation: str = Field(
        ...,
        alias="passwordConfirmation",
        description="Must equal password",
    )


class AccountResponse(BaseModel):
    """Account returned after a successful signup."""

    id: str = Field(..., description="Identifier assigned by the store")
    name: str
    email: str
    password: str = Field(..., description="Password hash")

    @classmethod
    def from_account(cls, account: AccountModel) -> "AccountResponse":
        """Build the response body from a stored account."""
        return cls(**account.model_dump())
