"""Account values exchanged between the controller, use case and repository."""

from pydantic import BaseModel, ConfigDict, Field


class AddAccountModel(BaseModel):
    """Data needed to create an account.

    Built by the signup controller from the request body. The password holds
    the plaintext until the use case swaps it for the hash.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Display name of the account owner")
    email: str = Field(..., description="Account e-mail, unique per account")
    password: str = Field(..., description="Plaintext or hashed password")


class AccountModel(BaseModel):
    """An account as stored, with the identifier assigned by the store."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Identifier assigned by the storage layer")
    name: str
    email: str
    password: str = Field(..., description="Password hash")
