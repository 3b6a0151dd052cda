"""Transport-neutral request and response envelopes used by controllers."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from src.core.exceptions import AppError
from src.domain.models import AccountModel


@dataclass(frozen=True, slots=True)
class HttpRequest:
    """Decoded request handed to a controller.

    Attributes:
        body: The decoded JSON body. Fields may be missing.
    """

    body: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class HttpResponse:
    """Controller result: a status code and either an account or an error.

    Attributes:
        status_code: HTTP status code chosen by the response helpers.
        body: The stored account on success, the error otherwise.
    """

    status_code: int
    body: AccountModel | AppError

    @property
    def is_success(self) -> bool:
        """Whether the status code is in the 2xx class."""
        return 200 <= self.status_code < 300
