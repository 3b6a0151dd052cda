"""email-validator implementation of the e-mail validator port."""

from email_validator import EmailNotValidError, validate_email


class EmailValidatorAdapter:
    """Check e-mail syntax with the ``email-validator`` package.

    Only the syntax is checked; no DNS lookups are made, so validation works
    offline and takes constant time.
    """

    def is_valid(self, email: str) -> bool:
        """Return True if ``email`` is a syntactically valid address.

        Args:
            email: Address to check.

        Returns:
            bool: False when the library rejects the address, True otherwise.
        """
        try:
            validate_email(email, check_deliverability=False)
        except EmailNotValidError:
            return False
        return True
