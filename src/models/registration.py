"""Registration form model.

Fields match the "Create Account" form: personal names, email,
password with confirmation, and the Terms of Service checkbox.
"""

import re
from dataclasses import dataclass
from typing import Optional

from src.core.exceptions import ValidationError

MIN_PASSWORD_LENGTH = 8

EMAIL_PATTERN = re.compile(r"^[\w.+-]+@[\w-]+\.[\w.-]+$")


@dataclass
class RegistrationModel:
    """Values collected from the registration form."""

    first_name: str = ""
    last_name: str = ""
    email: str = ""
    password: str = ""
    confirm_password: str = ""
    terms_accepted: bool = False

    @classmethod
    def from_fields(
        cls,
        first_name: Optional[str] = "",
        last_name: Optional[str] = "",
        email: Optional[str] = "",
        password: Optional[str] = "",
        confirm_password: Optional[str] = "",
        terms_accepted: bool = False,
    ) -> "RegistrationModel":
        """Build a snapshot from raw widget values.

        Names and email are trimmed. Passwords are kept exactly as typed.
        """
        return cls(
            first_name=(first_name or "").strip(),
            last_name=(last_name or "").strip(),
            email=(email or "").strip(),
            password=password or "",
            confirm_password=confirm_password or "",
            terms_accepted=bool(terms_accepted),
        )

    @property
    def full_name(self) -> str:
        return " ".join(part for part in (self.first_name, self.last_name) if part)

    def validate_for_submit(self) -> list[str]:
        """Check the form is ready to submit.

        Order: email, password, confirmation, terms.

        Returns:
            List of messages (empty if ready)
        """
        errors: list[str] = []

        if not self.email:
            errors.append("Email is required.")
        elif not EMAIL_PATTERN.match(self.email):
            errors.append("Email address is not valid.")

        if not self.password:
            errors.append("Password is required.")
        elif len(self.password) < MIN_PASSWORD_LENGTH:
            errors.append(f"Password must be at least {MIN_PASSWORD_LENGTH} characters.")

        if self.password != self.confirm_password:
            errors.append("Passwords do not match.")

        if not self.terms_accepted:
            errors.append("You must agree to the Terms of Service.")

        return errors

    def ensure_submittable(self) -> None:
        """Raise ValidationError carrying every message if not ready."""
        errors = self.validate_for_submit()
        if errors:
            raise ValidationError(errors)
