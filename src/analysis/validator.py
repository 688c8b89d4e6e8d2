"""Player form validation for the create and edit pages."""

from dataclasses import dataclass, field

from ..models.player import PlayerForm
from .countries import is_valid_country


MISSING_FIELDS_MESSAGE = "Please fill in all fields"
INVALID_COUNTRY_MESSAGE = "Please enter a valid country name (e.g., Brazil, Spain, USA)"


@dataclass
class PlayerValidationError:
    """Represents a validation error for a player form."""

    code: str
    message: str


@dataclass
class ValidationResult:
    """
    Result of a validation check.

    Attributes:
        is_valid: Whether the validation passed.
        errors: List of validation errors (empty if valid).
    """

    is_valid: bool
    errors: list[PlayerValidationError] = field(default_factory=list)

    @property
    def message(self) -> str:
        """First error message, or an empty string when valid."""
        return self.errors[0].message if self.errors else ""


def validate_player_form(form: PlayerForm) -> ValidationResult:
    """
    Validate a player form before submission.

    Args:
        form: The form to validate.

    Returns:
        ValidationResult with the blocking errors.
    """
    errors: list[PlayerValidationError] = []

    # Required fields; nothing else is checked until these are present
    if not form.name.strip() or not form.nationality.strip():
        errors.append(
            PlayerValidationError(code="MISSING_FIELDS", message=MISSING_FIELDS_MESSAGE)
        )
        return ValidationResult(is_valid=False, errors=errors)

    if not is_valid_country(form.nationality):
        errors.append(
            PlayerValidationError(code="INVALID_COUNTRY", message=INVALID_COUNTRY_MESSAGE)
        )

    return ValidationResult(is_valid=len(errors) == 0, errors=errors)
