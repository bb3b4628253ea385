"""Required-field validation for form snapshots."""

from dataclasses import dataclass, field

from copygen.errors import MissingFieldsError
from copygen.ui.state import FormSnapshot

REQUIRED_FIELDS = ("niche", "keywords")


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating a form snapshot."""

    missing_fields: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.missing_fields

    def raise_for_missing(self) -> None:
        """Raise MissingFieldsError if any required field is empty."""
        if self.missing_fields:
            raise MissingFieldsError(self.missing_fields)


def validate(snapshot: FormSnapshot) -> ValidationResult:
    """Check that every required field holds non-whitespace text.

    ``word_count`` is deliberately not checked for being numeric.
    """
    missing = [name for name in REQUIRED_FIELDS if not getattr(snapshot, name).strip()]
    return ValidationResult(missing_fields=missing)
