from dataclasses import dataclass
from typing import List

from .errors import EntryValidationError, ValidationError


@dataclass
class ValidationResult:
    is_valid: bool
    errors: List[ValidationError]

    @classmethod
    def success(cls):
        return cls(is_valid=True, errors=[])

    @classmethod
    def failure(cls, errors: List[ValidationError]):
        return cls(is_valid=False, errors=errors)

    @property
    def kinds(self):
        return [e.kind for e in self.errors]

    def raise_on_errors(self) -> None:
        if not self.is_valid:
            raise EntryValidationError(self.errors)
