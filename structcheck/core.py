import copy
from typing import Any, Dict, Mapping, Optional

import structlog

from .errors import ValidationError
from .fields import FieldSpec, fields_of, resolve
from .rules import (
    REQUIRED_MESSAGE,
    RuleViolation,
    check_rules,
    declared_bound,
    max_message,
)

logger = structlog.get_logger(__name__)

# field name -> rule name -> message
CustomErrors = Dict[str, Dict[str, str]]


class Validator:
    """Validates records against the rules declared on their fields.

    Example:
        validator = Validator().with_custom_errors({
            "Age": {"max": "Age cannot exceed 100"},
        })
        validator.validate(user)  # raises ValidationError

    Custom messages replace the default message of whichever rule failed.
    With ``legacy_overrides=True`` only ``required`` and integer ``max``
    failures consult the table; ``min``, ``len`` and ``email`` entries are
    stored but ignored.
    """

    def __init__(self, *, legacy_overrides: bool = False) -> None:
        self._custom_errors: CustomErrors = {}
        self.legacy_overrides = legacy_overrides

    @classmethod
    def new(cls, **options: Any) -> "Validator":
        return cls(**options)

    @property
    def custom_errors(self) -> CustomErrors:
        """A copy of the registered custom messages."""
        return copy.deepcopy(self._custom_errors)

    def with_custom_errors(
        self, errors: Mapping[str, Mapping[str, str]]
    ) -> "Validator":
        """Merge custom messages into this validator and return it.

        Entries for the same (field, rule) pair are overwritten; all other
        entries already registered are kept.
        """
        if not isinstance(errors, Mapping):
            raise TypeError(
                f"custom errors must be a mapping, got {type(errors).__name__}"
            )
        for field, messages in errors.items():
            if not isinstance(messages, Mapping):
                raise TypeError(
                    f"custom errors for field '{field}' must be a mapping, "
                    f"got {type(messages).__name__}"
                )
            self._custom_errors.setdefault(field, {}).update(messages)
        return self

    # --- Validation ---
    def check(self, record: Any) -> Optional[ValidationError]:
        """Return the error for the first failing field, or None."""
        for spec in fields_of(record):
            violation = self._check_field(spec, record)
            if violation is None:
                continue
            message = self._resolve_message(spec, violation)
            logger.debug(
                "field validation failed",
                record=type(record).__name__,
                field=spec.name,
                rule=violation.rule,
                overridden=message != violation.message,
            )
            return ValidationError(spec.name, message, rule=violation.rule)
        return None

    def validate(self, record: Any) -> None:
        """Raise ValidationError if any field of the record fails its rules."""
        error = self.check(record)
        if error is not None:
            raise error

    def is_valid(self, record: Any) -> bool:
        return self.check(record) is None

    def _check_field(self, spec: FieldSpec, record: Any) -> Optional[RuleViolation]:
        present, value = resolve(spec.value_of(record))
        if not present:
            # an absent value never reaches the other rules
            return RuleViolation("required", REQUIRED_MESSAGE)
        return check_rules(value, spec.rules)

    def _resolve_message(self, spec: FieldSpec, violation: RuleViolation) -> str:
        overrides = self._custom_errors.get(spec.name, {})
        if not self.legacy_overrides:
            return overrides.get(violation.rule, violation.message)

        if "required" in overrides and violation.message == REQUIRED_MESSAGE:
            return overrides["required"]
        if "max" in overrides:
            bound = declared_bound(spec.rules, "max")
            if bound is not None and violation.message == max_message(bound):
                return overrides["max"]
        return violation.message
