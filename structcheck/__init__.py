"""
StructCheck - declarative field rules for Python records

Fields declare comma-separated rules ("required", "min=N", "max=N", "len=N",
"email") in ``Annotated`` metadata. A Validator checks them in declaration
order and reports the first failure, optionally with a custom message.

Example:
    from typing import Annotated, Optional
    from structcheck import Record, Validator, rules

    class User(Record):
        name: Annotated[Optional[str], rules("required,min=3,max=50")]
        email: Annotated[str, rules("required,email")]
        age: Annotated[int, rules("min=18,max=100")] = 18

    validator = Validator().with_custom_errors({
        "age": {"max": "Age cannot exceed 100"},
    })
    validator.validate(User(name="John Doe", email="john@example.com", age=101))
    # ValidationError: Field 'age' validation failed: Age cannot exceed 100
"""

__version__ = "1.0.0"
__license__ = "MIT"

from .core import CustomErrors, Validator
from .errors import ValidationError
from .fields import FieldSpec, Record, RecordMeta, collect_fields, fields_of, rules
from .rules import RuleViolation, check_rule, check_rules, parse_rules

__all__ = [
    "CustomErrors",
    "FieldSpec",
    "Record",
    "RecordMeta",
    "RuleViolation",
    "ValidationError",
    "Validator",
    "check_rule",
    "check_rules",
    "collect_fields",
    "fields_of",
    "parse_rules",
    "rules",
]
