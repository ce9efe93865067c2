#!/usr/bin/env python3
"""
Walkthrough of structcheck - field rules, optional fields and custom messages
"""

from typing import Annotated, Optional

from structcheck import Record, ValidationError, Validator, rules
from structcheck.log import configure_logging


class User(Record):
    Name: Annotated[Optional[str], rules("required,min=3,max=50")]
    Email: Annotated[str, rules("required,email")]
    Age: Annotated[int, rules("min=18,max=100")]
    Address: Annotated[str, rules("len=10")]


def show(validator, user):
    try:
        validator.validate(user)
    except ValidationError as e:
        print(f"✗ {e}")
    else:
        print(f"✓ {user} is valid")


def main():
    configure_logging(verbose=True)

    validator = Validator().with_custom_errors({
        "Email": {
            "required": "Email is required",
            "email": "Please provide a valid email",
        },
        "Age": {
            "min": "You must be at least 18 years old",
            "max": "Age cannot exceed 100",
        },
    })

    print("=== Default and custom messages ===")
    show(validator, User(Name=None, Email="john@example.com", Age=25, Address="1234567890"))
    show(validator, User(Name="John", Email="invalidemailcom", Age=25, Address="1234567890"))
    show(validator, User(Name="John", Email="john@example.com", Age=101, Address="1234567890"))
    show(validator, User(Name="John", Email="john@example.com", Age=25, Address="Short"))
    show(validator, User(Name="John Doe", Email="john.doe@example.com", Age=25, Address="1234567890"))

    print("\n=== Legacy overlay (required and max only) ===")
    legacy = Validator(legacy_overrides=True).with_custom_errors(validator.custom_errors)
    show(legacy, User(Name="John", Email="invalidemailcom", Age=25, Address="1234567890"))
    show(legacy, User(Name="John", Email="john@example.com", Age=101, Address="1234567890"))


if __name__ == "__main__":
    main()
