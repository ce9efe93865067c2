from typing import Optional


class ValidationError(ValueError):
    """Raised for the first rule a record fails."""

    def __init__(self, field: str, message: str, rule: Optional[str] = None) -> None:
        self.field = field
        self.message = message
        self.rule = rule
        super().__init__(str(self))

    def __str__(self) -> str:
        return f"Field '{self.field}' validation failed: {self.message}"

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(field={self.field!r}, "
            f"message={self.message!r}, rule={self.rule!r})"
        )
