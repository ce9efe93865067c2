import re
from dataclasses import dataclass
from typing import Any, List, Optional, Sequence

# --- Default Messages ---
REQUIRED_MESSAGE = "field is required"
EMAIL_MESSAGE = "invalid email format"
MIN_VALUE_MESSAGE = "value is below minimum of {}"
MIN_LENGTH_MESSAGE = "length is below minimum of {}"
MAX_VALUE_MESSAGE = "value exceeds maximum of {}"
MAX_LENGTH_MESSAGE = "length exceeds maximum of {}"
LEN_MESSAGE = "length must be exactly {}"

RULE_SEPARATOR = ","

_EMAIL_RE = re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}")
_INT_RE = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True)
class RuleViolation:
    """A failed rule: its name, default message and numeric bound (if any)."""

    rule: str
    message: str
    bound: Optional[int] = None


# --- Parsing ---
def parse_rules(tag: str) -> List[str]:
    """Split a rule declaration into its tokens, in declaration order."""
    if not tag:
        return []
    return tag.split(RULE_SEPARATOR)


def parse_bound(token: str, key: str) -> Optional[int]:
    """Return N for a ``key=N`` token, or None if the token doesn't apply."""
    prefix = key + "="
    if not token.startswith(prefix):
        return None
    literal = token[len(prefix):]
    if not _INT_RE.fullmatch(literal):
        return None
    try:
        return int(literal)
    except ValueError:
        # out of range for int conversion (digit limit)
        return None


def declared_bound(tokens: Sequence[str], key: str) -> Optional[int]:
    """First well-formed ``key=N`` bound in a token list."""
    for token in tokens:
        bound = parse_bound(token, key)
        if bound is not None:
            return bound
    return None


def max_message(bound: int) -> str:
    return MAX_VALUE_MESSAGE.format(bound)


# --- Value Kinds ---
def _is_int(value: Any) -> bool:
    # bool is an int subclass but has its own kind
    return isinstance(value, int) and not isinstance(value, bool)


def is_zero_value(value: Any) -> bool:
    """Check whether a value is the empty value of its kind."""
    if value is None:
        return True
    if isinstance(value, str):
        return value == ""
    if _is_int(value):
        return value == 0
    if isinstance(value, (list, tuple)):
        return len(value) == 0
    return False


def is_valid_email(value: str) -> bool:
    return _EMAIL_RE.fullmatch(value) is not None


# --- Evaluators ---
def _check_required(value: Any, token: str) -> Optional[RuleViolation]:
    if token == "required" and is_zero_value(value):
        return RuleViolation("required", REQUIRED_MESSAGE)
    return None


def _check_max(value: Any, token: str) -> Optional[RuleViolation]:
    bound = parse_bound(token, "max")
    if bound is None:
        return None
    if _is_int(value) and value > bound:
        return RuleViolation("max", MAX_VALUE_MESSAGE.format(bound), bound)
    if isinstance(value, str) and len(value) > bound:
        return RuleViolation("max", MAX_LENGTH_MESSAGE.format(bound), bound)
    return None


def _check_min(value: Any, token: str) -> Optional[RuleViolation]:
    bound = parse_bound(token, "min")
    if bound is None:
        return None
    if _is_int(value) and value < bound:
        return RuleViolation("min", MIN_VALUE_MESSAGE.format(bound), bound)
    if isinstance(value, str) and len(value) < bound:
        return RuleViolation("min", MIN_LENGTH_MESSAGE.format(bound), bound)
    return None


def _check_len(value: Any, token: str) -> Optional[RuleViolation]:
    bound = parse_bound(token, "len")
    if bound is None:
        return None
    if isinstance(value, str) and len(value) != bound:
        return RuleViolation("len", LEN_MESSAGE.format(bound), bound)
    return None


def _check_email(value: Any, token: str) -> Optional[RuleViolation]:
    if token == "email" and isinstance(value, str) and not is_valid_email(value):
        return RuleViolation("email", EMAIL_MESSAGE)
    return None


_EVALUATORS = (_check_required, _check_max, _check_min, _check_len, _check_email)


def check_rule(value: Any, token: str) -> Optional[RuleViolation]:
    """Evaluate one rule token against a value.

    Unknown tokens, malformed numeric literals and rules that don't apply to
    the value's kind never fail.
    """
    for evaluate in _EVALUATORS:
        violation = evaluate(value, token)
        if violation is not None:
            return violation
    return None


def check_rules(value: Any, tokens: Sequence[str]) -> Optional[RuleViolation]:
    """Return the first violated rule in declaration order, or None."""
    for token in tokens:
        violation = check_rule(value, token)
        if violation is not None:
            return violation
    return None
