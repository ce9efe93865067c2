"""Tests for the rule catalog."""

import pytest

from structcheck.rules import (
    RuleViolation,
    check_rule,
    check_rules,
    declared_bound,
    is_valid_email,
    is_zero_value,
    max_message,
    parse_bound,
    parse_rules,
)


class TestParsing:
    """Test rule declaration parsing."""

    def test_parse_rules_keeps_order(self):
        assert parse_rules("required,min=3,max=50") == ["required", "min=3", "max=50"]

    def test_parse_empty_tag(self):
        assert parse_rules("") == []

    def test_tokens_are_not_trimmed(self):
        assert parse_rules("required, email") == ["required", " email"]

    @pytest.mark.parametrize(
        "token,key,expected",
        [
            ("max=100", "max", 100),
            ("min=0", "min", 0),
            ("len=+7", "len", 7),
            ("max=abc", "max", None),
            ("max=", "max", None),
            ("max=1.5", "max", None),
            ("min=3", "max", None),
            ("maximum=3", "max", None),
            ("max=" + "9" * 5000, "max", None),
        ],
    )
    def test_parse_bound(self, token, key, expected):
        assert parse_bound(token, key) == expected

    def test_oversized_literal_is_inert(self):
        assert check_rule("abc", "max=" + "9" * 5000) is None
        assert check_rule(10, "min=" + "9" * 5000) is None

    def test_declared_bound_skips_malformed(self):
        assert declared_bound(["min=18", "max=x", "max=100"], "max") == 100
        assert declared_bound(["required"], "max") is None


class TestZeroValues:
    """Test which values count as empty."""

    @pytest.mark.parametrize("value", [None, "", 0, [], ()])
    def test_zero(self, value):
        assert is_zero_value(value)

    @pytest.mark.parametrize("value", ["a", 1, -1, [0], (None,), False, True, 0.0, {}])
    def test_not_zero(self, value):
        assert not is_zero_value(value)


class TestEmail:
    """Test the email shape check."""

    @pytest.mark.parametrize(
        "email",
        ["john.doe@example.com", "a+b_c%d-e@sub.domain.io", "x@y.co"],
    )
    def test_valid(self, email):
        assert is_valid_email(email)

    @pytest.mark.parametrize(
        "email",
        [
            "invalidemailcom",
            "@example.com",
            "user@example",
            "user@example.c",
            "user@example.c0m",
            "us er@example.com",
            "user@example.com\n",
            "",
        ],
    )
    def test_invalid(self, email):
        assert not is_valid_email(email)


class TestCheckRule:
    """Test single-rule evaluation and default messages."""

    def test_required(self):
        assert check_rule("", "required") == RuleViolation("required", "field is required")
        assert check_rule("x", "required") is None

    def test_integer_bounds(self):
        assert check_rule(17, "min=18").message == "value is below minimum of 18"
        assert check_rule(101, "max=100").message == "value exceeds maximum of 100"
        assert check_rule(18, "min=18") is None
        assert check_rule(100, "max=100") is None

    def test_string_bounds(self):
        assert check_rule("ab", "min=3").message == "length is below minimum of 3"
        assert check_rule("abcd", "max=3").message == "length exceeds maximum of 3"
        assert check_rule("abc", "min=3") is None

    def test_len(self):
        violation = check_rule("Short", "len=10")
        assert violation == RuleViolation("len", "length must be exactly 10", 10)
        assert check_rule("1234567890", "len=10") is None

    def test_length_counts_characters(self):
        assert check_rule("héllo", "len=5") is None

    def test_email(self):
        assert check_rule("nope", "email") == RuleViolation("email", "invalid email format")

    def test_violation_keeps_bound(self):
        violation = check_rule(101, "max=100")
        assert violation.rule == "max"
        assert violation.bound == 100
        assert violation.message == max_message(violation.bound)

    @pytest.mark.parametrize(
        "value,token",
        [
            (5, "max=abc"),
            ("long string", "max=abc"),
            ("x", "min=abc"),
            ("x", "len=ten"),
            (1, "unknown"),
            ("bad", " email"),
        ],
    )
    def test_malformed_and_unknown_tokens_are_inert(self, value, token):
        assert check_rule(value, token) is None

    @pytest.mark.parametrize(
        "value,token",
        [
            (1.5, "max=1"),
            (True, "max=0"),
            (["a", "b"], "max=1"),
            (12345, "len=2"),
            (12345, "email"),
        ],
    )
    def test_rules_for_other_kinds_are_inert(self, value, token):
        assert check_rule(value, token) is None


class TestCheckRules:
    """Test rule lists."""

    def test_all_pass(self):
        assert check_rules("john@example.com", ["required", "email", "max=50"]) is None

    def test_first_failure_wins(self):
        assert check_rules("bad", ["email", "min=30"]).rule == "email"
        assert check_rules("bad", ["min=30", "email"]).rule == "min"
