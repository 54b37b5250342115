"""Tests for the scalar factory."""

import logging
import re
import threading

import pytest
from pydantic import ValidationError

from custom_scalars.features.scalars.models import (
    AlphabetConstraint,
    ComplexityConstraint,
    KindConstraint,
    LengthConstraint,
    RegexConstraint,
)
from custom_scalars.features.scalars.schemas import ComplexityOptions, ConstrainedStringOptions, RegexScalarOptions
from custom_scalars.features.scalars.service import ScalarFactory
from custom_scalars.shared.literals import LiteralKind, RawLiteral
from custom_scalars.shared.validators.exceptions import (
    ComplexityUnmet,
    InvalidCharacter,
    InvalidKind,
    PatternMismatch,
    TooLong,
    TooShort,
)
from custom_scalars.shared.validators.password import Complexity


class TestRegexScalar:
    """Test regex scalar construction."""

    def test_pipeline_is_kind_then_regex(self, factory):
        """Test the regex scalar pipeline shape."""
        scalar = factory.build_regex_scalar(RegexScalarOptions(name="Digits", pattern=r"^\d+$"))
        assert [type(c) for c in scalar.pipeline] == [KindConstraint, RegexConstraint]

    def test_default_error_message(self, factory):
        """Test the generic message names the scalar."""
        scalar = factory.build_regex_scalar(RegexScalarOptions(name="Digits", pattern=r"^\d+$"))
        with pytest.raises(PatternMismatch, match="Validation error for Digits"):
            scalar.parse_literal(RawLiteral.string("abc"))

    def test_custom_error_message(self, factory):
        """Test an overridden message is reported."""
        scalar = factory.build_regex_scalar(
            RegexScalarOptions(name="Digits", pattern=re.compile(r"^\d+$"), error="Digits only")
        )
        with pytest.raises(PatternMismatch, match="Digits only"):
            scalar.parse_literal(RawLiteral.string("abc"))

    def test_rejects_non_string_literal(self, factory):
        """Test numeric literals never reach the regex."""
        scalar = factory.build_regex_scalar(RegexScalarOptions(name="Digits", pattern=r"^\d+$"))
        with pytest.raises(InvalidKind):
            scalar.parse_literal(RawLiteral(kind=LiteralKind.INT, value="123"))

    def test_regex_scalars_do_not_consume_names(self, factory):
        """Test regex scalars keep their given name."""
        first = factory.build_regex_scalar(RegexScalarOptions(name="Digits", pattern=r"^\d+$"))
        second = factory.build_regex_scalar(RegexScalarOptions(name="Digits", pattern=r"^\d+$"))
        assert first.name == second.name == "Digits"


class TestCustomScalar:
    """Test arbitrary pipelines."""

    def test_keeps_pipeline_order(self, factory):
        """Test constraints run in the order given."""
        scalar = factory.build_custom_scalar(
            "Tag",
            "Alphabet checked before length",
            [KindConstraint(), AlphabetConstraint(alphabet="abc"), LengthConstraint(min_length=3)],
        )
        with pytest.raises(InvalidCharacter):
            scalar.parse_literal(RawLiteral.string("z"))
        assert scalar.description == "Alphabet checked before length"


class TestConstrainedString:
    """Test composite string scalars."""

    def test_pipeline_shape(self, factory):
        """Test kind, length, alphabet and complexity order."""
        scalar = factory.build_constrained_string(
            ConstrainedStringOptions(
                name_prefix="Secret",
                min_length=2,
                max_length=8,
                alphabet="abcABC123!",
                complexity=ComplexityOptions(special_chars=True, alpha_numeric=True),
            )
        )
        assert [type(c) for c in scalar.pipeline] == [
            KindConstraint,
            LengthConstraint,
            AlphabetConstraint,
            ComplexityConstraint,
            ComplexityConstraint,
        ]
        assert [c.rule for c in scalar.pipeline[3:]] == [Complexity.ALPHA_NUMERIC, Complexity.SPECIAL_CHARS]

    def test_no_alphabet_no_complexity(self, factory):
        """Test optional checks are left out when not requested."""
        scalar = factory.build_constrained_string(ConstrainedStringOptions(name_prefix="Plain"))
        assert [type(c) for c in scalar.pipeline] == [KindConstraint, LengthConstraint]

    def test_rejects_min_above_max(self, factory):
        """Test unsatisfiable bounds fail at construction."""
        with pytest.raises(ValidationError, match="must not exceed max_length"):
            factory.limited_string(10, 3)

    def test_invalid_configuration_is_logged(self, factory, caplog):
        """Test rejected configurations are logged before raising."""
        with caplog.at_level(logging.ERROR, logger="custom_scalars"):
            with pytest.raises(ValidationError):
                factory.password(-1)
        assert "Invalid Password configuration" in caplog.text

    def test_failed_configuration_does_not_consume_a_name(self, factory):
        """Test a rejected configuration leaves the counter untouched."""
        with pytest.raises(ValidationError):
            factory.limited_string(10, 3)
        assert factory.limited_string().name == "LimitedString"


class TestNaming:
    """Test schema-unique names for parameterized families."""

    def test_limited_string_numbering(self, factory):
        """Test three LimitedStrings are numbered in construction order."""
        names = [factory.limited_string().name, factory.limited_string(3, 10).name, factory.limited_string(3).name]
        assert names == ["LimitedString", "LimitedString2", "LimitedString3"]

    def test_families_count_independently(self, factory):
        """Test each family has its own counter."""
        assert factory.limited_string().name == "LimitedString"
        assert factory.password().name == "Password"
        assert factory.password().name == "Password2"
        assert factory.limited_string().name == "LimitedString2"

    def test_factories_are_independent(self):
        """Test counters belong to a factory, not to the process."""
        first, second = ScalarFactory(), ScalarFactory()
        assert first.limited_string().name == "LimitedString"
        assert second.limited_string().name == "LimitedString"
        assert first.limited_string().name == "LimitedString2"

    def test_concurrent_construction_yields_unique_names(self, factory):
        """Test concurrent construction never repeats a name."""
        names: list[str] = []
        lock = threading.Lock()

        def build():
            for _ in range(25):
                name = factory.limited_string().name
                with lock:
                    names.append(name)

        threads = [threading.Thread(target=build) for _ in range(4)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        expected = ["LimitedString"] + [f"LimitedString{n}" for n in range(2, 101)]
        assert sorted(names) == sorted(expected)


class TestLimitedString:
    """Test LimitedString behavior."""

    @pytest.mark.parametrize("value", ["a", "aa", "aaa1", "1aaa"])
    def test_default_accepts_non_empty(self, factory, value):
        """Test the default LimitedString accepts any non-empty string."""
        assert factory.limited_string().parse_literal(RawLiteral.string(value)) == value

    def test_default_rejects_empty(self, factory):
        """Test the default LimitedString rejects the empty string."""
        with pytest.raises(TooShort, match="String not long enough"):
            factory.limited_string().parse_literal(RawLiteral.string(""))

    @pytest.mark.parametrize("value", ["foo", "foobar", "foo-bar", "foobar23", "123456789"])
    def test_min_max_accepts(self, factory, value):
        """Test values within [3, 10] pass."""
        assert factory.limited_string(3, 10).parse_literal(RawLiteral.string(value)) == value

    @pytest.mark.parametrize(
        ("value", "error"),
        [("", TooShort), ("a", TooShort), ("aa", TooShort), ("01234567890", TooLong), ("foobar23456", TooLong)],
    )
    def test_min_max_rejects(self, factory, value, error):
        """Test values outside [3, 10] fail with the matching error."""
        with pytest.raises(error):
            factory.limited_string(3, 10).parse_literal(RawLiteral.string(value))

    @pytest.mark.parametrize("value", ["aaa", "abc", "abc123", "1231231231", "aaaaabbbbb", "33333ccc22"])
    def test_alphabet_accepts(self, factory, value):
        """Test values made of the alphabet pass."""
        assert factory.limited_string(3, 10, "abc123").parse_literal(RawLiteral.string(value)) == value

    @pytest.mark.parametrize(
        ("value", "error"),
        [
            ("", TooShort),
            ("a", TooShort),
            ("aa", TooShort),
            ("01234567890", TooLong),
            ("foobar23456", TooLong),
            ("dddd", InvalidCharacter),
            ("abc0", InvalidCharacter),
        ],
    )
    def test_alphabet_rejects(self, factory, value, error):
        """Test length errors win over alphabet errors."""
        with pytest.raises(error):
            factory.limited_string(3, 10, "abc123").parse_literal(RawLiteral.string(value))

    def test_too_short_wins_over_invalid_character(self, factory):
        """Test short values with bad characters always report TooShort."""
        scalar = factory.limited_string(3, 10, "abc")
        for value in ["", "x", "xy", "!?"]:
            with pytest.raises(TooShort):
                scalar.parse_literal(RawLiteral.string(value))

    def test_none_minimum_means_one(self, factory):
        """Test an explicit None minimum falls back to 1."""
        scalar = factory.limited_string(None, None, None)
        assert scalar.parse_literal(RawLiteral.string("x")) == "x"
        with pytest.raises(TooShort):
            scalar.parse_literal(RawLiteral.string(""))

    def test_empty_alphabet_disables_check(self, factory):
        """Test an empty alphabet string means no restriction."""
        scalar = factory.limited_string(1, None, "")
        assert [type(c) for c in scalar.pipeline] == [KindConstraint, LengthConstraint]


class TestPassword:
    """Test Password behavior."""

    def test_alpha_numeric(self, factory):
        """Test the alphanumeric rule."""
        scalar = factory.password(None, None, None, {"alphaNumeric": True})
        assert scalar.parse_literal(RawLiteral.string("abc123")) == "abc123"
        with pytest.raises(ComplexityUnmet, match="at least one number and one letter"):
            scalar.parse_literal(RawLiteral.string("dddd"))

    def test_mixed_case(self, factory):
        """Test the mixed-case rule."""
        scalar = factory.password(None, None, None, {"mixedCase": True})
        assert scalar.parse_literal(RawLiteral.string("aBc")) == "aBc"
        with pytest.raises(ComplexityUnmet, match="uppercase and one lowercase"):
            scalar.parse_literal(RawLiteral.string("abc"))

    def test_special_chars_snake_case_flags(self, factory):
        """Test snake_case flag names are accepted too."""
        scalar = factory.password(complexity={"special_chars": True})
        assert scalar.parse_literal(RawLiteral.string("a!")) == "a!"
        with pytest.raises(ComplexityUnmet, match="special character"):
            scalar.parse_literal(RawLiteral.string("abc"))

    def test_rules_evaluated_in_fixed_order(self, factory):
        """Test alphanumeric is reported before mixed case and special chars."""
        scalar = factory.password(
            8, 64, None, ComplexityOptions(alpha_numeric=True, mixed_case=True, special_chars=True)
        )
        with pytest.raises(ComplexityUnmet) as exc_info:
            scalar.parse_literal(RawLiteral.string("abcdefgh"))
        assert exc_info.value.rule == Complexity.ALPHA_NUMERIC

        with pytest.raises(ComplexityUnmet) as exc_info:
            scalar.parse_literal(RawLiteral.string("abcdefg1"))
        assert exc_info.value.rule == Complexity.MIXED_CASE

        with pytest.raises(ComplexityUnmet) as exc_info:
            scalar.parse_literal(RawLiteral.string("abcdefG1"))
        assert exc_info.value.rule == Complexity.SPECIAL_CHARS

        assert scalar.parse_literal(RawLiteral.string("abcdeG1!")) == "abcdeG1!"

    def test_length_before_complexity(self, factory):
        """Test a short weak password reports TooShort."""
        scalar = factory.password(8, None, None, {"alphaNumeric": True})
        with pytest.raises(TooShort):
            scalar.parse_literal(RawLiteral.string("abc"))

    def test_no_complexity_by_default(self, factory):
        """Test Password without flags only checks length."""
        scalar = factory.password()
        assert scalar.parse_literal(RawLiteral.string("x")) == "x"

    def test_misspelled_flags_rejected(self, factory):
        """Test unknown complexity flags fail instead of being ignored."""
        with pytest.raises(ValidationError, match="alphanumeric"):
            factory.password(8, None, None, {"alphanumeric": True, "specialchars": True})
        assert factory.password().name == "Password"

    def test_unknown_options_rejected(self):
        """Test option structs reject keys they do not define."""
        with pytest.raises(ValidationError):
            ConstrainedStringOptions(name_prefix="Code", maxLength=4)
        with pytest.raises(ValidationError):
            RegexScalarOptions(name="Digits", pattern=r"^\d+$", message="Digits only")
