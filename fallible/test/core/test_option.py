"""Tests for fallible.core.option module."""

import pytest

from fallible.core.errors import ErrorCode, InvalidAccess, InvalidConstruction
from fallible.core.option import Nothing, Option, Some, is_none, is_some
from fallible.core.sentinel import MISSING


class TestOptionOf:
    """Tests for Option.of()."""

    def test_present_value(self) -> None:
        """A present value becomes Some."""
        option = Option.of("hello")
        assert isinstance(option, Some)
        assert option.is_some() is True
        assert option.payload == "hello"
        assert option.unwrap() == "hello"

    def test_none(self) -> None:
        """None becomes Nothing and unwraps to None."""
        option = Option.of(None)
        assert isinstance(option, Nothing)
        assert option.is_some() is False
        assert option.unwrap() is None

    def test_missing(self) -> None:
        """MISSING becomes Nothing and unwraps to MISSING."""
        option = Option.of(MISSING)
        assert option.is_some() is False
        assert option.unwrap() is MISSING

    def test_none_payload_raises(self) -> None:
        """Nothing.payload raises InvalidAccess."""
        option = Option.of(None)
        with pytest.raises(InvalidAccess, match="No payload provided or null"):
            _ = option.payload

    def test_missing_payload_raises(self) -> None:
        """The raised InvalidAccess carries its ErrorCode."""
        option = Option.of(MISSING)
        with pytest.raises(InvalidAccess) as exc_info:
            _ = option.payload
        assert exc_info.value.code == ErrorCode.INVALID_ACCESS

    @pytest.mark.parametrize("value", [0, "", False, [], (), 0.0])
    def test_falsy_values_are_present(self, value: object) -> None:
        """Falsy values are present, not absent."""
        option = Option.of(value)
        assert option.is_some() is True
        assert option.payload == value

    def test_unwrap_returns_same_object(self) -> None:
        """unwrap() hands back the wrapped object itself."""
        payload = ["payload"]
        assert Option.of(payload).unwrap() is payload

    def test_is_none(self) -> None:
        """is_none() is the negation of is_some()."""
        assert Option.of(None).is_none() is True
        assert Option.of(1).is_none() is False


class TestVariants:
    """Tests for Some and Nothing instances."""

    def test_some_rejects_none(self) -> None:
        """Some(None) raises InvalidConstruction."""
        with pytest.raises(InvalidConstruction):
            Some(None)

    def test_some_rejects_missing(self) -> None:
        """Some(MISSING) raises InvalidConstruction."""
        with pytest.raises(InvalidConstruction):
            Some(MISSING)

    def test_nothing_rejects_present_value(self) -> None:
        """Nothing only accepts an absent sentinel."""
        with pytest.raises(InvalidConstruction, match="Nothing can only hold None or MISSING"):
            Nothing(0)  # type: ignore[arg-type]

    def test_nothing_defaults_to_none(self) -> None:
        """Nothing() holds None."""
        assert Nothing().unwrap() is None

    def test_repr(self) -> None:
        """Variants have readable repr."""
        assert repr(Some("hello")) == "Some('hello')"
        assert repr(Nothing()) == "Nothing()"
        assert repr(Nothing(MISSING)) == "Nothing(MISSING)"

    def test_frozen(self) -> None:
        """Some is immutable."""
        option = Some(1)
        with pytest.raises(AttributeError):
            option.value = 2  # type: ignore[misc]

    def test_equality(self) -> None:
        """Options compare by variant and contents."""
        assert Option.of(1) == Some(1)
        assert Option.of(None) == Nothing()
        assert Some(1) != Some(2)
        assert Nothing() != Nothing(MISSING)

    def test_accessors_are_idempotent(self) -> None:
        """Repeated reads return the same values."""
        some = Option.of({"k": 1})
        none = Option.of(None)
        for _ in range(3):
            assert some.is_some() is True
            assert some.payload == {"k": 1}
            assert some.unwrap() == {"k": 1}
            assert none.is_some() is False
            assert none.unwrap() is None

    def test_failed_access_does_not_change_variant(self) -> None:
        """A rejected read leaves the variant unchanged."""
        none = Option.of(None)
        with pytest.raises(InvalidAccess):
            _ = none.payload
        assert none.is_some() is False


class TestMatch:
    """Tests for Option.match() and structural pattern matching."""

    def test_match_some(self) -> None:
        """match() calls on_some with the payload."""
        assert Option.of("abc").match(len, lambda: 0) == 3

    def test_match_nothing(self) -> None:
        """match() calls on_none for Nothing."""
        assert Option.of(None).match(len, lambda: 0) == 0

    def test_pattern_match(self) -> None:
        """Pattern matching works with Some and Nothing."""
        seen: list[object] = []
        for option in (Option.of("a"), Option.of(None)):
            match option:
                case Some(value):
                    seen.append(value)
                case Nothing():
                    seen.append("none")
        assert seen == ["a", "none"]


class TestTypeGuards:
    """Tests for is_some() and is_none() type guards."""

    def test_is_some(self) -> None:
        """is_some() is True only for Some."""
        assert is_some(Some(1)) is True
        assert is_some(Nothing()) is False

    def test_is_none(self) -> None:
        """is_none() is True only for Nothing."""
        assert is_none(Nothing()) is True
        assert is_none(Some(1)) is False


class TestRealWorldUsage:
    """Tests demonstrating real-world usage patterns."""

    def test_lookup_with_fallback(self) -> None:
        """Option makes a missing dict key explicit."""
        headers = {"x-user": "ada"}

        user = Option.of(headers.get("x-user"))
        anonymous = Option.of(headers.get("x-missing"))

        assert (user.payload if user.is_some() else "anonymous") == "ada"
        assert (anonymous.payload if anonymous.is_some() else "anonymous") == "anonymous"
        assert anonymous.unwrap() is None
