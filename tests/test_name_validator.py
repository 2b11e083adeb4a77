import pytest

from appseed.core.services.name_validator import RESERVED_DEPENDENCY_NAMES, NameValidator


@pytest.mark.unit
class TestNameValidator:

    def test_valid_name(self):
        verdict = NameValidator().validate("my-app")
        assert verdict.is_valid
        assert verdict.errors == []
        assert verdict.warnings == []

    @pytest.mark.parametrize("name", ["", ".app", "_app", "my app", "node_modules"])
    def test_lexically_illegal_names_are_rejected(self, name):
        verdict = NameValidator().validate(name)
        assert not verdict.is_valid
        assert verdict.errors
        assert not verdict.reserved_collision

    def test_warnings_alone_reject_the_name(self):
        verdict = NameValidator().validate("MyApp")
        assert not verdict.is_valid
        assert verdict.errors == []
        assert verdict.warnings == ["name can no longer contain capital letters"]

    def test_errors_and_warnings_keep_their_order(self):
        verdict = NameValidator().validate("_Fs")
        assert verdict.errors == ["name cannot start with an underscore"]
        assert verdict.warnings == ["name can no longer contain capital letters"]

    @pytest.mark.parametrize("name", RESERVED_DEPENDENCY_NAMES)
    def test_reserved_dependency_names_are_rejected(self, name):
        verdict = NameValidator().validate(name)
        assert not verdict.is_valid
        assert verdict.reserved_collision
        assert "react-scripts" in verdict.errors[0]

    def test_custom_reserved_names(self):
        validator = NameValidator(reserved_names=["vite"])
        assert not validator.validate("vite").is_valid
        assert validator.validate("react").is_valid
        assert validator.reserved_names == ("vite",)

    def test_surrogate_escaped_name_gets_a_verdict(self):
        verdict = NameValidator().validate(b"my-app\xff".decode("utf-8", "surrogateescape"))
        assert not verdict.is_valid
        assert "name can only contain URL-friendly characters" in verdict.errors
