import io

import pytest
from rich.console import Console

from appseed.cli.ui_components import display_name, print_invalid_name
from appseed.core.domain.models import ValidationVerdict


@pytest.mark.unit
class TestDisplayName:

    def test_plain_names_are_unchanged(self):
        assert display_name("my-app") == "my-app"

    def test_surrogates_are_escaped(self):
        assert display_name(b"my-app\xff".decode("utf-8", "surrogateescape")) == "my-app\\udcff"

    def test_invalid_name_report_is_printable(self):
        buffer = io.StringIO()
        console = Console(file=buffer, width=200)
        verdict = ValidationVerdict(is_valid=False, errors=["name can only contain URL-friendly characters"])

        print_invalid_name(console, b"my-app\xff".decode("utf-8", "surrogateescape"), verdict, ("react",))

        output = buffer.getvalue()
        output.encode("utf-8")
        assert "my-app\\udcff" in output
        assert "URL-friendly characters" in output
