"""Unit tests for diagnostics and attribute schemas."""

import pytest

from unleash_provider.framework import (
    Attribute,
    AttributeType,
    Diagnostic,
    Diagnostics,
    Schema,
    Severity,
)


class TestDiagnostics:
    def test_empty(self):
        diagnostics = Diagnostics()
        assert not diagnostics
        assert not diagnostics.has_error
        assert len(diagnostics) == 0

    def test_warnings_are_not_errors(self):
        diagnostics = Diagnostics()
        diagnostics.add_warning("heads up")

        assert diagnostics
        assert not diagnostics.has_error
        assert diagnostics.warnings[0].summary == "heads up"

    def test_errors_accumulate_in_order(self):
        diagnostics = Diagnostics()
        diagnostics.add_error("first", "one")
        diagnostics.add_warning("between")
        diagnostics.append(Diagnostic(Severity.ERROR, "second"))

        assert diagnostics.has_error
        assert [d.summary for d in diagnostics] == ["first", "between", "second"]
        assert diagnostics.error_summary == "first; second"

    def test_str(self):
        assert str(Diagnostic(Severity.ERROR, "failed", "detail")) == (
            "Error: failed: detail"
        )
        assert str(Diagnostic(Severity.WARNING, "careful")) == "Warning: careful"


class TestAttribute:
    def test_required_cannot_be_computed(self):
        with pytest.raises(ValueError):
            Attribute(AttributeType.STRING, required=True, computed=True)

    def test_must_declare_mode(self):
        with pytest.raises(ValueError):
            Attribute(AttributeType.STRING)

    def test_configurable(self):
        assert Attribute(AttributeType.STRING, optional=True).configurable
        assert not Attribute(AttributeType.STRING, computed=True).configurable


@pytest.fixture
def schema() -> Schema:
    return Schema(
        attributes={
            "id": Attribute(AttributeType.STRING, computed=True),
            "name": Attribute(AttributeType.STRING, required=True),
            "kind": Attribute(
                AttributeType.STRING, required=True, requires_replace=True
            ),
            "region": Attribute(
                AttributeType.STRING,
                optional=True,
                computed=True,
                requires_replace=True,
            ),
            "secret": Attribute(AttributeType.STRING, optional=True, sensitive=True),
        }
    )


class TestSchema:
    def test_valid_config(self, schema):
        assert not schema.validate({"name": "a", "kind": "b"})

    def test_reports_every_problem(self, schema):
        diagnostics = schema.validate({"id": "1", "color": "red"})

        summaries = [d.summary for d in diagnostics.errors]
        assert summaries.count("Missing required argument") == 2
        assert "Invalid configuration for read-only attribute" in summaries
        assert "Unsupported argument" in summaries

    def test_requires_replace(self, schema):
        state = {"name": "a", "kind": "b", "region": "eu"}

        assert schema.requires_replace({**state, "name": "z"}, state) == []
        assert schema.requires_replace({**state, "kind": "c"}, state) == ["kind"]
        assert schema.requires_replace({**state, "region": "us"}, state) == ["region"]

    def test_unset_computed_value_keeps_state(self, schema):
        state = {"name": "a", "kind": "b", "region": "eu"}
        assert schema.requires_replace({**state, "region": None}, state) == []

    def test_redact(self, schema):
        assert schema.redact({"name": "a", "secret": "s3cr3t"}) == {
            "name": "a",
            "secret": "<redacted>",
        }
        assert schema.redact({"secret": None}) == {"secret": None}
