"""Tests for the pattern catalog registry."""
from unittest.mock import Mock

import pytest

from account_patterns.catalog import PatternCatalog, PatternCategory, register_builtin_patterns
from account_patterns.domain.base.exceptions import PatternNotFoundError


class TestPatternCatalog:
    """Test pattern registration and lookup."""

    def setup_method(self):
        self.catalog = PatternCatalog()
        self.demo = Mock(return_value={"ok": True})

    def test_builtin_catalog_registers_every_pattern(self):
        catalog = PatternCatalog.get_instance()

        assert len(catalog.get_registered_names()) == 10
        assert len(catalog.list_patterns(PatternCategory.BEHAVIORAL)) == 2
        assert len(catalog.list_patterns(PatternCategory.CREATIONAL)) == 5
        assert len(catalog.list_patterns(PatternCategory.STRUCTURAL)) == 3

    def test_get_instance_returns_same_catalog(self):
        assert PatternCatalog.get_instance() is PatternCatalog.get_instance()

    def test_register_and_run(self):
        self.catalog.register("visitor", PatternCategory.BEHAVIORAL, "Visitor demo", self.demo)

        assert self.catalog.run("visitor") == {"ok": True}
        self.demo.assert_called_once_with()

    def test_duplicate_registration_rejected(self):
        self.catalog.register("visitor", PatternCategory.BEHAVIORAL, "Visitor demo", self.demo)

        with pytest.raises(ValueError, match="already registered"):
            self.catalog.register("visitor", PatternCategory.BEHAVIORAL, "Again", self.demo)

    def test_unknown_pattern_raises(self):
        register_builtin_patterns(self.catalog)

        with pytest.raises(PatternNotFoundError) as exc:
            self.catalog.get("visitor")

        assert exc.value.pattern_name == "visitor"
        assert "singleton" in exc.value.available

    def test_registration_to_dict(self):
        self.catalog.register("visitor", PatternCategory.BEHAVIORAL, "Visitor demo", self.demo)

        assert self.catalog.get("visitor").to_dict() == {
            "name": "visitor",
            "category": "behavioral",
            "description": "Visitor demo",
        }
