"""Unit tests for TemplateRegistry class."""

import pytest
from jinja2 import TemplateNotFound

from skillbench.contexts.text.registries import TemplateRegistry, get_registry


@pytest.mark.unit
def test_template_registry_init():
    """Test TemplateRegistry initialization."""
    registry = TemplateRegistry()
    assert registry._cache == {}


@pytest.mark.unit
def test_template_caching():
    """Test that templates are cached after first load."""
    registry = TemplateRegistry()

    template1 = registry.get_template("vcard")
    assert registry.is_cached("vcard")

    template2 = registry.get_template("vcard")
    assert template1 is template2


@pytest.mark.unit
def test_get_template_not_found():
    """Test error handling for missing template."""
    registry = TemplateRegistry()

    with pytest.raises(TemplateNotFound):
        registry.get_template("nonexistent_type")


@pytest.mark.unit
def test_clear_cache():
    """Test cache clearing."""
    registry = TemplateRegistry()

    registry.get_template("shirt")
    assert len(registry._cache) == 1

    registry.clear_cache()
    assert len(registry._cache) == 0


@pytest.mark.unit
def test_strict_undefined():
    """Test that a missing template variable fails loudly."""
    registry = TemplateRegistry()

    with pytest.raises(Exception, match="size"):
        registry.render("shirt", id="S1", description="d", color="c")


@pytest.mark.unit
def test_shared_registry():
    """Test that get_registry returns one shared instance."""
    assert get_registry() is get_registry()
