"""
Text Registries

Registry for loading and caching the Jinja2 templates that render parsed
records (contact cards, shirts) back to text.
"""

from typing import Dict

from jinja2 import Environment, PackageLoader, StrictUndefined, Template, TemplateNotFound

TEMPLATES_PACKAGE = "skillbench"
TEMPLATES_DIR = "resources/templates"


class TemplateRegistry:
    """
    Registry for loading and caching text templates.

    Templates are stored in skillbench/resources/templates/{name}.txt.jinja
    and use the standard Jinja2 delimiters.
    """

    def __init__(self, package: str = TEMPLATES_PACKAGE, templates_dir: str = TEMPLATES_DIR):
        self._cache: Dict[str, Template] = {}

        self.env = Environment(
            loader=PackageLoader(package, templates_dir),
            # Catches silent failures
            undefined=StrictUndefined,
            # Block tags sit on their own lines in the templates
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=False,
            autoescape=False,
        )

    def get_template(self, name: str) -> Template:
        """
        Get a template by name, loading and caching it if necessary.

        Args:
            name: Template name without extension (e.g., 'vcard')

        Returns:
            Jinja2 Template object

        Raises:
            TemplateNotFound: If template file doesn't exist
        """
        if name in self._cache:
            return self._cache[name]

        try:
            template = self.env.get_template(f"{name}.txt.jinja")
        except TemplateNotFound as e:
            raise TemplateNotFound(f"Template not found for '{name}' in {TEMPLATES_DIR}") from e

        self._cache[name] = template
        return template

    def render(self, name: str, **context) -> str:
        """Render a named template with the given context."""
        return self.get_template(name).render(**context)

    def clear_cache(self) -> None:
        """Clear the template cache."""
        self._cache.clear()

    def is_cached(self, name: str) -> bool:
        """Check whether a template has been loaded."""
        return name in self._cache


_default_registry = None


def get_registry() -> TemplateRegistry:
    """Shared registry instance, created on first use."""
    global _default_registry
    if _default_registry is None:
        _default_registry = TemplateRegistry()
    return _default_registry
