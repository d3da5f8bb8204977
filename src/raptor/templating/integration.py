"""Kida environment setup and presenter rendering.

Creates a kida Environment from raptor's AppConfig. The environment is
created once when the App freezes and passed through the request
pipeline to every Route.

Templates are located by convention: a route of kind ``show`` for the
``blog_post`` resource renders ``blog_post/show.html``.
"""

from dataclasses import dataclass
from typing import Any

from kida import Environment, FileSystemLoader

from raptor.config import AppConfig


def create_environment(config: AppConfig) -> Environment:
    """Create a kida Environment from app configuration.

    Called once during ``App._freeze()``. The returned environment
    is immutable for the lifetime of the app.
    """
    return Environment(
        loader=FileSystemLoader(str(config.template_dir)),
        autoescape=config.autoescape,
        auto_reload=config.debug,
        trim_blocks=config.trim_blocks,
        lstrip_blocks=config.lstrip_blocks,
    )


def template_name(resource_name: str, kind: str, extension: str = ".html") -> str:
    """Conventional template name for a route kind of a resource."""
    return f"{resource_name}/{kind}{extension}"


def presenter_context(presenter: Any) -> dict[str, Any]:
    """Expose *presenter* and its public members to a template by name.

    ``{{ presenter.title }}`` and ``{{ title }}`` both work.
    """
    context = {
        name: getattr(presenter, name) for name in dir(presenter) if not name.startswith("_")
    }
    context["presenter"] = presenter
    return context


@dataclass(frozen=True, slots=True)
class TemplateRenderer:
    """Renders presenters through the conventional per-route templates."""

    env: Environment
    extension: str = ".html"

    @classmethod
    def from_config(cls, config: AppConfig) -> "TemplateRenderer":
        return cls(env=create_environment(config), extension=config.template_extension)

    def render(self, resource_name: str, kind: str, presenter: Any) -> str:
        """Render the template for *kind* with *presenter* bound as its only value."""
        template = self.env.get_template(template_name(resource_name, kind, self.extension))
        return template.render(presenter_context(presenter))
