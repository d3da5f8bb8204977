"""Application configuration.

AppConfig is a frozen dataclass — immutable after creation, IDE-autocompletable,
no string-key dict lookups.
"""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Application configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = AppConfig(debug=True, template_dir="templates")
    """

    # Development: template auto-reload and error detail in 500 bodies
    debug: bool = False

    # Templates are looked up as <template_dir>/<resource_name>/<kind><template_extension>
    template_dir: str | Path = "views"
    template_extension: str = ".html"
    autoescape: bool = True
    trim_blocks: bool = True
    lstrip_blocks: bool = True
