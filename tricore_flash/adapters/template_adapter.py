"""Template adapter for abstracting template rendering operations."""

import logging
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined, TemplateNotFound

from tricore_flash.core.errors import TemplateError
from tricore_flash.core.structlog_logger import get_struct_logger


logger = get_struct_logger(__name__)


class TemplateAdapter:
    """Jinja2 template adapter implementation.

    Blocks are not trimmed: target files for vendor tools are reproduced
    verbatim apart from their variable slots.
    """

    def _create_environment(self, loader: FileSystemLoader | None = None) -> Environment:
        return Environment(
            loader=loader,
            undefined=StrictUndefined,  # Raise errors for undefined variables
            autoescape=False,
        )

    def render_template(self, template_path: Path, context: dict[str, Any]) -> str:
        """Render a Jinja2 template file with the given context."""
        try:
            env = self._create_environment(FileSystemLoader(template_path.parent))
            template = env.get_template(template_path.name)
            return template.render(context)
        except TemplateNotFound as e:
            logger.error("template_not_found", template_path=str(template_path))
            raise TemplateError(
                f"Template not found: {template_path}",
                {"template_path": str(template_path)},
            ) from e
        except Exception as e:
            exc_info = logging.getLogger().isEnabledFor(logging.DEBUG)
            logger.error(
                "template_render_error",
                template_path=str(template_path),
                error=str(e),
                exc_info=exc_info,
            )
            raise TemplateError(
                f"Cannot render template {template_path}: {e}",
                {
                    "template_path": str(template_path),
                    "context_keys": list(context.keys()),
                },
            ) from e


def create_template_adapter() -> TemplateAdapter:
    """Create a template adapter with default settings."""
    return TemplateAdapter()
