"""Memtool target configuration rendering.

The configuration is the Memtool default for the TC37xA family adapted to a
TC39x B-step triboard: it initializes the TLF35584 C-step regulator on
connect and switches off the FLASH error traps. Only the UDAS port selector
is variable. A different device family needs a different template, not more
parameters.
"""

from pathlib import Path

from tricore_flash.adapters.template_adapter import (
    TemplateAdapter,
    create_template_adapter,
)


TEMPLATE_PATH = Path(__file__).parent / "templates" / "memtool_config.cfg.j2"

PORT_KEY = "DasPortSel"


def render_config(port: int, template_adapter: TemplateAdapter | None = None) -> str:
    """Render the Memtool configuration for the target on the given UDAS port.

    Args:
        port: Non-negative UDAS port selector
        template_adapter: Optional adapter used for rendering

    Returns:
        The configuration file content

    Raises:
        ValueError: If port is not a non-negative integer
    """
    if isinstance(port, bool) or not isinstance(port, int) or port < 0:
        raise ValueError(f"UDAS port must be a non-negative integer, got {port!r}")

    adapter = template_adapter or create_template_adapter()
    return adapter.render_template(TEMPLATE_PATH, {"das_port": port})
