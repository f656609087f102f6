"""Jinja2 rendering for storefront templates."""

from __future__ import annotations

import logging
from typing import Any, Callable, Mapping, Optional

from jinja2 import Environment, PackageLoader, TemplateError, select_autoescape

from linked_products.core.exceptions import ErrorCode, InfrastructureException

logger = logging.getLogger(__name__)


class TemplateRenderer:
    """Render the HTML templates shipped in ``storefront/templates``."""

    def __init__(
        self,
        translate: Optional[Callable[[str], str]] = None,
        environment: Optional[Environment] = None,
    ) -> None:
        self.jinja_env = environment or Environment(
            loader=PackageLoader("linked_products.storefront", "templates"),
            autoescape=select_autoescape(["html"]),
        )
        self.jinja_env.globals["translate"] = translate or (lambda text: text)

    def render(self, name: str, data: Optional[Mapping[str, Any]] = None) -> str:
        try:
            template = self.jinja_env.get_template(name)
            return template.render(**dict(data or {}))
        except TemplateError as e:
            logger.error("Template %s failed to render: %s", name, e)
            raise InfrastructureException(
                f"Template '{name}' failed to render: {e}",
                ErrorCode.TEMPLATE_ERROR,
                {"template": name},
            ) from e
