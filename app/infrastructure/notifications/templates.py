"""Jinja2 template rendering for notification bodies.

Templates are looked up in the configured template directory first, then in
the built-in templates below. A notification without a template renders
through ``email/default.<format>.j2``.
"""

import os
from typing import Any, Dict, Optional

from jinja2 import (
    ChoiceLoader,
    DictLoader,
    FileSystemLoader,
    TemplateError,
    TemplateNotFound,
    select_autoescape,
)
from jinja2.sandbox import SandboxedEnvironment
from structlog.stdlib import BoundLogger

from infrastructure.logging import get_module_logger
from infrastructure.notifications.exceptions import TemplateRenderError
from infrastructure.notifications.models import Notification

TEMPLATE_SUFFIX = ".j2"

BUILTIN_TEMPLATES: Dict[str, str] = {
    "email/default.html.j2": (
        "<!DOCTYPE html>\n"
        "<html>\n"
        "<head><meta charset=\"utf-8\"><title>{{ title }}</title></head>\n"
        "<body>\n"
        "<h1>{{ title }}</h1>\n"
        "<div>{{ content | safe }}</div>\n"
        "{% if notification.metadata.url %}\n"
        "<p><a href=\"{{ notification.metadata.url }}\">See more</a></p>\n"
        "{% endif %}\n"
        "</body>\n"
        "</html>\n"
    ),
    "email/default.txt.j2": (
        "{{ title }}\n"
        "\n"
        "{{ content }}\n"
        "{% if notification.metadata.url %}\n"
        "\n"
        "See more: {{ notification.metadata.url }}\n"
        "{% endif %}\n"
    ),
}


class TemplateRenderer:
    """Sandboxed Jinja2 renderer for notification templates.

    Usage:
        renderer = TemplateRenderer(template_dir="/etc/notifications/templates")
        html = renderer.render(notification)
        text = renderer.render(notification, fmt="txt")
    """

    def __init__(
        self,
        template_dir: Optional[str] = None,
        logger: Optional[BoundLogger] = None,
    ):
        self.template_dir = template_dir
        self.logger = logger if logger is not None else get_module_logger()

        loaders = []
        if template_dir:
            if os.path.isdir(template_dir):
                loaders.append(FileSystemLoader(template_dir))
            else:
                self.logger.warning(
                    "template_dir_not_found", template_dir=template_dir
                )
        loaders.append(DictLoader(BUILTIN_TEMPLATES))

        self._env = SandboxedEnvironment(
            loader=ChoiceLoader(loaders),
            autoescape=select_autoescape(
                enabled_extensions=("html.j2", "htm.j2", "xml.j2"),
                default_for_string=False,
            ),
            trim_blocks=True,
            lstrip_blocks=True,
        )

    def is_available(self) -> bool:
        """Check whether templates can be rendered.

        Always True once constructed: the built-in templates are always
        loadable, even when the configured template directory is missing.
        Callers that should send raw content pass no renderer at all.
        """
        return True

    @staticmethod
    def resolve_template_name(notification: Notification, fmt: str = "html") -> str:
        """Return the template name used for a notification.

        Args:
            notification: Notification being rendered
            fmt: Output format, e.g. "html" or "txt"

        Returns:
            ``notification.template``, or the built-in default, with
            ``.<fmt>.j2`` appended when the name has no ``.j2`` suffix.
        """
        name = notification.template or f"email/default.{fmt}{TEMPLATE_SUFFIX}"
        if TEMPLATE_SUFFIX not in name:
            name = f"{name}.{fmt}{TEMPLATE_SUFFIX}"
        return name

    def render(self, notification: Notification, fmt: str = "html") -> str:
        """Render a notification body.

        The template receives the notification context plus ``notification``,
        ``title`` and ``content``; the last three win over context keys with
        the same name.

        Raises:
            TemplateRenderError: If the template is missing or fails to render.
        """
        name = self.resolve_template_name(notification, fmt)
        context: Dict[str, Any] = {
            **notification.context,
            "notification": notification,
            "title": notification.title,
            "content": notification.content,
        }

        try:
            rendered = self._env.get_template(name).render(**context)
        except TemplateNotFound as e:
            raise TemplateRenderError(
                f"Template not found: {name}", template_name=name
            ) from e
        except TemplateError as e:
            raise TemplateRenderError(
                f"Failed to render template {name}: {e}", template_name=name
            ) from e

        self.logger.debug("template_rendered", template=name, format=fmt)
        return rendered
