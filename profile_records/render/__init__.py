"""
HTML rendering of widget states.

Templates are rendered with autoescaping on, so extracted text can
never inject markup into the modal.
"""

from typing import Optional
from urllib.parse import urlparse

import jinja2
import structlog

from profile_records.config.loader import WidgetConfig
from profile_records.core.models import GrantStatus, RecordKind, WidgetState

logger = structlog.get_logger(__name__)

TEMPLATES = {
    RecordKind.GRANTS: "grants.html",
    RecordKind.PUBLICATIONS: "publications.html",
}

SAFE_URL_SCHEMES = ("http", "https")

_env: Optional[jinja2.Environment] = None


def safe_url(url: str) -> str:
    """Return url if it is an http(s) link, else "#"."""
    if url and urlparse(url).scheme in SAFE_URL_SCHEMES:
        return url
    return "#"


def get_env() -> jinja2.Environment:
    """Return the shared template environment."""
    global _env
    if _env is None:
        _env = jinja2.Environment(
            loader=jinja2.PackageLoader("profile_records.render", "templates"),
            autoescape=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        _env.filters["safe_url"] = safe_url
    return _env


def group_grants(records) -> list[tuple[str, str, list]]:
    """
    Split grants into display groups.

    Returns (heading, badge style, records) for each non-empty group,
    active grants first.
    """
    groups = [
        ("Active Research Grants", "primary", GrantStatus.ACTIVE),
        ("Completed Research Grants", "success", GrantStatus.COMPLETED),
        ("Other Research Grants", "secondary", GrantStatus.UNKNOWN),
    ]
    result = []
    for heading, style, status in groups:
        members = [r for r in records if r.status == status]
        if members:
            result.append((heading, style, members))
    return result


def render_records(state: WidgetState, config: WidgetConfig) -> str:
    """
    Render the records held by a widget state.

    Args:
        state: Widget state with records
        config: Widget configuration

    Returns:
        HTML fragment for the modal body
    """
    template = get_env().get_template(TEMPLATES[config.kind])

    context = {
        "config": config,
        "state": state,
        "records": state.records,
    }
    if config.kind == RecordKind.GRANTS:
        context["groups"] = group_grants(state.records)

    logger.debug(
        "rendering_records",
        widget_id=config.widget_id,
        records=len(state.records),
        fallback=state.used_fallback,
    )

    return template.render(**context)


def render_loading(config: WidgetConfig) -> str:
    """Render the loading notice shown while a fetch is in flight."""
    return get_env().get_template("loading.html").render(config=config)


def render_error(config: WidgetConfig) -> str:
    """Render the notice shown when nothing could be loaded."""
    return get_env().get_template("error.html").render(config=config)


__all__ = [
    "render_records",
    "render_loading",
    "render_error",
    "group_grants",
    "safe_url",
]
