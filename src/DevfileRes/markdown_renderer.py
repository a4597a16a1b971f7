"""Markdown report of a resolved source."""

from __future__ import annotations

from DevfileRes.file_filter import get_language_hint, looks_like_devfile_path
from DevfileRes.git_url import GitUrl
from DevfileRes.models import KubernetesObject, KubernetesResources

_BUCKET_TITLES = (
    ("deployments", "Deployments"),
    ("services", "Services"),
    ("routes", "Routes"),
    ("ingresses", "Ingresses"),
)


def _render_coordinates(git_url: GitUrl) -> list[str]:
    rows = [
        ("Protocol", git_url.protocol),
        ("Host", git_url.host),
        ("Owner", git_url.owner),
        ("Repository", git_url.repo),
        ("Branch", git_url.branch or "-"),
        ("Path", git_url.path or "-"),
        ("Points to", "file" if git_url.is_file else "directory / repository"),
        ("Devfile", "yes" if looks_like_devfile_path(git_url.path) else "no"),
        ("Token", "validated" if git_url.has_token else "none"),
    ]
    lines = ["## Repository\n", "| Field | Value |", "| --- | --- |"]
    lines += [f"| {key} | `{value}` |" for key, value in rows]
    lines.append("")
    return lines


def _object_label(obj: KubernetesObject) -> str:
    if obj.namespace:
        return f"`{obj.namespace}/{obj.name}`"
    return f"`{obj.name}`"


def _render_resources(resources: KubernetesResources) -> list[str]:
    lines = ["## Kubernetes Resources\n"]
    if resources.is_empty():
        lines.append("_No resources found._\n")
        return lines

    for attr, title in _BUCKET_TITLES:
        objects: list[KubernetesObject] = getattr(resources, attr)
        if not objects:
            continue
        lines.append(f"### {title} ({len(objects)})\n")
        lines += [f"- {_object_label(obj)}" for obj in objects]
        lines.append("")

    if resources.others:
        lines.append(f"### Others ({len(resources.others)})\n")
        for doc in resources.others:
            lines.append(f"- {doc['kind']} `{doc['metadata']['name']}`")
        lines.append("")
    return lines


def render_markdown(
    source: str,
    git_url: GitUrl | None = None,
    resources: KubernetesResources | None = None,
    content: str | None = None,
) -> str:
    """Render what is known about *source* as a single Markdown document.

    Args:
        source: the URL, path or label the user supplied
        git_url: parsed coordinates, when *source* is a provider URL
        resources: classified Kubernetes documents, if any were read
        content: fetched text, shown verbatim in a fenced block
    """
    parts: list[str] = [f"# Source: {source}\n"]

    if git_url is not None:
        parts += _render_coordinates(git_url)

    if resources is not None:
        parts += _render_resources(resources)

    if content is not None:
        lang = get_language_hint(git_url.path if git_url else source)
        parts.append("## Content\n")
        parts.append(f"```{lang}")
        parts.append(content)
        parts.append("```\n")

    return "\n".join(parts)
