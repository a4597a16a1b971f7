"""Read Kubernetes YAML and sort the documents into typed buckets."""

from __future__ import annotations

import copy
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Iterable

import yaml

from DevfileRes.exceptions import DecodeError, FetchError
from DevfileRes.fetcher import download_in_memory
from DevfileRes.logging_utils import get_logger
from DevfileRes.models import (
    HTTPRequestParams,
    KubernetesObject,
    KubernetesResources,
    YamlSource,
)

logger = get_logger(__name__)

# kind → KubernetesResources attribute
KIND_BUCKETS: dict[str, str] = {
    "Deployment": "deployments",
    "Service": "services",
    "Route": "routes",
    "Ingress": "ingresses",
}


@dataclass(frozen=True)
class ResourceProbe:
    """The minimal shape every classified document must have."""

    kind: str
    name: str


def probe_document(document: Any, index: int) -> ResourceProbe:
    """Decode ``kind`` and ``metadata.name`` from a generic document.

    Raises:
        DecodeError: Either field is missing or has the wrong type.
    """
    if not isinstance(document, Mapping):
        raise DecodeError(
            f"document {index}: expected a mapping, got {type(document).__name__}",
            index=index,
        )

    kind = document.get("kind")
    if kind is None:
        raise DecodeError(f"document {index}: missing 'kind'", index=index)
    if not isinstance(kind, str):
        raise DecodeError(f"document {index}: 'kind' must be a string", index=index)

    metadata = document.get("metadata")
    if not isinstance(metadata, Mapping):
        raise DecodeError(
            f"document {index} ({kind}): missing or malformed 'metadata'", index=index
        )
    name = metadata.get("name")
    if not isinstance(name, str):
        raise DecodeError(
            f"document {index} ({kind}): missing or malformed 'metadata.name'",
            index=index,
        )

    return ResourceProbe(kind=kind, name=name)


def _mapping_field(value: Any, field_name: str, probe: ResourceProbe, index: int) -> dict:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise DecodeError(
            f"document {index} ({probe.kind} {probe.name}): '{field_name}' must be a mapping",
            index=index,
        )
    return dict(value)


def _to_object(probe: ResourceProbe, document: Mapping, index: int) -> KubernetesObject:
    manifest = copy.deepcopy(dict(document))
    metadata = manifest["metadata"]

    namespace = metadata.get("namespace")
    if namespace is not None and not isinstance(namespace, str):
        raise DecodeError(
            f"document {index} ({probe.kind} {probe.name}): "
            "'metadata.namespace' must be a string",
            index=index,
        )

    return KubernetesObject(
        kind=probe.kind,
        name=probe.name,
        namespace=namespace,
        labels=_mapping_field(metadata.get("labels"), "metadata.labels", probe, index),
        spec=_mapping_field(manifest.get("spec"), "spec", probe, index),
        manifest=manifest,
    )


def parse_kubernetes_yaml(documents: Iterable[Any]) -> KubernetesResources:
    """Sort decoded YAML documents by ``kind``.

    Deployments, Services, Routes and Ingresses become KubernetesObject
    records; any other kind is kept in ``others`` as a copy of the generic
    document. Input order is kept within each bucket and the input is never
    modified. An empty input gives an empty result.

    Raises:
        DecodeError: A document lacks a usable ``kind`` or ``metadata.name``.
    """
    resources = KubernetesResources()
    for index, document in enumerate(documents):
        probe = probe_document(document, index)
        bucket = KIND_BUCKETS.get(probe.kind)
        if bucket is None:
            resources.others.append(copy.deepcopy(dict(document)))
            continue
        getattr(resources, bucket).append(_to_object(probe, document, index))

    logger.debug(
        "Classified %d deployments, %d services, %d routes, %d ingresses, %d others",
        len(resources.deployments),
        len(resources.services),
        len(resources.routes),
        len(resources.ingresses),
        len(resources.others),
    )
    return resources


def read_kubernetes_yaml(
    source: YamlSource,
    fetch: Callable[[HTTPRequestParams], bytes] = download_in_memory,
) -> list[Any]:
    """Load every non-empty YAML document from a URL, a file or raw bytes.

    Raises:
        ValueError: *source* does not set exactly one of url, path and data.
        FetchError: The URL or file could not be read.
        DecodeError: The bytes are not valid YAML.
    """
    given = [name for name in ("url", "path", "data") if getattr(source, name)]
    if len(given) != 1:
        raise ValueError(
            f"exactly one of url, path or data must be set, got: {given or 'none'}"
        )

    if source.url:
        data = fetch(HTTPRequestParams(url=source.url, token=source.token))
    elif source.path:
        try:
            data = Path(source.path).read_bytes()
        except OSError as exc:
            raise FetchError(
                f"failed to read {source.path}: {exc}", url=source.path
            ) from exc
    else:
        data = source.data

    try:
        return [doc for doc in yaml.safe_load_all(data) if doc is not None]
    except yaml.YAMLError as exc:
        raise DecodeError(f"failed to decode YAML: {exc}") from exc


def load_kubernetes_resources(
    source: YamlSource,
    fetch: Callable[[HTTPRequestParams], bytes] = download_in_memory,
) -> KubernetesResources:
    """Read *source* and classify its documents."""
    return parse_kubernetes_yaml(read_kubernetes_yaml(source, fetch=fetch))
