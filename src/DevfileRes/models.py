"""Data classes for DevfileRes."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ProviderType(Enum):
    GITHUB = "github"
    GITLAB = "gitlab"
    BITBUCKET = "bitbucket"


@dataclass(frozen=True)
class RepoPath:
    """Coordinates a provider extracts from a URL path."""

    owner: str
    repo: str
    branch: str = ""
    path: str = ""
    is_file: bool = False


@dataclass(frozen=True)
class HTTPRequestParams:
    url: str
    token: str = field(default="", repr=False)
    timeout: float | None = None  # seconds; None = configured default


@dataclass
class KubernetesObject:
    kind: str
    name: str
    namespace: str | None = None
    labels: dict[str, str] = field(default_factory=dict)
    spec: dict[str, Any] = field(default_factory=dict)
    manifest: dict[str, Any] = field(default_factory=dict)


@dataclass
class KubernetesResources:
    deployments: list[KubernetesObject] = field(default_factory=list)
    services: list[KubernetesObject] = field(default_factory=list)
    routes: list[KubernetesObject] = field(default_factory=list)
    ingresses: list[KubernetesObject] = field(default_factory=list)
    others: list[dict[str, Any]] = field(default_factory=list)

    def is_empty(self) -> bool:
        return not (
            self.deployments
            or self.services
            or self.routes
            or self.ingresses
            or self.others
        )


@dataclass(frozen=True)
class YamlSource:
    """Where to read Kubernetes YAML from. Exactly one of url/path/data."""

    url: str = ""
    path: str = ""
    data: bytes = b""
    token: str = field(default="", repr=False)
