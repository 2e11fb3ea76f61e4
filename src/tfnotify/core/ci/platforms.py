# src/tfnotify/core/ci/platforms.py
"""
Contrato e implementações de plataformas de CI do tfnotify.

Uma plataforma de CI sabe reconhecer, pelas variáveis de ambiente, que o
processo está rodando sob ela, e sabe derivar as coordenadas do
repositório (owner, name) a partir das convenções próprias daquela CI.

Componentes principais:
    - PlatformDescriptor → valor imutável (ci, owner, name)
    - CIPlatform         → protocolo estrutural de uma plataforma
    - EnvVarPlatform     → owner/name lidos de variáveis dedicadas
    - SlugPlatform       → owner/name extraídos de um slug `owner/name`
    - CodeBuildPlatform  → owner/name extraídos da URL do repositório

Princípios fundamentais:
    - O ambiente é sempre injetado como `Mapping[str, str]`
    - Plataformas não mantêm estado
    - Ausência de valor é representada por string vazia

Limites explícitos:
    - Não decide precedência entre nome explícito e detecção
    - Não altera configuração
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Optional, Protocol, Tuple, runtime_checkable

from . import names


@dataclass(frozen=True)
class PlatformDescriptor:
    """
    Coordenadas derivadas de uma plataforma de CI detectada.

    Campos:
        - ci: nome canônico da plataforma
        - owner: dono do repositório ("" quando indisponível)
        - name: nome do repositório ("" quando indisponível)
    """

    ci: str
    owner: str
    name: str


@runtime_checkable
class CIPlatform(Protocol):
    """
    Protocolo estrutural de uma plataforma de CI.

    Não impõe herança: qualquer objeto com `name`, `matches`,
    `repo_owner` e `repo_name` é aceito pelo registry.
    """

    name: str

    def matches(self, env: Mapping[str, str]) -> bool:
        """Indica se o ambiente contém os marcadores desta plataforma."""
        ...

    def repo_owner(self, env: Mapping[str, str]) -> str:
        ...

    def repo_name(self, env: Mapping[str, str]) -> str:
        ...


def describe(platform: CIPlatform, env: Mapping[str, str]) -> PlatformDescriptor:
    return PlatformDescriptor(
        ci=platform.name,
        owner=platform.repo_owner(env),
        name=platform.repo_name(env),
    )


def _marker_matches(env: Mapping[str, str], marker: str, expected: Optional[str]) -> bool:
    value = env.get(marker, "")
    if expected is None:
        return value != ""
    return value.lower() == expected


def _split_slug(slug: str) -> Tuple[str, str]:
    owner, sep, name = slug.partition("/")
    if not sep:
        return "", ""
    return owner, name


def _split_repo_url(url: str) -> Tuple[str, str]:
    """Extrai (owner, name) de URLs https ou scp-like (`git@host:owner/name.git`)."""
    url = url.strip()
    if url.endswith(".git"):
        url = url[:-4]
    url = url.rstrip("/")
    if "://" in url:
        path = url.split("://", 1)[1].partition("/")[2]
    elif ":" in url:
        path = url.split(":", 1)[1]
    else:
        return "", ""
    parts = [p for p in path.split("/") if p]
    if len(parts) < 2:
        return "", ""
    return parts[-2], parts[-1]


@dataclass(frozen=True)
class EnvVarPlatform:
    """Plataforma cujas coordenadas vêm de duas variáveis dedicadas."""

    name: str
    marker: str
    owner_var: str
    name_var: str
    marker_value: Optional[str] = "true"

    def matches(self, env: Mapping[str, str]) -> bool:
        return _marker_matches(env, self.marker, self.marker_value)

    def repo_owner(self, env: Mapping[str, str]) -> str:
        return env.get(self.owner_var, "")

    def repo_name(self, env: Mapping[str, str]) -> str:
        return env.get(self.name_var, "")


@dataclass(frozen=True)
class SlugPlatform:
    """Plataforma que expõe o repositório como um único slug `owner/name`."""

    name: str
    marker: str
    slug_var: str
    marker_value: Optional[str] = "true"

    def matches(self, env: Mapping[str, str]) -> bool:
        return _marker_matches(env, self.marker, self.marker_value)

    def repo_owner(self, env: Mapping[str, str]) -> str:
        return _split_slug(env.get(self.slug_var, ""))[0]

    def repo_name(self, env: Mapping[str, str]) -> str:
        return _split_slug(env.get(self.slug_var, ""))[1]


@dataclass(frozen=True)
class CodeBuildPlatform:
    """AWS CodeBuild: o repositório só é conhecido pela URL de origem."""

    name: str = names.CODEBUILD
    marker: str = "CODEBUILD_BUILD_ID"
    url_var: str = "CODEBUILD_SOURCE_REPO_URL"

    def matches(self, env: Mapping[str, str]) -> bool:
        return _marker_matches(env, self.marker, None)

    def repo_owner(self, env: Mapping[str, str]) -> str:
        return _split_repo_url(env.get(self.url_var, ""))[0]

    def repo_name(self, env: Mapping[str, str]) -> str:
        return _split_repo_url(env.get(self.url_var, ""))[1]


def builtin_platforms() -> Tuple[CIPlatform, ...]:
    """
    Plataformas com detecção automática, na ordem de sondagem.

    teamcity, jenkins e cloud-build são nomes de CI aceitos pela validação,
    mas não possuem implementação: não são detectados e não produzem
    descriptor.
    """
    return (
        EnvVarPlatform(
            name=names.CIRCLECI,
            marker="CIRCLECI",
            owner_var="CIRCLE_PROJECT_USERNAME",
            name_var="CIRCLE_PROJECT_REPONAME",
        ),
        CodeBuildPlatform(),
        EnvVarPlatform(
            name=names.DRONE,
            marker="DRONE",
            owner_var="DRONE_REPO_OWNER",
            name_var="DRONE_REPO_NAME",
        ),
        SlugPlatform(
            name=names.GITHUB_ACTIONS,
            marker="GITHUB_ACTIONS",
            slug_var="GITHUB_REPOSITORY",
        ),
        EnvVarPlatform(
            name=names.GITLAB_CI,
            marker="GITLAB_CI",
            owner_var="CI_PROJECT_NAMESPACE",
            name_var="CI_PROJECT_NAME",
        ),
        SlugPlatform(
            name=names.TRAVIS,
            marker="TRAVIS",
            slug_var="TRAVIS_REPO_SLUG",
        ),
    )
