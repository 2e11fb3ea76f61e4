# src/tfnotify/core/config/complement.py
"""
Complemento automático da configuração a partir da plataforma de CI.

Este módulo preenche coordenadas vazias do repositório GitHub com valores
derivados da plataforma de CI (nome explícito em `ci`, ou detecção
automática pelo ambiente quando `ci` está vazio).

Política de complemento:
    - `ci` vazio + plataforma detectada → `ci` recebe o nome canônico detectado
    - Seção GitHub definida + descriptor presente → owner/name vazios preenchidos
    - Valores explícitos nunca são sobrescritos
    - Sem descriptor → configuração retornada sem alterações

Invariantes:
    - Função pura: o `Config` de entrada nunca é mutado
    - Idempotente: complement(complement(c)) == complement(c)

Limites explícitos:
    - Não valida a configuração
    - Não complementa GitLab, Slack ou Typetalk
"""

from __future__ import annotations

from dataclasses import replace
from typing import Optional

from ..ci.platforms import PlatformDescriptor
from ..ci.resolver import CIEnvironmentResolver
from ..context import ResolutionContext
from .model import Config


def fill_github_repository(config: Config, descriptor: PlatformDescriptor) -> Config:
    """Preenche owner/name vazios da seção GitHub com os valores do descriptor."""
    github = config.notifier.github
    repository = github.repository.fill(descriptor.owner, descriptor.name)
    if repository == github.repository:
        return config
    return replace(
        config,
        notifier=replace(config.notifier, github=replace(github, repository=repository)),
    )


def complement(
    config: Config,
    *,
    resolver: Optional[CIEnvironmentResolver] = None,
    ctx: Optional[ResolutionContext] = None,
) -> Config:
    """
    Retorna uma cópia de `config` com campos vazios preenchidos pela CI.

    Args:
        config: Configuração carregada.
        resolver: Resolver de plataformas (padrão: registry embutido + `os.environ`).
        ctx: Contexto opcional para registro de eventos.

    Returns:
        Config: Nova configuração complementada (ou igual à entrada).
    """
    resolver = resolver if resolver is not None else CIEnvironmentResolver()
    descriptor = resolver.resolve(config.ci)

    if descriptor is None:
        if ctx is not None:
            ctx.log(stage="complement", level="info", message="no CI platform resolved", ci=config.ci)
        return config

    result = config
    if not result.ci:
        result = replace(result, ci=descriptor.ci)

    if result.notifier.github.is_defined():
        result = fill_github_repository(result, descriptor)

    if ctx is not None:
        ctx.log(
            stage="complement",
            level="info",
            message="config complemented",
            ci=result.ci,
            platform=descriptor.ci,
        )
    return result
