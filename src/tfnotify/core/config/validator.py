# src/tfnotify/core/config/validator.py
"""
Validação de completude da configuração do tfnotify.

Este módulo implementa a validação canônica executada uma única vez por
invocação, após o complemento automático.

Ordem de validação:
    1. Suporte à CI (`ci` vazio ou não reconhecido é erro)
    2. GitHub definido → novo preenchimento pela CI nomeada, depois
       owner e name obrigatórios
    3. GitLab definido → owner e name obrigatórios, sem preenchimento
    4. Slack definido → `channel` obrigatório
    5. Typetalk definido → `topic_id` obrigatório
    6. Ao menos um notifier definido

Decisões arquiteturais:
    - O preenchimento do passo 2 é independente de `complement` ter rodado
    - GitLab não possui caminho de detecção automática
    - Mais de um notifier definido não é erro: a prioridade decide e um
      warning é registrado no contexto

Invariantes:
    - Função pura: retorna o `Config` validado, nunca muta a entrada
    - A primeira violação encontrada interrompe a validação

Limites explícitos:
    - Não lê arquivos
    - Não valida templates do terraform
"""

from __future__ import annotations

from typing import Optional

from ..ci.names import is_supported_ci
from ..ci.resolver import CIEnvironmentResolver
from ..context import ResolutionContext
from .complement import fill_github_repository
from .errors import (
    MissingCIError,
    MissingFieldError,
    MissingNotifierError,
    UnsupportedCIError,
)
from .model import Config, Repository
from .notifier import defined_notifiers, select_notifier


def _require_repository(repository: Repository, prefix: str) -> None:
    if not repository.owner:
        raise MissingFieldError(f"{prefix}.repository.owner")
    if not repository.name:
        raise MissingFieldError(f"{prefix}.repository.name")


def validate(
    config: Config,
    *,
    resolver: Optional[CIEnvironmentResolver] = None,
    ctx: Optional[ResolutionContext] = None,
) -> Config:
    """
    Valida a configuração e retorna a versão com o preenchimento final.

    Args:
        config: Configuração carregada (idealmente já complementada).
        resolver: Resolver de plataformas (padrão: registry embutido + `os.environ`).
        ctx: Contexto opcional para eventos e warnings.

    Returns:
        Config: Configuração validada, pronta para os colaboradores externos.

    Raises:
        MissingCIError: `ci` vazio.
        UnsupportedCIError: `ci` não reconhecido.
        MissingFieldError: campo obrigatório de seção definida vazio.
        MissingNotifierError: nenhuma seção de notifier definida.
    """
    if not config.ci:
        raise MissingCIError()
    if not is_supported_ci(config.ci):
        raise UnsupportedCIError(config.ci)

    result = config
    notifier = result.notifier

    if notifier.github.is_defined():
        resolver = resolver if resolver is not None else CIEnvironmentResolver()
        descriptor = resolver.by_name(result.ci)
        if descriptor is not None:
            result = fill_github_repository(result, descriptor)
        _require_repository(result.notifier.github.repository, "github")

    if notifier.gitlab.is_defined():
        _require_repository(notifier.gitlab.repository, "gitlab")

    if notifier.slack.is_defined() and not notifier.slack.channel:
        raise MissingFieldError("slack.channel")

    if notifier.typetalk.is_defined() and not notifier.typetalk.topic_id:
        raise MissingFieldError("typetalk.topic_id")

    active = select_notifier(result)
    if active.is_none:
        raise MissingNotifierError()

    defined = defined_notifiers(result)
    if len(defined) > 1 and ctx is not None:
        ctx.add_warning(
            stage="validate",
            message=(
                "multiple notifiers configured ("
                + ", ".join(k.value for k in defined)
                + f"); using {active.kind.value}"
            ),
        )

    if ctx is not None:
        ctx.log(
            stage="validate",
            level="info",
            message="config validated",
            ci=result.ci,
            notifier=active.kind.value,
        )
    return result
