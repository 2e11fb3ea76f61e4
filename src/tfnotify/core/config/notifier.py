# src/tfnotify/core/config/notifier.py
"""
Seleção do notifier ativo.

A política de prioridade é um único artefato declarativo
(`NOTIFIER_PRIORITY`): pares ordenados (tipo, predicado de presença),
avaliados em sequência fixa. O primeiro tipo cuja seção está definida
é o notifier ativo.

Invariantes:
    - A seleção é função pura do estado atual do `Config`
    - Ordem fixa: github, gitlab, slack, typetalk
    - Nenhuma seção definida → `NotifierKind.NONE`

Limites explícitos:
    - Não valida completude das seções (ver `validator`)
    - Várias seções definidas não são erro: a prioridade decide
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional, Tuple, Union

from .model import (
    Config,
    GithubNotifier,
    GitlabNotifier,
    SlackNotifier,
    TypetalkNotifier,
)


NotifierSection = Union[GithubNotifier, GitlabNotifier, SlackNotifier, TypetalkNotifier]


class NotifierKind(str, Enum):
    """
    Discriminante explícito do notifier ativo.

    Os valores textuais são o contrato com a CLI e os clientes de
    notificação (`"github"`, `"gitlab"`, `"slack"`, `"typetalk"`, `""`).
    """

    GITHUB = "github"
    GITLAB = "gitlab"
    SLACK = "slack"
    TYPETALK = "typetalk"
    NONE = ""


@dataclass(frozen=True)
class ActiveNotifier:
    """Notifier selecionado; `section` é None se e somente se `kind` é NONE."""

    kind: NotifierKind
    section: Optional[NotifierSection] = None

    @property
    def is_none(self) -> bool:
        return self.kind is NotifierKind.NONE


_SectionGetter = Callable[[Config], NotifierSection]

NOTIFIER_PRIORITY: Tuple[Tuple[NotifierKind, _SectionGetter], ...] = (
    (NotifierKind.GITHUB, lambda cfg: cfg.notifier.github),
    (NotifierKind.GITLAB, lambda cfg: cfg.notifier.gitlab),
    (NotifierKind.SLACK, lambda cfg: cfg.notifier.slack),
    (NotifierKind.TYPETALK, lambda cfg: cfg.notifier.typetalk),
)


def defined_notifiers(config: Config) -> List[NotifierKind]:
    """Todos os tipos com seção definida, em ordem de prioridade."""
    return [kind for kind, section in NOTIFIER_PRIORITY if section(config).is_defined()]


def select_notifier(config: Config) -> ActiveNotifier:
    for kind, section in NOTIFIER_PRIORITY:
        value = section(config)
        if value.is_defined():
            return ActiveNotifier(kind=kind, section=value)
    return ActiveNotifier(kind=NotifierKind.NONE)


def get_notifier_type(config: Config) -> str:
    """Retorna `"github"`, `"gitlab"`, `"slack"`, `"typetalk"` ou `""`."""
    return select_notifier(config).kind.value
