"""Pipeline completo de resolução: busca → carga → complemento → validação.

O resultado (`ResolvedConfig`) é o contrato entregue à CLI e aos clientes
de notificação: a configuração validada e o tipo do notifier ativo.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional, Union

from ..ci.registry import PlatformRegistry
from ..ci.resolver import CIEnvironmentResolver
from ..context import ResolutionContext
from .complement import complement
from .finder import find_config
from .loader import load_file
from .model import Config
from .notifier import NotifierKind, get_notifier_type
from .validator import validate


@dataclass(frozen=True)
class ResolvedConfig:
    config: Config
    notifier: NotifierKind


def resolve_config(
    explicit_path: Union[str, Path, None] = "",
    *,
    cwd: Union[str, Path, None] = None,
    env: Optional[Mapping[str, str]] = None,
    registry: Optional[PlatformRegistry] = None,
    variables: Optional[Mapping[str, str]] = None,
    ctx: Optional[ResolutionContext] = None,
) -> ResolvedConfig:
    """Resolve a configuração do tfnotify de ponta a ponta.

    Qualquer erro de configuração é propagado sem alteração; nenhuma
    configuração parcial é retornada.
    """
    resolver = CIEnvironmentResolver(registry=registry, env=env)

    path = find_config(explicit_path, cwd=cwd, ctx=ctx)
    cfg = load_file(path, ctx=ctx)
    if variables:
        cfg = cfg.with_vars(variables)
    cfg = complement(cfg, resolver=resolver, ctx=ctx)
    cfg = validate(cfg, resolver=resolver, ctx=ctx)

    return ResolvedConfig(config=cfg, notifier=NotifierKind(get_notifier_type(cfg)))
