# src/tfnotify/core/ci/registry.py
"""
Registro de plataformas de CI.

Este módulo define o `PlatformRegistry`, responsável por registrar
implementações de plataformas de CI e expor a ordem de sondagem usada na
detecção automática.

Decisões arquiteturais:
    - O nome registrado é sempre o nome canônico (sinônimos normalizados)
    - A ordem de registro é a ordem de detecção
    - Duplicidade é tratada como erro fatal de montagem

Invariantes:
    - Cada plataforma registrada possui nome canônico único
    - `list()` reflete exatamente a ordem de registro

Limites explícitos:
    - Não lê variáveis de ambiente
    - Não decide precedência entre nome explícito e detecção
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional

from .names import normalize_ci_name
from .platforms import CIPlatform, builtin_platforms


class DuplicatePlatformError(ValueError):
    """
    Exceção levantada quando duas plataformas usam o mesmo nome canônico.

    A duplicidade é detectada no registro, antes de qualquer detecção,
    e nenhum registro parcial é mantido para a plataforma rejeitada.
    """


@dataclass
class PlatformRegistry:
    """
    Registro canônico de plataformas de CI.

    Decisões arquiteturais:
        - A ordem de inserção é preservada separadamente
        - A estrutura interna não é exposta diretamente
        - Nomes fora do conjunto suportado são rejeitados

    Limites explícitos:
        - Não executa detecção (ver `CIEnvironmentResolver`)
    """

    _platforms: Dict[str, CIPlatform] = field(default_factory=dict, init=False, repr=False)
    _order: List[str] = field(default_factory=list, init=False, repr=False)

    def add(self, platform: CIPlatform) -> None:
        raw_name = getattr(platform, "name", None)
        if not isinstance(raw_name, str) or not raw_name.strip():
            raise ValueError("platform.name must be a non-empty string")
        name = normalize_ci_name(raw_name)
        if name is None:
            raise ValueError(f"platform.name is not a supported CI: {raw_name}")
        if name in self._platforms:
            raise DuplicatePlatformError(f"Duplicate platform: {name}")
        self._platforms[name] = platform
        self._order.append(name)

    def get(self, name: str) -> Optional[CIPlatform]:
        canonical = normalize_ci_name(name)
        if canonical is None:
            return None
        return self._platforms.get(canonical)

    def list(self) -> List[CIPlatform]:
        return [self._platforms[n] for n in self._order]

    @classmethod
    def from_platforms(cls, platforms: Iterable[CIPlatform]) -> "PlatformRegistry":
        registry = cls()
        for platform in platforms:
            registry.add(platform)
        return registry


def default_registry() -> PlatformRegistry:
    return PlatformRegistry.from_platforms(builtin_platforms())
