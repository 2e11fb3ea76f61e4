# src/tfnotify/core/ci/resolver.py
"""
Resolução da plataforma de CI a partir de um nome ou do ambiente.

Política de resolução:
    - Nome explícito (não vazio) → busca direta no registry
    - Nome vazio → sondagem do ambiente, primeira plataforma que casar
    - Nome explícito sempre tem precedência sobre a detecção

Invariantes:
    - "Nenhuma plataforma" é sempre `None`, nunca um descriptor vazio
    - O ambiente é lido, nunca modificado
"""

from __future__ import annotations

import os
from typing import Mapping, Optional

from .platforms import PlatformDescriptor, describe
from .registry import PlatformRegistry, default_registry


class CIEnvironmentResolver:
    """Produz `PlatformDescriptor` a partir do registry e de um ambiente injetado."""

    def __init__(
        self,
        registry: Optional[PlatformRegistry] = None,
        env: Optional[Mapping[str, str]] = None,
    ) -> None:
        self.registry = registry if registry is not None else default_registry()
        self.env: Mapping[str, str] = env if env is not None else os.environ

    def by_name(self, name: str) -> Optional[PlatformDescriptor]:
        platform = self.registry.get(name)
        if platform is None:
            return None
        return describe(platform, self.env)

    def detect(self) -> Optional[PlatformDescriptor]:
        for platform in self.registry.list():
            if platform.matches(self.env):
                return describe(platform, self.env)
        return None

    def resolve(self, ci_name: str) -> Optional[PlatformDescriptor]:
        if ci_name:
            return self.by_name(ci_name)
        return self.detect()
