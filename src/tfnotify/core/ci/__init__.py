"""
Camada de plataformas de CI do tfnotify.

Responsabilidades do pacote:
    - Catálogo de identificadores de CI suportados (com sinônimos)
    - Implementações de plataformas e seus marcadores de ambiente
    - Registro ordenado de plataformas
    - Resolução explícita (por nome) ou automática (por ambiente)

Limites explícitos:
    - Não altera configuração
    - Não realiza I/O além da leitura do ambiente injetado
"""

from .names import is_supported_ci, normalize_ci_name, supported_ci_names
from .platforms import PlatformDescriptor
from .registry import DuplicatePlatformError, PlatformRegistry, default_registry
from .resolver import CIEnvironmentResolver

__all__ = [
    "CIEnvironmentResolver",
    "DuplicatePlatformError",
    "PlatformDescriptor",
    "PlatformRegistry",
    "default_registry",
    "is_supported_ci",
    "normalize_ci_name",
    "supported_ci_names",
]
