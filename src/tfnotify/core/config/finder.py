"""Localização do arquivo de configuração do tfnotify.

Com caminho explícito, apenas a existência de um arquivo regular é verificada. Sem caminho, o
diretório de trabalho e cada um de seus ancestrais são inspecionados, na
ordem, pelos nomes padrão.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Sequence, Union

from ..context import ResolutionContext
from .errors import ConfigNotFoundError


DEFAULT_CONFIG_NAMES: Sequence[str] = (
    "tfnotify.yaml",
    "tfnotify.yml",
    ".tfnotify.yaml",
    ".tfnotify.yml",
)


def find_config(
    explicit_path: Union[str, Path, None] = "",
    *,
    cwd: Union[str, Path, None] = None,
    names: Sequence[str] = DEFAULT_CONFIG_NAMES,
    ctx: Optional[ResolutionContext] = None,
) -> Path:
    """Retorna o caminho da configuração a ser carregada.

    Args:
        explicit_path: caminho informado pelo usuário; vazio aciona a busca.
        cwd: diretório inicial da busca (padrão: diretório de trabalho).
        names: nomes candidatos, em ordem de precedência por diretório.

    Raises:
        ConfigNotFoundError: se o caminho explícito não existir ou se
            nenhum nome padrão for encontrado.
    """
    if explicit_path:
        p = Path(explicit_path)
        if p.is_file():
            if ctx is not None:
                ctx.log(stage="find", level="info", message="explicit config found", path=str(p))
            return p
        raise ConfigNotFoundError(searched=[str(p)])

    start = Path(cwd).absolute() if cwd is not None else Path.cwd()
    searched: List[str] = []
    for directory in (start, *start.parents):
        for name in names:
            candidate = directory / name
            searched.append(str(candidate))
            if candidate.is_file():
                if ctx is not None:
                    ctx.log(stage="find", level="info", message="config found", path=str(candidate))
                return candidate

    raise ConfigNotFoundError(searched=searched)
