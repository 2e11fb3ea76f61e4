# src/tfnotify/core/config/loader.py
"""
Loader canônico de configuração do tfnotify.

Este módulo é responsável por ler o arquivo de configuração do disco,
parseá-lo como YAML e materializá-lo no modelo `Config`.

Responsabilidades do módulo:
    - Verificar a existência do arquivo informado
    - Ler o conteúdo completo do arquivo (UTF-8)
    - Parsear YAML e validar o tipo raiz
    - Registrar o caminho de origem para diagnóstico

Princípios fundamentais:
    - Erros estruturais são tratados como falhas fatais
    - Chaves desconhecidas são ignoradas, não são erro
    - Arquivos vazios produzem uma configuração vazia
    - Escalares são lidos como texto literal (`0123`, `no`, `0x1F` preservados);
      apenas `null` e tags explícitas são resolvidos pelo YAML

Limites explícitos:
    - Não procura o arquivo (ver `finder`)
    - Não complementa nem valida campos (ver `complement` e `validator`)
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

import yaml  # PyYAML

from ..context import ResolutionContext
from .errors import (
    ConfigFileNotFoundError,
    ConfigParseError,
    InvalidConfigRootTypeError,
)
from .model import Config


_LITERAL_TAGS = {
    "tag:yaml.org,2002:bool",
    "tag:yaml.org,2002:int",
    "tag:yaml.org,2002:float",
    "tag:yaml.org,2002:timestamp",
}


class ConfigYAMLLoader(yaml.SafeLoader):
    """
    `SafeLoader` sem resolução implícita de bool, int, float e timestamp.

    Todos os campos do schema são texto, exceto `use_raw_output`, que o
    modelo converte a partir do literal YAML.
    """


ConfigYAMLLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag not in _LITERAL_TAGS]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


def load_file(
    path: Union[str, Path],
    *,
    ctx: Optional[ResolutionContext] = None,
) -> Config:
    """
    Carrega um arquivo de configuração e o materializa como `Config`.

    Decisões arquiteturais:
        - O arquivo deve existir no momento do carregamento
        - O conteúdo raiz deve ser um dicionário (`dict`)
        - YAML vazio (`None`) é interpretado como dicionário vazio
        - Falhas do parser são encapsuladas em `ConfigParseError`

    Invariantes:
        - O `Config` retornado sempre carrega `source_path`
        - Nenhuma configuração parcial é retornada em caso de erro

    Args:
        path: Caminho para o arquivo de configuração.
        ctx: Contexto opcional para registro de eventos.

    Returns:
        Config: Configuração carregada, ainda não complementada.

    Raises:
        ConfigFileNotFoundError: Se o arquivo não existir ou não for um arquivo regular.
        InvalidConfigRootTypeError: Se o conteúdo raiz não for um mapa.
        ConfigParseError: Se o arquivo não puder ser lido (I/O, UTF-8 inválido),
            se o YAML for inválido ou se uma seção tiver forma inválida.
    """
    source = str(path)
    p = Path(path)
    if not p.is_file():
        raise ConfigFileNotFoundError(source)

    try:
        raw = p.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise ConfigParseError(f"config is not valid UTF-8: {e}", path=source) from e
    except OSError as e:
        raise ConfigParseError(f"cannot read config: {e}", path=source) from e

    try:
        data = yaml.load(raw, Loader=ConfigYAMLLoader)
    except yaml.YAMLError as e:
        raise ConfigParseError(str(e) or "failed to parse config", path=source) from e

    if data is None:
        data = {}

    if not isinstance(data, dict):
        raise InvalidConfigRootTypeError(
            f"config root must be a mapping, got {type(data).__name__}", path=source
        )

    cfg = Config.from_dict(data, source_path=source)

    if ctx is not None:
        ctx.log(stage="load", level="info", message="config loaded", path=source, ci=cfg.ci)
    return cfg
