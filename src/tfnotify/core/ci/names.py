"""Identificadores de CI suportados e seus sinônimos.

A comparação é case-insensitive. Cada sinônimo é normalizado para um nome
canônico, usado tanto na validação quanto na busca de plataformas.
"""

from __future__ import annotations

from typing import Dict, List, Optional


CIRCLECI = "circleci"
GITLAB_CI = "gitlab-ci"
TRAVIS = "travis"
CODEBUILD = "codebuild"
TEAMCITY = "teamcity"
DRONE = "drone"
JENKINS = "jenkins"
GITHUB_ACTIONS = "github-actions"
CLOUD_BUILD = "cloud-build"

_SYNONYMS: Dict[str, str] = {
    "circleci": CIRCLECI,
    "circle-ci": CIRCLECI,
    "gitlabci": GITLAB_CI,
    "gitlab-ci": GITLAB_CI,
    "travis": TRAVIS,
    "travisci": TRAVIS,
    "travis-ci": TRAVIS,
    "codebuild": CODEBUILD,
    "teamcity": TEAMCITY,
    "drone": DRONE,
    "jenkins": JENKINS,
    "github-actions": GITHUB_ACTIONS,
    "cloud-build": CLOUD_BUILD,
    "cloudbuild": CLOUD_BUILD,
}


def normalize_ci_name(name: Optional[str]) -> Optional[str]:
    """Retorna o nome canônico de `name`, ou None se não for suportado."""
    if not name:
        return None
    return _SYNONYMS.get(name.lower())


def is_supported_ci(name: Optional[str]) -> bool:
    return normalize_ci_name(name) is not None


def supported_ci_names() -> List[str]:
    """Todos os identificadores aceitos (incluindo sinônimos), em ordem estável."""
    return sorted(_SYNONYMS)
