# tests/core/ci/test_names.py
"""
Testes do catálogo de identificadores de CI.

Invariantes:
    - Comparação case-insensitive
    - Sinônimos convergem para um único nome canônico
    - Nome vazio nunca é suportado
"""

import pytest

from tfnotify.core.ci.names import (
    CIRCLECI,
    CLOUD_BUILD,
    GITLAB_CI,
    TRAVIS,
    is_supported_ci,
    normalize_ci_name,
    supported_ci_names,
)


@pytest.mark.parametrize(
    "raw, canonical",
    [
        ("circleci", CIRCLECI),
        ("CircleCI", CIRCLECI),
        ("circle-ci", CIRCLECI),
        ("GitLabCI", GITLAB_CI),
        ("gitlab-ci", GITLAB_CI),
        ("travis", TRAVIS),
        ("TravisCI", TRAVIS),
        ("travis-ci", TRAVIS),
        ("cloudbuild", CLOUD_BUILD),
        ("Cloud-Build", CLOUD_BUILD),
    ],
)
def test_synonyms_normalize_to_canonical(raw, canonical):
    assert normalize_ci_name(raw) == canonical


@pytest.mark.parametrize("raw", ["", None, "bitbucket", "circle ci", " circleci"])
def test_unknown_names_are_not_supported(raw):
    assert normalize_ci_name(raw) is None
    assert not is_supported_ci(raw)


def test_supported_names_are_sorted_and_complete():
    names = supported_ci_names()

    assert names == sorted(names)
    assert {"circleci", "teamcity", "jenkins", "github-actions", "codebuild", "drone"} <= set(names)
