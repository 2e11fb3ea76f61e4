# tests/core/config/test_finder.py
"""
Testes da localização do arquivo de configuração (find_config).

Os testes asseguram que:
- caminho explícito existente é retornado diretamente
- caminho explícito inexistente gera `ConfigNotFoundError`
- a busca respeita a ordem dos nomes padrão
- a busca sobe pelos diretórios ancestrais
"""

from pathlib import Path

import pytest

from tfnotify.core.config.errors import ConfigNotFoundError
from tfnotify.core.config.finder import DEFAULT_CONFIG_NAMES, find_config


def test_explicit_path_is_returned_when_it_exists(tmp_path: Path):
    explicit = tmp_path / "explicit.yaml"
    explicit.write_text("ci: circleci\n", encoding="utf-8")
    # nomes padrão presentes não interferem no caminho explícito
    (tmp_path / "tfnotify.yaml").write_text("ci: drone\n", encoding="utf-8")

    assert find_config(str(explicit), cwd=tmp_path) == explicit


def test_explicit_path_missing_raises(tmp_path: Path):
    (tmp_path / "tfnotify.yaml").write_text("ci: drone\n", encoding="utf-8")

    with pytest.raises(ConfigNotFoundError) as exc:
        find_config(str(tmp_path / "nope.yaml"), cwd=tmp_path)
    assert str(exc.value) == "config for tfnotify is not found at all"


def test_no_default_file_raises(tmp_path: Path, no_ancestor_config):
    with pytest.raises(ConfigNotFoundError) as exc:
        find_config("", cwd=tmp_path)
    assert str(tmp_path / "tfnotify.yaml") in exc.value.searched


def test_default_names_precedence(tmp_path: Path):
    for name in (".tfnotify.yml", "tfnotify.yml", ".tfnotify.yaml"):
        (tmp_path / name).write_text("ci: drone\n", encoding="utf-8")

    assert find_config("", cwd=tmp_path) == tmp_path / "tfnotify.yml"


def test_default_names_order_is_fixed():
    assert tuple(DEFAULT_CONFIG_NAMES) == (
        "tfnotify.yaml",
        "tfnotify.yml",
        ".tfnotify.yaml",
        ".tfnotify.yml",
    )


def test_search_walks_up_to_ancestors(tmp_path: Path):
    (tmp_path / ".tfnotify.yaml").write_text("ci: drone\n", encoding="utf-8")
    nested = tmp_path / "envs" / "prod"
    nested.mkdir(parents=True)

    assert find_config("", cwd=nested) == tmp_path / ".tfnotify.yaml"


def test_nearest_directory_wins(tmp_path: Path):
    (tmp_path / "tfnotify.yaml").write_text("ci: drone\n", encoding="utf-8")
    nested = tmp_path / "envs"
    nested.mkdir()
    (nested / ".tfnotify.yml").write_text("ci: drone\n", encoding="utf-8")

    assert find_config("", cwd=nested) == nested / ".tfnotify.yml"


def test_uses_working_directory_by_default(tmp_path: Path, monkeypatch):
    (tmp_path / "tfnotify.yaml").write_text("ci: drone\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)

    assert find_config().resolve() == (tmp_path / "tfnotify.yaml").resolve()


def test_directory_with_default_name_is_skipped(tmp_path: Path):
    (tmp_path / ".tfnotify.yml").write_text("ci: drone\n", encoding="utf-8")
    nested = tmp_path / "envs"
    nested.mkdir()
    # diretório com nome de arquivo padrão não é candidato
    (nested / "tfnotify.yaml").mkdir()

    assert find_config("", cwd=nested) == tmp_path / ".tfnotify.yml"


def test_explicit_directory_is_not_a_config(tmp_path: Path):
    with pytest.raises(ConfigNotFoundError):
        find_config(str(tmp_path), cwd=tmp_path)
