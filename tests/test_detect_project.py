"""Tests for detect_project."""

import json

import pytest
from pydantic import ValidationError

from itkdev_mcp.errors import InvalidInputError, NotFoundError
from itkdev_mcp.schemas import ProjectProfile
from itkdev_mcp.tools.project_tools import detect_project

from conftest import DRUPAL_11_COMPOSE, write_file


def test_detect_project_requires_path():
    with pytest.raises(InvalidInputError, match="Project path is required"):
        detect_project("")


def test_detect_project_missing_path(tmp_path):
    missing = tmp_path / "missing"
    with pytest.raises(NotFoundError, match="Path does not exist"):
        detect_project(str(missing))


def test_detect_project_empty_directory(project_dir):
    result = detect_project(str(project_dir))

    assert result == {
        "path": str(project_dir),
        "isItkDevProject": False,
        "hasDockerCompose": False,
        "hasEnv": False,
        "template": None,
        "itkVersion": None,
        "projectName": None,
        "domain": None,
        "framework": None,
        "frameworkVersion": None,
        "phpVersion": None,
        "webRoot": None,
        "services": [],
        "hasTaskfile": False,
        "hasGitHubActions": False,
    }


def test_detect_project_reads_compose_file(project_dir):
    write_file(project_dir, "docker-compose.yml", DRUPAL_11_COMPOSE)

    result = detect_project(str(project_dir))

    assert result["hasDockerCompose"] is True
    assert result["isItkDevProject"] is True
    assert result["itkVersion"] == "3.2.1"
    assert result["phpVersion"] == "8.3"
    assert result["webRoot"] == "/app/web"
    assert result["services"] == ["frontend", "app", "mariadb", "phpfpm", "nginx", "memcached", "drush"]


def test_detect_project_without_version_comment_is_not_itkdev(project_dir):
    write_file(project_dir, "docker-compose.yml",
               "services:\n  phpfpm:\n    image: itkdev/php8.1-fpm:latest\n")
    write_file(project_dir, ".env", "ITKDEV_TEMPLATE=drupal-11\n")

    result = detect_project(str(project_dir))

    assert result["isItkDevProject"] is False
    assert result["itkVersion"] is None
    assert result["template"] == "drupal-11"
    # Extracted independently of the version comment
    assert result["phpVersion"] == "8.1"


def test_detect_project_reads_env_file(project_dir):
    write_file(project_dir, ".env",
               "COMPOSE_PROJECT_NAME=example\n"
               "COMPOSE_DOMAIN=example.local.itkdev.dk\n"
               "ITKDEV_TEMPLATE=drupal-10\n")

    result = detect_project(str(project_dir))

    assert result["hasEnv"] is True
    assert result["projectName"] == "example"
    assert result["domain"] == "example.local.itkdev.dk"
    assert result["template"] == "drupal-10"


def test_detect_project_env_keys_are_independent(project_dir):
    write_file(project_dir, ".env", "COMPOSE_DOMAIN=example.dk\n")

    result = detect_project(str(project_dir))

    assert result["domain"] == "example.dk"
    assert result["projectName"] is None
    assert result["template"] is None


def test_detect_project_template_never_comes_from_compose(project_dir):
    write_file(project_dir, "docker-compose.yml", "# itk-version: 3.0\n# ITKDEV_TEMPLATE=drupal-11\n")

    assert detect_project(str(project_dir))["template"] is None


def test_detect_project_drupal_with_version(project_dir):
    write_file(project_dir, "web/core/lib/Drupal.php",
               "<?php\nclass Drupal {\n  const VERSION = '10.2.0';\n}\n")

    result = detect_project(str(project_dir))

    assert result["framework"] == "drupal"
    assert result["frameworkVersion"] == "10.2.0"


def test_detect_project_legacy_drupal(project_dir):
    write_file(project_dir, "core/lib/Drupal.php", "<?php\nconst VERSION = '10.2.0';\n")

    result = detect_project(str(project_dir))

    assert result["framework"] == "drupal"
    assert result["frameworkVersion"] == "7.x"


def test_detect_project_symfony(project_dir):
    write_file(project_dir, "bin/console", "#!/usr/bin/env php\n")
    write_file(project_dir, "composer.json",
               json.dumps({"require": {"symfony/framework-bundle": "6.4.*"}}))

    result = detect_project(str(project_dir))

    assert result["framework"] == "symfony"
    assert result["frameworkVersion"] == "6.4.*"


def test_detect_project_markers(project_dir):
    write_file(project_dir, "Taskfile.yml", "version: '3'\n")
    (project_dir / ".github" / "workflows").mkdir(parents=True)

    result = detect_project(str(project_dir))

    assert result["hasTaskfile"] is True
    assert result["hasGitHubActions"] is True


def test_detect_project_is_idempotent(project_dir):
    write_file(project_dir, "docker-compose.yml", DRUPAL_11_COMPOSE)
    write_file(project_dir, ".env", "ITKDEV_TEMPLATE=drupal-11\n")

    first = json.dumps(detect_project(str(project_dir)), indent=2)
    second = json.dumps(detect_project(str(project_dir)), indent=2)

    assert first == second


def test_project_profile_is_immutable():
    profile = ProjectProfile(path="/srv/example", has_env=True, template="drupal-11")

    with pytest.raises(ValidationError):
        profile.template = "symfony-6"

    assert profile.model_dump(by_alias=True)["template"] == "drupal-11"
