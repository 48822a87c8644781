"""Shared test helpers."""

from pathlib import Path

import pytest


DRUPAL_11_COMPOSE = """# itk-version: 3.2.1
networks:
  frontend:
    external: true
  app:
    driver: bridge
    internal: false

services:
  mariadb:
    image: itkdev/mariadb:latest
    networks:
      - app

  phpfpm:
    image: itkdev/php8.3-fpm:latest
    environment:
      - PHP_MEMORY_LIMIT=256M

  nginx:
    image: nginxinc/nginx-unprivileged:alpine
    environment:
      NGINX_FPM_SERVICE: ${COMPOSE_PROJECT_NAME}-phpfpm-1:9000
      NGINX_WEB_ROOT: /app/web
      NGINX_PORT: 8080

  memcached:
    image: memcached:alpine

  drush:
    image: itkdev/drush6:latest
"""

SYMFONY_6_COMPOSE = """# itk-version: 3.1.0
services:
  phpfpm:
    image: itkdev/php8.2-fpm:latest

  nginx:
    environment:
      NGINX_WEB_ROOT: /app/public
"""


def write_file(root: Path, relative_path: str, content: str = "") -> Path:
    """Create a file (and its parent directories) below root."""
    path = root / relative_path
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


@pytest.fixture
def templates_dir(tmp_path):
    """A templates root with two complete templates and one without a compose file."""
    root = tmp_path / "templates"

    write_file(root, "drupal-11/docker-compose.yml", DRUPAL_11_COMPOSE)
    write_file(root, "drupal-11/docker-compose.server.yml", "# itk-version: 3.2.1\nservices:\n")
    write_file(root, "drupal-11/docker-compose.dev.yml", "# itk-version: 3.2.1\nservices:\n")
    write_file(root, "drupal-11/.docker/nginx.conf", "worker_processes auto;\n")
    write_file(root, "drupal-11/.docker/templates/default.conf.template", "server {}\n")

    write_file(root, "symfony-6/docker-compose.yml", SYMFONY_6_COMPOSE)
    write_file(root, "symfony-6/.docker/nginx.conf", "worker_processes auto;\n")

    (root / "no-compose").mkdir()
    write_file(root, "no-compose/README.md", "Not a template\n")

    write_file(root, "README.md", "Templates live in subdirectories\n")
    return root


@pytest.fixture
def project_dir(tmp_path):
    """An empty project directory."""
    path = tmp_path / "project"
    path.mkdir()
    return path
