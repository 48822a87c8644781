"""
Text patterns for ITK Dev configuration files

Each extractor documents the pattern it applies. "No match" is an ordinary
outcome and is returned as None (or an empty list), never raised.

docker-compose.yml:
    itkdev/php<version>-fpm          -> PHP runtime version ("8.3")
    NGINX_WEB_ROOT: /app<path>       -> web root ("/app/web")
    # itk-version: <dotted-number>   -> template version tag ("3.1.0")
    top-level "  <name>:" lines      -> service names

.env:
    ITKDEV_TEMPLATE=<name>
    COMPOSE_PROJECT_NAME=<name>
    COMPOSE_DOMAIN=<domain>

web/core/lib/Drupal.php:
    VERSION = '<dotted-number>'
"""

import re
from typing import Optional

PHP_VERSION_PATTERN = re.compile(r"itkdev/php([\d.]+)-fpm")
WEB_ROOT_PATTERN = re.compile(r"NGINX_WEB_ROOT:\s*(/app\S*)")
ITK_VERSION_PATTERN = re.compile(r"# itk-version:\s*([\d.]+)")
SERVICE_PATTERN = re.compile(r"^ {2}(\w+):[ \t]*$", re.MULTILINE)
DRUPAL_VERSION_PATTERN = re.compile(r"VERSION\s*=\s*'([\d.]+)'")

# Two-space keys under these top-level sections are not services
NON_SERVICE_KEYS = frozenset({"networks", "volumes"})

TEMPLATE_ENV_KEY = "ITKDEV_TEMPLATE"
PROJECT_NAME_ENV_KEY = "COMPOSE_PROJECT_NAME"
DOMAIN_ENV_KEY = "COMPOSE_DOMAIN"

NATURAL_SORT_WIDTH = 10
_DIGITS = re.compile(r"\d+")


def _first_group(pattern: re.Pattern, content: str) -> Optional[str]:
    match = pattern.search(content)
    return match.group(1) if match else None


def extract_php_version(content: str) -> Optional[str]:
    """PHP version from an itkdev/php<version>-fpm image reference"""
    return _first_group(PHP_VERSION_PATTERN, content)


def extract_web_root(content: str) -> Optional[str]:
    """Web root from an NGINX_WEB_ROOT: /app... setting"""
    return _first_group(WEB_ROOT_PATTERN, content)


def extract_itk_version(content: str) -> Optional[str]:
    """Version tag from a '# itk-version: x.y.z' comment"""
    return _first_group(ITK_VERSION_PATTERN, content)


def extract_services(content: str) -> list[str]:
    """Service names declared as two-space-indented keys

    File order is kept and duplicates are not removed.
    """
    return [
        name for name in SERVICE_PATTERN.findall(content)
        if name not in NON_SERVICE_KEYS
    ]


def extract_env_value(content: str, key: str) -> Optional[str]:
    """Value of the first KEY=value occurrence in an environment file"""
    pattern = re.compile(re.escape(key) + r"=(\S+)")
    return _first_group(pattern, content)


def extract_drupal_version(content: str) -> Optional[str]:
    """Drupal core version from the VERSION constant in Drupal.php"""
    return _first_group(DRUPAL_VERSION_PATTERN, content)


def has_memcached(content: str) -> bool:
    """Plain substring check; any 'memcached:' occurrence counts"""
    return "memcached:" in content


def has_drush(content: str) -> bool:
    """Plain substring check; any 'drush:' occurrence counts"""
    return "drush:" in content


def natural_sort_key(name: str) -> str:
    """Sort key that orders digit runs numerically

    Every run of digits is left-padded with zeros to a fixed width, so
    "drupal-9" sorts before "drupal-10".
    """
    return _DIGITS.sub(lambda m: m.group(0).zfill(NATURAL_SORT_WIDTH), name)
