"""Tests for framework detection rules."""

import json
import logging

from itkdev_mcp.utils.frameworks import FRAMEWORK_RULES, FrameworkMatch, detect_framework

from conftest import write_file


def test_rules_are_ordered():
    assert [rule.marker for rule in FRAMEWORK_RULES] == [
        "web/core/lib/Drupal.php",
        "core/lib/Drupal.php",
        "bin/console",
    ]


def test_no_marker_means_no_framework(tmp_path):
    assert detect_framework(tmp_path) == FrameworkMatch(framework=None, version=None)


def test_first_matching_rule_wins(tmp_path):
    write_file(tmp_path, "web/core/lib/Drupal.php", "const VERSION = '11.0.1';")
    write_file(tmp_path, "bin/console", "")

    assert detect_framework(tmp_path) == FrameworkMatch(framework="drupal", version="11.0.1")


def test_drupal_marker_without_version_constant(tmp_path):
    write_file(tmp_path, "web/core/lib/Drupal.php", "<?php\n")

    assert detect_framework(tmp_path) == FrameworkMatch(framework="drupal", version=None)


def test_symfony_prefers_framework_bundle(tmp_path):
    write_file(tmp_path, "bin/console", "")
    write_file(tmp_path, "composer.json", json.dumps({
        "require": {"symfony/symfony": "5.4.*", "symfony/framework-bundle": "6.4.*"}
    }))

    assert detect_framework(tmp_path).version == "6.4.*"


def test_symfony_falls_back_to_symfony_package(tmp_path):
    write_file(tmp_path, "bin/console", "")
    write_file(tmp_path, "composer.json", json.dumps({"require": {"symfony/symfony": "4.4.*"}}))

    assert detect_framework(tmp_path).version == "4.4.*"


def test_symfony_invalid_composer_json_is_ignored(tmp_path):
    write_file(tmp_path, "bin/console", "")
    write_file(tmp_path, "composer.json", "{not json")

    assert detect_framework(tmp_path) == FrameworkMatch(framework="symfony", version=None)


def test_symfony_unexpected_composer_shape_is_ignored(tmp_path):
    write_file(tmp_path, "bin/console", "")
    write_file(tmp_path, "composer.json", json.dumps(["symfony/framework-bundle"]))

    assert detect_framework(tmp_path) == FrameworkMatch(framework="symfony", version=None)


def test_symfony_without_composer_json(tmp_path):
    write_file(tmp_path, "bin/console", "")

    assert detect_framework(tmp_path) == FrameworkMatch(framework="symfony", version=None)


def test_symfony_invalid_composer_json_is_logged_at_debug(tmp_path, caplog):
    write_file(tmp_path, "bin/console", "")
    write_file(tmp_path, "composer.json", "{not json")

    with caplog.at_level(logging.DEBUG, logger="itkdev_mcp"):
        detect_framework(tmp_path)

    messages = [r.getMessage() for r in caplog.records
                if r.name == "itkdev_mcp.utils.frameworks" and r.levelno == logging.DEBUG]
    assert any("Ignoring unreadable" in message for message in messages)
