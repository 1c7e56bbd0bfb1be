"""Pytest configuration and fixtures for versions-check tests."""

import logging
from pathlib import Path

import pytest

from versions_check.plugins import reset_plugins


@pytest.fixture(autouse=True)
def reset_logging():
    """Reset logging configuration after each test.

    This ensures that tests which call setup_logging() don't affect
    other tests that rely on caplog fixture for log capture.
    """
    yield

    logger = logging.getLogger("versions_check")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


@pytest.fixture
def clean_plugins():
    """Start and finish a test with an uninitialized plugin system."""
    reset_plugins()
    yield
    reset_plugins()


@pytest.fixture
def gradle_build(tmp_path: Path) -> Path:
    """A two-project Gradle build with lock state and a versions.props.

    Layout:
        versions.props
        gradle.lockfile            (root project ':')
        service/gradle.lockfile    (project ':service')
    """
    (tmp_path / "versions.props").write_text(
        "com.google.guava:guava = 31.1-jre\n"
        "com.fasterxml.jackson.*:* = 2.15.2 # jackson family\n"
        "org.slf4j:slf4j-api = 2.0.7\n"
    )
    (tmp_path / "gradle.lockfile").write_text(
        "# This is a Gradle generated file for dependency locking.\n"
        "# Manual edits can break the build and are not advised.\n"
        "# This file is expected to be part of source control.\n"
        "com.google.guava:guava:31.1-jre=compileClasspath,runtimeClasspath\n"
        "com.google.guava:failureaccess:1.0.1=runtimeClasspath\n"
        "empty=annotationProcessor\n"
    )
    service = tmp_path / "service"
    service.mkdir()
    (service / "gradle.lockfile").write_text(
        "com.fasterxml.jackson.core:jackson-databind:2.15.2=runtimeClasspath\n"
        "com.fasterxml.jackson.core:jackson-core:2.15.2=runtimeClasspath\n"
        "org.slf4j:slf4j-api:2.0.7=compileClasspath,runtimeClasspath\n"
        "empty=testAnnotationProcessor\n"
    )
    return tmp_path
