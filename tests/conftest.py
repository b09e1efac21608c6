"""
Pytest fixtures and configuration for imagebump tests.

Provides shared Dockerfile content and files across the test suite.
"""

import pytest


@pytest.fixture
def ubuntu_dockerfile_content():
    """Single-stage Dockerfile with a tagged base image."""
    return 'FROM ubuntu:14.04\nENTRYPOINT ["/bin/sh"]\n'


@pytest.fixture
def multistage_dockerfile_content():
    """Multi-stage Dockerfile with registry, digest and stage aliases."""
    return (
        "# build stage\n"
        "FROM dk.tech.example.com:8080/team1/builder:1.2 AS build\n"
        "RUN make\n"
        "\n"
        "FROM library/alpine:3.5@sha256:59384573945873458347593587\n"
        "COPY --from=build /out /app\n"
        'CMD ["/app"]\n'
    )


@pytest.fixture
def dockerfile_path(tmp_path, ubuntu_dockerfile_content):
    """Temporary Dockerfile on disk."""
    path = tmp_path / "Dockerfile"
    path.write_text(ubuntu_dockerfile_content)
    return path


@pytest.fixture
def pins_content():
    """Version pins YAML content."""
    return """
images:
  ubuntu: "16.04"
  library/alpine: "3.6@sha256:9887454752654746548375"
"""


@pytest.fixture
def pins_path(tmp_path, pins_content):
    """Temporary version pins file on disk."""
    path = tmp_path / "image-versions.yaml"
    path.write_text(pins_content)
    return path
