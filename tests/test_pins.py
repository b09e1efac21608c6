"""
Tests for loading and applying version pins.
"""

import io

import pytest

from core.dockerfile import Dockerfile
from core.exceptions import ConfigurationException, ImageNotFoundError
from core.pins import apply_version_pins, load_version_pins


class TestLoadVersionPins:
    """Test version pins file loading."""

    def test_load(self, pins_path):
        """Test loading pins in file order with string values."""
        pins = load_version_pins(pins_path)
        assert pins == {
            "ubuntu": "16.04",
            "library/alpine": "3.6@sha256:9887454752654746548375",
        }
        assert list(pins) == ["ubuntu", "library/alpine"]

    def test_missing_file(self, tmp_path):
        """Test that a missing pins file is a configuration error."""
        with pytest.raises(ConfigurationException) as exc:
            load_version_pins(tmp_path / "missing.yaml")
        assert "not found" in str(exc.value)

    def test_invalid_yaml(self, tmp_path):
        """Test that malformed YAML is a configuration error."""
        path = tmp_path / "pins.yaml"
        path.write_text("images: [unclosed\n")
        with pytest.raises(ConfigurationException) as exc:
            load_version_pins(path)
        assert "Failed to parse" in str(exc.value)

    def test_not_a_mapping(self, tmp_path):
        """Test that a top-level list is rejected."""
        path = tmp_path / "pins.yaml"
        path.write_text("- ubuntu\n")
        with pytest.raises(ConfigurationException):
            load_version_pins(path)

    @pytest.mark.parametrize("value", ["1.20", "16.04", "3", "true", "null"])
    def test_unquoted_version_rejected(self, tmp_path, value):
        """Test that versions YAML does not load as strings are rejected."""
        path = tmp_path / "pins.yaml"
        path.write_text(f"images:\n  golang: {value}\n")
        with pytest.raises(ConfigurationException) as exc:
            load_version_pins(path)
        assert "must be a quoted string" in str(exc.value)
        assert "golang" in str(exc.value)

    def test_quoted_version_kept_verbatim(self, tmp_path):
        """Test that a quoted version keeps its trailing zero."""
        path = tmp_path / "pins.yaml"
        path.write_text('images:\n  golang: "1.20"\n')
        assert load_version_pins(path) == {"golang": "1.20"}

    def test_missing_images_section(self, tmp_path):
        """Test that a file without an images mapping is rejected."""
        path = tmp_path / "pins.yaml"
        path.write_text("packages:\n  foo: 1.0\n")
        with pytest.raises(ConfigurationException) as exc:
            load_version_pins(path)
        assert "'images'" in str(exc.value)


class TestApplyVersionPins:
    """Test applying pins to a Dockerfile."""

    @pytest.fixture
    def dockerfile(self, multistage_dockerfile_content):
        """Loaded multi-stage Dockerfile."""
        return Dockerfile("Dockerfile", io.StringIO(multistage_dockerfile_content))

    def test_apply(self, dockerfile):
        """Test that known images are bumped."""
        applied = apply_version_pins(dockerfile, {"library/alpine": "3.6"})
        assert applied == ["library/alpine"]
        assert "FROM library/alpine:3.6\n" in dockerfile.to_string()

    def test_skips_unknown(self, dockerfile, caplog):
        """Test that unknown images are skipped with a warning."""
        applied = apply_version_pins(dockerfile, {"ubuntu": "16.04", "library/alpine": "3.6"})
        assert applied == ["library/alpine"]
        assert "Skipping pin for ubuntu" in caplog.text

    def test_strict(self, dockerfile):
        """Test that strict mode raises on unknown images."""
        with pytest.raises(ImageNotFoundError):
            apply_version_pins(dockerfile, {"ubuntu": "16.04"}, strict=True)

    def test_from_file(self, dockerfile, pins_path):
        """Test applying pins loaded from disk."""
        applied = apply_version_pins(dockerfile, load_version_pins(pins_path))
        assert applied == ["library/alpine"]
        assert str(dockerfile.get_artifacts()["library/alpine"]) == (
            "library/alpine:3.6@sha256:9887454752654746548375"
        )
