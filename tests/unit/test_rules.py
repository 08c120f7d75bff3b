from pathlib import Path

import pytest

from viewcore.domain.color import Color
from viewcore.rules.loader import load_rules

PROJECT_ROOT = Path(__file__).parent.parent.parent


def test_load_shipped_rules():
    rules = load_rules(PROJECT_ROOT / "rules.yaml")

    assert rules.project.slug == "viewcore"
    assert rules.links.external_rel == "noopener noreferrer"
    assert rules.auth.log_denials is True
    assert rules.colors.default == Color("#000")


def test_defaults_for_missing_sections(tmp_path):
    path = tmp_path / "rules.yaml"
    path.write_text("project:\n  slug: demo\n  rules_version: '2'\n")

    rules = load_rules(path)

    assert rules.links.external_rel == ""
    assert rules.links.external_schemes == ["http", "https"]
    assert rules.auth.log_denials is True
    assert rules.colors.default.get() == "#000000ff"


def test_markdown_fenced_rules(tmp_path):
    path = tmp_path / "rules.md"
    path.write_text(
        "# Rules\n\n```yaml\nproject:\n  slug: demo\n  rules_version: '1'\n"
        "links:\n  external_schemes: [HTTPS]\ncolors:\n  default: '#abc'\n```\n\nNotes\n"
    )

    rules = load_rules(path)

    assert rules.links.external_schemes == ["https"]
    assert rules.colors.default.get() == "#aabbccff"


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_rules(tmp_path / "missing.yaml")


def test_invalid_yaml(tmp_path):
    path = tmp_path / "rules.yaml"
    path.write_text("project: [unclosed\n")

    with pytest.raises(ValueError, match="Invalid YAML syntax"):
        load_rules(path)


def test_invalid_schema(tmp_path):
    path = tmp_path / "rules.yaml"
    path.write_text("project:\n  slug: demo\n")

    with pytest.raises(ValueError, match="Rules validation failed"):
        load_rules(path)


def test_invalid_color_rejected(tmp_path):
    path = tmp_path / "rules.yaml"
    path.write_text(
        "project:\n  slug: demo\n  rules_version: '1'\ncolors:\n  default: 'not-a-color'\n"
    )

    with pytest.raises(ValueError, match="Rules validation failed"):
        load_rules(path)
