import tempfile
from pathlib import Path
from unittest.mock import patch

import pytest
import yaml

import superspec.config as config
import superspec.paths as paths
from superspec.errors import ConfigReadError, ConfigWriteError
from superspec.models import ProjectConfig
from tests.superspec.helpers import LEGACY_CONFIG, write_project_yaml

SECTION_ORDER = [
    "# SuperSpec Project Configuration",
    "version:",
    "# Project settings",
    "project:",
    "# Workflow settings",
    "workflow:",
    "# Git settings",
    "git:",
    "# Test settings",
    "test:",
    "# External AI Review settings",
    "review:",
    "  frontend:",
    "  backend:",
]


class TestLoadProjectConfig:
    def test_loads_values_and_backfills_review(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            write_project_yaml(root)
            loaded = config.load_project_config(root)

        assert loaded.version == 1
        assert loaded.project.name == "demo"
        assert loaded.workflow["require_design"] is False
        assert loaded.git["branch_prefix"] == "scott/"
        assert loaded.test["command"] == "pytest"
        assert loaded.review.enabled is False
        assert loaded.review.frontend.provider == "gemini"
        assert loaded.review.backend.model == "gpt-5.2-codex"

    def test_missing_file_raises_read_error(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with pytest.raises(ConfigReadError) as excinfo:
                config.load_project_config(Path(tmp))
        assert isinstance(excinfo.value.__cause__, OSError)
        assert excinfo.value.code == "config_read_failed"

    def test_malformed_yaml_raises_read_error(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            write_project_yaml(root, "version: 1\nproject: [unclosed\n")
            with pytest.raises(ConfigReadError, match="invalid YAML"):
                config.load_project_config(root)

    def test_non_mapping_document_raises_read_error(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            write_project_yaml(root, "- just\n- a list\n")
            with pytest.raises(ConfigReadError, match="mapping"):
                config.load_project_config(root)

    def test_schema_mismatch_raises_read_error(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            write_project_yaml(root, "review:\n  backend:\n    provider: copilot\n")
            with pytest.raises(ConfigReadError):
                config.load_project_config(root)

    def test_non_utf8_file_raises_read_error(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            path = write_project_yaml(root)
            path.write_bytes(b"version: 1\nproject:\n  name: caf\xe9\n")
            with pytest.raises(ConfigReadError) as excinfo:
                config.load_project_config(root)
        assert isinstance(excinfo.value.__cause__, UnicodeDecodeError)

    def test_numeric_group_keys_load_as_strings(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            write_project_yaml(root, "workflow:\n  3: on\n")
            loaded = config.load_project_config(root)

        assert loaded.workflow == {"3": True}
        parsed = yaml.safe_load(config.render_project_config(loaded))
        assert parsed["workflow"]["3"] is True

    def test_empty_file_loads_defaults(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            write_project_yaml(root, "")
            loaded = config.load_project_config(root)
        assert loaded.version == 1
        assert loaded.review.enabled is False


class TestRenderProjectConfig:
    def test_empty_groups_use_defaults(self) -> None:
        text = config.render_project_config(
            ProjectConfig(project={"name": "demo"}, workflow={}, git={}, test={})
        )

        for line in (
            "require_design: true",
            "require_validation: true",
            "strict_mode: false",
            "worktree_dir: .worktrees",
            "branch_prefix: feature/",
            "command: npm test",
            "coverage: false",
        ):
            assert f"  {line}\n" in text

    def test_null_values_use_defaults(self) -> None:
        text = config.render_project_config(
            ProjectConfig(test={"command": None, "coverage": True})
        )

        assert "  command: npm test\n" in text
        assert "  coverage: true\n" in text

    def test_sections_are_written_in_fixed_order(self) -> None:
        text = config.render_project_config(ProjectConfig())
        lines = text.splitlines()

        positions = [
            next(i for i, line in enumerate(lines) if line.startswith(marker))
            for marker in SECTION_ORDER
        ]
        assert positions == sorted(positions)

    def test_review_lines_carry_inline_comments(self) -> None:
        text = config.render_project_config(ProjectConfig())

        assert "# Master switch for external AI review" in text
        assert "# gemini | codex | none" in text
        assert "# codex | gemini | none" in text
        assert "# Frontend task review (UI, components, styling)" in text
        assert "# Backend task review (API, logic, data)" in text

    def test_output_parses_back_to_same_values(self) -> None:
        original = ProjectConfig.model_validate(
            {
                "version": 3,
                "project": {"name": "yes"},
                "workflow": {"strict_mode": True},
                "git": {"branch_prefix": "team: web/"},
                "test": {"command": "pytest -k 'not slow'\n--maxfail=1"},
                "review": {
                    "enabled": True,
                    "frontend": {"provider": "none", "model": "#custom"},
                },
            }
        )

        parsed = yaml.safe_load(config.render_project_config(original))
        reloaded = ProjectConfig.model_validate(parsed)

        assert reloaded.project.name == "yes"
        assert reloaded.git["branch_prefix"] == "team: web/"
        assert reloaded.test["command"] == "pytest -k 'not slow'\n--maxfail=1"
        assert reloaded.review.frontend.model == "#custom"
        assert reloaded.review == original.review

    def test_extra_group_keys_follow_known_keys(self) -> None:
        loaded = ProjectConfig.model_validate(
            {"git": {"remote": "upstream", "branch_prefix": "x/", "hooks": ["pre-push"]}}
        )

        parsed = yaml.safe_load(config.render_project_config(loaded))

        assert list(parsed["git"]) == ["worktree_dir", "branch_prefix", "remote", "hooks"]
        assert parsed["git"]["hooks"] == ["pre-push"]

    def test_binary_values_stay_on_one_line(self) -> None:
        loaded = ProjectConfig.model_validate(
            yaml.safe_load("git:\n  blob: !!binary aGVsbG8=\n")
        )

        text = config.render_project_config(loaded)
        parsed = yaml.safe_load(text)

        assert parsed["git"]["blob"] == "b'hello'"
        assert parsed["review"]["backend"]["provider"] == "codex"

    def test_unknown_top_level_keys_are_dropped(self) -> None:
        loaded = ProjectConfig.model_validate({"docs": {"dir": "docs"}})

        parsed = yaml.safe_load(config.render_project_config(loaded))

        assert list(parsed) == ["version", "project", "workflow", "git", "test", "review"]


class TestWriteProjectConfig:
    def test_legacy_config_roundtrip_backfills_review(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            write_project_yaml(root, LEGACY_CONFIG)
            config.write_project_config(root, config.load_project_config(root))
            parsed = yaml.safe_load(paths.project_config_path(root).read_text(encoding="utf-8"))

        assert parsed["workflow"] == {
            "require_design": False,
            "require_validation": True,
            "strict_mode": True,
        }
        assert parsed["review"] == {
            "enabled": False,
            "frontend": {"provider": "gemini", "model": "gemini-3-pro-preview"},
            "backend": {"provider": "codex", "model": "gpt-5.2-codex"},
        }

    def test_write_failure_raises_write_error(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            write_project_yaml(root)
            with patch("pathlib.Path.write_text", side_effect=PermissionError("denied")):
                with pytest.raises(ConfigWriteError) as excinfo:
                    config.write_project_config(root, ProjectConfig())
        assert isinstance(excinfo.value.__cause__, PermissionError)

    def test_write_is_a_full_rewrite(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            path = write_project_yaml(root, "version: 1\n# stray comment\n")
            config.write_project_config(root, config.load_project_config(root))
            text = path.read_text(encoding="utf-8")

        assert "# stray comment" not in text
        assert text == config.render_project_config(ProjectConfig())
