"""
Rules file loading and startup checks.
"""

from __future__ import annotations

from pathlib import Path

import pytest
import yaml

from src.app_shell.config import validate_ops_rules
from src.rules.loader import load_rules
from tests.conftest import PROJECT_ROOT


@pytest.fixture
def rules_path() -> Path:
    return PROJECT_ROOT / "rules.yaml"


def write_rules(tmp_path: Path, data: dict) -> Path:
    path = tmp_path / "rules.yaml"
    path.write_text(yaml.safe_dump(data))
    return path


class TestLoadRules:
    def test_project_rules_file_loads(self, rules_path: Path) -> None:
        rules = load_rules(rules_path)

        assert rules.project.slug == "invoice-dashboard"
        assert rules.invoices.listing_path == "/dashboard/invoices"
        assert rules.auth.strategy == "credentials"
        assert rules.auth.min_password_length == 6
        assert rules.auth.sessions.cookie.name == "access_token"
        assert rules.auth.sessions.cookie.http_only is True

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_rules(tmp_path / "nope.yaml")

    def test_invalid_yaml_raises_value_error(self, tmp_path: Path) -> None:
        path = tmp_path / "rules.yaml"
        path.write_text("invalid: yaml: content: [")

        with pytest.raises(ValueError, match="Invalid YAML"):
            load_rules(path)

    def test_missing_section_raises_value_error(self, tmp_path: Path) -> None:
        path = write_rules(tmp_path, {"project": {"slug": "x", "rules_version": "1"}})

        with pytest.raises(ValueError, match="validation failed"):
            load_rules(path)

    def test_section_defaults_apply(self, tmp_path: Path) -> None:
        path = write_rules(
            tmp_path,
            {
                "project": {"slug": "x", "rules_version": "1"},
                "invoices": {},
                "auth": {"sessions": {"ttl_minutes": 30, "cookie": {}}},
                "ops": {},
            },
        )

        rules = load_rules(path)

        assert rules.invoices.listing_path == "/dashboard/invoices"
        assert rules.auth.post_login_path == "/dashboard"
        assert rules.ops.migrations_dir == "migrations"


class TestValidateOpsRules:
    def test_project_layout_passes(self, rules_path: Path) -> None:
        validate_ops_rules(load_rules(rules_path), PROJECT_ROOT)

    def test_missing_env_var_exits(
        self, rules_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.delenv("DASHBOARD_TEST_REQUIRED", raising=False)
        rules = load_rules(rules_path)
        rules.ops.required_env = ["DASHBOARD_TEST_REQUIRED"]

        with pytest.raises(SystemExit):
            validate_ops_rules(rules, PROJECT_ROOT)

    def test_missing_migrations_dir_exits(self, rules_path: Path, tmp_path: Path) -> None:
        with pytest.raises(SystemExit):
            validate_ops_rules(load_rules(rules_path), tmp_path)
