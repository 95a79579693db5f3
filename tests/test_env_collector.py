"""
Tests for the environment collector — .env parsing, defaults, secrets.
"""

from pathlib import Path

import pytest

from src.core.errors import EnvFileError
from src.core.models.build import Ecosystem
from src.core.services.env_collector import (
    collect,
    defaults_ecosystem,
    find_env_file,
    is_secret_like,
    load_env_file,
    parse_env_content,
    secret_keys,
)


# ═══════════════════════════════════════════════════════════════════
#  is_secret_like
# ═══════════════════════════════════════════════════════════════════


class TestIsSecretLike:
    @pytest.mark.parametrize("key", [
        "DB_PASSWORD",
        "apiKey",
        "AUTH_TOKEN",
        "JWT_SECRET",
        "AWS_CREDENTIALS",
        "SSL_CERT_PATH",
        "Authorization",
    ])
    def test_secret_like(self, key):
        assert is_secret_like(key)

    @pytest.mark.parametrize("key", ["PORT", "NODE_ENV", "DATABASE_HOST", "LOG_LEVEL"])
    def test_plain(self, key):
        assert not is_secret_like(key)

    def test_custom_patterns(self):
        assert is_secret_like("MY_PIN", patterns=["pin"])
        assert not is_secret_like("DB_PASSWORD", patterns=["pin"])

    def test_secret_keys_filters(self):
        env = {"PORT": "3000", "DB_PASSWORD": "x", "API_TOKEN": "y"}
        assert sorted(secret_keys(env)) == ["API_TOKEN", "DB_PASSWORD"]


# ═══════════════════════════════════════════════════════════════════
#  parse_env_content
# ═══════════════════════════════════════════════════════════════════


class TestParseEnvContent:
    def test_basic(self):
        assert parse_env_content("A=1\nB=two\n") == {"A": "1", "B": "two"}

    def test_comments_and_blank_lines(self):
        content = "# comment\n\n   # indented comment\nA=1\n"
        assert parse_env_content(content) == {"A": "1"}

    def test_quotes_stripped(self):
        content = 'A="hello world"\nB=\'single\'\nC="unbalanced\n'
        result = parse_env_content(content)
        assert result["A"] == "hello world"
        assert result["B"] == "single"
        assert result["C"] == '"unbalanced'

    def test_export_prefix(self):
        assert parse_env_content("export TOKEN=abc") == {"TOKEN": "abc"}

    def test_spaces_around_equals(self):
        assert parse_env_content("KEY = value") == {"KEY": "value"}

    def test_value_containing_equals(self):
        assert parse_env_content("URL=postgres://u:p@h/db?a=b") == {
            "URL": "postgres://u:p@h/db?a=b",
        }

    def test_malformed_lines_skipped(self):
        content = "no equals sign\n1BAD=x\nBAD-KEY=y\n=novalue\nGOOD=1\n"
        assert parse_env_content(content) == {"GOOD": "1"}

    def test_empty_value(self):
        assert parse_env_content("EMPTY=") == {"EMPTY": ""}


# ═══════════════════════════════════════════════════════════════════
#  find_env_file / load_env_file
# ═══════════════════════════════════════════════════════════════════


class TestEnvFiles:
    def test_prefers_dot_env(self, make_project):
        root = make_project(**{".env": "A=1", ".env.example": "A=2"})
        assert find_env_file(root) == root / ".env"

    def test_falls_back_to_variants(self, make_project):
        root = make_project(**{".env.template": "A=1", ".env.default": "A=2"})
        assert find_env_file(root) == root / ".env.template"

    def test_none_found(self, make_project):
        assert find_env_file(make_project("package.json")) is None

    def test_custom_candidates(self, make_project):
        root = make_project(**{"app.env": "A=1", ".env": "A=2"})
        assert find_env_file(root, ["app.env"]) == root / "app.env"

    def test_load(self, make_project):
        root = make_project(**{".env": "DB_PASSWORD=hunter2\n# c\nPORT=80\n"})
        assert load_env_file(root / ".env") == {"DB_PASSWORD": "hunter2", "PORT": "80"}

    def test_load_missing_is_empty(self, tmp_path: Path):
        assert load_env_file(tmp_path / ".env") == {}

    def test_load_unreadable_raises(self, tmp_path: Path):
        """A directory named .env exists but cannot be read as a file."""
        (tmp_path / ".env").mkdir()
        with pytest.raises(EnvFileError, match=".env"):
            load_env_file(tmp_path / ".env")


# ═══════════════════════════════════════════════════════════════════
#  collect
# ═══════════════════════════════════════════════════════════════════


class TestCollect:
    def test_node_defaults(self, inspector_for):
        env = collect(inspector_for("package.json"))
        assert env == {"NODE_ENV": "production", "PORT": "3000"}

    def test_python_defaults_with_pipfile(self, inspector_for):
        env = collect(inspector_for("Pipfile"))
        assert env["PYTHONPATH"] == "/app"
        assert "DJANGO_SETTINGS_MODULE" in env

    def test_ruby_defaults(self, inspector_for):
        env = collect(inspector_for("Gemfile"))
        assert env == {"RAILS_ENV": "production", "RACK_ENV": "production"}

    def test_php_defaults_from_extension(self, inspector_for):
        env = collect(inspector_for("index.php"))
        assert env == {"APP_ENV": "production", "APP_DEBUG": "false"}

    @pytest.mark.parametrize("marker", ["go.mod", "pom.xml", "build.gradle"])
    def test_go_and_java_have_no_defaults(self, inspector_for, marker):
        assert collect(inspector_for(marker)) == {}

    def test_generic_has_no_defaults(self, inspector_for):
        assert collect(inspector_for("README.md")) == {}

    def test_ruby_defaults_apply_alongside_go_mod(self, inspector_for):
        """go.mod has no default table, so it does not hide the Gemfile."""
        inspector = inspector_for("go.mod", "Gemfile")
        assert defaults_ecosystem(inspector) is Ecosystem.RUBY
        assert collect(inspector) == {"RAILS_ENV": "production", "RACK_ENV": "production"}

    def test_node_defaults_apply_alongside_pom(self, inspector_for):
        inspector = inspector_for("pom.xml", "package.json")
        assert defaults_ecosystem(inspector) is Ecosystem.NODEJS
        assert collect(inspector)["NODE_ENV"] == "production"

    @pytest.mark.parametrize("marker", ["go.mod", "pom.xml", "build.gradle", "README.md"])
    def test_no_defaults_ecosystem(self, inspector_for, marker):
        assert defaults_ecosystem(inspector_for(marker)) is None

    def test_user_values_are_authoritative(self, inspector_for):
        env = collect(inspector_for("package.json"), {"NODE_ENV": "development"})
        assert env["NODE_ENV"] == "development"
        assert env["PORT"] == "3000"

    def test_input_not_mutated(self, inspector_for):
        parsed = {"A": "1"}
        collect(inspector_for("package.json"), parsed)
        assert parsed == {"A": "1"}

    @pytest.mark.parametrize("parsed", [
        None,
        {},
        {"NODE_ENV": "test"},
        {"DB_PASSWORD": "x", "PORT": "1"},
    ])
    def test_idempotent(self, inspector_for, parsed):
        inspector = inspector_for("package.json")
        once = collect(inspector, parsed)
        assert collect(inspector, once) == once

    def test_custom_defaults_table(self, inspector_for):
        env = collect(inspector_for("Gemfile"), defaults={"ruby": {"BUNDLE_WITHOUT": "development"}})
        assert env == {"BUNDLE_WITHOUT": "development"}
