"""Tests for manifest dependency parsers."""

from __future__ import annotations

import json

import pytest

from switchboard.context.manifests import (
    ManifestError,
    parse_go_mod,
    parse_package_json,
    parse_requirements_txt,
)


class TestPackageJson:
    @pytest.mark.unit
    def test_dependencies_then_dev_dependencies(self):
        text = json.dumps(
            {
                "name": "web",
                "dependencies": {"react": "^18", "react-dom": "^18"},
                "devDependencies": {"vitest": "^1"},
            }
        )
        assert parse_package_json(text) == ["react", "react-dom", "vitest"]

    @pytest.mark.unit
    def test_missing_sections(self):
        assert parse_package_json('{"name": "empty"}') == []

    @pytest.mark.unit
    def test_invalid_json_raises(self):
        with pytest.raises(ManifestError):
            parse_package_json("{not json")

    @pytest.mark.unit
    def test_non_object_root_raises(self):
        with pytest.raises(ManifestError):
            parse_package_json("[1, 2]")

    @pytest.mark.unit
    def test_non_object_section_is_skipped(self):
        text = json.dumps({"dependencies": ["react"], "devDependencies": {"jest": "^29"}})
        assert parse_package_json(text) == ["jest"]

    @pytest.mark.unit
    def test_both_sections_malformed(self):
        assert parse_package_json('{"dependencies": "react", "devDependencies": 3}') == []


class TestRequirementsTxt:
    @pytest.mark.unit
    def test_strips_version_operators(self):
        text = "fastapi==0.110\nredis>=5.0\nuvicorn<=0.30\nhttpx"
        assert parse_requirements_txt(text) == ["fastapi", "redis", "uvicorn", "httpx"]

    @pytest.mark.unit
    def test_skips_comments_and_blank_lines(self):
        text = "# web\n\n   \nflask==3.0\n  # pinned\n"
        assert parse_requirements_txt(text) == ["flask"]

    @pytest.mark.unit
    def test_truncates_at_first_operator(self):
        assert parse_requirements_txt("django>=4.2,<=5.0") == ["django"]

    @pytest.mark.unit
    def test_whitespace_around_name(self):
        assert parse_requirements_txt("  requests >= 2.0  ") == ["requests"]


class TestGoMod:
    @pytest.mark.unit
    def test_single_line_requires(self):
        text = (
            "module example.com/api\n\ngo 1.22\n\n"
            "require github.com/gin-gonic/gin v1.9.1\n"
            "require github.com/redis/go-redis/v9 v9.5.1\n"
        )
        assert parse_go_mod(text) == [
            "github.com/gin-gonic/gin",
            "github.com/redis/go-redis/v9",
        ]

    @pytest.mark.unit
    def test_block_require_yields_opening_paren(self):
        text = "require (\n\tgithub.com/labstack/echo/v4 v4.11.4\n)\n"
        assert parse_go_mod(text) == ["("]

    @pytest.mark.unit
    def test_no_requires(self):
        assert parse_go_mod("module example.com/x\n") == []
