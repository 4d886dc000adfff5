"""
Unit tests for the contentdigest CLI.

Commands run through click's CliRunner with a DigestContext built from
default settings, so no config files are read.
"""

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from contentdigest.cli import cli
from contentdigest.cli.context import DigestContext
from contentdigest.core.exceptions import ConfigValidationError
from contentdigest.core.settings import DigestSettings
from contentdigest.hashing.registry import get_registry

FOO = "sha256:2c26b46b68ffc68ff99b453c1d30413413422d706483bfa0f98a5e886266e7ae"
FOOBAR = "sha256:c3ab8ff13720e8ad9047dd39466b3c8974e592c2fa383d4a3960714caef0c4f2"


@pytest.fixture
def runner():
    """Create a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def ctx(tmp_path):
    """A DigestContext with default settings."""
    return DigestContext(cwd=tmp_path, settings=DigestSettings(), registry=get_registry())


@pytest.fixture
def foo_file(tmp_path) -> Path:
    path = tmp_path / "foo.txt"
    path.write_bytes(b"foo")
    return path


class TestCompute:
    def test_compute_file(self, runner, ctx, foo_file):
        result = runner.invoke(cli, ["compute", str(foo_file)], obj=ctx)
        assert result.exit_code == 0, result.output
        assert result.output == f"{FOO}  {foo_file}\n"

    def test_compute_stdin(self, runner, ctx):
        result = runner.invoke(cli, ["compute"], input=b"foobar", obj=ctx)
        assert result.exit_code == 0, result.output
        assert result.output == f"{FOOBAR}  -\n"

    def test_compute_algorithm_option(self, runner, ctx, foo_file):
        result = runner.invoke(cli, ["compute", "-a", "sha512", str(foo_file)], obj=ctx)
        assert result.exit_code == 0, result.output
        assert result.output.startswith("sha512:")

    def test_compute_unknown_algorithm(self, runner, ctx, foo_file):
        result = runner.invoke(cli, ["compute", "-a", "bean", str(foo_file)], obj=ctx)
        assert result.exit_code == 2
        assert "unsupported digest algorithm" in result.output

    def test_compute_configured_default(self, runner, tmp_path, foo_file):
        settings = DigestSettings(digest={"algorithm": "sha384"})
        ctx = DigestContext(cwd=tmp_path, settings=settings, registry=get_registry())
        result = runner.invoke(cli, ["compute", str(foo_file)], obj=ctx)
        assert result.exit_code == 0, result.output
        assert result.output.startswith("sha384:")

    def test_compute_configured_default_unavailable(self, runner, tmp_path, foo_file):
        settings = DigestSettings(digest={"algorithm": "bean"})
        ctx = DigestContext(cwd=tmp_path, settings=settings, registry=get_registry())
        result = runner.invoke(cli, ["compute", str(foo_file)], obj=ctx)
        assert result.exit_code == 1
        assert "not available" in result.output

    def test_compute_missing_file(self, runner, ctx, tmp_path):
        result = runner.invoke(cli, ["compute", str(tmp_path / "missing")], obj=ctx)
        assert result.exit_code == 1
        assert "cannot read" in result.output


class TestVerify:
    def test_verify_ok(self, runner, ctx, foo_file):
        result = runner.invoke(cli, ["verify", FOO, str(foo_file)], obj=ctx)
        assert result.exit_code == 0, result.output
        assert "OK" in result.output

    def test_verify_mismatch(self, runner, ctx, foo_file):
        result = runner.invoke(cli, ["verify", FOOBAR, str(foo_file)], obj=ctx)
        assert result.exit_code == 1
        assert "FAILED" in result.output

    def test_verify_stdin(self, runner, ctx):
        result = runner.invoke(cli, ["verify", FOOBAR], input=b"foobar", obj=ctx)
        assert result.exit_code == 0, result.output

    def test_verify_invalid_digest(self, runner, ctx, foo_file):
        result = runner.invoke(cli, ["verify", "sha256:abc", str(foo_file)], obj=ctx)
        assert result.exit_code == 2
        assert "invalid checksum digest length" in result.output


class TestValidate:
    def test_all_valid(self, runner, ctx):
        result = runner.invoke(cli, ["validate", FOO, FOOBAR], obj=ctx)
        assert result.exit_code == 0
        assert result.output.count(": valid") == 2

    def test_reports_each_kind(self, runner, ctx):
        result = runner.invoke(
            cli,
            ["validate", "nope", "sha256:abcd", "bean:abcd", FOO.upper()],
            obj=ctx,
        )
        assert result.exit_code == 1
        lines = result.output.splitlines()
        assert lines[0].startswith("nope: invalid-format")
        assert lines[1].startswith("sha256:abcd: invalid-length")
        assert lines[2].startswith("bean:abcd: unsupported")
        assert "invalid-format" in lines[3]


class TestAlgorithms:
    def test_table(self, runner, ctx):
        result = runner.invoke(cli, ["algorithms"], obj=ctx)
        assert result.exit_code == 0
        assert "* sha256" in result.output
        assert "sha512" in result.output
        assert "512 bits" in result.output

    def test_json(self, runner, ctx):
        result = runner.invoke(cli, ["algorithms", "--json"], obj=ctx)
        assert result.exit_code == 0
        entries = {entry["name"]: entry for entry in json.loads(result.output)}
        assert entries["sha384"] == {
            "name": "sha384",
            "size": 48,
            "encoded_size": 96,
            "available": True,
        }


class TestGroup:
    def test_help_without_command(self, runner):
        result = runner.invoke(cli, [])
        assert result.exit_code == 0
        assert "compute" in result.output

    def test_context_created_when_missing(self, runner, monkeypatch, tmp_path, foo_file):
        monkeypatch.chdir(tmp_path)
        result = runner.invoke(cli, ["compute", str(foo_file)])
        assert result.exit_code == 0, result.output
        assert result.output.startswith(FOO)

    def test_invalid_configuration_exits_with_config_code(self, runner, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("CONTENTDIGEST_LOGGING__LEVEL", "loud")
        result = runner.invoke(cli, ["algorithms"])
        assert result.exit_code == ConfigValidationError.exit_code == 78
        assert "invalid configuration" in result.output
        assert "logging.level" in result.output
