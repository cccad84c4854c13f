"""CLI: tests for the zeta-fn command line."""

from typer.testing import CliRunner

from zeta_fn_cli import __version__
from zeta_fn_cli.main import app

runner = CliRunner()


def test_version():
    result = runner.invoke(app, ["version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_arity_of_path():
    result = runner.invoke(app, ["arity", "tests.funcs:add3"])
    assert result.exit_code == 0
    assert "requires 3" in result.output


def test_arity_of_unresolvable_path():
    result = runner.invoke(app, ["arity", "tests.funcs:missing"])
    assert result.exit_code == 1
    assert "INVALID_ARGUMENT" in result.output


def test_config_show(tmp_path):
    path = tmp_path / "zeta-fn.yaml"
    path.write_text("memoize:\n  key_digest: md5\n", encoding="utf-8")
    result = runner.invoke(app, ["config", "show", "--path", str(path)])
    assert result.exit_code == 0
    assert "md5" in result.output
    assert "max_steps" in result.output


def test_config_show_invalid(tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text("trampoline:\n  max_steps: -3\n", encoding="utf-8")
    result = runner.invoke(app, ["config", "show", "--path", str(path)])
    assert result.exit_code == 1


def test_version_option():
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_config_show_non_string_key(tmp_path):
    path = tmp_path / "numeric.yaml"
    path.write_text("1: x\n", encoding="utf-8")
    result = runner.invoke(app, ["config", "show", "--path", str(path)])
    assert result.exit_code == 1
    assert "INVALID_ARGUMENT" in result.output
