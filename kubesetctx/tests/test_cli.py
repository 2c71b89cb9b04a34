import json
import subprocess
import sys

from typer.testing import CliRunner

from kubesetctx.cli import app
from kubesetctx.modules.kubeconfig import create_kubeconfig

runner = CliRunner()


def run_cli_command(cmd):
    return subprocess.run([sys.executable, "-m", "kubesetctx.cli"] + cmd.split(), capture_output=True, text=True)


def test_help():
    result = run_cli_command("--help")
    assert "Usage" in result.stdout


def test_kubeconfig_commands_exist():
    result = runner.invoke(app, ["kubeconfig", "--help"])
    assert "generate" in result.output
    assert "contexts" in result.output


def test_action_run(set_inputs, tmp_path, monkeypatch):
    monkeypatch.setenv("GITHUB_ENV", str(tmp_path / "github_env"))
    set_inputs(method="default", kubeconfig="example kc")

    result = runner.invoke(app, ["action", "run"])

    assert result.exit_code == 0, result.output
    assert "KUBECONFIG=" in result.output
    assert "KUBECONFIG<<" in (tmp_path / "github_env").read_text()


def test_action_run_missing_method():
    result = runner.invoke(app, ["action", "run"])
    assert result.exit_code == 1
    assert "::error::Input required and not supplied: method" in result.output


def test_generate_service_account(tmp_path):
    secret = tmp_path / "secret.yml"
    secret.write_text("data:\n  ca.crt: Y2E=\n  token: dG9rZW4=\n")

    result = runner.invoke(app, [
        "kubeconfig", "generate", "--method", "service-account",
        "--k8s-url", "https://example.com", "--k8s-secret", str(secret),
    ])

    assert result.exit_code == 0, result.output
    assert result.output.strip() == create_kubeconfig("Y2E=", "token", "https://example.com")


def test_generate_to_file(tmp_path):
    source = tmp_path / "source.yaml"
    source.write_text(create_kubeconfig("cert", "token", "https://example.com"))
    output = tmp_path / "out" / "config"
    output.parent.mkdir()

    result = runner.invoke(app, [
        "kubeconfig", "generate", "--kubeconfig", str(source),
        "--context", "loaded-context", "--output", str(output),
    ])

    assert result.exit_code == 0, result.output
    assert json.loads(output.read_text())["current-context"] == "loaded-context"


def test_generate_unknown_context(tmp_path):
    source = tmp_path / "source.yaml"
    source.write_text(create_kubeconfig("cert", "token", "https://example.com"))

    result = runner.invoke(app, ["kubeconfig", "generate", "--kubeconfig", str(source), "--context", "nope"])

    assert result.exit_code == 1
    assert "Context 'nope' not found in kubeconfig" in result.output


def test_generate_requires_kubeconfig():
    result = runner.invoke(app, ["kubeconfig", "generate"])
    assert result.exit_code == 1
    assert "Input required and not supplied: kubeconfig" in result.output


def test_contexts(tmp_path):
    path = tmp_path / "config"
    path.write_text(create_kubeconfig("Y2E=", "token", "https://example.com"))

    result = runner.invoke(app, ["kubeconfig", "contexts", str(path)])

    assert result.exit_code == 0, result.output
    assert "* loaded-context\tcluster=default\tuser=default-user" in result.output


def test_contexts_missing_file(tmp_path):
    result = runner.invoke(app, ["kubeconfig", "contexts", str(tmp_path / "missing")])
    assert result.exit_code == 1
    assert "Kubeconfig not found" in result.output


def test_contexts_without_current_context(tmp_path):
    path = tmp_path / "config"
    path.write_text(
        "apiVersion: v1\nkind: Config\n"
        "clusters:\n- name: a\n  cluster:\n    server: https://a.example.com\n"
        "contexts:\n- name: one\n  context:\n    cluster: a\n    user: ci\n"
        "- name: two\n  context:\n    cluster: a\n    user: ci\n"
    )

    result = runner.invoke(app, ["kubeconfig", "contexts", str(path)])

    assert result.exit_code == 0, result.output
    assert "  one\tcluster=a\tuser=ci" in result.output
    assert "  two\tcluster=a\tuser=ci" in result.output
    assert "*" not in result.output
