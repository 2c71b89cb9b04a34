from pathlib import Path
from typing import Optional

import typer

from kubesetctx.utils import SetContextError

app = typer.Typer()


def read_file(path: Optional[Path]) -> str:
    if path is None:
        return ""
    if not path.exists():
        raise typer.BadParameter(f"❌ File not found: {path}")
    return path.read_text(encoding="utf-8")


@app.command("generate")
def generate(
    method: str = typer.Option("default", help="default, service-account or service-principal"),
    kubeconfig: Optional[Path] = typer.Option(None, help="Kubeconfig file (default method)"),
    encoding: str = typer.Option("plaintext", help="Encoding of --kubeconfig: plaintext or base64"),
    k8s_url: str = typer.Option("", "--k8s-url", help="API server URL (service-account method)"),
    k8s_secret: Optional[Path] = typer.Option(
        None, "--k8s-secret", help="Service account token Secret manifest (service-account method)"
    ),
    context: str = typer.Option("", help="Context to make current"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write to this file instead of stdout"),
):
    """Assemble a kubeconfig and print it."""
    from kubesetctx.modules.context import set_context, write_kubeconfig
    from kubesetctx.modules.kubeconfig import build_kubeconfig, parse_method

    try:
        result = build_kubeconfig(
            parse_method(method),
            kubeconfig=read_file(kubeconfig),
            encoding=encoding,
            cluster_url=k8s_url,
            k8s_secret=read_file(k8s_secret),
        )
        result = set_context(result, context)
    except SetContextError as e:
        typer.echo(f"❌ {e}", err=True)
        raise typer.Exit(1)

    if output is None:
        typer.echo(result)
        return
    written = write_kubeconfig(result, directory=str(output.parent))
    written.replace(output)
    typer.echo(f"✅ Kubeconfig written to {output}")


@app.command("contexts")
def contexts(file: Path = typer.Argument(..., help="Kubeconfig file")):
    """List the contexts defined in a kubeconfig file."""
    from kubesetctx.utils.kube import list_contexts

    try:
        found = list_contexts(str(file))
    except (SetContextError, FileNotFoundError) as e:
        typer.echo(f"❌ {e}", err=True)
        raise typer.Exit(1)

    for ctx in found:
        marker = "*" if ctx["current"] else " "
        typer.echo(f"{marker} {ctx['name']}\tcluster={ctx['cluster']}\tuser={ctx['user']}")
