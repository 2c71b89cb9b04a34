import typer

from kubesetctx.utils import SetContextError
from kubesetctx.utils.workflow import set_failed

app = typer.Typer()

@app.command("run")
def run_action():
    """Set the cluster context from the action's INPUT_* variables."""
    from kubesetctx.modules import context
    try:
        path = context.run()
    except SetContextError as e:
        set_failed(str(e))
        return
    typer.echo(f"✅ KUBECONFIG={path}")
