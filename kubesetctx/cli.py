import typer
import logging
import sys
from kubesetctx.commands import action, kubeconfig
from kubesetctx.logging import setup_logging

# Create a callback for global options
app = typer.Typer()

# Global debug flag
debug_mode = False

# Add all command groups
app.add_typer(action.app, name="action")
app.add_typer(kubeconfig.app, name="kubeconfig")

# Global options callback
@app.callback()
def main(
    debug: bool = typer.Option(False, "--debug", "-d", help="Enable debug logging", envvar="RUNNER_DEBUG"),
):
    """kubesetctx - kubeconfig assembly for CI/CD actions."""
    global debug_mode
    debug_mode = debug
    setup_logging(debug)
    if debug:
        logging.debug("Debug mode enabled")


def run():
    """Console entry point."""
    try:
        app()
    except Exception as e:
        if debug_mode:
            import traceback
            logging.error(f"Unhandled exception: {e}\n{traceback.format_exc()}")
        else:
            logging.error(f"Error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    run()
