"""Server commands."""

import cyclopts
import logfire
import uvicorn

from hrm.cli.console import get_console

app = cyclopts.App(name="server", help="Server management commands")


@app.command
def run(
    host: str = "127.0.0.1",
    port: int = 8000,
    reload: bool = False,
) -> None:
    """Run the HRM API server in the foreground.

    Args:
        host: Host to bind to.
        port: Port to listen on.
        reload: Restart on code changes (development only).
    """
    console = get_console()

    # Logfire must be configured before the app is created
    logfire.configure(send_to_logfire="if-token-present", service_name="hrm")

    console.success(f"Serving on http://{host}:{port}")
    uvicorn.run(
        "hrm.application.api.rest.app:create_app",
        factory=True,
        host=host,
        port=port,
        reload=reload,
    )
