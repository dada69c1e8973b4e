import logging
import sys
from typing import Optional

import typer
from pydantic import ValidationError

from cloakroom.infrastructure.config import settings
from cloakroom.presentation import cli
from cloakroom.services.cloakroom_service import CloakroomSession, build_cloakroom

app = typer.Typer(
    name="cloakroom",
    help="Interactive model of a cloakroom with numbered lockers",
    add_completion=False,
)


@app.command()
def run(
    num_lockers: Optional[int] = typer.Option(None, "--lockers", "-l", help="Number of lockers (1-1000)"),
    capacity: Optional[int] = typer.Option(None, "--capacity", "-c", help="Items each locker can hold (5-15)"),
    slot_store: Optional[str] = typer.Option(None, "--slot-store", help="In-use table backend: sqlite or memory"),
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Logging level written to stderr"),
) -> None:
    """Run the cloakroom menu until Quit is chosen."""
    overrides = {
        "num_lockers": num_lockers,
        "max_items_per_locker": capacity,
        "slot_store": slot_store,
        "log_level": log_level,
    }
    run_settings = settings.model_copy(update={k: v for k, v in overrides.items() if v is not None})
    if run_settings.slot_store not in ("sqlite", "memory"):
        cli.print_err(f"unknown slot store {run_settings.slot_store!r}, choose sqlite or memory")
        raise typer.Exit(1)

    logging.basicConfig(
        level=run_settings.log_level.upper(),
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        params = cli.input_cloakroom_params(run_settings)
    except ValidationError as e:
        cli.print_err(f"invalid cloakroom parameters: {e.errors()[0]['msg']}")
        raise typer.Exit(1)

    session = CloakroomSession(build_cloakroom(run_settings, params))
    cli.run_menu(session)


if __name__ == "__main__":
    app()
