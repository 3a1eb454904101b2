from __future__ import annotations

import asyncio
import json
import logging
from pathlib import Path
from typing import Optional

import typer

from .carcost import CarCategory, CarEngine, car_cost_average_caa
from .data_sources import RoutingSettings, TransitionRoutingClient
from .model import monthly_mortgage_payment
from .server import RESULTS_SECTION, update_results_fields
from .validations import interest_rate_errors

app = typer.Typer(help="Housing cost and transit accessibility for candidate addresses.")


@app.callback()
def main(
    log_level: str = typer.Option("WARNING", help="Logging level, e.g., INFO or DEBUG."),
) -> None:
    logging.basicConfig(
        level=log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@app.command()
def mortgage(
    principal: float = typer.Argument(..., help="Mortgage amount in dollars."),
    rate: float = typer.Argument(..., help="Nominal annual rate in percent, e.g., 5.25."),
    years: int = typer.Argument(25, help="Amortization period in years."),
) -> None:
    """
    Monthly payment of a mortgage compounded semi-annually.
    """
    errors = interest_rate_errors(rate)
    if errors:
        raise typer.BadParameter(errors[0], param_hint="RATE")
    try:
        payment = monthly_mortgage_payment(principal, rate / 100.0, years * 12)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc
    typer.echo(f"Monthly payment: ${payment:,.2f}")


@app.command("car-cost")
def car_cost(
    category: CarCategory = typer.Argument(..., help="Car category."),
    engine: CarEngine = typer.Argument(..., help="Engine type."),
) -> None:
    """
    Average annual cost of owning a car, from CAA figures.
    """
    try:
        cost = car_cost_average_caa(category, engine)
    except ValueError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1)
    typer.echo(f"Annual cost: ${cost:,.2f} (${cost / 12:,.2f}/month)")


@app.command()
def results(
    interview_file: Path = typer.Argument(
        ..., exists=True, dir_okay=False, help="Interview snapshot as JSON."
    ),
    scenario_id: Optional[str] = typer.Option(
        None, help="Transit scenario id (env TRANSIT_SCENARIO_SE if omitted)."
    ),
    base_url: Optional[str] = typer.Option(
        None, help="Transition API URL (env TRANSITION_API_URL if omitted)."
    ),
    api_token: Optional[str] = typer.Option(
        None, help="Transition API token (env TRANSITION_API_TOKEN if omitted)."
    ),
) -> None:
    """
    Compute the results section values for an interview and dump them as JSON.
    """
    try:
        settings = RoutingSettings.from_env()
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc
    if scenario_id is not None:
        settings.scenario_id = scenario_id
    if base_url is not None:
        settings.base_url = base_url
    if api_token is not None:
        settings.api_token = api_token

    interview = json.loads(interview_file.read_text(encoding="utf-8"))
    client = TransitionRoutingClient.from_settings(settings)
    updated_values = asyncio.run(
        update_results_fields(
            interview, [{"section": RESULTS_SECTION}], client, settings.scenario_id
        )
    )
    typer.echo(json.dumps(updated_values, indent=2))


if __name__ == "__main__":
    app()
