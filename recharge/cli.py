"""Command-line entry points.

    recharge-deploy [MESSAGE]          build and publish to the hosting branch
    recharge submit NAME DEST...       send a destination selection
    recharge destinations              list destinations with coordinates
"""

from __future__ import annotations

import json
from typing import Optional, Tuple

import click

from .container import get_container
from .domain.errors import DeploymentError, DestinationNotFoundError, PublishError
from .domain.models import DeployPhase
from .logging_config import configure_logging
from .ports.submission import SubmissionPort
from .services import DeploymentService, ItineraryService

PHASE_LABELS = {
    DeployPhase.BUILDING: "📦 Building project...",
    DeployPhase.PREPARING_WORKSPACE: "🌿 Setting up hosting branch...",
    DeployPhase.SYNCING: "📋 Copying build files...",
    DeployPhase.PUBLISHING: "📤 Committing and pushing...",
}


def _echo_phase(phase: DeployPhase) -> None:
    label = PHASE_LABELS.get(phase)
    if label:
        click.echo(label)


@click.command(name="deploy")
@click.argument("message", required=False)
def deploy(message: Optional[str]) -> None:
    """Build the site and publish it to the hosting branch."""
    container = get_container()
    configure_logging(container.config.observability)

    service: DeploymentService = container.resolve(DeploymentService)
    service.on_phase = _echo_phase

    click.echo("🚀 Starting deployment...\n")
    try:
        report = service.deploy(message)
    except DeploymentError as e:
        click.echo(f"❌ {e}", err=True)
        if isinstance(e, PublishError):
            click.echo(
                "💡 Tip: Make sure you have committed your changes "
                "to the main branch first!",
                err=True,
            )
        raise SystemExit(1)

    click.echo(f"\n✅ Deployment complete! ({report.commit_message})")
    site_url = container.config.deploy.site_url
    if site_url:
        click.echo(f"🌐 Your site should be live at: {site_url}")


@click.command(name="submit")
@click.argument("name")
@click.argument("destinations", nargs=-1)
def submit(name: str, destinations: Tuple[str, ...]) -> None:
    """Submit NAME with the selected DESTINATIONS."""
    container = get_container()
    configure_logging(container.config.observability)

    itinerary: ItineraryService = container.resolve(ItineraryService)
    unknown = itinerary.unknown_destinations(destinations)
    if unknown:
        click.echo(f"Unknown destinations: {', '.join(unknown)}", err=True)

    client: SubmissionPort = container.resolve(SubmissionPort)
    result = client.submit(name, list(destinations))
    click.echo(json.dumps(result.to_dict()))
    if not result.success:
        raise SystemExit(1)


@click.command(name="destinations")
@click.option("--route", is_flag=True, help="Also print the total route distance.")
def destinations(route: bool) -> None:
    """List selectable destinations in display order."""
    container = get_container()
    itinerary: ItineraryService = container.resolve(ItineraryService)
    base_path = container.config.base_path

    stops = []
    for entry in itinerary.destinations():
        try:
            location = itinerary.coordinates(entry.id)
            coords = f"{location.latitude:.4f}, {location.longitude:.4f}"
            stops.append(entry.id)
        except DestinationNotFoundError:
            coords = "-"
        click.echo(
            f"{entry.id:<14} {entry.dates:<22} {coords:<22} {entry.image_url(base_path)}"
        )

    if route:
        click.echo(f"Route distance: {itinerary.route_distance_km(stops):.0f} km")


@click.group()
def main() -> None:
    """Tooling for the travel itinerary site."""


main.add_command(deploy)
main.add_command(submit)
main.add_command(destinations)


if __name__ == "__main__":
    main()
