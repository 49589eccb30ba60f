"""CLI entry point for local development."""
from typing import Optional

import typer

from iot_button_notifier.domain.entities.click_event import ClickEvent, ClickType
from iot_button_notifier.infra.common import load_app_config, setup_logging, get_logger
from iot_button_notifier.use_cases.notify_button_press import notify_button_press

setup_logging()
logger = get_logger(__name__)


def run(
    serial_number: str = typer.Argument(..., help="Button serial number"),
    click_type: ClickType = typer.Option(ClickType.SINGLE, "--click-type", help="Click type to simulate"),
    battery_voltage: str = typer.Option("1500mV", "--battery-voltage", help="Reported battery voltage"),
    env: Optional[str] = typer.Option(None, "--env", help="Environment (defaults to ENV or local)"),
):
    """Simulate a button press (local development)."""
    app_config = load_app_config(env)
    event = ClickEvent(
        serial_number=serial_number,
        battery_voltage=battery_voltage,
        click_type=click_type.value,
    )
    
    result = notify_button_press(event=event, app_config=app_config)
    
    typer.echo(f"Published: message_id={result.message_id}, topic={result.topic_arn}")


def cli() -> None:
    typer.run(run)


if __name__ == "__main__":
    cli()
