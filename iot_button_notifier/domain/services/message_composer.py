"""Message composition for button presses."""
from datetime import datetime
from typing import Optional

from iot_button_notifier.domain.entities.click_event import ClickEvent, ClickType
from iot_button_notifier.domain.entities.notification import NotificationMessage

SUBJECT = "B6 Button pressed!"
FALLBACK_NAME = "¯\\_(ツ)_/¯"

DISPLAY_NAMES = {
    ClickType.SINGLE.value: "Rita",
    ClickType.DOUBLE.value: "Mike",
}

BODY_TEMPLATE = """
Naiya had her B6!
Button was pressed by {name} at {timestamp}.

---
Serial number:{serial_number} -- processed by Lambda
Click type: {click_type}
Battery voltage: {battery_voltage}

"""


def display_name(click_type: Optional[str]) -> str:
    """Map a click type to the person it stands for."""
    return DISPLAY_NAMES.get(click_type, FALLBACK_NAME)


def format_timestamp(now: datetime) -> str:
    """Format press time, e.g. 'Mon Oct 19 2026 08:15:00 UTC'."""
    return now.strftime("%a %b %d %Y %H:%M:%S %Z").rstrip()


def compose(event: ClickEvent, now: datetime) -> NotificationMessage:
    """
    Build the notification for a click event.
    
    Args:
        event: Click event
        now: Time of handling (not of the press itself)
        
    Returns:
        NotificationMessage with fixed subject and templated body
    """
    body = BODY_TEMPLATE.format(
        name=display_name(event.click_type),
        timestamp=format_timestamp(now),
        serial_number=event.serial_number,
        click_type=event.click_type,
        battery_voltage=event.battery_voltage,
    )
    return NotificationMessage(subject=SUBJECT, body=body)
