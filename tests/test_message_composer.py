"""Tests for message composition."""
from datetime import datetime, timezone

import pytest

from iot_button_notifier.domain.entities.click_event import ClickEvent
from iot_button_notifier.domain.services.message_composer import (
    compose,
    display_name,
    FALLBACK_NAME,
    SUBJECT,
)

NOW = datetime(2026, 10, 19, 8, 15, 0, tzinfo=timezone.utc)


def _event(click_type: str) -> ClickEvent:
    return ClickEvent(serialNumber="G030JF053956LERW", batteryVoltage="1441mV", clickType=click_type)


@pytest.mark.parametrize(
    "click_type,name",
    [
        ("SINGLE", "Rita"),
        ("DOUBLE", "Mike"),
        ("LONG", FALLBACK_NAME),
        ("TRIPLE", FALLBACK_NAME),
        ("", FALLBACK_NAME),
    ],
)
def test_display_name(click_type, name):
    """Test click type to display name mapping."""
    assert display_name(click_type) == name


def test_compose_double_click():
    """Test body carries name, event fields and injected time."""
    message = compose(_event("DOUBLE"), NOW)
    
    assert message.subject == SUBJECT == "B6 Button pressed!"
    assert "Button was pressed by Mike at Mon Oct 19 2026 08:15:00 UTC." in message.body
    assert "Serial number:G030JF053956LERW -- processed by Lambda" in message.body
    assert "Click type: DOUBLE" in message.body
    assert "Battery voltage: 1441mV" in message.body


def test_compose_unknown_click_type_uses_fallback():
    """Test unrecognized click types do not fail."""
    message = compose(_event("BOGUS"), NOW)
    
    assert f"pressed by {FALLBACK_NAME} at" in message.body
    assert "Click type: BOGUS" in message.body


def test_compose_is_deterministic_for_fixed_time():
    """Test composition depends only on event and time."""
    assert compose(_event("SINGLE"), NOW) == compose(_event("SINGLE"), NOW)


def test_compose_uses_given_time():
    """Test the timestamp comes from the argument."""
    later = datetime(2026, 10, 20, 9, 0, 0, tzinfo=timezone.utc)
    
    assert "Tue Oct 20 2026 09:00:00 UTC" in compose(_event("SINGLE"), later).body


@pytest.mark.parametrize("raw,rendered", [(None, "None"), (5, "5")])
def test_compose_odd_click_type_values(raw, rendered):
    """Test null and non-string click types fall back instead of failing."""
    event = ClickEvent(serialNumber="G030JF053956LERW", batteryVoltage="1441mV", clickType=raw)
    
    message = compose(event, NOW)
    
    assert f"pressed by {FALLBACK_NAME} at" in message.body
    assert f"Click type: {rendered}" in message.body


def test_compose_missing_click_type():
    event = ClickEvent(serialNumber="G030JF053956LERW", batteryVoltage="1441mV")
    
    assert f"pressed by {FALLBACK_NAME} at" in compose(event, NOW).body
