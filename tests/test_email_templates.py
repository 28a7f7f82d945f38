"""Rendering of the transactional email templates."""

from datetime import date, datetime, timezone

from drivigo.schemas.notification import BookingDetails
from drivigo.services.email_templates import (
    INVALID_DATE,
    format_start_date,
    format_time_slots,
    render_payment_receipt_email,
    render_subscription_email,
)


def test_subscription_email_greets_by_name():
    html = render_subscription_email("Alice")

    assert "Hello Alice," in html
    assert "https://drivigo.com/lessons" in html
    assert "Explore Driving Lessons" in html


def test_values_are_not_escaped():
    html = render_subscription_email("<b>Alice</b>")

    assert "Hello <b>Alice</b>," in html


def test_start_date_uses_locale_format():
    expected = date(2025, 3, 14).strftime("%x")

    assert format_start_date("2025-03-14") == expected
    assert format_start_date(date(2025, 3, 14)) == expected


def test_aware_start_date_shown_in_host_timezone():
    instant = datetime(2025, 3, 14, 20, 0, tzinfo=timezone.utc)
    expected = instant.astimezone().strftime("%x")

    assert format_start_date("2025-03-14T20:00:00Z") == expected
    assert format_start_date("2025-03-14T20:00:00+00:00") == expected
    assert format_start_date(instant) == expected


def test_unparseable_start_date():
    assert format_start_date("next tuesday") == INVALID_DATE
    assert format_start_date(None) == INVALID_DATE


def test_time_slots_joined_when_list():
    assert format_time_slots(["7:00 AM", "8:00 AM"]) == "7:00 AM, 8:00 AM"
    assert format_time_slots("7:00 AM") == "7:00 AM"


def test_payment_receipt_renders_booking_details():
    booking = BookingDetails(
        instructor_name="Ravi Kumar",
        session_plan="10 sessions",
        start_date="2025-03-14",
        time_slots=["7:00 AM", "8:00 AM"],
        pickup_location="Indiranagar Metro",
    )

    html = render_payment_receipt_email("Alice", booking)

    assert "Hello Alice," in html
    assert "Ravi Kumar" in html
    assert "10 sessions" in html
    assert date(2025, 3, 14).strftime("%x") in html
    assert "7:00 AM, 8:00 AM" in html
    assert "Indiranagar Metro" in html
    assert "https://drivigo.com/learnerDashboard" in html


def test_missing_booking_fields_render_placeholder():
    html = render_payment_receipt_email("Alice", BookingDetails())

    assert "<td style=\"border-bottom: 1px solid #d1d5db; padding-bottom: 5px;\">None</td>" in html
    assert INVALID_DATE in html
