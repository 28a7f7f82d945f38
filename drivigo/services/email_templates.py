from datetime import date, datetime
from typing import Any, Optional
from drivigo.schemas.notification import BookingDetails

SUBSCRIPTION_SUBJECT = "Thanks for subscribing to Drivigo!"
PAYMENT_RECEIPT_SUBJECT = "Your Drivigo Payment & Booking Details"

LESSONS_URL = "https://drivigo.com/lessons"
SETTINGS_URL = "https://drivigo.com/settings"
DASHBOARD_URL = "https://drivigo.com/learnerDashboard"
SUPPORT_URL = "https://drivigo.com/support"

INVALID_DATE = "Invalid Date"

LOGO_BLOCK = """
      <div style="text-align: center; margin-bottom: 30px;">
        <h1 style="display: inline-flex; align-items: center; font-size: 2rem; font-weight: 800; color: #111827; margin: 0;">
          Drivi
          <span style="
            background: linear-gradient(135deg, #ffbd40 0%, #e6a22a 100%);
            -webkit-background-clip: text;
            -webkit-text-fill-color: transparent;
            background-clip: text;
            font-family: inherit;
          ">
            go
          </span>
        </h1>
      </div>
"""

ADDRESS_LINE = """
      <p style="color: #9ca3af; font-size: 14px; margin-top: 20px;">
        Drivigo &bull; 123 Driving Street, Bengaluru, India
      </p>
"""


def _to_local(value: datetime) -> datetime:
    # Offset-aware instants are shown on the host's calendar
    if value.tzinfo is not None:
        return value.astimezone()
    return value


def format_start_date(value: Any) -> str:
    """
    Renders a booking start date in the host locale's date format (%x).
    Accepts date/datetime objects or ISO-8601 strings.
    """
    if isinstance(value, datetime):
        return _to_local(value).strftime("%x")
    if isinstance(value, date):
        return value.strftime("%x")
    if isinstance(value, str):
        raw = value.strip()
        if raw.endswith("Z"):
            raw = raw[:-1] + "+00:00"
        try:
            return _to_local(datetime.fromisoformat(raw)).strftime("%x")
        except ValueError:
            return INVALID_DATE
    return INVALID_DATE


def format_time_slots(value: Any) -> str:
    if isinstance(value, (list, tuple)):
        return ", ".join("" if slot is None else str(slot) for slot in value)
    return f"{value}"


def cta_button(url: str, label: str) -> str:
    return f"""
      <p style="text-align: center; margin: 30px 0;">
        <a href="{url}"
           style="
             display: inline-block;
             background-color: #ffbd40;
             color: #111827;
             font-weight: bold;
             text-decoration: none;
             padding: 12px 24px;
             border-radius: 6px;
             font-size: 16px;
           ">
          {label}
        </a>
      </p>
"""


def render_subscription_email(name: Optional[str]) -> str:
    # Values are interpolated as-is, callers own any escaping
    return f"""
<html lang="en">
  <head>
    <meta charset="UTF-8" />
    <title>Your Updates from Drivigo</title>
  </head>
  <body style="margin: 0; padding: 0; background-color: #f9fafb; font-family: Arial, sans-serif; color: #111827;">
    <div style="max-width: 600px; margin: auto; padding: 20px; background-color: #ffffff; border-radius: 8px; border: 1px solid #e5e7eb;">
{LOGO_BLOCK}
      <h2 style="margin-bottom: 10px; color: #111827;">Hello {name},</h2>

      <p style="color: #374151; font-size: 16px; line-height: 1.5; margin: 0 0 15px 0;">
        Thank you for subscribing to Drivigo! We're excited to keep you updated on driving lessons, instructor availability, and special offers to help you become a confident driver.
      </p>
{cta_button(LESSONS_URL, "Explore Driving Lessons")}
      <p style="color: #374151; font-size: 14px; margin-top: 40px;">
        Thanks for being part of the Drivigo community!<br />
        &ndash; The Drivigo Team
      </p>

      <p style="color: #6b7280; font-size: 14px; line-height: 1.4; margin: 0 0 8px 0;">
        You're receiving this email because you subscribed to Drivigo updates.<br />
        Want to manage your preferences? <a href="{SETTINGS_URL}" style="color: #2563eb; text-decoration: none;">Click here</a>.
      </p>
{ADDRESS_LINE}
    </div>
  </body>
</html>
"""


def _detail_row(label: str, value: str, last: bool = False) -> str:
    border = "" if last else ' style="border-bottom: 1px solid #d1d5db; padding-bottom: 5px;"'
    return f"""
          <tr>
            <th align="left"{border}>{label}</th>
            <td{border}>{value}</td>
          </tr>"""


def render_payment_receipt_email(name: Optional[str], booking: BookingDetails) -> str:
    rows = "".join([
        _detail_row("Instructor Name", f"{booking.instructor_name}"),
        _detail_row("Session Plan", f"{booking.session_plan}"),
        _detail_row("Start Date", format_start_date(booking.start_date)),
        _detail_row("Time Slots", format_time_slots(booking.time_slots)),
        _detail_row("Pickup Location", f"{booking.pickup_location}", last=True),
    ])

    return f"""
<html lang="en">
  <head>
    <meta charset="UTF-8" />
    <title>Drivigo Payment &amp; Booking Confirmation</title>
  </head>
  <body style="margin: 0; padding: 0; background-color: #f9fafb; font-family: Arial, sans-serif; color: #111827;">
    <div style="max-width: 600px; margin: auto; padding: 20px; background-color: #ffffff; border-radius: 8px; border: 1px solid #e5e7eb;">
{LOGO_BLOCK}
      <h2 style="margin-bottom: 10px; color: #111827;">Hello {name},</h2>
      <p style="color: #374151; font-size: 16px; line-height: 1.5; margin: 0 0 15px 0;">
        Thank you for your payment! &#127881;
        Your booking with <strong>Drivigo</strong> is confirmed.
        Here are your booking details:
      </p>

      <div style="background-color: #f3f4f6; border-radius: 8px; padding: 20px; margin-top: 20px;">
        <table width="100%" cellpadding="8" cellspacing="0" style="border-collapse: collapse; color: #111827; font-size: 15px;">{rows}
        </table>
      </div>
{cta_button(DASHBOARD_URL, "View Your Dashboard")}
      <p style="color: #6b7280; font-size: 14px; line-height: 1.4; margin: 0 0 8px 0;">
        If you have any questions, reply to this email or visit our
        <a href="{SUPPORT_URL}" style="color: #2563eb; text-decoration: none;">support page</a>.
      </p>
{ADDRESS_LINE}
    </div>
  </body>
</html>
"""
