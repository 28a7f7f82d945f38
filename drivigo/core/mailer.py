import logging
import smtplib
import ssl
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText
from email.utils import formataddr
from typing import Optional
from drivigo.core.config import Settings

logger = logging.getLogger(__name__)

SMTPS_PORT = 465

class SMTPMailer:
    """
    Process-wide SMTP transport.

    Holds the relay configuration only; every message is sent over its own
    connection, so one instance can serve concurrent requests.
    """

    def __init__(
        self,
        host: str,
        port: int,
        username: Optional[str] = None,
        password: Optional[str] = None,
        sender_name: str = "Drivigo",
        timeout: float = 30.0,
    ):
        self.host = host
        self.port = port
        self.username = username
        self.password = password
        self.sender_name = sender_name
        self.timeout = timeout

    @classmethod
    def from_settings(cls, settings: Settings) -> "SMTPMailer":
        if not settings.SMTP_HOST:
            logger.warning("SMTP_HOST not set. Email delivery will fail.")
        return cls(
            host=settings.SMTP_HOST,
            port=settings.SMTP_PORT,
            username=settings.SMTP_USER or None,
            password=settings.SMTP_PASS,
            sender_name=settings.MAIL_FROM_NAME,
            timeout=settings.SMTP_TIMEOUT_SECONDS,
        )

    @property
    def use_ssl(self) -> bool:
        return self.port == SMTPS_PORT

    @property
    def sender(self) -> str:
        return formataddr((self.sender_name, self.username or ""))

    def build_message(self, to: str, subject: str, html: str) -> MIMEMultipart:
        message = MIMEMultipart("alternative")
        message["From"] = self.sender
        message["To"] = to
        message["Subject"] = subject
        message.attach(MIMEText(html, "html", "utf-8"))
        return message

    def send_html(self, to: str, subject: str, html: str) -> None:
        """Blocking send; raises smtplib.SMTPException or OSError on failure."""
        message = self.build_message(to, subject, html)
        context = ssl.create_default_context()

        if self.use_ssl:
            server = smtplib.SMTP_SSL(self.host, self.port, timeout=self.timeout, context=context)
        else:
            server = smtplib.SMTP(self.host, self.port, timeout=self.timeout)

        with server:
            if not self.use_ssl:
                server.ehlo()
                if server.has_extn("starttls"):
                    server.starttls(context=context)
                    server.ehlo()
            if self.username:
                server.login(self.username, self.password or "")
            server.send_message(message)

        logger.info(f"Email '{subject}' sent to {to}")
