import smtplib
import logging
import time
from typing import List, Optional, Tuple
from email.mime.text import MIMEText
from email.mime.multipart import MIMEMultipart
from email.utils import formataddr
from contextlib import contextmanager

logger = logging.getLogger(__name__)

# (email, display name)
Recipient = Tuple[str, Optional[str]]


class EmailClient:
    """Reusable, fault-tolerant SMTP email client."""

    def __init__(
        self,
        smtp_host: Optional[str],
        smtp_port: int,
        username: Optional[str],
        password: Optional[str],
        use_ssl: bool = False,
        max_retries: int = 3,
        retry_delay: int = 3
    ):
        self.smtp_host = smtp_host
        self.smtp_port = smtp_port
        self.username = username
        self.password = password
        self.use_ssl = use_ssl
        self.max_retries = max_retries
        self.retry_delay = retry_delay

    @property
    def is_configured(self) -> bool:
        return bool(self.smtp_host)

    @contextmanager
    def _connection(self):
        """Context-managed SMTP connection."""
        server = None
        try:
            if self.use_ssl:
                server = smtplib.SMTP_SSL(self.smtp_host, self.smtp_port)
            else:
                server = smtplib.SMTP(self.smtp_host, self.smtp_port)
                server.starttls()
            if self.username:
                server.login(self.username, self.password or "")
            yield server
        finally:
            if server:
                try:
                    server.quit()
                except smtplib.SMTPException as e:
                    logger.warning(f"Error closing SMTP connection: {e}")

    @staticmethod
    def _build_message(
        sender: str,
        recipients: List[Recipient],
        subject: str,
        text_body: str,
        html_body: Optional[str] = None
    ) -> MIMEMultipart:
        msg = MIMEMultipart("alternative")
        msg["From"] = sender
        msg["To"] = ", ".join(formataddr((name or "", email))
                              for email, name in recipients)
        msg["Subject"] = subject

        msg.attach(MIMEText(text_body or "", "plain"))
        if html_body:
            msg.attach(MIMEText(html_body, "html"))
        return msg

    def send_email(
        self,
        sender: str,
        recipients: List[Recipient],
        subject: str,
        text_body: str,
        html_body: Optional[str] = None
    ) -> bool:
        """Send an email with retries and logging."""
        if not self.is_configured:
            logger.warning(
                "SMTP host not configured, skipping email '%s'", subject)
            return False

        msg = self._build_message(
            sender, recipients, subject, text_body, html_body)
        addresses = [email for email, _ in recipients]

        for attempt in range(1, self.max_retries + 1):
            try:
                with self._connection() as server:
                    server.sendmail(sender, addresses, msg.as_string())
                logger.info(f"Email sent successfully to {', '.join(addresses)}")
                return True
            except smtplib.SMTPAuthenticationError:
                logger.error(
                    "SMTP authentication failed, check username/password.")
                break
            except (smtplib.SMTPException, OSError) as e:
                logger.error(f"Attempt {attempt} failed: {e}")
                time.sleep(self.retry_delay)

        logger.error("Failed to send email after all retry attempts.")
        return False
