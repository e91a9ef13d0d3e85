import logging
import re
from functools import lru_cache
from typing import List, Optional, Tuple

from sqlalchemy.orm import Session

from shared.models.email_template import EmailTemplate
from ..utils.email_client import EmailClient, Recipient
from ..core.config import settings

logger = logging.getLogger(__name__)


class EmailHelper:
    """Reusable helper to send templated emails via EmailClient."""

    def __init__(self, mailer: Optional[EmailClient] = None):
        self.mailer = mailer or EmailClient(
            smtp_host=settings.SMTP_HOST,
            smtp_port=settings.SMTP_PORT,
            username=settings.SMTP_USERNAME,
            password=settings.SMTP_PASSWORD,
            use_ssl=settings.SMTP_USE_SSL,
        )

    @staticmethod
    def _fetch_template(db: Session, template_name: str) -> Optional[EmailTemplate]:
        return (
            EmailTemplate.active_query(db)
            .filter(EmailTemplate.name == template_name)
            .first()
        )

    def render_template(self, db: Session, template_name: str, context: dict) -> Optional[Tuple[str, str]]:
        """
        Render a stored template into (html, text).

        Returns None when the template is missing or a placeholder cannot
        be filled; callers treat that as "nothing to send".
        """
        template = self._fetch_template(db, template_name)
        if not template:
            logger.error(f"Email template '{template_name}' not found")
            return None

        try:
            html_body = template.html.format(**context)
            text_body = (template.text or self.strip_html_tags(template.html)).format(**context)
        except (KeyError, IndexError, ValueError) as e:
            logger.error(
                f"Missing variable in email template '{template_name}': {e}")
            return None
        return html_body, text_body

    def send_email(
        self,
        recipients: List[Recipient],
        subject: str,
        html_body: str,
        text_body: Optional[str] = None
    ) -> bool:
        """Send an already rendered email. Safe to run as a background task."""
        return self.mailer.send_email(
            sender=settings.EMAIL_SENDER,
            recipients=recipients,
            subject=subject,
            text_body=text_body or self.strip_html_tags(html_body),
            html_body=html_body,
        )

    @staticmethod
    def strip_html_tags(html: str) -> str:
        """Basic HTML to plain text converter."""
        return re.sub("<.*?>", "", html or "")


@lru_cache
def get_email_helper() -> EmailHelper:
    return EmailHelper()
