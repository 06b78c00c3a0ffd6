"""Email notification module for welcome and daily news emails."""

import html
from datetime import datetime, timezone
from typing import Optional

from loguru import logger
from sendgrid import SendGridAPIClient
from sendgrid.helpers.mail import Content, Email, Mail, To

from src.config import config


WELCOME_SUBJECT = "Welcome to Signalist - your stock market toolkit is ready!"
NEWS_SUMMARY_SUBJECT = "Market News Summary Today - {date}"


WELCOME_EMAIL_TEMPLATE = """
<!DOCTYPE html>
<html>
<head>
    <meta charset="utf-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
</head>
<body style="margin: 0; padding: 0; background-color: #050505; font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif;">
    <div style="max-width: 600px; margin: 0 auto; padding: 40px 20px;">
        <div style="background-color: #141414; border: 1px solid #30333A; border-radius: 8px; padding: 40px;">
            <h1 style="margin: 0 0 30px 0; font-size: 24px; font-weight: 600; color: #FDD458; line-height: 1.2;">Welcome aboard {{name}}</h1>

            {{intro}}

            <p style="margin: 0 0 15px 0; font-size: 16px; font-weight: 600; color: #CCDADC;">Here's what you can do right now:</p>
            <ul style="margin: 0 0 30px 0; padding-left: 20px; color: #CCDADC; font-size: 16px; line-height: 1.6;">
                <li>Set up your watchlist to follow your favorite stocks</li>
                <li>Open any symbol for live charts, technicals and financials</li>
                <li>Get a daily news digest tailored to the stocks you follow</li>
            </ul>

            <div style="text-align: center; margin: 30px 0;">
                <a href="{{dashboardUrl}}" style="display: inline-block; background: #FDD458; color: #000000; text-decoration: none; padding: 12px 28px; border-radius: 8px; font-weight: 500;">Go to Dashboard</a>
            </div>

            <p style="margin: 40px 0 0 0; font-size: 14px; color: #9095A1; text-align: center;">Signalist HQ</p>
        </div>
    </div>
</body>
</html>
"""


NEWS_SUMMARY_EMAIL_TEMPLATE = """
<!DOCTYPE html>
<html>
<head>
    <meta charset="utf-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
</head>
<body style="margin: 0; padding: 0; background-color: #050505; font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif;">
    <div style="max-width: 600px; margin: 0 auto; padding: 40px 20px;">
        <div style="background-color: #141414; border: 1px solid #30333A; border-radius: 8px; padding: 40px;">
            <h1 style="margin: 0 0 10px 0; font-size: 24px; font-weight: 600; color: #FDD458; line-height: 1.2;">Market News Summary Today</h1>
            <p style="margin: 0 0 30px 0; font-size: 14px; color: #6B7280;">{{date}}</p>

            {{newsContent}}

            <div style="margin-top: 40px; padding-top: 20px; border-top: 1px solid #30333A; text-align: center; color: #9095A1; font-size: 12px;">
                <p>You're receiving this because you subscribed to Signalist news updates.</p>
                <p><a href="{{dashboardUrl}}" style="color: #FDD458;">Visit Signalist</a></p>
            </div>
        </div>
    </div>
</body>
</html>
"""


def format_date_today(now: Optional[datetime] = None) -> str:
    """Today's date as e.g. 'Monday, October 19, 2026' (UTC)."""
    today = now or datetime.now(timezone.utc)
    return f"{today:%A}, {today:%B} {today.day}, {today.year}"


class EmailNotifier:
    """Send transactional emails through SendGrid."""

    def __init__(self, api_key: Optional[str] = None):
        """Initialize email notifier with SendGrid API key."""
        self.api_key = config.email.sendgrid_api_key if api_key is None else api_key
        self.from_email = config.email.from_email
        self.from_name = config.email.from_name
        self.dashboard_url = config.email.dashboard_url
        self.enabled = bool(self.api_key)

        if not self.enabled:
            logger.warning("SENDGRID_API_KEY not set. Email notifications disabled.")

    def send_email(self, to_email: str, subject: str, html_content: str, text_content: str = None) -> bool:
        """Send an email via SendGrid.

        Args:
            to_email: Recipient address
            subject: Email subject
            html_content: HTML body content
            text_content: Plain text fallback (optional)

        Returns:
            True if sent successfully
        """
        if not self.enabled:
            logger.info(f"Email disabled - would send: {subject} to {to_email}")
            return False

        try:
            message = Mail(
                from_email=Email(self.from_email, self.from_name),
                to_emails=To(to_email.strip()),
                subject=subject,
                html_content=html_content
            )

            if text_content:
                message.add_content(Content("text/plain", text_content))

            sg = SendGridAPIClient(self.api_key)
            response = sg.send(message)

            if response.status_code in [200, 201, 202]:
                logger.info(f"Email sent successfully: {subject} -> {to_email}")
                return True
            else:
                logger.error(f"Email failed with status {response.status_code}")
                return False

        except Exception as e:
            logger.error(f"Error sending email to {to_email}: {e}")
            return False

    def send_welcome_email(self, email: str, name: str, intro: str) -> bool:
        """Send the welcome email with the personalized intro block."""
        html_content = (
            WELCOME_EMAIL_TEMPLATE
            .replace("{{name}}", html.escape(name))
            .replace("{{intro}}", intro)
            .replace("{{dashboardUrl}}", self.dashboard_url)
        )
        text_content = f"Welcome aboard {name}\n\nStart tracking the markets: {self.dashboard_url}"
        return self.send_email(email, WELCOME_SUBJECT, html_content, text_content)

    def send_news_summary_email(self, email: str, date: str, news_content: str) -> bool:
        """Send the daily news digest."""
        html_content = (
            NEWS_SUMMARY_EMAIL_TEMPLATE
            .replace("{{date}}", date)
            .replace("{{newsContent}}", news_content)
            .replace("{{dashboardUrl}}", self.dashboard_url)
        )
        subject = NEWS_SUMMARY_SUBJECT.format(date=date)
        return self.send_email(email, subject, html_content)


# Global notifier instance
email_notifier = EmailNotifier()


def send_welcome_email(email: str, name: str, intro: str) -> bool:
    """Convenience function to send the welcome email."""
    return email_notifier.send_welcome_email(email, name, intro)


def send_news_summary_email(email: str, date: str, news_content: str) -> bool:
    """Convenience function to send the news digest."""
    return email_notifier.send_news_summary_email(email, date, news_content)
