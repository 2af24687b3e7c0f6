"""
SMS Service for sending visitor passes via Twilio.
"""
from typing import Optional
import logging
from twilio.rest import Client
from twilio.base.exceptions import TwilioException

from app.core.config import settings

logger = logging.getLogger(__name__)


class SMSService:
    """
    Service for sending SMS notifications via Twilio.
    """

    def __init__(self):
        """Initialize Twilio client with credentials from settings."""
        self.enabled = settings.twilio_enabled and settings.twilio_sms_enabled
        self.client = None

        if self.enabled and settings.twilio_account_sid and settings.twilio_auth_token:
            try:
                self.client = Client(
                    settings.twilio_account_sid,
                    settings.twilio_auth_token,
                    timeout=10  # 10 second timeout for Twilio API calls
                )
                logger.info("Twilio SMS client initialized successfully")
            except Exception as e:
                logger.error(f"Failed to initialize Twilio client: {e}")
                self.enabled = False
        else:
            logger.info("Twilio SMS is disabled or credentials are missing")
            self.enabled = False

    def format_phone_number(self, phone_number: str) -> str:
        """
        Format phone number to E.164 format for Twilio.

        Args:
            phone_number: Phone number in any format

        Returns:
            Formatted phone number in E.164 format (e.g., +911234567890)
        """
        if not phone_number:
            return ""

        digits = ''.join(filter(str.isdigit, phone_number))
        if phone_number.strip().startswith('+'):
            return f"+{digits}"

        # Trunk prefix
        if digits.startswith('0'):
            digits = digits[1:]

        country_code = settings.default_country_code
        if len(digits) == 10:
            return f"+{country_code}{digits}"
        return f"+{digits}"

    def build_visitor_pass_message(
        self,
        visitor_name: Optional[str],
        otp: str,
        qr_token: str,
        visitor_id: Optional[int] = None,
    ) -> str:
        """Text body of the visitor pass shared with the guest."""
        message_parts = [
            f"Visitor Pass for {visitor_name or 'your visit'}",
            "",
            f"OTP: {otp}",
            f"QR Token: {qr_token}",
        ]
        if visitor_id is not None:
            message_parts.append(f"Visitor ID: {visitor_id}")
        message_parts.extend([
            "",
            "Show the QR code or tell the OTP to security at the gate.",
        ])
        return "\n".join(message_parts)

    def send_visitor_pass(
        self,
        to_phone: str,
        visitor_name: Optional[str],
        otp: str,
        qr_token: str,
        visitor_id: Optional[int] = None,
    ) -> bool:
        """
        Send the check-in credentials to the visitor's phone.

        Returns:
            True if SMS was sent successfully, False otherwise
        """
        if not self.enabled or not self.client:
            logger.warning("SMS service is disabled. Visitor pass not sent.")
            return False

        if not to_phone:
            logger.warning(f"No phone number for visitor {visitor_id}. Visitor pass not sent.")
            return False

        if settings.twilio_custom_sender_id:
            from_number = settings.twilio_custom_sender_id
        elif settings.twilio_phone_number:
            from_number = settings.twilio_phone_number
        elif not settings.twilio_messaging_service_sid:
            logger.error("No sender configured. Set TWILIO_CUSTOM_SENDER_ID, TWILIO_PHONE_NUMBER or TWILIO_MESSAGING_SERVICE_SID")
            return False
        else:
            from_number = None

        try:
            formatted_to = self.format_phone_number(to_phone)
            message_body = self.build_visitor_pass_message(visitor_name, otp, qr_token, visitor_id)

            logger.info(f"Sending visitor pass for visitor {visitor_id} to {formatted_to}")
            if settings.twilio_messaging_service_sid:
                message = self.client.messages.create(
                    body=message_body,
                    messaging_service_sid=settings.twilio_messaging_service_sid,
                    to=formatted_to
                )
            else:
                message = self.client.messages.create(
                    body=message_body,
                    from_=from_number,
                    to=formatted_to
                )

            if message.status == 'failed' or message.error_code:
                logger.error(f"Visitor pass SMS failed. Status: {message.status}, Error Code: {message.error_code}, Error Message: {message.error_message}")
                return False

            logger.info(f"Visitor pass SMS sent. SID: {message.sid}, Status: {message.status}")
            return True

        except TwilioException as e:
            logger.error(f"Twilio error sending visitor pass: {e}")
            return False
        except Exception as e:
            logger.error(f"Unexpected error sending visitor pass: {e}")
            return False


# Create a singleton instance
sms_service = SMSService()
