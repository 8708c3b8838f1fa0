"""Outbound email providers."""

from pinkbeam.infrastructure.external.email.resend_client import ResendEmailClient

__all__ = ["ResendEmailClient"]
