"""Email service implementations.

This package contains email adapters:
- StubEmailService: logs emails instead of delivering them
- AccountNotifier: builds account links and sends them via an EmailProtocol
"""

from src.infrastructure.email.account_notifier import AccountNotifier
from src.infrastructure.email.stub_email_service import StubEmailService

__all__ = [
    "AccountNotifier",
    "StubEmailService",
]
