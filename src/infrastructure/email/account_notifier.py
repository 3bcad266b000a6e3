"""Account notifier.

Implements NotifierProtocol: builds the frontend links for account emails
and hands them to the configured EmailProtocol.

Link formats:
    verification: <frontend_url><verify_path><urlquote(signed relative path)>
        signed relative path = /auth/verify-email/<id>/<sha1(email)>?expires=..&signature=..
    reset: <frontend_url><reset_path>?token=<token>&email=<email>
"""

import hashlib
from urllib.parse import quote, urlencode
from uuid import UUID

from src.domain.protocols import EmailProtocol, LinkSignerProtocol

VERIFY_EMAIL_PATH = "/auth/verify-email/{account_id}/{email_hash}"


def verification_path(account_id: UUID, email: str) -> str:
    """Unsigned relative path of the verification endpoint for an account."""
    email_hash = hashlib.sha1(email.encode("utf-8")).hexdigest()
    return VERIFY_EMAIL_PATH.format(account_id=account_id, email_hash=email_hash)


class AccountNotifier:
    """Compose account emails with signed links.

    Example:
        >>> notifier = AccountNotifier(
        ...     email_service=get_email_service(),
        ...     link_signer=get_link_signer(),
        ...     frontend_url="https://app.example.com",
        ...     verify_email_path="/verify-email?url=",
        ...     reset_password_path="/reset-password",
        ... )
        >>> await notifier.send_verification(account.id, account.email)
    """

    def __init__(
        self,
        email_service: EmailProtocol,
        link_signer: LinkSignerProtocol,
        frontend_url: str,
        verify_email_path: str,
        reset_password_path: str,
    ) -> None:
        self._email_service = email_service
        self._link_signer = link_signer
        self._frontend_url = frontend_url.rstrip("/")
        self._verify_email_path = verify_email_path
        self._reset_password_path = reset_password_path

    def verification_url(self, account_id: UUID, email: str) -> str:
        """Frontend URL carrying a freshly signed verification link."""
        signed = self._link_signer.sign(verification_path(account_id, email))
        return f"{self._frontend_url}{self._verify_email_path}{quote(signed, safe='')}"

    def reset_url(self, email: str, token: str) -> str:
        query = urlencode({"token": token, "email": email})
        return f"{self._frontend_url}{self._reset_password_path}?{query}"

    async def send_verification(self, account_id: UUID, email: str) -> None:
        await self._email_service.send_verification_email(
            to_email=email,
            verification_url=self.verification_url(account_id, email),
        )

    async def send_password_reset(self, email: str, token: str) -> None:
        await self._email_service.send_password_reset_email(
            to_email=email,
            reset_url=self.reset_url(email, token),
        )

    async def send_password_changed(self, email: str) -> None:
        await self._email_service.send_password_changed_notification(to_email=email)
