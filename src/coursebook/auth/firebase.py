# src/coursebook/auth/firebase.py
"""Firebase Authentication provider.

Requires the firebase extra: pip install coursebook[firebase]
"""

from firebase_admin import auth

from coursebook._firebase import get_firebase_app
from coursebook.auth.base import AuthProvider
from coursebook.errors import AuthenticationError
from coursebook.logging import get_logger
from coursebook.models import Identity

logger = get_logger(__name__)


class FirebaseAuthProvider(AuthProvider):
    """Verifies Firebase ID tokens issued to the web client."""

    def __init__(self, credentials_path: str | None = None, check_revoked: bool = False) -> None:
        """Initialize the provider.

        Args:
            credentials_path: Service account JSON. Application default
                credentials are used when omitted.
            check_revoked: Also reject tokens whose session was revoked.
        """
        self._app = get_firebase_app(credentials_path)
        self._check_revoked = check_revoked

    def verify(self, credential: str) -> Identity:
        try:
            claims = auth.verify_id_token(
                credential, app=self._app, check_revoked=self._check_revoked
            )
        except (
            auth.InvalidIdTokenError,
            auth.ExpiredIdTokenError,
            auth.RevokedIdTokenError,
            auth.UserDisabledError,
        ) as e:
            logger.warning("Rejected ID token: %s", e)
            raise AuthenticationError("Authentication failed") from e

        email = claims.get("email")
        if not email:
            raise AuthenticationError("Token has no email claim")

        return Identity(uid=claims["uid"], email=email, display_name=claims.get("name"))
