"""Authentication: providers and explicit sessions."""

from coursebook.auth.base import AuthProvider
from coursebook.auth.session import Session, SessionManager

try:
    from coursebook.auth.firebase import FirebaseAuthProvider
except ImportError:
    from coursebook._optional import _create_missing_dependency_class

    FirebaseAuthProvider = _create_missing_dependency_class(  # type: ignore[misc,assignment]
        "FirebaseAuthProvider", "firebase"
    )

__all__ = ["AuthProvider", "FirebaseAuthProvider", "Session", "SessionManager"]
