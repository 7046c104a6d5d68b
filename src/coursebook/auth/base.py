"""Auth provider abstract base class."""

from abc import ABC, abstractmethod

from coursebook.models import Identity


class AuthProvider(ABC):
    """Turns a client credential into a verified identity."""

    @abstractmethod
    def verify(self, credential: str) -> Identity:
        """Verify ``credential`` and return who it belongs to.

        Raises:
            AuthenticationError: If the credential is invalid or expired.
        """
        ...
