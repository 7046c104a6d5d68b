# src/coursebook/_firebase.py
"""Shared firebase_admin app initialization."""

import firebase_admin
from firebase_admin import credentials


def get_firebase_app(credentials_path: str | None = None) -> firebase_admin.App:
    """Return the default Firebase app, initializing it on first use.

    Args:
        credentials_path: Service account JSON file. When omitted, Google
            application default credentials are used.
    """
    try:
        return firebase_admin.get_app()
    except ValueError:
        # No default app yet
        pass

    if credentials_path:
        cred = credentials.Certificate(credentials_path)
    else:
        cred = credentials.ApplicationDefault()
    return firebase_admin.initialize_app(cred)
