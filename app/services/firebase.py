import os
import logging
from typing import Dict, Optional

import firebase_admin  # type: ignore
from firebase_admin import credentials  # type: ignore

from app.core.config import settings

logger = logging.getLogger(__name__)


class FirebaseNotConfigured(RuntimeError):
    pass


def get_app() -> "firebase_admin.App":
    """return the default firebase app, initializing it from the service account file on first use."""
    if firebase_admin._apps:  # type: ignore
        return firebase_admin.get_app()

    cred_path = settings.GOOGLE_APPLICATION_CREDENTIALS
    if not cred_path:
        raise FirebaseNotConfigured("GOOGLE_APPLICATION_CREDENTIALS is not set")
    if not os.path.exists(cred_path):
        raise FirebaseNotConfigured(f"credentials file not found: {cred_path}")

    cred = credentials.Certificate(cred_path)
    options: Optional[Dict[str, str]] = None
    if settings.FIREBASE_PROJECT_ID:
        options = {"projectId": settings.FIREBASE_PROJECT_ID}
    app = firebase_admin.initialize_app(cred, options)
    logger.info(f"Firebase app initialized for project {app.project_id}")
    return app


def health_check() -> Dict[str, str]:
    """check firebase integration health and config status."""
    cred_path = settings.GOOGLE_APPLICATION_CREDENTIALS
    if not cred_path:
        return {"status": "misconfigured", "reason": "missing_credentials_path"}
    if not os.path.exists(cred_path):
        return {"status": "misconfigured", "reason": "credentials_file_not_found"}

    try:
        app = get_app()
    except (FirebaseNotConfigured, ValueError) as e:
        logger.error(f"Firebase init failed: {str(e)}")
        return {"status": "error", "reason": "initialization_failed"}

    return {"status": "configured", "project_id": app.project_id or "", "credentials_file": cred_path}
