"""Firebase Admin initialization."""

import logging
from typing import Dict, Optional

import firebase_admin
from firebase_admin import credentials, firestore_async

logger = logging.getLogger(__name__)

APP_NAME = "wellness-companion"


def check_configuration(
    api_key: Optional[str],
    project_id: Optional[str],
    credentials_path: Optional[str],
) -> Dict[str, bool]:
    """Report which Firebase settings are present."""
    status = {
        "api_key": bool(api_key),
        "project_id": bool(project_id),
        "credentials": bool(credentials_path),
    }
    missing = [name for name, present in status.items() if not present]
    if missing:
        logger.error(f"[FIREBASE] Configuration is incomplete, missing: {', '.join(missing)}")
    return status


def initialize_firebase(
    project_id: Optional[str],
    credentials_path: Optional[str] = None,
) -> Optional[firebase_admin.App]:
    """
    Initialize (or reuse) the companion's Firebase app.

    Uses the service-account file when given, Application Default Credentials
    otherwise. Returns None when there is no project to connect to.
    """
    if not project_id and not credentials_path:
        logger.error("[FIREBASE] No project id or credentials configured, persistence disabled")
        return None

    try:
        return firebase_admin.get_app(APP_NAME)
    except ValueError:
        pass

    cred = credentials.Certificate(credentials_path) if credentials_path else credentials.ApplicationDefault()
    options = {"projectId": project_id} if project_id else None
    app = firebase_admin.initialize_app(cred, options, name=APP_NAME)
    logger.info(f"[FIREBASE] Initialized app for project {app.project_id}")
    return app


def firestore_client(app: Optional[firebase_admin.App]):
    """Async Firestore client for the app, or None without one."""
    if app is None:
        return None
    return firestore_async.client(app)
