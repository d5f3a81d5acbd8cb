"""
Default admin provisioning against Firebase Auth + Firestore.

Two remote steps, no transaction between them:
    1. create the identity in Firebase Auth
    2. write the profile document admins/<uid> in Firestore

An existing identity is not an error. Instead of stopping there, the profile
document is looked up by uid and written if an earlier run died between the
two steps, so re-running the bootstrap always converges.
"""
import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

from firebase_admin import auth, firestore  # type: ignore
from firebase_admin import exceptions as firebase_exceptions  # type: ignore
from google.api_core import exceptions as gcp_exceptions  # type: ignore

logger = logging.getLogger(__name__)

ADMINS_COLLECTION = "admins"


@dataclass(frozen=True)
class AdminIdentity:
    email: str
    password: str
    display_name: str

    def __repr__(self) -> str:
        return f"AdminIdentity(email={self.email!r}, display_name={self.display_name!r})"


def admin_document(uid: str, identity: AdminIdentity) -> Dict[str, Any]:
    return {
        "uid": uid,
        "email": identity.email,
        "displayName": identity.display_name,
        "role": "admin",
        "status": "active",
        "emailVerified": True,
        "isDefaultAdmin": True,
        "createdAt": firestore.SERVER_TIMESTAMP,
        "updatedAt": firestore.SERVER_TIMESTAMP,
    }


def _write_profile(db: Any, uid: str, identity: AdminIdentity) -> Optional[str]:
    """write admins/<uid>; returns an error message on failure."""
    try:
        db.collection(ADMINS_COLLECTION).document(uid).set(admin_document(uid, identity))
    except gcp_exceptions.GoogleAPIError as e:
        logger.error(f"Admin profile write failed for uid {uid}: {str(e)}")
        return str(e)
    return None


def _profile_exists(db: Any, uid: str) -> bool:
    return db.collection(ADMINS_COLLECTION).document(uid).get().exists


def ensure_admin(identity: AdminIdentity, app: Any = None, db: Any = None) -> Dict[str, Any]:
    """
    Provision an admin account, safe to run more than once.

    Args:
        identity: email, password and display name of the admin to create
        app: firebase_admin App, default app when omitted
        db: Firestore client, `firestore.client(app)` when omitted

    Returns:
        Dict with success flag and status:
            created  identity and profile document were written
            exists   identity and profile were already there, nothing written
            resumed  identity existed without a profile, profile written now
            error    provider failure, message under "error"
    """
    if not identity.password:
        return {"success": False, "status": "error", "uid": None, "error": "admin password is empty"}

    try:
        user = auth.create_user(
            email=identity.email,
            password=identity.password,
            display_name=identity.display_name,
            email_verified=True,
            app=app,
        )
        uid = user.uid
        status = "created"
        logger.info(f"Admin identity created for {identity.email} (uid {uid})")
    except auth.EmailAlreadyExistsError:
        try:
            uid = auth.get_user_by_email(identity.email, app=app).uid
        except firebase_exceptions.FirebaseError as e:
            logger.error(f"Admin lookup failed for {identity.email}: {str(e)}")
            return {"success": False, "status": "error", "uid": None, "error": str(e)}
        status = "exists"
    except (firebase_exceptions.FirebaseError, ValueError) as e:
        logger.error(f"Admin identity creation failed for {identity.email}: {str(e)}")
        return {"success": False, "status": "error", "uid": None, "error": str(e)}

    if db is None:
        db = firestore.client(app)

    if status == "exists":
        try:
            if _profile_exists(db, uid):
                logger.info(f"Admin account already exists for {identity.email}")
                return {"success": True, "status": "exists", "uid": uid, "message": "Admin already exists"}
        except gcp_exceptions.GoogleAPIError as e:
            logger.error(f"Admin profile lookup failed for uid {uid}: {str(e)}")
            return {"success": False, "status": "error", "uid": uid, "error": str(e)}
        logger.warning(f"Admin identity {uid} has no profile document, writing it now")
        status = "resumed"

    error = _write_profile(db, uid, identity)
    if error is not None:
        return {"success": False, "status": "error", "uid": uid, "error": error}

    return {
        "success": True,
        "status": status,
        "uid": uid,
        "email": identity.email,
        "collection": ADMINS_COLLECTION,
    }
