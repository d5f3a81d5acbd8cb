#!/usr/bin/env python3
"""
Default admin setup script for the Tickify backend.

Creates the admin identity in Firebase Auth and its profile document in the
Firestore `admins` collection. Safe to re-run: an existing admin is left
alone, and an identity left without a profile by an interrupted run gets its
profile written.

The password is never taken from the command line; it is read from the
ADMIN_PASSWORD environment variable (or .env).

Usage:
    ADMIN_PASSWORD=... python scripts/setup_admin.py [--email EMAIL] [--display-name NAME]
"""

import sys
import argparse
import logging
from pathlib import Path

# add project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from app.core.config import settings
from app.services.admin.bootstrap import AdminIdentity, ensure_admin
from app.services.firebase import FirebaseNotConfigured, get_app

# configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Provision the default Tickify admin account")
    parser.add_argument("--email", default=settings.ADMIN_EMAIL, help="admin email (default: ADMIN_EMAIL)")
    parser.add_argument(
        "--display-name",
        default=settings.ADMIN_DISPLAY_NAME,
        help="admin display name (default: ADMIN_DISPLAY_NAME)",
    )
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)

    if not settings.ADMIN_PASSWORD:
        logger.error("ADMIN_PASSWORD is not set, refusing to create an admin without a password")
        return 1

    try:
        app = get_app()
    except FirebaseNotConfigured as e:
        logger.error(f"Firebase is not configured: {e}")
        return 1

    identity = AdminIdentity(
        email=args.email,
        password=settings.ADMIN_PASSWORD,
        display_name=args.display_name,
    )
    result = ensure_admin(identity, app=app)

    if not result["success"]:
        logger.error(f"Admin setup failed: {result.get('error')}")
        if result.get("uid"):
            logger.error(f"Identity {result['uid']} exists without a profile, re-run to resume")
        return 1

    if result["status"] == "exists":
        logger.info("Admin account already exists, nothing to do")
    else:
        logger.info(f"Admin account {result['status']}: {identity.email} (uid {result['uid']})")
        logger.info(f"Collection: {result['collection']}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
