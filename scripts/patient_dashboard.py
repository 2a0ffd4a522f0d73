#!/usr/bin/env python3

# scripts/patient_dashboard.py
#  to run the script, run the following command:
#  python scripts/patient_dashboard.py --email jane@example.com --password secret
#  later runs reuse the saved session:   python scripts/patient_dashboard.py
#  forget the saved session:              python scripts/patient_dashboard.py --logout

"""
Patient Dashboard (terminal)
Logs in against the clinic API, keeps the session user in a JSON file on this
device, and prints the same dashboard the web layer serves.
"""
import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from app.clinic_api.api_client import ClinicAPIClient
from app.dashboards.header import build_header
from app.dashboards.patient_dashboard import PatientDashboard
from app.session.session_context import SessionContext
from app.session.session_storage import JsonFileStorage
from app.storage.user_storage import login_user
from config.appconfig import settings

# Setup logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


async def run(args: argparse.Namespace) -> int:
    session = SessionContext(JsonFileStorage(args.session_file))

    if args.logout:
        session.set_current_user(None)
        logger.info("✅ Session cleared")
        return 0

    api = ClinicAPIClient(args.api_url, timeout=settings.API_TIMEOUT_SECONDS)
    try:
        if args.email and args.password:
            try:
                user = await login_user(api, args.email, args.password)
            except Exception:
                logger.error("❌ Invalid email or password")
                return 1
            session.set_current_user(user)

        user = session.get_current_user()
        if user is None:
            logger.error("❌ Not logged in. Pass --email and --password.")
            return 1
        if user.role != "patient":
            logger.error(f"❌ Dashboard not available for role '{user.role}'")
            return 1

        dashboard = await PatientDashboard(api, user).load()
        output = {
            "header": build_header(user).model_dump(by_alias=True),
            "dashboard": dashboard.build_view().model_dump(by_alias=True),
        }
        print(json.dumps(output, indent=2))
        return 0
    finally:
        api.close()


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Print the CuraSync patient dashboard")
    parser.add_argument("--email", help="Log in with this email")
    parser.add_argument("--password", help="Password for --email")
    parser.add_argument("--logout", action="store_true", help="Forget the saved session user")
    parser.add_argument("--api-url", default=settings.API_BASE_URL, help="Clinic API base URL")
    parser.add_argument(
        "--session-file",
        default=str(settings.resolved_session_file),
        help="JSON file holding the session user",
    )
    return parser.parse_args(argv)


if __name__ == "__main__":
    sys.exit(asyncio.run(run(parse_args())))
