"""
scripts/init_data.py

Create the tables and seed an Admin account, room types and rooms.
"""
import argparse
import logging
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from hotel_booking.database import SessionLocal, init_db
from hotel_booking.seed import seed


def main():
    """CLI entry point"""
    parser = argparse.ArgumentParser(description="Initialise the hotel booking database")
    parser.add_argument("--admin-username", default="admin")
    parser.add_argument("--admin-password", default="admin123")
    parser.add_argument("--admin-email", default="admin@hotel.local")
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level"
    )
    args = parser.parse_args()

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    init_db()
    db = SessionLocal()
    try:
        seed(db, args.admin_username, args.admin_password, args.admin_email)
    finally:
        db.close()

    print(f"Done. Log in as '{args.admin_username}' to create Manager and Receptionist accounts.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
