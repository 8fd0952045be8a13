#!/usr/bin/env python3
"""
Script to publish a week of shifts from the command line.
Publishing locks every shift in that Monday-to-Sunday week.

Usage:
    python publish_week.py <weekStart>

Example:
    python publish_week.py 2024-01-08
"""

import sys

from fastapi import HTTPException

from shiftboard.core.config import settings
from shiftboard.core.database import SessionLocal
from shiftboard.core.logging import configure_logging
from shiftboard.services.shifts import ShiftService


def publish(week_start: str) -> bool:
    """Publish the week containing week_start."""
    db = SessionLocal()
    try:
        summary = ShiftService(db).publish_week(week_start)
        print(f"✅ Week published!")
        print(f"   Week: {summary['startDate']} - {summary['endDate']}")
        print(f"   Published at: {summary['publishedAt']}")
        return True
    except HTTPException as e:
        db.rollback()
        print(f"❌ Could not publish week: {e.detail}")
        return False
    except ValueError as e:
        print(f"❌ Invalid date {week_start!r}: {e}")
        return False
    finally:
        db.close()


if __name__ == "__main__":
    if len(sys.argv) != 2:
        print("Usage: python publish_week.py <weekStart>")
        print("Example: python publish_week.py 2024-01-08")
        sys.exit(1)

    configure_logging(settings.log_level)
    sys.exit(0 if publish(sys.argv[1]) else 1)
