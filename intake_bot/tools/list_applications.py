# intake_bot/tools/list_applications.py
import argparse
import sys
from pathlib import Path

from intake_bot.database.db import SubmissionStore
from intake_bot.errors import PersistenceError
from intake_bot.utils.config import get_storage_settings


def render(application):
    created = application.created_at.strftime("%Y-%m-%d %H:%M:%S UTC") if application.created_at else "-"
    return f"#{application.id}  {created}  {application.author} (id {application.user_id})\n{application.application_text}\n"


def main(argv=None):
    p = argparse.ArgumentParser(description="Print applications stored by the intake bot.")
    p.add_argument("--db", dest="db", default=None, help="SQLite file (default: DATABASE_PATH or ./data.db).")
    p.add_argument("--limit", type=int, default=None, help="Only show the newest N applications.")
    args = p.parse_args(argv)

    db_path = Path(args.db) if args.db else get_storage_settings().database_path
    if not db_path.exists():
        print(f"Error: database not found at {db_path}", file=sys.stderr)
        return 1

    try:
        applications = SubmissionStore(db_path).list_all(limit=args.limit)
    except PersistenceError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if not applications:
        print("No applications yet.")
        return 0
    for application in applications:
        print(render(application))
    print(f"Total shown: {len(applications)}", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())
