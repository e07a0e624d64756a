#!/usr/bin/env python3
"""
Command-line access to the student registration store.

Runs the same validated-insert workflow and full-scan listing as the form.
"""

import argparse
import sys
from pathlib import Path

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.api.schemas import (
    StudentRegisterRequest, StudentResponse, StudentListResponse, RegistrationResponse
)
from src.core.config import get_db_path, load_environment
from src.core.dao import count_students
from src.core.db import ensure_schema, health_check
from src.core.errors import StoreUnavailable
from src.core.status import register_student, fetch_students, format_student_table
from util.logging import logger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Register and list students",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s init
  %(prog)s register --name "Ada Lovelace" --roll 1001 --course CS101 --email ada@example.com
  %(prog)s list
  %(prog)s list --json

Environment variables:
- DB_PATH=./data/student_db.sqlite (database file)
- DEBUG=false (verbose logging)
        """
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("init", help="Create the students table if needed and report its state")

    register = subparsers.add_parser("register", help="Validate and register one student")
    register.add_argument("--name", help="Full name")
    register.add_argument("--roll", help="Roll number (digits only)")
    register.add_argument("--course", help="Course")
    register.add_argument("--email", help="Email address")
    register.add_argument("--json", action="store_true", help="Print the result as JSON")

    list_cmd = subparsers.add_parser("list", help="Print every registered student")
    list_cmd.add_argument("--json", action="store_true", help="Print the listing as JSON")

    return parser


def init_command(args) -> int:
    healthy = health_check()
    count = count_students()
    print(f"Database: {get_db_path()}")
    print(f"Table 'students' ready: {healthy}")
    print(f"Registered students: {count}")
    return 0 if healthy else 1


def register_command(args) -> int:
    request = StudentRegisterRequest(
        name=args.name, roll_number=args.roll, course=args.course, email=args.email
    )
    status, record = register_student(
        request.name, request.roll_number, request.course, request.email
    )

    if args.json:
        response = RegistrationResponse(
            success=record is not None,
            kind=status.kind,
            message=status.text,
            student=StudentResponse(**record.to_dict()) if record else None,
        )
        print(response.model_dump_json(indent=2))
    elif record is not None:
        print(f"{status.text} (id {record.id})")
    else:
        print(status.text, file=sys.stderr)

    return 0 if record is not None else 1


def list_command(args) -> int:
    status, records = fetch_students()
    if status.is_error:
        print(status.text, file=sys.stderr)
        return 1

    if args.json:
        response = StudentListResponse(
            count=len(records),
            students=[StudentResponse(**record.to_dict()) for record in records],
        )
        print(response.model_dump_json(indent=2))
        return 0

    print("\n--- All Registered Students ---")
    print(format_student_table(records))
    return 0


COMMANDS = {
    "init": init_command,
    "register": register_command,
    "list": list_command,
}


def main(argv=None) -> int:
    load_environment()
    logger.refresh_level()
    args = build_parser().parse_args(argv)

    try:
        ensure_schema()
    except StoreUnavailable as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    try:
        return COMMANDS[args.command](args)
    except StoreUnavailable as e:
        logger.error(f"Command '{args.command}' failed: {e}")
        print(f"Database Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
