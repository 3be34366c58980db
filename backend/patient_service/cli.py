"""Patient Service CLI - Command Line Interface for administrative tasks.

Usage:
    python -m patient_service.cli <command> [options]

Commands:
    init-db         Create the database tables
    check-db        Check database connectivity
    seed-demo       Insert demo patients (development only)
    list-patients   Print every registered patient
    version         Show version information

Examples:
    python -m patient_service.cli init-db
    python -m patient_service.cli seed-demo
    python -m patient_service.cli list-patients --status inactive

"""

import argparse
import asyncio
import sys
from typing import NoReturn

from patient_service.core.config import settings
from patient_service.domain.exceptions import ValidationError
from patient_service.domain.patient import PatientStatus


def print_banner() -> None:
    """Print Patient Service CLI banner."""
    print("\n" + "=" * 50)
    print(" Patient Service CLI")
    print(" Patient registry administration")
    print("=" * 50 + "\n")


def print_error(message: str) -> None:
    """Print error message to stderr."""
    print(f"ERROR: {message}", file=sys.stderr)


def print_success(message: str) -> None:
    """Print success message."""
    print(f"SUCCESS: {message}")


def print_info(message: str) -> None:
    """Print info message."""
    print(f"INFO: {message}")


async def check_database() -> bool:
    """Check database connectivity."""
    from patient_service.models.base import ping_database

    print_info("Checking database connectivity...")
    if not await ping_database():
        print_error("Database connection failed")
        return False
    print_success("Database connection successful")
    return True


async def init_database() -> bool:
    """Create any missing tables."""
    from patient_service.models.base import create_tables

    try:
        if not await check_database():
            return False

        print_info("Creating tables...")
        await create_tables()
        print_success("Database tables ready")
        return True

    except Exception as e:
        print_error(f"Failed to initialize database: {e}")
        return False


async def seed_demo() -> bool:
    """Insert demo patients that are not present yet."""
    from patient_service.models.base import async_session_maker
    from patient_service.services.demo_data import seed_demo_patients

    try:
        async with async_session_maker() as session:
            inserted = await seed_demo_patients(session)
        print_success(f"Demo patients inserted: {inserted}")
        return True
    except Exception as e:
        print_error(f"Failed to seed demo data: {e}")
        return False


async def list_patients(status: PatientStatus | None = None) -> bool:
    """Print registered patients, optionally filtered by status."""
    from patient_service.models.base import async_session_maker
    from patient_service.repositories.patient_repository import SqlAlchemyPatientRepository
    from patient_service.services.patient_lifecycle import PatientLifecycleService

    try:
        async with async_session_maker() as session:
            service = PatientLifecycleService(SqlAlchemyPatientRepository(session))
            patients = await service.list_patients()
    except Exception as e:
        print_error(f"Failed to list patients: {e}")
        return False

    if status is not None:
        patients = [p for p in patients if p.status is status]

    for patient in patients:
        deactivated = f"  (since {patient.deactivated_date})" if patient.deactivated_date else ""
        print(f"{patient.id}  {patient.status.value:<8}  {patient.name}{deactivated}")
    print_info(f"{len(patients)} patient(s)")
    return True


def cmd_version(_args: argparse.Namespace) -> int:
    """Show version information."""
    print_banner()
    print(f"Version:     {settings.app_version}")
    print(f"Environment: {settings.environment}")
    print(f"Debug:       {settings.debug}")
    print(f"Python:      {sys.version.split()[0]}")
    return 0


def cmd_check_db(_args: argparse.Namespace) -> int:
    """Check database connectivity command."""
    print_banner()
    result = asyncio.run(check_database())
    return 0 if result else 1


def cmd_init_db(_args: argparse.Namespace) -> int:
    """Initialize database command."""
    print_banner()
    result = asyncio.run(init_database())
    return 0 if result else 1


def cmd_seed_demo(_args: argparse.Namespace) -> int:
    """Seed demo patients command."""
    print_banner()
    if settings.environment == "production":
        print_error("Demo data cannot be seeded in production")
        return 1
    result = asyncio.run(seed_demo())
    return 0 if result else 1


def cmd_list_patients(args: argparse.Namespace) -> int:
    """List patients command."""
    status = None
    if args.status:
        try:
            status = PatientStatus.from_value(args.status)
        except ValidationError as e:
            print_error(e.message)
            return 1
    result = asyncio.run(list_patients(status))
    return 0 if result else 1


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="patient-service-cli",
        description="Patient Service CLI - Administrative command line interface",
    )
    parser.add_argument(
        "--version",
        "-V",
        action="version",
        version=f"Patient Service {settings.app_version}",
    )

    subparsers = parser.add_subparsers(
        title="commands",
        description="Available commands",
        dest="command",
    )

    # version command
    version_parser = subparsers.add_parser(
        "version",
        help="Show version information",
    )
    version_parser.set_defaults(func=cmd_version)

    # check-db command
    check_db_parser = subparsers.add_parser(
        "check-db",
        help="Check database connectivity",
    )
    check_db_parser.set_defaults(func=cmd_check_db)

    # init-db command
    init_db_parser = subparsers.add_parser(
        "init-db",
        help="Create the database tables",
    )
    init_db_parser.set_defaults(func=cmd_init_db)

    # seed-demo command
    seed_demo_parser = subparsers.add_parser(
        "seed-demo",
        help="Insert demo patients (development only)",
    )
    seed_demo_parser.set_defaults(func=cmd_seed_demo)

    # list-patients command
    list_parser = subparsers.add_parser(
        "list-patients",
        help="Print every registered patient",
    )
    list_parser.add_argument(
        "--status",
        "-s",
        required=False,
        help="Only show patients with this status (active/inactive)",
    )
    list_parser.set_defaults(func=cmd_list_patients)

    return parser


def main(argv: list[str] | None = None) -> NoReturn:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(0)

    # Execute command
    exit_code = args.func(args)
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
