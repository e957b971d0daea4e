"""
Main CLI module with argument parsing and command execution.

Commands:
- mapper: convert database rows to users, API responses and token payloads
- repository: walk a user through register, read, rename, list and delete
"""
import argparse
import json
import sys
from typing import Any, Dict, List, Optional

from pattern_catalog import __version__
from pattern_catalog.application.user.mappers import PayloadMapper, UserMapper
from pattern_catalog.application.user.service import UserApplicationService
from pattern_catalog.cli.formatters import format_output
from pattern_catalog.config.manager import ConfigurationManager
from pattern_catalog.config.schemas import AppConfig
from pattern_catalog.domain.base.exceptions import DomainException, MalformedInputError
from pattern_catalog.domain.user.aggregate import User
from pattern_catalog.infrastructure.logging.logger import get_logger, setup_logging
from pattern_catalog.infrastructure.persistence.memory.user_repository import (
    InMemoryUserRepository,
)

SAMPLE_ROWS: List[Dict[str, str]] = [
    {
        "user_id": "usr_42",
        "user_name": "Alice Johnson",
        "user_email": "alice@example.com",
        "created_at": "2024-06-15T10:30:00Z",
    },
    {
        "user_id": "usr_43",
        "user_name": "Bob Smith",
        "user_email": "bob@example.com",
        "created_at": "2025-01-20T08:00:00Z",
    },
]


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="pattern-catalog",
        description="Data Mapper and Repository pattern demonstrations",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s mapper                          # Map the built-in sample rows
  %(prog)s mapper --record rows.json       # Map rows from a JSON file
  %(prog)s --format table repository       # Run the repository walkthrough
        """
    )

    # Global options
    parser.add_argument('--config', help='Configuration file path')
    parser.add_argument('--log-level', choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
                        help='Override the configured log level')
    parser.add_argument('--format', choices=['json', 'yaml', 'table'],
                        default='json', help='Output format')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')

    subparsers = parser.add_subparsers(dest='command', required=True, help='Available demonstrations')

    mapper_parser = subparsers.add_parser('mapper', help='Map database rows to domain and API shapes')
    mapper_parser.add_argument('--record', help='JSON file holding one row or a list of rows')

    subparsers.add_parser('repository', help='Run the user repository walkthrough')

    return parser.parse_args(argv)


def _user_to_dict(user: User) -> Dict[str, Any]:
    data = user.model_dump(mode="json")
    data["display_name"] = user.display_name
    return data


def _load_rows(path: Optional[str]) -> List[Any]:
    if not path:
        return list(SAMPLE_ROWS)
    try:
        with open(path, 'r') as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise MalformedInputError(f"Failed to read records from {path}: {e}") from e
    return data if isinstance(data, list) else [data]


def run_mapper_demo(rows: List[Any]) -> Dict[str, Any]:
    """Map the first row through every shape, then batch map all rows."""
    if not rows:
        raise MalformedInputError("No records to map")

    user = UserMapper.to_entity(rows[0])
    return {
        "entity": _user_to_dict(user),
        "response": UserMapper.to_dto(user).to_dict(),
        "payload": PayloadMapper.user_entity_to_payload(user).to_dict(),
        "batch": [dto.to_dict() for dto in UserMapper.to_dtos(rows)],
    }


def run_repository_demo(app_config: AppConfig) -> Dict[str, Any]:
    """Register, read, rename, list and delete users through the service."""
    repository = InMemoryUserRepository(id_start=app_config.repository.id_start)
    service = UserApplicationService(repository)

    alice = service.register_user("Alice", "alice@example.com")
    bob = service.register_user("Bob", "bob@example.com")
    found = service.get_user_profile(alice.id)
    updated = service.update_user_name(alice.id, "Alice Smith")
    all_users = service.list_users()
    service.remove_user(bob.id)
    after_delete = service.list_users()

    return {
        "created": [_user_to_dict(alice), _user_to_dict(bob)],
        "found": _user_to_dict(found) if found else None,
        "updated": _user_to_dict(updated),
        "all_users": [_user_to_dict(user) for user in all_users],
        "after_delete": [_user_to_dict(user) for user in after_delete],
    }


def execute_command(args: argparse.Namespace, app_config: AppConfig) -> Dict[str, Any]:
    """Dispatch the parsed command."""
    if args.command == 'mapper':
        return run_mapper_demo(_load_rows(args.record))
    return run_repository_demo(app_config)


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    args = parse_args(argv)

    try:
        app_config = ConfigurationManager(args.config).app_config
        logging_config = app_config.logging
        if args.log_level:
            logging_config = logging_config.model_copy(update={"level": args.log_level})
        setup_logging(logging_config)
    except DomainException as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    logger = get_logger(__name__)

    try:
        result = execute_command(args, app_config)
    except DomainException as e:
        logger.error("Command failed", command=args.command, error=str(e))
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(format_output(result, args.format))
    return 0


if __name__ == "__main__":
    sys.exit(main())
