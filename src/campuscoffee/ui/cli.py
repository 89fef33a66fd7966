from __future__ import annotations

import argparse
import logging
import sys
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from campuscoffee.app import create_user, import_pos_from_osm, list_pos
from campuscoffee.config import configure_logging, get_api_config
from campuscoffee.domain.errors import CampusCoffeeError
from campuscoffee.domain.model import CampusType

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Manage CampusCoffee points of sale")
    subparsers = parser.add_subparsers(dest="command", required=True)

    serve = subparsers.add_parser("serve", help="Run the REST API")
    serve.add_argument("--host", type=str, help="Bind address (defaults to config)")
    serve.add_argument("--port", type=int, help="Bind port (defaults to config)")

    import_osm = subparsers.add_parser("import-osm", help="Import a POS from an OSM node")
    import_osm.add_argument("node_id", type=int, help="OpenStreetMap node id")
    import_osm.add_argument(
        "--campus",
        type=str,
        required=True,
        choices=[campus.value for campus in CampusType],
        help="Campus the imported POS belongs to",
    )

    pos = subparsers.add_parser("pos", help="POS commands")
    pos_sub = pos.add_subparsers(dest="pos_command", required=True)
    pos_sub.add_parser("list", help="List all POS")

    user = subparsers.add_parser("user", help="User management commands")
    user_sub = user.add_subparsers(dest="user_command", required=True)
    user_create = user_sub.add_parser("create", help="Create a user")
    user_create.add_argument("--login-name", type=str, required=True, help="Unique login name")
    user_create.add_argument("--email", type=str, default="", help="Email address")
    user_create.add_argument("--first-name", type=str, default="", help="First name")
    user_create.add_argument("--last-name", type=str, default="", help="Last name")

    return parser.parse_args(list(argv))


def _serve(args: argparse.Namespace) -> None:
    import uvicorn  # noqa: PLC0415

    from campuscoffee.api import create_app  # noqa: PLC0415

    api_config = get_api_config()
    uvicorn.run(
        create_app(),
        host=args.host or api_config.host,
        port=args.port or api_config.port,
    )


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    configure_logging()
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args = _parse_args(args_list)

    try:
        if parsed_args.command == "serve":
            _serve(parsed_args)
        elif parsed_args.command == "import-osm":
            pos = import_pos_from_osm(parsed_args.node_id, CampusType(parsed_args.campus))
            log.info("Created POS %s: %s", pos.id, pos.name)
        elif parsed_args.command == "pos" and parsed_args.pos_command == "list":
            for pos in list_pos():
                log.info("%s\t%s\t%s\t%s", pos.id, pos.name, pos.campus, pos.pos_type)
        elif parsed_args.command == "user" and parsed_args.user_command == "create":
            user = create_user(
                login_name=parsed_args.login_name,
                email_address=parsed_args.email,
                first_name=parsed_args.first_name,
                last_name=parsed_args.last_name,
            )
            log.info("Created user %s", user.id)
        else:
            raise ValueError(f"Unsupported command: {parsed_args.command}")  # noqa: TRY301

    except CampusCoffeeError as exc:
        log.error("%s: %s", exc.kind, exc)  # noqa: TRY400
        sys.exit(2)
    except Exception:
        log.exception("Fatal error")
        sys.exit(1)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
