"""
Command-line entry point for the AutoService booking client.

Each subcommand drives one screen controller once and prints the result.

Usage:
    python main.py services [--status Completed] [--search jane] [--page 2]
    python main.py services --export pdf
    python main.py history [--rate 5 --comment "Great job"]
    python main.py book --name "Jane Doe" --contact "+1 (555) 123-4567" \\
        --service "Oil change" --info "2019 Civic" [--yes]
    python main.py signin --email jane@example.com --password secret1
    python main.py signup --email jane@example.com --password secret1 \\
        --first-name Jane --last-name Doe
    python main.py console
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from autoservice.api.client import ApiClient
from autoservice.config import settings
from autoservice.errors import FormValidationError
from autoservice.forms import (
    AuthAction,
    AuthActionType,
    AuthFormController,
    AuthMode,
    BookingFormController,
)
from autoservice.state import AppState
from autoservice.storage import LocalStorage
from autoservice.views import BookedServicesView, BookingHistoryView, ViewState

logger = logging.getLogger(__name__)


def _app_state() -> AppState:
    return AppState(storage=LocalStorage(Path(settings.storage.path).expanduser()))


def _print_errors(errors: dict[str, str]) -> None:
    for field_name, message in errors.items():
        print(f"  {field_name}: {message}", file=sys.stderr)


def run_services(args: argparse.Namespace) -> int:
    from console import format_snapshot

    view = BookedServicesView(ApiClient(), initial_status=args.status)
    if args.width:
        view.resize(args.width)
    if args.page_size:
        view.set_items_per_page(args.page_size)
    if view.activate() == ViewState.ERROR:
        print(format_snapshot(view.snapshot()), file=sys.stderr)
        return 1

    if args.search:
        view.search(args.search)
    if args.service:
        view.set_filter("service", args.service)
    if args.date:
        try:
            view.set_filter("date", args.date)
        except ValueError as exc:
            print(f"Invalid --date: {exc}", file=sys.stderr)
            view.deactivate()
            return 2
    if args.page and not view.go_to_page(args.page):
        logger.warning("Page %d does not exist; showing page %d", args.page, view.page.page)

    print(format_snapshot(view.snapshot()))
    if args.stats:
        for label, count in view.statistics().items():
            print(f"  {label:<12} {count}")
    if args.export:
        path = view.export(args.export, Path(args.output_dir) if args.output_dir else None)
        print(f"Exported {len(view.filtered)} bookings to {path}")
    view.deactivate()
    return 0


def run_history(args: argparse.Namespace) -> int:
    from console import format_snapshot

    view = BookingHistoryView(ApiClient(), _app_state())
    state = view.activate()
    print(format_snapshot(view.snapshot(), label="bookings"))
    if state == ViewState.ERROR:
        return 1

    if view.rating_prompt is not None and view.rating_prompt.is_open:
        booking = view.rating_prompt.booking
        if args.rate is None:
            print(f"Your '{booking.service}' booking is completed. Rate it with --rate 1..5")
        else:
            try:
                view.submit_rating(args.rate, args.comment)
            except FormValidationError as exc:
                _print_errors(exc.errors)
                return 2
            print("Thanks for your feedback!")
    view.deactivate()
    return 0


def run_book(args: argparse.Namespace) -> int:
    form = BookingFormController(ApiClient())
    form.update("customer_name", args.name)
    form.update("contact", args.contact)
    form.update("service", args.service)
    form.update("vehicle_info", args.info)

    if not form.open_confirmation():
        _print_errors(form.errors())
        return 2
    print(form.get_confirmation_summary())
    if not args.yes and input("Confirm booking? [y/N] ").strip().lower() not in ("y", "yes"):
        form.cancel()
        print("Booking cancelled.")
        return 0

    booking = form.confirm()
    if booking is None:
        print(form.error_message, file=sys.stderr)
        return 1
    print(f"Booking confirmed (id {booking.id}, status {booking.status}).")
    form.close_confirmation()
    return 0


def run_auth(args: argparse.Namespace, mode: AuthMode) -> int:
    form = AuthFormController(ApiClient(), _app_state(), mode=mode)
    form.dispatch(AuthAction(AuthActionType.SET_EMAIL, args.email))
    form.dispatch(AuthAction(AuthActionType.SET_PASSWORD, args.password))
    if mode is AuthMode.SIGN_UP:
        form.dispatch(AuthAction(AuthActionType.SET_FIRSTNAME, args.first_name))
        form.dispatch(AuthAction(AuthActionType.SET_LASTNAME, args.last_name))

    if form.submit():
        print(form.response_message)
        if form.redirect:
            print(f"Continue at {form.redirect}")
        return 0
    if form.errors:
        _print_errors(form.errors)
        return 2
    print(form.response_message, file=sys.stderr)
    return 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=f"{settings.app_name} booking client")
    sub = parser.add_subparsers(dest="command", required=True)

    services = sub.add_parser("services", help="List every booked service (admin)")
    services.add_argument("--status", default=None)
    services.add_argument("--search", default=None, help="Customer name contains")
    services.add_argument("--service", default=None, help="Service contains")
    services.add_argument("--date", default=None, help="YYYY-MM-DD")
    services.add_argument("--page", type=int, default=None)
    services.add_argument("--page-size", type=int, default=None)
    services.add_argument("--width", type=int, default=None, help="Viewport width in pixels")
    services.add_argument("--stats", action="store_true", help="Print counts per status")
    services.add_argument("--export", choices=["pdf", "excel"], default=None)
    services.add_argument("--output-dir", default=None)

    history = sub.add_parser("history", help="Show your booking history")
    history.add_argument("--rate", type=int, default=None)
    history.add_argument("--comment", default="")

    book = sub.add_parser("book", help="Book a service")
    book.add_argument("--name", required=True)
    book.add_argument("--contact", required=True)
    book.add_argument("--service", required=True)
    book.add_argument("--info", required=True, help="Vehicle / service info")
    book.add_argument("--yes", action="store_true", help="Skip the confirmation prompt")

    for name, help_text in (("signin", "Sign in"), ("signup", "Create an account")):
        auth = sub.add_parser(name, help=help_text)
        auth.add_argument("--email", required=True)
        auth.add_argument("--password", required=True)
        if name == "signup":
            auth.add_argument("--first-name", required=True)
            auth.add_argument("--last-name", required=True)

    sub.add_parser("console", help="Interactive Booked Services console")
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    if args.command == "services":
        return run_services(args)
    if args.command == "history":
        return run_history(args)
    if args.command == "book":
        return run_book(args)
    if args.command == "signin":
        return run_auth(args, AuthMode.SIGN_IN)
    if args.command == "signup":
        return run_auth(args, AuthMode.SIGN_UP)

    import console
    console.main([])
    return 0


if __name__ == "__main__":
    sys.exit(main())
