"""
Interactive console for the admin Booked Services screen.

Drives the real ``BookedServicesView`` against the configured backend:
every command goes through the same filter/paginate/export pipeline the
view uses, and the table is redrawn from the published snapshot.

Usage:
    python console.py
    python console.py --status Completed --width 2560
"""

import argparse
from typing import Optional

from autoservice.api.client import ApiClient
from autoservice.config import settings
from autoservice.views import BookedServicesView, ViewSnapshot, ViewState

BLUE = "\033[94m"
GREEN = "\033[92m"
YELLOW = "\033[93m"
RED = "\033[91m"
DIM = "\033[2m"
RESET = "\033[0m"
BOLD = "\033[1m"

STATUS_COLORS = {
    "Completed": GREEN,
    "Pending": YELLOW,
    "Cancelled": RED,
}

HELP_TEXT = """\
  n / p            next / previous page
  g <page>         go to page
  s <name>         search by customer name (empty clears)
  status <value>   filter by status (empty clears)
  service <text>   filter by service (empty clears)
  date <YYYY-MM-DD> filter by date (empty clears)
  clear            clear all filters
  open <row>       show details of a row on this page
  stats            booking counts per status
  export pdf|excel export the filtered bookings
  r                refresh from the backend
  q                quit"""


def format_table(snapshot: ViewSnapshot) -> str:
    """Render one page of bookings as a fixed-width text table."""
    header = f"{'#':>3}  {'Customer':<24} {'Service':<24} {'Date':<10}  Status"
    lines = [f"{BOLD}{header}{RESET}"]
    for index, record in enumerate(snapshot.page.items, start=1):
        date = record.date.isoformat() if record.date else ""
        color = STATUS_COLORS.get(record.status, BLUE)
        lines.append(
            f"{index:>3}  {(record.customer_name or '')[:24]:<24} "
            f"{(record.service or '')[:24]:<24} {date:<10}  {color}{record.status}{RESET}"
        )
    return "\n".join(lines)


def format_snapshot(snapshot: ViewSnapshot, label: str = "booked services") -> str:
    if snapshot.state == ViewState.LOADING:
        return f"{DIM}Loading...{RESET}"
    if snapshot.state == ViewState.ERROR:
        return f"{RED}Error fetching {label}: {snapshot.error}{RESET}"
    if snapshot.no_results:
        return f"{YELLOW}No {label} found.{RESET}"
    page = snapshot.page
    footer = (
        f"{DIM}Page {page.page} of {page.total_pages} "
        f"({page.total_items} matching, {snapshot.total_records} total){RESET}"
    )
    return format_table(snapshot) + "\n" + footer


class ConsoleSession:
    """Terminal front end for one Booked Services view session."""

    def __init__(self, view: BookedServicesView) -> None:
        self.view = view
        self._last_state: Optional[ViewState] = None
        self.view.subscribe(self._render)

    def system_log(self, text: str) -> None:
        print(f"{DIM}  >> {text}{RESET}")

    def _render(self, snapshot: ViewSnapshot) -> None:
        if snapshot.state == ViewState.IDLE:
            return
        # Skip the transient Loading frame once a table has been shown.
        if snapshot.state == ViewState.LOADING and self._last_state is not None:
            return
        self._last_state = snapshot.state
        print(format_snapshot(snapshot))

    def run(self) -> None:
        print()
        print(f"{BOLD}{'=' * 60}{RESET}")
        print(f"{BOLD}  {settings.app_name.upper()} - Booked Services{RESET}")
        print(f"{BOLD}  Backend: {settings.backend.base_url}{RESET}")
        print(f"{BOLD}  Type 'help' for commands, 'q' to exit{RESET}")
        print(f"{BOLD}{'=' * 60}{RESET}")
        print()

        self.view.activate()
        try:
            while True:
                try:
                    command = input(f"\n{BLUE}[admin] {RESET}").strip()
                except EOFError:
                    break
                if not command:
                    continue
                if command.lower() in ("quit", "exit", "q"):
                    break
                self.handle_command(command)
        finally:
            self.view.deactivate()
            print(f"\n{DIM}Session ended.{RESET}")

    def handle_command(self, command: str) -> None:
        name, _, argument = command.partition(" ")
        name = name.lower()
        argument = argument.strip()

        if name == "help":
            print(HELP_TEXT)
        elif name in ("n", "next"):
            if not self.view.next_page():
                self.system_log("Already on the last page")
        elif name in ("p", "prev"):
            if not self.view.previous_page():
                self.system_log("Already on the first page")
        elif name == "g":
            if not argument.isdigit() or not self.view.go_to_page(int(argument)):
                self.system_log(f"No such page: {argument!r}")
        elif name == "s":
            self.view.search(argument)
        elif name == "status":
            self.view.filter_by_status(argument or None)
        elif name in ("service", "date"):
            try:
                self.view.set_filter(name, argument or None)
            except ValueError as exc:
                self.system_log(str(exc))
        elif name == "clear":
            self.view.clear_filters()
        elif name == "open":
            self._open_row(argument)
        elif name == "stats":
            for label, count in self.view.statistics().items():
                print(f"  {label:<12} {count}")
        elif name == "export":
            try:
                path = self.view.export(argument or "pdf")
            except (ValueError, OSError) as exc:
                print(f"{RED}Export failed: {exc}{RESET}")
            else:
                print(f"{GREEN}Exported to {path}{RESET}")
        elif name == "r":
            self.view.refresh()
        else:
            self.system_log(f"Unknown command {name!r}; type 'help'")

    def _open_row(self, argument: str) -> None:
        items = self.view.page.items
        if not argument.isdigit() or not 1 <= int(argument) <= len(items):
            self.system_log(f"No row {argument!r} on this page")
            return
        record = items[int(argument) - 1]
        for label, value in (
            ("Customer", record.customer_name),
            ("Contact", record.contact),
            ("Service", record.service),
            ("Vehicle", record.vehicle_info),
            ("Date", record.date.isoformat() if record.date else None),
            ("Status", record.status),
        ):
            print(f"  {BOLD}{label:<9}{RESET} {value or '-'}")


def main(argv: Optional[list[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Interactive Booked Services console")
    parser.add_argument("--status", default=None, help="Initial status filter")
    parser.add_argument(
        "--width", type=int, default=None,
        help="Viewport width used to pick the page size",
    )
    args = parser.parse_args(argv)

    view = BookedServicesView(ApiClient(), initial_status=args.status)
    if args.width:
        view.resize(args.width)
    ConsoleSession(view).run()


if __name__ == "__main__":
    main()
