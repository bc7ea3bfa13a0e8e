"""
Command line access to the booking core.

Each sub-command performs one step of the booking workflow against the
JSON files in the data directory, so the core can be driven from
scripts or by the interactive console layer.

Usage:
    python -m home_booking catalog
    python -m home_booking register --id cust001 --password secret --name "Ravi" \\
        --gender M --locality "Benz Circle" --address "12 MG Road"
    python -m home_booking book --customer cust001 --password secret --plan Basic --works 1
    python -m home_booking pay --service 1 --amount 600
    python -m home_booking bookings --customer cust001 --password secret --view current
    python -m home_booking rebook --customer cust001 --password secret --service 1

Exit status is 0 on success and 1 when the request was refused
(bad credentials, invalid selection, amount mismatch, ...).
"""

import argparse
import dataclasses
import sys
from pathlib import Path
from typing import List, Optional

from .core.config import settings
from .main import BookingApp, create_app
from .schemas.customer import Customer
from .schemas.payment import Payment
from .schemas.service import GenderPreference, Service
from .services.pricing import PricingPlan


LOCALITIES = ["Moghalrajpuram", "Bhavanipuram", "Patamata", "Gayatri Nagar", "Benz Circle", "SN Puram"]


def _fail(message: str) -> int:
    print(f"[!] {message}", file=sys.stderr)
    return 1


def _print_service(service: Service, payment: Optional[Payment]) -> None:
    print(f"--- Service ID: {service.id} ---")
    print(f"Status: {service.status_label}")
    print(f"Type: {service.type.value} | Plan: {service.plan}")
    print(f"Booking: {service.booking_date} {service.booking_time}")
    print(f"Requested Services: {'; '.join(service.requested_services)}")
    if service.work_date or service.work_start_time:
        print(f"Work Date: {service.work_date or '-'} Start: {service.work_start_time or '-'}")
    if service.reason:
        print(f"Rejection Reason: {service.reason}")
    if payment is not None:
        print(f"Payment Status: {'PAID' if payment.paid else 'UNPAID'}")
        print(f"Amount: {payment.amount_due}")


def cmd_catalog(app: BookingApp, args: argparse.Namespace) -> int:
    print("Works:")
    for work in app.catalog.works:
        print(f"  {work.id}) {work.name} [{work.category}] {work.time_minutes} min - {work.price}")
    print("Packages:")
    for package in app.catalog.packages:
        print(f"  {package.id}) {package.name} - {package.description} (works {package.work_ids})")
    return 0


def cmd_register(app: BookingApp, args: argparse.Namespace) -> int:
    if not args.address.strip():
        return _fail("Address can't be empty")
    customer = Customer(
        id=args.id,
        password=args.password,
        name=args.name,
        gender=args.gender,
        locality=args.locality,
        address=args.address,
    )
    if app.customer_service.id_exists(args.id):
        return _fail(f"ID {args.id} already exists")
    if not app.customer_service.register_customer(customer):
        return _fail(f"Could not store customer {args.id}")
    print(f"[+] Registered customer {args.id}")
    return 0


def _login(app: BookingApp, args: argparse.Namespace) -> Optional[Customer]:
    return app.customer_service.authenticate(args.customer, args.password)


def _check_schedule(app: BookingApp, args: argparse.Namespace) -> Optional[str]:
    """Return an error message for a bad ``--date``/``--time`` pair, else None."""
    if bool(args.date) != bool(args.time):
        return "--date and --time must be given together"
    if args.date and not app.validator.validate_schedule(args.date, args.time):
        return "Scheduled date/time must be valid (YYYY-MM-DD HH:MM:SS) and in the future"
    return None


def cmd_book(app: BookingApp, args: argparse.Namespace) -> int:
    customer = _login(app, args)
    if customer is None:
        return _fail("Invalid credentials")

    plan = PricingPlan.from_name(args.plan)
    if args.package is not None:
        selection = app.validator.select_package(plan, args.package)
    else:
        selection = app.validator.select_works(plan, args.works or [])
    if not selection:
        return _fail(f"Service selection failed: {selection.error}")

    error = _check_schedule(app, args)
    if error:
        return _fail(error)

    common = (
        plan.label, customer.locality, customer.id, customer.gender,
        customer.address, selection.names, args.gender_pref,
    )
    if args.date:
        service = app.booking_service.create_scheduling(*common, args.date, args.time)
    else:
        service = app.booking_service.create_immediate(*common)

    payment = app.payment_service.generate_payment(service, selection.work_ids)
    print(f"[+] Service {service.id} requested ({service.type.value}, {plan.label})")
    print(f"Total Bill: {payment.amount_due}")
    return 0


def cmd_pay(app: BookingApp, args: argparse.Namespace) -> int:
    service = app.service_repo.find_by_id(args.service)
    if service is None:
        return _fail(f"Service {args.service} not found")
    payment = app.payment_service.get_payment(args.service)
    if payment is None:
        return _fail(f"No bill generated for service {args.service}")
    if not app.payment_service.settle(service, args.amount, app.booking_service):
        return _fail(f"Payment FAILED! Amount must be exactly {payment.amount_due}")
    print(f"[+] Payment for service {args.service} completed")
    return 0


def cmd_bookings(app: BookingApp, args: argparse.Namespace) -> int:
    customer = _login(app, args)
    if customer is None:
        return _fail("Invalid credentials")
    views = {
        "all": app.customer_service.view_customer_bookings,
        "current": app.customer_service.current_bookings,
        "history": app.customer_service.completed_bookings,
        "rejected": app.customer_service.rejected_bookings,
    }
    services = views[args.view](customer.id)
    if not services:
        print(f"No {args.view} bookings.")
        return 0
    for service in services:
        _print_service(service, app.payment_service.get_payment(service.id))
    return 0


def cmd_rebook(app: BookingApp, args: argparse.Namespace) -> int:
    customer = _login(app, args)
    if customer is None:
        return _fail("Invalid credentials")
    completed = {s.id: s for s in app.customer_service.completed_bookings(customer.id)}
    previous = completed.get(args.service)
    if previous is None:
        return _fail(f"No completed service {args.service} to rebook")
    error = _check_schedule(app, args)
    if error:
        return _fail(error)

    service = app.booking_service.rebook(previous, customer, args.date, args.time)
    work_ids = app.catalog.get_ids_by_names(previous.requested_services)
    payment = app.payment_service.generate_payment(service, work_ids)
    print(f"[+] Service {service.id} rebooked from {previous.id}")
    print(f"Total Bill: {payment.amount_due}")
    return 0


def _add_credentials(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--customer", required=True, help="Customer ID")
    parser.add_argument("--password", required=True, help="Customer password")


def _add_schedule(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--date", help="Scheduled date (YYYY-MM-DD); omit for an immediate request")
    parser.add_argument("--time", help="Scheduled time (HH:MM:SS)")


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="home-booking", description="Home services booking core.")
    ap.add_argument("--data-dir", help=f"Directory with the JSON data files (default: {settings.data_dir})")
    ap.add_argument("-v", "--verbose", action="store_true", help="Log at DEBUG level")
    sub = ap.add_subparsers(dest="command", required=True)

    p = sub.add_parser("catalog", help="List bookable works and packages")
    p.set_defaults(func=cmd_catalog)

    p = sub.add_parser("register", help="Register a new customer")
    p.add_argument("--id", required=True)
    p.add_argument("--password", required=True)
    p.add_argument("--name", required=True)
    p.add_argument("--gender", required=True, choices=["M", "F"])
    p.add_argument("--locality", required=True, choices=LOCALITIES)
    p.add_argument("--address", required=True)
    p.set_defaults(func=cmd_register)

    p = sub.add_parser("book", help="Request a service and generate its bill")
    _add_credentials(p)
    p.add_argument("--plan", required=True, choices=[pl.label for pl in PricingPlan if pl is not PricingPlan.UNKNOWN])
    group = p.add_mutually_exclusive_group(required=True)
    group.add_argument("--works", type=int, nargs="+", metavar="ID", help="Work ids to book")
    group.add_argument("--package", type=int, metavar="ID", help="Package id (Premium only)")
    p.add_argument(
        "--gender-pref",
        default=GenderPreference.NO_PREFERENCE.value,
        choices=[g.value for g in GenderPreference],
    )
    _add_schedule(p)
    p.set_defaults(func=cmd_book)

    p = sub.add_parser("pay", help="Pay the bill of a service")
    p.add_argument("--service", type=int, required=True)
    p.add_argument("--amount", type=float, required=True)
    p.set_defaults(func=cmd_pay)

    p = sub.add_parser("bookings", help="List a customer's bookings")
    _add_credentials(p)
    p.add_argument("--view", default="all", choices=["all", "current", "history", "rejected"])
    p.set_defaults(func=cmd_bookings)

    p = sub.add_parser("rebook", help="Book a completed service again")
    _add_credentials(p)
    p.add_argument("--service", type=int, required=True)
    _add_schedule(p)
    p.set_defaults(func=cmd_rebook)
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    overrides = {}
    if args.data_dir:
        overrides["data_dir"] = str(Path(args.data_dir).resolve())
    if args.verbose:
        overrides["log_level"] = "DEBUG"
    app = create_app(dataclasses.replace(settings, **overrides))
    return args.func(app, args)


if __name__ == "__main__":
    sys.exit(main())
