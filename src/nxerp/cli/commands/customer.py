"""Customer management commands."""

from dataclasses import replace
from datetime import date
from decimal import Decimal

import click

from nxerp.cli.commands.master_data import (
    add_common_commands,
    amount_option,
    date_option,
    get_service,
    load_record,
    save_record,
)
from nxerp.domain.entities import Customer


@click.group()
def customer_group():
    """Manage customers."""
    pass


def format_customer(c: Customer) -> str:
    status = "active" if c.is_active else "inactive"
    return (
        f"{c.code:12s} | {c.name:28s} | {c.type:10s} | {c.contact:14s} | "
        f"{c.opening_balance:>12,.2f} | {status}"
    )


@customer_group.command("save")
@click.argument("code")
@click.argument("name")
@click.option("--type", "customer_type", help="Customer type (e.g. Retail, Corporate, Insurance)")
@click.option("--contact", help="Phone number or other contact")
@click.option("--date", "opening_date", callback=date_option, help="Opening date (e.g. 2026-02-19, today)")
@click.option("--balance", "opening_balance", callback=amount_option, help="Opening balance (e.g. 2150, -75.50)")
@click.option("--active/--inactive", "is_active", default=None, help="Set the active flag (unchanged if omitted)")
@click.pass_context
def save_customer(
    ctx,
    code: str,
    name: str,
    customer_type: str | None,
    contact: str | None,
    opening_date: date | None,
    opening_balance: Decimal | None,
    is_active: bool | None,
):
    """Create or replace a customer.

    Options left out keep the current value of an existing customer, or the
    defaults for a new one.

    Examples:
        nxerp customer save CUS-2001 "Metro Pharmacy" --contact 0300-5556677
        nxerp customer save CUS-1002 "City Clinic" --balance 2400 --inactive
    """
    service = get_service(ctx, "customers")
    current = load_record(ctx, service, code) or Customer(code=code, name=name)
    changes = {
        "type": customer_type,
        "contact": contact,
        "opening_date": opening_date,
        "opening_balance": opening_balance,
        "is_active": is_active,
    }
    customer = replace(
        current,
        code=code,
        name=name,
        **{k: v for k, v in changes.items() if v is not None},
    )
    save_record(ctx, service, customer)


add_common_commands(customer_group, "customers", "customers", format_customer)


def register_commands(cli):
    """Register customer commands with main CLI."""
    cli.add_command(customer_group, name="customer")
