"""Supplier management commands."""

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
from nxerp.domain.entities import Supplier


@click.group()
def supplier_group():
    """Manage suppliers."""
    pass


def format_supplier(s: Supplier) -> str:
    status = "active" if s.is_active else "inactive"
    return (
        f"{s.code:12s} | {s.name:28s} | {s.type:12s} | {s.contact:14s} | "
        f"{s.opening_payable:>12,.2f} | {status}"
    )


@supplier_group.command("save")
@click.argument("code")
@click.argument("name")
@click.option("--type", "supplier_type", help="Supplier type (e.g. Distributor, Wholesaler)")
@click.option("--contact", help="Phone number or other contact")
@click.option("--date", "onboard_date", callback=date_option, help="Onboarding date")
@click.option("--payable", "opening_payable", callback=amount_option, help="Opening payable")
@click.option("--active/--inactive", "is_active", default=None, help="Set the active flag (unchanged if omitted)")
@click.pass_context
def save_supplier(
    ctx,
    code: str,
    name: str,
    supplier_type: str | None,
    contact: str | None,
    onboard_date: date | None,
    opening_payable: Decimal | None,
    is_active: bool | None,
):
    """Create or replace a supplier.

    Options left out keep the current value of an existing supplier.
    """
    service = get_service(ctx, "suppliers")
    current = load_record(ctx, service, code) or Supplier(code=code, name=name)
    changes = {
        "type": supplier_type,
        "contact": contact,
        "onboard_date": onboard_date,
        "opening_payable": opening_payable,
        "is_active": is_active,
    }
    supplier = replace(
        current,
        code=code,
        name=name,
        **{k: v for k, v in changes.items() if v is not None},
    )
    save_record(ctx, service, supplier)


add_common_commands(supplier_group, "suppliers", "suppliers", format_supplier)


def register_commands(cli):
    """Register supplier commands with main CLI."""
    cli.add_command(supplier_group, name="supplier")
