"""Commands shared by every master-data group: list, show and delete."""

from dataclasses import fields
from datetime import datetime
from typing import Any, Callable, Optional

import click

from nxerp.cli.error_handling import handle_domain_error
from nxerp.domain.errors import DomainError, StorageError, record_not_found
from nxerp.domain.master_data import MasterDataService
from nxerp.domain.paging import fetch_page_clamped
from nxerp.utils.amount_parser import parse_amount
from nxerp.utils.date_parser import parse_date

PAGE_SIZE = 50


def get_service(ctx: click.Context, service_key: str) -> MasterDataService:
    """Return the service registered under ``service_key`` ("customers", ...)."""
    return getattr(ctx.obj["services"], service_key)


def date_option(ctx, param, value: Optional[str]):
    """Click callback turning a date option into a date."""
    if value is None:
        return None
    try:
        return parse_date(value)
    except ValueError as e:
        raise click.BadParameter(str(e))


def amount_option(ctx, param, value: Optional[str]):
    """Click callback turning an amount option into a Decimal."""
    if value is None:
        return None
    try:
        return parse_amount(value)
    except ValueError as e:
        raise click.BadParameter(str(e))


def format_detail(entity: Any) -> list[str]:
    """Render every field of an entity as 'Label: value' lines."""
    lines = []
    for f in fields(entity):
        value = getattr(entity, f.name)
        if isinstance(value, bool):
            value = "yes" if value else "no"
        elif isinstance(value, datetime):
            value = value.isoformat(timespec="seconds")
        lines.append(f"{f.name.replace('_', ' ').capitalize():16s}: {value}")
    return lines


def load_record(ctx: click.Context, service: MasterDataService, code: str) -> Optional[Any]:
    """Return the stored record for ``code``, or None for a new one."""
    try:
        return service.get_by_code(code)
    except StorageError as e:
        handle_domain_error(ctx, e)


def save_record(ctx: click.Context, service: MasterDataService, entity: Any) -> None:
    """Save an entity through its service and report the outcome."""
    try:
        saved = service.upsert(entity)
    except (DomainError, StorageError) as e:
        handle_domain_error(ctx, e)
    click.echo(f"Saved {service.entity_label.lower()} '{saved.code}'")


def add_common_commands(
    group: click.Group, service_key: str, plural: str, format_row: Callable[[Any], str]
) -> None:
    """Attach list, show and delete commands to an entity group.

    Args:
        group: Click group of the entity
        service_key: Attribute of the services bundle ("customers", ...)
        plural: Plural entity name used in messages
        format_row: Renders one entity as a list line
    """

    @group.command("list")
    @click.option("--search", "-s", default="", help="Match code, name or contact (case-insensitive)")
    @click.option("--page", "page_number", type=int, default=1, show_default=True, help="Page number")
    @click.option("--page-size", type=int, default=PAGE_SIZE, show_default=True, help="Rows per page (minimum 10)")
    @click.pass_context
    def list_records(ctx, search: str, page_number: int, page_size: int):
        """List records, most recently updated first.

        A page number past the end shows the last page.
        """
        service = get_service(ctx, service_key)
        try:
            page = fetch_page_clamped(service, search, page_number, page_size)
        except StorageError as e:
            handle_domain_error(ctx, e)

        if not page.items:
            click.echo(f"No {plural} found.")
        for item in page.items:
            click.echo(format_row(item))
        click.echo(f"Page {page.page_number}/{page.total_pages} | Total {page.total_count}")

    @group.command("show")
    @click.argument("code")
    @click.pass_context
    def show_record(ctx, code: str):
        """Show one record by CODE."""
        service = get_service(ctx, service_key)
        try:
            entity = service.get_by_code(code)
        except StorageError as e:
            handle_domain_error(ctx, e)
        if entity is None:
            click.echo(f"Error: {record_not_found(service.entity_label, code.strip())}", err=True)
            ctx.exit(1)
        for line in format_detail(entity):
            click.echo(line)

    @group.command("delete")
    @click.argument("code")
    @click.pass_context
    def delete_record(ctx, code: str):
        """Delete one record by CODE."""
        service = get_service(ctx, service_key)
        try:
            removed = service.delete(code)
        except StorageError as e:
            handle_domain_error(ctx, e)
        if not removed:
            click.echo(f"Error: {record_not_found(service.entity_label, code.strip())}", err=True)
            ctx.exit(1)
        click.echo(f"Deleted {service.entity_label.lower()} '{code.strip()}'")
