"""Category management commands."""

from dataclasses import replace
from datetime import date

import click

from nxerp.cli.commands.master_data import (
    add_common_commands,
    date_option,
    get_service,
    load_record,
    save_record,
)
from nxerp.domain.entities import Category


@click.group()
def category_group():
    """Manage categories."""
    pass


def format_category(c: Category) -> str:
    parent = c.parent_category or "-"
    status = "active" if c.is_active else "inactive"
    return f"{c.code:12s} | {c.name:28s} | {c.type:10s} | parent: {parent:10s} | {status}"


@category_group.command("save")
@click.argument("code")
@click.argument("name")
@click.option("--type", "category_type", help="Category type (e.g. Medicine, Surgical)")
@click.option("--parent", help="Parent category code ('' for top level)")
@click.option("--date", "created_date", callback=date_option, help="Creation date")
@click.option("--active/--inactive", "is_active", default=None, help="Set the active flag (unchanged if omitted)")
@click.pass_context
def save_category(
    ctx,
    code: str,
    name: str,
    category_type: str | None,
    parent: str | None,
    created_date: date | None,
    is_active: bool | None,
):
    """Create or replace a category.

    Examples:
        nxerp category save CAT-105 Vaccines
        nxerp category save CAT-201 "Oral Antibiotic" --parent CAT-101
    """
    service = get_service(ctx, "categories")
    current = load_record(ctx, service, code) or Category(code=code, name=name)
    changes = {
        "type": category_type,
        "parent_category": parent,
        "created_date": created_date,
        "is_active": is_active,
    }
    category = replace(
        current,
        code=code,
        name=name,
        **{k: v for k, v in changes.items() if v is not None},
    )
    save_record(ctx, service, category)


add_common_commands(category_group, "categories", "categories", format_category)


def register_commands(cli):
    """Register category commands with main CLI."""
    cli.add_command(category_group, name="category")
