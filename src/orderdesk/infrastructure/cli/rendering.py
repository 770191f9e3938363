"""Shared helpers for turning outcomes and DTOs into terminal output."""

from __future__ import annotations

import click

from orderdesk.application.dto import EditorSnapshotDTO, OrderRowDTO
from orderdesk.application.outcome import Outcome
from orderdesk.domain.model.product import Product


def require_ok(outcome: Outcome) -> Outcome:
    """Stop the command with the outcome's message unless it succeeded."""
    if not outcome.ok:
        raise click.ClickException(outcome.message)
    return outcome


def parse_pairs(values: tuple[str, ...], what: str) -> list[tuple[str, int]]:
    """Parse ('7:3', '8:1,9:2') into [('7', 3), ('8', 1), ('9', 2)]."""
    pairs: list[tuple[str, int]] = []
    for value in values:
        for pair in value.split(","):
            pair = pair.strip()
            if not pair:
                continue
            if ":" not in pair:
                raise click.BadParameter(
                    f"Invalid format '{pair}'. Expected '{what}:Quantity'."
                )
            key, qty_str = pair.rsplit(":", 1)
            try:
                qty = int(qty_str)
            except ValueError:
                raise click.BadParameter(
                    f"Invalid quantity '{qty_str}' for {what.lower()} '{key}'."
                )
            pairs.append((key.strip(), qty))
    return pairs


def display_order_rows(rows: list[OrderRowDTO]) -> None:
    if not rows:
        click.echo("No orders found.")
        return

    click.echo(
        f"{'ID':<8} {'Order #':<14} {'Date':<11} {'# Products':>10} "
        f"{'Final Price':>12}  {'Status':<12} Options"
    )
    click.echo("-" * 84)
    for row in rows:
        enabled = [
            name
            for name, allowed in (
                ("edit", row.can_edit),
                ("delete", row.can_delete),
                ("status", row.can_change_status),
            )
            if allowed
        ]
        options = ", ".join(enabled) or "locked"
        click.echo(
            f"{str(row.id):<8} {row.order_number:<14} {row.date:<11} "
            f"{row.product_count:>10} {row.final_price:>12}  {row.status_label:<12} {options}"
        )


def display_editor(snapshot: EditorSnapshotDTO) -> None:
    click.echo(snapshot.title)
    click.echo(f"Order #:     {snapshot.order_number}")
    click.echo(f"Date:        {snapshot.date}")
    click.echo(f"# Products:  {snapshot.product_count}")
    click.echo(f"Final Price: {snapshot.final_price}")
    click.echo()

    if not snapshot.lines:
        click.echo("  No products added")
        return

    click.echo(f"  {'Line':<38} {'Name':<20} {'Unit Price':>10} {'Qty':>5} {'Total':>10}")
    click.echo(f"  {'-'*87}")
    for line in snapshot.lines:
        click.echo(
            f"  {line.line_id:<38} {line.product_name:<20} {line.unit_price:>10} "
            f"{line.quantity:>5} {line.line_total:>10}"
        )


def display_products(products: list[Product]) -> None:
    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<8} {'Name':<24} {'Unit Price':>10}")
    click.echo("-" * 44)
    for p in products:
        click.echo(f"{str(p.id):<8} {p.name:<24} {str(p.unit_price):>10}")
