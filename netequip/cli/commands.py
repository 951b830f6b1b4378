"""CLI commands for the equipment inventory."""

import asyncio

import typer
from rich.console import Console
from rich.table import Table

from netequip.models.base import AsyncSessionLocal, create_all
from netequip.services import DevicePortService, EquipmentService, MaintenanceService

app = typer.Typer(help="Network Equipment Inventory CLI")
console = Console()


def _run(coro):
    return asyncio.run(coro)


async def _with_session(func):
    async with AsyncSessionLocal() as session:
        return await func(session)


def _summary_table(title: str, items) -> Table:
    table = Table(title=title)
    table.add_column("ID", style="cyan")
    table.add_column("Name", style="magenta")
    table.add_column("Type")
    table.add_column("Serial")
    table.add_column("IP Address")
    table.add_column("Status")
    table.add_column("Ports", justify="right")

    for item in items:
        table.add_row(
            str(item.id),
            item.name,
            item.type_name or "-",
            item.serial_number or "-",
            item.ip_address or "-",
            item.status.value,
            str(item.ports_count),
        )
    return table


@app.command("init-db")
def init_db():
    """Create all database tables."""
    console.print("[cyan]Creating tables...[/cyan]")
    _run(create_all())
    console.print("[green]Database initialised[/green]")


@app.command()
def equipment():
    """List all equipment."""
    items = _run(_with_session(lambda db: EquipmentService(db).list_all()))
    console.print(_summary_table("Equipment", items))


@app.command()
def ports(equipment_id: int = typer.Argument(..., help="Equipment ID")):
    """List the ports of an equipment item and where they are linked."""
    items = _run(_with_session(lambda db: DevicePortService(db).by_equipment(equipment_id)))

    table = Table(title=f"Ports of equipment {equipment_id}")
    table.add_column("#", style="cyan", justify="right")
    table.add_column("Type")
    table.add_column("Speed")
    table.add_column("Status")
    table.add_column("Linked To")

    for port in items:
        if port.connected_to_port_id is not None:
            target = f"{port.connected_to_equipment_name} port {port.connected_to_port_number}"
        else:
            target = "[dim]free[/dim]"
        table.add_row(
            str(port.port_number),
            port.port_type.value if port.port_type else "-",
            port.speed.value if port.speed else "-",
            port.status.value if port.status else "-",
            target,
        )
    console.print(table)


@app.command()
def stale(months: int = typer.Option(None, "--months", "-m", help="Months without an update")):
    """List equipment that needs maintenance."""
    items = _run(_with_session(lambda db: EquipmentService(db).needing_maintenance(months)))
    console.print(_summary_table("Equipment needing maintenance", items))
    if not items:
        console.print("[green]Everything was updated recently[/green]")


@app.command()
def overdue():
    """List maintenance records whose next date has passed."""
    items = _run(_with_session(lambda db: MaintenanceService(db).overdue()))

    table = Table(title="Overdue maintenance")
    table.add_column("ID", style="cyan")
    table.add_column("Equipment", style="magenta")
    table.add_column("Type")
    table.add_column("Last Done")
    table.add_column("Due", style="red")
    table.add_column("Performed By")

    for record in items:
        table.add_row(
            str(record.id),
            record.equipment_name or str(record.equipment_id),
            record.type.value,
            record.date.strftime("%Y-%m-%d"),
            str(record.next_maintenance_date),
            record.performed_by_name or "-",
        )
    console.print(table)


if __name__ == "__main__":
    app()
