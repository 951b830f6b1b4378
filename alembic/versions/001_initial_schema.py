"""Initial schema

Revision ID: 001
Revises:
Create Date: 2026-10-18 00:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _audit_columns() -> list[sa.Column]:
    return [
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
    ]


def upgrade() -> None:
    # Equipment types table
    op.create_table(
        "equipment_type",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(length=50), nullable=False),
        sa.Column("manufacturer", sa.String(length=100), nullable=True),
        sa.Column("model", sa.String(length=100), nullable=True),
        sa.Column("default_port_count", sa.Integer(), nullable=True),
        sa.Column("connection_type", sa.String(length=50), nullable=True),
        sa.Column("osi_level", sa.String(length=20), nullable=True),
        sa.Column("description", sa.Text(), nullable=True),
        *_audit_columns(),
        sa.PrimaryKeyConstraint("id", name="pk_equipment_type"),
        sa.UniqueConstraint("name", name="uq_equipment_type_name"),
    )
    op.create_index("ix_equipment_type_name", "equipment_type", ["name"])
    op.create_index("ix_equipment_type_manufacturer", "equipment_type", ["manufacturer"])

    # Employees table
    op.create_table(
        "employee",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("full_name", sa.String(length=100), nullable=False),
        sa.Column("position", sa.String(length=100), nullable=True),
        sa.Column("email", sa.String(length=100), nullable=True),
        *_audit_columns(),
        sa.PrimaryKeyConstraint("id", name="pk_employee"),
        sa.UniqueConstraint("email", name="uq_employee_email"),
    )
    op.create_index("ix_employee_full_name", "employee", ["full_name"])

    # Equipment table
    op.create_table(
        "equipment",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("type_id", sa.Integer(), nullable=False),
        sa.Column("employee_id", sa.Integer(), nullable=True),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("serial_number", sa.String(length=100), nullable=True),
        sa.Column("mac_address", sa.String(length=50), nullable=True),
        sa.Column("ip_address", sa.String(length=45), nullable=True),
        sa.Column("address", sa.String(length=250), nullable=True),
        sa.Column(
            "status",
            sa.Enum("ACTIVE", "INACTIVE", "MAINTENANCE", "RETIRED", name="equipmentstatus"),
            nullable=False,
        ),
        sa.Column("date_added", sa.Date(), nullable=False),
        sa.Column("date_updated", sa.Date(), nullable=True),
        sa.Column("technical_params", sa.JSON(), nullable=True),
        *_audit_columns(),
        sa.PrimaryKeyConstraint("id", name="pk_equipment"),
        sa.ForeignKeyConstraint(["type_id"], ["equipment_type.id"], name="fk_equipment_type_id"),
        sa.ForeignKeyConstraint(["employee_id"], ["employee.id"], name="fk_equipment_employee_id"),
        sa.UniqueConstraint("serial_number", name="uq_equipment_serial_number"),
        sa.UniqueConstraint("mac_address", name="uq_equipment_mac_address"),
    )
    op.create_index("ix_equipment_type_id", "equipment", ["type_id"])
    op.create_index("ix_equipment_employee_id", "equipment", ["employee_id"])
    op.create_index("ix_equipment_name", "equipment", ["name"])
    op.create_index("ix_equipment_ip_address", "equipment", ["ip_address"])
    op.create_index("ix_equipment_type_status", "equipment", ["type_id", "status"])
    op.create_index("ix_equipment_date_updated", "equipment", ["date_updated"])

    # Device ports table
    op.create_table(
        "device_port",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("equipment_id", sa.Integer(), nullable=False),
        sa.Column("port_number", sa.Integer(), nullable=False),
        sa.Column(
            "port_type",
            sa.Enum(
                "RJ45", "SFP", "SFP_PLUS", "QSFP", "QSFP_PLUS", "QSFP28", "CONSOLE", "USB",
                name="porttype",
            ),
            nullable=True,
        ),
        sa.Column(
            "status",
            sa.Enum("ACTIVE", "DISABLED", "ERROR", "TESTING", name="portstatus"),
            nullable=True,
        ),
        sa.Column(
            "speed",
            sa.Enum(
                "MBPS_10", "MBPS_100", "GBPS_1", "GBPS_10", "GBPS_25", "GBPS_40", "GBPS_100",
                name="portspeed",
            ),
            nullable=True,
        ),
        sa.Column("description", sa.String(length=200), nullable=True),
        sa.Column("connected_to_equipment_id", sa.Integer(), nullable=True),
        sa.Column("connected_to_port_id", sa.Integer(), nullable=True),
        *_audit_columns(),
        sa.PrimaryKeyConstraint("id", name="pk_device_port"),
        sa.ForeignKeyConstraint(["equipment_id"], ["equipment.id"], name="fk_device_port_equipment_id"),
        sa.ForeignKeyConstraint(
            ["connected_to_equipment_id"], ["equipment.id"],
            name="fk_device_port_connected_to_equipment_id",
        ),
        sa.ForeignKeyConstraint(
            ["connected_to_port_id"], ["device_port.id"],
            name="fk_device_port_connected_to_port_id",
        ),
        sa.UniqueConstraint("equipment_id", "port_number", name="uq_device_port_equipment_number"),
    )
    op.create_index("ix_device_port_equipment_id", "device_port", ["equipment_id"])
    op.create_index(
        "ix_device_port_connected_to_equipment_id", "device_port", ["connected_to_equipment_id"]
    )
    op.create_index("ix_device_port_connected_to_port_id", "device_port", ["connected_to_port_id"])

    # IP addresses table
    op.create_table(
        "ip_address",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("equipment_id", sa.Integer(), nullable=False),
        sa.Column("ip_address", sa.String(length=45), nullable=False),
        sa.Column("subnet_mask", sa.String(length=45), nullable=True),
        sa.Column("gateway", sa.String(length=45), nullable=True),
        sa.Column("network_type", sa.String(length=20), nullable=True),
        sa.Column("is_primary", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("assigned_date", sa.Date(), nullable=False),
        *_audit_columns(),
        sa.PrimaryKeyConstraint("id", name="pk_ip_address"),
        sa.ForeignKeyConstraint(["equipment_id"], ["equipment.id"], name="fk_ip_address_equipment_id"),
        sa.UniqueConstraint("ip_address", name="uq_ip_address_ip_address"),
    )
    op.create_index("ix_ip_address_equipment_id", "ip_address", ["equipment_id"])
    op.create_index(
        "uq_ip_address_primary_per_equipment",
        "ip_address",
        ["equipment_id"],
        unique=True,
        postgresql_where=sa.text("is_primary"),
        sqlite_where=sa.text("is_primary = 1"),
    )

    # Maintenance history table
    op.create_table(
        "maintenance_history",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("equipment_id", sa.Integer(), nullable=False),
        sa.Column("performed_by_id", sa.Integer(), nullable=True),
        sa.Column("date", sa.DateTime(), nullable=False),
        sa.Column(
            "type",
            sa.Enum("ROUTINE", "REPAIR", "UPGRADE", "EMERGENCY", "PREVENTIVE", name="maintenancetype"),
            nullable=False,
        ),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("cost", sa.Numeric(precision=10, scale=2), nullable=True),
        sa.Column("next_maintenance_date", sa.Date(), nullable=True),
        *_audit_columns(),
        sa.PrimaryKeyConstraint("id", name="pk_maintenance_history"),
        sa.ForeignKeyConstraint(
            ["equipment_id"], ["equipment.id"], name="fk_maintenance_history_equipment_id"
        ),
        sa.ForeignKeyConstraint(
            ["performed_by_id"], ["employee.id"], name="fk_maintenance_history_performed_by_id"
        ),
    )
    op.create_index("ix_maintenance_history_equipment_id", "maintenance_history", ["equipment_id"])
    op.create_index(
        "ix_maintenance_history_performed_by_id", "maintenance_history", ["performed_by_id"]
    )
    op.create_index(
        "ix_maintenance_history_equipment_date", "maintenance_history", ["equipment_id", "date"]
    )
    op.create_index(
        "ix_maintenance_history_next_date", "maintenance_history", ["next_maintenance_date"]
    )


def downgrade() -> None:
    op.drop_table("maintenance_history")
    op.drop_table("ip_address")
    op.drop_table("device_port")
    op.drop_table("equipment")
    op.drop_table("employee")
    op.drop_table("equipment_type")

    # Drop enums (PostgreSQL)
    op.execute("DROP TYPE IF EXISTS maintenancetype")
    op.execute("DROP TYPE IF EXISTS portspeed")
    op.execute("DROP TYPE IF EXISTS portstatus")
    op.execute("DROP TYPE IF EXISTS porttype")
    op.execute("DROP TYPE IF EXISTS equipmentstatus")
