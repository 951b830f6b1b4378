"""Device port operations and port-to-port link management.

A link is stored on the source port as the pair
(``connected_to_equipment_id``, ``connected_to_port_id``). By default a
link is directed: connecting A to B only updates A. With
``symmetric_port_links`` enabled, connect and disconnect keep both ends in
step inside the same transaction.
"""

import logging

from sqlalchemy import select, update

from netequip.config import get_settings
from netequip.core.errors import (
    DevicePortNotFound,
    DuplicateDevicePort,
    EquipmentNotFound,
    InvalidPortConnection,
    NotFoundError,
    PortNotConnected,
)
from netequip.models.device_port import DevicePort, PortStatus, PortType
from netequip.models.equipment import Equipment
from netequip.schemas.device_port import DevicePortCreate, DevicePortResponse, DevicePortUpdate
from netequip.services.base import BaseService

logger = logging.getLogger(__name__)


class DevicePortService(BaseService):
    """CRUD, lookups and connection management for device ports."""

    def __init__(self, db, symmetric_links: bool | None = None):
        super().__init__(db)
        if symmetric_links is None:
            symmetric_links = get_settings().symmetric_port_links
        self.symmetric_links = symmetric_links

    async def to_response(self, port: DevicePort) -> DevicePortResponse:
        """Resolve owner and link-target names from the foreign keys."""
        equipment = await self.db.get(Equipment, port.equipment_id)
        target_equipment = (
            await self.db.get(Equipment, port.connected_to_equipment_id)
            if port.connected_to_equipment_id is not None
            else None
        )
        target_port = (
            await self.db.get(DevicePort, port.connected_to_port_id)
            if port.connected_to_port_id is not None
            else None
        )
        return DevicePortResponse(
            id=port.id,
            equipment_id=port.equipment_id,
            equipment_name=equipment.name if equipment else None,
            port_number=port.port_number,
            port_type=port.port_type,
            status=port.status,
            speed=port.speed,
            connected_to_equipment_id=port.connected_to_equipment_id,
            connected_to_equipment_name=target_equipment.name if target_equipment else None,
            connected_to_port_id=port.connected_to_port_id,
            connected_to_port_number=target_port.port_number if target_port else None,
            description=port.description,
        )

    async def _responses(self, query) -> list[DevicePortResponse]:
        return [await self.to_response(p) for p in await self._all(query)]

    async def _find_by_number(self, equipment_id: int, port_number: int) -> DevicePort | None:
        return await self._first(
            select(DevicePort).where(
                DevicePort.equipment_id == equipment_id,
                DevicePort.port_number == port_number,
            )
        )

    # CRUD

    async def create(self, data: DevicePortCreate) -> DevicePortResponse:
        await self._require(Equipment, data.equipment_id, EquipmentNotFound)

        if await self._find_by_number(data.equipment_id, data.port_number) is not None:
            logger.warning(f"Port {data.port_number} already exists on equipment {data.equipment_id}")
            raise DuplicateDevicePort(data.equipment_id, data.port_number)

        port = DevicePort(
            **data.model_dump(exclude={"connected_to_equipment_id", "connected_to_port_id"})
        )
        await self._set_connections(port, data.connected_to_equipment_id, data.connected_to_port_id)

        await self._save(port)
        logger.info(f"Created port {port.id} (#{port.port_number}) on equipment {port.equipment_id}")
        return await self.to_response(port)

    async def get(self, port_id: int) -> DevicePortResponse:
        return await self.to_response(await self._require(DevicePort, port_id, DevicePortNotFound))

    async def list_all(self) -> list[DevicePortResponse]:
        return await self._responses(select(DevicePort).order_by(DevicePort.id))

    async def update(self, port_id: int, data: DevicePortUpdate) -> DevicePortResponse:
        port = await self._require(DevicePort, port_id, DevicePortNotFound)
        await self._require(Equipment, data.equipment_id, EquipmentNotFound)

        # Number uniqueness only needs re-checking when the key moved
        if port.equipment_id != data.equipment_id or port.port_number != data.port_number:
            if await self._find_by_number(data.equipment_id, data.port_number) is not None:
                logger.warning(
                    f"Port {data.port_number} already exists on equipment {data.equipment_id}"
                )
                raise DuplicateDevicePort(data.equipment_id, data.port_number)

        update_data = data.model_dump(exclude={"connected_to_equipment_id", "connected_to_port_id"})
        for field, value in update_data.items():
            setattr(port, field, value)
        await self._set_connections(port, data.connected_to_equipment_id, data.connected_to_port_id)

        await self._save(port)
        return await self.to_response(port)

    async def delete(self, port_id: int) -> None:
        """Delete a port. Ports linked to it are disconnected."""
        port = await self._require(DevicePort, port_id, DevicePortNotFound)
        await self.db.execute(
            update(DevicePort)
            .where(DevicePort.connected_to_port_id == port_id)
            .values(connected_to_equipment_id=None, connected_to_port_id=None)
        )
        await self.db.delete(port)
        await self.db.commit()
        logger.info(f"Deleted port {port_id}")

    async def change_status(self, port_id: int, status: PortStatus) -> DevicePortResponse:
        port = await self._require(DevicePort, port_id, DevicePortNotFound)
        port.status = status
        await self._save(port)
        return await self.to_response(port)

    # Connections

    async def connect(self, source_id: int, target_id: int) -> DevicePortResponse:
        """Link ``source_id`` to ``target_id``.

        Checked in order: both ports exist, they are different ports, they
        sit on different equipment, and the target is not already linked.
        """
        source = await self._require(DevicePort, source_id, DevicePortNotFound)
        target = await self._require(DevicePort, target_id, DevicePortNotFound)

        if source.id == target.id:
            raise InvalidPortConnection("A port cannot be connected to itself")
        if source.equipment_id == target.equipment_id:
            raise InvalidPortConnection("Ports of the same equipment cannot be connected to each other")
        if target.connected_to_port_id is not None:
            logger.warning(
                f"Target port {target.id} is already connected to port {target.connected_to_port_id}"
            )
            raise InvalidPortConnection(
                f"Target port {target.id} is already connected; disconnect it first"
            )

        if self.symmetric_links:
            await self._release_peer(source)
            target.connected_to_equipment_id = source.equipment_id
            target.connected_to_port_id = source.id

        source.connected_to_equipment_id = target.equipment_id
        source.connected_to_port_id = target.id

        await self.db.commit()
        logger.info(f"Connected port {source.id} -> port {target.id}")
        return await self.to_response(source)

    async def disconnect(self, port_id: int) -> DevicePortResponse:
        """Clear the link on ``port_id``. Succeeds when already unconnected."""
        port = await self._require(DevicePort, port_id, DevicePortNotFound)

        if self.symmetric_links:
            await self._release_peer(port)
        port.connected_to_equipment_id = None
        port.connected_to_port_id = None

        await self.db.commit()
        logger.info(f"Disconnected port {port_id}")
        return await self.to_response(port)

    async def _release_peer(self, port: DevicePort) -> None:
        """Clear the reverse pointer of ``port``'s current peer, if it points back."""
        if port.connected_to_port_id is None:
            return
        peer = await self.db.get(DevicePort, port.connected_to_port_id)
        if peer is not None and peer.connected_to_port_id == port.id:
            peer.connected_to_equipment_id = None
            peer.connected_to_port_id = None

    async def _set_connections(
        self,
        port: DevicePort,
        target_equipment_id: int | None,
        target_port_id: int | None,
    ) -> None:
        """Apply link targets supplied on create/update.

        Each target is resolved on its own and ``None`` clears it. Unlike
        ``connect`` this does not refuse a target port that is already linked.
        In symmetric mode a peer that is being dropped loses its back-link.
        """
        if self.symmetric_links and port.connected_to_port_id != target_port_id:
            await self._release_peer(port)

        if target_equipment_id is not None:
            await self._require(Equipment, target_equipment_id, EquipmentNotFound)
        port.connected_to_equipment_id = target_equipment_id

        if target_port_id is not None:
            target_port = await self._require(DevicePort, target_port_id, DevicePortNotFound)
            if target_equipment_id is not None and target_port.equipment_id != target_equipment_id:
                raise InvalidPortConnection(
                    f"Port {target_port_id} does not belong to equipment {target_equipment_id}"
                )
        port.connected_to_port_id = target_port_id

    async def get_connected_port(self, port_id: int) -> DevicePortResponse:
        port = await self._require(DevicePort, port_id, DevicePortNotFound)
        if port.connected_to_port_id is None:
            raise PortNotConnected(port_id)
        target = await self._require(DevicePort, port.connected_to_port_id, DevicePortNotFound)
        return await self.to_response(target)

    async def is_connected(self, port_id: int) -> bool:
        port = await self._require(DevicePort, port_id, DevicePortNotFound)
        return port.is_connected

    # Lookups

    async def by_equipment(self, equipment_id: int) -> list[DevicePortResponse]:
        await self._require(Equipment, equipment_id, EquipmentNotFound)
        query = (
            select(DevicePort)
            .where(DevicePort.equipment_id == equipment_id)
            .order_by(DevicePort.port_number.asc())
        )
        return await self._responses(query)

    async def by_equipment_and_number(self, equipment_id: int, port_number: int) -> DevicePortResponse:
        await self._require(Equipment, equipment_id, EquipmentNotFound)
        port = await self._find_by_number(equipment_id, port_number)
        if port is None:
            raise NotFoundError(f"Port {port_number} not found on equipment {equipment_id}")
        return await self.to_response(port)

    async def by_status(self, status: PortStatus) -> list[DevicePortResponse]:
        return await self._responses(select(DevicePort).where(DevicePort.status == status))

    async def by_type(self, port_type: PortType) -> list[DevicePortResponse]:
        return await self._responses(select(DevicePort).where(DevicePort.port_type == port_type))

    async def by_equipment_and_status(
        self, equipment_id: int, status: PortStatus
    ) -> list[DevicePortResponse]:
        await self._require(Equipment, equipment_id, EquipmentNotFound)
        query = (
            select(DevicePort)
            .where(DevicePort.equipment_id == equipment_id, DevicePort.status == status)
            .order_by(DevicePort.port_number.asc())
        )
        return await self._responses(query)

    async def active_by_equipment(self, equipment_id: int) -> list[DevicePortResponse]:
        return await self.by_equipment_and_status(equipment_id, PortStatus.ACTIVE)

    async def by_equipment_type_and_status(
        self, equipment_id: int, port_type: PortType, status: PortStatus
    ) -> list[DevicePortResponse]:
        await self._require(Equipment, equipment_id, EquipmentNotFound)
        query = (
            select(DevicePort)
            .where(
                DevicePort.equipment_id == equipment_id,
                DevicePort.port_type == port_type,
                DevicePort.status == status,
            )
            .order_by(DevicePort.port_number.asc())
        )
        return await self._responses(query)

    async def available_by_equipment(self, equipment_id: int) -> list[DevicePortResponse]:
        """Ports with no link target."""
        await self._require(Equipment, equipment_id, EquipmentNotFound)
        query = (
            select(DevicePort)
            .where(
                DevicePort.equipment_id == equipment_id,
                DevicePort.connected_to_equipment_id.is_(None),
            )
            .order_by(DevicePort.port_number.asc())
        )
        return await self._responses(query)

    async def occupied_by_equipment(self, equipment_id: int) -> list[DevicePortResponse]:
        """Ports with a link target."""
        await self._require(Equipment, equipment_id, EquipmentNotFound)
        query = (
            select(DevicePort)
            .where(
                DevicePort.equipment_id == equipment_id,
                DevicePort.connected_to_equipment_id.is_not(None),
            )
            .order_by(DevicePort.port_number.asc())
        )
        return await self._responses(query)

    async def connections_to_equipment(self, equipment_id: int) -> list[DevicePortResponse]:
        """Ports on any equipment whose link target is ``equipment_id``."""
        await self._require(Equipment, equipment_id, EquipmentNotFound)
        query = select(DevicePort).where(DevicePort.connected_to_equipment_id == equipment_id)
        return await self._responses(query)

    # Counts

    async def count_by_equipment(self, equipment_id: int) -> int:
        await self._require(Equipment, equipment_id, EquipmentNotFound)
        return await self._count(DevicePort, DevicePort.equipment_id == equipment_id)

    async def count_active_by_equipment(self, equipment_id: int) -> int:
        await self._require(Equipment, equipment_id, EquipmentNotFound)
        return await self._count(
            DevicePort,
            DevicePort.equipment_id == equipment_id,
            DevicePort.status == PortStatus.ACTIVE,
        )
