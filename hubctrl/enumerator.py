#
# This file is part of hubctrl.
#
""" Discovery of the hubs on the system, and reading of their ports' status. """

from dataclasses import dataclass, field
from typing      import List, Optional

from .descriptor import HubDescriptor
from .errors     import DescriptorTooShort, DeviceOpenFailed, HubControlError
from .errors     import NoHubFound, PortStatusReadFailed, TransferError
from .logging    import log
from .registry   import HubRecord, HubRegistry
from .status     import PortStatus, PORT_STATUS_LENGTH
from .transport  import CTRL_TIMEOUT
from .types      import DescriptorTypes, USBRequestRecipient, USBRequestType, USBStandardRequests


# Size of the buffer offered for the hub descriptor; generously larger than any real descriptor.
HUB_DESCRIPTOR_BUFFER_SIZE = 1024


@dataclass
class HubReport:
    """
    The outcome of visiting one hub-class device.

    Fields:
        bus, device :
            The address of the device.
        index :
            Registry index of the hub, or None if it was skipped.
        descriptor :
            The parsed hub descriptor, if it could be read.
        ports :
            Status of ports 1..n, in port order. May stop early; see port_error.
        error :
            The error that made us skip the device, if any.
        port_error :
            The error that cut the port listing short, if any.
    """

    bus        : int
    device     : int
    index      : Optional[int] = None
    descriptor : Optional[HubDescriptor] = None
    ports      : List[PortStatus] = field(default_factory=list)
    error      : Optional[HubControlError] = None
    port_error : Optional[PortStatusReadFailed] = None

    @property
    def registered(self):
        return self.index is not None


@dataclass
class EnumerationResult:
    registry : HubRegistry
    reports  : List[HubReport] = field(default_factory=list)


def read_hub_descriptor(handle) -> HubDescriptor:
    """ Issues GET_DESCRIPTOR(HUB) and parses the reply. Raises TransferError or DescriptorTooShort. """
    data = handle.control_request_in(
        USBRequestType.CLASS,
        USBRequestRecipient.DEVICE,
        USBStandardRequests.GET_DESCRIPTOR,
        value=DescriptorTypes.HUB << 8,
        index=0,
        length=HUB_DESCRIPTOR_BUFFER_SIZE,
        timeout=CTRL_TIMEOUT,
    )
    return HubDescriptor.from_binary_descriptor(data, len(data))


def read_port_status(handle, port) -> PortStatus:
    """ Issues GET_STATUS for a single port. Raises PortStatusReadFailed. """
    try:
        data = handle.control_request_in(
            USBRequestType.CLASS,
            USBRequestRecipient.OTHER,
            USBStandardRequests.GET_STATUS,
            value=0,
            index=port,
            length=PORT_STATUS_LENGTH,
            timeout=CTRL_TIMEOUT,
        )
    except TransferError as exception:
        raise PortStatusReadFailed(port, exception) from exception

    if len(data) != PORT_STATUS_LENGTH:
        raise PortStatusReadFailed(port, f"short reply ({len(data)} bytes)")

    return PortStatus.from_bytes(data)


def read_port_statuses(handle, port_count):
    """
    Reads the status of ports 1..port_count, in order.

    The walk stops at the first failure, since a hub that fails one request is not
    trusted for the rest. Returns a (statuses, error) tuple; error is None if every port was read.
    """
    statuses = []

    for port in range(1, port_count + 1):
        try:
            statuses.append(read_port_status(handle, port))
        except PortStatusReadFailed as error:
            log.debug(f"stopping port listing on (Bus {handle.bus}, Dev {handle.device}): {error}")
            return statuses, error

    return statuses, None


class HubEnumerator:
    """
    Walks the transport's topology and builds a HubRegistry from every hub that
    can be opened and described.
    """

    def __init__(self, transport, registry=None):
        """
        Args:
            transport : The HubTransport to enumerate.
            registry  : The HubRegistry to fill; a fresh one by default.
        """
        self.transport = transport
        self.registry  = registry if registry is not None else HubRegistry()


    def enumerate(self) -> EnumerationResult:
        """
        Visits every hub on the system. Per-device failures are recorded in the
        returned reports; NoHubFound is raised if no hub could be registered.
        """
        result = EnumerationResult(registry=self.registry)

        for entry in self.transport.topology():
            if not entry.is_hub:
                continue

            log.debug(f"visiting hub (Bus {entry.bus}, Dev {entry.device})")
            result.reports.append(self._visit(entry.bus, entry.device))

        if not len(self.registry):
            raise NoHubFound(result.reports)

        return result


    def _visit(self, bus, device) -> HubReport:
        report = HubReport(bus=bus, device=device)

        try:
            handle = self.transport.open(bus, device)
        except DeviceOpenFailed as error:
            log.debug(f"skipping: {error}")
            report.error = error
            return report

        with handle:
            try:
                report.descriptor = read_hub_descriptor(handle)
            except (TransferError, DescriptorTooShort) as error:
                log.debug(f"skipping (Bus {bus}, Dev {device}): {error}")
                report.error = error
                return report

            record = HubRecord(bus=bus, device=device,
                               port_count=report.descriptor.port_count,
                               descriptor=report.descriptor)
            report.index = self.registry.register(record)
            log.debug(f"registered hub {report.index} with {record.port_count} ports, "
                      f"{report.descriptor.power_switching_mode.describe()} power switching")

            report.ports, report.port_error = read_port_statuses(handle, record.port_count)

        return report
