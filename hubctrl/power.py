#
# This file is part of hubctrl.
#
""" Switching of downstream port power with SET_FEATURE / CLEAR_FEATURE(PORT_POWER). """

from dataclasses import dataclass, field
from typing      import List, Optional

from .enumerator import read_port_statuses
from .errors     import PortStatusReadFailed, PowerCommandFailed, TransferError
from .logging    import log
from .registry   import HubRecord
from .status     import PortStatus
from .transport  import CTRL_TIMEOUT
from .types      import HubPortFeatures, PowerSwitchingMode
from .types      import USBRequestRecipient, USBRequestType, USBStandardRequests


@dataclass
class PowerResult:
    """ What a power command did, and the hub's ports as read back afterwards. """

    record     : HubRecord
    port       : int
    power      : bool
    request    : USBStandardRequests
    ports      : List[PortStatus] = field(default_factory=list)
    port_error : Optional[PortStatusReadFailed] = None

    @property
    def confirmed_status(self) -> Optional[PortStatus]:
        """ The read-back status of the port we switched, if we got that far. """
        if 1 <= self.port <= len(self.ports):
            return self.ports[self.port - 1]
        return None


def power_request_for(power) -> USBStandardRequests:
    """ Any nonzero power value turns the port on. """
    return USBStandardRequests.SET_FEATURE if power else USBStandardRequests.CLEAR_FEATURE


class PowerController:
    """ Issues port power commands to hubs found during enumeration. """

    def __init__(self, transport):
        self.transport = transport


    def set_port_power(self, record: HubRecord, port: int, power) -> PowerResult:
        """
        Turns power on a hub's downstream port on (power nonzero) or off, and then reads
        back every port of the hub.

        Raises DeviceOpenFailed if the hub can't be reopened, and PowerCommandFailed if the
        hub doesn't accept the request. Neither is retried.
        """
        request = power_request_for(power)

        if not 1 <= port <= record.port_count:
            log.warning(f"port {port} is outside 1..{record.port_count}; sending the request anyway")
        if record.descriptor is not None and record.descriptor.power_switching_mode is PowerSwitchingMode.NONE:
            log.warning(f"hub (Bus {record.bus}, Dev {record.device}) reports no power switching")

        with self.transport.open(record.bus, record.device) as handle:
            log.info(f"{request.name}(PORT_POWER) on port {port} of (Bus {record.bus}, Dev {record.device})")
            try:
                handle.control_request_out(
                    USBRequestType.CLASS,
                    USBRequestRecipient.OTHER,
                    request,
                    value=HubPortFeatures.PORT_POWER,
                    index=port,
                    timeout=CTRL_TIMEOUT,
                )
            except TransferError as exception:
                raise PowerCommandFailed(port, exception) from exception

            result = PowerResult(record=record, port=port, power=bool(power), request=request)
            result.ports, result.port_error = read_port_statuses(handle, record.port_count)

        return result
