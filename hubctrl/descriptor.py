#
# This file is part of hubctrl.
#
""" Parsing for the hub-class descriptor returned by GET_DESCRIPTOR(HUB). """

import struct

from dataclasses import dataclass

from .errors  import DescriptorTooShort
from .logging import log
from .types   import DescriptorTypes, PowerSwitchingMode, HUB_CHAR_PORTIND


@dataclass(frozen=True)
class HubDescriptor:
    """
    The fixed portion of a USB 2.0 hub descriptor.

    Fields:
        length, descriptor_type :
            The bLength and bDescriptorType header fields. Only used for validation.
        port_count :
            bNbrPorts; the number of downstream ports on the hub.
        characteristics :
            wHubCharacteristics; bits 0-1 select the power switching mode,
            bit 7 indicates port indicator support.
        power_on_to_power_good :
            bPwrOn2PwrGood, in 2ms intervals. Informational.
        controller_current :
            bHubContrCurrent, in mA. Informational.
    """

    # bLength, bDescriptorType, bNbrPorts, wHubCharacteristics, bPwrOn2PwrGood, bHubContrCurrent
    HEADER_FORMAT = "<BBBHBB"
    HEADER_LENGTH = struct.calcsize(HEADER_FORMAT)

    length                 : int
    descriptor_type        : int
    port_count             : int
    characteristics        : int
    power_on_to_power_good : int = 0
    controller_current     : int = 0


    @classmethod
    def from_binary_descriptor(cls, data, received_length=None):
        """
        Creates a HubDescriptor from the raw reply to a hub GET_DESCRIPTOR request.

        Args:
            data            : The reply buffer.
            received_length : The number of bytes the transfer actually returned; defaults to
                              the length of the buffer, and can never exceed it.

        Raises DescriptorTooShort if no more than the fixed header was received; in that
        case, no field of the buffer is read.
        """

        if received_length is None:
            received_length = len(data)
        received_length = min(received_length, len(data))

        if received_length <= cls.HEADER_LENGTH:
            raise DescriptorTooShort(received_length, cls.HEADER_LENGTH)

        length, descriptor_type, port_count, characteristics, power_on_to_power_good, controller_current = \
            struct.unpack_from(cls.HEADER_FORMAT, bytes(data[:received_length]))

        if descriptor_type != DescriptorTypes.HUB:
            log.warning(f"unexpected descriptor type 0x{descriptor_type:02x} in hub descriptor")

        return cls(
            length=length,
            descriptor_type=descriptor_type,
            port_count=port_count,
            characteristics=characteristics,
            power_on_to_power_good=power_on_to_power_good,
            controller_current=controller_current,
        )


    @property
    def power_switching_mode(self):
        return PowerSwitchingMode.from_characteristics(self.characteristics)


    @property
    def supports_port_indicators(self):
        return bool(self.characteristics & HUB_CHAR_PORTIND)
