#
# This file is part of hubctrl.
#
""" USB types -- enumerations describing the standard and hub-class values we use. """

from enum import IntEnum


class USBDirection(IntEnum):
    """ Class representing USB directions. """
    OUT = 0
    IN  = 1


class USBRequestRecipient(IntEnum):
    """ Enumeration that describes each 'recipient' of a USB request field. """

    DEVICE    = 0
    INTERFACE = 1
    ENDPOINT  = 2
    OTHER     = 3


class USBRequestType(IntEnum):
    """ Enumeration that describes each possible Type field for a USB request. """

    STANDARD  = 0
    CLASS     = 1
    VENDOR    = 2
    RESERVED  = 3


class USBStandardRequests(IntEnum):
    GET_STATUS        = 0
    CLEAR_FEATURE     = 1
    SET_FEATURE       = 3
    GET_DESCRIPTOR    = 6


class DescriptorTypes(IntEnum):
    DEVICE = 0x01
    HUB    = 0x29


class USBDeviceClass(IntEnum):
    PER_INTERFACE = 0x00
    HUB           = 0x09


class HubPortFeatures(IntEnum):
    """ Hub-class feature selectors addressed to a port (recipient OTHER). """
    PORT_CONNECTION = 0
    PORT_ENABLE     = 1
    PORT_SUSPEND    = 2
    PORT_OVER_CURRENT = 3
    PORT_RESET      = 4
    PORT_POWER      = 8
    PORT_LOW_SPEED  = 9
    PORT_INDICATOR  = 22


# wHubCharacteristics fields.
HUB_CHAR_LPSM    = 0x0003
HUB_CHAR_PORTIND = 0x0080


class PowerSwitchingMode(IntEnum):
    """ Logical power switching mode; bits 0-1 of wHubCharacteristics. """

    GANGED     = 0
    INDIVIDUAL = 1
    NONE       = 2

    @classmethod
    def from_characteristics(cls, characteristics):
        """ Decodes the mode from a wHubCharacteristics value. Both reserved encodings mean no switching. """
        bits = characteristics & HUB_CHAR_LPSM
        if bits == 0:
            return cls.GANGED
        if bits == 1:
            return cls.INDIVIDUAL
        return cls.NONE

    def describe(self):
        return {
            PowerSwitchingMode.GANGED:     "ganged",
            PowerSwitchingMode.INDIVIDUAL: "individual",
            PowerSwitchingMode.NONE:       "no",
        }[self]


def build_request_type(direction, request_type, recipient):
    """ Packs a bmRequestType byte.

    Args:
        direction    : a USBDirection (or anything that converts to one).
        request_type : a USBRequestType.
        recipient    : a USBRequestRecipient.
    """
    return (USBDirection(direction) << 7) | (USBRequestType(request_type) << 5) | USBRequestRecipient(recipient)
