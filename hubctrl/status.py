#
# This file is part of hubctrl.
#
""" Decoding of the wPortStatus / wPortChange reply to a hub GET_STATUS(port) request. """

from dataclasses import dataclass


# Length of a GET_STATUS(port) reply.
PORT_STATUS_LENGTH = 4


@dataclass(frozen=True)
class PortStatus:
    """ Point-in-time snapshot of a single downstream port. """

    # wPortStatus, low byte.
    connected    : bool = False
    enabled      : bool = False
    suspended    : bool = False
    over_current : bool = False
    reset        : bool = False

    # wPortStatus, high byte.
    powered      : bool = False
    low_speed    : bool = False
    high_speed   : bool = False
    test_mode    : bool = False
    indicator    : bool = False

    # wPortChange; carried along but not interpreted.
    change       : int  = 0


    @classmethod
    def from_bytes(cls, data):
        """ Decodes a four-byte GET_STATUS(port) reply. Undefined bits are ignored. """

        if len(data) != PORT_STATUS_LENGTH:
            raise ValueError(f"port status must be {PORT_STATUS_LENGTH} bytes, got {len(data)}")

        low, high = data[0], data[1]
        return cls(
            connected    = bool(low  & 0x01),
            enabled      = bool(low  & 0x02),
            suspended    = bool(low  & 0x04),
            over_current = bool(low  & 0x08),
            reset        = bool(low  & 0x10),
            powered      = bool(high & 0x01),
            low_speed    = bool(high & 0x02),
            high_speed   = bool(high & 0x04),
            test_mode    = bool(high & 0x08),
            indicator    = bool(high & 0x10),
            change       = data[2] | (data[3] << 8),
        )


    def flag_names(self):
        """ Returns the short names of every set flag, power-related flags first. """
        names = (
            (self.powered,      "power"),
            (self.low_speed,    "lowspeed"),
            (self.high_speed,   "highspeed"),
            (self.test_mode,    "test"),
            (self.indicator,    "indicator"),
            (self.connected,    "connect"),
            (self.enabled,      "enable"),
            (self.suspended,    "suspend"),
            (self.over_current, "oc"),
            (self.reset,        "RESET"),
        )
        return [name for is_set, name in names if is_set]


    def __str__(self):
        return " ".join(self.flag_names())
