#
# This file is part of hubctrl.
#
""" Exceptions raised by the hub-class protocol layer. """

class HubControlError(Exception):
    """ Base class for every error hubctrl raises. """
    pass


class TransferError(HubControlError, IOError):
    """ A control transfer failed, stalled or timed out. """
    pass


class DeviceOpenFailed(HubControlError, IOError):
    """ A hub could not be opened. Recoverable while enumerating. """

    def __init__(self, bus, device, reason=None):
        self.bus    = bus
        self.device = device
        message = f"cannot open device (Bus {bus}, Dev {device})"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class DescriptorTooShort(HubControlError):
    """ The hub descriptor reply was no longer than the fixed header. """

    def __init__(self, received_length, header_length):
        self.received_length = received_length
        self.header_length   = header_length
        super().__init__(f"hub descriptor too short ({received_length} bytes, "
                f"need more than {header_length})")


class PortStatusReadFailed(HubControlError):
    """ GET_STATUS failed for a port; no further ports of that hub are read. """

    def __init__(self, port, reason=None):
        self.port = port
        message = f"cannot read port {port} status"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class RegistryFull(HubControlError):
    """ More hubs were discovered than the registry can hold. """

    def __init__(self, capacity):
        self.capacity = capacity
        super().__init__(f"hub registry is full ({capacity} hubs)")


class NoHubFound(HubControlError):
    """ The topology walk produced no usable hub. """

    def __init__(self, reports=()):
        self.reports = list(reports)
        super().__init__("no hub found")


class TargetNotFound(HubControlError):
    """ The requested hub could not be matched against the registry. """
    pass


class PowerCommandFailed(HubControlError):
    """ The SET_FEATURE / CLEAR_FEATURE(PORT_POWER) transfer did not complete. """

    def __init__(self, port, reason=None):
        self.port = port
        message = f"failed to switch power on port {port}"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class BusAccessFailed(HubControlError):
    """ The transport could not list the USB busses at all. """
    pass
