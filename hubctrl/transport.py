#
# This file is part of hubctrl.
#
""" Abstract host-side transport the hub protocol layer runs on top of. """

import os

from dataclasses import dataclass
from typing      import List

from .errors  import HubControlError
from .logging import log
from .types   import USBDirection, USBDeviceClass, build_request_type


# Timeout applied to every control transfer, in milliseconds.
CTRL_TIMEOUT = 1000


@dataclass(frozen=True)
class TopologyEntry:
    """ A single device as reported by the transport's bus walk. """

    bus          : int
    device       : int
    device_class : int

    @property
    def is_hub(self):
        return self.device_class == USBDeviceClass.HUB


class HubDeviceHandle:
    """
    An open connection to a single device, able to issue control transfers.

    Handles are context managers; leaving the block closes the handle. Subclasses
    implement control_transfer() and close().
    """

    def __init__(self, bus: int, device: int):
        self.bus    = bus
        self.device = device


    def control_transfer(self, request_type: int, request: int, value: int, index: int,
                         data_or_length, timeout: int):
        """
        Performs a raw control transfer.

        Args:
            request_type   : The packed bmRequestType byte.
            request        : bRequest.
            value, index   : wValue and wIndex.
            data_or_length : For IN transfers, the maximum number of bytes to read; for OUT
                             transfers, the data stage to send (possibly empty).
            timeout        : Timeout in milliseconds.

        Returns the data read for IN transfers, or the number of bytes written for OUT transfers.
        Raises TransferError on any failure, including a timeout.
        """
        raise NotImplementedError


    def close(self):
        """ Releases the handle. """
        raise NotImplementedError


    def control_request_in(self, request_type, recipient, request, value=0, index=0, length=0, timeout=CTRL_TIMEOUT):
        """ Performs an IN control request.

        request_type -- Determines if this is a standard, class, or vendor request. Accepts a USBRequestType.
        recipient -- Determines the context in which this command is interpreted. Accepts a USBRequestRecipient.
        request -- The request number to be performed.
        value, index -- The standard USB request arguments, to be included in the setup packet. Their meaning varies
            depending on the request.
        length -- The maximum length of data expected in response, or 0 if we don't expect any data back.
        """

        bm_request_type = build_request_type(USBDirection.IN, request_type, recipient)
        log.trace(f"IN  ctrl (Bus {self.bus}, Dev {self.device}) bmRequestType=0x{bm_request_type:02x} "
                  f"bRequest={request} wValue=0x{value:04x} wIndex={index} wLength={length}")

        data = bytes(self.control_transfer(bm_request_type, request, value, index, length, timeout))
        log.trace(f"    -> {len(data)} bytes: {data.hex()}")
        return data


    def control_request_out(self, request_type, recipient, request, value=0, index=0, data=b"", timeout=CTRL_TIMEOUT):
        """ Performs an OUT control request.

        request_type -- Determines if this is a standard, class, or vendor request. Accepts a USBRequestType.
        recipient -- Determines the context in which this command is interpreted. Accepts a USBRequestRecipient.
        request -- The request number to be performed.
        value, index -- The standard USB request arguments, to be included in the setup packet. Their meaning varies
            depending on the request.
        data -- The data to be transmitted with this control request.
        """

        bm_request_type = build_request_type(USBDirection.OUT, request_type, recipient)
        log.trace(f"OUT ctrl (Bus {self.bus}, Dev {self.device}) bmRequestType=0x{bm_request_type:02x} "
                  f"bRequest={request} wValue=0x{value:04x} wIndex={index} data={bytes(data).hex()}")

        return self.control_transfer(bm_request_type, request, value, index, data, timeout)


    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()

    def __repr__(self):
        return f"<{type(self).__name__} Bus {self.bus}, Dev {self.device}>"


class HubTransport:
    """
    Base class for host-side USB transports. A transport lists the devices on the
    system's busses and opens them by address.
    """

    app_name = "override this"

    @classmethod
    def autodetect(cls, **kwargs):
        """
        Creates the transport named by the BACKEND environment variable, or the first
        transport that considers itself appropriate for the environment.
        """

        # Importing the backends registers them as subclasses.
        from . import backends

        if 'BACKEND' in os.environ:
            backend_name = os.environ['BACKEND'].lower()
        else:
            backend_name = None

        subclass = cls._find_appropriate_subclass(backend_name)

        if subclass:
            log.debug("Using {} transport.".format(subclass.app_name))
            return subclass(**kwargs)
        else:
            log.error("failed to find a USB transport.")
            log.error("Try specifying a backend with: BACKEND=\"<backend name>\" <your app>")
            raise HubControlError("no USB transport available for backend {!r}".format(backend_name))


    @classmethod
    def _find_appropriate_subclass(cls, backend_name):

        # Depth-first: a more specific transport wins over its base class.
        for subclass in cls.__subclasses__():
            appropriate_class = subclass._find_appropriate_subclass(backend_name)
            if appropriate_class:
                return appropriate_class

        # Base case: check the current node.
        if cls.appropriate_for_environment(backend_name):
            return cls
        else:
            return None


    @classmethod
    def appropriate_for_environment(cls, backend_name=None) -> bool:
        """
        Returns true if this transport should be used, given the requested backend_name
        (or None, if the user didn't ask for any).
        """
        return False


    def topology(self) -> List[TopologyEntry]:
        """ Returns every device on every bus, in bus order. Raises BusAccessFailed. """
        raise NotImplementedError


    def open(self, bus: int, device: int) -> HubDeviceHandle:
        """ Opens the device at the given address. Raises DeviceOpenFailed. """
        raise NotImplementedError
