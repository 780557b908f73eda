#
# This file is part of hubctrl.
#
""" Transport built on pyusb, and thus on whatever libusb the host provides. """

import usb.core
import usb.util

from ..errors    import BusAccessFailed, DeviceOpenFailed, TransferError
from ..logging   import log
from ..transport import HubDeviceHandle, HubTransport, TopologyEntry


class LibUSBDeviceHandle(HubDeviceHandle):
    """ Handle onto a pyusb Device. """

    def __init__(self, usb_device):
        super().__init__(usb_device.bus, usb_device.address)
        self.usb_device = usb_device


    def control_transfer(self, request_type, request, value, index, data_or_length, timeout):
        try:
            return self.usb_device.ctrl_transfer(request_type, request, value, index,
                                                 data_or_length, timeout)
        except (usb.core.USBTimeoutError, usb.core.USBError) as exception:
            raise TransferError(f"control request {request} to Bus {self.bus}, Dev {self.device} "
                                f"failed: {exception}") from exception


    def close(self):
        usb.util.dispose_resources(self.usb_device)


class LibUSBTransport(HubTransport):
    """
    Class that represents the host's own USB stack, as reached through pyusb.
    """
    app_name = "libusb"

    @classmethod
    def appropriate_for_environment(cls, backend_name):
        # This is the only real transport; use it unless another was requested.
        return backend_name in (None, "libusb", "pyusb")


    def __init__(self, backend=None):
        """
        Creates a new libusb transport.

        backend -- An explicit pyusb backend object; by default pyusb picks one itself.
        """
        self.backend = backend


    def _find(self, find_all=False, **kwargs):
        try:
            if find_all:
                # find_all yields lazily; walk the bus here so its errors land below.
                return list(usb.core.find(backend=self.backend, find_all=True, **kwargs))
            return usb.core.find(backend=self.backend, **kwargs)
        except (usb.core.NoBackendError, usb.core.USBError) as exception:
            raise BusAccessFailed(f"failed to access USB bus: {exception}") from exception


    def topology(self):
        devices = self._find(find_all=True)
        entries = [TopologyEntry(bus=dev.bus, device=dev.address, device_class=dev.bDeviceClass)
                   for dev in devices]
        log.debug(f"found {len(entries)} USB devices")
        return sorted(entries, key=lambda entry: (entry.bus, entry.device))


    def open(self, bus, device):
        usb_device = self._find(bus=bus, address=device)
        if usb_device is None:
            raise DeviceOpenFailed(bus, device, "device is no longer present")

        return LibUSBDeviceHandle(usb_device)
