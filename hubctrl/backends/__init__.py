from .libusb import LibUSBTransport

__all__ = ["LibUSBTransport"]
