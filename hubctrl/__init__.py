# Standard types.
from .descriptor import HubDescriptor
from .status     import PortStatus
from .registry   import HubRecord, HubRegistry, MAX_HUBS

# Raw types.
from .types      import USBDirection, USBRequestType, USBRequestRecipient, USBStandardRequests
from .types      import DescriptorTypes, USBDeviceClass, HubPortFeatures, PowerSwitchingMode

# Errors.
from .errors     import HubControlError, TransferError, DeviceOpenFailed, DescriptorTooShort
from .errors     import PortStatusReadFailed, RegistryFull, NoHubFound, TargetNotFound
from .errors     import PowerCommandFailed, BusAccessFailed

# Protocol layer.
from .transport  import HubTransport, HubDeviceHandle, TopologyEntry, CTRL_TIMEOUT
from .enumerator import HubEnumerator, HubReport, EnumerationResult, read_port_statuses
from .resolver   import resolve_hub
from .power      import PowerController, PowerResult

# Front end.
from .core       import HubControlApp, HubControlConfig, HubControlState
from .cli        import main

# Wildcard import.
__all__ = [
    'HubDescriptor', 'PortStatus', 'HubRecord', 'HubRegistry', 'MAX_HUBS',
    'USBDirection', 'USBRequestType', 'USBRequestRecipient', 'USBStandardRequests',
    'DescriptorTypes', 'USBDeviceClass', 'HubPortFeatures', 'PowerSwitchingMode',
    'HubControlError', 'TransferError', 'DeviceOpenFailed', 'DescriptorTooShort',
    'PortStatusReadFailed', 'RegistryFull', 'NoHubFound', 'TargetNotFound',
    'PowerCommandFailed', 'BusAccessFailed',
    'HubTransport', 'HubDeviceHandle', 'TopologyEntry', 'CTRL_TIMEOUT',
    'HubEnumerator', 'HubReport', 'EnumerationResult', 'read_port_statuses',
    'resolve_hub', 'PowerController', 'PowerResult',
    'HubControlApp', 'HubControlConfig', 'HubControlState', 'main',
]
