#
# This file is part of hubctrl.
#
""" Maps the operator's choice of hub onto a registry index. """

from .errors  import TargetNotFound
from .logging import log


def resolve_hub(registry, hub_index=None, bus=0, device=0):
    """ Resolves the hub a power command should target.

    An explicit hub_index wins, and must be within the registry; otherwise the
    hub is looked up by its bus and device numbers. Raises TargetNotFound.
    """

    if hub_index is not None:
        if not 0 <= hub_index < len(registry):
            raise TargetNotFound(f"hub index {hub_index} out of range ({len(registry)} hubs known)")
        log.debug(f"using hub {hub_index} as given")
        return hub_index

    index = registry.find_by_address(bus, device)
    log.debug(f"resolved Bus {bus}, Dev {device} to hub {index}")
    return index
