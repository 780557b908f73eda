#
# This file is part of hubctrl.
#
""" Bookkeeping for the hubs discovered during enumeration. """

from dataclasses import dataclass
from typing      import Iterator, List

from .descriptor import HubDescriptor
from .errors     import RegistryFull, TargetNotFound


# Practical upper bound on the number of hubs we track in one run.
MAX_HUBS = 128


@dataclass(frozen=True)
class HubRecord:
    """
    A hub we managed to open and describe.

    The (bus, device) pair is the hub's address for this session; the transport
    reopens the hub from it whenever a handle is needed.
    """

    bus        : int
    device     : int
    port_count : int
    descriptor : HubDescriptor = None

    @property
    def address(self):
        return (self.bus, self.device)


class HubRegistry:
    """ Ordered, bounded collection of HubRecords, indexed in registration order. """

    def __init__(self, capacity: int=MAX_HUBS):
        self.capacity = capacity
        self._records : List[HubRecord] = []


    def register(self, record: HubRecord) -> int:
        """ Appends a record and returns its index. Raises RegistryFull once at capacity. """
        if len(self._records) >= self.capacity:
            raise RegistryFull(self.capacity)

        self._records.append(record)
        return len(self._records) - 1


    def get(self, index: int) -> HubRecord:
        if not 0 <= index < len(self._records):
            raise TargetNotFound(f"no hub with index {index} ({len(self._records)} hubs known)")
        return self._records[index]


    def find_by_address(self, bus: int, device: int) -> int:
        """ Returns the index of the first hub registered at the given address. """
        for index, record in enumerate(self._records):
            if record.bus == bus and record.device == device:
                return index

        raise TargetNotFound(f"no hub at Bus {bus}, Dev {device}")


    def __len__(self):
        return len(self._records)

    def __iter__(self) -> Iterator[HubRecord]:
        return iter(self._records)

    def __contains__(self, record):
        return record in self._records

    def __repr__(self):
        return f"<HubRegistry {len(self._records)}/{self.capacity} hubs>"
