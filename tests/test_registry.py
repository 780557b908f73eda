#
# This file is part of hubctrl.
#

import unittest

from hubctrl.errors   import RegistryFull, TargetNotFound
from hubctrl.registry import HubRecord, HubRegistry, MAX_HUBS
from hubctrl.resolver import resolve_hub


def record(bus, device, port_count=4):
    return HubRecord(bus=bus, device=device, port_count=port_count)


class TestHubRegistry(unittest.TestCase):

    def setUp(self):
        self.registry = HubRegistry()

    def test_register_returns_sequential_indices(self):
        self.assertEqual(self.registry.register(record(1, 2)), 0)
        self.assertEqual(self.registry.register(record(1, 5)), 1)
        self.assertEqual(self.registry.register(record(2, 1)), 2)
        self.assertEqual(len(self.registry), 3)

    def test_get(self):
        first = record(1, 2)
        self.registry.register(first)
        self.assertIs(self.registry.get(0), first)
        self.assertIn(first, self.registry)

    def test_get_out_of_range(self):
        self.registry.register(record(1, 2))
        for index in (-1, 1, 50):
            with self.subTest(index=index):
                with self.assertRaises(TargetNotFound):
                    self.registry.get(index)

    def test_find_by_address_returns_first_match(self):
        self.registry.register(record(1, 1))
        self.registry.register(record(1, 2, port_count=4))
        self.registry.register(record(1, 2, port_count=7))

        index = self.registry.find_by_address(1, 2)
        self.assertEqual(index, 1)
        self.assertEqual(self.registry.get(index).port_count, 4)

    def test_find_by_address_not_registered(self):
        self.registry.register(record(1, 2))
        with self.assertRaises(TargetNotFound):
            self.registry.find_by_address(2, 1)
        with self.assertRaises(TargetNotFound):
            HubRegistry().find_by_address(1, 2)

    def test_default_capacity(self):
        self.assertEqual(self.registry.capacity, MAX_HUBS)
        self.assertEqual(MAX_HUBS, 128)

    def test_overflow_is_reported(self):
        for device in range(MAX_HUBS):
            self.registry.register(record(1, device))

        with self.assertRaises(RegistryFull):
            self.registry.register(record(2, 1))

        # Nothing was overwritten or wrapped.
        self.assertEqual(len(self.registry), MAX_HUBS)
        self.assertEqual([r.device for r in self.registry], list(range(MAX_HUBS)))
        with self.assertRaises(TargetNotFound):
            self.registry.find_by_address(2, 1)

    def test_small_capacity(self):
        registry = HubRegistry(capacity=1)
        registry.register(record(1, 2))
        with self.assertRaises(RegistryFull) as context:
            registry.register(record(1, 3))
        self.assertEqual(context.exception.capacity, 1)

    def test_records_are_immutable(self):
        with self.assertRaises(AttributeError):
            record(1, 2).port_count = 9


class TestResolveHub(unittest.TestCase):

    def setUp(self):
        self.registry = HubRegistry()
        self.registry.register(record(1, 2))
        self.registry.register(record(3, 4))

    def test_explicit_index(self):
        self.assertEqual(resolve_hub(self.registry, hub_index=1), 1)

    def test_explicit_index_wins_over_address(self):
        self.assertEqual(resolve_hub(self.registry, hub_index=0, bus=3, device=4), 0)

    def test_explicit_index_out_of_range(self):
        for index in (-1, 2):
            with self.subTest(index=index):
                with self.assertRaises(TargetNotFound):
                    resolve_hub(self.registry, hub_index=index)

    def test_address(self):
        self.assertEqual(resolve_hub(self.registry, bus=3, device=4), 1)

    def test_unknown_address(self):
        with self.assertRaises(TargetNotFound):
            resolve_hub(self.registry, bus=0, device=0)


if __name__ == "__main__":
    unittest.main(verbosity=1)
