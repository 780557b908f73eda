#
# This file is part of hubctrl.
#

import unittest

from hubctrl.descriptor import HubDescriptor
from hubctrl.errors     import DeviceOpenFailed, PowerCommandFailed
from hubctrl.power      import PowerController, power_request_for
from hubctrl.registry   import HubRecord
from hubctrl.types      import USBStandardRequests

from .base import FakeHub, FakeHubTransport, HubControlTestCase, hub_descriptor
from .base import PORT_FEATURE_REQUEST_TYPE, STATUS_HIGH_SPEED_DEVICE


class TestPowerController(HubControlTestCase):

    def setUp(self):
        self.hub       = FakeHub(1, 2, port_count=4, port_statuses={3: STATUS_HIGH_SPEED_DEVICE})
        self.transport = FakeHubTransport([self.hub])
        self.record    = HubRecord(bus=1, device=2, port_count=4,
                                   descriptor=HubDescriptor.from_binary_descriptor(self.hub.descriptor))


    def test_request_selection(self):
        self.assertIs(power_request_for(0), USBStandardRequests.CLEAR_FEATURE)
        self.assertIs(power_request_for(1), USBStandardRequests.SET_FEATURE)
        self.assertIs(power_request_for(7), USBStandardRequests.SET_FEATURE)
        self.assertIs(power_request_for(-1), USBStandardRequests.SET_FEATURE)

    def test_power_off(self):
        result = PowerController(self.transport).set_port_power(self.record, 3, 0)

        [transfer] = self.transport.transfers_with(PORT_FEATURE_REQUEST_TYPE)
        self.assertEqual(transfer.request, USBStandardRequests.CLEAR_FEATURE)
        self.assertEqual(transfer.value, 8)
        self.assertEqual(transfer.index, 3)
        self.assertEqual(bytes(transfer.data_or_length), b"")
        self.assertEqual(transfer.timeout, 1000)

        self.assertIs(result.request, USBStandardRequests.CLEAR_FEATURE)
        self.assertFalse(result.power)

    def test_power_on(self):
        result = PowerController(self.transport).set_port_power(self.record, 2, 1)

        [transfer] = self.transport.transfers_with(PORT_FEATURE_REQUEST_TYPE)
        self.assertEqual(transfer.request, USBStandardRequests.SET_FEATURE)
        self.assertEqual(transfer.index, 2)
        self.assertTrue(result.power)

    def test_reopens_hub_and_closes_it(self):
        PowerController(self.transport).set_port_power(self.record, 1, 1)

        self.assertEqual(self.transport.opened, [(1, 2)])
        self.assertEqual(self.transport.open_handles, 0)

    def test_ports_are_read_back(self):
        self.hub.simulate_power = True
        result = PowerController(self.transport).set_port_power(self.record, 3, 0)

        self.assertEqual(len(result.ports), 4)
        self.assertIsNone(result.port_error)
        self.assertFalse(result.confirmed_status.powered)
        self.assertTrue(result.confirmed_status.connected)
        self.assertTrue(result.ports[0].powered)

    def test_power_command_failure(self):
        self.hub.power_command_fails = True

        with self.assertRaises(PowerCommandFailed) as context:
            PowerController(self.transport).set_port_power(self.record, 3, 1)

        self.assertEqual(context.exception.port, 3)
        self.assertEqual(self.transport.open_handles, 0)
        # No read-back after a failed command.
        self.assertEqual(len(self.transport.transfers), 1)

    def test_vanished_hub(self):
        record = HubRecord(bus=9, device=9, port_count=4)
        with self.assertRaises(DeviceOpenFailed):
            PowerController(self.transport).set_port_power(record, 1, 1)
        self.assertEqual(self.transport.transfers, [])

    def test_read_back_failure_is_reported(self):
        self.hub.failing_ports = {3}
        result = PowerController(self.transport).set_port_power(self.record, 3, 1)

        self.assertEqual(len(result.ports), 2)
        self.assertEqual(result.port_error.port, 3)
        self.assertIsNone(result.confirmed_status)

    def test_out_of_range_port_is_still_sent(self):
        with self.assertLogs("hubctrl", level="WARNING"):
            PowerController(self.transport).set_port_power(self.record, 9, 1)

        [transfer] = self.transport.transfers_with(PORT_FEATURE_REQUEST_TYPE)
        self.assertEqual(transfer.index, 9)

    def test_hub_without_power_switching_is_warned_about(self):
        record = HubRecord(bus=1, device=2, port_count=4,
                           descriptor=HubDescriptor.from_binary_descriptor(hub_descriptor(4, characteristics=0x0002)))

        with self.assertLogs("hubctrl", level="WARNING") as logs:
            PowerController(self.transport).set_port_power(record, 1, 0)
        self.assertTrue(any("no power switching" in line for line in logs.output))


if __name__ == "__main__":
    unittest.main(verbosity=1)
