#
# This file is part of hubctrl.
#
""" Whole-program flow: enumerate, then optionally switch a port and confirm. """

from dataclasses import dataclass
from enum        import Enum
from typing      import Optional

from .enumerator import HubEnumerator
from .errors     import HubControlError, NoHubFound
from .logging    import log
from .power      import PowerController
from .presenter  import HubStatusPresenter
from .resolver   import resolve_hub
from .transport  import HubTransport


@dataclass
class HubControlConfig:
    """
    What the operator asked for.

    Fields:
        hub_index :
            Explicit registry index of the target hub; when set, bus and device are ignored.
        bus, device :
            Address of the target hub, used when hub_index is None.
        port :
            Port to switch; 0 only lists the hubs.
        power :
            Desired port power; 0 turns the port off, anything else turns it on.
        verbose :
            Log verbosity, 0 (silent) to 5 (trace).
    """
    hub_index : Optional[int] = None
    bus       : int = 0
    device    : int = 0
    port      : int = 0
    power     : int = 1
    verbose   : int = 3

    @property
    def list_only(self):
        return self.port == 0


class HubControlState(Enum):
    IDLE                 = "idle"
    ENUMERATED           = "enumerated"
    STATUS_LISTED        = "status listed"
    TARGET_RESOLVED      = "target resolved"
    POWER_COMMAND_ISSUED = "power command issued"
    CONFIRMED            = "confirmed"
    FAILED               = "failed"


class HubControlApp:
    """ Runs one hubctrl session against a transport. """

    EXIT_SUCCESS = 0
    EXIT_FAILURE = 1

    def __init__(self, config, transport=None, presenter=None):
        self.config    = config
        self.transport = transport
        self.presenter = presenter if presenter is not None else HubStatusPresenter()

        self.state        = HubControlState.IDLE
        self.enumeration  = None
        self.target_index = None
        self.power_result = None


    def run(self) -> int:
        """ Runs the session to completion and returns the process exit status. """
        try:
            return self._run()
        except HubControlError as error:
            self._fail(error)
            self.presenter.show_error(error)
            return self.EXIT_FAILURE


    def _fail(self, error):
        log.debug(f"giving up in state '{self.state.value}': {error!r}")
        self.state = HubControlState.FAILED


    def _run(self) -> int:
        config = self.config
        # The hub summary is only wanted when we aren't about to act on a port.
        verbose_listing = config.list_only

        if self.transport is None:
            self.transport = HubTransport.autodetect()

        enumerator = HubEnumerator(self.transport)
        try:
            self.enumeration = enumerator.enumerate()
        except NoHubFound as error:
            # Still show why each hub-class device was skipped.
            for report in error.reports:
                self.presenter.show_hub(report, verbose_listing=verbose_listing)
            raise
        self.state = HubControlState.ENUMERATED

        self.presenter.show_enumeration(self.enumeration, verbose_listing=verbose_listing)
        if config.list_only:
            return self.EXIT_SUCCESS
        self.state = HubControlState.STATUS_LISTED

        registry = self.enumeration.registry
        self.target_index = resolve_hub(registry, config.hub_index, config.bus, config.device)
        record = registry.get(self.target_index)
        self.state = HubControlState.TARGET_RESOLVED

        controller = PowerController(self.transport)
        self.power_result = controller.set_port_power(record, config.port, config.power)
        self.state = HubControlState.POWER_COMMAND_ISSUED

        # The port was switched, but we can't show that it took.
        if self.power_result.port_error is not None:
            self.presenter.show_ports(self.power_result.ports, self.power_result.port_error)
            self._fail(self.power_result.port_error)
            return self.EXIT_FAILURE

        self.presenter.show_power_result(self.target_index, self.power_result)
        self.state = HubControlState.CONFIRMED
        return self.EXIT_SUCCESS
