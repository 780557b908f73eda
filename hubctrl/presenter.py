#
# This file is part of hubctrl.
#
""" Operator-facing rendering of enumeration and power results. """

from prompt_toolkit import HTML, print_formatted_text

from .types import PowerSwitchingMode


class HubStatusPresenter:
    """
    Renders the structured results of the protocol layer as colored,
    tree-formatted text.
    """

    MODE_STYLES = {
        PowerSwitchingMode.GANGED:     "ansiyellow",
        PowerSwitchingMode.INDIVIDUAL: "ansigreen",
        PowerSwitchingMode.NONE:       "ansired",
    }

    def __init__(self, file=None):
        """
        Args:
            file : Where to write; stdout by default. Color is dropped automatically
                   when this isn't a terminal.
        """
        self.file = file


    def _print(self, template, *args):
        print_formatted_text(HTML(template).format(*args), file=self.file)


    def show_enumeration(self, result, verbose_listing=True):
        for report in result.reports:
            self.show_hub(report, verbose_listing)


    def show_hub(self, report, verbose_listing=True):
        if report.error is not None:
            self.show_error(report.error)
            return

        if verbose_listing:
            descriptor = report.descriptor
            mode = descriptor.power_switching_mode
            self._print("Hub {} (Bus {}, Dev {}) <" + self.MODE_STYLES[mode] + ">- {} power switching</"
                    + self.MODE_STYLES[mode] + ">{}",
                    report.index, report.bus, report.device, mode.describe(),
                    ", port indicators" if descriptor.supports_port_indicators else "")

        self.show_ports(report.ports, report.port_error)


    def show_ports(self, ports, port_error=None):
        for port, status in enumerate(ports, start=1):
            # The final line closes the tree, unless an error line follows it.
            is_last = (port == len(ports)) and port_error is None
            branch = "└" if is_last else "├"
            self._print(" {}─ Port {}: {}", branch, f"{port:2d}", str(status))

        if port_error is not None:
            self.show_error(port_error)


    def show_error(self, error):
        self._print("<ansired>&gt; {}</ansired>", str(error))


    def show_power_result(self, index, result):
        self.show_ports(result.ports, result.port_error)
        self._print("&gt; Hub:{} Bus:{} Device:{} Port:{} power-&gt;{}",
                index, result.record.bus, result.record.device, result.port, int(result.power))
