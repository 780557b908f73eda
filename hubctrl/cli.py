#
# This file is part of hubctrl.
#
""" Command-line front end: turns argv into a HubControlConfig and runs it. """

import sys
import argparse

from .core    import HubControlApp, HubControlConfig
from .logging import configure_default_logging


class HubControlArgumentParser(argparse.ArgumentParser):
    """ Argument parser that reports usage errors with exit status 1. """

    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(HubControlApp.EXIT_FAILURE, f"{self.prog}: error: {message}\n")


def build_parser():
    parser = HubControlArgumentParser(
        description="List USB hubs and their ports, and switch power on a single port.",
        usage="%(prog)s [-H <Hub> | -B <Bus> -D <Dev>] -P <Port> -p <0|1>")
    parser.add_argument('-H', '--hub', type=int, dest='hub_index', metavar='HUB',
                        help="index of the target hub, as listed; overrides -B/-D")
    parser.add_argument('-B', '--bus', type=int, default=0, help="bus number of the target hub")
    parser.add_argument('-D', '--device', type=int, default=0, help="device number of the target hub")
    parser.add_argument('-P', '--port', type=int, default=0,
                        help="port to switch; 0 (the default) only lists hubs")
    parser.add_argument('-p', '--power', type=int, default=1, help="0 turns the port off, 1 turns it on")
    parser.add_argument('-v', '--verbose', type=int, default=3,
                        help="Controls log verbosity. 0=silent, 3=default, 5=spammy")
    return parser


def parse_config(argv=None) -> HubControlConfig:
    args = build_parser().parse_args(argv)

    if args.port < 0:
        build_parser().error("port must not be negative")

    return HubControlConfig(
        hub_index = args.hub_index,
        bus       = args.bus,
        device    = args.device,
        port      = args.port,
        power     = args.power,
        verbose   = args.verbose,
    )


def main(argv=None, transport=None, presenter=None):
    config = parse_config(argv)
    configure_default_logging(config.verbose)

    app = HubControlApp(config, transport=transport, presenter=presenter)
    sys.exit(app.run())
