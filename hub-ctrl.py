#!/usr/bin/env python3
#
# hub-ctrl.py
#
# Lists USB hubs and their ports; with -P, switches power on one port.
#
#   hub-ctrl.py                        list every hub and port
#   hub-ctrl.py -H 0 -P 3 -p 0         turn off port 3 of hub 0
#   hub-ctrl.py -B 1 -D 2 -P 3 -p 1    turn on port 3 of the hub at bus 1, device 2

from hubctrl import main

main()
