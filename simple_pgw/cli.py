"""Command that runs a short demonstration of the gateway."""

from __future__ import annotations

import argparse
import sys
import threading
import time
from ipaddress import IPv4Address
from typing import Optional, Sequence

from .control_plane import ControlPlane
from .data_plane import DataPlane

RESET_PERIOD = 1.0


class PrintingDataPlane(DataPlane):
    """A data plane that prints forwarded packets instead of sending them."""

    def forward_packet_to_sgw(
        self, sgw_addr: IPv4Address, sgw_dp_teid: int, packet: bytes
    ) -> None:
        print(f"\n{'TEID':>3}\t\t{'ip':>3}\t\t{'Packet size':>3}")
        print(f"{sgw_dp_teid}\t\t{sgw_addr}\t\t{len(packet)}")

    def forward_packet_to_apn(self, apn_gateway: IPv4Address, packet: bytes) -> None:
        print(f"{apn_gateway}{len(packet)}")


def _reset_periodically(control_plane: ControlPlane, stop: threading.Event) -> None:
    while not stop.wait(RESET_PERIOD):
        control_plane.reset_all_limits()


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="simple-pgw",
        description="Run a short demonstration of the gateway's control and data planes.",
    )
    parser.parse_args(argv)

    control_plane = ControlPlane()
    data_plane = PrintingDataPlane(control_plane)
    control_plane.add_apn("ims", "10.0.2.1")
    pdn = control_plane.create_pdn_connection("ims", "94.17.31.62", 7865)
    if pdn is None:
        print("could not create pdn connection", file=sys.stderr)
        return 1

    bearer = control_plane.create_bearer(pdn, 54321)
    bearer.set_rate_limits(0.00008, 0.0008)

    stop = threading.Event()
    resetter = threading.Thread(
        target=_reset_periodically, args=(control_plane, stop), daemon=True
    )
    resetter.start()
    try:
        for _ in range(5):
            data_plane.handle_uplink(bearer.sgw_dp_teid, bytes([1, 2, 3, 4, 5, 6, 7, 8]))
            time.sleep(0.2)
        for _ in range(5):
            data_plane.handle_downlink(pdn.ue_ip_addr, bytes([5, 4, 3, 2, 1]))
            time.sleep(0.3)
        time.sleep(2)
    finally:
        stop.set()
        resetter.join()
    return 0


if __name__ == "__main__":
    sys.exit(main())