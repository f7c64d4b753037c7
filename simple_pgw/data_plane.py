"""Data plane: routes user traffic between subscribers and the network."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from ipaddress import IPv4Address
from typing import Union

from .control_plane import ControlPlane


class DataPlane(ABC):
    """Routes packets using the control plane's state.

    Subclasses decide how a packet actually leaves the gateway.
    """

    def __init__(self, control_plane: ControlPlane) -> None:
        self.control_plane = control_plane

    def handle_uplink(self, dp_teid: int, packet: bytes) -> None:
        """Forward a packet from a subscriber towards its APN gateway."""
        bearer = self.control_plane.find_bearer_by_dp_teid(dp_teid)
        if bearer is None:
            return
        if not bearer.check_uplink_limit(len(packet)):
            print("rate limit exceeded", file=sys.stderr)
            return
        self.forward_packet_to_apn(bearer.pdn.apn_gateway, packet)

    def handle_downlink(self, ue_ip: Union[IPv4Address, str], packet: bytes) -> None:
        """Forward a packet from the network to a subscriber through the SGW."""
        pdn = self.control_plane.find_pdn_by_ip_address(ue_ip)
        if pdn is None:
            return
        bearer = pdn.default_bearer
        if bearer is None:
            return
        if not bearer.check_downlink_limit(len(packet)):
            print("rate limit exceeded", file=sys.stderr)
            return
        self.forward_packet_to_sgw(pdn.sgw_address, bearer.sgw_dp_teid, packet)

    @abstractmethod
    def forward_packet_to_sgw(
        self, sgw_addr: IPv4Address, sgw_dp_teid: int, packet: bytes
    ) -> None:
        """Send a downlink packet to the serving gateway."""

    @abstractmethod
    def forward_packet_to_apn(self, apn_gateway: IPv4Address, packet: bytes) -> None:
        """Send an uplink packet to the APN gateway."""