"""Control plane: APNs, PDN connections and bearers."""

from __future__ import annotations

import random
from ipaddress import IPv4Address
from typing import Optional, Union

from .bearer import Bearer
from .pdn_connection import PdnConnection

Address = Union[IPv4Address, str]


class ApnExistsError(RuntimeError):
    """Raised when an APN is registered twice."""


class ControlPlane:
    """Creates, looks up and deletes PDN connections and bearers."""

    def __init__(self) -> None:
        self._pdns: dict[int, PdnConnection] = {}
        self._pdns_by_ue_ip_addr: dict[IPv4Address, PdnConnection] = {}
        self._bearers: dict[int, Bearer] = {}
        self._apns: dict[str, IPv4Address] = {}

    def find_pdn_by_cp_teid(self, cp_teid: int) -> Optional[PdnConnection]:
        return self._pdns.get(cp_teid)

    def find_pdn_by_ip_address(self, ip: Address) -> Optional[PdnConnection]:
        return self._pdns_by_ue_ip_addr.get(IPv4Address(ip))

    def find_bearer_by_dp_teid(self, dp_teid: int) -> Optional[Bearer]:
        return self._bearers.get(dp_teid)

    def create_pdn_connection(
        self, apn: str, sgw_addr: Address, sgw_cp_teid: int
    ) -> Optional[PdnConnection]:
        """Create a PDN connection on a known APN with a random UE address.

        Returns None if the APN is not registered.
        """
        ue_ip = IPv4Address(bytes(random.randint(0, 255) for _ in range(4)))

        apn_gateway = self._apns.get(apn)
        if apn_gateway is None:
            print(f"apn not found {apn}")
            return None

        pdn = PdnConnection(sgw_cp_teid, apn_gateway, ue_ip)
        pdn.sgw_address = IPv4Address(sgw_addr)

        self._pdns[sgw_cp_teid] = pdn
        self._pdns_by_ue_ip_addr[ue_ip] = pdn
        return pdn

    def delete_pdn_connection(self, cp_teid: int) -> None:
        if self._pdns.pop(cp_teid, None) is None:
            print("pdn not found by teid")
            return
        print(f"pdn connection deleted {cp_teid}")

    def create_bearer(self, pdn: PdnConnection, sgw_teid: int) -> Bearer:
        """Create a bearer; it becomes the PDN's default if it has none."""
        bearer = Bearer(sgw_teid, pdn)
        bearer.sgw_dp_teid = sgw_teid
        self._bearers[sgw_teid] = bearer
        if pdn.default_bearer is None:
            pdn.default_bearer = bearer
        return bearer

    def delete_bearer(self, dp_teid: int) -> None:
        if self._bearers.pop(dp_teid, None) is None:
            print("bearer not found by teid")
            return
        print(f"bearer deleted {dp_teid}")

    def add_apn(self, apn_name: str, apn_gateway: Address) -> None:
        if apn_name in self._apns:
            raise ApnExistsError(f"apn already exists: {apn_name}")
        self._apns[apn_name] = IPv4Address(apn_gateway)

    def reset_all_limits(self) -> None:
        for bearer in self._bearers.values():
            bearer.reset_counters()