"""PDN connections held by the control plane."""

from __future__ import annotations

from dataclasses import dataclass, field
from ipaddress import IPv4Address
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .bearer import Bearer


@dataclass(eq=False)
class PdnConnection:
    """A subscriber's PDN connection: its addresses, TEIDs and default bearer."""

    cp_teid: int
    apn_gateway: IPv4Address
    ue_ip_addr: IPv4Address
    sgw_cp_teid: int = field(default=0, init=False)
    sgw_address: IPv4Address = field(default=IPv4Address(0), init=False)
    default_bearer: Optional[Bearer] = field(default=None, init=False)

    def __post_init__(self) -> None:
        self.apn_gateway = IPv4Address(self.apn_gateway)
        self.ue_ip_addr = IPv4Address(self.ue_ip_addr)