# simple_pgw

A small in-memory model of an LTE packet gateway (PGW). A control plane keeps
APNs, PDN connections and bearers. A data plane routes user packets between
subscribers and APN gateways. Each bearer can carry an uplink and a downlink
rate limit. The package has no dependencies outside the standard library.

## Modules

- `simple_pgw.bearer`: `Bearer`, `Direction` and `mbps_to_bytes`.
- `simple_pgw.pdn_connection`: `PdnConnection`.
- `simple_pgw.control_plane`: `ControlPlane` and `ApnExistsError`.
- `simple_pgw.data_plane`: the abstract `DataPlane`.
- `simple_pgw.cli`: `PrintingDataPlane` and the `main` function behind the
  `simple-pgw` command.

## Concepts

### APN

An APN is a named access point with a gateway IPv4 address. Register it with
`ControlPlane.add_apn(apn_name, apn_gateway)`. The gateway can be an
`IPv4Address` or a string. Registering the same name twice raises
`ApnExistsError`, which is a `RuntimeError`.

### PDN connection

`ControlPlane.create_pdn_connection(apn, sgw_addr, sgw_cp_teid)` creates a
`PdnConnection` and gives the subscriber (UE) a random IPv4 address.

- The connection is stored under `sgw_cp_teid` and under the UE address.
- If the APN is not registered, it prints a message and returns `None`.

A `PdnConnection` has these fields:

- `cp_teid`
- `apn_gateway`
- `ue_ip_addr`
- `sgw_cp_teid`
- `sgw_address`
- `default_bearer`

Look a connection up with:

- `find_pdn_by_cp_teid`
- `find_pdn_by_ip_address`

`delete_pdn_connection(cp_teid)` removes the connection from the TEID lookup
and prints whether it was found. The lookup by UE address is left as it is.

### Bearer

`ControlPlane.create_bearer(pdn, sgw_teid)` creates a `Bearer`. Its
`dp_teid` and `sgw_dp_teid` are both set to `sgw_teid`, and it is stored
under that TEID. The first bearer created on a PDN connection becomes that
connection's `default_bearer`.

- Find a bearer with `find_bearer_by_dp_teid`.
- Remove it with `delete_bearer`, which prints whether it was found.

### Rate limits

`Bearer.set_rate_limits(uplink_mbps, downlink_mbps)` sets the limits in
megabits per second. `mbps_to_bytes` converts them at 125,000 bytes per
Mbit/s and raises `ValueError` for a negative rate. A limit of zero means
unlimited, and that is the default.

`check_uplink_limit(size)` and `check_downlink_limit(size)` count a packet
against the limit. They return `False` if the packet would exceed it, and
nothing is then counted. The counters are cleared:

- by `Bearer.reset_counters`;
- by `ControlPlane.reset_all_limits`, for every bearer;
- automatically, when a check happens one second or more after the last reset.

The bearer is safe to use from several threads.

### Data plane

`DataPlane` routes packets using the control plane's state. It has two
methods that handle traffic:

- `handle_uplink(dp_teid, packet)` finds the bearer by TEID, checks the
  uplink limit and calls `forward_packet_to_apn` with the PDN connection's APN
  gateway.
- `handle_downlink(ue_ip, packet)` finds the PDN connection by UE address,
  takes its default bearer, checks the downlink limit and calls
  `forward_packet_to_sgw` with the SGW address and the bearer's
  `sgw_dp_teid`.

Packets for an unknown TEID or address are dropped silently, and so are
packets on a PDN connection without a default bearer. A packet over a
bearer's limit is dropped, and `rate limit exceeded` is written to standard
error.

## Usage

A subclass of `DataPlane` implements `forward_packet_to_sgw` and
`forward_packet_to_apn`, and so decides where forwarded packets go:

```python
from ipaddress import IPv4Address

from simple_pgw.control_plane import ControlPlane
from simple_pgw.data_plane import DataPlane


class RecordingDataPlane(DataPlane):
    def __init__(self, control_plane):
        super().__init__(control_plane)
        self.to_apn = []
        self.to_sgw = []

    def forward_packet_to_sgw(self, sgw_addr, sgw_dp_teid, packet):
        self.to_sgw.append((sgw_addr, sgw_dp_teid, packet))

    def forward_packet_to_apn(self, apn_gateway, packet):
        self.to_apn.append((apn_gateway, packet))


cp = ControlPlane()
cp.add_apn("ims", IPv4Address("10.0.2.1"))
pdn = cp.create_pdn_connection("ims", IPv4Address("94.17.31.62"), 7865)
bearer = cp.create_bearer(pdn, 54321)
bearer.set_rate_limits(1.0, 10.0)

dp = RecordingDataPlane(cp)
dp.handle_uplink(54321, bytes([1, 2, 3, 4]))
dp.handle_downlink(pdn.ue_ip_addr, bytes([5, 4, 3, 2, 1]))
```

## Demo

Install the package, then run:

```
simple-pgw
```

The same demo runs with `python -m simple_pgw.cli`. It takes no options
besides `--help`. It does the following:

1. Registers the APN `ims`, creates one PDN connection and one bearer, and
   limits the bearer to 10 bytes per second uplink and 100 bytes per second
   downlink.
2. Starts a background thread that calls `reset_all_limits` every second.
3. Sends five 8-byte uplink packets and then five 5-byte downlink packets,
   using `PrintingDataPlane`, which prints each forwarded packet.
4. Reports on standard error each packet that goes over the limit.

The demo exits with status 0.

## What it does not do

The package models gateway state and routing decisions only:

- It opens no sockets.
- It speaks no GTP or other wire protocol.
- It keeps nothing on disk.

Sending a forwarded packet anywhere is left to a `DataPlane` subclass.

## Tests

```
pip install -e ".[test]"
pytest
```