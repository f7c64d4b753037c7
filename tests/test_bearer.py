from unittest import mock

import pytest

from simple_pgw.bearer import BYTES_PER_MBPS, Bearer, mbps_to_bytes
from simple_pgw.pdn_connection import PdnConnection


@pytest.fixture
def pdn():
    return PdnConnection(7865, "10.0.2.1", "94.17.31.62")


def test_mbps_to_bytes_one_megabit():
    assert mbps_to_bytes(1) == 125000
    assert mbps_to_bytes(1) == BYTES_PER_MBPS


def test_mbps_to_bytes_truncates_to_int():
    assert mbps_to_bytes(0) == 0
    assert isinstance(mbps_to_bytes(0.5), int)
    assert mbps_to_bytes(0.5) * 2 == mbps_to_bytes(1)


def test_mbps_to_bytes_rejects_negative():
    with pytest.raises(ValueError):
        mbps_to_bytes(-1)


def test_bearer_keeps_teids_and_pdn(pdn):
    bearer = Bearer(54321, pdn)
    assert bearer.dp_teid == 54321
    assert bearer.sgw_dp_teid == 0
    assert bearer.pdn is pdn
    bearer.sgw_dp_teid = 42
    assert bearer.sgw_dp_teid == 42


def test_unlimited_by_default(pdn):
    bearer = Bearer(1, pdn)
    assert bearer.check_uplink_limit(10**9)
    assert bearer.check_downlink_limit(10**9)


def test_uplink_limit_blocks_excess(pdn):
    bearer = Bearer(1, pdn)
    bearer.set_rate_limits(0.00008, 0)
    limit = mbps_to_bytes(0.00008)
    assert bearer.check_uplink_limit(limit)
    assert not bearer.check_uplink_limit(1)
    assert bearer.check_downlink_limit(10**9)


def test_downlink_limit_blocks_excess(pdn):
    bearer = Bearer(1, pdn)
    bearer.set_rate_limits(0, 0.0008)
    limit = mbps_to_bytes(0.0008)
    assert not bearer.check_downlink_limit(limit + 1)
    assert bearer.check_downlink_limit(limit)
    assert not bearer.check_downlink_limit(1)


def test_rejected_packet_is_not_counted(pdn):
    bearer = Bearer(1, pdn)
    bearer.set_rate_limits(0.00008, 0)
    limit = mbps_to_bytes(0.00008)
    assert not bearer.check_uplink_limit(limit + 1)
    assert bearer.check_uplink_limit(limit)


def test_reset_counters_allows_traffic_again(pdn):
    bearer = Bearer(1, pdn)
    bearer.set_rate_limits(0.00008, 0.00008)
    limit = mbps_to_bytes(0.00008)
    assert bearer.check_uplink_limit(limit)
    assert bearer.check_downlink_limit(limit)
    assert not bearer.check_uplink_limit(1)
    assert not bearer.check_downlink_limit(1)
    bearer.reset_counters()
    assert bearer.check_uplink_limit(limit)
    assert bearer.check_downlink_limit(limit)


def test_counters_reset_after_one_second(pdn):
    with mock.patch("time.monotonic", return_value=100.0) as clock:
        bearer = Bearer(1, pdn)
        bearer.set_rate_limits(0.00008, 0)
        limit = mbps_to_bytes(0.00008)
        assert bearer.check_uplink_limit(limit)
        clock.return_value = 100.5
        assert not bearer.check_uplink_limit(1)
        clock.return_value = 101.0
        assert bearer.check_uplink_limit(limit)