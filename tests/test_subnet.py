import ipaddress

import pytest

from stdplus.subnet import (
    Subnet4,
    Subnet6,
    SubnetAny,
    addr32_mask,
    addr_to_subnet,
    mask_to_pfx,
    pfx_to_mask,
)


def test_addr32_mask_bounds():
    assert addr32_mask(0) == 0
    assert addr32_mask(32) == int(ipaddress.IPv4Address("255.255.255.255"))


@pytest.mark.parametrize("pfx", range(0, 33))
def test_pfx_mask_round_trip(pfx):
    mask = pfx_to_mask(pfx)
    assert mask == ipaddress.IPv4Network(f"0.0.0.0/{pfx}").netmask
    assert mask_to_pfx(mask) == pfx
    assert int(mask) == addr32_mask(pfx)


def test_mask_to_pfx_rejects_non_contiguous():
    with pytest.raises(ValueError, match="Invalid netmask"):
        mask_to_pfx("255.0.255.0")
    with pytest.raises(ValueError, match="Invalid netmask"):
        mask_to_pfx("0.0.0.1")


def test_pfx_to_mask_out_of_range():
    with pytest.raises(ValueError):
        pfx_to_mask(33)


@pytest.mark.parametrize(
    "text,pfx",
    [("192.168.77.201", 0), ("192.168.77.201", 13), ("192.168.77.201", 32),
     ("fe80::1234:5678:9abc", 0), ("fe80::1234:5678:9abc", 70),
     ("fe80::1234:5678:9abc", 128)],
)
def test_addr_to_subnet_matches_network(text, pfx):
    expected = ipaddress.ip_network(f"{text}/{pfx}", strict=False).network_address
    assert addr_to_subnet(ipaddress.ip_address(text), pfx) == expected
    assert addr_to_subnet(text, pfx) == expected


def test_addr_to_subnet_bad_prefix():
    with pytest.raises(ValueError):
        addr_to_subnet("10.0.0.1", 33)


def test_subnet4_basic():
    sub = Subnet4("192.168.1.77", 24)
    assert sub.addr == ipaddress.IPv4Address("192.168.1.77")
    assert sub.pfx == 24
    assert sub.network() == ipaddress.IPv4Address("192.168.1.0")
    assert sub.contains("192.168.1.200")
    assert sub.contains(ipaddress.IPv4Address("192.168.1.0"))
    assert not sub.contains("192.168.2.1")
    assert not sub.contains("::1")


def test_subnet4_equality_and_hash():
    a = Subnet4("10.1.2.3", 8)
    assert a == Subnet4("10.1.2.3", 8)
    assert hash(a) == hash(Subnet4("10.1.2.3", 8))
    assert a != Subnet4("10.1.2.3", 9)
    assert a != Subnet4("10.1.2.4", 8)


def test_subnet4_invalid_prefix():
    with pytest.raises(ValueError):
        Subnet4("1.2.3.4", 33)
    with pytest.raises(ValueError):
        Subnet4("1.2.3.4", -1)


@pytest.mark.parametrize("text", ["1.2.3.4/0", "1.2.3.4/17", "255.255.255.255/32"])
def test_subnet4_str_round_trip(text):
    sub = Subnet4.from_str(text)
    assert str(sub) == text
    assert Subnet4.from_str(str(sub)) == sub


@pytest.mark.parametrize(
    "text", ["1.2.3.4", "1.2.3.4/", "1.2.3.4/-1", "1.2.3.4/a", "/24", "::/24",
             "1.2.3.4/33", "1.2.3.4/ 8"],
)
def test_subnet4_from_str_invalid(text):
    with pytest.raises(ValueError):
        Subnet4.from_str(text)


def test_subnet4_from_str_overflow():
    with pytest.raises(OverflowError):
        Subnet4.from_str("1.2.3.4/256")


def test_subnet6_basic():
    sub = Subnet6("fd00:1:2:3::77", 64)
    assert sub.network() == ipaddress.IPv6Address("fd00:1:2:3::")
    assert sub.contains("fd00:1:2:3:ffff::1")
    assert not sub.contains("fd00:1:2:4::1")
    assert not sub.contains("10.0.0.1")
    with pytest.raises(ValueError):
        Subnet6("::", 129)


@pytest.mark.parametrize("text", ["::/0", "ff00::/8", "fd00:1:2:3::77/128"])
def test_subnet6_str_round_trip(text):
    sub = Subnet6.from_str(text)
    assert str(sub) == text
    assert Subnet6.from_str(str(sub)) == sub


def test_subnet6_from_str_errors():
    with pytest.raises(ValueError):
        Subnet6.from_str("ff::")
    with pytest.raises(ValueError):
        Subnet6.from_str("1.2.3.4/8")
    with pytest.raises(OverflowError):
        Subnet6.from_str("::/1000")


def test_subnet_any_from_either_family():
    v4 = SubnetAny.from_str("10.9.8.7/16")
    v6 = SubnetAny.from_str("fd00::5/120")
    assert v4 == Subnet4("10.9.8.7", 16)
    assert Subnet4("10.9.8.7", 16) == v4
    assert v6 == Subnet6("fd00::5", 120)
    assert v4 != v6
    assert str(v4) == "10.9.8.7/16"
    assert str(v6) == "fd00::5/120"


def test_subnet_any_from_subnet():
    sub = Subnet6("fd00::5", 120)
    any_sub = SubnetAny(sub)
    assert any_sub == sub
    assert hash(any_sub) == hash(sub)
    assert any_sub.network() == sub.network()


def test_subnet_any_contains_across_families():
    v4 = SubnetAny("10.9.8.7", 16)
    assert v4.contains("10.9.200.1")
    assert not v4.contains("10.10.0.1")
    assert not v4.contains("fd00::1")
    v6 = SubnetAny("fd00::5", 120)
    assert v6.contains(ipaddress.IPv6Address("fd00::ff"))
    assert not v6.contains("10.9.8.7")


def test_subnet_any_invalid():
    with pytest.raises(ValueError):
        SubnetAny("10.0.0.1", 33)
    with pytest.raises(ValueError):
        SubnetAny.from_str("10.0.0.1")
    with pytest.raises(TypeError):
        SubnetAny("10.0.0.1")