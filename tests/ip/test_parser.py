"""Tests for nodeip.ip.parser module."""

from ipaddress import IPv4Address, IPv6Address

import pytest

from nodeip.exceptions import InvalidArityError
from nodeip.ip.parser import check_dual_stack_pair, is_ipv6, is_unspecified, parse_ip


class TestParseIP:
    def test_ipv4(self):
        assert parse_ip("10.128.0.5") == IPv4Address("10.128.0.5")

    def test_ipv4_leading_zeros_are_decimal(self):
        assert parse_ip("01.2.3.004") == IPv4Address("1.2.3.4")
        assert parse_ip("010.0.0.010") == IPv4Address("10.0.0.10")

    def test_ipv4_octet_out_of_range(self):
        assert parse_ip("1.2.3.256") is None

    def test_ipv4_too_few_octets(self):
        assert parse_ip("1.2.3") is None

    def test_ipv4_too_many_octets(self):
        assert parse_ip("1.2.3.4.5") is None

    def test_ipv4_empty_octet(self):
        assert parse_ip("1..3.4") is None

    def test_ipv4_signed_octet(self):
        assert parse_ip("1.+2.3.4") is None

    def test_cidr_rejected(self):
        assert parse_ip("1.2.3.0/24") is None
        assert parse_ip("abcd::/64") is None

    def test_whitespace_rejected(self):
        assert parse_ip(" 1.2.3.4") is None
        assert parse_ip("abcd::1 ") is None

    def test_ipv6(self):
        assert parse_ip("abcd::ef01") == IPv6Address("abcd::ef01")

    def test_ipv6_non_canonical(self):
        assert parse_ip("abcd:0abc:00ab:0000:0000::1") == IPv6Address("abcd:abc:ab::1")

    def test_ipv6_unspecified(self):
        assert parse_ip("::") == IPv6Address("::")

    def test_ipv6_embedded_ipv4_with_leading_zeros(self):
        assert parse_ip("64:ff9b::01.02.03.04") == IPv6Address("64:ff9b::102:304")

    def test_ipv4_mapped_returns_ipv4(self):
        assert parse_ip("::ffff:1.2.3.4") == IPv4Address("1.2.3.4")

    def test_zone_rejected(self):
        assert parse_ip("fe80::1%eth0") is None

    def test_garbage(self):
        assert parse_ip("not-an-IPv6-address") is None

    def test_empty_string(self):
        assert parse_ip("") is None


class TestPredicates:
    def test_unspecified(self):
        assert is_unspecified(IPv4Address("0.0.0.0")) is True
        assert is_unspecified(IPv6Address("::")) is True
        assert is_unspecified(IPv4Address("1.2.3.4")) is False

    def test_is_ipv6(self):
        assert is_ipv6(IPv6Address("abcd::1")) is True
        assert is_ipv6(IPv4Address("1.2.3.4")) is False


class TestCheckDualStackPair:
    def test_empty_ok(self):
        check_dual_stack_pair([])

    def test_single_ok(self):
        check_dual_stack_pair([IPv4Address("1.2.3.4")])

    def test_cross_family_ok(self):
        check_dual_stack_pair([IPv4Address("1.2.3.4"), IPv6Address("abcd::1")])

    def test_same_family_rejected(self):
        with pytest.raises(InvalidArityError):
            check_dual_stack_pair([IPv6Address("abcd::1"), IPv6Address("abcd::2")])

    def test_three_rejected(self):
        with pytest.raises(InvalidArityError, match="dual-stack pair of IPs"):
            check_dual_stack_pair(
                [IPv4Address("1.2.3.4"), IPv6Address("abcd::1"), IPv4Address("5.6.7.8")]
            )
