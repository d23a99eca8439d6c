"""IPv4 and IPv6 subnets: an address paired with a prefix length."""

from __future__ import annotations

import ipaddress
from dataclasses import dataclass
from typing import Any, ClassVar, Optional, Union

__all__ = [
    "addr32_mask",
    "addr_to_subnet",
    "pfx_to_mask",
    "mask_to_pfx",
    "Subnet4",
    "Subnet6",
    "SubnetAny",
]

Address = Union[ipaddress.IPv4Address, ipaddress.IPv6Address]

_MASK32 = 0xFFFFFFFF
_MAX_PFX = 255
_DIGITS = frozenset("0123456789")


def addr32_mask(pfx: int) -> int:
    """Return the 32-bit mask with the top ``pfx`` bits set.

    The result is the integer whose big-endian bytes form the mask. A prefix
    of zero or less gives 0; one of 32 or more gives all bits set.
    """
    if pfx <= 0:
        return 0
    if pfx >= 32:
        return _MASK32
    return (_MASK32 << (32 - pfx)) & _MASK32


def _as_address(addr: Any) -> Address:
    if isinstance(addr, (ipaddress.IPv4Address, ipaddress.IPv6Address)):
        return addr
    return ipaddress.ip_address(addr)


def addr_to_subnet(addr: Any, pfx: int) -> Address:
    """Return ``addr`` with every bit after the first ``pfx`` cleared."""
    address = _as_address(addr)
    bits = address.max_prefixlen
    if not 0 <= pfx <= bits:
        raise ValueError(f"Invalid subnet prefix: {pfx}")
    mask = ((1 << bits) - 1) ^ ((1 << (bits - pfx)) - 1)
    return type(address)(int(address) & mask)


def pfx_to_mask(pfx: int) -> ipaddress.IPv4Address:
    """Return the IPv4 netmask for a prefix length."""
    if not 0 <= pfx <= 32:
        raise ValueError(f"Invalid subnet prefix: {pfx}")
    return ipaddress.IPv4Address(addr32_mask(pfx))


def mask_to_pfx(mask: Any) -> int:
    """Return the prefix length of an IPv4 netmask.

    Raises ``ValueError`` if the set bits of the mask are not contiguous
    from the top.
    """
    value = int(ipaddress.IPv4Address(mask))
    inverted = ~value & _MASK32
    if inverted & ((inverted + 1) & _MASK32):
        raise ValueError("Invalid netmask")
    trailing = 32 if value == 0 else (value & -value).bit_length() - 1
    return 32 - trailing


def _check_pfx(address: Address, pfx: Any) -> int:
    if isinstance(pfx, bool) or not isinstance(pfx, int):
        raise TypeError(f"subnet prefix must be an int, not {type(pfx).__name__}")
    if not 0 <= pfx <= address.max_prefixlen:
        raise ValueError(f"Invalid subnet prefix: {pfx}")
    return pfx


def _parse_pfx(text: str) -> int:
    if not text or not set(text) <= _DIGITS:
        raise ValueError(f"Invalid prefix: {text!r}")
    value = int(text)
    if value > _MAX_PFX:
        raise OverflowError(f"Prefix out of range: {text}")
    return value


def _split(text: str) -> tuple[str, int]:
    addr_text, sep, pfx_text = text.rpartition("/")
    if not sep:
        raise ValueError("Invalid subnet")
    return addr_text, _parse_pfx(pfx_text)


def _contains(base: Address, pfx: int, addr: Any) -> bool:
    other = _as_address(addr)
    if other.version != base.version:
        return False
    return addr_to_subnet(base, pfx) == addr_to_subnet(other, pfx)


class _Subnet:
    """Equality and hashing shared by all subnet kinds."""

    addr: Address
    pfx: int

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, _Subnet):
            return NotImplemented
        return self.addr == other.addr and self.pfx == other.pfx

    def __hash__(self) -> int:
        return hash((self.addr, self.pfx))


@dataclass(frozen=True, eq=False)
class Subnet4(_Subnet):
    """An IPv4 address with a prefix length of at most 32."""

    addr: Any
    pfx: int

    _KIND: ClassVar = ipaddress.IPv4Address

    def __post_init__(self) -> None:
        address = self._KIND(self.addr)
        object.__setattr__(self, "addr", address)
        object.__setattr__(self, "pfx", _check_pfx(address, self.pfx))

    def network(self) -> Address:
        """Return the subnet's address with the host bits cleared."""
        return addr_to_subnet(self.addr, self.pfx)

    def contains(self, addr: Any) -> bool:
        """Return whether ``addr`` lies inside the subnet."""
        return _contains(self.addr, self.pfx, addr)

    @classmethod
    def from_str(cls, text: str) -> "Subnet4":
        """Parse ``address/prefix``."""
        addr_text, pfx = _split(text)
        return cls(cls._KIND(addr_text), pfx)

    def __str__(self) -> str:
        return f"{self.addr}/{self.pfx}"


@dataclass(frozen=True, eq=False)
class Subnet6(_Subnet):
    """An IPv6 address with a prefix length of at most 128."""

    addr: Any
    pfx: int

    _KIND: ClassVar = ipaddress.IPv6Address

    def __post_init__(self) -> None:
        address = self._KIND(self.addr)
        object.__setattr__(self, "addr", address)
        object.__setattr__(self, "pfx", _check_pfx(address, self.pfx))

    def network(self) -> Address:
        """Return the subnet's address with the host bits cleared."""
        return addr_to_subnet(self.addr, self.pfx)

    def contains(self, addr: Any) -> bool:
        """Return whether ``addr`` lies inside the subnet."""
        return _contains(self.addr, self.pfx, addr)

    @classmethod
    def from_str(cls, text: str) -> "Subnet6":
        """Parse ``address/prefix``."""
        addr_text, pfx = _split(text)
        return cls(cls._KIND(addr_text), pfx)

    def __str__(self) -> str:
        return f"{self.addr}/{self.pfx}"


@dataclass(frozen=True, eq=False)
class SubnetAny(_Subnet):
    """A subnet of either IP family.

    It may also be built from another subnet, with ``pfx`` left out.
    """

    addr: Any
    pfx: Optional[int] = None

    def __post_init__(self) -> None:
        addr, pfx = self.addr, self.pfx
        if isinstance(addr, _Subnet):
            if pfx is None:
                pfx = addr.pfx
            addr = addr.addr
        if pfx is None:
            raise TypeError("SubnetAny needs a prefix length")
        address = _as_address(addr)
        object.__setattr__(self, "addr", address)
        object.__setattr__(self, "pfx", _check_pfx(address, pfx))

    def network(self) -> Address:
        """Return the subnet's address with the host bits cleared."""
        return addr_to_subnet(self.addr, self.pfx)

    def contains(self, addr: Any) -> bool:
        """Return whether ``addr`` lies inside the subnet.

        An address of the other IP family is never contained.
        """
        return _contains(self.addr, self.pfx, addr)

    @classmethod
    def from_str(cls, text: str) -> "SubnetAny":
        """Parse ``address/prefix`` for an address of either family."""
        addr_text, pfx = _split(text)
        return cls(ipaddress.ip_address(addr_text), pfx)

    def __str__(self) -> str:
        return f"{self.addr}/{self.pfx}"