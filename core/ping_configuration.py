"""
Ping configuration - immutable set of flags for one ping invocation.

PingConfiguration is the value handed to PingService; PingConfigurationBuilder
assembles it through chained setters. Each setter returns a new builder, so a
builder held by one caller is never changed by another.
"""

from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class PingConfiguration:
    """
    Flags passed to the external ping binary.

    Attributes:
        broadcast_enable: Allow pinging a broadcast address (``-b``)
        count: Number of echo requests to send (``-c``)
        so_debug_enable: Set SO_DEBUG on the socket being used (``-d``)
        flood_network_enable: Flood ping, hundred or more packets per second (``-f``)
        interval: Seconds between successive packet transmissions (``-i``)
        ttl: Time To Live, max number of hops (``-t``)
        deadline: Seconds before ping exits regardless of packets sent or received (``-w``)
        timeout: Seconds to wait for a response (``-W``)
    """
    broadcast_enable: bool = False
    count: int = 3
    so_debug_enable: bool = False
    flood_network_enable: bool = False
    interval: int = 1
    ttl: int = 50
    deadline: int = 1000
    timeout: int = 1000

    @classmethod
    def builder(cls) -> PingConfigurationBuilder:
        """Return a builder seeded with the default values."""
        return PingConfigurationBuilder()

    def to_builder(self) -> PingConfigurationBuilder:
        """Return a builder seeded with this configuration's values."""
        return PingConfigurationBuilder(
            broadcast_enable=self.broadcast_enable,
            count=self.count,
            so_debug_enable=self.so_debug_enable,
            flood_network_enable=self.flood_network_enable,
            interval=self.interval,
            ttl=self.ttl,
            deadline=self.deadline,
            timeout=self.timeout,
        )


@dataclass(frozen=True)
class PingConfigurationBuilder:
    """
    Chained construction of a PingConfiguration.

    Setters overwrite exactly one field and never validate; out-of-range
    values reach the ping binary unchanged.

    Example:
        config = (
            PingConfiguration.builder()
            .set_count(5)
            .set_interval(2)
            .enable_broadcast()
            .build()
        )
    """
    broadcast_enable: bool = False
    count: int = 3
    so_debug_enable: bool = False
    flood_network_enable: bool = False
    interval: int = 1
    ttl: int = 50
    deadline: int = 1000
    timeout: int = 1000

    def enable_broadcast(self) -> PingConfigurationBuilder:
        return replace(self, broadcast_enable=True)

    def set_count(self, count: int) -> PingConfigurationBuilder:
        return replace(self, count=count)

    def enable_so_debug(self) -> PingConfigurationBuilder:
        return replace(self, so_debug_enable=True)

    def enable_flood(self) -> PingConfigurationBuilder:
        return replace(self, flood_network_enable=True)

    def set_interval(self, interval: int) -> PingConfigurationBuilder:
        return replace(self, interval=interval)

    def set_ttl(self, ttl: int) -> PingConfigurationBuilder:
        return replace(self, ttl=ttl)

    def set_deadline(self, deadline: int) -> PingConfigurationBuilder:
        return replace(self, deadline=deadline)

    def set_timeout(self, timeout: int) -> PingConfigurationBuilder:
        return replace(self, timeout=timeout)

    def build(self) -> PingConfiguration:
        """Snapshot the current values. May be called any number of times."""
        return PingConfiguration(
            broadcast_enable=self.broadcast_enable,
            count=self.count,
            so_debug_enable=self.so_debug_enable,
            flood_network_enable=self.flood_network_enable,
            interval=self.interval,
            ttl=self.ttl,
            deadline=self.deadline,
            timeout=self.timeout,
        )
