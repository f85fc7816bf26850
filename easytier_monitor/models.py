"""Data records served by the monitor API and the response envelope."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from typing import Any, Mapping


@dataclass
class Connector:
    """A server connection reported by the EasyTier CLI."""

    url: str = ""
    status: str = ""


@dataclass
class Node:
    """Information about the local EasyTier node."""

    virtual_ip: str = ""
    hostname: str = ""
    proxy_cidrs: str = ""
    peer_id: str = ""
    public_ipv4: str = ""
    udp_stun_type: str = ""
    interface_ipv4: str = ""
    interface_ipv6: str = ""
    listeners: list[str] = field(default_factory=list)


@dataclass
class Peer:
    """One row of the EasyTier peer table."""

    ipv4: str = ""
    hostname: str = ""
    cost: str = ""
    lat_ms: str = ""
    loss_rate: str = ""
    rx_bytes: str = ""
    tx_bytes: str = ""
    tunnel_proto: str = ""
    nat_type: str = ""
    id: str = ""
    version: str = ""

    @classmethod
    def from_row(cls, row: Mapping[str, str]) -> "Peer":
        """Build a peer from a table row keyed by column header.

        Headers are matched to fields exactly first, then ignoring case;
        unknown headers are ignored and missing fields stay empty.
        """
        names = [f.name for f in dataclasses.fields(cls)]
        values: dict[str, str] = {}
        for name in names:
            if name in row:
                values[name] = str(row[name])
                continue
            for key, value in row.items():
                if key.lower() == name:
                    values[name] = str(value)
                    break
        return cls(**values)


def _jsonable(value: Any) -> Any:
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return dataclasses.asdict(value)
    if isinstance(value, (list, tuple)):
        return [_jsonable(item) for item in value]
    if isinstance(value, dict):
        return {key: _jsonable(item) for key, item in value.items()}
    return value


@dataclass
class RetMsg:
    """Uniform API response envelope."""

    code: int = 0
    msg: str = ""
    count: int = 0
    data: Any = None

    def to_dict(self) -> dict[str, Any]:
        """Return the envelope as JSON-ready plain data."""
        return {
            "code": self.code,
            "msg": self.msg,
            "count": self.count,
            "data": _jsonable(self.data),
        }


def fail_msg(msg: str) -> RetMsg:
    """Envelope for a failed request."""
    return RetMsg(code=-1, msg=msg, count=0, data=None)


def success_msg(count: int, data: Any) -> RetMsg:
    """Envelope for a successful request."""
    return RetMsg(code=0, msg="", count=count, data=data)