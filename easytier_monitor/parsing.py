"""Parsers for the text printed by the EasyTier command-line tool."""

from __future__ import annotations

import re

from .models import Connector, Node

_BAR = "│"
_MIN_PEER_COLUMNS = 11

_URL_RE = re.compile(r'url: "([^"]+)"')
_STATUS_RE = re.compile(r"status: (\w+),", re.ASCII)

_NODE_FIELDS = {
    "Virtual IP": "virtual_ip",
    "Hostname": "hostname",
    "Proxy CIDRs": "proxy_cidrs",
    "Peer ID": "peer_id",
    "Public IPv4": "public_ipv4",
    "UDP Stun Type": "udp_stun_type",
    "Interface IPv4": "interface_ipv4",
    "Interface IPv6": "interface_ipv6",
}


class TableFormatError(ValueError):
    """Raised when CLI output does not have the expected table layout."""


def _cells(line: str) -> list[str]:
    return [cell for cell in (part.strip() for part in line.strip().split(_BAR)) if cell]


def parse_peer_table(table: str) -> list[dict[str, str]]:
    """Parse the boxed peer table into rows keyed by column header.

    The second line holds the headers; data lines run from the fourth line
    up to but excluding the last. Separator lines and rows whose non-empty
    cell count differs from the header count are skipped.
    """
    lines = table.strip().split("\n")
    if len(lines) < 3:
        raise TableFormatError("invalid table format: too few lines")

    headers = _cells(lines[1])
    if len(headers) < _MIN_PEER_COLUMNS:
        raise TableFormatError(
            f"invalid table format: too few columns ({len(headers)})"
        )

    rows = []
    for line in lines[3:-1]:
        if "├" in line or "└" in line:
            continue
        cells = _cells(line)
        if len(cells) != len(headers):
            continue
        rows.append(dict(zip(headers, cells)))
    return rows


def parse_node(output: str) -> Node:
    """Parse the key/value table printed for the local node."""
    node = Node()
    for line in output.split("\n"):
        if _BAR not in line or "────" in line:
            continue
        fields = line.split(_BAR)
        if len(fields) < 3:
            continue
        key = fields[1].strip()
        value = fields[2].strip()
        attr = _NODE_FIELDS.get(key)
        if attr is not None:
            setattr(node, attr, value)
        elif key.startswith("Listener"):
            node.listeners.append(value)
    return node


def parse_connectors(output: str) -> list[Connector]:
    """Extract url/status pairs from the connector listing."""
    connectors = []
    url = status = ""
    for line in output.split("\n"):
        line = line.strip()
        if match := _URL_RE.search(line):
            url = match.group(1)
        if match := _STATUS_RE.search(line):
            status = match.group(1)
        if url and status:
            connectors.append(Connector(url=url, status=status))
            url = status = ""
    return connectors