import pytest

from easytier_monitor.models import Connector, Node, Peer
from easytier_monitor.parsing import (
    TableFormatError,
    parse_connectors,
    parse_node,
    parse_peer_table,
)

HEADERS = [
    "ipv4",
    "hostname",
    "cost",
    "lat_ms",
    "loss_rate",
    "rx_bytes",
    "tx_bytes",
    "tunnel_proto",
    "nat_type",
    "id",
    "version",
]


def _row_line(cells):
    return "│ " + " │ ".join(cells) + " │"


def _table(rows, bottom=True, headers=HEADERS):
    lines = ["┌" + "─" * 20 + "┐", _row_line(headers)]
    for row in rows:
        lines.append("├" + "─" * 20 + "┤")
        lines.append(_row_line(row))
    if bottom:
        lines.append("└" + "─" * 20 + "┘")
    return "\n".join(lines) + "\n"


ROW_A = ["10.0.0.1", "alpha", "Local", "-", "-", "-", "-", "-", "Unknown", "111", "2.0.0"]
ROW_B = ["10.0.0.2", "beta", "p2p", "12.5", "0.0", "1 KB", "2 KB", "udp", "FullCone", "222", "2.0.0"]


def test_parse_peer_table_rows_keyed_by_header():
    rows = parse_peer_table(_table([ROW_A, ROW_B]))
    assert rows == [dict(zip(HEADERS, ROW_A)), dict(zip(HEADERS, ROW_B))]


def test_parse_peer_table_feeds_peer_model():
    rows = parse_peer_table(_table([ROW_B]))
    peers = [Peer.from_row(r) for r in rows]
    assert peers[0].hostname == "beta"
    assert peers[0].tunnel_proto == "udp"
    assert peers[0].version == "2.0.0"


def test_parse_peer_table_too_few_lines():
    with pytest.raises(TableFormatError, match="too few lines"):
        parse_peer_table("only\nheader")


def test_parse_peer_table_too_few_columns():
    with pytest.raises(TableFormatError, match="too few columns"):
        parse_peer_table(_table([["a", "b", "c"]], headers=["a", "b", "c"]))


def test_parse_peer_table_skips_rows_with_empty_cells():
    broken = list(ROW_A)
    broken[2] = ""
    rows = parse_peer_table(_table([broken, ROW_B]))
    assert [r["hostname"] for r in rows] == ["beta"]


def test_parse_peer_table_last_line_always_dropped():
    rows = parse_peer_table(_table([ROW_A, ROW_B], bottom=False))
    assert [r["hostname"] for r in rows] == ["alpha"]


def test_parse_peer_table_no_data_rows():
    assert parse_peer_table(_table([])) == []


NODE_OUTPUT = """\
┌──────────────────┬─────────────────────────┐
│ Virtual IP       │ 10.144.144.1/24         │
├──────────────────┼─────────────────────────┤
│ Hostname         │ gateway                 │
├──────────────────┼─────────────────────────┤
│ Proxy CIDRs      │                         │
├──────────────────┼─────────────────────────┤
│ Peer ID          │ 123456                  │
├──────────────────┼─────────────────────────┤
│ Public IPv4      │ 192.0.2.10              │
├──────────────────┼─────────────────────────┤
│ UDP Stun Type    │ FullCone                │
├──────────────────┼─────────────────────────┤
│ Interface IPv4   │ 192.168.1.5             │
├──────────────────┼─────────────────────────┤
│ Interface IPv6   │ fe80::1                 │
├──────────────────┼─────────────────────────┤
│ Listener 1       │ tcp://0.0.0.0:11010     │
├──────────────────┼─────────────────────────┤
│ Listener 2       │ udp://0.0.0.0:11010     │
└──────────────────┴─────────────────────────┘
"""


def test_parse_node_fields():
    node = parse_node(NODE_OUTPUT)
    assert node == Node(
        virtual_ip="10.144.144.1/24",
        hostname="gateway",
        proxy_cidrs="",
        peer_id="123456",
        public_ipv4="192.0.2.10",
        udp_stun_type="FullCone",
        interface_ipv4="192.168.1.5",
        interface_ipv6="fe80::1",
        listeners=["tcp://0.0.0.0:11010", "udp://0.0.0.0:11010"],
    )


def test_parse_node_empty_output():
    assert parse_node("") == Node()


def test_parse_node_ignores_unknown_keys():
    node = parse_node("│ Mystery │ value │\n│ Hostname │ h │")
    assert node == Node(hostname="h")


CONNECTOR_OUTPUT = """\
[
    Connector {
        url: "tcp://public.example.com:11010",
        status: Connected,
    },
    Connector {
        url: "udp://other.example.com:11010",
        status: Disconnected,
    },
]
"""


def test_parse_connectors_pairs():
    assert parse_connectors(CONNECTOR_OUTPUT) == [
        Connector(url="tcp://public.example.com:11010", status="Connected"),
        Connector(url="udp://other.example.com:11010", status="Disconnected"),
    ]


def test_parse_connectors_url_without_status():
    assert parse_connectors('url: "tcp://x.example.com:1",\n') == []


def test_parse_connectors_status_then_url_pairs_up():
    text = 'status: Connecting,\nurl: "tcp://y.example.com:2",\n'
    assert parse_connectors(text) == [
        Connector(url="tcp://y.example.com:2", status="Connecting")
    ]