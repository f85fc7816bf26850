# easytier-monitor

A small web service that reports the state of an EasyTier network. It runs the
EasyTier command-line tool, parses the tables it prints and serves the results
as JSON.

## Installation

```
pip install .
```

## Configuration

The service reads `EasyTier-Monitor.json` (or a file named `EasyTier-Monitor`)
from the configuration directory, which is the current working directory
unless `--config-dir` says otherwise:

```json
{
  "port": 8899,
  "cli_path": "/usr/local/bin/easytier-cli"
}
```

- `port` is the HTTP port to listen on. If the file is missing, cannot be read
  or is not a JSON object, port 8899 is used. Keys are matched ignoring case.
- `cli_path` is the path of the EasyTier command-line tool. It must be set and
  the path must exist, or the command prints a message and exits with status 1.

## Running

```
easytier-monitor [--config-dir DIR] [--static-dir DIR]
```

- `--config-dir` is the directory holding the configuration file (default: `.`).
- `--static-dir` is the directory holding the web page assets (default: a
  `static` directory beside the `easytier_monitor` package).

The server listens on `0.0.0.0` at the configured port. If it cannot start,
the error is printed and the command exits with status 1.

## HTTP API

Every API endpoint answers with status 200 and a JSON body of this shape:

```json
{"code": 0, "msg": "", "count": 1, "data": ...}
```

`code` is `0` on success. On failure (the tool could not be run, exited with a
non-zero status, or printed a peer table that could not be read) it is `-1`,
`msg` holds the error text, `count` is `0` and `data` is `null`.

| Path             | Data                                                           |
|------------------|----------------------------------------------------------------|
| `/api/peer`      | list of peers: `ipv4`, `hostname`, `cost`, `lat_ms`, `loss_rate`, `rx_bytes`, `tx_bytes`, `tunnel_proto`, `nat_type`, `id`, `version`; `count` is the number of peers |
| `/api/node`      | this node: `virtual_ip`, `hostname`, `proxy_cidrs`, `peer_id`, `public_ipv4`, `udp_stun_type`, `interface_ipv4`, `interface_ipv6`, `listeners`; `count` is 1 |
| `/api/connector` | list of connectors: `url`, `status`; `count` is 1              |

`/` serves `index.html` from the static directory, and the other files in that
directory are served under `/static/`.

## What is not included

The package ships no web page or other static assets. To have `/` and
`/static/` serve anything, put an `index.html` and its assets in a directory
and pass it with `--static-dir` (or place it as `static` beside the package).
Without it those paths answer 404; the JSON API works either way.

## Using the library

The parsers work on the text the command-line tool prints and can be used on
their own:

```python
from easytier_monitor.parsing import parse_node, parse_connectors, parse_peer_table

node = parse_node(node_output)
print(node.virtual_ip, node.listeners)

rows = parse_peer_table(peer_output)        # list of dicts keyed by column header
connectors = parse_connectors(connector_output)
```

`parse_peer_table` raises `TableFormatError` when the table has fewer than
three lines or fewer than eleven columns.

- `easytier_monitor.service` provides `get_peers`, `get_node` and
  `get_connectors`, each taking the tool's path, and `run_cmd`, which raises
  `CommandError` when the tool cannot be started or fails.
- `easytier_monitor.models` holds the `Peer`, `Node`, `Connector` and `RetMsg`
  records and the `success_msg` / `fail_msg` helpers.
- `easytier_monitor.config.load_config` reads the configuration into a
  `Config`.
- `easytier_monitor.app.create_app(cli_path, static_dir=None)` builds the Flask
  application.