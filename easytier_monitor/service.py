"""Queries against the EasyTier command-line tool."""

from __future__ import annotations

import subprocess

from .models import Connector, Node, Peer
from .parsing import TableFormatError, parse_connectors, parse_node, parse_peer_table


class CommandError(RuntimeError):
    """Raised when the CLI cannot be started or exits unsuccessfully."""

    def __init__(self, message: str, returncode: int | None = None, stderr: str = "") -> None:
        super().__init__(message)
        self.returncode = returncode
        self.stderr = stderr


def run_cmd(command: str, param: str) -> str:
    """Run ``command param`` and return its standard output.

    Raises CommandError carrying the captured standard error when the
    program cannot be started or exits with a non-zero status.
    """
    try:
        result = subprocess.run(
            [command, param],
            capture_output=True,
            text=True,
            check=False,
        )
    except OSError as exc:
        raise CommandError(f"exec: {command}: {exc}") from exc
    if result.returncode != 0:
        if result.returncode < 0:
            message = f"signal: {-result.returncode}"
        else:
            message = f"exit status {result.returncode}"
        raise CommandError(message, returncode=result.returncode, stderr=result.stderr)
    return result.stdout


def _run(cli_path: str, param: str) -> str:
    try:
        return run_cmd(cli_path, param)
    except CommandError as exc:
        print("执行cmd命令失败：", exc)
        raise


def get_peers(cli_path: str) -> list[Peer]:
    """Return the peers currently known to the local node."""
    output = _run(cli_path, "peer")
    try:
        rows = parse_peer_table(output)
    except TableFormatError as exc:
        print("解析返回数据失败：", exc)
        raise
    return [Peer.from_row(row) for row in rows]


def get_node(cli_path: str) -> Node:
    """Return information about the local node."""
    return parse_node(_run(cli_path, "node"))


def get_connectors(cli_path: str) -> list[Connector]:
    """Return the servers the local node is connected to."""
    return parse_connectors(_run(cli_path, "connector"))