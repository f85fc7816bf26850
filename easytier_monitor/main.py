"""Command entry point: load settings, check the CLI and serve the monitor."""

from __future__ import annotations

import argparse

from .app import create_app
from .config import Config, file_exists, load_config


def check_cli(config: Config) -> bool:
    """Report whether the configured CLI path is set and exists."""
    if not config.cli_path:
        print("配置文件未配置[cli_path]请检查！")
        return False
    if not file_exists(config.cli_path):
        print("配置文件配置的[cli_path]未找到文件，请检查！")
        return False
    return True


def main(argv: list[str] | None = None) -> int:
    """Start the monitor web server; returns a process exit status."""
    parser = argparse.ArgumentParser(description="Web monitor for an EasyTier node.")
    parser.add_argument(
        "--config-dir",
        default=".",
        help="directory holding EasyTier-Monitor.json (default: current directory)",
    )
    parser.add_argument(
        "--static-dir",
        default=None,
        help="directory holding the web page assets",
    )
    args = parser.parse_args(argv)

    config = load_config(args.config_dir)
    if not check_cli(config):
        return 1

    app = create_app(config.cli_path, args.static_dir)
    print(f"尝试开启服务 端口号:{config.port}")
    print("******程序启动成功******")
    try:
        app.run(host="0.0.0.0", port=config.port)
    except (OSError, OverflowError) as exc:
        print(f"启动程序错误：{exc}")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())