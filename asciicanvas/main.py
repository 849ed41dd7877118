#!/usr/bin/env python
import logging
from pathlib import Path
from typing import cast, override

import jsonargparse
import yaml

from .config import DrawConfig
from .session import DrawSession

logger = logging.getLogger(__name__)


class IndentMultiline(logging.Formatter):
    @override
    def format(self, record: logging.LogRecord):
        s = super().format(record)
        head, *rest = s.splitlines()
        if rest:
            rest = ["    " + line for line in rest]
            return "\n".join([head, *rest])
        return s


def setup_logging(log_file: Path, level: str):
    fmt = "%(asctime)s %(levelname)s %(name)s: %(message)s"
    handler = logging.FileHandler(log_file, encoding="utf-8")
    handler.setFormatter(IndentMultiline(fmt))
    root = logging.getLogger()
    root.setLevel(level.upper())
    root.addHandler(handler)


def load_script(path: Path) -> list[str]:
    """Read commands from a YAML file.

    The file holds either a list of command strings or a mapping with a
    `commands` list.
    """
    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f)
    if isinstance(data, dict):
        data = data.get("commands")
    if not isinstance(data, list) or not all(isinstance(c, str) for c in data):
        raise ValueError(f"{path}: expected a list of command strings")
    return data


def run(config: DrawConfig, session: DrawSession | None = None) -> DrawSession:
    session = session or DrawSession()

    if config.script is not None:
        commands = load_script(config.script)
        logger.info(f"Running {len(commands)} commands from {config.script}")
        for output in session.run_script(commands):
            if output:
                print(output)

    if config.interactive:
        logger.info("Starting session")
        while not session.finished:
            try:
                line = input(config.prompt)
            except EOFError:
                break
            output = session.execute(line)
            if output:
                print(output)

    return session


def main():
    jsonargparse.set_parsing_settings(docstring_parse_attribute_docstrings=True)

    config = cast(
        "DrawConfig",
        jsonargparse.auto_cli(DrawConfig, parser_mode="yaml"),  # pyright: ignore[reportUnknownMemberType]
    )
    setup_logging(config.log_file, config.log_level)
    run(config)


if __name__ == "__main__":
    main()
