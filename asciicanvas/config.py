from dataclasses import dataclass
from pathlib import Path


@dataclass
class DrawConfig:
    script: Path | None = None
    """YAML file with a list of commands to run before the prompt"""

    interactive: bool = True
    """Read further commands from the terminal after the script"""

    prompt: str = "enter command: "

    log_file: Path = Path("asciicanvas.log")
    log_level: str = "INFO"
