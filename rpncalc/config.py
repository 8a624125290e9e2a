"""Line-reading loop settings"""
from dataclasses import dataclass


@dataclass
class ReplConfig:
    prompt: str = "> "
    # input line that ends the session
    sentinel: str = "end"
    show_postfix: bool = False
    log_level: str = "WARNING"
