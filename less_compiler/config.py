"""Configuration for the compile orchestrator.

Per-file options come from the directive comment; this covers the settings
that apply to every compile in a session.
"""

from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml


@dataclass
class CompilerConfig:
    """Session-wide compiler settings.

    Attributes
    ----------
    encoding : str
        Encoding used to read sources and write outputs
    version_header : bool
        Prepend a "Generated by" comment to uncompressed output
    detect_redirect_cycles : bool
        Raise RedirectCycleError when ``main`` directives loop
    log_level : str
        Logging level name for the CLI
    log_file : str, optional
        Additional log file for the CLI
    """

    encoding: str = "utf-8"
    version_header: bool = True
    detect_redirect_cycles: bool = True
    log_level: str = "WARNING"
    log_file: Optional[str] = None

    @classmethod
    def from_yaml(cls, path: Path) -> "CompilerConfig":
        """Load configuration from YAML file."""
        with open(path) as f:
            data = yaml.safe_load(f) or {}

        # Handle nested less_compiler section
        if "less_compiler" in data:
            data = data["less_compiler"] or {}

        return cls(**data)

    @classmethod
    def default(cls) -> "CompilerConfig":
        """Create default configuration."""
        return cls()

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return asdict(self)
