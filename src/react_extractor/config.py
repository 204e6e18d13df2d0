"""Configuration management for react-extractor."""

from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class Config:
    """Central configuration with path properties and classification thresholds."""

    base_dir: Path = field(default_factory=lambda: Path.home() / ".react-extractor")

    # Classification
    component_normalizer: float = 5.0
    hook_normalizer: float = 3.0
    min_extraction_confidence: float = 0.2
    high_complexity_threshold: int = 10
    max_markup_patterns: int = 5

    # Generation
    components_dir_name: str = "components"
    hooks_dir_name: str = "hooks"
    component_indent: int = 4
    hook_indent: int = 2
    format_generated: bool = False

    @property
    def log_dir(self) -> Path:
        return self.base_dir / "logs"

    def ensure_dirs(self) -> None:
        """Create directory tree if it doesn't exist."""
        self.base_dir.mkdir(parents=True, exist_ok=True)
        self.log_dir.mkdir(parents=True, exist_ok=True)
