"""Configuration for gomust."""

from dataclasses import dataclass, field
from typing import Any, Dict, List
import os


@dataclass
class GeneratorConfig:
    """Wrapper generation configuration."""

    wrapper_prefix: str = "Must"
    error_type: str = "error"
    test_suffix: str = "_test"

    build_tags: List[str] = field(default_factory=list)  # Recorded, not evaluated
    alias_strategy: str = field(
        default_factory=lambda: os.getenv("GOMUST_ALIAS_STRATEGY", "segment")
    )

    # Output settings
    output_name: str = field(
        default_factory=lambda: os.getenv("GOMUST_OUTPUT", "gomust.txt")
    )
    dry_run: bool = False
    update: bool = False

    def settings(self) -> Dict[str, Any]:
        """Settings persisted in the generated output for update mode."""
        return {
            "tags": ",".join(self.build_tags),
            "alias_strategy": self.alias_strategy,
        }

    def apply_settings(self, settings: Dict[str, Any]) -> None:
        """Restore settings previously returned by settings()."""
        self.build_tags = parse_tags(settings.get("tags", ""))
        self.alias_strategy = settings.get("alias_strategy", self.alias_strategy)


def parse_tags(tags: str) -> List[str]:
    """Split a -tags value ("a,b" or "a b") into individual tags."""
    return [t for t in tags.replace(",", " ").split() if t]
