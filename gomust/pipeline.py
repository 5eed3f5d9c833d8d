"""Scan a package directory and resolve what its wrappers need."""

from dataclasses import dataclass, field
import logging
from typing import Dict, List, Optional

from .analysis.aliases import get_alias_strategy
from .analysis.references import build_import_needs
from .analysis.resolver import resolve_imports
from .analysis.selector import select_candidates
from .config import GeneratorConfig
from .source.loader import load_package_dir
from .source.models import Candidate, Package, Resolution

logger = logging.getLogger(__name__)


@dataclass
class GenerationResult:
    """Everything the emitter needs, plus the errors found on the way."""

    packages: Dict[str, Package]
    candidates: Dict[str, Candidate]
    resolution: Resolution = field(default_factory=Resolution)

    @property
    def functions(self) -> List[Candidate]:
        """Selected functions in name order."""
        return [self.candidates[name] for name in sorted(self.candidates)]

    @property
    def error_count(self) -> int:
        return self.resolution.error_count


def run_pipeline(directory: str, config: Optional[GeneratorConfig] = None) -> GenerationResult:
    """
    Load, select, collect references and resolve imports for a directory.

    Raises:
        PackageLoadError: the directory could not be parsed (fatal)
        ValueError: unknown alias strategy in config
    """
    config = config or GeneratorConfig()
    strategy = get_alias_strategy(config.alias_strategy)

    packages = load_package_dir(directory, config.test_suffix)
    candidates = select_candidates(packages, config)
    needs = build_import_needs(candidates)
    resolution = resolve_imports(needs, strategy)

    return GenerationResult(packages=packages, candidates=candidates, resolution=resolution)
