"""Build recipe discovery, extraction and task construction."""

from .discovery import find_abs_recipes, find_tree_recipes
from .extraction import ShellRecipeExtractor, parse_extractor_output
from .tasks import ExtractionResult, PackageTask, build_task

__all__ = [
    "find_abs_recipes", "find_tree_recipes",
    "ShellRecipeExtractor", "parse_extractor_output",
    "ExtractionResult", "PackageTask", "build_task",
]
