"""pkgprobe - speculative upstream release checker for PKGBUILD trees.

    Discovers build recipes, extracts each package's version and source URL,
    then probes bumped versions of that URL in a thread pool.

    Returns:
        int: Exit code
"""
import logging
import os
import sys
import threading
from collections import Counter
from typing import Iterable, List, Optional

from args import parse_args
from checker import CheckResult, UpdateChecker
from cli_config import ProbeConfig
from constants import CheckStatus, Constants, ExitCodes
from common.errors import ConfigError, ExtractionError
from common.logging_utils import configure_logging, extra_context, is_debug_enabled
from common.reporting import ConsoleReporter
from probe.prober import URLProber
from recipes.discovery import find_abs_recipes, find_tree_recipes
from recipes.extraction import ShellRecipeExtractor
from recipes.tasks import PackageTask, build_task
from workers.pool import WorkerPool

logger = logging.getLogger(__name__)


def scan_root(args) -> str:
    """Directory to scan: ``-d DIR`` if given, the ABS root otherwise."""
    return args.DIRECTORY if getattr(args, "DIRECTORY", None) else Constants.ABS_ROOT


def discover_recipes(args) -> List[str]:
    """Recipe paths selected by the CLI source flags and whitelist."""
    root = scan_root(args)
    whitelist = getattr(args, "PACKAGES", None) or None
    if getattr(args, "DIRECTORY", None):
        return find_tree_recipes(root, whitelist)
    return find_abs_recipes(root, whitelist)


def extract_tasks(paths: Iterable[str], extractor, reporter: ConsoleReporter,
                  pool: WorkerPool) -> List[PackageTask]:
    """Run the extractor over every recipe and keep the probeable packages."""

    def _extract(path: str) -> Optional[PackageTask]:
        try:
            result = extractor.extract(path)
        except ExtractionError as exc:
            reporter.diagnostic(path, exc.reason)
            return None
        return build_task(result, path, reporter)

    tasks = [task for task in pool.run(list(paths), _extract) if task is not None]
    # Pool results arrive in completion order
    return sorted(tasks, key=lambda t: (t.name, t.recipe_path))


def check_tasks(tasks: List[PackageTask], checker: UpdateChecker, pool: WorkerPool) -> List[CheckResult]:
    return pool.run(tasks, checker.check)


def summarize(results: List[CheckResult], level: int = logging.DEBUG) -> Counter:
    counts = Counter(result.status for result in results)
    logger.log(
        level,
        "Checked %d packages: %d new, %d suspicious, %d unparseable",
        len(results),
        counts[CheckStatus.NEW_VERSION],
        counts[CheckStatus.SUSPICIOUS],
        counts[CheckStatus.UNPARSEABLE],
    )
    return counts


def main(argv=None):
    """Main function of the program."""
    args = parse_args(argv)
    configure_logging(args.LOG_LEVEL, args.LOG_FILE)

    try:
        config = ProbeConfig.from_args(args)
    except ConfigError as exc:
        logger.error("%s", exc)
        sys.exit(ExitCodes.USAGE_ERROR.value)

    if is_debug_enabled(logger):
        logger.debug(
            "CLI start",
            extra=extra_context(event="function_entry", component="cli", action="main")
        )

    root = scan_root(args)
    if not os.path.isdir(root):
        logger.error("Directory %s does not exist", root)
        sys.exit(ExitCodes.FILE_ERROR.value)

    paths = discover_recipes(args)
    if not paths:
        logger.error("No packages found!")
        sys.exit(ExitCodes.NO_PACKAGES.value)
    # Progress lines are only shown in verbose mode
    progress_level = logging.INFO if config.verbose else logging.DEBUG
    logger.log(progress_level, "Found %d recipes under %s", len(paths), root)

    cancel_event = threading.Event()
    pool = WorkerPool(config.threads_num, cancel_event=cancel_event)
    extractor = ShellRecipeExtractor(config.extractor, config.extractor_timeout)

    with ConsoleReporter(verbose=config.verbose) as reporter:
        try:
            tasks = extract_tasks(paths, extractor, reporter, pool)
            if not tasks:
                logger.error("No packages with a probeable source URL found!")
                sys.exit(ExitCodes.NO_PACKAGES.value)

            prober = URLProber(config, cancel_event=cancel_event)
            checker = UpdateChecker(prober, reporter, config)
            results = check_tasks(tasks, checker, pool)
        except KeyboardInterrupt:
            logger.warning("Interrupted, stopping workers")
            sys.exit(130)

    summarize(results, progress_level)
    if pool.errors:
        logger.warning("%d packages failed with unexpected errors", pool.errors)
    sys.exit(ExitCodes.SUCCESS.value)


if __name__ == "__main__":
    main()
