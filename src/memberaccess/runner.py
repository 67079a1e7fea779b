"""Analysis entry point and multi-file orchestration."""
from __future__ import annotations

import logging
import time
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from pathlib import Path

from memberaccess.constants import TREE_ERROR_CODE
from memberaccess.diagnostics import Diagnostic, DiagnosticCollection
from memberaccess.formatters import format_json
from memberaccess.options import WarningReporter, resolve_options, validate_tokens
from memberaccess.rules.member_access import MemberAccessRule
from memberaccess.scanner import scan_files
from memberaccess.serde import load_tree
from memberaccess.tree import SourceTree
from memberaccess.types import MemberAccessConfig, MemberAccessOptions, TreeFormatError

logger: logging.Logger = logging.getLogger(__name__)


def analyze(
    tree: SourceTree,
    option_tokens: Iterable[str],
    *,
    reporter: WarningReporter,
) -> list[Diagnostic]:
    """
    Run the member-access rule over one tree.

    Args:
        tree: Parsed file.
        option_tokens: Rule option tokens.
        reporter: One-time warning sink shared by every call in the process.

    Returns:
        Diagnostics in traversal order. Empty when the options are a misuse
        combination.

    Raises:
        ConfigError: If an option token is not recognized.
        RuleInvariantError: If the rule meets a member kind it cannot label.
    """
    options: MemberAccessOptions | None = resolve_options(
        option_tokens, reporter=reporter,
    )
    if options is None:
        return []
    return MemberAccessRule().check(tree=tree, options=options)


@dataclass(frozen=True, slots=True)
class FileReport:
    file: Path
    diagnostics: DiagnosticCollection


@dataclass(frozen=True, slots=True)
class CheckResult:
    reports: list[FileReport] = field(default_factory=list)
    warnings: tuple[str, ...] = ()

    @property
    def files_checked(self) -> int:
        return len(self.reports)

    @property
    def diagnostic_count(self) -> int:
        return sum(len(r.diagnostics) for r in self.reports)

    @property
    def fixable_count(self) -> int:
        return sum(r.diagnostics.fixable_count for r in self.reports)

    @property
    def exit_code(self) -> int:
        return 1 if self.diagnostic_count > 0 else 0

    def iter_diagnostics(self) -> Iterator[tuple[Path, Diagnostic]]:
        for report in self.reports:
            for diag in report.diagnostics:
                yield report.file, diag


def _tree_error_to_diagnostic(*, error: TreeFormatError) -> Diagnostic:
    return Diagnostic(
        start=0,
        end=0,
        message=str(error),
        rule_name=TREE_ERROR_CODE,
    )


def check_paths(
    *,
    paths: tuple[Path, ...],
    config: MemberAccessConfig,
    reporter: WarningReporter,
) -> CheckResult:
    """Check every tree file under *paths* with the configured options."""
    validate_tokens(config.options)

    started: float = time.perf_counter()
    files: list[Path] = scan_files(paths=paths, config=config)
    logger.info("Found %d tree files", len(files))

    reports: list[FileReport] = []
    for file in files:
        logger.debug("Checking %s", file)
        collection: DiagnosticCollection = DiagnosticCollection()
        try:
            tree: SourceTree = load_tree(file)
        except TreeFormatError as e:
            collection.add(diagnostic=_tree_error_to_diagnostic(error=e))
            reports.append(FileReport(file=file, diagnostics=collection))
            continue

        collection.add_all(
            diagnostics=analyze(tree, config.options, reporter=reporter),
        )
        logger.debug("%s: %d diagnostics", file, len(collection))
        reports.append(FileReport(file=file, diagnostics=collection))

    result: CheckResult = CheckResult(reports=reports, warnings=tuple(reporter.warnings))
    logger.info(
        "%d diagnostics (%d fixable)", result.diagnostic_count, result.fixable_count,
    )
    logger.info("Completed in %.2fs", time.perf_counter() - started)
    return result


def format_results(*, result: CheckResult) -> str:
    return format_json(result.iter_diagnostics())
