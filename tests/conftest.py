"""Shared pytest fixtures for domain, adapter, CLI and module-entry tests.

Centralizes test infrastructure following clean architecture principles:
- All shared fixtures live here
- Tests import fixtures implicitly via pytest's conftest discovery
- Fixtures use descriptive names that read as plain English
"""

from __future__ import annotations

import contextlib
import dataclasses
import os
import re
import tempfile
from collections.abc import Callable, Iterator
from dataclasses import dataclass, fields
from datetime import date
from pathlib import Path
from typing import TYPE_CHECKING, Any

import lib_cli_exit_tools
import pytest
from click.testing import CliRunner
from lib_layered_config import Config

from inventory_report.domain.models import InventoryItem

if TYPE_CHECKING:
    from inventory_report.adapters.memory import FixedClock, InventoryStub, ReportSinkSpy
    from inventory_report.composition import AppServices

_COVERAGE_BASENAME = ".coverage.inventory_report"


def _purge_stale_coverage_files(cov_path: Path) -> None:
    """Delete leftover SQLite database and journal files from crashed runs."""
    for suffix in ("", "-journal", "-wal", "-shm"):
        with contextlib.suppress(FileNotFoundError):
            Path(str(cov_path) + suffix).unlink()


def pytest_configure(config: pytest.Config) -> None:
    """Keep the coverage database on a local temp directory.

    SQLite locking is unreliable on network mounts, so the data file is
    redirected before ``pytest-cov`` creates its ``Coverage()`` object.
    """
    if "COVERAGE_FILE" not in os.environ:
        cov_path = Path(tempfile.gettempdir()) / _COVERAGE_BASENAME
        _purge_stale_coverage_files(cov_path)
        os.environ["COVERAGE_FILE"] = str(cov_path)


def _load_dotenv() -> None:
    """Load .env file when it exists for local test configuration."""
    from dotenv import load_dotenv

    env_file = Path(__file__).parent.parent / ".env"
    if env_file.exists():
        load_dotenv(env_file)


_load_dotenv()

ANSI_ESCAPE_PATTERN = re.compile(r"\x1B\[[0-?]*[ -/]*[@-~]")
CONFIG_FIELDS: tuple[str, ...] = tuple(field.name for field in fields(type(lib_cli_exit_tools.config)))

#: The worked example: one discontinued item between two active ones.
EXAMPLE_ITEMS: tuple[InventoryItem, ...] = (
    InventoryItem(item_id=1, name="Widget", category="B", stock_quantity=10, is_discontinued=False),
    InventoryItem(item_id=2, name="Gadget", category="A", stock_quantity=5, is_discontinued=True),
    InventoryItem(item_id=3, name="Bolt", category="A", stock_quantity=100, is_discontinued=False),
)
EXAMPLE_DATE = date(2024, 1, 1)


def _remove_ansi_codes(text: str) -> str:
    """Return *text* stripped of ANSI escape sequences."""
    return ANSI_ESCAPE_PATTERN.sub("", text)


def _snapshot_cli_config() -> dict[str, object]:
    """Capture every attribute from ``lib_cli_exit_tools.config``."""
    return {name: getattr(lib_cli_exit_tools.config, name) for name in CONFIG_FIELDS}


def _restore_cli_config(snapshot: dict[str, object]) -> None:
    """Reapply a configuration snapshot captured by ``_snapshot_cli_config``."""
    for name, value in snapshot.items():
        setattr(lib_cli_exit_tools.config, name, value)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a fresh CliRunner per test.

    Use ``result.stdout`` for the XML and ``result.stderr`` for status and
    error lines; log output never lands on stdout.
    """
    return CliRunner()


@pytest.fixture
def production_factory() -> Callable[[], AppServices]:
    """Provide the production services factory for tests."""
    from inventory_report.composition import build_production

    return build_production


@pytest.fixture
def strip_ansi() -> Callable[[str], str]:
    """Return a helper that strips ANSI escape sequences from a string."""

    def _strip(value: str) -> str:
        return _remove_ansi_codes(value)

    return _strip


@pytest.fixture(autouse=True)
def managed_traceback_state() -> Iterator[None]:
    """Start every test with tracebacks off; --traceback leaves the flags set."""
    lib_cli_exit_tools.reset_config()
    lib_cli_exit_tools.config.traceback = False
    lib_cli_exit_tools.config.traceback_force_color = False
    snapshot = _snapshot_cli_config()
    try:
        yield
    finally:
        _restore_cli_config(snapshot)


@pytest.fixture
def clear_config_cache() -> Iterator[None]:
    """Clear the get_config lru_cache before each test.

    Only clears before, not after: a test may monkeypatch get_config and
    lose its cache_clear attribute.
    """
    from inventory_report.adapters.config import loader as config_mod

    config_mod.get_config.cache_clear()
    yield


@pytest.fixture
def config_factory() -> Callable[[dict[str, Any]], Config]:
    """Create real Config instances from test data dicts without filesystem I/O."""

    def _factory(data: dict[str, Any]) -> Config:
        return Config(data, {})

    return _factory


@pytest.fixture
def example_items() -> list[InventoryItem]:
    """The three-record worked example (ids 1, 2 discontinued, 3)."""
    return list(EXAMPLE_ITEMS)


@pytest.fixture
def example_date() -> date:
    """Generation date used with ``example_items``."""
    return EXAMPLE_DATE


@dataclass
class ReportCliContext:
    """Container for report CLI test setup.

    Attributes:
        factory: Callable that returns wired AppServices for CLI invocation.
        sink: ReportSinkSpy capturing saved reports.
        inventory: InventoryStub serving records and recording requested paths.
        clock: FixedClock supplying the generation timestamp.
    """

    factory: Callable[[], Any]
    sink: ReportSinkSpy
    inventory: InventoryStub
    clock: FixedClock


@pytest.fixture
def report_cli_context(
    clear_config_cache: None,
) -> Callable[..., ReportCliContext]:
    """Create report CLI test context with in-memory I/O and real logging.

    Accepts the ``[report]`` section contents and optional records for the
    inventory stub. Inventory, clock and persistence are in memory; logging
    and serialization are the production adapters.

    Example:
        def test_report(cli_runner, report_cli_context) -> None:
            ctx = report_cli_context({"save": True})
            result = cli_runner.invoke(cli, ["report"], obj=ctx.factory)
            assert ctx.sink.saved
    """
    from inventory_report.adapters.memory import FixedClock, InventoryStub, ReportSinkSpy
    from inventory_report.composition import build_production, build_testing

    def _create(report_data: dict[str, Any] | None = None, items: list[InventoryItem] | None = None) -> ReportCliContext:
        sink = ReportSinkSpy()
        inventory = InventoryStub(items=list(items) if items else [])
        clock = FixedClock()
        config = Config({"report": report_data} if report_data else {}, {})

        def _fake_get_config(**_kwargs: Any) -> Config:
            return config

        test_services = dataclasses.replace(
            build_testing(sink=sink, inventory=inventory, clock=clock),
            get_config=_fake_get_config,
            init_logging=build_production().init_logging,
        )
        return ReportCliContext(factory=lambda: test_services, sink=sink, inventory=inventory, clock=clock)

    return _create


@pytest.fixture
def config_cli_context(
    clear_config_cache: None,
) -> Callable[[dict[str, Any]], Callable[[], AppServices]]:
    """Create CLI test context with injected config and production adapters.

    Example:
        def test_config_display(cli_runner, config_cli_context) -> None:
            factory = config_cli_context({"report": {"preview_chars": 120}})
            result = cli_runner.invoke(cli, ["config"], obj=factory)
            assert "preview_chars" in result.output
    """
    from inventory_report.composition import build_production

    def _create(config_data: dict[str, Any]) -> Callable[[], AppServices]:
        config = Config(config_data, {})

        def _fake_get_config(**_kwargs: Any) -> Config:
            return config

        test_services = dataclasses.replace(build_production(), get_config=_fake_get_config)
        return lambda: test_services

    return _create


@pytest.fixture
def inject_config_with_profile_capture(
    clear_config_cache: None,
) -> Callable[[Config, list[str | None]], Callable[[], AppServices]]:
    """Return a factory whose get_config records the profiles it was asked for."""
    from inventory_report.composition import build_production

    def _inject(config: Config, captured_profiles: list[str | None]) -> Callable[[], AppServices]:
        def _capturing_get_config(*, profile: str | None = None, **_kwargs: Any) -> Config:
            captured_profiles.append(profile)
            return config

        test_services = dataclasses.replace(build_production(), get_config=_capturing_get_config)
        return lambda: test_services

    return _inject
