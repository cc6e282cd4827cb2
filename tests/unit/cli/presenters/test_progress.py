"""Unit tests for ProgressPresenter class."""

from io import StringIO

import pytest
from rich.console import Console

from classilist.application.execution import ExecutionMonitor
from classilist.cli.presenters import ProgressPresenter


class TestProgressPresenter:
    """Test suite for ProgressPresenter class."""

    @pytest.fixture
    def console(self):
        """Create a console with StringIO for capturing output."""
        return Console(file=StringIO(), force_terminal=True, width=120)

    def test_initialization(self, console):
        presenter = ProgressPresenter(console)
        assert presenter.console == console
        assert presenter.updates == 0
        assert presenter.progress_percentage is None

    def test_updates_are_recorded(self, console):
        with ProgressPresenter(console) as presenter:
            presenter(0.25, 'Writing row 2 ("Row1") of 8')
            presenter(None, "Finishing")

        assert presenter.updates == 2
        assert presenter.last_message == "Finishing"
        assert presenter.progress_percentage == 25.0

    def test_disabled_presenter_still_records(self, console):
        with ProgressPresenter(console, enabled=False) as presenter:
            presenter(0.5, "half")

        assert presenter.progress_percentage == 50.0
        assert console.file.getvalue() == ""

    def test_as_monitor_callback(self, console):
        with ProgressPresenter(console, enabled=False) as presenter:
            monitor = ExecutionMonitor(progress_callback=presenter)
            monitor.set_progress(0.1, "first")
            monitor.set_progress(0.05, "second")

        # The monitor keeps progress monotonic.
        assert presenter.progress_percentage == pytest.approx(10.0)
        assert presenter.last_message == "second"
