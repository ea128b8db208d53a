from pathlib import Path
import logging
import subprocess
import sys

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[1] / "src"))

from gnufig.config import get_settings, set_settings  # noqa: E402
from gnufig.figure import Figure  # noqa: E402


@pytest.fixture()
def fig(tmp_path):
	return Figure(workdir=tmp_path)


@pytest.fixture(autouse=True)
def restore_settings():
	saved = get_settings()
	try:
		yield
	finally:
		set_settings(saved)


class FakeGnuplot:
	"""Stands in for ``subprocess.run``; records each call and the script it was given."""

	def __init__(self, returncode=0):
		self.returncode = returncode
		self.calls = []
		self.scripts = []

	def __call__(self, cmd, check=False, **kwargs):
		self.calls.append(list(cmd))
		self.scripts.append(Path(cmd[-1]).read_text(encoding="utf-8"))
		return subprocess.CompletedProcess(cmd, self.returncode)


@pytest.fixture()
def fake_gnuplot(monkeypatch):
	fake = FakeGnuplot()
	monkeypatch.setattr("gnufig.gnuplot.commands.subprocess.run", fake)
	return fake


@pytest.fixture()
def gnufig_log(caplog):
	"""``caplog`` wired to the ``gnufig`` logger, which does not propagate to root."""
	logger = logging.getLogger("gnufig")
	logger.addHandler(caplog.handler)
	caplog.set_level(logging.DEBUG, logger="gnufig")
	try:
		yield caplog
	finally:
		logger.removeHandler(caplog.handler)
