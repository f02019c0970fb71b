"""Pytest configuration and fixtures for ideactl tests."""

from __future__ import annotations

from pathlib import Path

import pytest

import ideactl.core
from ideactl.core import acpi

# Operand written -> (query method, value reported back)
FIRMWARE_WRITES = {
    r"\_SB.PCI0.LPC0.EC0.VPC0.SBMC 0x03": (r"\_SB.PCI0.LPC0.EC0.BTSM", 1),
    r"\_SB.PCI0.LPC0.EC0.VPC0.SBMC 0x05": (r"\_SB.PCI0.LPC0.EC0.BTSM", 0),
    r"\_SB.PCI0.LPC0.EC0.VPC0.SBMC 0x07": (r"\_SB.PCI0.LPC0.EC0.QCHO", 1),
    r"\_SB.PCI0.LPC0.EC0.VPC0.SBMC 0x08": (r"\_SB.PCI0.LPC0.EC0.QCHO", 0),
    r"\_SB.PCI0.LPC0.EC0.VPC0.DYTC 0x000FB001": (r"\_SB.PCI0.LPC0.EC0.SPMO", 0),
    r"\_SB.PCI0.LPC0.EC0.VPC0.DYTC 0x0012B001": (r"\_SB.PCI0.LPC0.EC0.SPMO", 1),
    r"\_SB.PCI0.LPC0.EC0.VPC0.DYTC 0x0013B001": (r"\_SB.PCI0.LPC0.EC0.SPMO", 2),
}


class FakeFirmware:
    """Emulates acpi_call on top of a regular file.

    Commands are written to the file by the real channel code, reads are
    answered from an in-memory copy of the firmware registers.
    """

    def __init__(self) -> None:
        self.registers = {
            r"\_SB.PCI0.LPC0.EC0.BTSM": 0,
            r"\_SB.PCI0.LPC0.EC0.QCHO": 1,
            r"\_SB.PCI0.LPC0.EC0.SPMO": 0,
        }
        self.commands: list[str] = []
        self.override: str | None = None

    def call(self, cmd: str, fn: str, risky: bool = True) -> None:
        acpi.call(cmd, fn, risky)
        self.commands.append(cmd)
        if cmd in FIRMWARE_WRITES:
            method, value = FIRMWARE_WRITES[cmd]
            self.registers[method] = value

    def read(self, fn: str) -> str:
        if self.override is not None:
            return self.override
        return f"0x{self.registers[self.commands[-1]]:x}\0"


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """Keep the user's config and environment out of the tests."""
    for name in (
        "IDEACTL_CHANNEL",
        "IDEACTL_LOG_DIR",
        "IDEACTL_NO_ELEVATE",
        "SUDO_UID",
        "PKEXEC_UID",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr("ideactl.config.CONFIG_DIR", str(tmp_path / "config"))


@pytest.fixture
def channel(tmp_path) -> Path:
    """A regular file standing in for /proc/acpi/call."""
    fn = tmp_path / "call"
    fn.write_bytes(b"")
    return fn


@pytest.fixture
def firmware(monkeypatch) -> FakeFirmware:
    fw = FakeFirmware()
    monkeypatch.setattr(ideactl.core, "call", fw.call)
    monkeypatch.setattr(ideactl.core, "read", fw.read)
    return fw
