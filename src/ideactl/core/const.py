import enum

ACPI_CALL = "/proc/acpi/call"

SBMC = r"\_SB.PCI0.LPC0.EC0.VPC0.SBMC"
DYTC = r"\_SB.PCI0.LPC0.EC0.VPC0.DYTC"

# Battery state / quick charge / smart performance mode queries
BTSM = r"\_SB.PCI0.LPC0.EC0.BTSM"
QCHO = r"\_SB.PCI0.LPC0.EC0.QCHO"
SPMO = r"\_SB.PCI0.LPC0.EC0.SPMO"


class Setting(enum.Enum):
    CONSERVATION = "conservation"
    RAPID_CHARGE = "rapid"
    PERFORMANCE = "performance"


class Toggle(enum.Enum):
    ON = "on"
    OFF = "off"


class PerformanceMode(enum.Enum):
    INTELLIGENT_COOLING = "intelligent-cooling"
    EXTREME_PERFORMANCE = "extreme-performance"
    BATTERY_SAVING = "battery-saving"


Value = Toggle | PerformanceMode

VALUE_TYPES: dict[Setting, type[Value]] = {
    Setting.CONSERVATION: Toggle,
    Setting.RAPID_CHARGE: Toggle,
    Setting.PERFORMANCE: PerformanceMode,
}

WRITE_COMMANDS: dict[tuple[Setting, Value], tuple[str, str]] = {
    (Setting.CONSERVATION, Toggle.ON): (SBMC, "0x03"),
    (Setting.CONSERVATION, Toggle.OFF): (SBMC, "0x05"),
    (Setting.RAPID_CHARGE, Toggle.ON): (SBMC, "0x07"),
    (Setting.RAPID_CHARGE, Toggle.OFF): (SBMC, "0x08"),
    (Setting.PERFORMANCE, PerformanceMode.INTELLIGENT_COOLING): (DYTC, "0x000FB001"),
    (Setting.PERFORMANCE, PerformanceMode.EXTREME_PERFORMANCE): (DYTC, "0x0012B001"),
    (Setting.PERFORMANCE, PerformanceMode.BATTERY_SAVING): (DYTC, "0x0013B001"),
}

QUERY_COMMANDS: dict[Setting, str] = {
    Setting.CONSERVATION: BTSM,
    Setting.RAPID_CHARGE: QCHO,
    Setting.PERFORMANCE: SPMO,
}

TOGGLE_STATES: dict[int, Value] = {
    0: Toggle.OFF,
    1: Toggle.ON,
}

READ_VALUES: dict[Setting, dict[int, Value]] = {
    Setting.CONSERVATION: TOGGLE_STATES,
    Setting.RAPID_CHARGE: TOGGLE_STATES,
    Setting.PERFORMANCE: {
        0: PerformanceMode.INTELLIGENT_COOLING,
        1: PerformanceMode.EXTREME_PERFORMANCE,
        2: PerformanceMode.BATTERY_SAVING,
    },
}

# Numeric shorthands accepted on the command line
PERFORMANCE_ALIASES: dict[str, PerformanceMode] = {
    "1": PerformanceMode.EXTREME_PERFORMANCE,
    "2": PerformanceMode.INTELLIGENT_COOLING,
    "3": PerformanceMode.BATTERY_SAVING,
}

LABELS: dict[Setting, str] = {
    Setting.CONSERVATION: "Conservation mode",
    Setting.RAPID_CHARGE: "Rapid charge",
    Setting.PERFORMANCE: "Performance mode",
}
