"""Filtering and formatting of graphics driver debug messages."""

import enum


class DebugSource(enum.IntEnum):
    API = 0x8246
    WINDOW_SYSTEM = 0x8247
    SHADER_COMPILER = 0x8248
    THIRD_PARTY = 0x8249
    APPLICATION = 0x824A
    OTHER = 0x824B


class DebugType(enum.IntEnum):
    ERROR = 0x824C
    DEPRECATED_BEHAVIOR = 0x824D
    UNDEFINED_BEHAVIOR = 0x824E
    PORTABILITY = 0x824F
    PERFORMANCE = 0x8250
    OTHER = 0x8251
    MARKER = 0x8268
    PUSH_GROUP = 0x8269
    POP_GROUP = 0x826A


class DebugSeverity(enum.IntEnum):
    HIGH = 0x9146
    MEDIUM = 0x9147
    LOW = 0x9148
    NOTIFICATION = 0x826B


IGNORED_IDS = frozenset({131169, 131185, 131218, 131204, 131222})

_SOURCE_LABELS = {
    DebugSource.API: "Source: API",
    DebugSource.WINDOW_SYSTEM: "Source: Window System",
    DebugSource.SHADER_COMPILER: "Source: Shader Compiler",
    DebugSource.THIRD_PARTY: "Source: Third Party",
    DebugSource.APPLICATION: "Source: Application",
    DebugSource.OTHER: "Source: Other",
}

_TYPE_LABELS = {
    DebugType.ERROR: "Type: Error",
    DebugType.DEPRECATED_BEHAVIOR: "Type: Deprecated Behaviour",
    DebugType.UNDEFINED_BEHAVIOR: "Type: Undefined Behaviour",
    DebugType.PORTABILITY: "Type: Portability",
    DebugType.PERFORMANCE: "Type: Performance",
    DebugType.MARKER: "Type: Marker",
    DebugType.PUSH_GROUP: "Type: Push Group",
    DebugType.POP_GROUP: "Type: Pop Group",
    DebugType.OTHER: "Type: Other",
}

_SEVERITY_LABELS = {
    DebugSeverity.HIGH: "Severity: high",
    DebugSeverity.MEDIUM: "Severity: medium",
    DebugSeverity.LOW: "Severity: low",
    DebugSeverity.NOTIFICATION: "Severity: notification",
}


def is_ignored(message_id: int, message_type: int) -> bool:
    """Tell whether a message is noise that should not be reported."""
    return message_id in IGNORED_IDS or message_type == DebugType.PERFORMANCE


def _label(table: dict, value: int) -> str:
    return next((text for key, text in table.items() if key == value), "")


def format_debug_message(source: int, message_type: int, message_id: int,
                         severity: int, message: str) -> str:
    """Build the multi-line report for one debug message; unknown codes give blank lines."""
    return (
        "---------------\n"
        f"Debug message ({message_id}): {message}\n"
        f"{_label(_SOURCE_LABELS, source)}\n"
        f"{_label(_TYPE_LABELS, message_type)}\n"
        f"{_label(_SEVERITY_LABELS, severity)}\n"
        "\n"
    )