"""Static package metadata surfaced by the CLI ``info`` command."""

from __future__ import annotations

from collections.abc import Callable

name = "lib_log_decor"
title = "Line-oriented console log decorator"
version = "0.1.0"
shell_command = "lib_log_decor"


def print_info(writer: Callable[[str], object] | None = None) -> None:
    """Write the metadata banner through ``writer`` (``print`` by default)."""

    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    text = "\n".join(lines) + "\n"
    if writer is None:
        print(text, end="")
    else:
        writer(text)
