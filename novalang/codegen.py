"""Emits x86-64 assembly text from IR."""

from __future__ import annotations

import os
from collections.abc import Callable, Iterable

from .ir import IRInstruction

_PROLOGUE = ".global main\n.text\nmain:\n"
_EPILOGUE = "    mov $0, %rax\n    ret\n"


def _load_const(i: IRInstruction) -> list[str]:
    return [f"    mov ${i.arg1}, %{i.result}\n"]


def _arith(mnemonic: str) -> Callable[[IRInstruction], list[str]]:
    def emit(i: IRInstruction) -> list[str]:
        return [
            f"    mov %{i.arg1}, %rax\n",
            f"    {mnemonic} %{i.arg2}, %rax\n",
            f"    mov %rax, %{i.result}\n",
        ]

    return emit


def _store(i: IRInstruction) -> list[str]:
    return [f"    mov %{i.arg1}, %{i.result}\n"]


def _print(i: IRInstruction) -> list[str]:
    return [f"    mov %{i.arg1}, %rdi\n", "    call print_int\n"]


_EMITTERS: dict[str, Callable[[IRInstruction], list[str]]] = {
    "load_const": _load_const,
    "add": _arith("add"),
    "mul": _arith("imul"),
    "store": _store,
    "print": _print,
}


def generate_assembly(ir: Iterable[IRInstruction]) -> str:
    """Return the assembly for ``ir``; unknown operations are skipped."""
    lines = [_PROLOGUE]
    for instruction in ir:
        emitter = _EMITTERS.get(instruction.op)
        if emitter is not None:
            lines.extend(emitter(instruction))
    lines.append(_EPILOGUE)
    return "".join(lines)


def write_assembly(ir: Iterable[IRInstruction], out_file: str | os.PathLike[str]) -> None:
    """Write the assembly for ``ir`` to ``out_file``."""
    with open(out_file, "w", encoding="utf-8") as out:
        out.write(generate_assembly(ir))