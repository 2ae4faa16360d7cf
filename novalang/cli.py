"""Command-line driver: compiles a Nova file to an executable."""

from __future__ import annotations

import subprocess
import sys
from collections.abc import Sequence

from .codegen import generate_assembly, write_assembly
from .ir import IRGenerator
from .lexer import tokenize
from .parser import ParseError, parse
from .semantic import SemanticAnalyzer, SemanticError

ASSEMBLY_FILE = "out.s"
RUNTIME_SOURCE = "runtime/print.c"
EXECUTABLE = "out"


def _lower(source: str):
    ast = parse(tokenize(source))
    SemanticAnalyzer().analyze(ast)
    return IRGenerator().generate(ast)


def compile_source(source: str) -> str:
    """Compile Nova source text to assembly text."""
    return generate_assembly(_lower(source))


def main(argv: Sequence[str] | None = None) -> int:
    """Compile the file named in ``argv`` and link it with the runtime."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print("Usage: nova <source.nova>", file=sys.stderr)
        return 1

    try:
        with open(args[0], encoding="utf-8") as f:
            source = f.read()
    except OSError as exc:
        print(f"nova: cannot read {args[0]}: {exc.strerror}", file=sys.stderr)
        return 1

    try:
        ir = _lower(source)
    except (ParseError, SemanticError) as exc:
        print(f"nova: {exc}", file=sys.stderr)
        return 1

    write_assembly(ir, ASSEMBLY_FILE)
    try:
        subprocess.run(["gcc", ASSEMBLY_FILE, RUNTIME_SOURCE, "-o", EXECUTABLE], check=False)
    except OSError as exc:
        print(f"nova: cannot run gcc: {exc.strerror}", file=sys.stderr)
    print(f"Compiled to `{EXECUTABLE}`")
    return 0


if __name__ == "__main__":
    sys.exit(main())