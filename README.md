# novalang

A small compiler for Nova, a tiny language with integer variables, `+`, `*`,
parentheses and `print`. Nova source goes through a lexer, a parser, a
semantic check and a three-address IR. The compiler then writes x86-64 AT&T
assembly and runs `gcc` on it to build an executable.

## The language

```
x = 2 + 3;
y = x * (4 + 1);
print y;
```

- A statement is either `name = expression;` or `print expression;`.
- An expression is built from integer literals, variable names, `+`, `*` and
  parentheses. `*` binds tighter than `+`, and both group to the left.
- Names are ASCII letters followed by letters or digits; `print` is a keyword.
- An integer literal may not be larger than 2147483647.
- A variable must be assigned before it is used. The right-hand side of an
  assignment is checked before the name becomes defined, so `x = x;` is an
  error when `x` is new.

## Installation

```
pip install .
```

You need `gcc` on your `PATH` to link the final executable.

## Command line

```
nova program.nova
```

This compiles `program.nova`, writes the assembly to `out.s` in the current
directory, runs `gcc out.s runtime/print.c -o out` and prints
``Compiled to `out` ``.

- With no source file it prints `Usage: nova <source.nova>` to standard error
  and exits with status 1.
- If the file cannot be read, or the program has a syntax error or uses an
  undefined variable, it prints `nova: <message>` to standard error and exits
  with status 1.
- If `gcc` cannot be started, it reports that on standard error; the assembly
  in `out.s` is still written.

## What the package does not provide

The generated code calls a routine named `print_int` to print each value. The
package does not ship that routine: the link step expects a C source file at
`runtime/print.c`, relative to the current directory, that defines
`print_int`. You must supply it yourself.

The assembly writer does not allocate registers or stack slots: temporaries
and variable names from the IR are written directly as register operands
(for example `%t0` or `%x`).

## Library use

Each stage can be used by itself:

```python
from novalang.lexer import tokenize
from novalang.parser import parse
from novalang.semantic import analyze
from novalang.ir import IRGenerator
from novalang.codegen import generate_assembly

source = "x = 2 + 3; print x * 4;"
tokens = tokenize(source)          # list of Token, ending with TokenType.EOF
program = parse(tokens)            # list of AssignNode / PrintNode
defined = analyze(program)         # frozenset of assigned names
ir = IRGenerator().generate(program)
print(generate_assembly(ir))
```

- `novalang.tokens` holds `TokenType` and the frozen `Token` dataclass
  (`type`, `value`, `line`, `col`, positions 1-based).
- `novalang.lexer.Lexer(source).tokenize()` or `tokenize(source)` scan the
  text. Characters that are not part of the language become
  `TokenType.INVALID` tokens rather than errors.
- `novalang.nodes` holds the syntax tree: `NumberNode`, `IdentifierNode`,
  `BinaryOpNode`, `AssignNode` and `PrintNode`.
- `novalang.parser.Parser(tokens).parse()` or `parse(tokens)` build the tree.
- `novalang.semantic.SemanticAnalyzer` keeps its set of defined names between
  calls to `analyze`, so a program can be checked in pieces.
- `novalang.ir.IRGenerator.generate(ast)` returns a list of `IRInstruction`
  (`op`, `arg1`, `arg2`, `result`) with the operations `load_const`, `add`,
  `mul`, `store` and `print`. Temporary names (`t0`, `t1`, ...) keep counting
  across calls on the same generator.
- `novalang.codegen.generate_assembly(ir)` returns the assembly text;
  `write_assembly(ir, out_file)` writes it to a file.
- `novalang.cli.compile_source(source)` runs every stage in one call and
  returns the assembly text.

Errors are raised as exceptions. `novalang.parser.ParseError` covers malformed
programs, such as a missing `;`, `=` or `)`, an unknown statement, an invalid
expression or an out-of-range number; its `token` attribute is the token where
parsing stopped. `novalang.semantic.SemanticError` covers a variable that is
used before it is assigned; its `name` attribute is the variable.

## Running the tests

```
pip install .[test]
pytest
```