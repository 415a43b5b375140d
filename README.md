# compilerlab

A set of small tools from a compiler course. They cover string handling,
printing three-address code (TAC) for a few fixed constructs, two TAC
optimisation passes, and turning simple TAC instructions into 8086 assembly.

## Installation

```
pip install .
```

To install the test dependencies and run the tests:

```
pip install .[test]
pytest
```

## Commands

### `compilerlab-text COMMAND`

This command runs one interactive string exercise. It reads its input from
standard input. `COMMAND` is one of:

| Command        | Prompts for                        | Prints                                                         |
|----------------|------------------------------------|----------------------------------------------------------------|
| `upper`        | a string                           | the string with ASCII letters in upper case                    |
| `find`         | a string and a substring           | `Substring found at index N`, or `Substring not found.`        |
| `compare`      | two strings                        | whether the two strings are the same                           |
| `strip-spaces` | a string                           | the string with every space removed                            |
| `freq`         | a string                           | a count for each character in code-point order, leaving out newlines |
| `concat`       | two strings                        | the second string appended to the first                        |
| `replace`      | a string, an old and a new character | the string with every old character replaced by the new one  |

Input lines are read up to a fixed length: 999 characters for `freq`, 199 for
the first string of `concat`, and 99 everywhere else. If input ends while
`replace` is waiting for a character, the command prints an error and exits
with status 1.

### `compilerlab-gentac`

This command prints the TAC for three built-in examples:

- the arithmetic expression `(a + b) * (c - d)`
- an if-else on `x > y`
- a while loop on `x < y`

### `compilerlab-asm8086 [INSTRUCTION ...]`

This command turns instructions of the form `result = a op b` into 8086
assembly. The operator `op` is one of `+`, `-`, `*` or `/`. With no arguments
it uses a built-in sample of four instructions.

The registers AX, BX, CX and DX are shared across the whole run, and each
instruction takes three of them. So only the first instruction of a run gets
its registers. At the second instruction the command prints
`Error: Not enough registers!` and exits with status 1. An unknown operator
prints `Unsupported operation: OP` and the command exits with status 1. So
does a malformed instruction, which prints an error.

### `compilerlab-optimise`

This command runs two passes over a built-in five-instruction program:

- A dead-code report. The command calls it with an empty set of used
  variables, so it flags every instruction as dead code.
- Common-subexpression elimination.

### `compilerlab-copyprop`

This command prints a built-in program that holds a chain of copies. It then
prints the program again after copy propagation, with the copies whose result
is no longer used removed.

## Library use

```python
from compilerlab.tac import Instruction
from compilerlab.copyprop import propagate_copies, remove_dead_copies
from compilerlab.asm8086 import RegisterAllocator, generate_assembly

program = [
    Instruction("t1", "=", "a", ""),
    Instruction("t2", "=", "t1", ""),
    Instruction("t3", "+", "t2", "b"),
]
for instr in remove_dead_copies(propagate_copies(program)):
    print(instr.format())          # t3 = a + b

print("\n".join(generate_assembly("t0 = t1 + t2", RegisterAllocator())))
```

### Modules

- `compilerlab.tac`: `Instruction(result, op, arg1, arg2="")` is a frozen
  dataclass with two methods.
  - `format()` renders the instruction as `result = arg1 op arg2`. When `arg2`
    is empty it renders `result = arg1`.
  - `is_copy()` is true when `op` is `"="` and `arg2` is empty.
- `compilerlab.copyprop`: this module has three functions.
  - `propagate_copies(instructions)` replaces later uses of each copied
    variable with its source.
  - `remove_dead_copies(instructions)` drops copies whose result is not used
    by any later instruction.
  - `sample_program()` returns the built-in program.
- `compilerlab.optimise`: this module has three functions.
  - `dead_code_report(instructions, used)` returns one line per instruction.
    The line is prefixed with `Dead code found: ` when the result is not in
    `used`.
  - `eliminate_common_subexpressions(instructions)` keeps a list of recorded
    first operands. It rewrites an instruction only when both of its operands
    equal a recorded operand. Otherwise it records the instruction's first
    operand.
  - `sample_program()` returns the built-in program.
- `compilerlab.asm8086`: this module has a class and a function.
  - `RegisterAllocator(registers=("AX", "BX", "CX", "DX"))`. Its `allocate()`
    hands out the registers in order and then raises `OutOfRegistersError`.
  - `generate_assembly(instruction, allocator)` returns a list of assembly
    lines. It raises `UnsupportedOperationError` (a `ValueError`) for an
    unknown operator. It raises `ValueError` for a malformed instruction.
- `compilerlab.gentac`: `arithmetic_tac(expr)`, `if_else_tac(condition)` and
  `while_tac(condition)` each return the TAC lines for their known input. For
  any other input they return an empty list.
- `compilerlab.textops`: this module has `to_upper`, `find_substring` (returns
  an index or `None`), `strings_equal`, `remove_spaces`, `char_frequencies`,
  `concatenate` and `replace_char`. `replace_char` raises `ValueError` unless
  the old and new values are single characters.

## What it does not do

There is no lexer or parser for C source, and no general expression parser.
The TAC generator only knows the three fixed inputs listed above. The assembly
generator does no real register allocation or reuse. The optimisation passes
work on instruction lists that you build in Python. They do not read programs
from files.