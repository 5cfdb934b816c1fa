# evmtables

Static tables describing EVM instructions: names, stack requirements,
per-revision gas costs, and the lookup tables an interpreter uses to
dispatch and validate each opcode.

## Installation

```
pip install evmtables
```

For running the test suite:

```
pip install "evmtables[test]"
pytest
```

## Instruction traits and gas costs

`evmtables.traits` provides the `Revision` enumeration (`FRONTIER` through
`SHANGHAI`), the `Opcode` enumeration of known opcodes, the
revision-independent `Traits` of every instruction (`name`,
`stack_height_required`, `stack_height_change`), and gas costs per revision.

```python
from evmtables.traits import Revision, Opcode, gas_cost, is_defined, traits_of

gas_cost(Revision.BERLIN, Opcode.SLOAD)            # 100
is_defined(Revision.BYZANTIUM, Opcode.SHL)         # False
traits_of(Opcode.CALL).stack_height_required       # 7
```

`gas_cost_table(revision)` returns all 256 costs for a revision; opcodes that
are undefined in that revision have the cost `UNDEFINED` (`-1`). Opcodes with
no known instruction get empty traits (`name` is `None`). Opcodes outside
0–255 raise `ValueError`, as do unknown revisions.

The module also exports the EIP-2929 access costs `COLD_SLOAD_COST`,
`COLD_ACCOUNT_ACCESS_COST`, `WARM_STORAGE_READ_COST` and
`ADDITIONAL_COLD_ACCOUNT_ACCESS_COST`.

## Baseline instruction table

`evmtables.baseline_table.get_baseline_instruction_table(revision)` returns a
tuple of 256 `InstructionTableEntry` records, each with the `gas_cost`
(`-1` for undefined instructions), the `stack_height_required`, and
`can_overflow_stack`, which is true for instructions that grow the stack.

## Dispatch table

`evmtables.op_table.get_op_table(revision)` returns a tuple of 256
`OpTableEntry` records with a `Handler` kind (`fn`), `gas_cost`, `stack_req`
and `stack_change`. Opcodes undefined in the revision map to
`Handler.UNDEFINED` with zero gas cost. `PUSH1`–`PUSH8` use
`Handler.PUSH_SMALL`, `PUSH9`–`PUSH32` use `Handler.PUSH_FULL`, and the
`JUMPDEST` slot (`OPX_BEGINBLOCK`) holds `Handler.BEGINBLOCK`.

## What this package does not do

It only describes instructions. It does not analyse or execute bytecode:
there is no interpreter, no stack or memory model, and no host or state
interface.