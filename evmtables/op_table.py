"""Per-revision operation tables used by the advanced interpreter."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from functools import lru_cache

from evmtables.traits import UNDEFINED, Opcode, Revision, gas_cost_table, traits_of

OPX_BEGINBLOCK = Opcode.JUMPDEST
"""The slot of the table that holds the basic block entry handler.

The advanced interpreter replaces every JUMPDEST with the start of a basic
block, so the JUMPDEST slot carries the block entry handler.
"""

_PUSH_SMALL_LAST = Opcode.PUSH8


def _handler_members() -> list[tuple[str, str]]:
    members = [
        (op.name, op.name.lower())
        for op in Opcode
        if not op.name.startswith("PUSH") and op is not Opcode.JUMPDEST
    ]
    members += [
        ("PUSH_SMALL", "push_small"),
        ("PUSH_FULL", "push_full"),
        ("BEGINBLOCK", "beginblock"),
        ("UNDEFINED", "undefined"),
    ]
    return members


Handler = Enum("Handler", _handler_members(), module=__name__)
Handler.__doc__ = "The implementation that executes an instruction."


@dataclass(frozen=True)
class OpTableEntry:
    """Handler, base gas cost and stack effects of one opcode in one revision."""

    fn: Handler
    gas_cost: int
    stack_req: int = 0
    stack_change: int = 0


def _implementation(opcode: int) -> Handler | None:
    try:
        op = Opcode(opcode)
    except ValueError:
        return None
    if op is OPX_BEGINBLOCK:
        return Handler.BEGINBLOCK
    if Opcode.PUSH1 <= op <= Opcode.PUSH32:
        return Handler.PUSH_SMALL if op <= _PUSH_SMALL_LAST else Handler.PUSH_FULL
    return Handler[op.name]


@lru_cache(maxsize=None)
def _table(revision: Revision) -> tuple[OpTableEntry, ...]:
    entries = []
    for opcode, cost in enumerate(gas_cost_table(revision)):
        if cost == UNDEFINED:
            entries.append(OpTableEntry(fn=Handler.UNDEFINED, gas_cost=0))
            continue
        traits = traits_of(opcode)
        entries.append(
            OpTableEntry(
                fn=_implementation(opcode),
                gas_cost=cost,
                stack_req=traits.stack_height_required,
                stack_change=traits.stack_height_change,
            )
        )
    return tuple(entries)


def get_op_table(revision: int) -> tuple[OpTableEntry, ...]:
    """Return the 256-entry operation table of a revision."""
    return _table(Revision(revision))