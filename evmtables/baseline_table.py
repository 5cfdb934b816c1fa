"""Per-revision instruction tables used by the baseline interpreter."""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache

from evmtables.traits import Revision, gas_cost_table, traits_of


@dataclass(frozen=True)
class InstructionTableEntry:
    """Gas cost and stack requirements of one opcode in one revision."""

    gas_cost: int
    stack_height_required: int
    can_overflow_stack: bool


@lru_cache(maxsize=None)
def _table(revision: Revision) -> tuple[InstructionTableEntry, ...]:
    entries = []
    for opcode, cost in enumerate(gas_cost_table(revision)):
        traits = traits_of(opcode)
        # An instruction grows the stack by at most one item, so it can overflow
        # only when the stack is already at its limit.
        assert traits.stack_height_change <= 1
        entries.append(
            InstructionTableEntry(
                gas_cost=cost,
                stack_height_required=traits.stack_height_required,
                can_overflow_stack=traits.stack_height_change > 0,
            )
        )
    return tuple(entries)


def get_baseline_instruction_table(revision: int) -> tuple[InstructionTableEntry, ...]:
    """Return the 256-entry baseline instruction table of a revision."""
    return _table(Revision(revision))