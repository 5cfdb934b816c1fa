"""EVM instruction traits and per-revision gas cost tables."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from functools import lru_cache

UNDEFINED = -1
"""The gas cost that marks an instruction as undefined in a revision."""

# EIP-2929 access costs.
COLD_SLOAD_COST = 2100
COLD_ACCOUNT_ACCESS_COST = 2600
WARM_STORAGE_READ_COST = 100
ADDITIONAL_COLD_ACCOUNT_ACCESS_COST = COLD_ACCOUNT_ACCESS_COST - WARM_STORAGE_READ_COST


class Revision(IntEnum):
    """EVM revisions, in activation order."""

    FRONTIER = 0
    HOMESTEAD = 1
    TANGERINE_WHISTLE = 2
    SPURIOUS_DRAGON = 3
    BYZANTIUM = 4
    CONSTANTINOPLE = 5
    PETERSBURG = 6
    ISTANBUL = 7
    BERLIN = 8
    LONDON = 9
    SHANGHAI = 10


MAX_REVISION = max(Revision)

_NAMED_OPCODES = [
    ("STOP", 0x00), ("ADD", 0x01), ("MUL", 0x02), ("SUB", 0x03), ("DIV", 0x04),
    ("SDIV", 0x05), ("MOD", 0x06), ("SMOD", 0x07), ("ADDMOD", 0x08), ("MULMOD", 0x09),
    ("EXP", 0x0A), ("SIGNEXTEND", 0x0B),
    ("LT", 0x10), ("GT", 0x11), ("SLT", 0x12), ("SGT", 0x13), ("EQ", 0x14),
    ("ISZERO", 0x15), ("AND", 0x16), ("OR", 0x17), ("XOR", 0x18), ("NOT", 0x19),
    ("BYTE", 0x1A), ("SHL", 0x1B), ("SHR", 0x1C), ("SAR", 0x1D),
    ("KECCAK256", 0x20),
    ("ADDRESS", 0x30), ("BALANCE", 0x31), ("ORIGIN", 0x32), ("CALLER", 0x33),
    ("CALLVALUE", 0x34), ("CALLDATALOAD", 0x35), ("CALLDATASIZE", 0x36),
    ("CALLDATACOPY", 0x37), ("CODESIZE", 0x38), ("CODECOPY", 0x39), ("GASPRICE", 0x3A),
    ("EXTCODESIZE", 0x3B), ("EXTCODECOPY", 0x3C), ("RETURNDATASIZE", 0x3D),
    ("RETURNDATACOPY", 0x3E), ("EXTCODEHASH", 0x3F),
    ("BLOCKHASH", 0x40), ("COINBASE", 0x41), ("TIMESTAMP", 0x42), ("NUMBER", 0x43),
    ("DIFFICULTY", 0x44), ("GASLIMIT", 0x45), ("CHAINID", 0x46), ("SELFBALANCE", 0x47),
    ("BASEFEE", 0x48),
    ("POP", 0x50), ("MLOAD", 0x51), ("MSTORE", 0x52), ("MSTORE8", 0x53), ("SLOAD", 0x54),
    ("SSTORE", 0x55), ("JUMP", 0x56), ("JUMPI", 0x57), ("PC", 0x58), ("MSIZE", 0x59),
    ("GAS", 0x5A), ("JUMPDEST", 0x5B),
]
_NAMED_OPCODES += [(f"PUSH{n}", 0x5F + n) for n in range(1, 33)]
_NAMED_OPCODES += [(f"DUP{n}", 0x7F + n) for n in range(1, 17)]
_NAMED_OPCODES += [(f"SWAP{n}", 0x8F + n) for n in range(1, 17)]
_NAMED_OPCODES += [(f"LOG{n}", 0xA0 + n) for n in range(5)]
_NAMED_OPCODES += [
    ("CREATE", 0xF0), ("CALL", 0xF1), ("CALLCODE", 0xF2), ("RETURN", 0xF3),
    ("DELEGATECALL", 0xF4), ("CREATE2", 0xF5), ("STATICCALL", 0xFA), ("REVERT", 0xFD),
    ("INVALID", 0xFE), ("SELFDESTRUCT", 0xFF),
]

Opcode = IntEnum("Opcode", _NAMED_OPCODES, module=__name__)
Opcode.__doc__ = "Known EVM opcodes."


def _family(prefix: str, count: int, start: int = 1) -> list:
    return [Opcode[f"{prefix}{n}"] for n in range(start, start + count)]


@dataclass(frozen=True)
class Traits:
    """Revision independent properties of an EVM instruction."""

    name: str | None = None
    stack_height_required: int = 0
    stack_height_change: int = 0


def _check_opcode(opcode: int) -> int:
    value = int(opcode)
    if not 0 <= value <= 0xFF:
        raise ValueError(f"opcode out of range: {opcode!r}")
    return value


def _check_revision(revision: int) -> Revision:
    return Revision(revision)


_STACK_EFFECTS = {
    "STOP": (0, 0), "ADD": (2, -1), "MUL": (2, -1), "SUB": (2, -1), "DIV": (2, -1),
    "SDIV": (2, -1), "MOD": (2, -1), "SMOD": (2, -1), "ADDMOD": (3, -2),
    "MULMOD": (3, -2), "EXP": (2, -1), "SIGNEXTEND": (2, -1),
    "LT": (2, -1), "GT": (2, -1), "SLT": (2, -1), "SGT": (2, -1), "EQ": (2, -1),
    "ISZERO": (1, 0), "AND": (2, -1), "OR": (2, -1), "XOR": (2, -1), "NOT": (1, 0),
    "BYTE": (2, -1), "SHL": (2, -1), "SHR": (2, -1), "SAR": (2, -1),
    "KECCAK256": (2, -1),
    "ADDRESS": (0, 1), "BALANCE": (1, 0), "ORIGIN": (0, 1), "CALLER": (0, 1),
    "CALLVALUE": (0, 1), "CALLDATALOAD": (1, 0), "CALLDATASIZE": (0, 1),
    "CALLDATACOPY": (3, -3), "CODESIZE": (0, 1), "CODECOPY": (3, -3),
    "GASPRICE": (0, 1), "EXTCODESIZE": (1, 0), "EXTCODECOPY": (4, -4),
    "RETURNDATASIZE": (0, 1), "RETURNDATACOPY": (3, -3), "EXTCODEHASH": (1, 0),
    "BLOCKHASH": (1, 0), "COINBASE": (0, 1), "TIMESTAMP": (0, 1), "NUMBER": (0, 1),
    "DIFFICULTY": (0, 1), "GASLIMIT": (0, 1), "CHAINID": (0, 1),
    "SELFBALANCE": (0, 1), "BASEFEE": (0, 1),
    "POP": (1, -1), "MLOAD": (1, 0), "MSTORE": (2, -2), "MSTORE8": (2, -2),
    "SLOAD": (1, 0), "SSTORE": (2, -2), "JUMP": (1, -1), "JUMPI": (2, -2),
    "PC": (0, 1), "MSIZE": (0, 1), "GAS": (0, 1), "JUMPDEST": (0, 0),
    "CREATE": (3, -2), "CALL": (7, -6), "CALLCODE": (7, -6), "RETURN": (2, -2),
    "DELEGATECALL": (6, -5), "CREATE2": (4, -3), "STATICCALL": (6, -5),
    "REVERT": (2, -2), "INVALID": (0, 0), "SELFDESTRUCT": (1, -1),
}
_STACK_EFFECTS.update({f"PUSH{n}": (0, 1) for n in range(1, 33)})
_STACK_EFFECTS.update({f"DUP{n}": (n, 1) for n in range(1, 17)})
_STACK_EFFECTS.update({f"SWAP{n}": (n + 1, 0) for n in range(1, 17)})
_STACK_EFFECTS.update({f"LOG{n}": (n + 2, -(n + 2)) for n in range(5)})


def _build_traits() -> tuple[Traits, ...]:
    table = [Traits()] * 256
    for name, (required, change) in _STACK_EFFECTS.items():
        table[Opcode[name]] = Traits(name, required, change)
    return tuple(table)


_TRAITS = _build_traits()


def _build_gas_costs() -> tuple[tuple[int, ...], ...]:
    O = Opcode
    frontier = [UNDEFINED] * 256
    base = {
        O.STOP: 0, O.ADD: 3, O.MUL: 5, O.SUB: 3, O.DIV: 5, O.SDIV: 5, O.MOD: 5,
        O.SMOD: 5, O.ADDMOD: 8, O.MULMOD: 8, O.EXP: 10, O.SIGNEXTEND: 5,
        O.LT: 3, O.GT: 3, O.SLT: 3, O.SGT: 3, O.EQ: 3, O.ISZERO: 3, O.AND: 3,
        O.OR: 3, O.XOR: 3, O.NOT: 3, O.BYTE: 3, O.KECCAK256: 30,
        O.ADDRESS: 2, O.BALANCE: 20, O.ORIGIN: 2, O.CALLER: 2, O.CALLVALUE: 2,
        O.CALLDATALOAD: 3, O.CALLDATASIZE: 2, O.CALLDATACOPY: 3, O.CODESIZE: 2,
        O.CODECOPY: 3, O.GASPRICE: 2, O.EXTCODESIZE: 20, O.EXTCODECOPY: 20,
        O.BLOCKHASH: 20, O.COINBASE: 2, O.TIMESTAMP: 2, O.NUMBER: 2,
        O.DIFFICULTY: 2, O.GASLIMIT: 2, O.POP: 2, O.MLOAD: 3, O.MSTORE: 3,
        O.MSTORE8: 3, O.SLOAD: 50, O.SSTORE: 0, O.JUMP: 8, O.JUMPI: 10, O.PC: 2,
        O.MSIZE: 2, O.GAS: 2, O.JUMPDEST: 1,
        O.CREATE: 32000, O.CALL: 40, O.CALLCODE: 40, O.RETURN: 0, O.INVALID: 0,
        O.SELFDESTRUCT: 0,
    }
    for op in _family("PUSH", 32) + _family("DUP", 16) + _family("SWAP", 16):
        base[op] = 3
    for n, op in enumerate(_family("LOG", 5, start=0)):
        base[op] = (n + 1) * 375
    for op, cost in base.items():
        frontier[op] = cost

    changes = {
        Revision.HOMESTEAD: {O.DELEGATECALL: 40},
        Revision.TANGERINE_WHISTLE: {
            O.BALANCE: 400, O.EXTCODESIZE: 700, O.EXTCODECOPY: 700, O.SLOAD: 200,
            O.CALL: 700, O.CALLCODE: 700, O.DELEGATECALL: 700, O.SELFDESTRUCT: 5000,
        },
        Revision.SPURIOUS_DRAGON: {},
        Revision.BYZANTIUM: {
            O.RETURNDATASIZE: 2, O.RETURNDATACOPY: 3, O.STATICCALL: 700, O.REVERT: 0,
        },
        Revision.CONSTANTINOPLE: {
            O.SHL: 3, O.SHR: 3, O.SAR: 3, O.EXTCODEHASH: 400, O.CREATE2: 32000,
        },
        Revision.PETERSBURG: {},
        Revision.ISTANBUL: {
            O.BALANCE: 700, O.CHAINID: 2, O.EXTCODEHASH: 700, O.SELFBALANCE: 5,
            O.SLOAD: 800,
        },
        Revision.BERLIN: {
            op: WARM_STORAGE_READ_COST
            for op in (
                O.EXTCODESIZE, O.EXTCODECOPY, O.EXTCODEHASH, O.BALANCE, O.CALL,
                O.CALLCODE, O.DELEGATECALL, O.STATICCALL, O.SLOAD,
            )
        },
        Revision.LONDON: {O.BASEFEE: 2},
        Revision.SHANGHAI: {},
    }

    tables = [tuple(frontier)]
    current = frontier
    for revision in list(Revision)[1:]:
        current = list(current)
        for op, cost in changes[revision].items():
            current[op] = cost
        tables.append(tuple(current))
    return tuple(tables)


_GAS_COSTS = _build_gas_costs()

assert _GAS_COSTS[MAX_REVISION][Opcode.ADD] > 0, "gas costs missing for a revision"


def gas_cost_table(revision: int) -> tuple[int, ...]:
    """Return the 256 gas costs of a revision; undefined instructions cost UNDEFINED."""
    return _GAS_COSTS[_check_revision(revision)]


def gas_cost(revision: int, opcode: int) -> int:
    """Return the base gas cost of an opcode in a revision, or UNDEFINED."""
    return gas_cost_table(revision)[_check_opcode(opcode)]


def is_defined(revision: int, opcode: int) -> bool:
    """Tell whether an opcode is a defined instruction in a revision."""
    return gas_cost(revision, opcode) != UNDEFINED


@lru_cache(maxsize=None)
def traits_of(opcode: int) -> Traits:
    """Return the traits of an opcode; unknown opcodes get empty traits."""
    return _TRAITS[_check_opcode(opcode)]