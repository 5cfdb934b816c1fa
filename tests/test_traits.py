import pytest

from evmtables.traits import (
    ADDITIONAL_COLD_ACCOUNT_ACCESS_COST,
    UNDEFINED,
    WARM_STORAGE_READ_COST,
    Opcode,
    Revision,
    Traits,
    gas_cost,
    gas_cost_table,
    is_defined,
    traits_of,
)


def test_opcode_values():
    assert traits_of(0x60).name == "PUSH1"
    assert traits_of(0x7F).name == "PUSH32"
    assert traits_of(0xFF).name == "SELFDESTRUCT"
    assert traits_of(Opcode.PUSH1) == traits_of(0x60)


def test_frontier_basic_costs():
    assert gas_cost(Revision.FRONTIER, Opcode.ADD) == 3
    assert gas_cost(Revision.FRONTIER, Opcode.CREATE) == 32000
    assert gas_cost(Revision.FRONTIER, Opcode.KECCAK256) == 30


def test_log_costs_grow_by_375():
    costs = [gas_cost(Revision.FRONTIER, Opcode[f"LOG{n}"]) for n in range(5)]
    assert [b - a for a, b in zip(costs, costs[1:])] == [375] * 4
    assert costs[0] == 375


def test_balance_cost_over_revisions():
    assert gas_cost(Revision.FRONTIER, Opcode.BALANCE) == 20
    assert gas_cost(Revision.TANGERINE_WHISTLE, Opcode.BALANCE) == 400
    assert gas_cost(Revision.ISTANBUL, Opcode.BALANCE) == 700
    assert gas_cost(Revision.BERLIN, Opcode.BALANCE) == WARM_STORAGE_READ_COST


def test_eip2929_constant():
    warm_cost = gas_cost(Revision.BERLIN, Opcode.BALANCE)
    assert warm_cost == 100
    assert warm_cost + ADDITIONAL_COLD_ACCOUNT_ACCESS_COST == 2600


def test_delegatecall_from_homestead():
    assert not is_defined(Revision.FRONTIER, Opcode.DELEGATECALL)
    assert gas_cost(Revision.HOMESTEAD, Opcode.DELEGATECALL) == 40


def test_basefee_only_from_london():
    assert gas_cost(Revision.BERLIN, Opcode.BASEFEE) == UNDEFINED
    assert gas_cost(Revision.LONDON, Opcode.BASEFEE) == 2


def test_selfbalance_and_extcodehash_definedness():
    assert not is_defined(Revision.CONSTANTINOPLE, Opcode.SELFBALANCE)
    assert is_defined(Revision.ISTANBUL, Opcode.SELFBALANCE)
    assert not is_defined(Revision.BYZANTIUM, Opcode.EXTCODEHASH)
    assert gas_cost(Revision.CONSTANTINOPLE, Opcode.EXTCODEHASH) == 400


def test_unassigned_opcode_undefined_everywhere():
    for revision in Revision:
        assert gas_cost(revision, 0x0C) == UNDEFINED
        assert not is_defined(revision, 0xEF)


def test_defined_set_only_grows():
    for older, newer in zip(list(Revision), list(Revision)[1:]):
        old = {op for op in range(256) if is_defined(older, op)}
        new = {op for op in range(256) if is_defined(newer, op)}
        assert old <= new


def test_identical_revisions():
    assert gas_cost_table(Revision.PETERSBURG) == gas_cost_table(Revision.CONSTANTINOPLE)
    assert gas_cost_table(Revision.SHANGHAI) == gas_cost_table(Revision.LONDON)
    assert gas_cost_table(Revision.SPURIOUS_DRAGON) == gas_cost_table(
        Revision.TANGERINE_WHISTLE
    )


def test_table_length():
    assert len(gas_cost_table(Revision.SHANGHAI)) == 256


def test_traits_values():
    assert traits_of(Opcode.ADD) == Traits("ADD", 2, -1)
    assert traits_of(Opcode.CALL) == Traits("CALL", 7, -6)
    assert traits_of(Opcode.CREATE2) == Traits("CREATE2", 4, -3)


def test_dup_and_swap_traits():
    for n in range(1, 17):
        assert traits_of(Opcode[f"DUP{n}"]).stack_height_required == n
        assert traits_of(Opcode[f"SWAP{n}"]).stack_height_required == n + 1
        assert traits_of(Opcode[f"SWAP{n}"]).stack_height_change == 0


def test_trait_names_match_opcode_names():
    for op in Opcode:
        assert traits_of(op).name == op.name


def test_stack_change_at_most_one():
    assert max(traits_of(op).stack_height_change for op in range(256)) == 1


def test_unknown_opcode_has_empty_traits():
    assert traits_of(0x0C) == Traits()


def test_defined_in_latest_iff_named():
    named = {int(op) for op in Opcode}
    defined = {op for op in range(256) if is_defined(Revision.SHANGHAI, op)}
    assert defined == named


@pytest.mark.parametrize("opcode", [-1, 256])
def test_opcode_out_of_range(opcode):
    with pytest.raises(ValueError):
        gas_cost(Revision.FRONTIER, opcode)
    with pytest.raises(ValueError):
        traits_of(opcode)


def test_bad_revision():
    with pytest.raises(ValueError):
        gas_cost_table(len(Revision))