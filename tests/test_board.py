"""
tests/test_board.py

Тесты для TriangleBoard и Slot.
"""

import pytest

from core.board import Slot, TriangleBoard
from core.utils import SLOT_COUNT, TRIANGLE_JUMPS, all_jump_triples, slot_to_coords, coords_to_slot
from utils.error_handling import IllegalMoveError, InvalidSlotError


def _snapshot(board: TriangleBoard):
    return board.removed_slots(), board.peg_count


def test_full_board():
    """Тест: новая доска полностью заполнена."""
    board = TriangleBoard()

    assert board.peg_count == SLOT_COUNT
    assert board.count_pegs_by_scan() == SLOT_COUNT
    assert board.removed_slots() == []
    assert len(board.slots) == SLOT_COUNT
    assert [slot.index for slot in board.slots] == list(range(SLOT_COUNT))


def test_board_from_removed_list():
    """Тест: доска из списка снятых колышков."""
    board = TriangleBoard(removed=[7, 2, 11])

    assert board.peg_count == 12
    assert board.count_pegs_by_scan() == 12
    assert board.removed_slots() == [2, 7, 11], "Снятые лунки должны идти по возрастанию"


@pytest.mark.parametrize("removed", [[15], [-1], [0, 99]])
def test_board_rejects_out_of_range_slot(removed):
    """Тест: номер лунки вне 0..14."""
    with pytest.raises(InvalidSlotError):
        TriangleBoard(removed=removed)


def test_board_rejects_duplicate_removal():
    """Тест: одна лунка в списке дважды."""
    with pytest.raises(InvalidSlotError):
        TriangleBoard(removed=[3, 3])


def test_slot_identity_is_fixed():
    """Тест: у лунки меняется только occupied."""
    slot = Slot(3, TRIANGLE_JUMPS[3])

    adjacency = slot.adjacency
    adjacency[99] = 100

    assert slot.index == 3
    assert slot.adjacency == {4: 5, 1: 0, 6: 10, 7: 12}
    with pytest.raises(AttributeError):
        slot.index = 5


def test_topology_is_symmetric():
    """Тест: для каждого прыжка A→C через B есть обратный C→A через B."""
    triples = set(all_jump_triples())

    assert len(triples) == 36
    for jump_from, jump_over, jump_to in triples:
        assert (jump_to, jump_over, jump_from) in triples


def test_coords_roundtrip():
    """Тест: номер лунки ↔ (row, col)."""
    assert slot_to_coords(0) == (0, 0)
    assert slot_to_coords(4) == (2, 1)
    assert slot_to_coords(14) == (4, 4)
    for slot in range(SLOT_COUNT):
        assert coords_to_slot(*slot_to_coords(slot)) == slot


def test_remove_first():
    """Тест: первый ход снимает один колышек."""
    board = TriangleBoard()
    board.remove_first(4)

    assert board.peg_count == 14
    assert board.count_pegs_by_scan() == 14
    assert board.removed_slots() == [4]


def test_remove_first_only_on_full_board():
    """Тест: снять первый колышек можно только с полной доски."""
    board = TriangleBoard()
    board.remove_first(4)

    with pytest.raises(IllegalMoveError):
        board.remove_first(0)
    assert _snapshot(board) == ([4], 14)


@pytest.mark.parametrize("slot", [15, -1])
def test_remove_first_invalid_slot(slot):
    with pytest.raises(InvalidSlotError):
        TriangleBoard().remove_first(slot)


def test_apply_jump():
    """Тест: прыжок 11 → 4 через 7."""
    board = TriangleBoard(removed=[4])
    board.apply_jump(11, 7, 4)

    assert board.removed_slots() == [7, 11]
    assert board.peg_count == 13
    assert board.count_pegs_by_scan() == 13
    assert board.has_peg(4)


def test_apply_jump_on_full_board_always_fails():
    """Тест: на полной доске ни один прыжок невозможен."""
    for triple in all_jump_triples():
        board = TriangleBoard()
        with pytest.raises(IllegalMoveError):
            board.apply_jump(*triple)
        assert _snapshot(board) == ([], SLOT_COUNT), "Доска не должна меняться"


def test_apply_jump_preconditions_leave_board_untouched():
    """Тест: каждое нарушенное условие отклоняет ход без частичных изменений."""
    cases = [
        [4, 11],   # from пуст
        [4, 7],    # over пуст
        [],        # to занят
    ]
    for removed in cases:
        board = TriangleBoard(removed=removed)
        before = _snapshot(board)
        with pytest.raises(IllegalMoveError):
            board.apply_jump(11, 7, 4)
        assert _snapshot(board) == before


def test_apply_jump_rejects_triple_outside_topology():
    """Тест: прыжок, которого нет в топологии."""
    board = TriangleBoard(removed=[13])

    with pytest.raises(IllegalMoveError):
        board.apply_jump(0, 14, 13)
    with pytest.raises(InvalidSlotError):
        board.apply_jump(0, 1, 15)
    assert _snapshot(board) == ([13], 14)


def test_legal_jumps_from():
    """Тест: возможные прыжки из лунки в порядке объявления."""
    board = TriangleBoard(removed=[0, 3])

    assert board.legal_jumps_from(5) == {2: 0, 4: 3}
    assert list(board.legal_jumps_from(5)) == [2, 4]
    assert board.legal_jumps_from(12) == {7: 3}
    assert board.legal_jumps_from(14) == {}


def test_legal_jumps_from_empty_slot():
    board = TriangleBoard(removed=[4])

    with pytest.raises(IllegalMoveError):
        board.legal_jumps_from(4)


def test_legal_jumps_respect_occupancy():
    """Тест: legal_jumps_from не предлагает прыжков, нарушающих занятость."""
    board = TriangleBoard(removed=[1, 4, 9, 12])
    for jump_from, jumps in board.all_legal_jumps().items():
        assert board.has_peg(jump_from)
        for jump_over, jump_to in jumps.items():
            assert board.has_peg(jump_over)
            assert not board.has_peg(jump_to)


def test_all_legal_jumps_skips_stuck_slots():
    """Тест: лунки без прыжков в результат не попадают."""
    board = TriangleBoard(removed=[4])

    assert board.all_legal_jumps() == {11: {7: 4}, 13: {8: 4}}
    assert TriangleBoard().all_legal_jumps() == {}


def test_all_legal_jumps_ascending_order():
    board = TriangleBoard(removed=[0])

    assert list(board.all_legal_jumps()) == [3, 5]


def test_copy_is_independent():
    """Тест: копия не разделяет состояние с оригиналом."""
    board = TriangleBoard(removed=[4])
    clone = board.copy()
    clone.apply_jump(11, 7, 4)

    assert board.removed_slots() == [4]
    assert clone.removed_slots() == [7, 11]
    assert board != clone


def test_occupancy_mask():
    board = TriangleBoard(removed=[0, 14])

    assert board.occupancy_mask() == ((1 << 15) - 1) ^ 1 ^ (1 << 14)
    assert board == TriangleBoard(removed=[14, 0])
