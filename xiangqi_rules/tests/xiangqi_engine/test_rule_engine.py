"""
测试规则引擎

测试将军检测、安全走法过滤、将死判定和局面状态。
"""

import pytest

from xiangqi_rules.src.xiangqi_engine.rules_engine import (
    Board, Piece, Side, apply_move, initial_board,
    pseudo_moves, safe_moves, is_move_safe, is_in_check, is_checkmate,
    all_safe_moves, get_game_status
)


def make_board(cells):
    """由 {位置: 符号} 创建棋盘"""
    return Board.from_pieces({pos: Piece.from_symbol(symbol) for pos, symbol in cells.items()})


# 闷杀：红帅被己方棋子围住，黑马卧槽将军
SMOTHERED_MATE = {(9, 4): 'K', (9, 3): 'A', (9, 5): 'A', (8, 4): 'P', (7, 3): 'h', (0, 3): 'k'}

# 三车困将：黑将三面被车控制
CHARIOT_MATE = {(0, 4): 'k', (1, 4): 'R', (0, 3): 'R', (0, 5): 'R', (9, 4): 'K'}

# 红车被黑车牵制在帅的纵线上
PINNED_CHARIOT = {(9, 4): 'K', (5, 4): 'R', (2, 4): 'r', (0, 3): 'k'}


class TestCheckDetection:
    """is_in_check的测试"""

    def test_initial_board_not_in_check(self):
        board = initial_board()
        assert not is_in_check(board, Side.RED)
        assert not is_in_check(board, Side.BLACK)

    def test_flying_general_checks_both_sides(self):
        """帅将对脸时双方都被将军"""
        board = make_board({(9, 4): 'K', (0, 4): 'k'})
        assert is_in_check(board, 'black')
        assert is_in_check(board, 'red')

    def test_cannon_check(self):
        board = make_board({(0, 4): 'k', (1, 4): 'P', (2, 4): 'C', (9, 4): 'K'})
        assert is_in_check(board, Side.BLACK)
        assert not is_in_check(board, Side.RED)

    def test_horse_check_and_blocked_horse(self):
        board = make_board(SMOTHERED_MATE)
        assert is_in_check(board, Side.RED)

        blocked = make_board({**SMOTHERED_MATE, (8, 3): 'A'})
        assert not is_in_check(blocked, Side.RED)

    def test_missing_general_counts_as_check(self):
        board = make_board({(0, 4): 'k', (5, 5): 'R'})
        assert is_in_check(board, Side.RED)
        assert not is_in_check(board, Side.BLACK)

    def test_queries_are_idempotent(self):
        board = make_board(PINNED_CHARIOT)
        assert is_in_check(board, Side.RED) == is_in_check(board, Side.RED)
        assert safe_moves(board, (5, 4), Side.RED) == safe_moves(board, (5, 4), Side.RED)
        assert board == make_board(PINNED_CHARIOT)


class TestSafeMoves:
    """safe_moves/is_move_safe的测试"""

    def test_pinned_piece_cannot_leave_file(self):
        """被牵制的车只能沿纵线走"""
        board = make_board(PINNED_CHARIOT)
        pseudo = pseudo_moves(board, (5, 4), Side.RED)
        safe = safe_moves(board, (5, 4), Side.RED)
        assert (5, 0) in pseudo
        assert (5, 0) not in safe
        assert not is_move_safe(board, (5, 4), (5, 0), Side.RED)
        assert sorted(safe) == [(2, 4), (3, 4), (4, 4), (6, 4), (7, 4), (8, 4)]

    def test_general_cannot_face_general(self):
        board = make_board({(9, 4): 'K', (0, 4): 'k'})
        assert sorted(safe_moves(board, (9, 4), Side.RED)) == [(0, 4), (9, 3), (9, 5)]

    def test_safe_moves_subset_of_pseudo_moves(self):
        boards = [initial_board(), make_board(PINNED_CHARIOT), make_board(SMOTHERED_MATE),
                  make_board(CHARIOT_MATE), make_board({(9, 4): 'K', (0, 4): 'k'})]
        for board in boards:
            for side in Side:
                for pos, _ in board.pieces(side):
                    assert set(safe_moves(board, pos, side)) <= set(pseudo_moves(board, pos, side))

    def test_initial_position_move_count(self):
        """开局红方共有44种走法"""
        moves = all_safe_moves(initial_board(), Side.RED)
        assert sum(len(targets) for targets in moves.values()) == 44
        assert (7, 0) in moves[(7, 1)]
        assert (0, 1) in moves[(7, 1)]

    def test_input_board_untouched(self):
        board = initial_board()
        safe_moves(board, (7, 1), Side.RED)
        is_move_safe(board, (7, 1), (0, 1), Side.RED)
        assert board == initial_board()


class TestCheckmate:
    """is_checkmate的测试"""

    def test_smothered_mate(self):
        board = make_board(SMOTHERED_MATE)
        assert is_checkmate(board, 'red')
        assert not is_checkmate(board, 'black')

    def test_chariot_mate(self):
        board = make_board(CHARIOT_MATE)
        assert is_in_check(board, Side.BLACK)
        assert is_checkmate(board, Side.BLACK)
        assert not is_in_check(board, Side.RED)

    def test_escapable_check(self):
        """黑将可以吃掉无保护的车解将"""
        board = make_board({(0, 4): 'k', (1, 4): 'R', (9, 3): 'K'})
        assert is_in_check(board, Side.BLACK)
        assert not is_checkmate(board, Side.BLACK)
        # (0,3)与红帅(9,3)同列对面
        assert sorted(safe_moves(board, (0, 4), Side.BLACK)) == [(0, 5), (1, 4)]

    def test_escape_into_facing_generals_excluded(self):
        """躲将不能走到与对方帅照面的线上"""
        board = make_board({(0, 4): 'k', (1, 4): 'R', (9, 5): 'K'})
        assert (0, 5) in pseudo_moves(board, (0, 4), Side.BLACK)
        assert not is_move_safe(board, (0, 4), (0, 5), Side.BLACK)
        assert is_in_check(apply_move(board, (0, 4), (0, 5)), Side.BLACK)
        assert sorted(safe_moves(board, (0, 4), Side.BLACK)) == [(0, 3), (1, 4)]

    def test_no_stalemate_rule(self):
        """未被将军时即使无子可动也不判负"""
        board = make_board({(0, 3): 'k', (1, 8): 'R', (9, 4): 'K'})
        assert not is_in_check(board, Side.BLACK)
        assert all_safe_moves(board, Side.BLACK) == {}
        assert not is_checkmate(board, Side.BLACK)

    def test_missing_general_is_checkmate(self):
        board = make_board({(0, 4): 'k'})
        assert is_checkmate(board, Side.RED)

    def test_checkmate_implies_check(self):
        boards = [initial_board(), make_board(SMOTHERED_MATE), make_board(CHARIOT_MATE),
                  make_board(PINNED_CHARIOT), make_board({(9, 4): 'K', (0, 4): 'k'}),
                  apply_move(initial_board(), (7, 1), (0, 1))]
        for board in boards:
            for side in Side:
                if is_checkmate(board, side):
                    assert is_in_check(board, side)


class TestGameStatus:
    """get_game_status的测试"""

    def test_initial_status(self):
        status = get_game_status(initial_board(), 'red')
        assert status['side_to_move'] is Side.RED
        assert not status['in_check']
        assert not status['checkmate']
        assert status['legal_moves_count'] == 44

    @pytest.mark.parametrize("cells, side", [
        (SMOTHERED_MATE, Side.RED),
        (CHARIOT_MATE, Side.BLACK),
    ])
    def test_checkmated_status(self, cells, side):
        status = get_game_status(make_board(cells), side)
        assert status['in_check']
        assert status['checkmate']
        assert status['legal_moves_count'] == 0
