"""
The rule components a Rulebook is built from.

* MovementRule: which commands can the piece on a square carry out? (geometry + the special moves)
* CheckRule: is a player's king attacked?
* EndRule: what is the status of the game?

`legal_updates()` ties Movement and Check rule together: try every command and keep the ones that do not
leave the mover in check. Both the Rulebook and the EndRule use it, so they always agree on what is legal.
"""

from chess960.core.shared_types import PieceType, Status, opponent
from chess960.rules.commands import END_TURN, Command, move_command, record_update
from chess960.rules.game import ChessGame, Player, Update
from chess960.rules.moves import (
    MOVEMENT_RULES,
    Move,
    candidate_castling_squares,
    castling_move,
    en_passant_moves,
    expand_promotions,
)
from chess960.rules.square import Position
from chess960.rules.threats import ThreatAnalyzer


class MovementRule:
    def __init__(self, threat_analyzer: ThreatAnalyzer) -> None:
        self.threat_analyzer = threat_analyzer

    def get_commands(self, game: ChessGame, position: Position) -> list[Command]:
        """
        Commands for the active player's piece on `position` (empty list if there is none).

        ----
        1. candidate moves, using the basic movement rule of the piece type
        2. pawns: add en passant, and expand moves to the far row into one move per promotion choice
        3. kings: add the castling moves that are allowed
        NOTE: no check for putting yourself in check here. That is the Rulebook's job.
        """
        board = game.board
        piece = board.get_piece(position, game.active_player.color)
        if piece is None:
            return []

        moves: list[Move] = MOVEMENT_RULES[piece.type](position, board)

        if piece.type == PieceType.PAWN:
            moves.extend(en_passant_moves(position, board, game.last_move))
            moves = expand_promotions(moves, board)

        if piece.type == PieceType.KING:
            moves.extend(self._castling_moves(game, position))

        return [move_command(move) for move in moves]

    def _castling_moves(self, game: ChessGame, king_position: Position) -> list[Move]:
        """
        You are allowed to castle with a rook if
        ---

        * Neither the king nor that rook has moved before.
        * Every square between the leftmost and rightmost square used by king and rook is empty (or holds the king/rook themselves).
        * None of the squares the king or the rook pass through (start and end included) is under attack.
        """
        board = game.board
        attacker = opponent(game.active_player.color)

        moves: list[Move] = []
        for squares in candidate_castling_squares(king_position, board):
            castling_pieces = {squares.king_from, squares.rook_from}
            blocked = any(
                board.is_occupied(square) and square not in castling_pieces
                for square in squares.span()
            )
            if blocked:
                continue

            traversed = squares.king_path() + squares.rook_path()
            if self.threat_analyzer.is_any_attacked(board, traversed, attacker):
                continue

            moves.append(castling_move(squares))
        return moves


class CheckRule:
    def __init__(self, threat_analyzer: ThreatAnalyzer) -> None:
        self.threat_analyzer = threat_analyzer

    def is_in_check(self, game: ChessGame, player: Player) -> bool:
        """Is the king of `player` attacked? (A board without that king is never check.)"""
        king_position = game.board.king_position(player.color)
        if king_position is None:
            return False
        return self.threat_analyzer.is_attacked(
            game.board, king_position, opponent(player.color)
        )


def legal_updates(
    game: ChessGame,
    position: Position,
    movement_rule: MovementRule,
    check_rule: CheckRule,
) -> list[Update]:
    """
    Try every command of the piece on `position` and keep the legal outcomes.
    ----

    1. move -> end turn -> record the update, chained into one command
    2. execute it on the (immutable) game: a failed chain gives None and is dropped
    3. after the turn ended the mover is the passive player: drop the outcome if the mover's king is attacked
    """
    updates: list[Update] = []
    for command in movement_rule.get_commands(game, position):
        turn_ends = command.then(END_TURN)
        records = turn_ends.then(record_update(Update(game, turn_ends)))
        future = records.execute(game)
        if future is None:
            continue
        if check_rule.is_in_check(future, future.passive_player):
            continue
        updates.append(Update(future, records))
    return updates


class EndRule:
    def __init__(self, check_rule: CheckRule, movement_rule: MovementRule) -> None:
        self.check_rule = check_rule
        self.movement_rule = movement_rule

    def get_status(self, game: ChessGame) -> Status:
        """
        | in check | has legal move | Status    |
        |----------|----------------|-----------|
        | yes      | yes            | CHECK     |
        | yes      | no             | CHECKMATE |
        | no       | yes            | ONGOING   |
        | no       | no             | STALEMATE |
        """
        in_check = self.check_rule.is_in_check(game, game.active_player)
        has_legal_move = self.has_any_legal_move(game)

        if in_check:
            return Status.CHECK if has_legal_move else Status.CHECKMATE
        return Status.ONGOING if has_legal_move else Status.STALEMATE

    def has_any_legal_move(self, game: ChessGame) -> bool:
        return any(
            legal_updates(game, position, self.movement_rule, self.check_rule)
            for position in game.board.locate_color(game.active_player.color)
        )
