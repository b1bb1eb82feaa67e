from __future__ import annotations

from typing import List, Optional

from .state import NUM_PITS, STORE_INDEX, Game, PocketLocation, Side


def _mark(pocket: PocketLocation, selected: Optional[PocketLocation]) -> str:
    if selected is not None and (selected[0], Side(selected[1])) == pocket:
        return "->"
    return "  "


def format_game(game: Game, selected: Optional[PocketLocation] = None) -> str:
    """Text layout of a game: Opponent store on top, Player store at the bottom.

    Each middle row pairs Player pit ``i`` with the Opponent pit facing it
    (``5 - i``), so reading the Player column down and the Opponent column up
    follows the sowing direction.
    """
    board = game.board
    opponent_store = (STORE_INDEX, Side.OPPONENT)
    player_store = (STORE_INDEX, Side.PLAYER)

    lines: List[str] = [f"    {_mark(opponent_store, selected):>4}  {board.store(Side.OPPONENT)}"]
    for i in range(NUM_PITS):
        player_pit = (i, Side.PLAYER)
        opponent_pit = (NUM_PITS - 1 - i, Side.OPPONENT)
        lines.append(
            f"{_mark(player_pit, selected):>4}  {board.get_stones(player_pit)}"
            f"  {_mark(opponent_pit, selected):>4}  {board.get_stones(opponent_pit)}"
        )
    lines.append(f"    {_mark(player_store, selected):>4}  {board.store(Side.PLAYER)}")
    lines.append("")
    lines.append(f"{board.player_turn}'s turn")
    lines.append(f"Game state: {game.status}")
    return "\n".join(lines)
