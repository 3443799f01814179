"""Game state enumeration."""

from enum import Enum, auto


class GameState(Enum):
    """
    Game state machine states.

    Flow: SETUP → HUMAN_TURN ⇄ COMPUTER_TURN → GAME_OVER
    """

    # Deck not dealt yet
    SETUP = auto()

    # Waiting for the player to pick a card (or exit)
    HUMAN_TURN = auto()

    # Computer picks a card
    COMPUTER_TURN = auto()

    # Cards exhausted or player quit
    GAME_OVER = auto()

    def __str__(self) -> str:
        return self.name.replace("_", " ").title()


# Valid state transitions
VALID_TRANSITIONS: dict[GameState, list[GameState]] = {
    GameState.SETUP: [GameState.HUMAN_TURN, GameState.COMPUTER_TURN],
    GameState.HUMAN_TURN: [GameState.COMPUTER_TURN, GameState.GAME_OVER],
    GameState.COMPUTER_TURN: [GameState.HUMAN_TURN, GameState.GAME_OVER],
    GameState.GAME_OVER: [],  # Terminal state
}


def is_valid_transition(from_state: GameState, to_state: GameState) -> bool:
    """
    Check if a state transition is valid.

    Args:
        from_state: Current state
        to_state: Desired state

    Returns:
        True if the transition is allowed
    """
    return to_state in VALID_TRANSITIONS.get(from_state, [])
