#!/usr/bin/env python3
"""
Terminal-based draughts client.

Play against the AI, against a friend on the same terminal, or watch AI vs
AI games.
"""

from __future__ import annotations
import argparse
import logging
import sys
import time
from pathlib import Path

# Add parent to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from checkers.core.board import ROWS, COLS, FILES, SYMBOLS, Side
from checkers.core.moves import Move, algebraic_to_move, move_to_algebraic
from checkers.core.state import GameState, MoveOutcome
from checkers.ai.search import Difficulty, SearchConfig
from checkers.game import Game

SIDE_NAMES = {Side.A: "x (side A)", Side.B: "o (side B)"}


def print_board(state: GameState, highlight_moves: list[Move] = None) -> None:
    """Print the board with optional move highlighting.

    Symbols:
        x/X = side A man/king
        o/O = side B man/king
        green = legal destination, yellow = last move
    """
    # ANSI color codes
    GREEN = '\033[92m'
    YELLOW = '\033[93m'
    RESET = '\033[0m'

    targets = {m.dst for m in highlight_moves or []}
    last = set()
    if state.last_move is not None:
        last = {state.last_move.src, state.last_move.dst}

    print()
    print("  +" + "-" * (COLS * 2 + 1) + "+")
    for row in range(ROWS):
        line = f"{ROWS - row} |"
        for col in range(COLS):
            sym = SYMBOLS[state.board[row, col]]
            if (row, col) in targets:
                line += f" {GREEN}{'*' if sym == '.' else sym}{RESET}"
            elif (row, col) in last:
                line += f" {YELLOW}{sym}{RESET}"
            else:
                line += f" {sym}"
        line += " |"
        print(line)
    print("  +" + "-" * (COLS * 2 + 1) + "+")
    print("    " + " ".join(FILES))
    print()


def parse_user_move(state: GameState, input_str: str):
    """Parse user input into a command string or a legal Move (None if invalid)."""
    input_str = input_str.strip().lower()

    # Check for special commands
    if input_str in ['q', 'quit', 'exit']:
        return 'quit'
    if input_str in ['h', 'help', '?']:
        return 'help'
    if input_str in ['m', 'moves']:
        return 'show_moves'
    if input_str in ['r', 'reset']:
        return 'reset'

    try:
        move = algebraic_to_move(input_str)
    except ValueError:
        print(f"Invalid format: {input_str}. Use notation like 'a3-b4' or 'c3xe5'")
        return None

    if move in state.legal_moves():
        return move
    print(f"Illegal move: {input_str}")
    if state.must_jump:
        print("A capture is available and must be taken.")
    return None


def show_legal_moves(state: GameState) -> None:
    """Display all legal moves."""
    moves = state.legal_moves()
    if not moves:
        print("No legal moves!")
        return
    kind = "Captures" if any(m.jump for m in moves) else "Moves"
    print(f"{kind}:", ", ".join(move_to_algebraic(m) for m in moves))


def describe(outcome: MoveOutcome) -> str:
    """One-line summary of a move outcome."""
    text = move_to_algebraic(outcome.move)
    if outcome.promoted:
        text += " (crowned)"
    if outcome.must_continue is not None:
        text += " - must jump again"
    return text


def announce_winner(state: GameState) -> None:
    print_board(state)
    winner = state.get_winner()
    if winner is not None:
        print(f"Game over. {SIDE_NAMES[winner]} wins!")


def play_interactive(game: Game, delay: float = 0.0) -> None:
    """Play a game at the terminal; AI turns are taken automatically."""
    state = game.state

    print("\n=== Draughts ===")
    if game.vs_ai:
        print("You are", SIDE_NAMES[game.ai_side.opponent])
    else:
        print("Local two-player game")
    print("Commands: move (e.g., 'a3-b4', 'c3xe5'), 'm' for moves, 'r' reset, 'q' quit")

    while not state.is_terminal():
        print_board(state, state.legal_moves())

        if game.is_ai_turn:
            print("AI thinking...")
            time.sleep(delay)
            outcome = game.ai_move()
            if outcome is None:
                state.check_game_state()
                break
            print(f"AI plays: {describe(outcome)}")
            continue

        print(f"{SIDE_NAMES[state.current_player]} to move")
        while True:
            try:
                user_input = input("> ").strip()
            except EOFError:
                return

            result = parse_user_move(state, user_input)

            if result == 'quit':
                print("Thanks for playing!")
                return
            elif result == 'help':
                print("Enter moves like 'a3-b4' to step or 'c3xe5' to jump")
                print("'m' to see legal moves, 'r' to restart, 'q' to quit")
            elif result == 'show_moves':
                show_legal_moves(state)
            elif result == 'reset':
                game.reset()
                print("New game.")
                break
            elif isinstance(result, Move):
                game.select(result.src)
                outcome = game.move_to(result.dst)
                if outcome is not None:
                    print(f"You played: {describe(outcome)}")
                break

    announce_winner(state)


def watch_ai_vs_ai(
    config: SearchConfig,
    seed: int = None,
    delay: float = 1.0,
    max_moves: int = 200
) -> None:
    """Watch AI play against itself. Stops after max_moves without a result."""
    game = Game(vs_ai=False, config=config, seed=seed)
    state = game.state

    print("\n=== AI vs AI ===")
    print(f"Difficulty: {config.difficulty.value}, depth {config.depth}")

    move_count = 0
    while not state.is_terminal() and move_count < max_moves:
        print_board(state)
        mover = state.current_player
        outcome = game.ai_move()
        if outcome is None:
            state.check_game_state()
            break
        print(f"{SIDE_NAMES[mover]} plays: {describe(outcome)}\n")
        move_count += 1
        time.sleep(delay)

    announce_winner(state)
    if not state.is_terminal():
        print("No result, stopping.")
    print(f"{move_count} moves played.")


def main():
    parser = argparse.ArgumentParser(description='Draughts Terminal Client')
    parser.add_argument('--difficulty', choices=[d.value for d in Difficulty],
                        default=Difficulty.HARD.value, help='AI difficulty')
    parser.add_argument('--depth', type=int, default=4, help='Search depth in plies')
    parser.add_argument('--seed', type=int, default=None, help='Random seed')
    parser.add_argument('--pvp', action='store_true', help='Local two-player game')
    parser.add_argument('--watch', action='store_true', help='Watch AI vs AI')
    parser.add_argument('--delay', type=float, default=None,
                        help='Seconds to pause before each AI move')
    parser.add_argument('--play-as', choices=['a', 'b'], default='a',
                        help='Play as side A (x, moves first) or side B (o)')
    parser.add_argument('--verbose', action='store_true', help='Debug logging')

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = SearchConfig(difficulty=Difficulty(args.difficulty), depth=args.depth)

    if args.watch:
        watch_ai_vs_ai(config, args.seed, 1.0 if args.delay is None else args.delay)
        return

    human = Side.A if args.play_as == 'a' else Side.B
    game = Game(vs_ai=not args.pvp, ai_side=human.opponent, config=config, seed=args.seed)
    play_interactive(game, 0.6 if args.delay is None else args.delay)


if __name__ == '__main__':
    main()
