"""
Play 2048 from the terminal.
A keyboard player or a seeded random player drives the game controller,
and every move is logged to a JSON file for later rendering.
"""

import argparse
import random

from game_2048 import DIRECTIONS, display
from game_controller import GameController


KEY_MAPPING = {
    'w': 'up',
    'a': 'left',
    's': 'down',
    'd': 'right',
}


def parse_command(command):
    """
    Map a keyboard command to a direction.

    Returns:
        A direction, 'quit' for q, or None for anything else
    """
    command = command.lower().strip()
    if command == 'q':
        return 'quit'
    return KEY_MAPPING.get(command)


def play_keyboard(controller, log_file, input_fn=input):
    """
    Read w/a/s/d commands until the player quits or input runs out.

    Returns:
        Reason the game stopped
    """
    print("Welcome to 2048!")
    print("Commands: w (up), s (down), a (left), d (right), q (quit)")
    print(display(controller.board))

    while True:
        try:
            command = input_fn("\nEnter move: ")
        except EOFError:
            return "end_of_input"

        direction = parse_command(command)
        if direction == 'quit':
            print("Thanks for playing!")
            return "quit"
        if direction is None:
            print("Invalid command! Use w/a/s/d to move or q to quit.")
            continue

        if controller.handle_direction(direction):
            controller.save_log(log_file)
            print(display(controller.board))
        else:
            print("Invalid move! Try another direction.")


def play_random(controller, log_file, max_moves=1000, max_consecutive_invalid_moves=10, rng=None):
    """
    Let a random player move until a limit is hit.

    Args:
        controller: GameController to drive
        log_file: Path to the JSON log file
        max_moves: Maximum number of board-changing moves
        max_consecutive_invalid_moves: Stop after this many no-op moves in a row
        rng: Optional random.Random for the player's choices

    Returns:
        Reason the game stopped
    """
    rng = rng or random
    consecutive_invalid_moves = 0

    while controller.move_count < max_moves:
        direction = rng.choice(DIRECTIONS)

        if controller.handle_direction(direction):
            consecutive_invalid_moves = 0
            controller.save_log(log_file)
            continue

        consecutive_invalid_moves += 1
        if consecutive_invalid_moves >= max_consecutive_invalid_moves:
            print(f"\n❌ Too many consecutive invalid moves ({max_consecutive_invalid_moves}). Game stopped.")
            return f"too_many_invalid_moves_{max_consecutive_invalid_moves}"

    return "max_moves_reached"


def main(argv=None):
    parser = argparse.ArgumentParser(description='Play the 2048 game')
    parser.add_argument('--rows', type=int, default=4, help='Number of board rows (default: 4)')
    parser.add_argument('--cols', type=int, default=4, help='Number of board columns (default: 4)')
    parser.add_argument('--seed', type=int, default=None, help='Random seed for reproducible games')
    parser.add_argument('--player', choices=['keyboard', 'random'], default='keyboard',
                        help='Who makes the moves (default: keyboard)')
    parser.add_argument('--max_moves', type=int, default=1000,
                        help='Maximum number of moves for the random player (default: 1000)')
    parser.add_argument('--max_consecutive_invalid_moves', type=int, default=10,
                        help='Random player stops after this many no-op moves in a row (default: 10)')
    parser.add_argument('--log_file', type=str, default='game_logs/game_log.json',
                        help='Path to the JSON move log')

    args = parser.parse_args(argv)

    rng = random.Random(args.seed) if args.seed is not None else None
    try:
        controller = GameController(args.rows, args.cols, rng)
    except ValueError as e:
        parser.error(str(e))

    try:
        if args.player == 'random':
            end_reason = play_random(
                controller,
                args.log_file,
                max_moves=args.max_moves,
                max_consecutive_invalid_moves=args.max_consecutive_invalid_moves,
                rng=rng,
            )
            print(display(controller.board))
        else:
            end_reason = play_keyboard(controller, args.log_file)

        controller.save_log(args.log_file)
    except OSError as e:
        print(f"\n❌ Could not save game log: {e}")
        return f"error: {e}"

    print("\n" + "=" * 50)
    print(f"Total Moves: {controller.move_count}")
    print(f"Game End Reason: {end_reason}")
    print(f"Game log saved to: {args.log_file}")
    return end_reason


if __name__ == "__main__":
    main()
