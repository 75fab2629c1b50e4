import logging
import sys

from arcothello.config.settings import settings
from arcothello.core.grid import parse_notation, to_notation
from arcothello.engine.game import OthelloEngine
from arcothello.models.enums import Cell

def main():
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")

    depth = int(sys.argv[1]) if len(sys.argv) > 1 else settings.default_depth

    print("=======================================")
    print(f"   OTHELLO {settings.width}x{settings.height}: Human vs {settings.name}")
    print("=======================================")

    engine = OthelloEngine()
    # Human is black (X) and moves first, engine is white (O)
    white_turn = False

    print(engine.get_visual_board())

    while not engine.is_game_over():
        side = Cell.from_turn(white_turn)

        if engine.number_possible_moves(white_turn) == 0:
            print(f"\n{side.name} has no legal move and passes.")
            white_turn = not white_turn
            continue

        # --- Human Turn (Black) ---
        if not white_turn:
            valid = [to_notation(m) for m in engine.grid.legal_moves(side)]
            user_input = input(f"\nYour Move ({', '.join(valid)}): ")
            try:
                col, row = parse_notation(user_input)
            except ValueError:
                print("Please enter a move like D3.")
                continue
            if not engine.play_move(col, row, white_turn):
                print("Illegal move. Try again.")
                continue

        # --- Engine Turn (White) ---
        else:
            print("\nEngine is thinking...")
            result = engine.analyse(engine.get_board(), depth, white_turn)
            print(f"Engine plays {result.notation} (score {result.score:.1f})")
            engine.play_move(result.column, result.row, white_turn)

        white_turn = not white_turn
        print("\n" + engine.get_visual_board())

    # --- End Game ---
    print(f"\nWhite {engine.get_white_score()} - Black {engine.get_black_score()}")
    winner = engine.winner()
    if winner is None:
        print("Game Over! It's a Draw.")
    else:
        winner_name = "Engine" if winner == Cell.SIDE_A else "Human"
        print(f"Game Over! Winner: {winner_name}")

if __name__ == "__main__":
    main()
