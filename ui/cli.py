# # Command-line interface (text-based play)
import time

from game.engine import GameEngine
from state.score_entry import ScoreEntry

CLEAR_SCREEN = "\033[2J\033[H"


def clear_terminal():
    print(CLEAR_SCREEN, end="", flush=True)


def format_color(color, rules):
    emoji = rules["display"]["emoji_map"].get(color, "")
    return f"{emoji} {color}".strip()


def ask(read, prompt):
    """Read one answer, None when the player hits EOF or Ctrl-C."""
    try:
        return read(prompt).strip()
    except (EOFError, KeyboardInterrupt):
        return None


def display_sequence(engine, *, write=print, sleep=time.sleep, clear=clear_terminal):
    """Reveal the sequence one color at a time."""
    display = engine.rules["display"]
    write("Watch the sequence...")
    for color in engine.reveal_sequence():
        write(format_color(color, engine.rules))
        sleep(display["reveal_delay"])
        if display.get("clear_screen", True):
            clear()
    write("Now repeat the sequence!")


def gameloop(
    store,
    engine=None,
    *,
    read=input,
    write=print,
    sleep=time.sleep,
    clear=clear_terminal,
):
    """
    Play one session until the first wrong color, then record the score.

    Returns:
        ScoreEntry | None: The saved entry, None if the player quit.
    """
    engine = engine or GameEngine()
    rules = engine.rules
    shortcuts = ", ".join(f"{k}={v}" for k, v in rules["shortcuts"].items())

    write("=== Simon Says ===")
    write("Welcome to Simon Says!")
    write("Memorize the sequence of colors and repeat it.")
    write(f"Type a color or its letter ({shortcuts}). Type 'exit' to quit.\n")

    while not engine.is_over:
        engine.new_round()
        display_sequence(engine, write=write, sleep=sleep, clear=clear)

        while engine.remaining_guesses():
            position = engine.current_index + 1
            user_input = ask(read, f"Enter color {position}: ")

            # handle special commands
            if user_input is None or user_input.upper() == "EXIT":
                write("Exiting game.")
                return None

            try:
                correct = engine.make_guess(user_input)
            except ValueError as e:
                write(f"Invalid input: {e}")
                continue

            if not correct:
                break

        if engine.round_complete:
            write("Correct! Next round...")
            sleep(rules["display"]["round_delay"])
            if rules["display"].get("clear_screen", True):
                clear()

    write("Game over! You got the sequence wrong.")
    write(f"Your score: {engine.score}")
    write(f"The sequence was: {engine.sequence.as_string()}")

    name = ask(read, "Enter your name to save your score [Player]: ")
    if name is None:
        write("Exiting game.")
        return None
    entry = ScoreEntry(name=name or "Player", score=engine.score)
    rank = store.save(entry)
    if rank is not None:
        write(f"New high score! You placed #{rank}.")

    write("\n=== Game Over ===")
    return entry
