import random

from trivia_simulator.engine.game_engine import GameEngine
from trivia_simulator.engine.logging import configure_logging
from trivia_simulator.simulation.runner import draw_outcome

if __name__ == "__main__":
    roster = ["Chet", "Pat", "Sue"]
    rng = random.Random(1)

    eng = GameEngine.create()
    configure_logging(eng)
    for name in roster:
        eng.add_player(name)

    not_a_winner = True
    while not_a_winner:
        eng.roll(rng.randint(1, 5))
        if draw_outcome(rng, 9) == "wrong":
            not_a_winner = eng.answered_incorrectly()
        else:
            not_a_winner = eng.answered_correctly()
