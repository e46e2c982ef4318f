"""Command-line interface for batch simulations."""

import logging
import sys
from collections import Counter
from dataclasses import dataclass
from pathlib import Path
from typing import Annotated

import cappa
import msgspec
from tqdm import tqdm

from trivia_simulator.simulation.config import SimulationConfig
from trivia_simulator.simulation.runner import run_simulations

# Suppress game narration at module level
logging.getLogger("trivia_simulator").setLevel(logging.CRITICAL)


@dataclass
class Args:
    """CLI arguments for the trivia simulation runner."""

    config: Annotated[Path | None, cappa.Arg(long=True)] = None
    """Path to TOML configuration file"""

    games: Annotated[int | None, cappa.Arg(long=True)] = None
    """Override: number of games to play"""

    seed: Annotated[int | None, cappa.Arg(long=True)] = None
    """Override: seed of the first game"""

    max_turns: Annotated[int | None, cappa.Arg(long=True)] = None
    """Override: abort games exceeding this many turns"""

    def load_config(self) -> SimulationConfig:
        config = (
            SimulationConfig.from_toml(str(self.config))
            if self.config is not None
            else SimulationConfig()
        )

        # CLI overrides
        if self.games is not None:
            config.games = self.games
        if self.seed is not None:
            config.seed = self.seed
        if self.max_turns is not None:
            config.max_turns_per_game = self.max_turns

        # Overrides bypass decoding, so run them through the same constraints
        return msgspec.convert(msgspec.to_builtins(config), type=SimulationConfig)

    def __call__(self) -> int:
        """Play the configured games with progress tracking."""

        if self.config is not None and not self.config.exists():
            print(f"Error: Config file not found: {self.config}", file=sys.stderr)
            return 1

        try:
            config = self.load_config()
        except msgspec.ValidationError as e:
            print(f"Error: Invalid configuration: {e}", file=sys.stderr)
            return 1

        print(f"Players: {', '.join(config.players)}")
        print(f"Games: {config.games} (seeds {config.seed}..{config.seed + config.games - 1})")
        print(f"Max turns per game: {config.max_turns_per_game}")
        print()

        completed = 0
        aborted = 0
        wins: Counter[str] = Counter()

        with tqdm(total=config.games, desc="Simulating", unit="game") as pbar:
            for result in run_simulations(config):
                if result.aborted:
                    aborted += 1
                else:
                    completed += 1
                    wins[result.winner] += 1

                status = "ABORTED" if result.aborted else f"WON by {result.winner}"
                tqdm.write(
                    f"[seed {result.seed}] {status} "
                    f"in {result.execution_time_ms:.2f}ms "
                    f"({result.turn_count} turns)",
                )
                for player in result.players:
                    tqdm.write(
                        f"  {player.name}: coins={player.final_coins}, "
                        f"turns={player.turns_taken}, "
                        f"correct={player.correct_answers}, "
                        f"wrong={player.wrong_answers}",
                    )

                pbar.update(1)

        print(f"\nCompleted: {completed}")
        print(f"Aborted:   {aborted}")
        for name in config.players:
            print(f"  {name}: {wins[name]} win(s)")

        return 0


def main():
    """Entry point for CLI."""
    return cappa.invoke(Args)


if __name__ == "__main__":
    sys.exit(main())
