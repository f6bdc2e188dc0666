"""Simulation run script.

Loads the mod into a simulated host, grants family bonuses to a few items
and drives a Keropok progression kill by kill.
"""

import argparse

from max_special_modifiers.config import Settings
from max_special_modifiers.core import ProgressionState
from max_special_modifiers.game import Creature, SimulatedHost
from max_special_modifiers.mod_loader import LoadMode, ModLoader


def print_item(item) -> None:
    print(f"  {item.id} (level {item.level})")
    for bonus in item.bonuses:
        kind = "implicit" if bonus.is_implicit else "explicit"
        print(f"    [{kind:8}] {bonus.affix.name:<36} {bonus.lower:8.2f} - {bonus.upper:8.2f}")


def main():
    parser = argparse.ArgumentParser(description="Max Special Modifiers simulation")
    parser.add_argument("--kills", type=int, default=20, help="Kills to register")
    parser.add_argument("--level", type=int, default=40, help="Item level")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--config", type=str, default=None, help="Family configuration file")
    parser.add_argument("--debug", action="store_true", help="Debug logging")
    args = parser.parse_args()

    overrides = {"DEBUG_LOGGING": args.debug, "RANDOM_SEED": args.seed}
    if args.config:
        overrides["CONFIG_PATH"] = args.config
    settings = Settings(**overrides)

    host = SimulatedHost(seed=args.seed)
    loader = ModLoader(host, settings)
    loader.on_created()
    loader.on_game_loaded(LoadMode.NEW_GAME)

    print("\n=== Family bonuses ===")
    for tags in (["Orang Bunian Implicit"], ["Awakened Implicit"]):
        item = host.create_item(f"{tags[0].split()[0].lower()}_item", level=args.level)
        host.grant_family_bonuses(item, tags)
        print_item(item)

    print("\n=== Keropok progression ===")
    item = host.create_item("keropok_item", level=args.level, keropok=True)
    host.begin_keropok_progression(item)
    creature = Creature("Pontianak")

    for kill in range(1, args.kills + 1):
        accepted = host.register_kill(item, creature)
        state = loader.service.progression.state_of(item)
        print(f"  kill {kill:3}: accepted={accepted} state={state.value}")
        if state == ProgressionState.COMPLETED:
            break

    print_item(item)
    loader.on_game_unloaded()
    loader.on_released()


if __name__ == "__main__":
    main()
