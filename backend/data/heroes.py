"""Hero id -> display name table, as returned by the Deadlock match history API."""

HERO_NAMES: dict[int, str] = {
    1: "Dynamo",
    2: "Seven",
    4: "Lady Geist",
    6: "Abrams",
    7: "Wraith",
    8: "McGinnis",
    10: "Paradox",
    11: "Infernus",
    12: "Kelvin",
    13: "Haze",
    14: "Holliday",
    15: "Bebop",
    16: "Calico",
    17: "Grey Talon",
    18: "Mo & Krill",
    19: "Shiv",
    20: "Ivy",
    25: "Vindicta",
    27: "Yamato",
    31: "Lash",
    35: "Viscous",
    50: "Pocket",
    52: "Mirage",
    58: "Viper",
    60: "Sinclair",
    # Hero ids re-issued after the hero rework; same characters
    62: "Mo & Krill",
    63: "Dynamo",
}


def playable_heroes() -> list[str]:
    """Distinct hero names in id order."""
    seen = []
    for name in HERO_NAMES.values():
        if name not in seen:
            seen.append(name)
    return seen
