"""
Static starter catalog loaded by `names.seed`.
"""

from __future__ import annotations

from .records import NameRecord

MALE_NAMES = (
    ("Aldric", "human"),
    ("Thorin", "dwarven"),
    ("Legolas", "elvish"),
    ("Gareth", "human"),
    ("Balin", "dwarven"),
    ("Elrond", "elvish"),
    ("Cedric", "human"),
    ("Durin", "dwarven"),
    ("Thranduil", "elvish"),
    ("Roderick", "human"),
    ("Grommash", "orcish"),
    ("Faelar", "elvish"),
    ("Bram", "halfling"),
    ("Kael", "fantasy"),
    ("Darian", "fantasy"),
    ("Tormund", "northern"),
    ("Galen", "human"),
    ("Borin", "dwarven"),
    ("Aerendil", "elvish"),
    ("Magnus", "northern"),
    ("Thrall", "orcish"),
    ("Percival", "human"),
    ("Fenwick", "halfling"),
    ("Varis", "elvish"),
    ("Ulfric", "northern"),
    ("Dorn", "dwarven"),
    ("Caspian", "fantasy"),
    ("Lucan", "human"),
    ("Gorvash", "orcish"),
    ("Merric", "halfling"),
    ("Theron", "fantasy"),
    ("Halvard", "northern"),
    ("Eldarion", "elvish"),
    ("Brannoc", "dwarven"),
    ("Osric", "human"),
    ("Zarek", "fantasy"),
    ("Korgath", "orcish"),
    ("Pip", "halfling"),
    ("Soren", "northern"),
    ("Valen", "fantasy"),
)

FEMALE_NAMES = (
    ("Aelindra", "elvish"),
    ("Galadriel", "elvish"),
    ("Brienne", "human"),
    ("Dagny", "dwarven"),
    ("Arwen", "elvish"),
    ("Isolde", "human"),
    ("Helga", "dwarven"),
    ("Sylvanas", "elvish"),
    ("Rowena", "human"),
    ("Freya", "northern"),
    ("Garona", "orcish"),
    ("Lyra", "fantasy"),
    ("Rosie", "halfling"),
    ("Seraphina", "fantasy"),
    ("Astrid", "northern"),
    ("Elaria", "elvish"),
    ("Gwendolyn", "human"),
    ("Bruna", "dwarven"),
    ("Tauriel", "elvish"),
    ("Sigrun", "northern"),
    ("Shagra", "orcish"),
    ("Marigold", "halfling"),
    ("Morgana", "fantasy"),
    ("Elowen", "human"),
    ("Vistra", "dwarven"),
    ("Nimue", "fantasy"),
    ("Ingrid", "northern"),
    ("Lirael", "elvish"),
    ("Cordelia", "human"),
    ("Urzula", "orcish"),
    ("Primrose", "halfling"),
    ("Thessaly", "fantasy"),
    ("Ragna", "northern"),
    ("Naerys", "elvish"),
    ("Adela", "human"),
    ("Hilde", "dwarven"),
    ("Zephyra", "fantasy"),
    ("Mogra", "orcish"),
    ("Daisy", "halfling"),
    ("Valeria", "fantasy"),
)

NEUTRAL_NAMES = (
    ("Ash", "fantasy"),
    ("Rowan", "human"),
    ("Sage", "fantasy"),
    ("Ember", "fantasy"),
    ("Quill", "halfling"),
    ("Wren", "human"),
    ("Sky", "fantasy"),
    ("River", "human"),
    ("Ellis", "human"),
    ("Aeris", "elvish"),
    ("Lumen", "fantasy"),
    ("Onyx", "fantasy"),
    ("Thistle", "halfling"),
    ("Frost", "northern"),
    ("Vale", "elvish"),
    ("Riven", "elvish"),
    ("Storm", "northern"),
    ("Briar", "halfling"),
    ("Cinder", "fantasy"),
    ("Shade", "fantasy"),
    ("Flint", "dwarven"),
    ("Rune", "northern"),
    ("Echo", "fantasy"),
    ("Indigo", "fantasy"),
    ("Kestrel", "human"),
    ("Sparrow", "halfling"),
    ("Talon", "orcish"),
    ("Nyx", "fantasy"),
    ("Oberyn", "elvish"),
    ("Fable", "fantasy"),
    ("Jade", "fantasy"),
)


def seed_records() -> list[NameRecord]:
    catalog = (
        ("male", MALE_NAMES),
        ("female", FEMALE_NAMES),
        ("neutral", NEUTRAL_NAMES),
    )
    return [
        NameRecord(name=name, gender=gender, origin=origin)
        for gender, entries in catalog
        for name, origin in entries
    ]
