"""
Data models for the LoL Item Helper
"""

from enum import Enum
from typing import Optional, Union
from pydantic import BaseModel


class GameMap(int, Enum):
    """Map ids used in the item 'maps' block"""
    TWISTED_TREELINE = 10
    SUMMONERS_RIFT = 11
    HOWLING_ABYSS = 12
    CRYSTAL_SCAR = 8


class ItemStats(BaseModel):
    """Stats parsed out of a single item record"""
    id: Union[int, str]
    name: str

    # Damage
    attack_damage: Optional[float] = None
    attack_speed: Optional[float] = None
    ability_power: Optional[float] = None

    # Damage modifiers
    lifesteal: Optional[float] = None
    crit_chance: Optional[float] = None

    # Defense
    health: Optional[float] = None
    armor: Optional[float] = None
    mana: Optional[float] = None

    # Passives that only show up in the item's effect block
    critincrease: Optional[float] = None
    armorpen: Optional[float] = None
    bonusarmorpen: Optional[float] = None
    spellblade: Optional[float] = None
    magicpen: Optional[float] = None
    manatoad: Optional[float] = None
    onhitpercentphysical: Optional[float] = None
