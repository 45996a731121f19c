"""
Item stat parsing
Turns a raw item record into ItemStats, including passives that only live in the effect block
"""

import logging
from typing import Any, Callable, Dict, Optional

from models import ItemStats

logger = logging.getLogger(__name__)

# ItemStats field -> key in the record's 'stats' block
STAT_FIELDS = {
    "attack_damage": "FlatPhysicalDamageMod",
    "attack_speed": "PercentAttackSpeedMod",
    "ability_power": "FlatMagicDamageMod",
    "lifesteal": "PercentLifeStealMod",
    "crit_chance": "FlatCritChanceMod",
    "health": "FlatHPPoolMod",
    "armor": "FlatArmorMod",
    "mana": "FlatMPPoolMod",
}

EffectTransform = Callable[[Optional[float]], Dict[str, Any]]


def _field(name: str) -> EffectTransform:
    return lambda amount: {name: amount}


def _constant(name: str, value: float) -> EffectTransform:
    return lambda amount: {name: value}


# Items without an effect block; values are fixed
NO_EFFECT_ITEMS: Dict[str, Dict[str, float]] = {
    "Muramana": {"manatoad": 0.03},
    "Muramane": {"manatoad": 0.02},
}

# Item name -> transform of Effect1Amount
SPECIAL_ITEMS: Dict[str, EffectTransform] = {
    "Infinity Edge": _field("critincrease"),
    "Blade of the Ruined King": _field("onhitpercentphysical"),
    "Void Staff": _field("magicpen"),
    # Stored as a negative value upstream
    "Abyssal Scepter": lambda amount: {"magicpen": -float(amount)},
    "Sheen": _field("spellblade"),
    "Trinity Force": _field("spellblade"),
    "Runeglaive": _field("spellblade"),
    "Lich Bane": _field("spellblade"),
    "Iceborn Gauntlet": _field("spellblade"),
    "Youmuu's Ghostblade": _field("armorpen"),
    "Serrated Dirk": _field("armorpen"),
    "Black Cleaver": _constant("armorpen", 0.3),
}

# Items tagged with these colloquial codes get a transform when no name matched
COLLOQ_ITEMS: Dict[str, EffectTransform] = {
    "lw": _field("bonusarmorpen"),
}

# Name fragments whose effects are deliberately not parsed
SKIPPED_NAME_FRAGMENTS = ("Devourer",)


def parse_item_stats(item_id, item: Dict[str, Any]) -> ItemStats:
    """Build ItemStats from an item record, then apply special effects"""
    stats = item.get("stats") or {}
    parsed = ItemStats(
        id=item_id,
        name=item.get("name", ""),
        **{field: stats.get(key) for field, key in STAT_FIELDS.items()}
    )
    return apply_special_effects(item, parsed)


def apply_special_effects(item: Dict[str, Any], parsed: ItemStats) -> ItemStats:
    """
    Add passive values that the stats block doesn't carry

    Args:
        item: Raw item record
        parsed: Stats built from the record's stats block

    Returns:
        A copy of parsed with any matching special fields set, or parsed itself
    """
    name = item.get("name", "")
    effect = item.get("effect")

    if not effect:
        updates = NO_EFFECT_ITEMS.get(name)
        return parsed.model_copy(update=updates) if updates else parsed

    amount = effect.get("Effect1Amount")

    transform = SPECIAL_ITEMS.get(name)
    if transform is None:
        if any(fragment in name for fragment in SKIPPED_NAME_FRAGMENTS):
            return parsed
        transform = COLLOQ_ITEMS.get(item.get("colloq"))
    if transform is None:
        return parsed

    updates = transform(amount)
    logger.debug("Special effect for %s: %s", name, updates)
    return parsed.model_copy(update=updates)
