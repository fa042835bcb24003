"""Deadlock shop items and the match history item ids that point at them.

``SHOP`` lists every purchasable item once, by category, with its tier, stat
lines and a short description. ``ITEM_IDS`` maps the numeric ids seen in the
match history API (``items[].item_id``) onto shop names. Several ids map to
the same item: the game re-issued ids for a few items across patches and both
ids still show up in older matches. Shop items without a known id are still
listed on the items page and resolve images by name.
"""

from config import ITEM_IMAGE_BASE

TIER_COSTS = {1: 800, 2: 1600, 3: 3200, 4: 6400}

SHOP: dict[str, list[dict]] = {
    "weapon": [
        # Tier I
        {"name": "Close Quarters", "tier": 1, "stats": ["+6 Bullet Armor", "+14% Bullet Resist", "+6% Bullet Lifesteal", "+7% Melee Damage"], "description": "Better close range fighting and bullet resistance."},
        {"name": "Basic Magazine", "tier": 1, "stats": ["+26% Ammo", "+15% Reload Time"], "description": "Increases the weapon's magazine size."},
        {"name": "Headshot Booster", "tier": 1, "stats": ["+40% Headshot Damage"], "description": "Greatly increases headshot damage."},
        {"name": "High-Velocity Mag", "tier": 1, "stats": ["+20% Bullet Velocity", "+15% Bullet Armor Penetration", "+1m Bullet Range"], "description": "Faster bullets that punch through armor."},
        {"name": "Monster Rounds", "tier": 1, "stats": ["+30% Bullet Damage vs Creeps", "+30% Ability Damage vs Creeps"], "description": "Extra damage against creeps."},
        {"name": "Rapid Rounds", "tier": 1, "stats": ["+13% Fire Rate", "+10% Bullet Velocity"], "description": "Increases fire rate and bullet velocity."},
        {"name": "Restorative Shot", "tier": 1, "stats": ["+8% Bullet Lifesteal", "+60 Health on Hero Kill"], "description": "Bullet lifesteal plus a heal on kills."},
        # Tier II
        {"name": "Active Reload", "tier": 2, "stats": ["+15% Reload Speed", "First bullet after a reload gets +25% Fire Rate"], "description": "Well-timed reloads grant bonus damage."},
        {"name": "Backstabber", "tier": 2, "stats": ["+10% Fire Rate", "+35% Bullet Damage when hitting enemies from behind"], "description": "Bonus damage when shooting from behind."},
        {"name": "Slowing Bullets", "tier": 2, "stats": ["+1 m/s Move Speed", "Bullets apply a 35% slow for 2.5s"], "description": "Move faster and slow enemies you hit."},
        {"name": "Intensifying Magazine", "tier": 2, "stats": ["+18% Fire Rate", "+15% Reload Speed", "Damage ramps up on consecutive hits (max 35%)"], "description": "Damage grows the longer you keep hitting."},
        {"name": "Kinetic Dash", "tier": 2, "stats": ["+10% Fire Rate", "Next melee after a dash deals +70% damage"], "description": "Empowers your melee after a dash."},
        {"name": "Long Range", "tier": 2, "stats": ["+15% Fire Rate", "+10m Bullet Range"], "description": "Improves long range fighting."},
        {"name": "Melee Charge", "tier": 2, "stats": ["+10% Fire Rate", "+7% Melee Damage", "Melee attacks lunge 5m forward"], "description": "Adds a lunge to melee attacks."},
        {"name": "Mystic Shot", "tier": 2, "stats": ["+6% Fire Rate", "Bullets deal +1 damage per 0.6 Spirit Power"], "description": "Bullet damage scales with spirit power."},
        {"name": "Fleetfoot", "tier": 2, "stats": ["+12% Fire Rate", "+1 m/s Move Speed"], "description": "Raises fire rate and move speed together."},
        {"name": "Concussive Rounds", "tier": 2, "stats": ["+15% Fire Rate", "Bullets apply a 35% slow for 2.5s"], "description": "Bullets slow enemies."},
        {"name": "Spirit Shredder Bullets", "tier": 2, "stats": ["+6% Fire Rate", "Hits apply -12% Spirit Resist for 6s"], "description": "Lowers the enemy's spirit resistance."},
        {"name": "Split Shot", "tier": 2, "stats": ["Bullets split in two (split bullets deal -35% damage)"], "description": "Split bullets hit several targets."},
        {"name": "Swift Striker", "tier": 2, "stats": ["+6% Fire Rate", "+15% Fire Rate Growth"], "description": "Improves fire rate growth."},
        {"name": "Titanic Magazine", "tier": 2, "stats": ["+85% Ammo", "-17% Fire Rate Growth"], "description": "Huge magazine at the cost of fire rate growth."},
        {"name": "Weakening Headshot", "tier": 2, "stats": ["+6% Fire Rate", "Headshots reduce enemy damage by 40% for 4s"], "description": "Headshots weaken the enemy's damage."},
        {"name": "Pristine Emblem", "tier": 2, "stats": ["+6% Fire Rate", "+20% Weapon Damage vs enemies above 50% health"], "description": "Bonus damage against healthy targets."},
        # Tier III
        {"name": "Alchemical Fire", "tier": 3, "stats": ["+60 DPS", "3.5s"], "description": "Sets enemies on fire for damage over time."},
        {"name": "Berserker", "tier": 3, "stats": ["Up to +70% Fire Rate at low health"], "description": "Deals more damage the lower your health."},
        {"name": "Blood Tribute", "tier": 3, "stats": ["125 damage to enemies within 15m on kill"], "description": "Hero kills explode on nearby enemies."},
        {"name": "Burst Fire", "tier": 3, "stats": ["3-round burst mode", "+6% Fire Rate"], "description": "Adds a fast three-round burst mode."},
        {"name": "Quickdraw Rounds", "tier": 3, "stats": ["+20% Fire Rate Growth", "+1.5 m/s Move Speed"], "description": "Raises fire rate growth and move speed."},
        {"name": "Headhunter", "tier": 3, "stats": ["+140 bonus damage on headshot", "Pierces enemies"], "description": "Heavy bonus damage and piercing on headshots."},
        {"name": "Hero's Aura", "tier": 3, "stats": ["+20% Fire Rate to nearby heroes"], "description": "Raises the fire rate of nearby allies."},
        {"name": "Hollow Point", "tier": 3, "stats": ["Pierces enemies, +35% damage to the target behind"], "description": "Bullets pass through for chained damage."},
        {"name": "Hunter's Aura", "tier": 3, "stats": ["+12 m/s Bullet Velocity to nearby heroes", "+15m Bullet Range"], "description": "Extends range and bullet velocity of nearby allies."},
        {"name": "Point Blank", "tier": 3, "stats": ["+35% Bullet Damage within 15m"], "description": "Deadly damage at close range."},
        {"name": "Sharpshooter", "tier": 3, "stats": ["+65% Bullet Damage beyond 30m"], "description": "Bonus damage on long range shots."},
        {"name": "Spirit Rend", "tier": 3, "stats": ["Headshots reduce ability cooldowns by 3s"], "description": "Headshots shorten ability cooldowns."},
        {"name": "Tesla Bullets", "tier": 3, "stats": ["Bullets chain to 2 nearby enemies", "Chained enemies take -40% damage"], "description": "Electric shocks chain between nearby enemies."},
        {"name": "Toxic Bullets", "tier": 3, "stats": ["80 DPS", "3s"], "description": "Poison deals damage over time."},
        {"name": "Heavy Rounds", "tier": 3, "stats": ["Bullets knock enemies back", "+20% Bullet Damage"], "description": "Heavy hits push enemies back for bonus damage."},
        # Tier IV
        {"name": "Armor Piercing Rounds", "tier": 4, "stats": ["+100% Bullet Armor Penetration", "+40% Bullet Damage"], "description": "Rounds that ignore all armor."},
        {"name": "Capacitor", "tier": 4, "stats": ["220 electric damage every 5s", "7m radius"], "description": "Periodically discharges around you."},
        {"name": "Crippling Headshot", "tier": 4, "stats": ["Headshots silence for 4s"], "description": "Headshots silence the enemy."},
        {"name": "Crushing Fists", "tier": 4, "stats": ["Melee hits create an 8m shockwave", "+35% Melee Damage"], "description": "Melee attacks send out a shockwave."},
        {"name": "Frenzy", "tier": 4, "stats": ["+40% Fire Rate Growth on hero kill", "+40% Move Speed"], "description": "Hero kills max out attack and move speed."},
        {"name": "Glass Cannon", "tier": 4, "stats": ["+70% Bullet Damage", "-15% Bullet Resist", "-15% Spirit Resist"], "description": "Maximum damage with weaker defenses."},
        {"name": "Lucky Shot", "tier": 4, "stats": ["35% chance for +120% Bullet Damage"], "description": "Chance to deal critical damage."},
    ],
    "vitality": [
        # Tier I
        {"name": "Extra Health", "tier": 1, "stats": ["+125 Max Health"], "description": "Increases maximum health."},
        {"name": "Extra Regen", "tier": 1, "stats": ["+2.5 Health Regen"], "description": "Increases health regeneration."},
        {"name": "Extra Stamina", "tier": 1, "stats": ["+1 Stamina", "+15% Stamina Recovery"], "description": "More stamina and faster recovery."},
        {"name": "Healing Rite", "tier": 1, "stats": ["Active: heal 335 and +11 Health Regen for 11s"], "description": "Instant heal followed by regeneration."},
        {"name": "Melee Lifesteal", "tier": 1, "stats": ["+12% Melee Damage", "+24% Melee Heal"], "description": "Melee attacks heal you."},
        {"name": "Counterstrike", "tier": 1, "stats": ["+75 Max Health", "Enemies take 40 damage when they melee you"], "description": "Punishes enemies that melee you."},
        {"name": "Sprint Boots", "tier": 1, "stats": ["+1 m/s Move Speed", "+75 Max Health"], "description": "Move speed and health together."},
        # Tier II
        {"name": "Bulwark", "tier": 2, "stats": ["+175 Max Health", "+3 Health Regen", "+15% Bullet Resist"], "description": "Health, regen and bullet resist in one item."},
        {"name": "Bullet Armor", "tier": 2, "stats": ["+18% Bullet Resist"], "description": "Reduces incoming bullet damage."},
        {"name": "Spirit Armor", "tier": 2, "stats": ["+18% Spirit Resist"], "description": "Reduces incoming spirit damage."},
        {"name": "Bullet Lifesteal", "tier": 2, "stats": ["+8% Bullet Lifesteal", "+75 Max Health"], "description": "Bullets heal you."},
        {"name": "Debuff Reducer", "tier": 2, "stats": ["+125 Max Health", "+3 Health Regen", "-30% Debuff Duration"], "description": "Shortens debuffs on you."},
        {"name": "Spirit Warden", "tier": 2, "stats": ["+125 Max Health", "+8 Spirit Power", "+2.5 Health Regen", "+0.3 Spirit Regen"], "description": "Raises health and spirit power together."},
        {"name": "Enduring Speed", "tier": 2, "stats": ["+125 Max Health", "+1.5 m/s Move Speed", "+25% Stamina Recovery"], "description": "Better endurance and mobility."},
        {"name": "Healbane", "tier": 2, "stats": ["+125 Max Health", "+8% Bullet Lifesteal", "Hits apply -65% Healing for 6s"], "description": "Cuts enemy healing."},
        {"name": "Healing Booster", "tier": 2, "stats": ["+125 Max Health", "+30% Healing", "+15% Health Regen"], "description": "Boosts every source of healing."},
        {"name": "Improved Stamina", "tier": 2, "stats": ["+125 Max Health", "+2 Stamina", "+25% Stamina Recovery", "+2 m/s Slide Distance"], "description": "Much better stamina and mobility."},
        {"name": "Return Fire", "tier": 2, "stats": ["+125 Max Health", "+8% Bullet Lifesteal", "Attackers take reflected damage"], "description": "Reflects damage back at attackers."},
        {"name": "Spirit Lifesteal", "tier": 2, "stats": ["+125 Max Health", "+8 Spirit Power", "+8% Spirit Lifesteal"], "description": "Spirit damage heals you."},
        {"name": "Battle Vest", "tier": 2, "stats": ["+11 Bullet Armor", "+11 Spirit Resist", "+2.5 Health Regen"], "description": "Protection against bullets and spirit."},
        # Tier III
        {"name": "Improved Bullet Armor", "tier": 3, "stats": ["+20 Bullet Armor", "+250 Max Health", "+20% Bullet Resist"], "description": "Strong resistance to bullet damage."},
        {"name": "Rallying Cry", "tier": 3, "stats": ["+250 Max Health", "+3 m/s Move Speed", "+50% Slide Distance", "Active: move speed buff for nearby allies"], "description": "Speeds up the whole team."},
        {"name": "Debuff Remover", "tier": 3, "stats": ["+250 Max Health", "+5 Health Regen", "Active: purge all debuffs and become immune for 3s"], "description": "Removes debuffs and grants brief immunity."},
        {"name": "Fortitude", "tier": 3, "stats": ["+425 Max Health", "+14 Spirit Resist", "+20% Debuff Resist"], "description": "Big health pool and debuff resistance."},
        {"name": "Lifestrike", "tier": 3, "stats": ["+250 Max Health", "+12% Bullet Lifesteal", "+12% Spirit Lifesteal", "Full heal on kill"], "description": "Hero kills fully heal you."},
        {"name": "Majestic Leap", "tier": 3, "stats": ["+250 Max Health", "+1 m/s Move Speed", "Active: leap high, damage and slow on landing"], "description": "A powerful jump attack."},
        {"name": "Metal Skin", "tier": 3, "stats": ["+250 Max Health", "+8 Health Regen", "Active: immune to damage for 4s (60s cooldown)"], "description": "Brief full damage immunity."},
        {"name": "Rescue Beam", "tier": 3, "stats": ["+200 Max Health", "+15 Spirit Power", "Active on ally: pull them to you and heal 250"], "description": "Saves an ally in danger."},
        {"name": "Improved Spirit Armor", "tier": 3, "stats": ["+20 Spirit Resist", "+250 Max Health", "+20% Spirit Resist"], "description": "Strong resistance to spirit damage."},
        {"name": "Superior Stamina", "tier": 3, "stats": ["+250 Max Health", "+4 Stamina", "+100% Stamina Recovery", "+4 m/s Slide Distance", "+25% Dash Distance"], "description": "Maximum stamina and mobility."},
        {"name": "Warp Stone", "tier": 3, "stats": ["+200 Max Health", "+4 Health Regen", "Active: short teleport (23s cooldown)"], "description": "Teleport out of danger."},
        # Tier IV
        {"name": "Colossus", "tier": 4, "stats": ["+1000 Max Health", "+20% Bullet Resist", "+20% Spirit Resist", "+4 m/s Move Speed", "Active: grow giant for 18s"], "description": "Huge health and resistances, with a giant form active."},
        {"name": "Juggernaut", "tier": 4, "stats": ["+500 Max Health", "+40% Bullet Resist", "+40% Spirit Resist", "Active: slow immunity and bonus move speed for 14s"], "description": "Heavy defenses with unstoppable movement."},
        {"name": "Leech", "tier": 4, "stats": ["+350 Max Health", "+35% Bullet Lifesteal", "+35% Spirit Lifesteal", "Lifesteal shared with nearby allies"], "description": "Strong lifesteal shared with the team."},
        {"name": "Phantom Strike", "tier": 4, "stats": ["+300 Max Health", "+15 Spirit Power", "Active: teleport to an enemy, silence and damage (35s cooldown)"], "description": "Teleport onto an enemy for a strong attack."},
        {"name": "Unstoppable", "tier": 4, "stats": ["+400 Max Health", "+8 Health Regen", "Active: immune to debuffs and slows for 6s"], "description": "Nothing can stop you."},
    ],
    "spirit": [
        # Tier I
        {"name": "Extra Charge", "tier": 1, "stats": ["+1 Ability Charge"], "description": "One more ability charge."},
        {"name": "Extra Spirit", "tier": 1, "stats": ["+6 Spirit Power"], "description": "Increases spirit power."},
        {"name": "Mystic Burst", "tier": 1, "stats": ["+4 Spirit Power", "Ability hits deal 65 spirit damage around the target"], "description": "Abilities explode on hit."},
        {"name": "Mystic Reach", "tier": 1, "stats": ["+4 Spirit Power", "+15% Ability Range"], "description": "Increases ability range."},
        {"name": "Mystic Vulnerability", "tier": 1, "stats": ["+4 Spirit Power", "Ability hits apply -15% Spirit Resist for 7s"], "description": "Lowers enemy spirit resistance."},
        {"name": "Spirit Strike", "tier": 1, "stats": ["+4 Spirit Power", "Melee deals +32 spirit damage"], "description": "Adds spirit damage to melee."},
        {"name": "Infuser", "tier": 1, "stats": ["+4 Spirit Power", "Active: +25% Spirit Lifesteal for 8s"], "description": "Short burst of spirit lifesteal."},
        # Tier II
        {"name": "Arcane Surge", "tier": 2, "stats": ["+8 Spirit Power", "+75 Max Health", "+3 m/s Move Speed for 4s after casting"], "description": "Casting grants a burst of speed."},
        {"name": "Bullet Resist Shredder", "tier": 2, "stats": ["+8 Spirit Power", "+75 Max Health", "Ability hits apply -24% Bullet Resist for 6s"], "description": "Lowers enemy bullet resistance."},
        {"name": "Cold Front", "tier": 2, "stats": ["+8 Spirit Power", "+75 Max Health", "Ability hits apply a 40% slow for 3s"], "description": "Abilities slow enemies."},
        {"name": "Improved Cooldown", "tier": 2, "stats": ["+8 Spirit Power", "+75 Max Health", "-12% Ability Cooldown"], "description": "Shortens ability cooldowns."},
        {"name": "Duration Extender", "tier": 2, "stats": ["+8 Spirit Power", "+75 Max Health", "+25% Ability Duration"], "description": "Abilities last longer."},
        {"name": "Improved Spirit", "tier": 2, "stats": ["+12 Spirit Power", "+75 Max Health"], "description": "Large spirit power boost."},
        {"name": "Mystic Slow", "tier": 2, "stats": ["+8 Spirit Power", "+75 Max Health", "Ability hits apply a 35% slow for 2.5s"], "description": "Abilities slow enemies."},
        {"name": "Quicksilver Reload", "tier": 2, "stats": ["+8 Spirit Power", "+75 Max Health", "Casting an ability instantly reloads"], "description": "Abilities refill your magazine."},
        {"name": "Slowing Hex", "tier": 2, "stats": ["+8 Spirit Power", "+75 Max Health", "Active: -3 m/s Move Speed on an enemy for 3s"], "description": "Slows a target enemy."},
        {"name": "Suppressor", "tier": 2, "stats": ["+8 Spirit Power", "+75 Max Health", "Ability hits apply -30% Fire Rate for 5s"], "description": "Weakens enemy fire rate."},
        {"name": "Improved Reach", "tier": 2, "stats": ["+8 Spirit Power", "+75 Max Health", "+25% Ability Range"], "description": "Further increases ability range."},
        {"name": "Improved Burst", "tier": 2, "stats": ["+8 Spirit Power", "+75 Max Health", "Ability hits deal 100 spirit damage around the target"], "description": "Bigger explosions on ability hits."},
        {"name": "Withering Whip", "tier": 2, "stats": ["+8 Spirit Power", "+75 Max Health", "Active: -20% Fire Rate and -15% Bullet Resist on an enemy"], "description": "Cripples a single enemy."},
        # Tier III
        {"name": "Decay", "tier": 3, "stats": ["+16 Spirit Power", "+150 Max Health", "Ability hits deal damage over 6s"], "description": "Abilities deal damage over time."},
        {"name": "Disarming Hex", "tier": 3, "stats": ["+16 Spirit Power", "+150 Max Health", "Active: disarm and silence an enemy for 3.5s"], "description": "Disarms and silences a target."},
        {"name": "Superior Reach", "tier": 3, "stats": ["+16 Spirit Power", "+150 Max Health", "+40% Ability Range"], "description": "Greatly increases ability range."},
        {"name": "Knockdown", "tier": 3, "stats": ["+16 Spirit Power", "+150 Max Health", "Ability hits stun for 0.8s"], "description": "Abilities stun enemies."},
        {"name": "Rapid Recharge", "tier": 3, "stats": ["+16 Spirit Power", "+150 Max Health", "-35% Ability Cooldown"], "description": "Greatly shortens ability cooldowns."},
        {"name": "Silence Glyph", "tier": 3, "stats": ["+16 Spirit Power", "+150 Max Health", "Active: area silence for 3s"], "description": "Silences enemies in an area."},
        {"name": "Superior Cooldown", "tier": 3, "stats": ["+20 Spirit Power", "+150 Max Health", "-45% Ability Cooldown"], "description": "Maximum cooldown reduction."},
        {"name": "Superior Duration", "tier": 3, "stats": ["+20 Spirit Power", "+150 Max Health", "+50% Ability Duration"], "description": "Maximum ability duration."},
        {"name": "Surge of Power", "tier": 3, "stats": ["+20 Spirit Power", "+150 Max Health", "+40 Spirit Power for 6s after casting"], "description": "Casting briefly spikes spirit power."},
        {"name": "Torment Pulse", "tier": 3, "stats": ["+20 Spirit Power", "+150 Max Health", "Continuous spirit damage to nearby enemies"], "description": "Pulses damage at nearby enemies."},
        {"name": "Magic Carpet", "tier": 3, "stats": ["+16 Spirit Power", "+150 Max Health", "Active: fly on a carpet with +3 m/s Move Speed"], "description": "Summons a carpet to ride."},
        # Tier IV
        {"name": "Boundless Spirit", "tier": 4, "stats": ["+40 Spirit Power", "+300 Max Health", "-60% Ability Cooldown"], "description": "Maximum spirit power and cooldown reduction."},
        {"name": "Curse", "tier": 4, "stats": ["+30 Spirit Power", "+200 Max Health", "Active: silence, disarm and slow an enemy for 3.5s"], "description": "Completely shuts down a target."},
        {"name": "Echo Shard", "tier": 4, "stats": ["+25 Spirit Power", "+200 Max Health", "Active: cast your last ability again (25s cooldown)"], "description": "Casts a spirit ability twice."},
        {"name": "Escalating Exposure", "tier": 4, "stats": ["+25 Spirit Power", "+200 Max Health", "Hits stack increasing damage taken"], "description": "Damage builds up with every hit."},
        {"name": "Ethereal Shift", "tier": 4, "stats": ["+25 Spirit Power", "+200 Max Health", "Active: invulnerable for 3s"], "description": "Become briefly invulnerable."},
        {"name": "Mystic Reverb", "tier": 4, "stats": ["+35 Spirit Power", "+200 Max Health", "+50% Spirit Damage", "Abilities spread to nearby enemies"], "description": "Abilities chain to nearby enemies."},
        {"name": "Refresher", "tier": 4, "stats": ["+20 Spirit Power", "+200 Max Health", "Active: reset all ability cooldowns"], "description": "Makes every ability ready again."},
    ],
}

# (id, shop name)
ITEM_IDS: list[tuple[int, str]] = [
    # --- Weapon ---
    (715762406, "Basic Magazine"),
    (1342610602, "Close Quarters"),
    (1437614329, "Headshot Booster"),
    (2712976700, "Headshot Booster"),
    (4247951502, "Monster Rounds"),
    (2464663797, "Rapid Rounds"),
    (2789634532, "Restorative Shot"),
    (2460791803, "Active Reload"),
    (1458044103, "Kinetic Dash"),
    (1835738020, "Melee Charge"),
    (3977876567, "Titanic Magazine"),
    (865846625, "Pristine Emblem"),
    (2829779411, "Spirit Shredder Bullets"),
    (1292979587, "Sharpshooter"),
    (339443430, "Berserker"),
    (3812615317, "Tesla Bullets"),
    (2502493491, "Toxic Bullets"),
    (3196218460, "Crippling Headshot"),
    (3731635960, "Glass Cannon"),
    (1976701714, "Lucky Shot"),
    # --- Vitality ---
    (1537272748, "Extra Health"),
    (968099481, "Extra Health"),
    (2863754076, "Extra Regen"),
    (2678489038, "Extra Regen"),
    (3675059374, "Extra Stamina"),
    (2598983158, "Sprint Boots"),
    (3730717068, "Healing Rite"),
    (395867183, "Melee Lifesteal"),
    (3970837787, "Spirit Armor"),
    (3791587546, "Bullet Armor"),
    (1673325555, "Spirit Lifesteal"),
    (2081037738, "Improved Bullet Armor"),
    (2407033488, "Improved Spirit Armor"),
    (2010028114, "Majestic Leap"),
    (2617435668, "Metal Skin"),
    (1055679805, "Lifestrike"),
    (465043967, "Colossus"),
    (1414319208, "Leech"),
    # --- Spirit ---
    (2095565695, "Extra Spirit"),
    (380806748, "Extra Spirit"),
    (1282141666, "Mystic Burst"),
    (3677653320, "Spirit Strike"),
    (811521119, "Spirit Strike"),
    (3612042342, "Mystic Vulnerability"),
    (3574779418, "Infuser"),
    (3702319013, "Cold Front"),
    (3754524659, "Improved Cooldown"),
    (3005970438, "Improved Reach"),
    (2820116164, "Improved Burst"),
    (3357231760, "Improved Spirit"),
    (3270001687, "Quicksilver Reload"),
    (2800629741, "Withering Whip"),
    (859037655, "Decay"),
    (1656913918, "Superior Cooldown"),
    (3147316197, "Superior Duration"),
    (2717651715, "Magic Carpet"),
    (600033864, "Escalating Exposure"),
    (673001892, "Ethereal Shift"),
    (1378931225, "Ethereal Shift"),
    (3616634328, "Boundless Spirit"),
    (2480592370, "Echo Shard"),
    (3642273386, "Mystic Reverb"),
]

# The CDN has no art for these items; they borrow another item's image.
IMAGE_OVERRIDES: dict[str, str] = {
    "Leech": "weapon/toxic_bullets",
    "Sharpshooter": "weapon/headshot_booster",
    "Bullet Armor": "vitality/extra_health",
    "Improved Bullet Armor": "vitality/metal_skin",
    "Spirit Armor": "vitality/spirit_lifesteal",
    "Improved Spirit Armor": "vitality/metal_skin",
}

DEFAULT_ITEM_IMAGE = f"{ITEM_IMAGE_BASE}/weapon/basic_magazine.webp"


def image_url(path: str) -> str:
    return f"{ITEM_IMAGE_BASE}/{path}.webp"
