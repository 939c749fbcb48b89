"""
Display item materials - Minecraft material tags offered by the configuration picker.

A purchase may name any server material as its display item; this list only
covers the materials the picker offers. Lookup is case-insensitive so that
hand-written YAML (``displayItem: diamond_sword``) resolves to the same tag.
"""

from enum import Enum


class DisplayItem(str, Enum):
    """Material used to render a purchase in in-game menus."""

    DIAMOND = "DIAMOND"
    EMERALD = "EMERALD"
    GOLD_INGOT = "GOLD_INGOT"
    IRON_INGOT = "IRON_INGOT"
    COAL = "COAL"
    REDSTONE = "REDSTONE"
    LAPIS_LAZULI = "LAPIS_LAZULI"
    NETHERITE_INGOT = "NETHERITE_INGOT"
    BEDROCK = "BEDROCK"
    COBBLESTONE = "COBBLESTONE"
    STONE = "STONE"
    DIRT = "DIRT"
    GRASS_BLOCK = "GRASS_BLOCK"
    SAND = "SAND"
    GRAVEL = "GRAVEL"
    CLAY = "CLAY"
    OAK_LOG = "OAK_LOG"
    SPRUCE_LOG = "SPRUCE_LOG"
    BIRCH_LOG = "BIRCH_LOG"
    JUNGLE_LOG = "JUNGLE_LOG"
    ACACIA_LOG = "ACACIA_LOG"
    DARK_OAK_LOG = "DARK_OAK_LOG"
    DIAMOND_SWORD = "DIAMOND_SWORD"
    IRON_SWORD = "IRON_SWORD"
    GOLDEN_SWORD = "GOLDEN_SWORD"
    STONE_SWORD = "STONE_SWORD"
    WOODEN_SWORD = "WOODEN_SWORD"
    NETHERITE_SWORD = "NETHERITE_SWORD"
    DIAMOND_PICKAXE = "DIAMOND_PICKAXE"
    IRON_PICKAXE = "IRON_PICKAXE"
    GOLDEN_PICKAXE = "GOLDEN_PICKAXE"
    STONE_PICKAXE = "STONE_PICKAXE"
    WOODEN_PICKAXE = "WOODEN_PICKAXE"
    NETHERITE_PICKAXE = "NETHERITE_PICKAXE"
    DIAMOND_SHOVEL = "DIAMOND_SHOVEL"
    IRON_SHOVEL = "IRON_SHOVEL"
    GOLDEN_SHOVEL = "GOLDEN_SHOVEL"
    STONE_SHOVEL = "STONE_SHOVEL"
    WOODEN_SHOVEL = "WOODEN_SHOVEL"
    NETHERITE_SHOVEL = "NETHERITE_SHOVEL"
    DIAMOND_HELMET = "DIAMOND_HELMET"
    IRON_HELMET = "IRON_HELMET"
    GOLDEN_HELMET = "GOLDEN_HELMET"
    DIAMOND_CHESTPLATE = "DIAMOND_CHESTPLATE"
    IRON_CHESTPLATE = "IRON_CHESTPLATE"
    GOLDEN_CHESTPLATE = "GOLDEN_CHESTPLATE"
    NETHERITE_HELMET = "NETHERITE_HELMET"
    NETHERITE_CHESTPLATE = "NETHERITE_CHESTPLATE"
    NETHERITE_LEGGINGS = "NETHERITE_LEGGINGS"
    NETHERITE_BOOTS = "NETHERITE_BOOTS"
    IRON_LEGGINGS = "IRON_LEGGINGS"
    IRON_BOOTS = "IRON_BOOTS"
    DIAMOND_LEGGINGS = "DIAMOND_LEGGINGS"
    DIAMOND_BOOTS = "DIAMOND_BOOTS"
    DIAMOND_AXE = "DIAMOND_AXE"
    IRON_AXE = "IRON_AXE"
    GOLDEN_AXE = "GOLDEN_AXE"
    STONE_AXE = "STONE_AXE"
    WOODEN_AXE = "WOODEN_AXE"
    NETHERITE_AXE = "NETHERITE_AXE"
    ENDER_PEARL = "ENDER_PEARL"
    ENDER_EYE = "ENDER_EYE"
    ENDER_CHEST = "ENDER_CHEST"
    BEACON = "BEACON"
    NETHER_STAR = "NETHER_STAR"
    DRAGON_EGG = "DRAGON_EGG"
    TOTEM_OF_UNDYING = "TOTEM_OF_UNDYING"
    BOW = "BOW"
    ARROW = "ARROW"
    SPECTRAL_ARROW = "SPECTRAL_ARROW"
    TIPPED_ARROW = "TIPPED_ARROW"
    BOOK = "BOOK"
    ENCHANTED_BOOK = "ENCHANTED_BOOK"
    EXPERIENCE_BOTTLE = "EXPERIENCE_BOTTLE"
    GOLDEN_APPLE = "GOLDEN_APPLE"
    ENCHANTED_GOLDEN_APPLE = "ENCHANTED_GOLDEN_APPLE"
    POTION = "POTION"
    SPLASH_POTION = "SPLASH_POTION"
    COMPASS = "COMPASS"
    CLOCK = "CLOCK"
    MAP = "MAP"
    TORCH = "TORCH"
    LANTERN = "LANTERN"
    CHEST = "CHEST"
    TRAPPED_CHEST = "TRAPPED_CHEST"
    SHULKER_BOX = "SHULKER_BOX"
    CONDUIT = "CONDUIT"
    RESPAWN_ANCHOR = "RESPAWN_ANCHOR"
    TRIDENT = "TRIDENT"
    BLAZE_ROD = "BLAZE_ROD"
    BLAZE_POWDER = "BLAZE_POWDER"
    GHAST_TEAR = "GHAST_TEAR"
    MAGMA_CREAM = "MAGMA_CREAM"
    SLIME_BALL = "SLIME_BALL"
    GUNPOWDER = "GUNPOWDER"
    STRING = "STRING"
    FEATHER = "FEATHER"
    FLINT = "FLINT"
    CLAY_BALL = "CLAY_BALL"
    SNOWBALL = "SNOWBALL"
    EGG = "EGG"
    MILK_BUCKET = "MILK_BUCKET"
    WATER_BUCKET = "WATER_BUCKET"
    LAVA_BUCKET = "LAVA_BUCKET"
    BUCKET = "BUCKET"
    BREAD = "BREAD"
    COOKIE = "COOKIE"
    CAKE = "CAKE"
    PUMPKIN_PIE = "PUMPKIN_PIE"
    MELON_SLICE = "MELON_SLICE"
    APPLE = "APPLE"
    GOLDEN_CARROT = "GOLDEN_CARROT"
    COOKED_BEEF = "COOKED_BEEF"
    COOKED_CHICKEN = "COOKED_CHICKEN"
    COOKED_PORKCHOP = "COOKED_PORKCHOP"
    BEEF = "BEEF"
    CHICKEN = "CHICKEN"
    PORKCHOP = "PORKCHOP"
    HONEY_BOTTLE = "HONEY_BOTTLE"
    HONEYCOMB = "HONEYCOMB"
    SWEET_BERRIES = "SWEET_BERRIES"
    GLOW_BERRIES = "GLOW_BERRIES"
    CHORUS_FRUIT = "CHORUS_FRUIT"
    POPPED_CHORUS_FRUIT = "POPPED_CHORUS_FRUIT"
    DRIED_KELP = "DRIED_KELP"
    OBSIDIAN = "OBSIDIAN"
    GLASS = "GLASS"
    GLASS_PANE = "GLASS_PANE"
    WOOL = "WOOL"
    CARPET = "CARPET"
    BED = "BED"
    FURNACE = "FURNACE"
    CRAFTING_TABLE = "CRAFTING_TABLE"
    ANVIL = "ANVIL"
    ENCHANTING_TABLE = "ENCHANTING_TABLE"
    BOOKSHELF = "BOOKSHELF"
    PAINTING = "PAINTING"
    ITEM_FRAME = "ITEM_FRAME"
    ARMOR_STAND = "ARMOR_STAND"
    SIGN = "SIGN"
    LADDER = "LADDER"
    FENCE = "FENCE"
    FENCE_GATE = "FENCE_GATE"
    DOOR = "DOOR"
    TRAPDOOR = "TRAPDOOR"
    STAIRS = "STAIRS"
    SLAB = "SLAB"
    WALL = "WALL"
    BUTTON = "BUTTON"
    LEVER = "LEVER"
    PRESSURE_PLATE = "PRESSURE_PLATE"
    REDSTONE_TORCH = "REDSTONE_TORCH"
    REDSTONE_BLOCK = "REDSTONE_BLOCK"
    REPEATER = "REPEATER"
    COMPARATOR = "COMPARATOR"
    DISPENSER = "DISPENSER"
    DROPPER = "DROPPER"
    HOPPER = "HOPPER"
    PISTON = "PISTON"
    STICKY_PISTON = "STICKY_PISTON"
    OBSERVER = "OBSERVER"
    TARGET = "TARGET"
    DAYLIGHT_DETECTOR = "DAYLIGHT_DETECTOR"
    NOTE_BLOCK = "NOTE_BLOCK"
    JUKEBOX = "JUKEBOX"
    MUSIC_DISC = "MUSIC_DISC"
    RECORD_PLAYER = "RECORD_PLAYER"
    CAULDRON = "CAULDRON"
    BREWING_STAND = "BREWING_STAND"
    SPIDER_EYE = "SPIDER_EYE"
    FERMENTED_SPIDER_EYE = "FERMENTED_SPIDER_EYE"
    GLOWSTONE_DUST = "GLOWSTONE_DUST"
    GLOWSTONE = "GLOWSTONE"
    SEA_LANTERN = "SEA_LANTERN"
    END_ROD = "END_ROD"
    REDSTONE_LAMP = "REDSTONE_LAMP"
    CROSSBOW = "CROSSBOW"
    SHIELD = "SHIELD"
    ELYTRA = "ELYTRA"
    PHANTOM_MEMBRANE = "PHANTOM_MEMBRANE"
    TURTLE_HELMET = "TURTLE_HELMET"
    SCUTE = "SCUTE"
    NAUTILUS_SHELL = "NAUTILUS_SHELL"
    HEART_OF_THE_SEA = "HEART_OF_THE_SEA"
    SEA_PICKLE = "SEA_PICKLE"
    TROPICAL_FISH = "TROPICAL_FISH"
    PUFFERFISH = "PUFFERFISH"
    SALMON = "SALMON"
    COD = "COD"
    COOKED_SALMON = "COOKED_SALMON"
    COOKED_COD = "COOKED_COD"
    KELP = "KELP"
    SEAGRASS = "SEAGRASS"
    CORAL = "CORAL"
    CORAL_BLOCK = "CORAL_BLOCK"
    CORAL_FAN = "CORAL_FAN"
    DEAD_CORAL = "DEAD_CORAL"
    DEAD_CORAL_BLOCK = "DEAD_CORAL_BLOCK"
    DEAD_CORAL_FAN = "DEAD_CORAL_FAN"
    BRAIN_CORAL = "BRAIN_CORAL"
    BUBBLE_CORAL = "BUBBLE_CORAL"
    FIRE_CORAL = "FIRE_CORAL"
    HORN_CORAL = "HORN_CORAL"
    TUBE_CORAL = "TUBE_CORAL"
    BRAIN_CORAL_BLOCK = "BRAIN_CORAL_BLOCK"
    BUBBLE_CORAL_BLOCK = "BUBBLE_CORAL_BLOCK"
    FIRE_CORAL_BLOCK = "FIRE_CORAL_BLOCK"
    HORN_CORAL_BLOCK = "HORN_CORAL_BLOCK"
    TUBE_CORAL_BLOCK = "TUBE_CORAL_BLOCK"
    BRAIN_CORAL_FAN = "BRAIN_CORAL_FAN"
    BUBBLE_CORAL_FAN = "BUBBLE_CORAL_FAN"
    FIRE_CORAL_FAN = "FIRE_CORAL_FAN"
    HORN_CORAL_FAN = "HORN_CORAL_FAN"
    TUBE_CORAL_FAN = "TUBE_CORAL_FAN"
    DEAD_BRAIN_CORAL = "DEAD_BRAIN_CORAL"
    DEAD_BUBBLE_CORAL = "DEAD_BUBBLE_CORAL"
    DEAD_FIRE_CORAL = "DEAD_FIRE_CORAL"
    DEAD_HORN_CORAL = "DEAD_HORN_CORAL"
    DEAD_TUBE_CORAL = "DEAD_TUBE_CORAL"
    DEAD_BRAIN_CORAL_BLOCK = "DEAD_BRAIN_CORAL_BLOCK"
    DEAD_BUBBLE_CORAL_BLOCK = "DEAD_BUBBLE_CORAL_BLOCK"
    DEAD_FIRE_CORAL_BLOCK = "DEAD_FIRE_CORAL_BLOCK"
    DEAD_HORN_CORAL_BLOCK = "DEAD_HORN_CORAL_BLOCK"
    DEAD_TUBE_CORAL_BLOCK = "DEAD_TUBE_CORAL_BLOCK"
    DEAD_BRAIN_CORAL_FAN = "DEAD_BRAIN_CORAL_FAN"
    DEAD_BUBBLE_CORAL_FAN = "DEAD_BUBBLE_CORAL_FAN"
    DEAD_FIRE_CORAL_FAN = "DEAD_FIRE_CORAL_FAN"
    DEAD_HORN_CORAL_FAN = "DEAD_HORN_CORAL_FAN"
    DEAD_TUBE_CORAL_FAN = "DEAD_TUBE_CORAL_FAN"


_KNOWN_MATERIALS = frozenset(item.value for item in DisplayItem)


def is_known_material(name: str) -> bool:
    """True if the material is one the configuration picker offers."""
    return name.strip().upper() in _KNOWN_MATERIALS
