"""Static lookup tables for units, densities, aliases and per-100 g nutrition.

All tables are read-only mappings built once at import time. Iteration order
is insertion order and is relied on by the alias fuzzy scan and by the
static nutrition matcher.
"""

from types import MappingProxyType

from wellness_tracker.domain.nutrition import MacroProfile

REFERENCE_CUP_ML = 236.588
DEFAULT_DENSITY_G_PER_CUP = 100.0

MASS_UNITS = frozenset(
    {
        "g",
        "gram",
        "grams",
        "kg",
        "kilogram",
        "kilograms",
        "oz",
        "ounce",
        "ounces",
        "lb",
        "pound",
        "pounds",
    }
)

VOLUME_UNITS = frozenset(
    {
        "cup",
        "cups",
        "tbsp",
        "tbsps",
        "tablespoon",
        "tablespoons",
        "tsp",
        "tsps",
        "teaspoon",
        "teaspoons",
        "ml",
        "milliliter",
        "milliliters",
        "l",
        "liter",
        "liters",
        "fl oz",
        "fluid ounce",
        "fluid ounces",
    }
)

COUNT_UNITS = frozenset(
    {"count", "piece", "pieces", "whole", "large", "medium", "small"}
)

# Typical weight in grams of one whole item, keyed by raw phrase and canonical name.
FOOD_ITEM_WEIGHTS = MappingProxyType(
    {
        "egg": 50.0,
        "eggs": 50.0,
        "egg_whole": 50.0,
        "banana": 118.0,
        "bananas": 118.0,
        "apple": 182.0,
        "apples": 182.0,
        "orange": 131.0,
        "oranges": 131.0,
        "slice bread": 30.0,
        "slices bread": 30.0,
        "slice pizza": 100.0,
        "slices pizza": 100.0,
    }
)

# Volume units map to millilitres; mass and count units map to grams.
UNIT_CONVERSIONS = MappingProxyType(
    {
        "cup": 236.588,
        "cups": 236.588,
        "tbsp": 14.7868,
        "tbsps": 14.7868,
        "tablespoon": 14.7868,
        "tablespoons": 14.7868,
        "tsp": 4.92892,
        "tsps": 4.92892,
        "teaspoon": 4.92892,
        "teaspoons": 4.92892,
        "ml": 1.0,
        "milliliter": 1.0,
        "milliliters": 1.0,
        "l": 1000.0,
        "liter": 1000.0,
        "liters": 1000.0,
        "fl oz": 29.5735,
        "fluid ounce": 29.5735,
        "fluid ounces": 29.5735,
        "g": 1.0,
        "gram": 1.0,
        "grams": 1.0,
        "kg": 1000.0,
        "kilogram": 1000.0,
        "kilograms": 1000.0,
        "oz": 28.3495,
        "ounce": 28.3495,
        "ounces": 28.3495,
        "lb": 453.592,
        "pound": 453.592,
        "pounds": 453.592,
        "count": 1.0,
        "piece": 1.0,
        "pieces": 1.0,
        "slice": 1.0,
        "slices": 1.0,
        "whole": 1.0,
        "medium": 1.0,
        "large": 1.0,
        "small": 1.0,
        **FOOD_ITEM_WEIGHTS,
    }
)

# Grams per reference cup (236.588 ml).
FOOD_DENSITIES = MappingProxyType(
    {
        "rice": 158.0,
        "cooked rice": 158.0,
        "white rice": 158.0,
        "rice_white_cooked": 158.0,
        "brown rice": 195.0,
        "rice_brown_cooked": 195.0,
        "quinoa": 185.0,
        "cooked quinoa": 185.0,
        "quinoa_cooked": 185.0,
        "oats": 81.0,
        "oatmeal": 81.0,
        "rolled oats": 81.0,
        "oats_rolled": 81.0,
        "steel cut oats": 156.0,
        "oats_steel_cut": 156.0,
        "pasta": 105.0,
        "cooked pasta": 105.0,
        "spaghetti": 105.0,
        "penne": 105.0,
        "pasta_cooked": 105.0,
        "flour": 120.0,
        "all purpose flour": 120.0,
        "sugar": 200.0,
        "white sugar": 200.0,
        "sugar_white": 200.0,
        "brown sugar": 220.0,
        "honey": 340.0,
        "maple syrup": 322.0,
        "maple_syrup": 322.0,
        "milk": 244.0,
        "milk_whole": 244.0,
        "milk_skim": 245.0,
        "almond milk": 240.0,
        "milk_almond": 240.0,
        "soy milk": 240.0,
        "milk_soy": 240.0,
        "yogurt": 245.0,
        "yogurt_plain": 245.0,
        "greek yogurt": 245.0,
        "yogurt_greek": 245.0,
        "olive oil": 216.0,
        "olive_oil": 216.0,
        "vegetable oil": 218.0,
        "vegetable_oil": 218.0,
        "coconut oil": 218.0,
        "coconut_oil": 218.0,
        "butter": 227.0,
        "peanut butter": 258.0,
        "peanut_butter": 258.0,
        "almond butter": 258.0,
        "almond_butter": 258.0,
        "jam": 320.0,
        "jelly": 320.0,
        "salsa": 240.0,
        "tomato sauce": 245.0,
        "broth": 240.0,
        "stock": 240.0,
        "soup": 245.0,
        "cereal": 30.0,
        "granola": 120.0,
        "nuts": 120.0,
        "almonds": 143.0,
        "walnuts": 120.0,
        "cashews": 137.0,
        "peanuts": 146.0,
        "seeds": 140.0,
        "chia seeds": 168.0,
        "chia_seeds": 168.0,
        "flax seeds": 168.0,
        "flax_seeds": 168.0,
        "sunflower seeds": 140.0,
        "sunflower_seeds": 140.0,
        "pumpkin seeds": 129.0,
        "pumpkin_seeds": 129.0,
        "vegetables": 91.0,
        "broccoli": 91.0,
        "carrots": 128.0,
        "spinach": 30.0,
        "kale": 67.0,
        "lettuce": 36.0,
        "tomatoes": 149.0,
        "onions": 160.0,
        "peppers": 149.0,
        "bell_peppers": 149.0,
        "mushrooms": 70.0,
        "corn": 166.0,
        "peas": 134.0,
        "beans": 177.0,
        "black beans": 172.0,
        "beans_black": 172.0,
        "kidney beans": 177.0,
        "beans_kidney": 177.0,
        "chickpeas": 164.0,
        "lentils": 198.0,
        "tofu": 253.0,
        "tofu_firm": 253.0,
        "tempeh": 166.0,
        "cheese": 113.0,
        "cheddar": 113.0,
        "cheese_cheddar": 113.0,
        "mozzarella": 113.0,
        "cheese_mozzarella": 113.0,
        "parmesan": 100.0,
        "cheese_parmesan": 100.0,
        "cottage cheese": 226.0,
        "cheese_cottage": 226.0,
        "cream cheese": 232.0,
        "cheese_cream": 232.0,
        "sour cream": 230.0,
        "mayonnaise": 220.0,
        "ketchup": 240.0,
        "mustard": 240.0,
        "hot sauce": 240.0,
        "soy sauce": 255.0,
        "vinegar": 238.0,
        "lemon juice": 244.0,
        "lime juice": 244.0,
        "orange juice": 249.0,
        "apple juice": 248.0,
        "coffee": 240.0,
        "tea": 240.0,
        "water": 236.0,
    }
)

FOOD_ALIASES = MappingProxyType(
    {
        # Eggs
        "egg": "egg_whole",
        "eggs": "egg_whole",
        "whole egg": "egg_whole",
        "whole eggs": "egg_whole",
        "egg white": "egg_white",
        "egg whites": "egg_white",
        "egg yolk": "egg_yolk",
        "egg yolks": "egg_yolk",
        # Grains
        "rice": "rice_white_cooked",
        "white rice": "rice_white_cooked",
        "brown rice": "rice_brown_cooked",
        "quinoa": "quinoa_cooked",
        "oats": "oats_rolled",
        "oatmeal": "oats_rolled",
        "rolled oats": "oats_rolled",
        "steel cut oats": "oats_steel_cut",
        "pasta": "pasta_cooked",
        "spaghetti": "pasta_cooked",
        "penne": "pasta_cooked",
        "bread": "bread_white",
        "white bread": "bread_white",
        "whole wheat bread": "bread_whole_wheat",
        "toast": "bread_white",
        # Proteins
        "chicken": "chicken_breast",
        "chicken breast": "chicken_breast",
        "chicken thigh": "chicken_thigh",
        "turkey": "turkey_breast",
        "turkey breast": "turkey_breast",
        "beef": "beef_ground",
        "ground beef": "beef_ground",
        "steak": "beef_steak",
        "pork": "pork_chop",
        "pork chop": "pork_chop",
        "bacon": "bacon",
        "ham": "ham",
        "salmon": "salmon",
        "fish": "fish_generic",
        "tuna": "tuna",
        "shrimp": "shrimp",
        "tofu": "tofu_firm",
        "tempeh": "tempeh",
        "beans": "beans_black",
        "black beans": "beans_black",
        "kidney beans": "beans_kidney",
        "chickpeas": "chickpeas",
        "lentils": "lentils",
        # Vegetables
        "broccoli": "broccoli",
        "carrots": "carrots",
        "spinach": "spinach",
        "kale": "kale",
        "lettuce": "lettuce",
        "tomatoes": "tomatoes",
        "tomato": "tomatoes",
        "onions": "onions",
        "onion": "onions",
        "peppers": "bell_peppers",
        "bell pepper": "bell_peppers",
        "bell peppers": "bell_peppers",
        "mushrooms": "mushrooms",
        "mushroom": "mushrooms",
        "corn": "corn",
        "peas": "peas",
        # Fruits
        "banana": "banana",
        "bananas": "banana",
        "apple": "apple",
        "apples": "apple",
        "orange": "orange",
        "oranges": "orange",
        "strawberries": "strawberries",
        "strawberry": "strawberries",
        "blueberries": "blueberries",
        "blueberry": "blueberries",
        "grapes": "grapes",
        "grape": "grapes",
        "avocado": "avocado",
        "avocados": "avocado",
        # Dairy
        "milk": "milk_whole",
        "whole milk": "milk_whole",
        "skim milk": "milk_skim",
        "almond milk": "milk_almond",
        "soy milk": "milk_soy",
        "yogurt": "yogurt_plain",
        "greek yogurt": "yogurt_greek",
        "cheese": "cheese_cheddar",
        "cheddar": "cheese_cheddar",
        "mozzarella": "cheese_mozzarella",
        "parmesan": "cheese_parmesan",
        "cottage cheese": "cheese_cottage",
        "cream cheese": "cheese_cream",
        "butter": "butter",
        # Nuts and seeds
        "almonds": "almonds",
        "almond": "almonds",
        "walnuts": "walnuts",
        "walnut": "walnuts",
        "cashews": "cashews",
        "cashew": "cashews",
        "peanuts": "peanuts",
        "peanut": "peanuts",
        "peanut butter": "peanut_butter",
        "almond butter": "almond_butter",
        "chia seeds": "chia_seeds",
        "flax seeds": "flax_seeds",
        "sunflower seeds": "sunflower_seeds",
        "pumpkin seeds": "pumpkin_seeds",
        # Oils and fats
        "olive oil": "olive_oil",
        "vegetable oil": "vegetable_oil",
        "coconut oil": "coconut_oil",
        "mayonnaise": "mayonnaise",
        # Sweeteners
        "sugar": "sugar_white",
        "honey": "honey",
        "maple syrup": "maple_syrup",
        "jam": "jam",
        "jelly": "jelly",
    }
)

DEFAULT_PER_100G = MacroProfile(calories=200, protein=10, carbs=25, fats=8)

PER_100G_NUTRITION = MappingProxyType(
    {
        "chicken breast": MacroProfile(calories=165, protein=31, carbs=0, fats=3.6),
        "salmon": MacroProfile(calories=208, protein=25, carbs=0, fats=12),
        "rice": MacroProfile(calories=130, protein=2.7, carbs=28, fats=0.3),
        "broccoli": MacroProfile(calories=34, protein=2.8, carbs=7, fats=0.4),
        "banana": MacroProfile(calories=89, protein=1.1, carbs=23, fats=0.3),
        "apple": MacroProfile(calories=52, protein=0.3, carbs=14, fats=0.2),
        "oatmeal": MacroProfile(calories=68, protein=2.4, carbs=12, fats=1.4),
        "eggs": MacroProfile(calories=155, protein=13, carbs=1.1, fats=11),
        "milk": MacroProfile(calories=42, protein=3.4, carbs=5, fats=1),
        "bread": MacroProfile(calories=79, protein=3.1, carbs=15, fats=1),
        "pasta": MacroProfile(calories=131, protein=5, carbs=25, fats=1.1),
        "beef": MacroProfile(calories=250, protein=26, carbs=0, fats=15),
        "fish": MacroProfile(calories=206, protein=22, carbs=0, fats=12),
        "vegetables": MacroProfile(calories=25, protein=2, carbs=5, fats=0.2),
        "fruits": MacroProfile(calories=60, protein=0.5, carbs=15, fats=0.2),
        "salad": MacroProfile(calories=20, protein=1.5, carbs=4, fats=0.2),
        "soup": MacroProfile(calories=100, protein=5, carbs=15, fats=3),
        "sandwich": MacroProfile(calories=300, protein=15, carbs=35, fats=12),
        "pizza": MacroProfile(calories=266, protein=11, carbs=33, fats=10),
        "burger": MacroProfile(calories=354, protein=16, carbs=30, fats=17),
        "chicken": MacroProfile(calories=165, protein=31, carbs=0, fats=3.6),
        "turkey": MacroProfile(calories=189, protein=29, carbs=0, fats=7),
        "pork": MacroProfile(calories=242, protein=27, carbs=0, fats=14),
        "lamb": MacroProfile(calories=294, protein=25, carbs=0, fats=21),
        "tuna": MacroProfile(calories=144, protein=30, carbs=0, fats=0.5),
        "cod": MacroProfile(calories=82, protein=18, carbs=0, fats=0.7),
        "shrimp": MacroProfile(calories=99, protein=24, carbs=0.2, fats=0.3),
        "quinoa": MacroProfile(calories=120, protein=4.4, carbs=22, fats=1.9),
        "sweet potato": MacroProfile(calories=86, protein=1.6, carbs=20, fats=0.1),
        "potato": MacroProfile(calories=77, protein=2, carbs=17, fats=0.1),
        "carrots": MacroProfile(calories=41, protein=0.9, carbs=10, fats=0.2),
        "spinach": MacroProfile(calories=23, protein=2.9, carbs=3.6, fats=0.4),
        "kale": MacroProfile(calories=49, protein=4.3, carbs=8.8, fats=0.9),
        "avocado": MacroProfile(calories=160, protein=2, carbs=9, fats=15),
        "almonds": MacroProfile(calories=579, protein=21, carbs=22, fats=50),
        "peanuts": MacroProfile(calories=567, protein=26, carbs=16, fats=49),
        "yogurt": MacroProfile(calories=59, protein=10, carbs=3.6, fats=0.4),
        "cheese": MacroProfile(calories=113, protein=7, carbs=0.4, fats=9),
        "butter": MacroProfile(calories=717, protein=0.9, carbs=0.1, fats=81),
        "olive oil": MacroProfile(calories=884, protein=0, carbs=0, fats=100),
    }
)


def density_for(food_name: str) -> float:
    """Return grams per reference cup for a food, or the default density."""
    return FOOD_DENSITIES.get(food_name, DEFAULT_DENSITY_G_PER_CUP)


def per_item_grams(food_name: str) -> float | None:
    """Return the typical weight of one whole item of a food, if known."""
    return FOOD_ITEM_WEIGHTS.get(food_name)
