# Caloric adjustment caps (fixed policy, not per-user).
MAX_DEFICIT_PERCENT = 0.20
MAX_DEFICIT_KCAL = 750.0
MAX_SURPLUS_PERCENT = 0.10
MAX_SURPLUS_KCAL = 500.0

# Sedentary non-exercise activity factor applied to BMR.
NEAT_MULTIPLIER = 1.2
WATER_L_PER_KG = 0.04

FAT_MINIMUM_G_PER_KG = 0.7
FAT_CALORIES_PERCENT = 0.35
# Deficit/TDEE ratio above which the aggressive protein row applies.
AGGRESSIVE_DEFICIT_SEVERITY = 0.25

CALORIES_PER_GRAM_CARB = 4.0
CALORIES_PER_GRAM_PROTEIN = 4.0
CALORIES_PER_GRAM_FAT = 9.0

# Produce: carbs per gram of food, and the share of total carbs it may supply.
FRUIT_CARBS_PERCENT_WEIGHT = 0.10
VEGGIE_CARBS_PERCENT_WEIGHT = 0.03
FRUIT_MAX_CARB_PERCENT = 0.30
VEGGIE_MAX_CARB_PERCENT = 0.10
FATBURNER_FRUIT_REDUCTION = 0.70

# Supplements: macro content per gram of powder.
MALTODEXTRIN_CARB_PERCENT = 0.96
WHEY_PROTEIN_PERCENT = 0.88
COLLAGEN_PROTEIN_PERCENT = 0.90

POINTS_GRANULARITY = 5
