"""Constants used across the conversion engine."""

# Grams in one unit of each mass unit that has no whole-multiplier path to grams
GRAMS_PER_OUNCE = 28.349523125
GRAMS_PER_TROY_OUNCE = 31.1035
GRAMS_PER_POUND = 453.59237
GRAMS_PER_STONE = 6350.29318
GRAMS_PER_SLUG = 14593.9029
GRAMS_PER_SHORT_TON = 907184.74

# Liters in one bridge unit of each volume ladder
LITERS_PER_CUBIC_DECIMETER = 1.0
LITERS_PER_CUBIC_FOOT = 28.3168
LITERS_PER_IMPERIAL_PINT = 0.568261
LITERS_PER_US_PINT = 0.473176
