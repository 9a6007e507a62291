# Hand-tuned display order for the brand directory, keyed by backend brand id.
BRAND_PRIORITY_RANKS = {
    2: 1,
    1: 2,
    3: 3,
    4: 4,
    5: 5,
    14: 9999,
}

UNRANKED_BRAND_OFFSET = 100

OTHERS_BRAND_NAMES = frozenset({"اخرى", "أُخرى"})
OTHERS_BRAND_NAMES_EN = frozenset({"Others"})

MISSING_BRAND_NAME = "---"
