"""Regex patterns for action labels found in hand records."""

import re

# Blinds and antes
# "posts small blind", "posts a small blind", "post_small_blind"
POST_SMALL_BLIND = re.compile(r'^posts?[\s_]+(?:a\s+)?(?:missing\s+)?small[\s_]+blind$', re.IGNORECASE)
POST_BIG_BLIND = re.compile(r'^posts?[\s_]+(?:a\s+)?(?:missing\s+)?big[\s_]+blind$', re.IGNORECASE)
# A bare "posts" is how antes are recorded
POST_ANTE = re.compile(r'^posts?(?:[\s_]+(?:an?\s+)?ante)?$', re.IGNORECASE)

# Voluntary actions: "bets" / "bet", "raises" / "raise", ...
BET = re.compile(r'^bets?$', re.IGNORECASE)
RAISE = re.compile(r'^raises?$', re.IGNORECASE)
CALL = re.compile(r'^calls?$', re.IGNORECASE)
FOLD = re.compile(r'^folds?$', re.IGNORECASE)
CHECK = re.compile(r'^checks?$', re.IGNORECASE)
