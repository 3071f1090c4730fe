"""Reference data for profile record classification.

Key sets decide which group a stored text record lands in, and the sort
tables give each well-known key a display rank inside its group. All lookups
are exact; only the sort lookup lowercases the key first.
"""

# Text keys shown in the general section of a profile.
GENERAL_RECORD_KEYS = (
    "name",
    "description",
    "url",
    "location",
    "email",
    "keywords",
    "notice",
    "timezone",
)

# Text keys that identify an account on a social platform.
SOCIAL_RECORD_KEYS = (
    "com.twitter",
    "com.github",
    "com.discord",
    "com.reddit",
    "org.telegram",
    "com.linkedin",
)

# Display rank per group for recognised keys (keys are lowercase).
SORT_VALUES = {
    "media": {
        "avatar": 1,
        "banner": 2,
    },
    "general": {
        "name": 101,
        "description": 102,
        "url": 103,
        "location": 104,
        "email": 105,
        "timezone": 106,
        "keywords": 107,
        "notice": 108,
    },
    "social": {
        "com.twitter": 201,
        "com.github": 202,
        "com.discord": 203,
        "com.reddit": 204,
        "org.telegram": 205,
        "com.linkedin": 206,
    },
    "address": {
        "eth": 301,
        "btc": 302,
        "bnb": 303,
        "ltc": 304,
        "doge": 305,
        "sol": 306,
    },
    "website": {
        "ipfs": 401,
        "ipns": 402,
        "swarm": 403,
        "arweave": 404,
        "onion": 405,
        "onion3": 406,
        "skynet": 407,
    },
    "other": {
        "abi": 501,
    },
}

# Rank for keys missing from SORT_VALUES.
UNKNOWN_GROUP_RANK = {
    "media": 1,
    "general": 199,
    "social": 299,
    "address": 399,
    "website": 499,
    "other": 599,
    "custom": 999,
}
