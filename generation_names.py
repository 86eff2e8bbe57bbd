# generation_names.py
# Friendly, deterministic names for a seed ("Cozy Bloom", ...)

ADJECTIVES = [
    "Cozy", "Sunny", "Autumn", "Spring", "Meadow", "Garden", "Cottage", "Vintage",
    "Velvet", "Honey", "Maple", "Lavender", "Rosy", "Misty", "Golden", "Silver",
    "Willow", "Berry", "Clover", "Daisy", "Buttercup", "Bluebell", "Thistle",
    "Pebble", "Mossy", "Fern", "Coral", "Sunset", "Dawn", "Twilight", "Starry",
    "Rustic", "Country", "Farmhouse", "Patchwork", "Quilted", "Stitched",
    "Woven", "Braided", "Knotted", "Folded", "Gathered", "Ruffled", "Pleated",
    "Snug", "Warm", "Soft", "Gentle", "Sweet", "Lovely", "Cheerful", "Bright",
]

NOUNS = [
    "Bloom", "Patch", "Stitch", "Thread", "Basket", "Bouquet", "Garden",
    "Meadow", "Cottage", "Hearth", "Nest", "Nook", "Haven", "Retreat",
    "Sunrise", "Sunset", "Rainbow", "Breeze", "Stream", "Petal", "Leaf",
    "Blossom", "Rosebud", "Acorn", "Pinecone", "Feather", "Pebble", "Shell",
    "Quilt", "Blanket", "Throw", "Wrap", "Square", "Diamond", "Star",
    "Heart", "Bow", "Ribbon", "Button", "Bobbin", "Thimble", "Needle",
    "Dream", "Wish", "Song", "Dance", "Story", "Memory", "Treasure",
]


def generate_name(seed: int) -> str:
    seed = abs(int(seed))
    adj = ADJECTIVES[seed % len(ADJECTIVES)]
    noun = NOUNS[(seed // len(ADJECTIVES)) % len(NOUNS)]
    return f"{adj} {noun}"
