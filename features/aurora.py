"""
SPACEWATCH — Aurora visibility outlook by Kp.
"""

AURORA_TIERS = [
    # (min Kp, outlook, example locations)
    (7, "Extreme visibility, reaching southern regions.", ["Moscow", "Kazan", "Berlin", "Minsk"]),
    (5, "High probability at mid latitudes.", ["Saint Petersburg", "Helsinki", "Oslo", "Minsk"]),
    (3, "Possible at high latitudes.", ["Murmansk", "Tromsø", "Reykjavik"]),
]
POLAR_OUTLOOK = ("Visible in polar latitudes only.", ["Svalbard", "Severnaya Zemlya"])


def aurora_outlook(kp: float) -> dict:
    for min_kp, outlook, locations in AURORA_TIERS:
        if kp >= min_kp:
            return {"outlook": outlook, "locations": list(locations)}
    outlook, locations = POLAR_OUTLOOK
    return {"outlook": outlook, "locations": list(locations)}
