"""Roaster name variants -> canonical display name."""

ROASTERS: dict[str, str] = {
    # Counter Culture
    "counter culture": "Counter Culture",
    "counterculture": "Counter Culture",
    "counter culture coffee": "Counter Culture",
    "counterculture coffee": "Counter Culture",
    "counter culture coffee co": "Counter Culture",
    "counterculture coffee co": "Counter Culture",
    "counter culter": "Counter Culture",
    # Stumptown
    "stumptown": "Stumptown",
    "stumptown coffee": "Stumptown",
    "stumptown coffee roasters": "Stumptown",
    "stumptown coffee roasting": "Stumptown",
    # Blue Bottle
    "blue bottle": "Blue Bottle",
    "blue bottle coffee": "Blue Bottle",
    "bluebottle": "Blue Bottle",
    "bluebottle coffee": "Blue Bottle",
    # Intelligentsia
    "intelligentsia": "Intelligentsia",
    "intelligentsia coffee": "Intelligentsia",
    "intelligentsia coffee & tea": "Intelligentsia",
    # Perc
    "perc": "Perc",
    "perc coffee": "Perc",
    # Black & White
    "black & white": "Black & White",
    "black & white coffee": "Black & White",
    "black & white coffee roasters": "Black & White",
    "black and white": "Black & White",
    # Verve
    "verve": "Verve",
    "verve coffee": "Verve",
    "verve coffee roasters": "Verve",
    # Onyx
    "onyx": "Onyx",
    "onyx coffee": "Onyx",
    "onyx coffee lab": "Onyx",
    # Café du Jour
    "cafe du jour": "Café du Jour",
    "cafedujour": "Café du Jour",
}
