"""Origin name variants -> canonical display name.

Only country-level spellings are collapsed; entries naming a region or farm
are left untouched by the standardizer.
"""

ORIGINS: dict[str, str] = {
    "brazil": "Brazil",
    "brasil": "Brazil",
    "brazilian": "Brazil",
    "burundi": "Burundi",
    "colombia": "Colombia",
    "columbia": "Colombia",
    "colombian": "Colombia",
    "costa rica": "Costa Rica",
    "costarica": "Costa Rica",
    "dr congo": "DR Congo",
    "drc": "DR Congo",
    "democratic republic of the congo": "DR Congo",
    "ecuador": "Ecuador",
    "el salvador": "El Salvador",
    "salvador": "El Salvador",
    "ethiopia": "Ethiopia",
    "ethiopian": "Ethiopia",
    "ethopia": "Ethiopia",
    "ethiopa": "Ethiopia",
    "guatemala": "Guatemala",
    "guatamala": "Guatemala",
    "guatemalan": "Guatemala",
    "honduras": "Honduras",
    "india": "India",
    "indonesia": "Indonesia",
    "jamaica": "Jamaica",
    "kenya": "Kenya",
    "kenyan": "Kenya",
    "mexico": "Mexico",
    "méxico": "Mexico",
    "nicaragua": "Nicaragua",
    "panama": "Panama",
    "panamá": "Panama",
    "papua new guinea": "Papua New Guinea",
    "png": "Papua New Guinea",
    "peru": "Peru",
    "perú": "Peru",
    "rwanda": "Rwanda",
    "sumatra": "Sumatra",
    "tanzania": "Tanzania",
    "uganda": "Uganda",
    "vietnam": "Vietnam",
    "viet nam": "Vietnam",
    "yemen": "Yemen",
    "blend": "Blend",
    "multiple": "Blend",
    "various": "Blend",
}
