"""Data models for bean-board."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class Bean(BaseModel):
    """One coffee bean submission from the community spreadsheet.

    Every text attribute is kept as the raw cell string (never ``None``).
    Numeric-looking fields such as ``rating`` or ``price`` are parsed on
    demand by the filter, sort and stats engines.
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
    )

    id: int = Field(gt=0)
    bean_name: str = ""
    origin: str = ""
    caffeine: str = ""
    roast_level: str = ""
    roast_date: str = ""
    roaster: str = ""
    roaster_city: str = ""
    roaster_country: str = ""
    weight: str = ""
    currency: str = ""
    price: str = ""
    cost_per_100g: str = Field(default="", alias="costPer100g")
    cost_per_pound: str = ""
    tasting_notes: str = ""
    rating: str = ""
    product_url: str = ""
    time_rested: str = ""
    dose: str = ""
    shot_yield: str = Field(default="", alias="yield")
    brew_ratio: str = ""
    shot_time: str = ""
    espresso_machine: str = ""
    grinder: str = ""
    grind_setting: str = ""
    water_temperature: str = ""
    basket_specs: str = ""
    profile: str = ""
    additional_workflow: str = ""
    reddit_username: str = ""
