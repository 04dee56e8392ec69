"""Preset sample records for demonstrations and quick checks.

Each cupping preset carries both sensory scores and green-bean
measurements so it can be run through any of the three cupping callers.
Roast presets carry a roast log.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from cupping_lab.data.models import (
    CuppingAttributes,
    GreenBeanAttributes,
    Process,
    RoastParameters,
    RoastStyle,
    SampleInfo,
    Variety,
)


class SamplePreset(BaseModel):
    """A named cupping sample with its green-bean measurements."""

    name: str = Field(description="Short identifier for the preset")
    description: str = Field(description="Human-readable description")
    info: SampleInfo
    attributes: CuppingAttributes
    green: GreenBeanAttributes


class RoastPreset(BaseModel):
    """A named roast log."""

    name: str = Field(description="Short identifier for the preset")
    description: str = Field(description="Human-readable description")
    params: RoastParameters


ETHIOPIA_WASHED = SamplePreset(
    name="ethiopia_washed",
    description="Washed Yirgacheffe, specialty grade, clean and floral",
    info=SampleInfo(
        name="Yirgacheffe Lot 12",
        origin="Ethiopia",
        variety=Variety.arabica,
        process=Process.washed,
        roast_level=RoastStyle.light,
        altitude=2000,
        density=720,
        screen_size="17/18",
    ),
    attributes=CuppingAttributes(
        fragrance_aroma=8.75,
        flavor=8.75,
        aftertaste=8.5,
        acidity=8.75,
        body=8.25,
        balance=8.5,
        uniformity=10,
        clean_cup=10,
        sweetness=10,
        overall=8.75,
        defects=0,
    ),
    green=GreenBeanAttributes(moisture=10.5, defects_primary=0, defects_secondary=2),
)

BRAZIL_NATURAL = SamplePreset(
    name="brazil_natural",
    description="Natural Cerrado, commercial to premium, chocolate and nut",
    info=SampleInfo(
        name="Cerrado Natural 2",
        origin="Brazil",
        variety=Variety.arabica,
        process=Process.natural,
        roast_level=RoastStyle.medium,
        altitude=1100,
        density=680,
        screen_size="16/17",
    ),
    attributes=CuppingAttributes(
        fragrance_aroma=7.5,
        flavor=7.5,
        aftertaste=7.25,
        acidity=7.0,
        body=7.75,
        balance=7.5,
        uniformity=10,
        clean_cup=10,
        sweetness=10,
        overall=7.5,
        defects=0,
    ),
    green=GreenBeanAttributes(moisture=11.5, defects_primary=2, defects_secondary=6),
)

DEFECTIVE_LOT = SamplePreset(
    name="defective_lot",
    description="Poorly dried, unsorted lot with flat cup and visible defects",
    info=SampleInfo(
        name="Rejected Lot 40",
        origin="Unknown",
        variety=Variety.robusta,
        process=Process.natural,
        roast_level=RoastStyle.medium,
    ),
    attributes=CuppingAttributes(
        fragrance_aroma=5.0,
        flavor=4.5,
        aftertaste=4.5,
        acidity=3.5,
        body=3.5,
        balance=5.0,
        uniformity=6.0,
        clean_cup=4.0,
        sweetness=6.0,
        overall=4.5,
        defects=5,
    ),
    green=GreenBeanAttributes(moisture=13.5, defects_primary=8, defects_secondary=12),
)

CITY_ROAST = RoastPreset(
    name="city_roast",
    description="Medium roast with a well-paced development phase",
    params=RoastParameters(
        preheat_temp=180,
        charge_temp=200,
        first_crack_time=210,
        first_crack_temp=196,
        development_time=70,
        drop_temp=205,
        total_time=280,
        batch_size=350,
    ),
)

FULL_CITY = RoastPreset(
    name="full_city",
    description="Production batch taken into medium-dark with a long finish",
    params=RoastParameters(
        preheat_temp=185,
        charge_temp=205,
        first_crack_time=200,
        first_crack_temp=198,
        development_time=90,
        drop_temp=218,
        total_time=290,
        batch_size=600,
    ),
)

FRENCH_ROAST = RoastPreset(
    name="french_roast",
    description="Sample-roaster batch charged hot and dropped dark",
    params=RoastParameters(
        preheat_temp=200,
        charge_temp=225,
        first_crack_time=100,
        first_crack_temp=200,
        development_time=25,
        drop_temp=238,
        total_time=125,
        batch_size=80,
    ),
)

SAMPLES: dict[str, SamplePreset] = {
    "ethiopia_washed": ETHIOPIA_WASHED,
    "brazil_natural": BRAZIL_NATURAL,
    "defective_lot": DEFECTIVE_LOT,
}

ROASTS: dict[str, RoastPreset] = {
    "city_roast": CITY_ROAST,
    "full_city": FULL_CITY,
    "french_roast": FRENCH_ROAST,
}


def get_sample(name: str) -> SamplePreset:
    """Return the cupping preset for the given name.

    Raises
    ------
    KeyError
        If *name* does not match any registered preset.
    """
    try:
        return SAMPLES[name]
    except KeyError:
        available = ", ".join(sorted(SAMPLES.keys()))
        raise KeyError(
            f"Unknown sample '{name}'. Available samples: {available}"
        ) from None


def get_roast(name: str) -> RoastPreset:
    """Return the roast preset for the given name.

    Raises
    ------
    KeyError
        If *name* does not match any registered preset.
    """
    try:
        return ROASTS[name]
    except KeyError:
        available = ", ".join(sorted(ROASTS.keys()))
        raise KeyError(
            f"Unknown roast '{name}'. Available roasts: {available}"
        ) from None
