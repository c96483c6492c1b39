from enum import Enum

from app.services.compatibility import SCALE_MIDPOINT


class PersonalityTrait(str, Enum):
    clean_and_tidy = "Clean & Tidy"
    social_butterfly = "Social Butterfly"
    introvert = "Introvert"
    night_owl = "Night Owl"
    early_bird = "Early Bird"
    host = "Host"


def _answer(profile, field: str) -> int:
    value = getattr(profile, field, None)
    if isinstance(value, bool) or not isinstance(value, int):
        return SCALE_MIDPOINT
    return value


def derive_traits(profile) -> list[str]:
    """
    Display tags for one profile's lifestyle answers.

    Each rule is evaluated on its own; an answer at the midpoint, or a
    missing answer, produces no tag.
    """
    traits = []

    if _answer(profile, "cleanliness") > SCALE_MIDPOINT:
        traits.append(PersonalityTrait.clean_and_tidy)

    social = _answer(profile, "social_level")
    if social > SCALE_MIDPOINT:
        traits.append(PersonalityTrait.social_butterfly)
    elif social < SCALE_MIDPOINT:
        traits.append(PersonalityTrait.introvert)

    sleep = _answer(profile, "sleep_schedule")
    if sleep > SCALE_MIDPOINT:
        traits.append(PersonalityTrait.night_owl)
    elif sleep < SCALE_MIDPOINT:
        traits.append(PersonalityTrait.early_bird)

    if _answer(profile, "guest_frequency") > SCALE_MIDPOINT:
        traits.append(PersonalityTrait.host)

    return [trait.value for trait in traits]
