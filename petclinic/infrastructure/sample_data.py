"""Sample clinic data loaded into an empty store at startup."""
import logging
from datetime import date

from petclinic.domain.entities import Owner, Pet, PetType
from petclinic.domain.interfaces.owner_repository import IOwnerRepository
from petclinic.domain.interfaces.pet_repository import IPetRepository

logger = logging.getLogger(__name__)

SAMPLE_PET_TYPES = ("cat", "dog", "lizard", "snake", "bird", "hamster")

SAMPLE_OWNERS = [
    {
        "owner": Owner(first_name="George", last_name="Franklin", address="110 W. Liberty St.",
                       city="Madison", telephone="6085551023"),
        "pets": [("Leo", date(2010, 9, 7), "cat")],
    },
    {
        "owner": Owner(first_name="Betty", last_name="Davis", address="638 Cardinal Ave.",
                       city="Sun Prairie", telephone="6085551749"),
        "pets": [("Basil", date(2012, 8, 6), "hamster")],
    },
    {
        "owner": Owner(first_name="Eduardo", last_name="Rodriquez", address="2693 Commerce St.",
                       city="McFarland", telephone="6085558763"),
        "pets": [("Rosy", date(2011, 4, 17), "dog"), ("Jewel", date(2010, 3, 7), "dog")],
    },
    {
        "owner": Owner(first_name="Harold", last_name="Davis", address="563 Friendly St.",
                       city="Windsor", telephone="6085553198"),
        "pets": [("Iggy", date(2010, 11, 30), "lizard")],
    },
]


def seed_sample_data(owners: IOwnerRepository, pets: IPetRepository) -> bool:
    """
    Load the sample pet types, owners and pets.

    Nothing is written when the store already holds pet types.

    Returns:
        True if data was written
    """
    if pets.find_pet_types():
        logger.debug("Store already holds pet types, skipping sample data")
        return False

    pet_types = {name: pets.save_pet_type(PetType(id=None, name=name)) for name in SAMPLE_PET_TYPES}

    for entry in SAMPLE_OWNERS:
        template = entry["owner"]
        owner = Owner(
            first_name=template.first_name,
            last_name=template.last_name,
            address=template.address,
            city=template.city,
            telephone=template.telephone,
        )
        owners.save(owner)
        for name, birth_date, type_name in entry["pets"]:
            pet = Pet(name=name, birth_date=birth_date, type=pet_types[type_name])
            owner.add_pet(pet)
            pets.save(pet)

    logger.info(f"Sample data loaded: {len(SAMPLE_OWNERS)} owners, {len(pet_types)} pet types")
    return True
