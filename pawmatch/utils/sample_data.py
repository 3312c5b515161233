"""
Built-in catalog of adoptable pets used to seed an empty store.
"""

from typing import Any, Dict, List
from loguru import logger

from ..schemas.pet_data import PetCreate
from ..store import PetStore
from .helpers import get_default_image_for_type

SAMPLE_PETS: List[Dict[str, Any]] = [
    # Dogs
    {
        "name": "Max",
        "type": "Dog",
        "breed": "Golden Retriever",
        "age": 3,
        "description": (
            "Max is a friendly and energetic Golden Retriever who loves outdoor activities. "
            "He gets along well with children and other pets. He's trained and responds well "
            "to basic commands."
        ),
        "imageUrl": "https://images.unsplash.com/photo-1552053831-71594a27632d?q=80&w=624&auto=format&fit=crop",
        "personality": ["Friendly", "Energetic", "Loyal"],
    },
    {
        "name": "Rocky",
        "type": "Dog",
        "breed": "German Shepherd",
        "age": 4,
        "description": (
            "Rocky is a loyal and protective German Shepherd with excellent training. He's great "
            "with families and makes an excellent watchdog. He needs regular exercise and mental "
            "stimulation."
        ),
        "imageUrl": "https://images.unsplash.com/photo-1605897472359-85e4b94d685d?q=80&w=624&auto=format&fit=crop",
        "personality": ["Loyal", "Protective", "Intelligent"],
    },
    {
        "name": "Bella",
        "type": "Dog",
        "breed": "Beagle",
        "age": 2,
        "description": (
            "Bella is a curious and playful Beagle who loves to explore. She has a friendly "
            "disposition and gets along well with everyone. She enjoys playing fetch and going "
            "for walks."
        ),
        "imageUrl": "https://images.unsplash.com/photo-1587300003388-59208cc962cb?q=80&w=624&auto=format&fit=crop",
        "personality": ["Friendly", "Playful", "Curious"],
    },
    {
        "name": "Charlie",
        "type": "Dog",
        "breed": "French Bulldog",
        "age": 2,
        "description": (
            "Charlie is a charming French Bulldog with a lot of personality. He's affectionate, "
            "adaptable, and does well in apartments. He loves cuddles and short walks."
        ),
        "imageUrl": "https://images.unsplash.com/photo-1583337130417-3346a1be7dee?q=80&w=624&auto=format&fit=crop",
        "personality": ["Affectionate", "Playful", "Calm"],
    },
    # Cats
    {
        "name": "Luna",
        "type": "Cat",
        "breed": "Siamese",
        "age": 2,
        "description": (
            "Luna is a quiet and independent Siamese cat. She's very clean and enjoys peaceful "
            "environments. While she's not overly demanding of attention, she forms strong bonds "
            "with her owners."
        ),
        "imageUrl": "https://images.unsplash.com/photo-1574158622682-e40e69881006?q=80&w=624&auto=format&fit=crop",
        "personality": ["Quiet", "Independent", "Affectionate"],
    },
    {
        "name": "Oliver",
        "type": "Cat",
        "breed": "Maine Coon",
        "age": 3,
        "description": (
            "Oliver is a gentle giant with a sociable personality. This Maine Coon loves being "
            "around people and isn't shy about seeking attention. He's good with children and "
            "other pets."
        ),
        "imageUrl": "https://images.unsplash.com/photo-1533738363-b7f9aef128ce?q=80&w=624&auto=format&fit=crop",
        "personality": ["Gentle", "Sociable", "Intelligent"],
    },
    {
        "name": "Milo",
        "type": "Cat",
        "breed": "Tabby",
        "age": 1,
        "description": (
            "Milo is a playful tabby cat with lots of energy. He loves interactive toys and "
            "climbing. He's young and adaptable, making him a great addition to most homes."
        ),
        "imageUrl": "https://images.unsplash.com/photo-1526336024174-e58f5cdd8e13?q=80&w=624&auto=format&fit=crop",
        "personality": ["Playful", "Curious", "Energetic"],
    },
    # Small animals
    {
        "name": "Coco",
        "type": "Rabbit",
        "breed": "Holland Lop",
        "age": 1,
        "description": (
            "Coco is a calm and affectionate Holland Lop rabbit. She enjoys being handled and is "
            "litter-trained. She's ideal for someone looking for a gentle small pet."
        ),
        "imageUrl": "https://images.unsplash.com/photo-1535241749838-299277b6305f?q=80&w=624&auto=format&fit=crop",
        "personality": ["Calm", "Affectionate", "Social"],
    },
    {
        "name": "Hazel",
        "type": "Rabbit",
        "breed": "Lionhead",
        "age": 2,
        "description": (
            "Hazel is a fluffy Lionhead rabbit with a gentle nature. She is a little shy at first "
            "but loves quiet evenings and fresh greens once she settles in."
        ),
        "personality": ["Gentle", "Quiet", "Curious"],
    },
    {
        "name": "Nibbles",
        "type": "Hamster",
        "breed": "Syrian",
        "age": 1,
        "description": (
            "Nibbles is an active and curious Syrian hamster. He's fun to watch as he explores "
            "his habitat and enjoys running on his wheel. He's a great starter pet for "
            "responsible children."
        ),
        "imageUrl": "https://images.unsplash.com/photo-1425082661705-1834bfd09dca?q=80&w=624&auto=format&fit=crop",
        "personality": ["Active", "Curious", "Independent"],
    },
    {
        "name": "Tiki",
        "type": "Bird",
        "breed": "Budgerigar",
        "age": 2,
        "description": (
            "Tiki is a colorful and cheerful budgie who loves to chirp and sing. He can learn to "
            "mimic words with patient training. He brings life and joy to any home."
        ),
        "imageUrl": "https://images.unsplash.com/photo-1501720804996-ae418d1ba820?q=80&w=624&auto=format&fit=crop",
        "personality": ["Social", "Vocal", "Intelligent"],
    },
    # Other
    {
        "name": "Shelly",
        "type": "Other",
        "breed": "Red-eared Slider",
        "age": 6,
        "description": (
            "Shelly is a laid-back red-eared slider turtle. She spends her days basking and "
            "paddling around her tank, and suits a patient owner who can keep up with her "
            "long lifespan."
        ),
        "personality": ["Calm", "Independent", "Quiet"],
    },
]


def seed_sample_data(store: PetStore, force: bool = False) -> None:
    """
    Populate the store with the sample catalog.

    Does nothing if pets already exist, unless ``force`` is set, in which case
    existing pets are cleared first. Users and matches are never touched.

    Args:
        store: Store to populate
        force: Clear and reinsert even when pets exist
    """
    existing = store.pet_count()
    logger.info(f"Before initialization: {existing} pets exist")

    if existing and not force:
        logger.info(f"Skipping sample data creation: {existing} pets already exist")
        return

    if force and existing:
        logger.info("Force initializing: clearing existing pets")
        store.clear_pets()

    for entry in SAMPLE_PETS:
        pet = PetCreate(**entry)
        if not pet.image_url:
            pet.image_url = get_default_image_for_type(pet.type.value)
        store.create_pet(pet)

    count = store.pet_count()
    if count == 0:
        logger.error("Failed to add pets! Store is still empty after initialization.")
    else:
        logger.info(f"Initialized {count} sample pets")
