"""
TypedDict models for requests and responses to/from the Petfinder API,
plus the derived statistics snapshot.

Includes:
- TokenResponse: POST /oauth2/token
- AnimalRecord: one listing entry (GET /animals, GET /animals/{id})
- AnimalsPage / AnimalResponse: the JSON envelopes around them
- StatsSummary: aggregate snapshot computed by `stats.compute_stats`
"""

from __future__ import annotations
from typing import Dict, List, Optional, TypedDict

# POST /oauth2/token
class TokenResponse(TypedDict, total=False):
    token_type: str
    expires_in: int
    access_token: str

class Breeds(TypedDict, total=False):
    primary: Optional[str]
    secondary: Optional[str]
    mixed: bool
    unknown: bool

class Photo(TypedDict, total=False):
    small: str
    medium: str
    large: str
    full: str

# GET /animals (items), GET /animals/{id}
class AnimalRecord(TypedDict, total=False):
    id: int
    name: Optional[str]
    type: str
    breeds: Breeds
    age: str                 # Baby | Young | Adult | Senior
    gender: str
    status: str
    description: Optional[str]
    photos: List[Photo]

# GET /animals
class AnimalsPage(TypedDict, total=False):
    animals: List[AnimalRecord]
    pagination: Dict[str, object]

# GET /animals/{id}
class AnimalResponse(TypedDict, total=False):
    animal: AnimalRecord

# Numeric stand-in for each categorical age label, used only for averaging
AGE_MAPPING: Dict[str, float] = {
    "Baby": 0.5,
    "Young": 1,
    "Adult": 5,
    "Senior": 10,
}

AGE_GROUPS: List[str] = list(AGE_MAPPING)

class TypeCount(TypedDict):
    type: Optional[str]
    count: int

class PetAge(TypedDict):
    name: Optional[str]
    age: int

class StatsSummary(TypedDict):
    total: int
    avg_age: float
    type_counts: Dict[Optional[str], int]
    most_common_type: TypeCount
    oldest_pet: PetAge
    youngest_pet: Optional[PetAge]
