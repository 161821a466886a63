"""seeded sample records shared by the test modules"""

from dataclasses import dataclass
from typing import List
from faker import Faker

CITIES = ['nyc', 'la', 'chi']
DEPARTMENTS = ['eng', 'sales', 'hr', 'marketing']
SPECIES = ['cat', 'dog', 'fish']


@dataclass(frozen=True)
class Person:
    id: int
    name: str
    age: int
    city: str
    department: str
    salary: int


@dataclass(frozen=True)
class Pet:
    name: str
    owner_id: int
    species: str


def _faker(seed: int) -> Faker:
    fake = Faker()
    fake.seed_instance(seed)
    return fake


def people(count: int = 20, seed: int = 42) -> List[Person]:
    """people with unique ids 1..count"""
    fake = _faker(seed)
    return [
        Person(
            id=i,
            name=fake.first_name(),
            age=fake.pyint(min_value=18, max_value=65),
            city=fake.random_element(CITIES),
            department=fake.random_element(DEPARTMENTS),
            salary=fake.pyint(min_value=30000, max_value=150000),
        )
        for i in range(1, count + 1)
    ]


def pets_for(owners: List[Person], count: int = 30, seed: int = 7) -> List[Pet]:
    """pets owned by a random subset of owners (some owners get none)"""
    fake = _faker(seed)
    owner_ids = [p.id for p in owners]
    return [
        Pet(
            name=fake.first_name(),
            owner_id=fake.random_element(owner_ids),
            species=fake.random_element(SPECIES),
        )
        for _ in range(count)
    ]
