from src.services.passwords import hash_password, verify_password
from src.services.seeder import SeedError, run_seed, seed_database

__all__ = [
    # passwords
    "hash_password",
    "verify_password",
    # seeder
    "SeedError",
    "run_seed",
    "seed_database",
]
