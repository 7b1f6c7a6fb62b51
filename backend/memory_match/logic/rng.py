"""
Random number generation for deck shuffling and hint selection.

A session either draws from an injected ``random.Random`` or derives one per
level from a hex seed:
1. Generate a seed (32 bytes / 256 bits) via the secrets module
2. Derive per-level state via SHA512 with domain separation (versioned prefix)
3. Seed a stdlib ``random.Random`` from the derived digest

Statistical perfection is not critical for a 30-card grid; the point of the
seed is reproducibility (same seed and level deal the same deck).
"""

import hashlib
import random
import secrets

SEED_BYTES = 32
_LEVEL_DOMAIN_PREFIX = b"memory-match-level-v1:"


def validate_seed_hex(seed_hex: str) -> None:
    """Validate that a seed string is the correct hex format.

    Enforces exact length (64 hex chars = 32 bytes) and valid hex characters.
    Raises TypeError for non-string input, ValueError for invalid format.
    """
    if not isinstance(seed_hex, str):
        raise TypeError(f"Seed must be a string, got {type(seed_hex).__name__}")
    expected_length = SEED_BYTES * 2
    if len(seed_hex) != expected_length:
        raise ValueError(f"Seed must be exactly {expected_length} hex characters, got {len(seed_hex)}")
    try:
        bytes.fromhex(seed_hex)
    except ValueError:
        raise ValueError("Seed contains invalid hex characters") from None


def generate_seed() -> str:
    """Generate a cryptographic seed as a hex string (64 chars / 256 bits)."""
    return secrets.token_bytes(SEED_BYTES).hex()


def create_rng(seed_hex: str | None = None) -> random.Random:
    """
    Create the session RNG.

    Unseeded sessions use an OS-seeded ``random.Random``.
    """
    if seed_hex is None:
        return random.Random()  # noqa: S311
    validate_seed_hex(seed_hex)
    return random.Random(int(seed_hex, 16))  # noqa: S311


def derive_level_rng(seed_hex: str, level: int) -> random.Random:
    """
    Derive a per-level RNG from the session seed.

    SHA512(_LEVEL_DOMAIN_PREFIX + seed_bytes + level_bytes) seeds the
    generator, so level N of a seeded session always deals the same deck
    regardless of how many hints were drawn on earlier levels.
    """
    if not (1 <= level < 2**32):
        raise ValueError("level must be in [1, 2^32)")
    validate_seed_hex(seed_hex)
    level_bytes = level.to_bytes(4, byteorder="little")
    digest = hashlib.sha512(_LEVEL_DOMAIN_PREFIX + bytes.fromhex(seed_hex) + level_bytes).digest()
    return random.Random(int.from_bytes(digest, byteorder="little"))  # noqa: S311
