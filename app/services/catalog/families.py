"""
Built-in hash family table.

Confidence values are hand-assigned priors reflecting how common each
family is among hashes sharing the same structural signature. They are
not derived from the input and are kept exactly as tabulated.
"""

from app.services.catalog.catalog import HashCatalog, HashFamily
from app.services.catalog.rules import FixedHex, SegmentedFormat

_BCRYPT_SALT_HASH = r"[A-Za-z0-9./]{53}"
_BASE64_FIELD = r"[A-Za-z0-9+/]+"
_CRYPT_FIELD = r"[a-zA-Z0-9/.]+"


DEFAULT_FAMILIES: tuple[HashFamily, ...] = (
    # Parameterized password hashing formats
    HashFamily(
        name="BCrypt",
        rule=SegmentedFormat(
            prefixes=("$2a$", "$2b$", "$2y$"),
            fields=(r"[0-9]{2}", _BCRYPT_SALT_HASH),
        ),
        length=60,
        description="Blowfish-based password hash",
        confidence=99,
        markers=("$2a$", "$2b$", "$2y$"),
    ),
    HashFamily(
        name="Argon2",
        rule=SegmentedFormat(
            prefixes=("$argon2i$", "$argon2d$", "$argon2id$"),
            fields=(
                r"v=[0-9]+",
                r"m=[0-9]+,t=[0-9]+,p=[0-9]+",
                _BASE64_FIELD,
                _BASE64_FIELD,
            ),
        ),
        length=None,
        description="Memory-hard password hashing and key derivation function",
        confidence=99,
        markers=("$argon2i$", "$argon2d$", "$argon2id$"),
    ),
    HashFamily(
        name="scrypt",
        rule=SegmentedFormat(
            prefixes=("$scrypt$",),
            fields=(r"[a-zA-Z0-9/$.]+",),
        ),
        length=None,
        description="Memory-hard password-based key derivation function",
        confidence=95,
        markers=("$scrypt$",),
    ),
    HashFamily(
        name="PBKDF2",
        rule=SegmentedFormat(
            prefixes=("$pbkdf2-sha",),
            fields=(r"[0-9]+", r"[0-9]+", _CRYPT_FIELD, _CRYPT_FIELD),
        ),
        length=None,
        description="Password-Based Key Derivation Function 2",
        confidence=95,
        markers=("$pbkdf2-sha",),
    ),
    # MD family
    HashFamily("MD5", FixedHex(32), 32, "Message-Digest Algorithm 5", 60),
    HashFamily("MD4", FixedHex(32), 32, "Message-Digest Algorithm 4", 40),
    HashFamily("MD2", FixedHex(32), 32, "Message-Digest Algorithm 2", 40),
    HashFamily("MD6-128", FixedHex(32), 32, "Message-Digest Algorithm 6 (128-bit)", 40),
    HashFamily("MD6-256", FixedHex(64), 64, "Message-Digest Algorithm 6 (256-bit)", 50),
    HashFamily("MD6-512", FixedHex(128), 128, "Message-Digest Algorithm 6 (512-bit)", 60),
    # SHA family
    HashFamily("SHA-1", FixedHex(40), 40, "Secure Hash Algorithm 1", 70),
    HashFamily(
        "SHA-224",
        FixedHex(56),
        56,
        "Secure Hash Algorithm 224",
        85,
        markers=("Length is always 56 characters",),
    ),
    HashFamily("SHA-256", FixedHex(64), 64, "Secure Hash Algorithm 256", 80),
    HashFamily(
        "SHA-384",
        FixedHex(96),
        96,
        "Secure Hash Algorithm 384",
        85,
        markers=("Length is always 96 characters",),
    ),
    HashFamily("SHA-512", FixedHex(128), 128, "Secure Hash Algorithm 512", 85),
    # SHA-3 family
    HashFamily("SHA3-224", FixedHex(56), 56, "SHA-3 family (224-bit)", 75),
    HashFamily("SHA3-256", FixedHex(64), 64, "SHA-3 family (256-bit)", 75),
    HashFamily("SHA3-384", FixedHex(96), 96, "SHA-3 family (384-bit)", 80),
    HashFamily("SHA3-512", FixedHex(128), 128, "SHA-3 family (512-bit)", 80),
    # RIPEMD family
    HashFamily(
        "RIPEMD-128", FixedHex(32), 32,
        "RACE Integrity Primitives Evaluation Message Digest 128", 40,
    ),
    HashFamily(
        "RIPEMD-160", FixedHex(40), 40,
        "RACE Integrity Primitives Evaluation Message Digest 160", 60,
    ),
    HashFamily(
        "RIPEMD-256", FixedHex(64), 64,
        "RACE Integrity Primitives Evaluation Message Digest 256", 50,
    ),
    HashFamily(
        "RIPEMD-320",
        FixedHex(80),
        80,
        "RACE Integrity Primitives Evaluation Message Digest 320",
        80,
        markers=("Length is always 80 characters",),
    ),
    # Other digests and checksums
    HashFamily("Tiger-128", FixedHex(32), 32, "128-bit Tiger cryptographic hash function", 40),
    HashFamily("Tiger-160", FixedHex(40), 40, "160-bit Tiger cryptographic hash function", 50),
    HashFamily(
        "Tiger-192",
        FixedHex(48),
        48,
        "192-bit Tiger cryptographic hash function",
        85,
        markers=("Length is always 48 characters",),
    ),
    HashFamily("Whirlpool", FixedHex(128), 128, "Whirlpool cryptographic hash function", 60),
    HashFamily("NTLM", FixedHex(32), 32, "Microsoft NT LAN Manager", 40),
    HashFamily("HMAC-MD5", FixedHex(32), 32, "Hash-based Message Authentication Code (MD5)", 40),
    HashFamily("HMAC-SHA1", FixedHex(40), 40, "Hash-based Message Authentication Code (SHA1)", 50),
    HashFamily(
        "HMAC-SHA256", FixedHex(64), 64,
        "Hash-based Message Authentication Code (SHA256)", 50,
    ),
    HashFamily(
        "CRC32",
        FixedHex(8),
        8,
        "Cyclic Redundancy Check 32",
        90,
        markers=("8 characters long",),
    ),
    HashFamily(
        "Adler32",
        FixedHex(8),
        8,
        "Adler-32 checksum",
        85,
        markers=("8 characters long",),
    ),
)

DEFAULT_CATALOG = HashCatalog(DEFAULT_FAMILIES)
