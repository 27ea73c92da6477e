"""Tool category definitions."""

from __future__ import annotations

from txtx.types import Category

CATEGORIES: tuple[Category, ...] = (
    Category(
        id="naming-conventions",
        name="Naming Conventions",
        slug="naming-conventions",
        description=(
            "Convert between camelCase, snake_case, kebab-case, PascalCase, and more. "
            "Essential tools for developers working with different coding standards."
        ),
        icon="Aa",
    ),
    Category(
        id="encoding",
        name="Encoding & Decoding",
        slug="encoding",
        description=(
            "Base64, URL encoding, HTML entities, binary, hex, and more. "
            "Encode and decode data for web development and data processing."
        ),
        icon="{ }",
    ),
    Category(
        id="crypto",
        name="Cryptography & Hashing",
        slug="crypto",
        description=(
            "Generate MD5, SHA-1, SHA-256, SHA-512 hashes, UUIDs, and work with JWT tokens. "
            "Security-focused tools for developers."
        ),
        icon="#",
    ),
    Category(
        id="formatters",
        name="Code Formatters",
        slug="formatters",
        description=(
            "Format and minify JSON, XML, CSS, and YAML. Keep your code clean and "
            "readable or minimize for production."
        ),
        icon="</>",
    ),
    Category(
        id="converters",
        name="Data Converters",
        slug="converters",
        description=(
            "Convert between CSV, JSON, YAML, Markdown, and HTML. Transform data formats "
            "for APIs, databases, and data processing workflows."
        ),
        icon="⇄",
    ),
    Category(
        id="colors",
        name="Color Utilities",
        slug="colors",
        description=(
            "Convert between HEX, RGB, HSL color formats. Generate complementary and "
            "random colors for your designs."
        ),
        icon="◐",
    ),
    Category(
        id="generators",
        name="Random Generators",
        slug="generators",
        description=(
            "Generate passwords, API keys, IP addresses, MAC addresses, Lorem Ipsum, and more. "
            "Create realistic test data instantly."
        ),
        icon="⚄",
    ),
    Category(
        id="ciphers",
        name="Ciphers & Encoding",
        slug="ciphers",
        description=(
            "Caesar cipher, ROT13, Morse code, NATO alphabet, and more. Classic encoding "
            "and cipher tools for fun and learning."
        ),
        icon="⌘",
    ),
)
