"""Built-in tool catalog."""

from __future__ import annotations

from collections.abc import Callable, Sequence

from txtx.registry.categories import CATEGORIES
from txtx.registry.registry import ToolParam, ToolRegistry, ToolSpec
from txtx.transforms import ciphers, colors, converters, crypto, encoding, formatters, generators, naming


def _tool(
    tool_id: str,
    name: str,
    description: str,
    category_id: str,
    handler: Callable[..., str],
    keywords: Sequence[str],
    *,
    params: Sequence[ToolParam] = (),
    is_generator: bool = False,
) -> ToolSpec:
    return ToolSpec(
        id=tool_id,
        name=name,
        description=description,
        category_id=category_id,
        handler=handler,
        keywords=list(keywords),
        params=list(params),
        is_generator=is_generator,
    )


_SHIFT = ToolParam(name="shift", type="integer", description="Shift amount", default=3)
_CIPHER_KEY = ToolParam(name="key", type="string", description="Cipher key", required=True)


def _naming_tools() -> list[ToolSpec]:
    cat = "naming-conventions"
    return [
        _tool("to-camel-case", "camelCase", "Convert text to camelCase", cat,
              naming.to_camel_case, ["camel", "camelcase", "javascript", "variable"]),
        _tool("to-pascal-case", "PascalCase", "Convert text to PascalCase", cat,
              naming.to_pascal_case, ["pascal", "pascalcase", "class", "upper camel"]),
        _tool("to-snake-case", "snake_case", "Convert text to snake_case", cat,
              naming.to_snake_case, ["snake", "underscore", "python"]),
        _tool("to-screaming-snake-case", "SCREAMING_SNAKE_CASE",
              "Convert text to SCREAMING_SNAKE_CASE for constants", cat,
              naming.to_screaming_snake_case, ["constant", "screaming", "upper snake"]),
        _tool("to-kebab-case", "kebab-case", "Convert text to kebab-case", cat,
              naming.to_kebab_case, ["kebab", "dash", "hyphen", "url"]),
        _tool("to-train-case", "Train-Case", "Convert text to Train-Case", cat,
              naming.to_train_case, ["train", "http header"]),
        _tool("to-dot-case", "dot.case", "Convert text to dot.case", cat,
              naming.to_dot_case, ["dot", "period"]),
        _tool("to-path-case", "path/case", "Convert text to path/case", cat,
              naming.to_path_case, ["path", "slash"]),
        _tool("to-ada-case", "Ada_Case", "Convert text to Ada_Case", cat,
              naming.to_ada_case, ["ada"]),
        _tool("to-cobol-case", "COBOL-CASE", "Convert text to COBOL-CASE", cat,
              naming.to_cobol_case, ["cobol"]),
        _tool("to-flat-case", "flatcase", "Convert text to flatcase", cat,
              naming.to_flat_case, ["flat", "lowercase"]),
        _tool("to-upper-flat-case", "UPPERFLATCASE", "Convert text to UPPERFLATCASE", cat,
              naming.to_upper_flat_case, ["upper", "uppercase"]),
        _tool("detect-naming-convention", "Detect Naming Convention",
              "Detect which naming convention an identifier uses", cat,
              naming.detect_naming_convention, ["detect", "identify", "convention"]),
        _tool("to-namespace-case", "Namespace\\Case", "Convert text to PHP-style Namespace\\Case",
              cat, naming.to_namespace_case, ["namespace", "php", "backslash"]),
        _tool("convert-naming-convention", "Convert Naming Convention",
              "Convert an identifier to any supported naming convention", cat,
              naming.convert_naming_convention, ["convert", "convention", "case"],
              params=[ToolParam(name="target", type="string",
                                description="Target convention, e.g. snake_case",
                                default="camelCase")]),
    ]


def _encoding_tools() -> list[ToolSpec]:
    cat = "encoding"
    return [
        _tool("base64-encode", "Base64 Encode", "Encode text to Base64", cat,
              encoding.base64_encode, ["base64", "b64", "encode"]),
        _tool("base64-decode", "Base64 Decode", "Decode Base64 to text", cat,
              encoding.base64_decode, ["base64", "b64", "decode"]),
        _tool("base32-encode", "Base32 Encode", "Encode text to Base32", cat,
              encoding.base32_encode, ["base32", "b32", "encode"]),
        _tool("base32-decode", "Base32 Decode", "Decode Base32 to text", cat,
              encoding.base32_decode, ["base32", "b32", "decode"]),
        _tool("url-encode", "URL Encode", "Percent-encode text for use in URLs", cat,
              encoding.url_encode, ["url", "percent", "uri", "encode"]),
        _tool("url-decode", "URL Decode", "Decode percent-encoded URL text", cat,
              encoding.url_decode, ["url", "percent", "uri", "decode"]),
        _tool("html-encode", "HTML Encode", "Escape HTML entities", cat,
              encoding.html_encode, ["html", "entities", "escape", "encode"]),
        _tool("html-decode", "HTML Decode", "Unescape HTML entities", cat,
              encoding.html_decode, ["html", "entities", "unescape", "decode"]),
        _tool("text-to-binary", "Text to Binary", "Convert text to binary octets", cat,
              encoding.text_to_binary, ["binary", "bits", "bytes"]),
        _tool("binary-to-text", "Binary to Text", "Convert binary octets to text", cat,
              encoding.binary_to_text, ["binary", "bits", "bytes"]),
        _tool("text-to-hex", "Text to Hex", "Convert text to hexadecimal", cat,
              encoding.text_to_hex, ["hex", "hexadecimal", "bytes"]),
        _tool("hex-to-text", "Hex to Text", "Convert hexadecimal to text", cat,
              encoding.hex_to_text, ["hex", "hexadecimal", "bytes"]),
        _tool("text-to-ascii", "Text to ASCII", "Convert text to ASCII codes", cat,
              encoding.text_to_ascii, ["ascii", "char codes", "ord"]),
        _tool("ascii-to-text", "ASCII to Text", "Convert ASCII codes to text", cat,
              encoding.ascii_to_text, ["ascii", "char codes", "chr"]),
        _tool("utf8-encode", "UTF-8 Encode", "Show the UTF-8 bytes of text as characters", cat,
              encoding.utf8_encode, ["utf8", "utf-8", "unicode", "encode"]),
        _tool("utf8-decode", "UTF-8 Decode", "Decode UTF-8 byte characters back to text", cat,
              encoding.utf8_decode, ["utf8", "utf-8", "unicode", "decode"]),
    ]


def _crypto_tools() -> list[ToolSpec]:
    cat = "crypto"
    return [
        _tool("md5-hash", "MD5 Hash", "Generate an MD5 hash", cat,
              crypto.md5_hash, ["md5", "hash", "checksum", "digest"]),
        _tool("sha1-hash", "SHA-1 Hash", "Generate a SHA-1 hash", cat,
              crypto.sha1_hash, ["sha1", "sha-1", "hash", "digest"]),
        _tool("sha256-hash", "SHA-256 Hash", "Generate a SHA-256 hash", cat,
              crypto.sha256_hash, ["sha256", "sha-256", "hash", "digest"]),
        _tool("sha512-hash", "SHA-512 Hash", "Generate a SHA-512 hash", cat,
              crypto.sha512_hash, ["sha512", "sha-512", "hash", "digest"]),
        _tool("hmac-sha256", "HMAC-SHA256", "Generate an HMAC-SHA256 signature", cat,
              crypto.hmac_sha256, ["hmac", "signature", "hash", "mac"],
              params=[ToolParam(name="key", type="string", description="Secret key for HMAC",
                                required=True)]),
        _tool("uuid-generator", "UUID v4", "Generate a random UUID v4", cat,
              crypto.generate_uuid4, ["uuid", "guid", "identifier"], is_generator=True),
        _tool("nanoid-generator", "Nano ID", "Generate a URL-friendly Nano ID", cat,
              crypto.generate_nanoid, ["nanoid", "identifier", "id"],
              params=[ToolParam(name="size", type="integer", description="ID length", default=21)],
              is_generator=True),
        _tool("jwt-decode", "JWT Decoder", "Decode a JWT token without verification", cat,
              crypto.decode_jwt, ["jwt", "token", "json web token", "decode"]),
        _tool("unix-to-date", "Unix Timestamp to Date", "Convert a Unix timestamp to an ISO date",
              cat, crypto.unix_to_date, ["unix", "timestamp", "epoch", "date"]),
        _tool("date-to-unix", "Date to Unix Timestamp", "Convert an ISO date to a Unix timestamp",
              cat, crypto.date_to_unix, ["unix", "timestamp", "epoch", "date"]),
        _tool("ulid-generator", "ULID", "Generate a lexicographically sortable ULID", cat,
              crypto.generate_ulid, ["ulid", "identifier", "sortable"], is_generator=True),
        _tool("crc32-checksum", "CRC32 Checksum", "Compute a CRC32 checksum", cat,
              crypto.crc32_checksum, ["crc32", "crc", "checksum"]),
    ]


def _formatter_tools() -> list[ToolSpec]:
    cat = "formatters"
    return [
        _tool("format-json", "Format JSON", "Format and beautify JSON", cat,
              formatters.format_json, ["json", "beautify", "pretty print", "format"],
              params=[ToolParam(name="indent", type="integer", description="Indent width",
                                default=2)]),
        _tool("minify-json", "Minify JSON", "Minify JSON by removing whitespace", cat,
              formatters.minify_json, ["json", "compress", "minify"]),
        _tool("format-xml", "Format XML", "Format and beautify XML", cat,
              formatters.format_xml, ["xml", "beautify", "pretty print", "format"]),
        _tool("minify-xml", "Minify XML", "Minify XML by removing whitespace", cat,
              formatters.minify_xml, ["xml", "compress", "minify"]),
        _tool("format-css", "Format CSS", "Format and beautify CSS", cat,
              formatters.format_css, ["css", "stylesheet", "beautify", "format"]),
        _tool("minify-css", "Minify CSS", "Minify CSS for production", cat,
              formatters.minify_css, ["css", "stylesheet", "compress", "minify"]),
        _tool("format-yaml", "Format YAML", "Normalize YAML formatting", cat,
              formatters.format_yaml, ["yaml", "yml", "format"]),
        _tool("format-sql", "Format SQL", "Format SQL queries for readability", cat,
              formatters.format_sql, ["sql", "query", "beautify", "format"]),
        _tool("minify-sql", "Minify SQL", "Minify SQL by collapsing whitespace", cat,
              formatters.minify_sql, ["sql", "query", "compress", "minify"]),
        _tool("format-html", "Format HTML", "Indent HTML markup", cat,
              formatters.format_html, ["html", "markup", "beautify", "format"]),
        _tool("minify-html", "Minify HTML", "Minify HTML by removing comments and whitespace",
              cat, formatters.minify_html, ["html", "markup", "compress", "minify"]),
        _tool("minify-javascript", "Minify JavaScript", "Strip comments and whitespace from "
              "JavaScript", cat, formatters.minify_javascript,
              ["javascript", "js", "compress", "minify"]),
    ]


def _converter_tools() -> list[ToolSpec]:
    cat = "converters"
    return [
        _tool("csv-to-json", "CSV to JSON", "Convert CSV rows to a JSON array", cat,
              converters.csv_to_json, ["csv", "json", "spreadsheet"]),
        _tool("json-to-csv", "JSON to CSV", "Convert a JSON array to CSV", cat,
              converters.json_to_csv, ["csv", "json", "spreadsheet"]),
        _tool("json-to-yaml", "JSON to YAML", "Convert JSON to YAML", cat,
              converters.json_to_yaml, ["json", "yaml", "yml"]),
        _tool("yaml-to-json", "YAML to JSON", "Convert YAML to JSON", cat,
              converters.yaml_to_json, ["json", "yaml", "yml"]),
        _tool("markdown-to-html", "Markdown to HTML", "Render Markdown as HTML", cat,
              converters.markdown_to_html, ["markdown", "md", "html"]),
        _tool("html-to-markdown", "HTML to Markdown", "Convert HTML to Markdown", cat,
              converters.html_to_markdown, ["markdown", "md", "html"]),
        _tool("xml-to-json", "XML to JSON", "Convert XML to JSON", cat,
              converters.xml_to_json, ["xml", "json"]),
        _tool("json-to-xml", "JSON to XML", "Convert JSON to XML", cat,
              converters.json_to_xml, ["xml", "json"],
              params=[ToolParam(name="root_tag", type="string",
                                description="Element name for the document root",
                                default="root")]),
    ]


def _color_tools() -> list[ToolSpec]:
    cat = "colors"
    return [
        _tool("hex-to-rgb", "HEX to RGB", "Convert a HEX color to RGB", cat,
              colors.hex_to_rgb, ["hex", "rgb", "color"]),
        _tool("hex-to-rgba", "HEX to RGBA", "Convert a HEX color to RGBA", cat,
              colors.hex_to_rgba, ["hex", "rgba", "alpha", "color"],
              params=[ToolParam(name="alpha", type="number", description="Alpha value (0-1)",
                                default=1.0)]),
        _tool("rgb-to-hex", "RGB to HEX", "Convert an RGB color to HEX", cat,
              colors.rgb_to_hex, ["rgb", "hex", "color"]),
        _tool("hex-to-hsl", "HEX to HSL", "Convert a HEX color to HSL", cat,
              colors.hex_to_hsl, ["hex", "hsl", "color"]),
        _tool("hsl-to-hex", "HSL to HEX", "Convert an HSL color to HEX", cat,
              colors.hsl_to_hex, ["hsl", "hex", "color"]),
        _tool("complementary-color", "Complementary Color", "Get the complementary color", cat,
              colors.complementary_color, ["complement", "opposite", "color"]),
        _tool("random-color", "Random Color", "Generate a random HEX color", cat,
              colors.random_hex_color, ["random", "color", "hex"], is_generator=True),
        _tool("decimal-to-hex", "Decimal to HEX", "Convert a decimal color value to HEX", cat,
              colors.decimal_to_hex, ["decimal", "hex", "color"]),
        _tool("hex-to-decimal", "HEX to Decimal", "Convert a HEX color to its decimal value", cat,
              colors.hex_to_decimal, ["decimal", "hex", "color"]),
        _tool("hex-to-css-variable", "HEX to CSS Variable",
              "Wrap a HEX color in a CSS custom property", cat,
              colors.hex_to_css_variable, ["css", "variable", "custom property", "color"],
              params=[ToolParam(name="variable", type="string", description="Property name",
                                default="color-primary")]),
    ]


def _generator_tools() -> list[ToolSpec]:
    cat = "generators"
    return [
        _tool("password-generator", "Password Generator", "Generate a secure random password",
              cat, generators.generate_password, ["password", "secure", "random"],
              params=[ToolParam(name="length", type="integer", description="Password length",
                                default=16)],
              is_generator=True),
        _tool("api-key-generator", "API Key Generator", "Generate a random API key", cat,
              generators.generate_api_key, ["api key", "token", "secret"],
              params=[ToolParam(name="prefix", type="string", description="Key prefix",
                                default="sk")],
              is_generator=True),
        _tool("random-string", "Random String", "Generate a random alphanumeric string", cat,
              generators.generate_random_string, ["random", "string", "alphanumeric"],
              params=[ToolParam(name="length", type="integer", description="String length",
                                default=16)],
              is_generator=True),
        _tool("ipv4-generator", "IPv4 Address", "Generate a random IPv4 address", cat,
              generators.generate_ipv4, ["ip", "ipv4", "address", "network"], is_generator=True),
        _tool("ipv6-generator", "IPv6 Address", "Generate a random IPv6 address", cat,
              generators.generate_ipv6, ["ip", "ipv6", "address", "network"], is_generator=True),
        _tool("mac-address-generator", "MAC Address", "Generate a random MAC address", cat,
              generators.generate_mac_address, ["mac", "address", "network"], is_generator=True),
        _tool("lorem-ipsum", "Lorem Ipsum", "Generate Lorem Ipsum placeholder text", cat,
              generators.generate_lorem_ipsum, ["lorem", "ipsum", "placeholder", "dummy text"],
              params=[ToolParam(name="paragraphs", type="integer",
                                description="Number of paragraphs", default=1)],
              is_generator=True),
        _tool("slug-generator", "Slug Generator", "Generate a URL slug from text", cat,
              generators.generate_slug, ["slug", "url", "permalink"]),
        _tool("random-date", "Random Date", "Generate a random ISO date in a range", cat,
              generators.generate_random_date, ["date", "random", "datetime"],
              params=[ToolParam(name="start", type="string", description="Earliest ISO date",
                                default="2020-01-01"),
                      ToolParam(name="end", type="string",
                                description="Latest ISO date, defaults to now")],
              is_generator=True),
        _tool("random-email", "Random Email", "Generate a random email address", cat,
              generators.generate_random_email, ["email", "random", "address"],
              params=[ToolParam(name="domain", type="string", description="Email domain",
                                default="example.com")],
              is_generator=True),
        _tool("random-username", "Random Username", "Generate a random username", cat,
              generators.generate_random_username, ["username", "random", "handle"],
              is_generator=True),
        _tool("random-phone", "Random Phone Number", "Generate a random phone number", cat,
              generators.generate_random_phone, ["phone", "random", "telephone"],
              params=[ToolParam(name="style", type="string",
                                description="us or international", default="us")],
              is_generator=True),
        _tool("test-credit-card", "Test Credit Card", "Generate a Luhn-valid test card number",
              cat, generators.generate_test_credit_card, ["credit card", "luhn", "test"],
              params=[ToolParam(name="card_type", type="string",
                                description="visa, mastercard or amex", default="visa")],
              is_generator=True),
    ]


def _cipher_tools() -> list[ToolSpec]:
    cat = "ciphers"
    return [
        _tool("caesar-encode", "Caesar Cipher Encode", "Encode text with a Caesar shift", cat,
              ciphers.caesar_encode, ["caesar", "shift", "cipher"], params=[_SHIFT]),
        _tool("caesar-decode", "Caesar Cipher Decode", "Decode text with a Caesar shift", cat,
              ciphers.caesar_decode, ["caesar", "shift", "cipher"], params=[_SHIFT]),
        _tool("rot13", "ROT13", "Rotate letters by 13 places", cat,
              ciphers.rot13, ["rot", "rotate", "cipher"]),
        _tool("rot47", "ROT47", "Rotate printable ASCII by 47 places", cat,
              ciphers.rot47, ["rot", "rotate", "cipher"]),
        _tool("atbash", "Atbash Cipher", "Mirror the alphabet with the Atbash cipher", cat,
              ciphers.atbash, ["atbash", "mirror", "cipher"]),
        _tool("vigenere-encode", "Vigenère Encode", "Encode text with a Vigenère key", cat,
              ciphers.vigenere_encode, ["vigenere", "polyalphabetic", "cipher"],
              params=[_CIPHER_KEY]),
        _tool("vigenere-decode", "Vigenère Decode", "Decode text with a Vigenère key", cat,
              ciphers.vigenere_decode, ["vigenere", "polyalphabetic", "cipher"],
              params=[_CIPHER_KEY]),
        _tool("text-to-morse", "Text to Morse Code", "Convert text to Morse code", cat,
              ciphers.text_to_morse, ["morse", "telegraph"]),
        _tool("morse-to-text", "Morse Code to Text", "Convert Morse code to text", cat,
              ciphers.morse_to_text, ["morse", "telegraph"]),
        _tool("nato-phonetic", "NATO Phonetic Alphabet", "Spell text with the NATO alphabet", cat,
              ciphers.text_to_nato, ["nato", "phonetic", "spelling"]),
        _tool("reverse-string", "Reverse String", "Reverse the entire string", cat,
              ciphers.reverse_string, ["reverse", "backwards"]),
        _tool("reverse-words", "Reverse Words", "Reverse each word in place", cat,
              ciphers.reverse_words, ["reverse", "words"]),
        _tool("pig-latin", "Pig Latin", "Translate text to Pig Latin", cat,
              ciphers.to_pig_latin, ["pig latin", "word game"]),
        _tool("xor-cipher", "XOR Cipher", "XOR text with a repeating key", cat,
              ciphers.xor_cipher, ["xor", "cipher", "key"], params=[_CIPHER_KEY]),
        _tool("substitution-cipher", "Substitution Cipher",
              "Replace letters using a custom 26-letter alphabet", cat,
              ciphers.substitution_cipher, ["substitution", "alphabet", "cipher"],
              params=[ToolParam(name="alphabet", type="string",
                                description="26-letter replacement alphabet", required=True)]),
    ]


def register_builtin_tools(registry: ToolRegistry) -> None:
    """Register the default categories and tools.

    Categories are registered first and in display order; tools follow in
    category order. Registration order is also the tie-break order of search
    results with equal scores.
    """

    for category in CATEGORIES:
        registry.register_category(category)
    for group in (
        _naming_tools,
        _encoding_tools,
        _crypto_tools,
        _formatter_tools,
        _converter_tools,
        _color_tools,
        _generator_tools,
        _cipher_tools,
    ):
        for spec in group():
            registry.register(spec)


def build_default_registry() -> ToolRegistry:
    registry = ToolRegistry()
    register_builtin_tools(registry)
    return registry
