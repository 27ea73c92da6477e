import json

import pytest

from txtx.errors import ErrorCode, TransformationError
from txtx.transforms import ciphers, colors, converters, crypto, encoding, formatters, generators, naming


@pytest.mark.parametrize(
    ("func", "expected"),
    [
        (naming.to_camel_case, "httpServerUrl"),
        (naming.to_pascal_case, "HttpServerUrl"),
        (naming.to_snake_case, "http_server_url"),
        (naming.to_screaming_snake_case, "HTTP_SERVER_URL"),
        (naming.to_kebab_case, "http-server-url"),
        (naming.to_train_case, "Http-Server-Url"),
        (naming.to_dot_case, "http.server.url"),
        (naming.to_cobol_case, "HTTP-SERVER-URL"),
    ],
)
def test_naming_conversions_split_acronyms(func, expected: str) -> None:
    assert func("HTTPServer url") == expected


def test_detect_naming_convention() -> None:
    assert naming.detect_naming_convention("helloWorld") == "camelCase"
    assert naming.detect_naming_convention("hello_world") == "snake_case"
    assert naming.detect_naming_convention("HELLO_WORLD") == "SCREAMING_SNAKE_CASE"
    assert naming.detect_naming_convention("hello world") == "unknown"


def test_encoding_errors_carry_codes() -> None:
    with pytest.raises(TransformationError) as exc_info:
        encoding.base64_decode("not base64!")
    assert exc_info.value.code is ErrorCode.INVALID_BASE64

    with pytest.raises(TransformationError) as exc_info:
        encoding.binary_to_text("0102")
    assert exc_info.value.code is ErrorCode.INVALID_BINARY


def test_encoding_outputs() -> None:
    assert encoding.url_encode("a b&c") == "a%20b%26c"
    assert encoding.html_encode("<a href='x'>") == "&lt;a href=&#x27;x&#x27;&gt;"
    assert encoding.text_to_binary("A") == "01000001"
    assert encoding.hex_to_text("0x48 69") == "Hi"
    assert encoding.ascii_to_text("72, 105") == "Hi"


def test_hashes_and_hmac() -> None:
    assert crypto.md5_hash("abc") == "900150983cd24fb0d6963f7d28e17f72"
    assert crypto.sha256_hash("abc").startswith("ba7816bf")
    assert len(crypto.hmac_sha256("msg", key="secret")) == 64
    with pytest.raises(TransformationError):
        crypto.hmac_sha256("msg", key="")


def test_jwt_decode() -> None:
    token = (
        "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9."
        "eyJzdWIiOiIxMjM0NTY3ODkwIiwibmFtZSI6IkpvaG4gRG9lIiwiaWF0IjoxNTE2MjM5MDIyfQ."
        "SflKxwRJSMeKKF2QT4fwpMeJf36POk6yJV_adQssw5c"
    )
    decoded = json.loads(crypto.decode_jwt(token))

    assert decoded["header"]["alg"] == "HS256"
    assert decoded["payload"]["name"] == "John Doe"
    with pytest.raises(TransformationError):
        crypto.decode_jwt("only.two")


def test_timestamps() -> None:
    assert crypto.unix_to_date("0") == "1970-01-01T00:00:00+00:00"
    assert crypto.unix_to_date("1000000000000") == "2001-09-09T01:46:40+00:00"
    assert crypto.date_to_unix("2001-09-09T01:46:40Z") == "1000000000"


def test_formatters() -> None:
    assert formatters.minify_json('{ "a": [1, 2] }') == '{"a":[1,2]}'
    assert formatters.format_json('{"a":1}') == '{\n  "a": 1\n}'
    assert formatters.minify_css("a { color : red ; }\n/* x */") == "a{color:red}"
    assert formatters.minify_xml("<a>\n  <b/>\n</a>") == "<a><b/></a>"
    with pytest.raises(TransformationError):
        formatters.format_json("{broken")


def test_converters() -> None:
    rows = json.loads(converters.csv_to_json("name,age\nada,36"))

    assert rows == [{"name": "ada", "age": "36"}]
    assert converters.json_to_csv('[{"a": 1, "b": 2}, {"a": 3}]') == "a,b\n1,2\n3,"
    assert converters.json_to_yaml('{"a": [1, 2]}') == "a:\n- 1\n- 2"
    assert json.loads(converters.yaml_to_json("a: 1")) == {"a": 1}
    assert "<h1>Title</h1>" in converters.markdown_to_html("# Title")


def test_colors() -> None:
    assert colors.hex_to_rgb("#ff8000") == "rgb(255, 128, 0)"
    assert colors.hex_to_rgb("fff") == "rgb(255, 255, 255)"
    assert colors.rgb_to_hex("rgb(255, 128, 0)") == "#ff8000"
    assert colors.hex_to_hsl("#ff0000") == "hsl(0, 100%, 50%)"
    assert colors.hsl_to_hex("hsl(0, 100%, 50%)") == "#ff0000"
    assert colors.complementary_color("#000000") == "#ffffff"
    with pytest.raises(TransformationError) as exc_info:
        colors.hex_to_rgb("#zzz")
    assert exc_info.value.code is ErrorCode.INVALID_COLOR


def test_generators() -> None:
    assert len(generators.generate_password(12)) == 12
    assert generators.generate_api_key("pk").startswith("pk_")
    assert generators.generate_ipv4().count(".") == 3
    assert len(generators.generate_mac_address().split(":")) == 6
    assert generators.generate_slug("Héllo, World!") == "hello-world"
    assert generators.generate_lorem_ipsum(2).count("\n\n") == 1
    with pytest.raises(TransformationError):
        generators.generate_password(0)


def test_ciphers() -> None:
    assert ciphers.rot13("Hello") == "Uryyb"
    assert ciphers.rot47("Hello") == "w6==@"
    assert ciphers.atbash("abc") == "zyx"
    assert ciphers.caesar_decode(ciphers.caesar_encode("Zebra", 5), 5) == "Zebra"
    assert ciphers.vigenere_encode("attack at dawn", "lemon") == "lxfopv ef rnhr"
    assert ciphers.text_to_morse("SOS hi") == "... --- ... / .... .."
    assert ciphers.morse_to_text("... --- ... / .... ..") == "SOS HI"
    assert ciphers.text_to_nato("ab") == "Alfa Bravo"
    assert ciphers.reverse_words("hello world") == "olleh dlrow"
    with pytest.raises(TransformationError):
        ciphers.vigenere_encode("text", "123")


@pytest.mark.parametrize("value", ["inf", "-inf", "nan", "1e300", "soon"])
def test_unrepresentable_timestamps_are_rejected(value: str) -> None:
    with pytest.raises(TransformationError) as exc_info:
        crypto.unix_to_date(value)
    assert exc_info.value.code is ErrorCode.INVALID_TIMESTAMP


def test_out_of_range_numbers_are_transformation_errors() -> None:
    with pytest.raises(TransformationError) as exc_info:
        encoding.ascii_to_text("72 99999999999999999999999")
    assert exc_info.value.code is ErrorCode.INVALID_INPUT

    with pytest.raises(TransformationError) as exc_info:
        colors.rgb_to_hex("rgb(" + "9" * 400 + ", 0, 0)")
    assert exc_info.value.code is ErrorCode.INVALID_COLOR

    with pytest.raises(TransformationError):
        colors.hsl_to_hex("hsl(0, 150%, 50%)")


def test_namespace_case_and_convention_conversion() -> None:
    assert naming.to_namespace_case("app http controller") == "App\\Http\\Controller"
    assert naming.detect_naming_convention("App\\Http") == "Namespace\\Case"
    assert naming.convert_naming_convention("helloWorld", "snake_case") == "hello_world"
    assert naming.convert_naming_convention("hello_world", "Kebab-Case") == "hello-world"
    with pytest.raises(TransformationError) as exc_info:
        naming.convert_naming_convention("x", "sponge case")
    assert exc_info.value.code is ErrorCode.INVALID_OPTIONS


def test_utf8_byte_view() -> None:
    assert encoding.utf8_encode("é") == "Ã©"
    assert encoding.utf8_decode("Ã©") == "é"
    with pytest.raises(TransformationError):
        encoding.utf8_decode("Ã")


def test_ulid_and_checksum() -> None:
    ulid = crypto.generate_ulid()

    assert len(ulid) == 26
    assert set(ulid) <= set("0123456789ABCDEFGHJKMNPQRSTVWXYZ")
    assert crypto.crc32_checksum("hello") == "3610A686"


def test_sql_html_and_javascript_formatters() -> None:
    formatted = formatters.format_sql("select id, name from users where id = 1 and active = 1")

    assert formatted == "SELECT id,\n  name\nFROM users\nWHERE id = 1\n  AND active = 1"
    assert formatters.minify_sql("SELECT a ,  b\n  FROM t") == "SELECT a,b FROM t"
    assert formatters.minify_html("<div>\n  <!-- note -->\n  <p>Hi</p>\n</div>") == (
        "<div><p>Hi</p></div>"
    )
    lines = formatters.format_html("<div><p>Hi</p></div>").splitlines()
    assert [line.strip() for line in lines] == ["<div>", "<p>", "Hi", "</p>", "</div>"]
    script = "function add(a, b) {\n  // sum\n  return a + b;\n}\n/* done */"
    assert formatters.minify_javascript(script) == "function add(a,b){return a + b}"


def test_xml_json_conversion() -> None:
    xml = '<note id="7"><to>Ada</to><tags>a</tags><tags>b</tags></note>'

    assert json.loads(converters.xml_to_json(xml)) == {
        "note": {"@id": "7", "to": "Ada", "tags": ["a", "b"]}
    }
    assert converters.json_to_xml('{"note": {"@id": "7", "to": "Ada", "tags": ["a", "b"]}}') == xml
    assert converters.json_to_xml("[1, 2]", root_tag="list") == "<list><item>1</item><item>2</item></list>"
    with pytest.raises(TransformationError) as exc_info:
        converters.xml_to_json("<open>")
    assert exc_info.value.code is ErrorCode.INVALID_XML


def test_html_to_markdown() -> None:
    html = (
        '<h1>Title</h1><p>Some <strong>bold</strong> and <a href="https://x.io">link</a></p>'
        "<ul><li>one</li><li>two</li></ul><script>alert(1)</script>"
    )

    assert converters.html_to_markdown(html) == (
        "# Title\n\nSome **bold** and [link](https://x.io)\n\n* one\n* two"
    )


def test_color_value_helpers() -> None:
    assert colors.decimal_to_hex("16734003") == "#ff5733"
    assert colors.hex_to_decimal("#ff5733") == "16734003"
    assert colors.hex_to_css_variable("FF5733", "brand") == "--brand: #ff5733;"
    with pytest.raises(TransformationError):
        colors.decimal_to_hex("16777216")


def test_fixture_generators() -> None:
    card = generators.generate_test_credit_card("amex")
    body, check = card[:-1], int(card[-1])

    assert len(card) == 15 and card[:2] in ("34", "37")
    assert generators.luhn_check_digit(body) == check
    assert generators.luhn_check_digit("7992739871") == 3
    assert generators.generate_random_email("test.dev").endswith("@test.dev")
    assert generators.generate_random_phone().startswith("(")
    assert generators.generate_random_phone("international").startswith("+")
    picked = generators.generate_random_date("2021-01-01", "2021-01-02")
    assert picked.startswith(("2021-01-01", "2021-01-02"))
    with pytest.raises(TransformationError):
        generators.generate_random_date("2021-01-02", "2021-01-01")
    with pytest.raises(TransformationError):
        generators.generate_test_credit_card("diners")


def test_extra_ciphers() -> None:
    assert ciphers.to_pig_latin("hello apple string") == "ellohay appleway ingstray"
    secret = ciphers.xor_cipher("attack", "key")
    assert secret != "attack"
    assert ciphers.xor_cipher(secret, "key") == "attack"
    assert ciphers.substitution_cipher("Hello", "QWERTYUIOPASDFGHJKLZXCVBNM") == "Itssg"
    with pytest.raises(TransformationError) as exc_info:
        ciphers.substitution_cipher("Hello", "ABC")
    assert exc_info.value.code is ErrorCode.INVALID_KEY
