"""Classic ciphers and playful text encodings."""

from __future__ import annotations

import re
import string

from txtx.errors import ErrorCode, TransformationError

_MORSE = {
    "A": ".-", "B": "-...", "C": "-.-.", "D": "-..", "E": ".", "F": "..-.",
    "G": "--.", "H": "....", "I": "..", "J": ".---", "K": "-.-", "L": ".-..",
    "M": "--", "N": "-.", "O": "---", "P": ".--.", "Q": "--.-", "R": ".-.",
    "S": "...", "T": "-", "U": "..-", "V": "...-", "W": ".--", "X": "-..-",
    "Y": "-.--", "Z": "--..", "0": "-----", "1": ".----", "2": "..---",
    "3": "...--", "4": "....-", "5": ".....", "6": "-....", "7": "--...",
    "8": "---..", "9": "----.", ".": ".-.-.-", ",": "--..--", "?": "..--..",
    "!": "-.-.--", "/": "-..-.", "@": ".--.-.", "'": ".----.", "-": "-....-",
}
_MORSE_REVERSE = {code: char for char, code in _MORSE.items()}

_NATO = {
    "A": "Alfa", "B": "Bravo", "C": "Charlie", "D": "Delta", "E": "Echo",
    "F": "Foxtrot", "G": "Golf", "H": "Hotel", "I": "India", "J": "Juliett",
    "K": "Kilo", "L": "Lima", "M": "Mike", "N": "November", "O": "Oscar",
    "P": "Papa", "Q": "Quebec", "R": "Romeo", "S": "Sierra", "T": "Tango",
    "U": "Uniform", "V": "Victor", "W": "Whiskey", "X": "X-ray", "Y": "Yankee",
    "Z": "Zulu", "0": "Zero", "1": "One", "2": "Two", "3": "Three", "4": "Four",
    "5": "Five", "6": "Six", "7": "Seven", "8": "Eight", "9": "Nine",
}


def _shift_letter(char: str, shift: int) -> str:
    if char in string.ascii_lowercase:
        return chr((ord(char) - ord("a") + shift) % 26 + ord("a"))
    if char in string.ascii_uppercase:
        return chr((ord(char) - ord("A") + shift) % 26 + ord("A"))
    return char


def caesar_encode(text: str, shift: int = 3) -> str:
    return "".join(_shift_letter(char, shift) for char in text)


def caesar_decode(text: str, shift: int = 3) -> str:
    return caesar_encode(text, -shift)


def rot13(text: str) -> str:
    return caesar_encode(text, 13)


def rot47(text: str) -> str:
    return "".join(
        chr(33 + (ord(char) - 33 + 47) % 94) if 33 <= ord(char) <= 126 else char
        for char in text
    )


def atbash(text: str) -> str:
    table = str.maketrans(
        string.ascii_lowercase + string.ascii_uppercase,
        string.ascii_lowercase[::-1] + string.ascii_uppercase[::-1],
    )
    return text.translate(table)


def _vigenere(text: str, key: str, direction: int) -> str:
    shifts = [ord(char) - ord("a") for char in key.lower() if char in string.ascii_lowercase]
    if not shifts:
        raise TransformationError("Invalid or missing key", ErrorCode.INVALID_KEY)
    result: list[str] = []
    position = 0
    for char in text:
        if char.isascii() and char.isalpha():
            result.append(_shift_letter(char, direction * shifts[position % len(shifts)]))
            position += 1
        else:
            result.append(char)
    return "".join(result)


def vigenere_encode(text: str, key: str) -> str:
    return _vigenere(text, key, 1)


def vigenere_decode(text: str, key: str) -> str:
    return _vigenere(text, key, -1)


def text_to_morse(text: str) -> str:
    words = text.upper().split()
    return " / ".join(
        " ".join(_MORSE[char] for char in word if char in _MORSE) for word in words
    )


def morse_to_text(text: str) -> str:
    words = text.strip().split("/")
    return " ".join(
        "".join(_MORSE_REVERSE.get(code, "?") for code in word.split()) for word in words
    )


def text_to_nato(text: str) -> str:
    return " ".join(_NATO.get(char, char) for char in text.upper() if not char.isspace())


def reverse_string(text: str) -> str:
    return text[::-1]


def reverse_words(text: str) -> str:
    return " ".join(word[::-1] for word in text.split(" "))


_PIG_LATIN_WORD = re.compile(r"\b([bcdfghjklmnpqrstvwxyz]*)(\w+)", re.IGNORECASE)


def to_pig_latin(text: str) -> str:
    def _word(match: re.Match[str]) -> str:
        consonants, rest = match.groups()
        if not consonants:
            return rest + "way"
        return rest + consonants.lower() + "ay"

    return _PIG_LATIN_WORD.sub(_word, text)


def xor_cipher(text: str, key: str) -> str:
    """XOR each character with the repeating key; applying it twice restores the text."""
    if not key:
        raise TransformationError("Key required for XOR cipher", ErrorCode.INVALID_KEY)
    try:
        return "".join(
            chr(ord(char) ^ ord(key[index % len(key)])) for index, char in enumerate(text)
        )
    except ValueError as exc:
        raise TransformationError(
            "Character out of range after XOR", ErrorCode.INVALID_INPUT
        ) from exc


def substitution_cipher(text: str, alphabet: str) -> str:
    if len(alphabet) != 26 or not alphabet.isalpha():
        raise TransformationError("Alphabet must be exactly 26 letters", ErrorCode.INVALID_KEY)
    upper = alphabet.upper()
    table = str.maketrans(
        string.ascii_uppercase + string.ascii_lowercase, upper + upper.lower()
    )
    return text.translate(table)
