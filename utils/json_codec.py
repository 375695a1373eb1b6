"""
Hand-rolled JSON encoding and decoding for the Gemini generateContent payload.
The request body is a fixed template and only the first "text" field of the reply is read,
so no general JSON parser is involved.
"""
import re
from string import Template

from models.chat_models import GenerationSettings


class ResponseFormatError(ValueError):
    """Raised when a response body has no extractable text field."""


TEXT_MARKER = '"text":'

# Order matters: backslash first so later substitutions are not escaped twice.
_ESCAPES = (
    ("\\", "\\\\"),
    ('"', '\\"'),
    ("\n", "\\n"),
    ("\r", "\\r"),
    ("\t", "\\t"),
)

_UNSAFE_CHARS = re.compile(r'[\x00-\x1f\ud800-\udfff]')

_ESCAPE_SEQUENCE = re.compile(
    r'\\u([dD][89abAB][0-9a-fA-F]{2})\\u([dD][c-fC-F][0-9a-fA-F]{2})'
    r'|\\u([0-9a-fA-F]{4})'
    r'|\\(.)',
    re.DOTALL
)

_SIMPLE_UNESCAPES = {
    "n": "\n",
    "r": "\r",
    "t": "\t",
    '"': '"',
    "\\": "\\",
    "/": "/",
    "b": "\b",
    "f": "\f",
}

REQUEST_TEMPLATE = Template("""{
    "contents": [{
        "parts": [{
            "text": "$text"
        }]
    }],
    "generationConfig": {
        "temperature": $temperature,
        "topK": $top_k,
        "topP": $top_p,
        "maxOutputTokens": $max_output_tokens
    },
    "safetySettings": [
$safety_settings
    ]
}""")

SAFETY_ENTRY_TEMPLATE = Template('        {"category": "$category", "threshold": "$threshold"}')


def escape_json_string(value: str) -> str:
    """Escape a string for use inside a JSON string literal."""
    if not value:
        return ""

    for raw, escaped in _ESCAPES:
        value = value.replace(raw, escaped)

    # Remaining control characters are invalid inside JSON strings and lone
    # surrogates cannot be encoded as UTF-8
    return _UNSAFE_CHARS.sub(lambda m: f"\\u{ord(m.group(0)):04x}", value)


def _replace_escape(match: re.Match) -> str:
    high, low, code, char = match.groups()
    if high:
        return chr(0x10000 + ((int(high, 16) - 0xD800) << 10) + (int(low, 16) - 0xDC00))
    if code:
        return chr(int(code, 16))
    return _SIMPLE_UNESCAPES.get(char, "\\" + char)


def unescape_json_string(value: str) -> str:
    """
    Reverse escape_json_string.

    Sequences are decoded in a single left-to-right pass, so an escaped backslash
    followed by "n" stays a backslash and a letter instead of becoming a newline.
    """
    if not value or "\\" not in value:
        return value
    return _ESCAPE_SEQUENCE.sub(_replace_escape, value)


def build_request_body(text: str, generation: GenerationSettings) -> str:
    """Render the generateContent request body for a single text part."""
    safety_settings = ",\n".join(
        SAFETY_ENTRY_TEMPLATE.substitute(category=s.category, threshold=s.threshold)
        for s in generation.safety_settings
    )

    return REQUEST_TEMPLATE.substitute(
        text=escape_json_string(text),
        temperature=generation.temperature,
        top_k=generation.top_k,
        top_p=generation.top_p,
        max_output_tokens=generation.max_output_tokens,
        safety_settings=safety_settings,
    )


def find_closing_quote(body: str, start: int) -> int:
    """
    Find the quote that closes a JSON string whose opening quote is at `start`.

    A quote preceded by an odd run of backslashes is data, not a terminator.

    Returns:
        Index of the closing quote, or -1 if the body ends first
    """
    backslashes = 0
    index = start + 1

    while index < len(body):
        char = body[index]
        if char == "\\":
            backslashes += 1
        elif char == '"' and backslashes % 2 == 0:
            return index
        else:
            backslashes = 0
        index += 1

    return -1


def extract_text_field(body: str) -> str:
    """
    Pull the first "text" value out of a Gemini response body.

    Raises:
        ResponseFormatError: if the marker or either quote is missing
    """
    marker_index = body.find(TEXT_MARKER)
    if marker_index == -1:
        raise ResponseFormatError("response has no text field")

    open_quote = body.find('"', marker_index + len(TEXT_MARKER))
    if open_quote == -1:
        raise ResponseFormatError("text field has no opening quote")

    close_quote = find_closing_quote(body, open_quote)
    if close_quote == -1:
        raise ResponseFormatError("text field is not terminated")

    return unescape_json_string(body[open_quote + 1:close_quote])
